"""Shared pytest fixtures for database and API tests."""

from .core import *  # noqa: F401,F403
