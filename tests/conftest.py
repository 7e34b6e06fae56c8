"""Test configuration for the bookshelf service."""

import os
from pathlib import Path

# Must be set before the application modules load their configuration
os.environ["CONFIG_FILE"] = str(Path(__file__).resolve().parent.parent / "config.yaml")
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from tests.fixtures import *  # noqa: E402,F401,F403
