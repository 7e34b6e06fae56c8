"""Infrastructure services shared by the API and the command line."""

from .database.db_session import DbSessionService

__all__ = ["DbSessionService"]
