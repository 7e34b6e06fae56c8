"""Database initialization script."""

from src.bookshelf.core.services import DbSessionService


def init_db() -> DbSessionService:
    """Create all database tables on the configured database."""
    db_session_service = DbSessionService()
    db_session_service.create_all()
    return db_session_service


if __name__ == "__main__":
    init_db()
