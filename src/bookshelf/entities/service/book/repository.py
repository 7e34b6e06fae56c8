"""Book data-access layer."""

from typing import Protocol

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.bookshelf.entities.core._base import utc_now

from .entity import Book
from .table import BookTable

# Integer primary keys are signed 64-bit in every supported database
BOOK_ID_RANGE = range(-(2**63), 2**63)


class BookNotFoundError(ValueError):
    """Raised when a book id has no matching row."""

    def __init__(self, book_id: int | None) -> None:
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


class BookStore(Protocol):
    """Operations the API needs from book persistence."""

    def create(self, book: Book) -> Book: ...

    def get(self, book_id: int) -> Book | None: ...

    def list_all(self) -> list[Book]: ...

    def update(self, book: Book) -> Book: ...

    def delete(self, book_id: int) -> bool: ...


class BookRepository:
    """SQLModel-backed book store. Every write is committed before returning."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception("Book transaction rolled back")
            raise

    def _get_row(self, book_id: int | None) -> BookTable | None:
        if book_id is None or book_id not in BOOK_ID_RANGE:
            return None
        return self._session.get(BookTable, book_id)

    def create(self, book: Book) -> Book:
        # The store owns ids; anything set on the entity is discarded
        row = BookTable.model_validate(book.model_dump(exclude={"id"}))
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def get(self, book_id: int) -> Book | None:
        row = self._get_row(book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Book]:
        """Return every book ordered by id."""
        statement = select(BookTable).order_by(BookTable.id)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def update(self, book: Book) -> Book:
        """Overwrite title, author and description of an existing book.

        Raises:
            BookNotFoundError: If no row has ``book.id``.
        """
        row = self._get_row(book.id)
        if row is None:
            raise BookNotFoundError(book.id)

        row.title = book.title
        row.author = book.author
        row.description = book.description
        row.updated_at = utc_now()

        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: int) -> bool:
        row = self._get_row(book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._commit()
        return True
