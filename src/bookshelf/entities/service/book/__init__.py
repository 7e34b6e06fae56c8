"""Entity package: Book."""

from .entity import Book
from .repository import BookNotFoundError, BookRepository, BookStore
from .schemas import BookCreateRequest, BookUpdateRequest
from .table import BookTable

__all__ = [
    "Book",
    "BookCreateRequest",
    "BookNotFoundError",
    "BookRepository",
    "BookStore",
    "BookTable",
    "BookUpdateRequest",
]
