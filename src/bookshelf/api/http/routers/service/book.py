"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from src.bookshelf.api.http.deps import get_book_repository
from src.bookshelf.entities.service.book import (
    Book,
    BookCreateRequest,
    BookNotFoundError,
    BookStore,
    BookUpdateRequest,
)

router = APIRouter(prefix="/books", tags=["books"])


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreateRequest,
    repository: BookStore = Depends(get_book_repository),
) -> Book:
    """Create a new book."""
    created_book = repository.create(payload.to_entity())
    logger.bind(book_id=created_book.id).info("book.created")
    return created_book


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: int,
    repository: BookStore = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    book = repository.get(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: int,
    payload: BookUpdateRequest,
    repository: BookStore = Depends(get_book_repository),
) -> Book:
    """Replace the title, author and description of a book."""
    try:
        updated_book = repository.update(payload.to_entity(book_id))
    except BookNotFoundError as e:
        raise HTTPException(status_code=404, detail="Book not found") from e
    logger.bind(book_id=book_id).info("book.updated")
    return updated_book


@router.delete("/{book_id}")
def delete_book(
    book_id: int,
    repository: BookStore = Depends(get_book_repository),
) -> dict[str, str]:
    """Delete a book."""
    deleted = repository.delete(book_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Book not found")
    logger.bind(book_id=book_id).info("book.deleted")
    return {"message": "Book deleted successfully"}


@router.get("", response_model=list[Book])
def list_books(
    repository: BookStore = Depends(get_book_repository),
) -> list[Book]:
    """List all books, oldest first."""
    return repository.list_all()
