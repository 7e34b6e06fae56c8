"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.bookshelf.entities.core._base import Entity


class Book(Entity):
    """Book entity representing a book in the catalogue.

    This is the domain model returned by the repository and serialized by
    the API. The identifier and timestamps are assigned by the store.
    """

    title: str = Field(description="Title")
    author: str = Field(description="Author")
    description: str = Field(description="Description")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.description == other.description
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.description,
        ))
