"""Request bodies accepted by the book endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .entity import Book


class BookCreateRequest(BaseModel):
    """Body of ``POST /books``.

    Unknown keys, including a client-supplied ``id``, are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(description="Title")
    author: StrictStr = Field(description="Author")
    description: StrictStr = Field(description="Description")

    def to_entity(self) -> Book:
        return Book(
            title=self.title,
            author=self.author,
            description=self.description,
        )


class BookUpdateRequest(BaseModel):
    """Body of ``PUT /books/{id}``: the full set of mutable fields."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(description="New title")
    author: StrictStr = Field(description="New author")
    description: StrictStr = Field(description="New description")

    def to_entity(self, book_id: int) -> Book:
        return Book(
            id=book_id,
            title=self.title,
            author=self.author,
            description=self.description,
        )
