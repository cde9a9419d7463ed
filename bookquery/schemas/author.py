from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    books: list[int] = []


class BookCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    author: str
    book_count: int = Field(alias="bookCount")


class AuthorName(BaseModel):
    name: str
