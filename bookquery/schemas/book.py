from pydantic import BaseModel, ConfigDict


class AuthorRef(BaseModel):
    """An author as listed on a book. Matched to an Author by name."""

    model_config = ConfigDict(extra="allow")

    name: str


class Book(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    color: str | None = None
    authors: list[AuthorRef] = []
