"""Read book and author datasets from JSON files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import TypeAdapter

from bookquery.schemas.author import Author
from bookquery.schemas.book import Book

logger = logging.getLogger(__name__)

_books_adapter = TypeAdapter(list[Book])
_authors_adapter = TypeAdapter(list[Author])


@dataclass
class Library:
    books: list[Book] = field(default_factory=list)
    authors: list[Author] = field(default_factory=list)


def load_books(path: str | Path) -> list[Book]:
    """Parse a JSON array of books. Raises FileNotFoundError or ValidationError."""
    content = Path(path).read_text(encoding="utf-8")
    books = _books_adapter.validate_json(content)
    logger.info("Loaded %d books from %s", len(books), path)
    return books


def load_authors(path: str | Path) -> list[Author]:
    content = Path(path).read_text(encoding="utf-8")
    authors = _authors_adapter.validate_json(content)
    logger.info("Loaded %d authors from %s", len(authors), path)
    return authors


def load_library(books_path: str | Path, authors_path: str | Path) -> Library:
    return Library(books=load_books(books_path), authors=load_authors(authors_path))
