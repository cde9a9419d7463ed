"""Lookup and aggregation queries over in-memory book and author collections."""

import logging
from collections.abc import Sequence

from bookquery.schemas.author import Author, BookCount
from bookquery.schemas.book import Book

logger = logging.getLogger(__name__)


class BookNotFoundError(LookupError):
    def __init__(self, book_id: int) -> None:
        super().__init__(f"No book with id {book_id}")
        self.book_id = book_id


class ReferentialIntegrityError(LookupError):
    """An author lists a book id that is not in the book collection."""

    def __init__(self, author: str, book_id: int) -> None:
        super().__init__(f"Author '{author}' references unknown book id {book_id}")
        self.author = author
        self.book_id = book_id


class EmptyCollectionError(ValueError):
    pass


def get_book_by_id(book_id: int, books: Sequence[Book]) -> Book | None:
    for book in books:
        if book.id == book_id:
            return book
    return None


def get_author_by_name(name: str, authors: Sequence[Author]) -> Author | None:
    """Case-insensitive match on author name. First match wins."""
    wanted = name.casefold()
    for author in authors:
        if author.name.casefold() == wanted:
            return author
    return None


def book_counts_by_author(authors: Sequence[Author]) -> list[BookCount]:
    return [BookCount(author=a.name, book_count=len(a.books)) for a in authors]


def books_by_color(books: Sequence[Book]) -> dict[str | None, list[str]]:
    """Group titles by color, keeping first-seen color order."""
    colors: dict[str | None, list[str]] = {}
    for book in books:
        colors.setdefault(book.color, []).append(book.title)
    return colors


def titles_by_author_name(
    name: str, authors: Sequence[Author], books: Sequence[Book]
) -> list[str]:
    """Titles of every book the named author wrote, in the author's order.

    Unknown authors yield an empty list. An author entry pointing at a book id
    missing from ``books`` raises ReferentialIntegrityError.
    """
    author = get_author_by_name(name, authors)
    if author is None:
        return []

    titles = []
    for book_id in author.books:
        book = get_book_by_id(book_id, books)
        if book is None:
            logger.debug("Dangling book id %s on author '%s'", book_id, author.name)
            raise ReferentialIntegrityError(author.name, book_id)
        titles.append(book.title)
    return titles


def most_prolific_author(authors: Sequence[Author]) -> str:
    """Name of the author with the most books. Ties go to the earlier author."""
    if not authors:
        raise EmptyCollectionError("Cannot pick an author from an empty collection")

    best = authors[0]
    for author in authors:
        if len(author.books) > len(best.books):
            best = author
    return best.name


def related_books(
    book_id: int,
    authors: Sequence[Author],
    books: Sequence[Book],
    distinct: bool = False,
) -> list[str]:
    """All titles by every author of the given book, author by author.

    A title shared by several co-authors appears once per co-author unless
    distinct=True, which keeps only the first occurrence of each title.
    """
    book = get_book_by_id(book_id, books)
    if book is None:
        raise BookNotFoundError(book_id)

    titles: list[str] = []
    for ref in book.authors:
        titles.extend(titles_by_author_name(ref.name, authors, books))

    if distinct:
        return list(dict.fromkeys(titles))
    return titles


def friendliest_author(authors: Sequence[Author]) -> str:
    """Meant to name the author with the most co-authored books.

    Kept as an alias of most_prolific_author: it counts every book an author
    wrote, solo or shared. Existing callers depend on that result.
    """
    return most_prolific_author(authors)
