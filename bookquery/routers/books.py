import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from bookquery.library import get_library
from bookquery.schemas.book import Book
from bookquery.services.loader import Library
from bookquery.services.queries import (
    BookNotFoundError,
    ReferentialIntegrityError,
    books_by_color,
    get_book_by_id,
    related_books,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("/by-color")
async def list_books_by_color(library: Library = Depends(get_library)):
    """Titles grouped by color. Books without a color are listed under the
    JSON key "null", which a literal "null" color would share."""
    return books_by_color(library.books)


@router.get("/{book_id}", response_model=Book)
async def get_book(book_id: int, library: Library = Depends(get_library)):
    book = get_book_by_id(book_id, library.books)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/{book_id}/related", response_model=list[str])
async def get_related_books(
    book_id: int,
    distinct: bool = Query(False, description="Drop titles repeated across co-authors"),
    library: Library = Depends(get_library),
):
    try:
        return related_books(book_id, library.authors, library.books, distinct=distinct)
    except BookNotFoundError:
        raise HTTPException(status_code=404, detail="Book not found")
    except ReferentialIntegrityError as e:
        logger.error("Inconsistent dataset while relating book %s: %s", book_id, e)
        raise HTTPException(status_code=500, detail=str(e))
