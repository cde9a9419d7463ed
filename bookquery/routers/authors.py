import logging

from fastapi import APIRouter, Depends, HTTPException

from bookquery.library import get_library
from bookquery.schemas.author import Author, AuthorName, BookCount
from bookquery.services.loader import Library
from bookquery.services.queries import (
    EmptyCollectionError,
    ReferentialIntegrityError,
    book_counts_by_author,
    friendliest_author,
    get_author_by_name,
    most_prolific_author,
    titles_by_author_name,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("/book-counts", response_model=list[BookCount])
async def book_counts(library: Library = Depends(get_library)):
    return book_counts_by_author(library.authors)


@router.get("/most-prolific", response_model=AuthorName)
async def get_most_prolific_author(library: Library = Depends(get_library)):
    try:
        return AuthorName(name=most_prolific_author(library.authors))
    except EmptyCollectionError:
        raise HTTPException(status_code=404, detail="No authors loaded")


@router.get("/friendliest", response_model=AuthorName)
async def get_friendliest_author(library: Library = Depends(get_library)):
    try:
        return AuthorName(name=friendliest_author(library.authors))
    except EmptyCollectionError:
        raise HTTPException(status_code=404, detail="No authors loaded")


@router.get("/by-name/{name}", response_model=Author)
async def get_author(name: str, library: Library = Depends(get_library)):
    author = get_author_by_name(name, library.authors)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.get("/by-name/{name}/titles", response_model=list[str])
async def get_author_titles(name: str, library: Library = Depends(get_library)):
    try:
        return titles_by_author_name(name, library.authors, library.books)
    except ReferentialIntegrityError as e:
        logger.error("Inconsistent dataset for author '%s': %s", name, e)
        raise HTTPException(status_code=500, detail=str(e))
