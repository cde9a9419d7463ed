import pytest
from httpx import ASGITransport, AsyncClient

from bookquery.app import create_app
from bookquery.library import get_library
from bookquery.schemas.author import Author
from bookquery.schemas.book import Book
from bookquery.services.loader import Library

BOOKS_DATA = [
    {"id": 37, "title": "The Shining Girls", "color": "yellow", "authors": [{"name": "Lauren Beukes", "nationality": "South Africa"}]},
    {"id": 38, "title": "Zoo City", "color": "green", "authors": [{"name": "Lauren Beukes", "nationality": "South Africa"}]},
    {"id": 46, "title": "Good Omens", "color": "black", "authors": [{"name": "Terry Pratchett"}, {"name": "Neil Gaiman"}]},
    {"id": 47, "title": "Neverwhere", "color": "blue", "authors": [{"name": "Neil Gaiman"}]},
    {"id": 48, "title": "Coraline", "color": "black", "authors": [{"name": "Neil Gaiman"}]},
    {"id": 49, "title": "The Color of Magic", "color": "green", "authors": [{"name": "Terry Pratchett"}]},
    {"id": 50, "title": "The Hogfather", "color": "white", "authors": [{"name": "Terry Pratchett"}]},
    {"id": 51, "title": "Wee Free Men", "color": "blue", "authors": [{"name": "Terry Pratchett"}]},
]

AUTHORS_DATA = [
    {"name": "Lauren Beukes", "nationality": "South Africa", "books": [37, 38]},
    {"name": "Terry Pratchett", "nationality": "UK", "books": [46, 49, 50, 51]},
    {"name": "Neil Gaiman", "nationality": "UK", "books": [46, 47, 48]},
    {"name": "Harper Quill", "nationality": "Canada", "books": []},
]


@pytest.fixture
def books():
    return [Book.model_validate(b) for b in BOOKS_DATA]


@pytest.fixture
def authors():
    return [Author.model_validate(a) for a in AUTHORS_DATA]


@pytest.fixture
def library(books, authors):
    return Library(books=books, authors=authors)


@pytest.fixture
async def client(library):
    app = create_app()
    app.dependency_overrides[get_library] = lambda: library
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
