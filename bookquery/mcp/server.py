from fastmcp import FastMCP

from bookquery.mcp.client import BookqueryClient
from bookquery.mcp.tools.books import (
    books_by_color as _books_by_color,
    get_book as _get_book,
    related_books as _related_books,
)
from bookquery.mcp.tools.authors import (
    book_counts as _book_counts,
    friendliest_author as _friendliest_author,
    get_author as _get_author,
    most_prolific_author as _most_prolific_author,
    titles_by_author as _titles_by_author,
)


def create_mcp_server(client: BookqueryClient) -> FastMCP:
    mcp = FastMCP(
        name="bookquery",
        instructions=(
            "Bookquery answers questions about a fixed catalog of books and "
            "authors. Books are identified by numeric id, authors by name "
            "(case-insensitive). The catalog is read-only."
        ),
    )

    @mcp.tool()
    async def get_book(book_id: int) -> dict:
        """Get a book's title, color and authors by its id."""
        return await _get_book(client, book_id=book_id)

    @mcp.tool()
    async def books_by_color() -> dict:
        """Group every book title by its color label."""
        return await _books_by_color(client)

    @mcp.tool()
    async def related_books(book_id: int, distinct: bool = False) -> list[str] | dict:
        """List every title written by any author of the given book, the book
        itself included. Titles shared by co-authors repeat once per author
        unless distinct is true."""
        return await _related_books(client, book_id=book_id, distinct=distinct)

    @mcp.tool()
    async def get_author(name: str) -> dict:
        """Look up an author by name (case-insensitive) with their book ids."""
        return await _get_author(client, name=name)

    @mcp.tool()
    async def titles_by_author(name: str) -> list[str] | dict:
        """List the titles of all books by the named author. Unknown authors
        give an empty list."""
        return await _titles_by_author(client, name=name)

    @mcp.tool()
    async def book_counts() -> list[dict]:
        """Count the books of every author, in catalog order."""
        return await _book_counts(client)

    @mcp.tool()
    async def most_prolific_author() -> dict:
        """Name the author with the most books."""
        return await _most_prolific_author(client)

    @mcp.tool()
    async def friendliest_author() -> dict:
        """Name the friendliest author. Currently ranked by total books, the
        same as most_prolific_author."""
        return await _friendliest_author(client)

    return mcp
