from bookquery.mcp.client import BookqueryClient


async def get_book(client: BookqueryClient, book_id: int) -> dict:
    return await client.get(f"/api/books/{book_id}")


async def books_by_color(client: BookqueryClient) -> dict:
    return await client.get("/api/books/by-color")


async def related_books(
    client: BookqueryClient,
    book_id: int,
    distinct: bool = False,
) -> list[str] | dict:
    params = {"distinct": "true"} if distinct else None
    return await client.get(f"/api/books/{book_id}/related", params=params)
