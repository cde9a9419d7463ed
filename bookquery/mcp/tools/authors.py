from urllib.parse import quote

from bookquery.mcp.client import BookqueryClient


def _author_path(name: str) -> str:
    return f"/api/authors/by-name/{quote(name, safe='')}"


async def get_author(client: BookqueryClient, name: str) -> dict:
    return await client.get(_author_path(name))


async def titles_by_author(client: BookqueryClient, name: str) -> list[str] | dict:
    return await client.get(f"{_author_path(name)}/titles")


async def book_counts(client: BookqueryClient) -> list[dict]:
    return await client.get("/api/authors/book-counts")


async def most_prolific_author(client: BookqueryClient) -> dict:
    return await client.get("/api/authors/most-prolific")


async def friendliest_author(client: BookqueryClient) -> dict:
    return await client.get("/api/authors/friendliest")
