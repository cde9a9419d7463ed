import logging

from httpx import ASGITransport, AsyncClient

from bookquery import config
from bookquery.app import create_app
from bookquery.library import get_library
from bookquery.mcp.client import BookqueryClient
from bookquery.mcp.server import create_mcp_server


def main():
    logging.basicConfig(level=logging.INFO)
    # Fail on a missing or malformed dataset before serving any tool call
    get_library()

    app = create_app()
    transport = ASGITransport(app=app)
    http = AsyncClient(transport=transport, base_url=config.API_BASE_URL)
    client = BookqueryClient(http)
    mcp = create_mcp_server(client)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
