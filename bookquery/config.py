import os
from pathlib import Path

BOOKS_PATH = os.environ.get("BOOKQUERY_BOOKS_PATH", str(Path.cwd() / "books.json"))
AUTHORS_PATH = os.environ.get("BOOKQUERY_AUTHORS_PATH", str(Path.cwd() / "authors.json"))

# Base URL for the MCP server's in-process API client
API_BASE_URL = os.environ.get("BOOKQUERY_API_BASE_URL", "http://localhost")
