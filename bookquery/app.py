from fastapi import FastAPI

from bookquery.routers import authors, books


def create_app() -> FastAPI:
    app = FastAPI(title="Bookquery", version="0.1.0")
    app.include_router(books.router)
    app.include_router(authors.router)
    return app


app = create_app()
