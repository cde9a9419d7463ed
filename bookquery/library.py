from functools import lru_cache

from bookquery import config
from bookquery.services.loader import Library, load_library


@lru_cache(maxsize=1)
def get_library() -> Library:
    """Load the configured dataset once per process."""
    return load_library(config.BOOKS_PATH, config.AUTHORS_PATH)
