from .client import (
    WikiAPIError,
    WikipediaAPI,
    get_api_url,
    get_article_url,
    origin,
    validate_request,
)
from .fetch_toc import fetch_toc

__all__ = [
    "fetch_toc",
    "get_api_url",
    "get_article_url",
    "origin",
    "validate_request",
    "WikiAPIError",
    "WikipediaAPI",
]
