from .toc_tree import (
    TOCEntry,
    TOCNode,
    TOCRoot,
    build_toc_tree,
    parse_toc_payload,
)
from .wiki_api import (
    WikiAPIError,
    WikipediaAPI,
    fetch_toc,
    get_api_url,
    get_article_url,
    validate_request,
)

__all__ = [
    # TOC tree
    "TOCEntry",
    "TOCNode",
    "TOCRoot",
    "build_toc_tree",
    "parse_toc_payload",
    # Wikipedia API
    "WikiAPIError",
    "WikipediaAPI",
    "fetch_toc",
    "get_api_url",
    "get_article_url",
    "validate_request",
]
