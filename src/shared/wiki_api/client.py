"""Wikipedia REST API configuration and URL helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WikipediaAPI:
    scheme: str = "https"
    domain: str = "wikipedia.org"
    timeout: int = 10                          # request timeout in seconds
    user_agent: str = "wikitoc/0.1 (table-of-contents viewer)"


class WikiAPIError(RuntimeError):
    """The metadata endpoint did not return a TOC.

    ``status_code`` is the HTTP status when a response was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def validate_request(language: str, query: str) -> None:
    """Reject a request before any fetch is made."""
    if not query:
        raise ValueError("Please input the search query")
    if not language:
        raise ValueError("Please select the language to search")


def origin(language: str, api: WikipediaAPI | None = None) -> str:
    api = api or WikipediaAPI()
    return f"{api.scheme}://{language}.{api.domain}"


def get_api_url(language: str, query: str, api: WikipediaAPI | None = None) -> str:
    return f"{origin(language, api)}/api/rest_v1/page/metadata/{query}"


def get_article_url(language: str, query: str, api: WikipediaAPI | None = None) -> str:
    return f"{origin(language, api)}/wiki/{query}"
