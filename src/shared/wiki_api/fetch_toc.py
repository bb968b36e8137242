"""Fetch an article's TOC from the Wikipedia page metadata endpoint."""

from __future__ import annotations

import logging

import requests

from .client import WikiAPIError, WikipediaAPI, get_api_url

logger = logging.getLogger(__name__)


def fetch_toc(language: str, query: str, api: WikipediaAPI | None = None) -> dict:
    """Download the metadata for *query* and return its ``toc`` object.

    The endpoint answers errors with a JSON body carrying a ``detail``
    message instead of ``toc``; that message becomes the ``WikiAPIError``.
    Transport failures and non-JSON bodies are wrapped in ``WikiAPIError``
    as well.
    """
    api = api or WikipediaAPI()
    url = get_api_url(language, query, api)
    logger.debug("Fetching TOC from %s", url)

    try:
        resp = requests.get(
            url,
            headers={"User-Agent": api.user_agent, "Accept": "application/json"},
            timeout=api.timeout,
        )
    except requests.Timeout as exc:
        raise WikiAPIError(
            f"Wikipedia API timed out after {api.timeout}s: {url}"
        ) from exc
    except requests.RequestException as exc:
        raise WikiAPIError(f"Wikipedia API not reachable: {exc}") from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise WikiAPIError(
            f"Wikipedia API returned a non-JSON response (HTTP {resp.status_code}): "
            f"{resp.text[:500]}",
            status_code=resp.status_code,
        ) from exc

    toc = payload.get("toc") if isinstance(payload, dict) else None
    if isinstance(toc, dict):
        return toc

    detail = payload.get("detail") if isinstance(payload, dict) else None
    raise WikiAPIError(
        detail or f"Wikipedia API returned no table of contents (HTTP {resp.status_code})",
        status_code=resp.status_code,
    )
