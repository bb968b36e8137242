"""One fetch-and-render cycle: query + language to a standalone HTML page."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shared.toc_tree import TOCRoot, build_toc_tree, parse_toc_payload
from shared.wiki_api import fetch_toc, get_article_url, validate_request

from .config import OutlineConfig
from .render import (
    mount,
    new_result_container,
    render_error,
    render_loading,
    render_page,
    render_toc_list,
    text_direction,
)

logger = logging.getLogger(__name__)


@dataclass
class OutlineResult:
    """Outcome of generate_outline(); ``html`` is always a complete page."""

    html: str
    direction: str = "ltr"
    article_url: str | None = None
    root: TOCRoot | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def generate_outline(
    query: str,
    language: str,
    config: OutlineConfig | None = None,
) -> OutlineResult:
    """Fetch the TOC of *query* on the *language* Wikipedia and render it.

    Never raises: invalid input, API errors and markup errors are logged
    and rendered into the page as an error block instead of the outline.
    """
    config = config or OutlineConfig()
    container = new_result_container()
    direction = "ltr"
    article_url = None
    root = None
    error = None

    try:
        validate_request(language, query)
        mount(container, render_loading())

        toc = fetch_toc(language, query, config.api)
        entries, meta = parse_toc_payload(toc)
        root = build_toc_tree(entries, meta)

        article_url = get_article_url(language, query, config.api)
        direction = text_direction(language, config.rtl_languages)
        mount(container, render_toc_list(root, article_url))
    except Exception as exc:
        logger.error(
            "Could not render TOC for %r (%s): %s", query, language, exc,
            exc_info=True,
        )
        error = exc
        root = None
        mount(container, render_error(exc, show_stack=config.show_stack))

    title = f"{config.page_title}: {query}" if query else config.page_title
    return OutlineResult(
        html=render_page(container, direction=direction, title=title),
        direction=direction,
        article_url=article_url,
        root=root,
        error=error,
    )
