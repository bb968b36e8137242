"""Outline pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass

from shared.wiki_api import WikipediaAPI

# Languages whose outline is laid out right-to-left
RTL_LANGUAGES = ("ar", "he")


@dataclass
class OutlineConfig:
    """Top-level outline pipeline configuration.

    Composes the Wikipedia API config with the page display settings.
    """

    api: WikipediaAPI | None = None
    rtl_languages: tuple[str, ...] = RTL_LANGUAGES
    show_stack: bool = False  # append the traceback to rendered errors
    page_title: str = "Wikipedia TOC"

    def __post_init__(self):
        if self.api is None:
            self.api = WikipediaAPI()
