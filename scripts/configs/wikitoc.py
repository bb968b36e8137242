"""Outline pipeline configuration."""

from outline import OutlineConfig
from shared.wiki_api import WikipediaAPI

from .common import REQUEST_TIMEOUT, RTL_LANGUAGES

# --- Outline configuration (composable) ---
config = OutlineConfig(
    api=WikipediaAPI(
        timeout=REQUEST_TIMEOUT,
        # domain="wikipedia.org",  # point at a mirror for testing
    ),
    rtl_languages=RTL_LANGUAGES,
    show_stack=False,  # True to append tracebacks to error blocks
    page_title="Wikipedia TOC",
)
