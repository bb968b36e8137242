"""HTML rendering for TOC trees, status blocks and the result page.

Markup is built as BeautifulSoup trees so callers can inspect or mount it
before serializing.
"""

from __future__ import annotations

import traceback

from bs4 import BeautifulSoup, Tag

from shared.toc_tree import TOCNode, TOCRoot

from .config import RTL_LANGUAGES

RESULT_CONTAINER_ID = "wiki-result"

PAGE_STYLE = """
body { font-family: sans-serif; margin: 2em; }
ol { line-height: 1.5; }
.wiki-error { background: #fdd; color: #900; padding: 1em; white-space: pre-wrap; }
"""


def _new_soup() -> BeautifulSoup:
    return BeautifulSoup("", "html.parser")


def _parse_fragment(html: str) -> list:
    """Parse a markup fragment into a list of detachable nodes."""
    return list(BeautifulSoup(html or "", "html.parser").contents)


# ---------------------------------------------------------------------------
# TOC list
# ---------------------------------------------------------------------------


def render_toc_list(
    node: TOCRoot | TOCNode,
    article_url: str,
    soup: BeautifulSoup | None = None,
) -> Tag | None:
    """Render the children of *node* as nested ``<ol>`` lists.

    Returns None when *node* has no children, so a root without entries
    renders nothing. Each item links to ``{article_url}#{anchor}`` in a new
    browsing context without opener access.

    The entry ``html`` is inserted verbatim: heading fragments come from
    Wikipedia and are trusted to be sanitized there. Anything fed from a
    less trusted source must be cleaned before it reaches this function.
    """
    children = getattr(node, "children", None)
    if not children:
        return None
    if soup is None:
        soup = _new_soup()

    ol = soup.new_tag("ol")
    for child in children:
        li = soup.new_tag("li")
        link = soup.new_tag(
            "a",
            attrs={
                "href": f"{article_url}#{child.anchor or ''}",
                "target": "_blank",
                "rel": "noopener noreferrer",
            },
        )
        for fragment_node in _parse_fragment(child.html):
            link.append(fragment_node)
        li.append(link)

        nested = render_toc_list(child, article_url, soup)
        if nested is not None:
            li.append(nested)
        ol.append(li)
    return ol


# ---------------------------------------------------------------------------
# Status blocks
# ---------------------------------------------------------------------------


def render_loading() -> Tag:
    heading = _new_soup().new_tag("h3")
    heading.string = "Loading..."
    return heading


def render_error(error: BaseException, show_stack: bool = False) -> Tag:
    """Render *error* as a ``<pre class="wiki-error">`` block.

    With *show_stack* the formatted traceback follows the message.
    """
    text = str(error)
    if show_stack:
        stack = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        text = f"{text}\n{stack}"
    pre = _new_soup().new_tag("pre", attrs={"class": "wiki-error"})
    pre.string = text
    return pre


def text_direction(language: str, rtl_languages=RTL_LANGUAGES) -> str:
    return "rtl" if language in rtl_languages else "ltr"


# ---------------------------------------------------------------------------
# Result container and page
# ---------------------------------------------------------------------------


def new_result_container() -> Tag:
    return _new_soup().new_tag("div", attrs={"id": RESULT_CONTAINER_ID})


def mount(container: Tag, node: Tag | None) -> Tag:
    """Replace whatever *container* holds with *node*."""
    container.clear()
    if node is not None:
        container.append(node)
    return container


def render_page(
    container: Tag,
    direction: str = "ltr",
    title: str = "Wikipedia TOC",
) -> str:
    """Serialize *container* inside a standalone HTML document."""
    soup = BeautifulSoup(
        "<!DOCTYPE html>"
        '<html><head><meta charset="utf-8"/><title></title><style></style></head>'
        "<body></body></html>",
        "html.parser",
    )
    soup.title.string = title
    soup.style.string = PAGE_STYLE
    soup.body["style"] = f"direction: {direction}"
    soup.body.append(container)
    return str(soup)
