"""Turn the flat, level-annotated TOC from the API into a nested tree."""

from collections.abc import Iterable

from .types import TOCEntry, TOCNode, TOCRoot


def parse_toc_payload(toc: dict) -> tuple[list[TOCEntry], dict]:
    """Split a raw ``toc`` object into its entries and its root metadata.

    Everything except ``entries`` (title, revision, tid, ...) is treated as
    metadata for the synthetic root.
    """
    raw_entries = toc.get("entries") or []
    entries = [TOCEntry.from_dict(raw) for raw in raw_entries]
    meta = {key: value for key, value in toc.items() if key != "entries"}
    return entries, meta


def build_toc_tree(
    entries: Iterable[TOCEntry],
    root_meta: dict | None = None,
) -> TOCRoot:
    """Nest *entries* under a synthetic root according to their ``level``.

    Only the relative order of levels matters: they need not start at 1 or
    be contiguous. An entry becomes a child of the closest preceding entry
    with a strictly lower level, or of the root when there is none, so
    multi-level jumps (1 -> 3 -> 2) attach to the right ancestor.

    Sibling order is input order and every entry appears exactly once.
    """
    root = TOCRoot(meta=dict(root_meta or {}))

    # (level, node) for the current ancestor chain; the root sits below it
    stack: list[tuple[int, TOCNode]] = []
    for entry in entries:
        while stack and stack[-1][0] >= entry.level:
            stack.pop()

        node = TOCNode.from_entry(entry)
        parent = stack[-1][1] if stack else root
        parent.children.append(node)
        stack.append((entry.level, node))

    return root
