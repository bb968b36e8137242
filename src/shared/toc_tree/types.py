"""Shared dataclasses for TOC trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class TOCEntry:
    """One flat heading record as returned by the metadata API."""

    level: int
    anchor: str = ""
    html: str = ""  # heading markup fragment, trusted as sanitized upstream
    number: str | None = None  # e.g. "2.1"
    section: int | None = None

    @classmethod
    def from_dict(cls, raw: dict) -> "TOCEntry":
        """Create a TOCEntry from an API entry dict.

        Raises ``ValueError`` when ``level`` is missing or not an integer.
        """
        level = raw.get("level")
        if isinstance(level, bool) or not isinstance(level, int):
            raise ValueError(f"TOC entry has no integer level: {raw!r}")
        return cls(
            level=level,
            anchor=raw.get("anchor") or "",
            html=raw.get("html") or "",
            number=raw.get("number"),
            section=raw.get("section"),
        )


@dataclass
class TOCNode:
    """A TOCEntry placed in the tree, with its nested entries."""

    level: int
    anchor: str = ""
    html: str = ""
    number: str | None = None
    section: int | None = None
    children: list[TOCNode] = field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: TOCEntry) -> "TOCNode":
        return cls(
            level=entry.level,
            anchor=entry.anchor,
            html=entry.html,
            number=entry.number,
            section=entry.section,
        )

    def walk(self) -> Iterator[TOCNode]:
        """Yield every descendant in document order."""
        for child in self.children:
            yield child
            yield from child.walk()

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())


@dataclass
class TOCRoot:
    """Synthetic root of a TOC tree.

    Carries the document-level metadata (title, revision, ...) and the
    top-level entries. Not a displayable entry itself.
    """

    meta: dict = field(default_factory=dict)
    children: list[TOCNode] = field(default_factory=list)

    @property
    def title(self) -> str | None:
        return self.meta.get("title")

    def walk(self) -> Iterator[TOCNode]:
        for child in self.children:
            yield child
            yield from child.walk()

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())
