from .build_tree import build_toc_tree, parse_toc_payload
from .types import TOCEntry, TOCNode, TOCRoot

__all__ = [
    "build_toc_tree",
    "parse_toc_payload",
    "TOCEntry",
    "TOCNode",
    "TOCRoot",
]
