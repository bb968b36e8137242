"""Tests for build_toc_tree() — pure function, no mocks needed."""

from shared.toc_tree.build_tree import build_toc_tree
from shared.toc_tree.types import TOCEntry, TOCRoot


def _entries(*levels):
    return [
        TOCEntry(level=level, anchor=f"a{i}", html=f"Heading {i}")
        for i, level in enumerate(levels)
    ]


def _shape(node):
    """Nested (anchor, [children]) tuples for compact assertions."""
    return [(child.anchor, _shape(child)) for child in node.children]


class TestEmptyAndFlat:
    """Empty input yields a bare root; constant levels yield siblings."""

    def test_empty_entries(self):
        root = build_toc_tree([], {"title": "Contents"})
        assert isinstance(root, TOCRoot)
        assert root.children == []
        assert root.title == "Contents"

    def test_constant_level_all_siblings(self):
        root = build_toc_tree(_entries(1, 1, 1))
        assert _shape(root) == [("a0", []), ("a1", []), ("a2", [])]

    def test_decreasing_levels_from_start_are_siblings(self):
        root = build_toc_tree(_entries(3, 2, 1))
        assert _shape(root) == [("a0", []), ("a1", []), ("a2", [])]

    def test_levels_need_not_start_at_one(self):
        root = build_toc_tree(_entries(2, 3, 2))
        assert _shape(root) == [("a0", [("a1", [])]), ("a2", [])]


class TestNesting:
    """Increasing levels descend, lower levels return to the right ancestor."""

    def test_strictly_increasing_is_single_chain(self):
        root = build_toc_tree(_entries(1, 2, 3, 4))
        assert _shape(root) == [("a0", [("a1", [("a2", [("a3", [])])])])]

    def test_alternating_one_two(self):
        root = build_toc_tree(_entries(1, 2, 1, 2))
        assert _shape(root) == [("a0", [("a1", [])]), ("a2", [("a3", [])])]

    def test_multi_level_jump_attaches_to_closest_lower_ancestor(self):
        # Level 2 after 1 -> 3 belongs under the level-1 entry, next to the
        # level-3 entry, not back at the top level.
        root = build_toc_tree(_entries(1, 3, 2))
        assert _shape(root) == [("a0", [("a1", []), ("a2", [])])]

    def test_ascend_several_levels_at_once(self):
        root = build_toc_tree(_entries(1, 2, 3, 4, 2, 1))
        assert _shape(root) == [
            ("a0", [
                ("a1", [("a2", [("a3", [])])]),
                ("a4", []),
            ]),
            ("a5", []),
        ]

    def test_non_contiguous_levels(self):
        root = build_toc_tree(_entries(1, 5, 5, 9, 1))
        assert _shape(root) == [
            ("a0", [("a1", []), ("a2", [("a3", [])])]),
            ("a4", []),
        ]


class TestPreservation:
    """Every entry appears exactly once, in input order, with its fields."""

    def test_node_count_matches_entry_count(self):
        levels = (1, 2, 3, 2, 4, 1, 3, 3, 2, 1)
        root = build_toc_tree(_entries(*levels))
        assert root.node_count() == len(levels)

    def test_walk_order_is_input_order(self):
        entries = _entries(1, 3, 2, 2, 1, 4)
        root = build_toc_tree(entries)
        assert [node.anchor for node in root.walk()] == [e.anchor for e in entries]

    def test_children_have_greater_level_than_parent(self):
        root = build_toc_tree(_entries(1, 3, 2, 4, 1, 2, 6, 3))
        for node in root.walk():
            for child in node.children:
                assert child.level > node.level

    def test_fields_copied_from_entry(self):
        entry = TOCEntry(level=1, anchor="Intro", html="<b>Intro</b>", number="1", section=1)
        node = build_toc_tree([entry]).children[0]
        assert (node.level, node.anchor, node.html, node.number, node.section) == (
            1, "Intro", "<b>Intro</b>", "1", 1,
        )
        assert node.children == []

    def test_root_meta_is_copied(self):
        meta = {"title": "Contents"}
        root = build_toc_tree([], meta)
        meta["title"] = "Changed"
        assert root.meta == {"title": "Contents"}

    def test_accepts_generator(self):
        root = build_toc_tree(e for e in _entries(1, 2))
        assert _shape(root) == [("a0", [("a1", [])])]
