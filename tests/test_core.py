"""Tests for helpreg.lib.help_lib.core — the help content model."""

import pytest

from helpreg.lib.help_lib.core import (
    HelpContent,
    has_named_part,
    has_ordered_part,
    is_list_like,
    is_structured,
    is_text,
    make_content,
    to_content,
)


class TestShapePredicates:
    """Text vs structured, and the two parts of a structured node."""

    def test_string_is_text(self):
        assert is_text("hello")
        assert not is_structured("hello")

    def test_none_is_neither(self):
        assert not is_text(None)
        assert not is_structured(None)
        assert not has_ordered_part(None)

    def test_ordered_only_node(self):
        node = HelpContent(ordered=["a", "b"])
        assert has_ordered_part(node)
        assert not has_named_part(node)
        assert is_list_like(node)

    def test_mixed_node_is_not_list_like(self):
        node = HelpContent(ordered=["a"], named={"x": 1})
        assert has_ordered_part(node)
        assert has_named_part(node)
        assert not is_list_like(node)

    def test_empty_node_has_no_parts(self):
        node = HelpContent()
        assert node.is_empty()
        assert not has_ordered_part(node)
        assert not has_named_part(node)


class TestToContent:
    """Normalising user-supplied values."""

    def test_text_and_none_pass_through(self):
        assert to_content("doc") == "doc"
        assert to_content(None) is None

    def test_existing_node_is_kept(self):
        node = HelpContent(ordered=["x"])
        assert to_content(node) is node

    def test_list_becomes_ordered_part(self):
        assert to_content(["a", "b"]) == HelpContent(ordered=["a", "b"])

    def test_dict_becomes_named_part(self):
        content = to_content({"args": ["x", "y"], "returns": "int"})
        assert content.ordered == []
        assert content.named["returns"] == "int"
        assert content.named["args"] == HelpContent(ordered=["x", "y"])

    def test_contiguous_integer_keys_become_ordered(self):
        """Keys 1..n are positional; anything else is named."""
        content = to_content({1: "first", 2: "second", 4: "gap", "count": 3})
        assert content.ordered == ["first", "second"]
        assert content.named == {4: "gap", "count": 3}

    def test_integer_keys_not_starting_at_one_are_named(self):
        content = to_content({0: "zero", 2: "two"})
        assert content.ordered == []
        assert content.named == {0: "zero", 2: "two"}

    def test_nested_structures_recurse(self):
        content = to_content({"methods": {"spin": ["fast", "slow"]}})
        inner = content.named["methods"].named["spin"]
        assert inner == HelpContent(ordered=["fast", "slow"])

    def test_bare_scalar_becomes_one_entry_node(self):
        assert to_content(42) == HelpContent(ordered=[42])


class TestMakeContent:
    """Building content from positional and keyword parts."""

    def test_single_string_stays_text(self):
        assert make_content("just text") == "just text"

    def test_single_dict_is_normalised(self):
        assert make_content({"a": 1}) == HelpContent(named={"a": 1})

    def test_positional_and_keywords(self):
        content = make_content("summary", args=["a", "b"], count=3)
        assert content.ordered == ["summary"]
        assert content.named["args"] == HelpContent(ordered=["a", "b"])
        assert content.named["count"] == 3

    def test_several_positionals_are_ordered(self):
        assert make_content("a", "b") == HelpContent(ordered=["a", "b"])


class TestCopyAndEntries:
    """Deep copies and the ordered-first traversal."""

    def test_copy_is_independent(self):
        original = to_content({"args": ["x"]})
        clone = original.copy()
        clone.named["args"].ordered.append("y")
        assert original.named["args"].ordered == ["x"]

    def test_entries_visit_ordered_part_first(self):
        node = HelpContent(ordered=["a", "b"], named={"z": 1, "y": 2})
        keys = [k for k, _ in node.entries()]
        assert keys[:2] == [1, 2]
        assert set(keys[2:]) == {"z", "y"}
