"""
Core help content model.

Help content is either plain text (a ``str``) or a structured
``HelpContent`` node holding an ordered part (anonymous entries) and a
named part (name -> entry). Both parts may be populated at once, and
entries in either part may themselves be structured, to any depth.
``None`` stands for "no content" and is never the same as an empty node.

User-supplied values are normalised once by ``to_content()`` so the
merge engine and formatters can dispatch on the node type instead of
re-inspecting raw lists and dicts on every call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class HelpContent:
    """
    A structured help node.

    ``ordered`` entries are always visited before ``named`` entries, both
    when formatting and when merging, so traversal order is stable no
    matter how the named entries were inserted.
    """
    ordered: List[Any] = field(default_factory=list)   # Anonymous entries, in order
    named: Dict[Any, Any] = field(default_factory=dict)  # Name -> entry

    def has_ordered_part(self) -> bool:
        return bool(self.ordered)

    def has_named_part(self) -> bool:
        return bool(self.named)

    def is_list_like(self) -> bool:
        """True when the node only has an ordered part."""
        return bool(self.ordered) and not self.named

    def is_empty(self) -> bool:
        return not self.ordered and not self.named

    def entries(self):
        """Yield ``(key, value)`` pairs, ordered part first.

        Ordered entries are keyed by their 1-based position.
        """
        for i, value in enumerate(self.ordered, 1):
            yield i, value
        for key, value in self.named.items():
            yield key, value

    def copy(self) -> 'HelpContent':
        """Copy this node and every nested node. Scalars are shared."""
        return HelpContent(
            ordered=[_copy_entry(v) for v in self.ordered],
            named={k: _copy_entry(v) for k, v in self.named.items()},
        )


Content = Optional[Union[str, HelpContent]]


def _copy_entry(value):
    if isinstance(value, HelpContent):
        return value.copy()
    return value


def is_text(content) -> bool:
    """Check whether content is plain text."""
    return isinstance(content, str)


def is_structured(content) -> bool:
    """Check whether content is a structured node."""
    return isinstance(content, HelpContent)


def has_ordered_part(content) -> bool:
    return is_structured(content) and content.has_ordered_part()


def has_named_part(content) -> bool:
    return is_structured(content) and content.has_named_part()


def is_list_like(content) -> bool:
    return is_structured(content) and content.is_list_like()


def _split_mapping(mapping) -> HelpContent:
    """Split a mapping into ordered and named parts.

    Integer keys 1..n that form a contiguous run make up the ordered
    part; every other key is named.
    """
    ordered = []
    i = 1
    while i in mapping:
        ordered.append(_to_entry(mapping[i]))
        i += 1
    named = {}
    for key, value in mapping.items():
        if isinstance(key, int) and 1 <= key < i:
            continue
        named[key] = _to_entry(value)
    return HelpContent(ordered=ordered, named=named)


def _to_entry(value):
    """Normalise a value nested inside structured content."""
    if isinstance(value, HelpContent):
        return value
    if isinstance(value, (list, tuple)):
        return HelpContent(ordered=[_to_entry(v) for v in value])
    if isinstance(value, dict):
        return _split_mapping(value)
    return value


def to_content(value) -> Content:
    """
    Normalise a user-supplied value into help content.

    Args:
        value: ``None``, a string, a ``HelpContent``, a list/tuple (the
            ordered part), a dict (split into ordered and named parts),
            or any other scalar

    Returns:
        ``None``, a string, or a ``HelpContent``. A bare non-string
        scalar becomes a one-entry ordered node so it is still content.
    """
    if value is None or isinstance(value, (str, HelpContent)):
        return value
    entry = _to_entry(value)
    if isinstance(entry, HelpContent):
        return entry
    return HelpContent(ordered=[entry])


def make_content(*ordered, **named) -> Content:
    """Build content from positional (ordered) and keyword (named) parts.

    A single positional argument with no keywords is normalised as-is,
    so ``make_content("text")`` stays plain text and
    ``make_content({"a": 1})`` is a named node.
    """
    if len(ordered) == 1 and not named:
        return to_content(ordered[0])
    return HelpContent(
        ordered=[_to_entry(v) for v in ordered],
        named={k: _to_entry(v) for k, v in named.items()},
    )
