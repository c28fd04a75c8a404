"""
Incremental merging of help content.

Documentation is layered: each new docstring is merged into whatever a
subject already has instead of replacing it. The rules:

    existing None       ->  incoming becomes the record
    incoming text       ->  treated as a one-entry ordered part
    existing text       ->  promoted to a one-entry ordered part
    ordered entries     ->  appended in order
    named entries       ->  recurse (structured dest), append (scalar
                            dest, promoted to a list), or set (absent)

Ordered entries are always merged before named ones.
"""

from ..log_lib import get_output, trace
from .core import Content, HelpContent, to_content


def _promote(value) -> HelpContent:
    """Wrap a non-structured value as a one-entry ordered node."""
    if isinstance(value, HelpContent):
        return value
    return HelpContent(ordered=[value])


def _extend(dest: HelpContent, src: HelpContent) -> HelpContent:
    """Merge ``src`` into ``dest`` in place and return ``dest``."""
    dest.ordered.extend(src.ordered)

    for key, value in src.named.items():
        if key not in dest.named:
            dest.named[key] = value
            continue

        current = dest.named[key]
        if not isinstance(current, HelpContent):
            get_output().emit(3, "merge: promoting scalar '{key}' to a list",
                              channel='merge', key=key)
            current = _promote(current)
            dest.named[key] = current

        if isinstance(value, HelpContent):
            _extend(current, value)
        else:
            current.ordered.append(value)

    return dest


@trace
def merge(existing: Content, incoming) -> Content:
    """
    Merge ``incoming`` content into ``existing``.

    Args:
        existing: Current content (``None``, text, or ``HelpContent``)
        incoming: New content, normalised with ``to_content()``

    Returns:
        The merged content. When ``existing`` is structured it is mutated
        in place and returned; otherwise a new value is returned. The
        result becomes the authoritative record, so callers must not keep
        mutating ``incoming`` afterwards.
    """
    incoming = to_content(incoming)
    if existing is None:
        return incoming
    if incoming is None:
        return existing

    return _extend(_promote(existing), _promote(incoming))
