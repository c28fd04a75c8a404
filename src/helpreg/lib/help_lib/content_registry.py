"""
Registry that associates help content with live Python values.

The registry never keeps a subject alive. Weak-referenceable subjects
(functions, classes, modules, most instances) are tracked by identity
through ``weakref.ref`` and their entry is dropped when they are
collected. Immutable scalars that cannot be weakly referenced (strings,
numbers, None, and tuples or frozensets made only of those) reference
no other object and are keyed by type and value instead. Anything else
that cannot be weakly referenced is refused.
"""

import inspect
import threading
import weakref
from typing import Any, Dict, Optional, Tuple

from ..log_lib import get_output
from .core import Content, HelpContent, to_content
from .extensions import ExtensionChain
from .merge import merge


def _unwrap(subject):
    """Bound methods are created per access; key them by their function."""
    if inspect.ismethod(subject):
        return subject.__func__
    return subject


def _describe(subject) -> str:
    name = getattr(subject, '__qualname__', None) or getattr(subject, '__name__', None)
    kind = type(subject).__name__
    return f"{kind} {name}" if isinstance(name, str) else kind


# Immutable values that cannot reference other objects
_SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))


def _is_plain_value(subject) -> bool:
    """True for scalars, and tuples/frozensets made only of plain values."""
    if type(subject) in _SCALAR_TYPES:
        return True
    if type(subject) in (tuple, frozenset):
        return all(_is_plain_value(item) for item in subject)
    return False


class Registry:
    """
    Weak-keyed store of help content plus its extension chain.

    Usage::

        reg = Registry()
        reg.attach(func, "Does a thing.")
        reg.attach(func, {"args": ["x", "y"]})
        reg.lookup(func)   # HelpContent(ordered=['Does a thing.'], named={'args': ...})
    """

    def __init__(self, extensions: ExtensionChain = None):
        self.extensions = extensions if extensions is not None else ExtensionChain()
        # id(subject) -> (weakref to subject, content)
        self._by_identity: Dict[int, Tuple[weakref.ref, Content]] = {}
        # (type, value) -> content, for values that cannot be weakly referenced
        self._by_value: Dict[Tuple[type, Any], Content] = {}
        self._lock = threading.RLock()

    # -----------------------------------------------------------------
    # Key handling
    # -----------------------------------------------------------------
    @staticmethod
    def _value_key(subject) -> Optional[Tuple[type, Any]]:
        """Return a value key for scalar-only subjects, or None."""
        if not _is_plain_value(subject):
            return None
        return (type(subject), subject)

    def _on_collected(self, key: int, ref: weakref.ref) -> None:
        with self._lock:
            stored = self._by_identity.get(key)
            # The slot may already belong to a new object with a reused id
            if stored is not None and stored[0] is ref:
                del self._by_identity[key]

    def _make_ref(self, subject) -> Optional[weakref.ref]:
        key = id(subject)
        try:
            return weakref.ref(subject, lambda ref, key=key: self._on_collected(key, ref))
        except TypeError:
            return None

    # -----------------------------------------------------------------
    # Store operations
    # -----------------------------------------------------------------
    def set_content(self, subject, content) -> None:
        """
        Associate ``content`` with ``subject``, replacing any prior entry.

        Raises:
            TypeError: If the subject can neither be weakly referenced
                nor keyed by value (lists, dicts, or tuples holding objects)
        """
        subject = _unwrap(subject)
        content = to_content(content)
        with self._lock:
            ref = self._make_ref(subject)
            if ref is not None:
                self._by_identity[id(subject)] = (ref, content)
                return
            key = self._value_key(subject)
            if key is None:
                raise TypeError(
                    f"Cannot attach documentation to a {type(subject).__name__}: "
                    "it is neither weak-referenceable nor a plain immutable value"
                )
            self._by_value[key] = content

    def lookup_own(self, subject) -> Content:
        """Return the registry's own content for ``subject``, or None."""
        subject = _unwrap(subject)
        with self._lock:
            stored = self._by_identity.get(id(subject))
            if stored is not None:
                ref, content = stored
                if ref() is subject:
                    return content
            key = self._value_key(subject)
            if key is not None:
                return self._by_value.get(key)
        return None

    def lookup(self, subject) -> Content:
        """Return content for ``subject`` from the registry or extension chain."""
        content = self.lookup_own(subject)
        if content is not None:
            return content
        return self.extensions.resolve(subject)

    def attach(self, subject, content) -> Content:
        """
        Merge ``content`` into whatever ``subject`` already has.

        Existing content is found through the full lookup chain. The
        merged result is always stored as the subject's own entry, so
        attaching to a subject known only to a provider creates a local
        override seeded with the provider's content.

        Calling this twice with the same content appends twice.

        Returns:
            The merged content now stored for ``subject``
        """
        with self._lock:
            existing = self.lookup_own(subject)
            if existing is None:
                existing = self.extensions.resolve(subject)
                # Never mutate a provider's data in place
                if isinstance(existing, HelpContent):
                    existing = existing.copy()
            merged = merge(existing, content)
            self.set_content(subject, merged)
        get_output().emit(2, "registry: attached help to {subject}",
                          channel='registry', subject=_describe(subject))
        return merged

    def forget(self, subject) -> bool:
        """Drop the registry's own entry for ``subject``.

        Returns:
            True if an entry was removed
        """
        subject = _unwrap(subject)
        with self._lock:
            stored = self._by_identity.get(id(subject))
            if stored is not None and stored[0]() is subject:
                del self._by_identity[id(subject)]
                removed = True
            else:
                key = self._value_key(subject)
                removed = key is not None and key in self._by_value
                if removed:
                    del self._by_value[key]
        if removed:
            get_output().emit(2, "registry: forgot help for {subject}",
                              channel='registry', subject=_describe(subject))
        return removed

    def __contains__(self, subject) -> bool:
        return self.lookup_own(subject) is not None

    def __len__(self) -> int:
        with self._lock:
            live = sum(1 for ref, _ in self._by_identity.values() if ref() is not None)
            return live + len(self._by_value)
