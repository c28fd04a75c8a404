"""
Extension chain: fallback help lookup in other systems.

When the registry has nothing for a subject, registered providers are
asked in registration order. The first one that returns something other
than ``None`` wins.
"""

import threading
from typing import Any, Callable, List, Tuple

from ..log_lib import get_output
from .core import Content, to_content


class HelpProvider:
    """
    Interface for fallback help lookup.

    Subclasses answer ``resolve(subject)`` with content in any form
    accepted by ``to_content()``, or ``None`` when they know nothing
    about the subject. Providers are called with arbitrary values, so
    "not mine" must be a ``None`` return, never an exception.
    """

    name = 'provider'

    def resolve(self, subject: Any):
        raise NotImplementedError


class FunctionProvider(HelpProvider):
    """Adapts a plain ``subject -> content | None`` callable."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func
        self.name = getattr(func, '__name__', repr(func))

    def resolve(self, subject: Any):
        return self.func(subject)

    def __eq__(self, other):
        if isinstance(other, FunctionProvider):
            return self.func == other.func
        return NotImplemented

    def __hash__(self):
        return hash(self.func)

    def __repr__(self):
        return f"FunctionProvider({self.name})"


def as_provider(provider) -> HelpProvider:
    """Wrap callables; pass ``HelpProvider`` instances through."""
    if isinstance(provider, HelpProvider):
        return provider
    if callable(provider):
        return FunctionProvider(provider)
    raise TypeError(f"Help provider must be callable or a HelpProvider, got {provider!r}")


class ExtensionChain:
    """Ordered list of help providers."""

    def __init__(self):
        self._providers: List[HelpProvider] = []
        self._lock = threading.RLock()

    def register(self, provider, allow_duplicate: bool = False) -> bool:
        """
        Append a provider to the chain.

        Args:
            provider: A ``HelpProvider`` or a ``subject -> content`` callable
            allow_duplicate: Register again even if already present

        Returns:
            True if the provider was appended, False if it was already
            registered and duplicates are not allowed.
        """
        provider = as_provider(provider)
        with self._lock:
            if not allow_duplicate and provider in self._providers:
                get_output().emit(2, "extension: {name} already registered",
                                  channel='extension', name=provider.name)
                return False
            self._providers.append(provider)
        get_output().emit(2, "extension: registered {name} (#{n})",
                          channel='extension', name=provider.name,
                          n=len(self._providers))
        return True

    def resolve(self, subject: Any) -> Content:
        """
        Ask each provider in turn for help on ``subject``.

        Returns:
            The first non-None result, normalised, or None
        """
        for provider in self.providers:
            found = provider.resolve(subject)
            if found is not None:
                get_output().emit(2, "extension: {name} answered for {kind}",
                                  channel='extension', name=provider.name,
                                  kind=type(subject).__name__)
                return to_content(found)
        return None

    @property
    def providers(self) -> Tuple[HelpProvider, ...]:
        with self._lock:
            return tuple(self._providers)

    def __len__(self):
        return len(self._providers)
