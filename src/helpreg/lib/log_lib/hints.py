"""
Hint dataclass and global registry.

Domain modules register hints at import time via register_hint() /
register_hints(); OutputManager.hint() decides when they are shown.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class Hint:
    """A templated tip shown in specific contexts.

    Attributes:
        id: Unique dot-namespaced identifier (e.g., 'lookup.attach_docs')
        message: Template string with {var} placeholders for str.format()
        context: Contexts where this hint applies:
            'error'   - alongside error messages
            'result'  - after successful results
            'verbose' - only when verbosity >= min_level
        min_level: Minimum verbosity level for display
        category: Grouping key (e.g., 'lookup', 'html')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. Re-registering an ID replaces the earlier hint."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> List[Hint]:
    return [h for h in _HINTS.values() if h.category == category]
