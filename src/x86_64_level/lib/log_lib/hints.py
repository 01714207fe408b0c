"""
Hint dataclass and global registry.

Domain modules register hints at import time; OutputManager.hint()
looks them up by id.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templated tip shown in specific contexts.

    Attributes:
        id: Dot-namespaced identifier (e.g., 'cpuinfo.stdin')
        message: Template with {var} placeholders for str.format()
        context: Contexts where the hint applies: 'error', 'result', 'verbose'
        min_level: Minimum verbosity for display
        category: Grouping key (e.g., 'cpuinfo', 'assert')
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. A duplicate id replaces the earlier hint."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by id. Returns None if not found."""
    return _HINTS.get(hint_id)

