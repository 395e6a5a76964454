"""
Shortcuts Context

Responsibilities:
- Assigns a unique single-character shortcut to every group and target
- Prefers characters visible in the word, aligned across words when possible
- Falls back to deterministic hash-based keys when no in-word character is free
- Records which character position of the word carries the shortcut

Owns: Shortcut search strategies, fallback keys, labelled words
Never: Groups targets or decides on-screen layout
"""

from tamer.contexts.shortcuts.fallback import (
    FALLBACK_ALPHABET,
    PLACEHOLDER_KEY,
    fallback_key,
    fnv1a_64,
)
from tamer.contexts.shortcuts.key_assigner import (
    DEFAULT_ALLOWED_CHARS,
    CharChooser,
    KeyAssignment,
    assign_keys,
)
from tamer.contexts.shortcuts.strategies import (
    Candidate,
    SearchState,
    Strategy,
    column_aligned,
    default_strategies,
    first_free,
    shared_prefix_word,
)

__all__ = [
    # Assignment
    "assign_keys",
    "KeyAssignment",
    "CharChooser",
    "DEFAULT_ALLOWED_CHARS",
    # Strategies
    "Strategy",
    "SearchState",
    "Candidate",
    "shared_prefix_word",
    "column_aligned",
    "first_free",
    "default_strategies",
    # Fallback keys
    "fnv1a_64",
    "fallback_key",
    "FALLBACK_ALPHABET",
    "PLACEHOLDER_KEY",
]
