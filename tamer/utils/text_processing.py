"""Text helpers shared by the grouping and shortcut contexts."""

from typing import Iterable, List, Sequence, Tuple


def normalize_names(names: Iterable[str]) -> Tuple[List[str], int]:
    """
    Deduplicate target names and drop blank ones.

    Order of first occurrence is preserved. Names are compared
    case-sensitively, so "Build" and "build" are distinct.

    Args:
        names: Raw target names

    Returns:
        (unique_names, discarded) where discarded counts blank entries and
        repeated names that were dropped

    Example:
        >>> normalize_names(["build", "", "test", "build", "  "])
        (['build', 'test'], 3)
    """
    seen = set()
    unique = []
    discarded = 0

    for name in names:
        if not name or not name.strip() or name in seen:
            discarded += 1
            continue
        seen.add(name)
        unique.append(name)

    return unique, discarded


def common_prefix(words: Sequence[str]) -> str:
    """
    Longest literal prefix shared by every word.

    Example:
        >>> common_prefix(["build_debug", "build_release"])
        'build_'
        >>> common_prefix([])
        ''
    """
    if not words:
        return ""

    shortest = min(words, key=len)
    for i, char in enumerate(shortest):
        if any(word[i] != char for word in words):
            return shortest[:i]
    return shortest
