"""Column count selection from the widest group or target name."""

from typing import Optional

from tamer.contexts.grouping import GroupedTargets

# Room for the shortcut, its separator and the gap between columns
COLUMN_PADDING = 8


def column_count_for(
    grouped: GroupedTargets,
    available_width: int,
    padding: int = COLUMN_PADDING,
    limit: Optional[int] = None,
) -> int:
    """
    Number of columns that fit the available width.

    Every column is assumed to be as wide as the longest group or target name
    plus `padding`. The result is at least 1 and at most `limit` when given.

    Example:
        >>> grouped = GroupedTargets.from_parts("default", ["test"], [])
        >>> column_count_for(grouped, 80)
        5
    """
    longest = max(
        (len(name) for group in grouped for name in (group.name, *group.targets)),
        default=0,
    )
    count = max(1, available_width // (longest + padding))
    if limit is not None:
        count = min(count, max(1, limit))
    return count
