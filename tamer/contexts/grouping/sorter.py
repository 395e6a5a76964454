"""
Group ordering.

Default policy: the fallback group first, every other group by name. Targets
keep their group order unless `sort_targets` is requested.
"""

from collections import Counter
from typing import Callable, List, Optional, Sequence

from tamer.contexts.grouping.grouped_targets import Group, GroupedTargets
from tamer.contexts.grouping.logger import _log_debug
from tamer.utils.exceptions import ConfigurationError

SortFunction = Callable[[Sequence[Group]], Sequence[Group]]


def _check_permutation(original: Sequence[Group], reordered: Sequence[Group]) -> None:
    """
    Ensure a custom sort returned exactly the groups it was given.

    Raises:
        ConfigurationError: If groups were added, dropped, duplicated or altered
    """
    if not all(isinstance(group, Group) for group in reordered):
        raise ConfigurationError("Sort function must return Group instances", "sort_function")

    names = [group.name for group in reordered]
    duplicates = [name for name, count in Counter(names).items() if count > 1]
    if duplicates:
        raise ConfigurationError(
            "Sort function returned duplicate group names", "sort_function", duplicates
        )

    expected = {group.name: Counter(group.targets) for group in original}
    actual = {group.name: Counter(group.targets) for group in reordered}
    if expected != actual:
        raise ConfigurationError(
            "Sort function must return a permutation of its input groups",
            "sort_function",
            names,
        )


def sort_groups(
    grouped: GroupedTargets,
    sort_function: Optional[SortFunction] = None,
    sort_targets: bool = False,
) -> GroupedTargets:
    """
    Order groups for presentation.

    Args:
        grouped: Grouping result
        sort_function: Optional replacement for the by-name group order. Receives
                       the named groups and must return them reordered
        sort_targets: Also order targets inside each group by name

    Returns:
        New GroupedTargets with the fallback group (if any) first

    Raises:
        ConfigurationError: If sort_function does not return a permutation

    Example:
        >>> grouped = GroupedTargets.from_parts("default", ["test"], [Group("lint", ("lint_py",)), Group("build", ("build_a",))])
        >>> sort_groups(grouped).names()
        ['default', 'build', 'lint']
    """
    named: List[Group] = list(grouped.named_groups)

    if sort_function is None:
        named.sort(key=lambda group: group.name)
    else:
        reordered = list(sort_function(list(named)))
        _check_permutation(named, reordered)
        named = reordered
        _log_debug(f"Applied custom group order: {[group.name for group in named]}")

    fallback = list(grouped.fallback_targets)

    if sort_targets:
        fallback.sort()
        named = [Group(group.name, tuple(sorted(group.targets))) for group in named]

    return GroupedTargets.from_parts(grouped.fallback_name, fallback, named)
