"""
Target Grouper

Splits a flat list of target names into named groups, then tidies the result
with three merge heuristics:

1. Prefix targets: a fallback target that is a prefix of a group name joins
   that group (``build`` joins the ``build`` group of ``build_debug``).
2. Prefix groups: a small group whose name extends another group's name is
   folded into it (``docker`` into ``doc`` when ``docker`` is small enough).
3. Dangling groups: groups that are still small are dissolved into the
   fallback group.

Each pass is a pure function from GroupedTargets to GroupedTargets.
"""

from typing import Dict, List, Optional, Sequence

from tamer.contexts.grouping.extraction import (
    DEFAULT_DELIMITERS,
    ExtractGroup,
    checked_extract,
    delimiter_rule,
)
from tamer.contexts.grouping.grouped_targets import Group, GroupedTargets
from tamer.contexts.grouping.logger import _log_debug, log_grouping_result
from tamer.utils.exceptions import ConfigurationError
from tamer.utils.text_processing import normalize_names

DEFAULT_FALLBACK_NAME = "default"
DEFAULT_MERGE_PREFIX_TARGETS = True
DEFAULT_PREFIX_GROUPS_THRESHOLD = 2
DEFAULT_DANGLING_THRESHOLD = 1


def _check_threshold(setting: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError("Merge threshold must be a non-negative integer", setting, value)


def extract_groups(
    names: Sequence[str],
    extract_group: ExtractGroup,
    fallback_name: str = DEFAULT_FALLBACK_NAME,
) -> GroupedTargets:
    """
    Assign every name to the group its extraction rule names.

    Groups are created in first-seen order. Names without a group, or whose
    group equals the fallback name, go to the fallback group.

    Args:
        names: Deduplicated, non-blank target names
        extract_group: Rule mapping a name to its group (or None)
        fallback_name: Reserved name of the catch-all group

    Returns:
        Unmerged GroupedTargets (fallback first)
    """
    fallback: List[str] = []
    buckets: Dict[str, List[str]] = {}

    for name in names:
        group = checked_extract(extract_group, name)
        if group is None or group == fallback_name:
            fallback.append(name)
        else:
            buckets.setdefault(group, []).append(name)

    named = [Group(group, tuple(targets)) for group, targets in buckets.items()]
    return GroupedTargets.from_parts(fallback_name, fallback, named)


def absorb_prefix_targets(grouped: GroupedTargets) -> GroupedTargets:
    """
    Move fallback targets into the group whose name they prefix.

    When several group names start with the target, the lexicographically
    smallest one wins. Absorbed targets are placed at the front of their new
    group, in their original order.
    """
    group_names = [group.name for group in grouped.named_groups]
    absorbed: Dict[str, List[str]] = {}
    remaining: List[str] = []

    for target in grouped.fallback_targets:
        candidates = [name for name in group_names if name.startswith(target)]
        if candidates:
            destination = min(candidates)
            absorbed.setdefault(destination, []).append(target)
            _log_debug(f"Absorbed target '{target}' into group '{destination}'")
        else:
            remaining.append(target)

    if not absorbed:
        return grouped

    named = [
        Group(group.name, tuple(absorbed.get(group.name, ())) + group.targets)
        for group in grouped.named_groups
    ]
    return GroupedTargets.from_parts(grouped.fallback_name, remaining, named)


def merge_prefix_groups(grouped: GroupedTargets, threshold: int) -> GroupedTargets:
    """
    Fold small groups into a group whose name is a prefix of theirs.

    A group qualifies when it holds at most `threshold` targets and another
    group's name is a literal prefix of its name. Candidates are examined in
    name order and the smallest prefix-group name wins; the qualifying group's
    targets are appended to it. Repeats until nothing qualifies.
    """
    buckets: Dict[str, List[str]] = {
        group.name: list(group.targets) for group in grouped.named_groups
    }
    changed = False

    while True:
        merge = None
        for name in sorted(buckets):
            if len(buckets[name]) > threshold:
                continue
            prefixes = [other for other in buckets if other != name and name.startswith(other)]
            if prefixes:
                merge = (name, min(prefixes))
                break

        if merge is None:
            break

        name, destination = merge
        buckets[destination].extend(buckets.pop(name))
        changed = True
        _log_debug(f"Merged group '{name}' into prefix group '{destination}'")

    if not changed:
        return grouped

    named = [Group(name, tuple(targets)) for name, targets in buckets.items()]
    return GroupedTargets.from_parts(grouped.fallback_name, grouped.fallback_targets, named)


def merge_dangling_groups(grouped: GroupedTargets, threshold: int) -> GroupedTargets:
    """Dissolve groups with at most `threshold` targets into the fallback group."""
    fallback = list(grouped.fallback_targets)
    survivors = []

    for group in grouped.named_groups:
        if len(group) <= threshold:
            fallback.extend(group.targets)
            _log_debug(f"Dissolved dangling group '{group.name}' ({len(group)} targets)")
        else:
            survivors.append(group)

    if len(survivors) == len(grouped.named_groups):
        return grouped

    return GroupedTargets.from_parts(grouped.fallback_name, fallback, survivors)


def apply_merge_passes(
    grouped: GroupedTargets,
    merge_prefix_targets: bool = DEFAULT_MERGE_PREFIX_TARGETS,
    merge_prefix_groups_threshold: Optional[int] = DEFAULT_PREFIX_GROUPS_THRESHOLD,
    merge_dangling_threshold: Optional[int] = DEFAULT_DANGLING_THRESHOLD,
) -> GroupedTargets:
    """
    Run the enabled merge passes in order until a full round changes nothing.

    Running this again on its own result returns an equal result.

    Raises:
        ConfigurationError: If a threshold is negative or not an integer
    """
    _check_threshold("merge_prefix_groups_threshold", merge_prefix_groups_threshold)
    _check_threshold("merge_dangling_threshold", merge_dangling_threshold)

    # Every round either moves targets out of the fallback group or removes a
    # group, so this terminates.
    while True:
        current = grouped
        if merge_prefix_targets:
            current = absorb_prefix_targets(current)
        if merge_prefix_groups_threshold is not None:
            current = merge_prefix_groups(current, merge_prefix_groups_threshold)
        if merge_dangling_threshold is not None:
            current = merge_dangling_groups(current, merge_dangling_threshold)

        if current == grouped:
            return current
        grouped = current


def group_targets(
    names: Sequence[str],
    extract_group: Optional[ExtractGroup] = None,
    fallback_name: str = DEFAULT_FALLBACK_NAME,
    merge_prefix_targets: bool = DEFAULT_MERGE_PREFIX_TARGETS,
    merge_prefix_groups_threshold: Optional[int] = DEFAULT_PREFIX_GROUPS_THRESHOLD,
    merge_dangling_threshold: Optional[int] = DEFAULT_DANGLING_THRESHOLD,
) -> GroupedTargets:
    """
    Group target names and apply the merge heuristics.

    Args:
        names: Raw target names (duplicates and blank names are dropped)
        extract_group: Rule mapping a name to its group. Defaults to the
                       delimiter rule (leading segment before - _ : . /)
        fallback_name: Reserved name of the catch-all group
        merge_prefix_targets: Move fallback targets into groups they prefix
        merge_prefix_groups_threshold: Max size of a group folded into its
                                       prefix group (None disables the pass)
        merge_dangling_threshold: Max size of a group dissolved into the
                                  fallback group (None disables the pass)

    Returns:
        GroupedTargets in pre-sort order: fallback first, then groups in
        first-seen order

    Raises:
        ConfigurationError: If a setting or the extraction rule is invalid

    Example:
        >>> grouped = group_targets(["build", "build_debug", "build_release", "test"])
        >>> [(g.name, list(g.targets)) for g in grouped]
        [('default', ['test']), ('build', ['build', 'build_debug', 'build_release'])]
    """
    if not fallback_name:
        raise ConfigurationError("Fallback group name must not be empty", "fallback_name")

    if extract_group is None:
        extract_group = delimiter_rule(DEFAULT_DELIMITERS)

    unique, discarded = normalize_names(names)
    if discarded:
        _log_debug(f"Dropped {discarded} blank or duplicate target names")

    grouped = extract_groups(unique, extract_group, fallback_name)
    grouped = apply_merge_passes(
        grouped,
        merge_prefix_targets=merge_prefix_targets,
        merge_prefix_groups_threshold=merge_prefix_groups_threshold,
        merge_dangling_threshold=merge_dangling_threshold,
    )

    log_grouping_result(grouped)
    return grouped
