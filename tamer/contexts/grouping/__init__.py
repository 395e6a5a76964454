"""
Grouping Context

Responsibilities:
- Normalizes raw target names (deduplication, blank removal)
- Extracts a group for each target from its naming convention
- Applies the merge heuristics (prefix targets, prefix groups, dangling groups)
- Orders groups for presentation

Owns: Group extraction rules, merge heuristics, group ordering
Never: Assigns shortcut characters or decides on-screen layout
"""

from tamer.contexts.grouping.extraction import (
    DEFAULT_DELIMITERS,
    ExtractGroup,
    delimiter_rule,
    pattern_rule,
    rule_from_config,
)
from tamer.contexts.grouping.grouped_targets import Group, GroupedTargets
from tamer.contexts.grouping.grouper import (
    DEFAULT_DANGLING_THRESHOLD,
    DEFAULT_FALLBACK_NAME,
    DEFAULT_MERGE_PREFIX_TARGETS,
    DEFAULT_PREFIX_GROUPS_THRESHOLD,
    absorb_prefix_targets,
    apply_merge_passes,
    extract_groups,
    group_targets,
    merge_dangling_groups,
    merge_prefix_groups,
)
from tamer.contexts.grouping.sorter import SortFunction, sort_groups

__all__ = [
    # Data structures
    "Group",
    "GroupedTargets",
    # Extraction rules
    "ExtractGroup",
    "DEFAULT_DELIMITERS",
    "delimiter_rule",
    "pattern_rule",
    "rule_from_config",
    # Grouping and merge passes
    "group_targets",
    "extract_groups",
    "absorb_prefix_targets",
    "merge_prefix_groups",
    "merge_dangling_groups",
    "apply_merge_passes",
    "DEFAULT_FALLBACK_NAME",
    "DEFAULT_MERGE_PREFIX_TARGETS",
    "DEFAULT_PREFIX_GROUPS_THRESHOLD",
    "DEFAULT_DANGLING_THRESHOLD",
    # Ordering
    "SortFunction",
    "sort_groups",
]
