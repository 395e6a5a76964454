"""
Menu Pipeline

Turns raw target names into a laid-out menu:

    names -> group_targets -> sort_groups -> assign_keys (groups, then each
    group's targets) -> MenuCells -> layout_grid

Everything here is a pure transformation of its inputs; the only side effect
is logging.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from tamer.contexts.grouping import (
    ExtractGroup,
    GroupedTargets,
    SortFunction,
    group_targets,
    rule_from_config,
    sort_groups,
)
from tamer.contexts.layout import Grid, GroupBlock, MenuCell, column_count_for, layout_grid
from tamer.contexts.menu.config_resolver import MenuConfig, validate_config
from tamer.contexts.menu.logger import log_menu_result, log_menu_start
from tamer.contexts.shortcuts import CharChooser, KeyAssignment, assign_keys


@dataclass(frozen=True)
class Menu:
    """
    Result of the menu pipeline.

    Attributes:
        grouped: Sorted grouping result
        group_keys: Shortcut assignment per group name
        target_keys: Shortcut assignments per group name, then per target name
        grid: Laid-out menu
        prefixed_keys: Whether target shortcuts already include the group shortcut
    """

    grouped: GroupedTargets
    group_keys: Dict[str, KeyAssignment] = field(default_factory=dict)
    target_keys: Dict[str, Dict[str, KeyAssignment]] = field(default_factory=dict)
    grid: Grid = field(default_factory=Grid)
    prefixed_keys: bool = False

    def resolve(self, shortcut: str) -> Optional[str]:
        """
        Target name bound to a shortcut, or None.

        Accepts the shortcut shown in a target cell. When target shortcuts are
        not prefixed, the group shortcut followed by the target shortcut is
        accepted too. Bare target shortcuts are only unique within their
        group, so one that appears in several groups resolves to None.

        Args:
            shortcut: Key sequence (e.g., "bd", or "d" without prefixed keys)
        """
        matches = []
        for row in self.grid.rows:
            for block in row:
                prefix = block.header.shortcut
                for cell in block.targets:
                    if not self.prefixed_keys and shortcut == prefix + cell.shortcut:
                        return cell.target
                    if shortcut == cell.shortcut:
                        matches.append(cell.target)

        if len(matches) == 1:
            return matches[0]
        return None

    @property
    def placeholder_count(self) -> int:
        """Number of groups and targets that could not get a unique key."""
        assignments = list(self.group_keys.values())
        for keys in self.target_keys.values():
            assignments.extend(keys.values())
        return sum(1 for assignment in assignments if assignment.placeholder)


def organize_targets(
    names: Sequence[str],
    config: Optional[MenuConfig] = None,
    extract_group: Optional[ExtractGroup] = None,
    sort_function: Optional[SortFunction] = None,
) -> GroupedTargets:
    """
    Group and sort target names according to the configuration.

    Args:
        names: Raw target names
        config: Menu configuration (defaults to MenuConfig())
        extract_group: Custom extraction rule (overrides the configured one)
        sort_function: Custom group order

    Returns:
        Sorted GroupedTargets
    """
    if config is None:
        config = MenuConfig()

    if extract_group is None:
        extract_group = rule_from_config(config.group_pattern, config.group_delimiters)

    grouped = group_targets(
        names,
        extract_group=extract_group,
        fallback_name=config.fallback_name,
        merge_prefix_targets=config.merge_prefix_targets,
        merge_prefix_groups_threshold=config.merge_prefix_groups_threshold,
        merge_dangling_threshold=config.merge_dangling_threshold,
    )
    return sort_groups(grouped, sort_function=sort_function, sort_targets=config.sort_targets)


def _build_blocks(
    grouped: GroupedTargets,
    group_keys: Dict[str, KeyAssignment],
    target_keys: Dict[str, Dict[str, KeyAssignment]],
    prefix_target_keys: bool,
) -> List[GroupBlock]:
    blocks = []
    for group in grouped:
        group_key = group_keys[group.name]
        header = MenuCell(
            label=group_key.label,
            shortcut=group_key.key,
            group=group.name,
            key_index=group_key.index,
            is_header=True,
        )

        cells = []
        for target in group.targets:
            assignment = target_keys[group.name][target]
            shortcut = assignment.key
            if prefix_target_keys:
                shortcut = group_key.key + shortcut
            cells.append(
                MenuCell(
                    label=assignment.label,
                    shortcut=shortcut,
                    target=target,
                    group=group.name,
                    key_index=assignment.index,
                )
            )

        blocks.append(GroupBlock(header=header, targets=tuple(cells)))
    return blocks


def build_menu(
    names: Sequence[str],
    config: Optional[MenuConfig] = None,
    extract_group: Optional[ExtractGroup] = None,
    char_chooser: Optional[CharChooser] = None,
    sort_function: Optional[SortFunction] = None,
) -> Menu:
    """
    Build a complete menu from raw target names.

    Args:
        names: Raw target names (duplicates and blank names are dropped)
        config: Menu configuration (defaults to MenuConfig())
        extract_group: Custom group extraction rule
        char_chooser: Custom shortcut chooser, called as chooser(word, taken)
        sort_function: Custom group order

    Returns:
        Menu with grouping, key assignments and grid

    Raises:
        ConfigurationError: If the configuration or an override is invalid

    Example:
        >>> menu = build_menu(["build", "build_debug", "build_release", "test"])
        >>> [cell.shortcut for cell in menu.grid.cells()]
        ['d', 'dt', 'b', 'bb', 'bd', 'br']
        >>> menu.resolve("br")
        'build_release'
        >>> menu.resolve("bd")
        'build_debug'
    """
    config = validate_config(config if config is not None else MenuConfig())
    start_time = time.time()
    log_menu_start(len(names), config)

    grouped = organize_targets(names, config, extract_group, sort_function)

    group_keys = assign_keys(
        grouped.names(),
        is_group_header=True,
        allowed_chars=config.allowed_key_pattern,
        case_fold=config.case_fold,
        char_chooser=char_chooser,
        align_columns=config.align_group_keys,
    )

    # Target keys are only unique within their own group
    target_keys = {
        group.name: assign_keys(
            group.targets,
            is_group_header=False,
            allowed_chars=config.allowed_key_pattern,
            case_fold=config.case_fold,
            char_chooser=char_chooser,
            align_columns=config.align_target_keys,
        )
        for group in grouped
    }

    blocks = _build_blocks(grouped, group_keys, target_keys, config.prefix_target_keys)
    column_count = column_count_for(
        grouped, config.width, padding=config.column_padding, limit=config.column_limit
    )
    grid = layout_grid(
        blocks,
        column_count,
        heading=config.heading,
        spread_columns=config.spread_columns,
        total_width=config.width,
    )

    menu = Menu(
        grouped=grouped,
        group_keys=group_keys,
        target_keys=target_keys,
        grid=grid,
        prefixed_keys=config.prefix_target_keys,
    )
    log_menu_result(menu, time.time() - start_time)
    return menu
