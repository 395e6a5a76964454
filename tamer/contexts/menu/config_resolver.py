"""
Menu Configuration Resolution

Builds a MenuConfig from layered sources, later layers overriding earlier ones:

1. Built-in defaults (the MenuConfig dataclass)
2. A YAML config file (explicit path, or $TAMER_CONFIG_PATH)
3. Named presets from menu_presets.yaml, in the order given
4. Explicit overrides (e.g., from command line options)

Examples:
    # Wide layout with single-character target keys
    >>> config = load_menu_config(presets=["layout_wide", "keys_bare"])

    # Preset plus an explicit override
    >>> config = load_menu_config(presets=["layout_compact"], overrides={"column_limit": 3})
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from dotenv import load_dotenv
import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from tamer.contexts.grouping import (
    DEFAULT_DANGLING_THRESHOLD,
    DEFAULT_DELIMITERS,
    DEFAULT_FALLBACK_NAME,
    DEFAULT_MERGE_PREFIX_TARGETS,
    DEFAULT_PREFIX_GROUPS_THRESHOLD,
)
from tamer.contexts.layout import COLUMN_PADDING, DEFAULT_TOTAL_WIDTH
from tamer.contexts.shortcuts import DEFAULT_ALLOWED_CHARS
from tamer.utils.exceptions import ConfigurationError

load_dotenv()
BUNDLED_PRESETS_PATH = Path(__file__).parent / "menu_presets.yaml"
MENU_PRESETS_PATH = Path(os.getenv("TAMER_PRESETS_PATH", str(BUNDLED_PRESETS_PATH)))


@dataclass
class MenuConfig:
    """
    Every setting the menu pipeline honours.

    Grouping:
        fallback_name: Reserved name of the catch-all group
        group_delimiters: Characters ending the group segment of a target name
        group_pattern: Regex extracting the group (overrides group_delimiters)
        merge_prefix_targets: Move fallback targets into groups they prefix
        merge_prefix_groups_threshold: Max size of a group folded into its
                                       prefix group (None disables)
        merge_dangling_threshold: Max size of a group dissolved into the
                                  fallback group (None disables)
        sort_targets: Order targets inside groups by name

    Shortcuts:
        allowed_key_pattern: Regex a shortcut character must match
        case_fold: Allow upper/lower case variants as shortcuts
        align_target_keys: Prefer target keys unique within their column
        align_group_keys: Same for group keys
        prefix_target_keys: Prefix target shortcuts with their group shortcut so
                            every cell shortcut is unique in the menu

    Layout:
        column_limit: Upper bound for the column count
        spread_columns: Spread columns evenly over the full width
        width: Available width in characters
        column_padding: Padding added to the longest name per column
        heading: Optional heading shown above the grid
    """

    fallback_name: str = DEFAULT_FALLBACK_NAME
    group_delimiters: str = DEFAULT_DELIMITERS
    group_pattern: Optional[str] = None
    merge_prefix_targets: bool = DEFAULT_MERGE_PREFIX_TARGETS
    merge_prefix_groups_threshold: Optional[int] = DEFAULT_PREFIX_GROUPS_THRESHOLD
    merge_dangling_threshold: Optional[int] = DEFAULT_DANGLING_THRESHOLD
    sort_targets: bool = False

    allowed_key_pattern: str = DEFAULT_ALLOWED_CHARS
    case_fold: bool = True
    align_target_keys: bool = True
    align_group_keys: bool = False
    prefix_target_keys: bool = True

    column_limit: Optional[int] = None
    spread_columns: bool = False
    width: int = DEFAULT_TOTAL_WIDTH
    column_padding: int = COLUMN_PADDING
    heading: Optional[str] = None


def validate_config(config: MenuConfig) -> MenuConfig:
    """
    Check settings that the type system cannot.

    Raises:
        ConfigurationError: On the first invalid setting found
    """
    if not config.fallback_name:
        raise ConfigurationError("Fallback group name must not be empty", "fallback_name")

    for setting in ("merge_prefix_groups_threshold", "merge_dangling_threshold"):
        value = getattr(config, setting)
        if value is not None and value < 0:
            raise ConfigurationError("Merge threshold must be non-negative", setting, value)

    if config.width < 1:
        raise ConfigurationError("Width must be at least 1", "width", config.width)
    if config.column_padding < 0:
        raise ConfigurationError(
            "Column padding must be non-negative", "column_padding", config.column_padding
        )
    if config.column_limit is not None and config.column_limit < 1:
        raise ConfigurationError(
            "Column limit must be at least 1", "column_limit", config.column_limit
        )

    for setting in ("allowed_key_pattern", "group_pattern"):
        pattern = getattr(config, setting)
        if pattern is None:
            continue
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern: {e}", setting, pattern) from e

    if not config.group_pattern and not config.group_delimiters:
        raise ConfigurationError(
            "Either group_pattern or group_delimiters must be set", "group_delimiters"
        )

    return config


def _load_yaml(path: Path, setting: str) -> DictConfig:
    """
    Load a YAML mapping with OmegaConf.

    Raises:
        ConfigurationError: If the file is missing, does not parse, or does not
                            hold a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}", setting, str(path))

    try:
        loaded = OmegaConf.load(path)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise ConfigurationError(f"Could not parse {path.name}: {e}", setting, str(path)) from e

    if not isinstance(loaded, DictConfig):
        raise ConfigurationError(f"{path.name} must hold a mapping", setting, str(path))
    return loaded


def load_menu_presets(config_path: Path = None) -> Dict[str, Any]:
    """
    Load menu_presets.yaml and flatten it to a single-level dict.

    Collapses nested structure: layout.wide -> layout_wide

    Args:
        config_path: Optional path to presets file (defaults to MENU_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to partial configs

    Raises:
        ConfigurationError: If the presets file is missing or malformed
    """
    if config_path is None:
        config_path = MENU_PRESETS_PATH

    nested = OmegaConf.to_container(_load_yaml(config_path, "presets_path"), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        if not isinstance(presets, dict):
            raise ConfigurationError(
                f"Preset category '{category}' must hold named presets",
                "presets_path",
                str(config_path),
            )
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def load_menu_config(
    config_path: Optional[Path] = None,
    presets: Sequence[str] = (),
    overrides: Optional[Dict[str, Any]] = None,
    presets_path: Optional[Path] = None,
) -> MenuConfig:
    """
    Resolve a MenuConfig from defaults, config file, presets and overrides.

    Args:
        config_path: YAML file with MenuConfig keys (defaults to $TAMER_CONFIG_PATH
                     when set, otherwise no file)
        presets: Preset names to apply in order (e.g., ["layout_wide"])
        overrides: Final key/value overrides; None values are ignored
        presets_path: Optional presets file (defaults to MENU_PRESETS_PATH)

    Returns:
        Validated MenuConfig

    Raises:
        ConfigurationError: If the config file is missing or malformed, a preset
                            is unknown, a key is not a MenuConfig
                            setting, a value has the wrong type, or validation
                            fails
    """
    if config_path is None and os.getenv("TAMER_CONFIG_PATH"):
        config_path = Path(os.getenv("TAMER_CONFIG_PATH"))

    layers = [OmegaConf.structured(MenuConfig)]

    if config_path is not None:
        layers.append(_load_yaml(config_path, "config_path"))

    if presets:
        available = load_menu_presets(presets_path)
        for preset_name in presets:
            if preset_name not in available:
                raise ConfigurationError(
                    f"Preset '{preset_name}' not found. Available presets: {sorted(available)}",
                    "presets",
                    preset_name,
                )
            layers.append(OmegaConf.create(available[preset_name]))

    if overrides:
        layers.append(
            OmegaConf.create({key: value for key, value in overrides.items() if value is not None})
        )

    try:
        merged = OmegaConf.merge(*layers)
        config = OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigurationError(f"Invalid menu configuration: {e}") from e

    return validate_config(config)
