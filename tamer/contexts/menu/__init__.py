"""
Menu Context

Responsibilities:
- Resolves menu configuration from defaults, config files, presets and overrides
- Runs the pipeline: grouping, sorting, key assignment and layout
- Maps activated shortcuts back to target names

Owns: Pipeline orchestration, MenuConfig, presets
Never: Executes targets or talks to build tools
"""

from tamer.contexts.menu.builder import Menu, build_menu, organize_targets
from tamer.contexts.menu.config_resolver import (
    MenuConfig,
    load_menu_config,
    load_menu_presets,
    validate_config,
)

__all__ = [
    # Pipeline
    "build_menu",
    "organize_targets",
    "Menu",
    # Configuration
    "MenuConfig",
    "load_menu_config",
    "load_menu_presets",
    "validate_config",
]
