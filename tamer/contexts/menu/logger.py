"""
Menu context logger.

Provides logging interface for menu context with automatic [menu] prefix.
All menu modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from tamer.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[menu]"


def setup_menu_logger(
    log_dir: Optional[Path] = None, presets: Sequence[str] = (), verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for menu context.

    Args:
        log_dir: Directory for this session's log file (None for console only)
        presets: Presets in effect, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file, or None

    Example:
        from tamer.contexts.menu.logger import setup_menu_logger

        log_file = setup_menu_logger(Path("outs/logs/menu"), presets=["layout_wide"])
    """
    return _setup_logger(
        context_name="menu",
        log_dir=log_dir,
        extra_provenance={"Presets": ", ".join(presets) or "none"},
        verbose=verbose,
    )


# Wrapper functions with automatic [menu] prefix


def _log_info(message: str) -> None:
    """Log info message with [menu] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [menu] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [menu] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level menu-specific logging helpers


def log_menu_start(name_count: int, config) -> None:
    """Log start of a menu build with its configuration."""
    _log_debug(f"Building menu from {name_count} target names")
    _log_debug(f"  Config: {config}")


def log_menu_result(menu, elapsed_time: float) -> None:
    """
    Log a finished menu build.

    Args:
        menu: Menu from build_menu()
        elapsed_time: Time taken
    """
    grouped = menu.grouped
    _log_info(
        f"Built menu: {len(grouped.all_targets())} targets in {len(grouped)} groups, "
        f"{menu.grid.column_count} columns ({elapsed_time:.3f}s)"
    )

    if menu.placeholder_count:
        _log_warning(
            f"{menu.placeholder_count} entries share the placeholder key; "
            "allow more shortcut characters to make them selectable"
        )
