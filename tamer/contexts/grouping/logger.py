"""
Grouping context logger.

Provides logging interface for grouping context with automatic [group] prefix.
All grouping modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[group]"


def _log_debug(message: str) -> None:
    """Log debug message with [group] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_grouping_result(grouped) -> None:
    """
    Log a summary of a grouping result.

    Args:
        grouped: GroupedTargets from group_targets()
    """
    total = len(grouped.all_targets())
    fallback = len(grouped.fallback_targets)
    _log_debug(
        f"Grouped {total} targets into {len(grouped.named_groups)} groups "
        f"({fallback} in fallback group '{grouped.fallback_name}')"
    )
