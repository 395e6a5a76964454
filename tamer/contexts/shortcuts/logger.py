"""
Shortcuts context logger.

Provides logging interface for shortcuts context with automatic [keys] prefix.
All shortcuts modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[keys]"


def _log_warning(message: str) -> None:
    """Log warning message with [keys] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [keys] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_placeholder_key(word: str) -> None:
    """Warn that a word ran out of keys and shares the placeholder."""
    _log_warning(f"No free shortcut left for '{word}', using placeholder key")
