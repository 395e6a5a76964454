"""
Shared utilities for TAMER.

Common functionality used across contexts:
- Logger setup
- Configuration errors
- Text helpers
- Report tables
"""

from tamer.utils.exceptions import ConfigurationError
from tamer.utils.text_processing import common_prefix, normalize_names

__all__ = ["ConfigurationError", "common_prefix", "normalize_names"]
