"""Custom exceptions raised when caller-supplied settings break their contract."""

from typing import Any, Optional


class ConfigurationError(ValueError):
    """
    Exception raised when configuration or a caller-supplied override is invalid.

    Covers bad settings (negative thresholds, uncompilable patterns) as well as
    override callables that return values violating their contract (duplicate
    shortcut characters, non-string group names, sort results that are not a
    permutation of their input).

    Attributes:
        message: Error description
        setting: Name of the offending setting or override (e.g., 'char_chooser')
        value: The offending value
    """

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        value: Any = None,
    ):
        self.message = message
        self.setting = setting
        self.value = value

        # Build enhanced error message
        parts = [message]

        if setting:
            parts.append(f"Setting: {setting}")

        if value is not None:
            text = repr(value)
            # Truncate value if too long
            text = text[:200] + "..." if len(text) > 200 else text
            parts.append(f"Value: {text}")

        super().__init__("\n".join(parts))
