"""
Group extraction rules.

An extraction rule maps one target name to the name of the group it belongs to,
or None when the target has no group of its own and should go to the fallback
group. Rules are plain callables so callers can supply their own.
"""

import re
from typing import Callable, Optional, Pattern, Union

from tamer.utils.exceptions import ConfigurationError

ExtractGroup = Callable[[str], Optional[str]]

# Separators commonly used in build target names (build_debug, docker-push, db:migrate)
DEFAULT_DELIMITERS = "-_:./"


def delimiter_rule(delimiters: str = DEFAULT_DELIMITERS) -> ExtractGroup:
    """
    Build a rule that groups targets by their leading segment.

    The group is everything before the first delimiter character. Targets
    without a delimiter, or starting with one, have no group.

    Example:
        >>> rule = delimiter_rule()
        >>> rule("build_debug"), rule("test"), rule("_private")
        ('build', None, None)
    """
    if not delimiters:
        raise ConfigurationError("At least one group delimiter is required", "group_delimiters")

    splitter = re.compile("[" + re.escape(delimiters) + "]")

    def extract(name: str) -> Optional[str]:
        match = splitter.search(name)
        if match is None or match.start() == 0:
            return None
        return name[: match.start()]

    return extract


def pattern_rule(pattern: Union[str, Pattern]) -> ExtractGroup:
    """
    Build a rule that extracts the group with a regular expression.

    The pattern is matched at the start of the target name. The group name is
    taken from the named group "group" if the pattern has one, else from the
    first capture group, else from the whole match.

    Raises:
        ConfigurationError: If the pattern does not compile
    """
    try:
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as e:
        raise ConfigurationError(f"Invalid group pattern: {e}", "group_pattern", pattern) from e

    def extract(name: str) -> Optional[str]:
        match = regex.match(name)
        if match is None:
            return None
        if "group" in regex.groupindex:
            return match.group("group")
        if regex.groups:
            return match.group(1)
        return match.group(0)

    return extract


def rule_from_config(group_pattern: Optional[str], group_delimiters: str) -> ExtractGroup:
    """Pick the pattern rule when a pattern is configured, the delimiter rule otherwise."""
    if group_pattern:
        return pattern_rule(group_pattern)
    return delimiter_rule(group_delimiters)


def checked_extract(extract_group: ExtractGroup, name: str) -> Optional[str]:
    """
    Run an extraction rule and enforce its contract.

    Empty strings count as "no group".

    Raises:
        ConfigurationError: If the rule returns something other than None or a string
    """
    group = extract_group(name)
    if group is None:
        return None
    if not isinstance(group, str):
        raise ConfigurationError(
            f"Group extraction rule returned a non-string for target '{name}'",
            "extract_group",
            group,
        )
    return group or None
