"""Unit tests for group extraction rules."""

import pytest

from tamer.contexts.grouping import delimiter_rule, pattern_rule, rule_from_config
from tamer.utils.exceptions import ConfigurationError


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("build_debug", "build"),
        ("docker-push", "docker"),
        ("db:migrate", "db"),
        ("docs/html", "docs"),
        ("test", None),
        ("_private", None),
        ("a_b_c", "a"),
    ],
)
def test_delimiter_rule(name, expected):
    assert delimiter_rule()(name) == expected


@pytest.mark.unit
def test_delimiter_rule_custom_delimiters():
    rule = delimiter_rule(":")

    assert rule("db:migrate") == "db"
    assert rule("build_debug") is None


@pytest.mark.unit
def test_delimiter_rule_requires_delimiters():
    with pytest.raises(ConfigurationError):
        delimiter_rule("")


@pytest.mark.unit
def test_pattern_rule_named_group():
    rule = pattern_rule(r"(?P<group>[a-z]+)-")

    assert rule("docker-build") == "docker"
    assert rule("test") is None


@pytest.mark.unit
def test_pattern_rule_first_capture_group():
    assert pattern_rule(r"([a-z]+):")("db:migrate") == "db"


@pytest.mark.unit
def test_pattern_rule_whole_match():
    assert pattern_rule(r"[a-z]+")("abc1") == "abc"


@pytest.mark.unit
def test_pattern_rule_invalid_pattern():
    with pytest.raises(ConfigurationError) as exc_info:
        pattern_rule("([unclosed")

    assert exc_info.value.setting == "group_pattern"


@pytest.mark.unit
def test_rule_from_config_prefers_pattern():
    rule = rule_from_config(r"(\w+)\.", "-_")

    assert rule("x.y") == "x"
    assert rule("x_y") is None


@pytest.mark.unit
def test_rule_from_config_falls_back_to_delimiters():
    rule = rule_from_config(None, "-")

    assert rule("x-y") == "x"
    assert rule("x_y") is None
