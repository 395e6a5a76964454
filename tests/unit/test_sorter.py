"""Unit tests for group ordering."""

import pytest

from tamer.contexts.grouping import Group, GroupedTargets, sort_groups
from tamer.utils.exceptions import ConfigurationError


@pytest.fixture
def grouped():
    return GroupedTargets.from_parts(
        "default",
        ["zeta", "alpha"],
        [
            Group("lint", ("lint_py", "lint_js")),
            Group("build", ("build_release", "build_debug")),
            Group("docs", ("docs_html", "docs_pdf")),
        ],
    )


@pytest.mark.unit
def test_fallback_first_then_by_name(grouped):
    result = sort_groups(grouped)

    assert result.names() == ["default", "build", "docs", "lint"]
    assert result.fallback.is_fallback


@pytest.mark.unit
def test_target_order_untouched_by_default(grouped):
    result = sort_groups(grouped)

    assert result.get("build").targets == ("build_release", "build_debug")
    assert result.fallback.targets == ("zeta", "alpha")


@pytest.mark.unit
def test_sort_targets(grouped):
    result = sort_groups(grouped, sort_targets=True)

    assert result.get("build").targets == ("build_debug", "build_release")
    assert result.fallback.targets == ("alpha", "zeta")


@pytest.mark.unit
def test_without_fallback_group():
    grouped = GroupedTargets.from_parts("default", [], [Group("b", ("b_1",)), Group("a", ("a_1",))])

    assert sort_groups(grouped).names() == ["a", "b"]


@pytest.mark.unit
def test_custom_sort_function_keeps_fallback_first(grouped):
    reverse_by_name = lambda groups: sorted(groups, key=lambda g: g.name, reverse=True)

    result = sort_groups(grouped, sort_function=reverse_by_name)

    assert result.names() == ["default", "lint", "docs", "build"]


@pytest.mark.unit
def test_custom_sort_function_dropping_group_rejected(grouped):
    with pytest.raises(ConfigurationError):
        sort_groups(grouped, sort_function=lambda groups: groups[:-1])


@pytest.mark.unit
def test_custom_sort_function_duplicating_group_rejected(grouped):
    with pytest.raises(ConfigurationError):
        sort_groups(grouped, sort_function=lambda groups: list(groups) + [groups[0]])


@pytest.mark.unit
def test_custom_sort_function_altering_targets_rejected(grouped):
    def drop_targets(groups):
        return [Group(group.name, ()) for group in groups]

    with pytest.raises(ConfigurationError):
        sort_groups(grouped, sort_function=drop_targets)


@pytest.mark.unit
def test_sorted_names_strictly_increasing():
    grouped = GroupedTargets.from_parts(
        "default", ["x"], [Group(name, (f"{name}_1",)) for name in ["m", "c", "x", "a", "k"]]
    )

    names = sort_groups(grouped).names()

    assert names[0] == "default"
    assert all(left < right for left, right in zip(names[1:], names[2:]))
