"""Unit tests for the summary table formatter."""

import pytest

from tamer.utils.report_formatter import Column, TableFormatter, format_share


@pytest.mark.unit
def test_columns_fit_widest_value():
    table = TableFormatter([Column("Key"), Column("Group"), Column("Targets", ">")])
    table.add_row(["d", "default", 1]).add_row(["b", "build", 12])

    lines = table.render().splitlines()

    assert lines[0] == "Key  Group    Targets"
    assert lines[1] == "-" * len("Key  Group    Targets")
    assert lines[2] == "d    default        1"
    assert lines[3] == "b    build         12"
    assert lines[4] == lines[1]


@pytest.mark.unit
def test_summary_follows_blank_line():
    table = TableFormatter([Column("Group")]).add_row(["build"]).add_summary("1 group")

    assert table.render().endswith("-----\n\n1 group")


@pytest.mark.unit
def test_row_length_must_match_columns():
    table = TableFormatter([Column("Key"), Column("Group")])

    with pytest.raises(ValueError, match="Expected 2 values, got 1"):
        table.add_row(["d"])


@pytest.mark.unit
@pytest.mark.parametrize(
    "count, total, expected",
    [(3, 4, "75%"), (1, 3, "33%"), (0, 0, "0%"), (5, 5, "100%")],
)
def test_format_share(count, total, expected):
    assert format_share(count, total) == expected
