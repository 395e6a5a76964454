"""
Plain-text summary tables for the command line tools.

Rows are collected first and column widths are fitted to the widest value when
the table is rendered, so callers never need to measure their data.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence


@dataclass(frozen=True)
class Column:
    """
    Column definition.

    Attributes:
        name: Header text
        align: Format alignment ('<' left, '>' right, '^' center)
    """

    name: str
    align: str = "<"


class TableFormatter:
    """Collects rows under fixed columns and renders them aligned."""

    def __init__(self, columns: Sequence[Column], gap: str = "  "):
        self.columns = list(columns)
        self.gap = gap
        self.rows: List[List[str]] = []
        self.summary: Optional[str] = None

    def add_row(self, values: Sequence[Any]) -> "TableFormatter":
        """
        Add one data row.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.rows.append([str(value) for value in values])
        return self

    def add_summary(self, text: str) -> "TableFormatter":
        """Set the line printed below the table."""
        self.summary = text
        return self

    def _widths(self) -> List[int]:
        return [
            max([len(column.name)] + [len(row[position]) for row in self.rows])
            for position, column in enumerate(self.columns)
        ]

    def _line(self, values: Sequence[str], widths: Sequence[int]) -> str:
        cells = [
            f"{value:{column.align}{width}}"
            for column, value, width in zip(self.columns, values, widths)
        ]
        return self.gap.join(cells).rstrip()

    def render(self) -> str:
        widths = self._widths()
        rule = "-" * (sum(widths) + len(self.gap) * (len(widths) - 1))

        lines = [self._line([column.name for column in self.columns], widths), rule]
        lines.extend(self._line(row, widths) for row in self.rows)
        lines.append(rule)
        if self.summary:
            lines.extend(["", self.summary])
        return "\n".join(lines)


def format_share(count: int, total: int) -> str:
    """Format count as a whole-number percentage of total (e.g., "42%")."""
    if total == 0:
        return "0%"
    return f"{round(count * 100 / total)}%"
