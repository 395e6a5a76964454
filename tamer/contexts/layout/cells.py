"""
Rendering-ready menu cells, group blocks and grids.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class MenuCell:
    """
    One selectable (or header) entry of the menu.

    Attributes:
        label: Text shown for the entry (labelled word)
        shortcut: Key sequence that activates it; may be two characters when a
                  target key is prefixed by its group key
        target: Exact target name handed back on activation (None for headers)
        group: Name of the group the cell belongs to
        key_index: Position in `label` carrying the shortcut (None if synthetic)
        is_header: True for group header cells
    """

    label: str
    shortcut: str
    target: Optional[str] = None
    group: Optional[str] = None
    key_index: Optional[int] = None
    is_header: bool = False

    @property
    def width(self) -> int:
        """Characters needed to show the cell: shortcut, a space, then the label."""
        return len(self.shortcut) + 1 + len(self.label)


@dataclass(frozen=True)
class GroupBlock:
    """A group header followed by the cells of its targets."""

    header: MenuCell
    targets: Tuple[MenuCell, ...] = ()

    @property
    def cells(self) -> Tuple[MenuCell, ...]:
        return (self.header,) + self.targets

    @property
    def width(self) -> int:
        return max(cell.width for cell in self.cells)

    def __len__(self) -> int:
        return len(self.targets) + 1


@dataclass(frozen=True)
class Grid:
    """
    Final arrangement of group blocks.

    Attributes:
        rows: Row-major blocks; a row may hold fewer blocks than there are
              columns (trailing columns that ran out of blocks)
        column_count: Number of columns blocks were distributed over
        heading: Optional decorative heading above the first row
        column_widths: Width of each column in characters
    """

    rows: Tuple[Tuple[GroupBlock, ...], ...] = ()
    column_count: int = 1
    heading: Optional[str] = None
    column_widths: Tuple[int, ...] = ()

    def columns(self) -> List[List[GroupBlock]]:
        """Blocks per column, top to bottom."""
        columns: List[List[GroupBlock]] = [[] for _ in range(self.column_count)]
        for row in self.rows:
            for position, block in enumerate(row):
                columns[position].append(block)
        return columns

    def cells(self) -> List[MenuCell]:
        """Every cell of the grid in row-major block order."""
        return [cell for row in self.rows for block in row for cell in block.cells]

    @property
    def is_empty(self) -> bool:
        return not self.rows
