"""
Layout Context

Responsibilities:
- Distributes group blocks round-robin over columns
- Transposes columns into ragged rows
- Computes column widths (intrinsic or spread across the available width)
- Picks a column count from the available width
- Renders grids as plain text for command line use

Owns: Grid structure, column policy, text rendering
Never: Groups targets or chooses shortcut characters
"""

from tamer.contexts.layout.cells import Grid, GroupBlock, MenuCell
from tamer.contexts.layout.column_policy import COLUMN_PADDING, column_count_for
from tamer.contexts.layout.grid_layouter import (
    DEFAULT_TOTAL_WIDTH,
    distribute_blocks,
    layout_grid,
    transpose_columns,
)
from tamer.contexts.layout.text_renderer import render_cell, render_grid

__all__ = [
    # Data structures
    "MenuCell",
    "GroupBlock",
    "Grid",
    # Layout
    "layout_grid",
    "distribute_blocks",
    "transpose_columns",
    "DEFAULT_TOTAL_WIDTH",
    # Column policy
    "column_count_for",
    "COLUMN_PADDING",
    # Rendering
    "render_cell",
    "render_grid",
]
