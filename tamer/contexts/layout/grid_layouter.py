"""
Grid layout for group blocks.

Blocks are dealt round-robin into columns (block i goes to column i mod n), then
read back row by row. Every block stays whole inside one column, so a group
header is always directly followed by its targets.
"""

from typing import List, Optional, Sequence, Tuple

from tamer.contexts.layout.cells import Grid, GroupBlock

DEFAULT_TOTAL_WIDTH = 80


def distribute_blocks(blocks: Sequence[GroupBlock], column_count: int) -> List[List[GroupBlock]]:
    """
    Deal blocks into columns round-robin, keeping input order within a column.

    Example:
        6 blocks over 2 columns -> column 0 gets blocks 0, 2, 4 and column 1
        gets blocks 1, 3, 5.
    """
    columns: List[List[GroupBlock]] = [[] for _ in range(column_count)]
    for position, block in enumerate(blocks):
        columns[position % column_count].append(block)
    return columns


def transpose_columns(columns: List[List[GroupBlock]]) -> Tuple[Tuple[GroupBlock, ...], ...]:
    """Turn per-column block lists into ragged rows."""
    row_count = max((len(column) for column in columns), default=0)
    return tuple(
        tuple(column[row] for column in columns if row < len(column))
        for row in range(row_count)
    )


def layout_grid(
    blocks: Sequence[GroupBlock],
    column_count: int,
    heading: Optional[str] = None,
    spread_columns: bool = False,
    total_width: int = DEFAULT_TOTAL_WIDTH,
) -> Grid:
    """
    Lay out group blocks into a grid.

    Args:
        blocks: One block per group, in presentation order
        column_count: Number of columns to fill
        heading: Decorative heading attached above the first row
        spread_columns: Give every column total_width // column_count
                        characters instead of its intrinsic width
        total_width: Available width, used when spreading columns

    Returns:
        Grid with ragged rows and per-column widths

    Raises:
        ValueError: If column_count is less than 1
    """
    if column_count < 1:
        raise ValueError(f"Column count must be at least 1, got {column_count}")

    columns = distribute_blocks(blocks, column_count)

    if spread_columns:
        widths = tuple(total_width // column_count for _ in columns)
    else:
        widths = tuple(max((block.width for block in column), default=0) for column in columns)

    return Grid(
        rows=transpose_columns(columns),
        column_count=column_count,
        heading=heading,
        column_widths=widths,
    )
