"""
Plain text rendering of a menu grid.

Used by the command line tools; interactive front ends render the Grid
themselves.
"""

from typing import List, Optional, Tuple

from tamer.contexts.layout.cells import Grid, GroupBlock, MenuCell

COLUMN_GAP = "  "


def _heading_case(label: str, key_index: Optional[int]) -> str:
    """
    Upper-case a header label character by character.

    The shortcut character and characters whose upper-case form is not a
    single character (e.g. "ß") are kept as they are, so indices into the
    label stay valid.
    """
    chars = []
    for index, char in enumerate(label):
        upper = char.upper()
        chars.append(upper if index != key_index and len(upper) == 1 else char)
    return "".join(chars)


def render_cell(cell: MenuCell, marker: Tuple[str, str] = ("[", "]")) -> str:
    """
    Render one cell as "<shortcut> <label>".

    The shortcut character inside the label is bracketed with `marker`. Group
    headers get the heading treatment: the label is upper-cased apart from the
    shortcut character.
    """
    label = cell.label
    if cell.is_header:
        label = _heading_case(label, cell.key_index)

    if cell.key_index is not None:
        open_mark, close_mark = marker
        label = (
            label[: cell.key_index]
            + open_mark
            + label[cell.key_index]
            + close_mark
            + label[cell.key_index + 1 :]
        )

    return f"{cell.shortcut} {label}"


def _block_lines(block: GroupBlock, marker: Tuple[str, str]) -> List[str]:
    return [render_cell(cell, marker) for cell in block.cells]


def render_grid(grid: Grid, marker: Tuple[str, str] = ("[", "]")) -> str:
    """
    Render a grid as text, columns side by side.

    Each column is padded to its grid width plus the width the markers add.
    Rows of blocks are separated by a blank line.
    """
    lines: List[str] = []
    if grid.heading:
        lines.append(grid.heading)
        lines.append("")

    extra = sum(len(mark) for mark in marker)

    for row_number, row in enumerate(grid.rows):
        if row_number:
            lines.append("")

        rendered = [_block_lines(block, marker) for block in row]
        height = max(len(block_lines) for block_lines in rendered)

        for line_number in range(height):
            parts = []
            for position, block_lines in enumerate(rendered):
                text = block_lines[line_number] if line_number < len(block_lines) else ""
                parts.append(f"{text:<{grid.column_widths[position] + extra}}")
            lines.append(COLUMN_GAP.join(parts).rstrip())

    return "\n".join(lines)
