"""Unit tests for grid layout."""

import pytest

from tamer.contexts.layout import GroupBlock, MenuCell, distribute_blocks, layout_grid


def make_block(name, targets=()):
    header = MenuCell(name, name[0], key_index=0, is_header=True)
    cells = tuple(MenuCell(target, "x", target=target, key_index=None) for target in targets)
    return GroupBlock(header=header, targets=cells)


@pytest.fixture
def six_blocks():
    return [make_block(f"group{i}", [f"group{i}_target"]) for i in range(6)]


@pytest.mark.unit
def test_round_robin_distribution(six_blocks):
    columns = distribute_blocks(six_blocks, 2)

    assert columns[0] == [six_blocks[0], six_blocks[2], six_blocks[4]]
    assert columns[1] == [six_blocks[1], six_blocks[3], six_blocks[5]]


@pytest.mark.unit
def test_rows_transpose_columns(six_blocks):
    grid = layout_grid(six_blocks, 2)

    assert len(grid.rows) == 3
    assert grid.rows[0] == (six_blocks[0], six_blocks[1])
    assert grid.rows[2] == (six_blocks[4], six_blocks[5])
    assert grid.columns() == distribute_blocks(six_blocks, 2)


@pytest.mark.unit
def test_ragged_trailing_row(six_blocks):
    grid = layout_grid(six_blocks[:5], 2)

    assert [len(row) for row in grid.rows] == [2, 2, 1]
    assert grid.rows[-1] == (six_blocks[4],)


@pytest.mark.unit
def test_more_columns_than_blocks(six_blocks):
    grid = layout_grid(six_blocks[:2], 4)

    assert grid.rows == ((six_blocks[0], six_blocks[1]),)
    assert grid.column_widths[2:] == (0, 0)


@pytest.mark.unit
def test_block_keeps_header_before_targets():
    block = make_block("build", ["build_a", "build_b"])

    grid = layout_grid([block], 1)

    assert [cell.label for cell in grid.cells()] == ["build", "build_a", "build_b"]
    assert grid.cells()[0].is_header


@pytest.mark.unit
def test_intrinsic_column_widths():
    blocks = [make_block("a", ["a_long_target"]), make_block("bb", ["b_1"])]

    grid = layout_grid(blocks, 2)

    # shortcut + space + label
    assert grid.column_widths == (15, 5)


@pytest.mark.unit
def test_spread_column_widths(six_blocks):
    grid = layout_grid(six_blocks, 3, spread_columns=True, total_width=100)

    assert grid.column_widths == (33, 33, 33)


@pytest.mark.unit
def test_heading_does_not_take_a_column(six_blocks):
    grid = layout_grid(six_blocks, 2, heading="Targets")

    assert grid.heading == "Targets"
    assert grid.rows[0] == (six_blocks[0], six_blocks[1])


@pytest.mark.unit
def test_empty_input_gives_empty_grid():
    grid = layout_grid([], 3)

    assert grid.rows == ()
    assert grid.is_empty
    assert grid.cells() == []


@pytest.mark.unit
def test_column_count_must_be_positive(six_blocks):
    with pytest.raises(ValueError):
        layout_grid(six_blocks, 0)
