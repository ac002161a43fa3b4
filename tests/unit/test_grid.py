# tests/unit/test_grid.py

import pytest
from pyrsistent import pmap

from cli_tilemap.grid import Cell, Grid, GridMap


def test_cell_equality_and_hash() -> None:
    assert Cell(1, 2) == Cell(1, 2)
    assert Cell(1, 2) != Cell(2, 1)
    assert len({Cell(1, 2), Cell(1, 2), Cell(2, 1)}) == 2
    assert tuple(Cell(3, 4)) == (3, 4)


def test_grid_new_bounds() -> None:
    grid = Grid.new(4, 3)
    assert grid.start == Cell(0, 0)
    assert grid.end == Cell(3, 2)
    assert (grid.width, grid.depth, grid.size) == (4, 3, 12)


@pytest.mark.parametrize("width, depth", [(0, 3), (3, 0), (-1, 1)])
def test_grid_new_rejects_empty(width: int, depth: int) -> None:
    with pytest.raises(ValueError):
        Grid.new(width, depth)


def test_grid_from_cells_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        Grid.from_cells(Cell(5, 5), Cell(2, 2))


def test_grid_contains() -> None:
    grid = Grid.from_cells(Cell(2, 2), Cell(5, 5))
    assert Cell(2, 2) in grid
    assert Cell(5, 5) in grid
    assert Cell(1, 3) not in grid
    assert Cell(3, 6) not in grid
    assert (3, 3) not in grid


def test_grid_cells_are_row_major() -> None:
    grid = Grid.new(3, 2)
    assert list(grid.cells()) == [
        Cell(0, 0),
        Cell(1, 0),
        Cell(2, 0),
        Cell(0, 1),
        Cell(1, 1),
        Cell(2, 1),
    ]
    assert list(grid) == list(grid.cells())


def test_grid_rows_cover_offset_range() -> None:
    grid = Grid.from_cells(Cell(1, 2), Cell(2, 4))
    rows = list(grid.rows())
    assert [row.start.y for row in rows] == [2, 3, 4]
    assert all(row.depth == 1 and row.width == 2 for row in rows)
    assert list(rows[0].cells()) == [Cell(1, 2), Cell(2, 2)]


def test_gridmap_insert_get_remove() -> None:
    gridmap: GridMap[str] = GridMap.new(5, 5)
    assert gridmap.insert(Cell(1, 1), "a") is None
    assert gridmap.insert(Cell(1, 1), "b") == "a"
    assert gridmap.get(Cell(1, 1)) == "b"
    assert gridmap.get(Cell(0, 0)) is None
    assert gridmap.get(Cell(0, 0), "z") == "z"
    assert Cell(1, 1) in gridmap
    assert len(gridmap) == 1
    assert gridmap.remove(Cell(1, 1)) == "b"
    assert gridmap.remove(Cell(1, 1)) is None
    assert len(gridmap) == 0


def test_gridmap_insert_out_of_bounds_raises_index_error() -> None:
    gridmap: GridMap[str] = GridMap.new(2, 2)
    with pytest.raises(IndexError):
        gridmap.insert(Cell(2, 0), "a")
    assert len(gridmap) == 0


def test_gridmap_entries_snapshot_is_stable() -> None:
    gridmap: GridMap[str] = GridMap.new(3, 3)
    gridmap.insert(Cell(0, 0), "a")
    snapshot = gridmap.entries
    gridmap.insert(Cell(1, 1), "b")
    gridmap.remove(Cell(0, 0))
    assert snapshot == pmap({Cell(0, 0): "a"})
    assert gridmap.entries == pmap({Cell(1, 1): "b"})


def test_gridmap_iteration_and_clear() -> None:
    gridmap: GridMap[int] = GridMap.new(3, 3)
    gridmap.insert(Cell(0, 1), 1)
    gridmap.insert(Cell(2, 2), 2)
    assert set(gridmap) == {Cell(0, 1), Cell(2, 2)}
    assert dict(gridmap.items()) == {Cell(0, 1): 1, Cell(2, 2): 2}
    assert sorted(gridmap.values()) == [1, 2]
    gridmap.clear()
    assert len(gridmap) == 0


def test_gridmap_from_entries() -> None:
    grid = Grid.new(5, 5)
    gridmap = GridMap.from_entries(grid, {Cell(1, 2): "a"})
    assert gridmap.grid == grid
    assert gridmap.get(Cell(1, 2)) == "a"
    assert gridmap == GridMap.from_entries(grid, {Cell(1, 2): "a"})


def test_gridmap_from_entries_out_of_bounds_aborts() -> None:
    with pytest.raises(AssertionError):
        GridMap.from_entries(Grid.new(5, 5), {Cell(7, 1): "a"})
