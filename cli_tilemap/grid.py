"""Sparse grid engine.

Bounded rectangular grids and a sparse, coordinate keyed map over them.

* :class:`Cell` is an immutable ``(x, y)`` coordinate. ``x`` runs along the
  width axis (columns), ``y`` along the depth axis (rows).
* :class:`Grid` is an inclusive ``start``/``end`` rectangle of cells with
  deterministic row-major iteration.
* :class:`GridMap` binds a ``Grid`` to a persistent map (``pyrsistent.PMap``)
  of occupied cells. Absence of a key means the cell is empty.

``GridMap`` mutators swap in a new persistent map rather than editing one in
place, so any snapshot taken through :attr:`GridMap.entries` stays stable
while the owner keeps inserting or removing values.
"""

from dataclasses import dataclass
from typing import Generic, Iterator, Mapping, Optional, Tuple, TypeVar

from pyrsistent import PMap, pmap

V = TypeVar("V")


@dataclass(frozen=True, order=True)
class Cell:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Grid:
    """Inclusive rectangle of cells from ``start`` to ``end``.

    Attributes:
        start: Top-left cell.
        end: Bottom-right cell.
    """

    start: Cell
    end: Cell

    def __post_init__(self) -> None:
        if self.start.x < 0 or self.start.y < 0:
            raise ValueError(f"Grid start must be non-negative, got {self.start}")
        if self.start.x > self.end.x or self.start.y > self.end.y:
            raise ValueError(f"Grid start {self.start} lies after end {self.end}")

    @classmethod
    def new(cls, width: int, depth: int) -> "Grid":
        """Return a grid of ``width`` columns and ``depth`` rows anchored at (0, 0)."""
        if width < 1 or depth < 1:
            raise ValueError(f"Grid size must be at least 1x1, got {width}x{depth}")
        return cls(Cell(0, 0), Cell(width - 1, depth - 1))

    @classmethod
    def from_cells(cls, start: Cell, end: Cell) -> "Grid":
        return cls(start, end)

    @property
    def width(self) -> int:
        return self.end.x - self.start.x + 1

    @property
    def depth(self) -> int:
        return self.end.y - self.start.y + 1

    @property
    def size(self) -> int:
        return self.width * self.depth

    def contains(self, cell: Cell) -> bool:
        """Return True if ``cell`` lies within the rectangle."""
        return (
            self.start.x <= cell.x <= self.end.x
            and self.start.y <= cell.y <= self.end.y
        )

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and self.contains(cell)

    def rows(self) -> Iterator["Grid"]:
        """Yield one single-row grid per row, top to bottom."""
        for y in range(self.start.y, self.end.y + 1):
            yield Grid(Cell(self.start.x, y), Cell(self.end.x, y))

    def cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order (``y`` then ``x`` ascending)."""
        for y in range(self.start.y, self.end.y + 1):
            for x in range(self.start.x, self.end.x + 1):
                yield Cell(x, y)

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def __str__(self) -> str:
        return f"Grid({self.start.x}, {self.start.y})..({self.end.x}, {self.end.y})"


class GridMap(Generic[V]):
    """Sparse map of values keyed by :class:`Cell`, bounded by a :class:`Grid`.

    Only occupied cells are stored. Single inserts outside the grid raise
    ``IndexError``. Bulk construction via :meth:`from_entries` treats an
    out-of-bounds entry as a programming error and aborts with
    ``AssertionError``.
    """

    _grid: Grid
    _entries: PMap[Cell, V]

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._entries = pmap()

    @classmethod
    def new(cls, width: int, depth: int) -> "GridMap[V]":
        """Return an empty map over a ``width`` x ``depth`` grid anchored at (0, 0)."""
        return cls(Grid.new(width, depth))

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridMap[V]":
        """Return an empty map covering ``grid``."""
        return cls(grid)

    @classmethod
    def from_entries(cls, grid: Grid, entries: Mapping[Cell, V]) -> "GridMap[V]":
        """Return a map covering ``grid`` populated with ``entries``.

        Raises:
            AssertionError: If any entry's cell lies outside ``grid``.
                Out-of-bounds bulk data is a caller bug, not a runtime condition.
        """
        for cell in entries:
            if not grid.contains(cell):
                raise AssertionError(f"Cell {cell} is not within {grid}")
        gridmap: GridMap[V] = cls.from_grid(grid)
        gridmap._entries = pmap(entries)
        return gridmap

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def entries(self) -> PMap[Cell, V]:
        """Immutable snapshot of the occupied cells."""
        return self._entries

    def get(self, cell: Cell, default: Optional[V] = None) -> Optional[V]:
        return self._entries.get(cell, default)

    def insert(self, cell: Cell, value: V) -> Optional[V]:
        """Store ``value`` at ``cell`` and return the value it replaced, if any."""
        self._check_bounds(cell)
        previous = self._entries.get(cell)
        self._entries = self._entries.set(cell, value)
        return previous

    def remove(self, cell: Cell) -> Optional[V]:
        """Drop the value at ``cell`` and return it, or None if the cell was empty."""
        previous = self._entries.get(cell)
        self._entries = self._entries.discard(cell)
        return previous

    def clear(self) -> None:
        self._entries = pmap()

    def items(self) -> Iterator[Tuple[Cell, V]]:
        return iter(self._entries.items())

    def values(self) -> Iterator[V]:
        return iter(self._entries.values())

    def __contains__(self, cell: object) -> bool:
        return cell in self._entries

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridMap):
            return NotImplemented
        return self._grid == other._grid and self._entries == other._entries

    def __repr__(self) -> str:
        return f"GridMap(grid={self._grid!r}, entries={dict(self._entries)!r})"

    # -------- Internal helpers --------

    def _check_bounds(self, cell: Cell) -> None:
        if not self._grid.contains(cell):
            raise IndexError(f"Out of bounds: {tuple(cell)} for {self._grid}")
