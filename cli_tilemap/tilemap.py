"""Tilemap renderer.

:class:`TileMap` owns a sparse :class:`~cli_tilemap.grid.GridMap` of
:class:`~cli_tilemap.tile.Tile` values and a :class:`Formatting`. Drawing walks
the grid in row-major order, substitutes the tile type's default for every
empty cell and emits the styled tokens with the configured spacing.

Two render paths exist:

* :meth:`TileMap.draw` writes to a text or binary stream and propagates any
  write error as soon as it happens.
* :meth:`TileMap.to_string` (and ``str(tilemap)``) accumulates the same output
  in memory, with styles embedded as ANSI escape sequences.

Both run :meth:`TileMap._format` and differ only in the sink, so their output
is identical for the same map and formatting.

Example::

    import sys

    from cli_tilemap import Cell, TileMap
    from cli_tilemap.examples.entities import Entity

    tilemap = TileMap(Entity, 5, 5)
    tilemap.insert(Cell(3, 3), Entity.ENEMY)
    tilemap.insert(Cell(1, 0), Entity.HERO)
    tilemap.draw(sys.stdout)
    tilemap.formatting.tile_spacing = 4
    print(tilemap)
"""

import errno
import io
import logging
from typing import (
    IO,
    Any,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
)

from cli_tilemap.formatting import Formatting
from cli_tilemap.grid import Cell, Grid, GridMap
from cli_tilemap.tile import StyledTile, Tile, require_tile_type

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Tile)

NEWLINE = "\n"
INDENT_UNIT = "\t"
SEPARATOR_UNIT = " "


class Sink(Protocol):
    """Destination of the formatting pass."""

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


def is_binary_stream(stream: IO[Any]) -> bool:
    """Return True if ``stream`` takes bytes rather than ``str``."""
    if isinstance(stream, io.TextIOBase) or getattr(stream, "encoding", None):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


class StreamSink:
    """Writes to a caller-supplied stream; binary streams receive UTF-8 bytes.

    Short writes are retried until every byte is accepted. A raw stream that
    reports it cannot accept data (``write`` returning None) raises
    ``BlockingIOError``.
    """

    def __init__(self, stream: IO[Any]) -> None:
        self.stream = stream
        self.binary = is_binary_stream(stream)

    def write(self, text: str) -> None:
        if not self.binary:
            self.stream.write(text)
            return
        data = text.encode("utf-8")
        view = memoryview(data)
        while view:
            written = self.stream.write(view)
            if written is None:
                if isinstance(self.stream, io.RawIOBase):
                    raise BlockingIOError(
                        errno.EAGAIN, "stream accepted no data", len(data) - len(view)
                    )
                break
            view = view[written:]

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()


class BufferSink:
    """Accumulates output in memory."""

    def __init__(self) -> None:
        self.parts: List[str] = []

    def write(self, text: str) -> None:
        self.parts.append(text)

    def flush(self) -> None:
        pass

    def getvalue(self) -> str:
        return "".join(self.parts)


class TileMap(Generic[T]):
    """Tilemap over the tile type ``T``.

    The tile type is passed explicitly because the default value for empty
    cells (``tile_type.default()``) must be reachable at runtime.

    Attributes:
        tile_type: Class implementing :class:`~cli_tilemap.tile.Tile`.
        formatting: Layout rules, freely reassignable between draws.
    """

    tile_type: Type[T]
    formatting: Formatting

    def __init__(
        self,
        tile_type: Type[T],
        width: int,
        depth: int,
        formatting: Optional[Formatting] = None,
    ) -> None:
        self._init(tile_type, GridMap.new(width, depth), formatting)

    def _init(
        self,
        tile_type: Type[T],
        gridmap: GridMap[T],
        formatting: Optional[Formatting] = None,
    ) -> None:
        require_tile_type(tile_type)
        self.tile_type = tile_type
        self.formatting = formatting if formatting is not None else Formatting()
        self._gridmap = gridmap
        logger.debug(
            "Created TileMap[%s] over %s with %d entries",
            tile_type.__name__,
            gridmap.grid,
            len(gridmap),
        )

    # -------- Construction --------

    @classmethod
    def formatted(
        cls, tile_type: Type[T], width: int, depth: int, formatting: Formatting
    ) -> "TileMap[T]":
        """Create an empty ``width`` x ``depth`` tilemap with the given formatting."""
        return cls(tile_type, width, depth, formatting)

    @classmethod
    def _wrap(cls, tile_type: Type[T], gridmap: GridMap[T]) -> "TileMap[T]":
        tilemap: TileMap[T] = cls.__new__(cls)
        tilemap._init(tile_type, gridmap)
        return tilemap

    @classmethod
    def from_grid(cls, tile_type: Type[T], grid: Grid) -> "TileMap[T]":
        """Create an empty tilemap covering ``grid``."""
        return cls._wrap(tile_type, GridMap.from_grid(grid))

    @classmethod
    def from_gridmap(cls, tile_type: Type[T], gridmap: GridMap[T]) -> "TileMap[T]":
        """Adopt an existing, possibly populated ``GridMap`` as-is."""
        return cls._wrap(tile_type, gridmap)

    @classmethod
    def from_entries(
        cls, tile_type: Type[T], grid: Grid, entries: Mapping[Cell, T]
    ) -> "TileMap[T]":
        """Create a tilemap over ``grid`` holding ``entries``.

        Raises:
            AssertionError: If any entry lies outside ``grid``. Treat this as
                a bug in the calling code; do not catch it.
        """
        return cls._wrap(tile_type, GridMap.from_entries(grid, entries))

    # -------- Grid access --------

    @property
    def grid(self) -> Grid:
        return self._gridmap.grid

    @property
    def gridmap(self) -> GridMap[T]:
        """The underlying sparse map, for callers manipulating data directly."""
        return self._gridmap

    def get(self, cell: Cell) -> Optional[T]:
        return self._gridmap.get(cell)

    def insert(self, cell: Cell, value: T) -> Optional[T]:
        return self._gridmap.insert(cell, value)

    def remove(self, cell: Cell) -> Optional[T]:
        return self._gridmap.remove(cell)

    def clear(self) -> None:
        self._gridmap.clear()

    def items(self) -> Iterator[Tuple[Cell, T]]:
        return self._gridmap.items()

    def __contains__(self, cell: object) -> bool:
        return cell in self._gridmap

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._gridmap)

    def __len__(self) -> int:
        return len(self._gridmap)

    # -------- Rendering --------

    def draw(self, stream: IO[Any]) -> None:
        """Draw the tilemap to ``stream`` using the current formatting.

        Any error raised by the stream propagates immediately; output written
        before the failure is left as is.
        """
        self._format(StreamSink(stream))

    def to_string(self) -> str:
        """Return exactly what :meth:`draw` would write."""
        sink = BufferSink()
        self._format(sink)
        return sink.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"TileMap({self.tile_type.__name__}, grid={self.grid}, "
            f"entries={len(self)}, formatting={self.formatting!r})"
        )

    def resolve(self, cell: Cell) -> StyledTile:
        """Return the token drawn at ``cell``: its value's tile or the default's."""
        value = self._gridmap.get(cell)
        if value is None:
            value = self.tile_type.default()
        return value.tile()

    def _format(self, sink: Sink) -> None:
        formatting = self.formatting
        logger.debug("Formatting %s with %r", self.grid, formatting)

        sink.write(NEWLINE * formatting.top_indent)
        sink.flush()
        for row in self.grid.rows():
            sink.write(NEWLINE * formatting.row_spacing)
            sink.write(INDENT_UNIT * formatting.left_indent)
            for cell in row.cells():
                sink.write(SEPARATOR_UNIT * formatting.tile_spacing)
                sink.write(str(self.resolve(cell)))
            sink.write(NEWLINE)
            sink.flush()
        sink.write(NEWLINE * formatting.bottom_indent)
        sink.flush()
