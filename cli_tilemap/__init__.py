"""cli_tilemap
=================================

Draw sparse 2D tilemaps of user-defined entities as styled terminal text.

Import surface::

    from cli_tilemap import Cell, Grid, GridMap, Formatting, Tile, TileMap, styled

* :mod:`cli_tilemap.grid`: ``Cell`` coordinates, ``Grid`` bounds and the
  sparse ``GridMap`` store.
* :mod:`cli_tilemap.tile`: the ``Tile`` protocol (``tile()`` + ``default()``)
  and ``StyledTile`` tokens built on ``rich`` styles.
* :mod:`cli_tilemap.formatting`: spacing / indentation rules.
* :mod:`cli_tilemap.tilemap`: the ``TileMap`` renderer.

See :mod:`cli_tilemap.examples.entities` for a small runnable example.
"""

from .formatting import Formatting
from .grid import Cell, Grid, GridMap
from .tile import StyledTile, Tile, styled
from .tilemap import TileMap

__all__ = [
    "Cell",
    "Formatting",
    "Grid",
    "GridMap",
    "StyledTile",
    "Tile",
    "TileMap",
    "styled",
]
