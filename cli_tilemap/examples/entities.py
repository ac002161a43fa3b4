"""Demo entity set.

A three-variant :class:`Entity` enum drawn as ``[@]`` (enemy), ``[&]`` (hero)
and ``[-]`` (air, the default for empty cells), plus helpers that build and
draw a 5x5 map.

Example::

    from cli_tilemap.examples.entities import demo

    demo()  # draws to stdout, then redraws with wider spacing
"""

import sys
from enum import StrEnum, auto
from typing import IO, Any, Optional

from cli_tilemap.formatting import Formatting
from cli_tilemap.grid import Cell
from cli_tilemap.tile import StyledTile, styled
from cli_tilemap.tilemap import TileMap


class Entity(StrEnum):
    """Demo entities: an enemy, the hero and empty air (the default)."""

    ENEMY = auto()
    HERO = auto()
    AIR = auto()

    def tile(self) -> StyledTile:
        return ENTITY_TILES[self]

    @classmethod
    def default(cls) -> "Entity":
        return cls.AIR


ENTITY_TILES = {
    Entity.AIR: styled("[-]", "bold bright_black"),
    Entity.HERO: styled("[&]", "bold green"),
    Entity.ENEMY: styled("[@]", "bold red"),
}


def generate(
    width: int = 5, depth: int = 5, formatting: Optional[Formatting] = None
) -> TileMap[Entity]:
    """Build a small demo map with one hero and one enemy."""
    tilemap = TileMap(Entity, width, depth, formatting)
    tilemap.insert(Cell(min(3, width - 1), min(3, depth - 1)), Entity.ENEMY)
    tilemap.insert(Cell(min(1, width - 1), 0), Entity.HERO)
    return tilemap


def demo(stream: Optional[IO[Any]] = None) -> None:
    """Draw the demo map, then redraw it with wider spacing."""
    stream = stream if stream is not None else sys.stdout
    tilemap = generate()
    tilemap.draw(stream)
    tilemap.formatting.row_spacing = 2
    tilemap.formatting.tile_spacing = 4
    tilemap.draw(stream)


if __name__ == "__main__":
    demo()
