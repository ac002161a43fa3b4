"""Layout configuration for drawing a tilemap."""

from dataclasses import dataclass


@dataclass
class Formatting:
    """Instructions for :class:`cli_tilemap.tilemap.TileMap` on how to lay out a map.

    All fields are plain repeat counts; zero disables that kind of spacing.
    Changes take effect on the next draw.

    Attributes:
        row_spacing: Extra newlines emitted before every row.
        tile_spacing: Spaces emitted before every tile.
        top_indent: Newlines emitted before the map.
        left_indent: Tabs emitted at the start of every row.
        bottom_indent: Newlines emitted after the map.
    """

    row_spacing: int = 1
    tile_spacing: int = 1
    top_indent: int = 3
    left_indent: int = 1
    bottom_indent: int = 2
