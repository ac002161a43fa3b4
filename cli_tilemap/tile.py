"""Tile capability and styled tokens.

Any type rendered by :class:`cli_tilemap.tilemap.TileMap` implements the
:class:`Tile` protocol:

* ``tile()`` maps an instance to a :class:`StyledTile` (text plus a ``rich``
  :class:`~rich.style.Style`). It must be a pure function of the value.
* ``default()`` (classmethod) returns the canonical instance drawn for every
  unoccupied cell.

Example::

    class Entity(StrEnum):
        HERO = auto()
        AIR = auto()

        def tile(self) -> StyledTile:
            if self is Entity.HERO:
                return styled("[&]", "bold green")
            return styled("[-]", "bold bright_black")

        @classmethod
        def default(cls) -> "Entity":
            return cls.AIR

Widths are not checked or padded; pick labels of equal width if columns
should line up.
"""

from dataclasses import dataclass
from typing import Protocol, TypeVar, Union, runtime_checkable

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text


@dataclass(frozen=True)
class StyledTile:
    """Styled textual token for a single grid cell.

    Attributes:
        content: Display label, e.g. ``"[&]"``.
        style: Terminal attributes (color, bold, ...). ``Style.null()`` means plain text.
    """

    content: str
    style: Style = Style.null()

    def ansi(self, color_system: ColorSystem = ColorSystem.TRUECOLOR) -> str:
        """Return ``content`` wrapped in SGR escape sequences for ``style``."""
        return self.style.render(self.content, color_system=color_system)

    def to_text(self) -> Text:
        """Return the token as ``rich`` ``Text`` for printing via a ``Console``."""
        return Text(self.content, style=self.style)

    def __str__(self) -> str:
        return self.ansi()


def styled(content: str, style: Union[str, Style] = "") -> StyledTile:
    """Build a :class:`StyledTile` from a ``rich`` style definition or ``Style``."""
    if isinstance(style, str):
        style = Style.parse(style)
    return StyledTile(content, style)


TileT = TypeVar("TileT", bound="Tile")


@runtime_checkable
class Tile(Protocol):
    def tile(self) -> StyledTile: ...

    @classmethod
    def default(cls: type[TileT]) -> TileT: ...


def require_tile_type(tile_type: type) -> None:
    """Raise ``TypeError`` unless ``tile_type`` provides ``tile`` and ``default``."""
    missing = [
        name
        for name in ("tile", "default")
        if not callable(getattr(tile_type, name, None))
    ]
    if missing:
        raise TypeError(
            f"{tile_type.__name__} cannot be rendered as a tile, missing: {', '.join(missing)}"
        )
