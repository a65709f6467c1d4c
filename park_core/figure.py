from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

__all__ = [
    "Orientation",
    "Figure",
    "PlacedFigure",
]


class Orientation(Enum):
    HORIZONTAL = "hor"
    VERTICAL = "vert"


# glyphs for (first cell, body, last cell)
_GLYPHS = {
    Orientation.HORIZONTAL: ("<", "-", ">"),
    Orientation.VERTICAL: ("^", "|", "v"),
}


@dataclass(frozen=True, eq=False)
class Figure:
    """
    Immutable shape of one piece: its length and the axis it slides along.

    Compared by identity: two figures with the same fields are still two
    different pieces.
    """

    length: int
    orientation: Orientation

    def __post_init__(self) -> None:
        if self.length < 2:
            raise ValueError(f"Figure length must be >= 2, got {self.length}")

    @property
    def horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def glyph(self, offset: int) -> str:
        first, body, last = _GLYPHS[self.orientation]
        if offset == 0:
            return first
        if offset == self.length - 1:
            return last
        return body

    def debug_string(self) -> str:
        return f"l={self.length} o={self.orientation.value}"


class PlacedFigure:
    """A figure bound to the grid cell of its leading (lowest-index) cell.

    Holds no invariants of its own; the board does all legality checks and
    occupancy bookkeeping around `move_to`.
    """

    __slots__ = ("figure", "hor_pos", "vert_pos")

    def __init__(self, figure: Figure, hor_pos: int, vert_pos: int) -> None:
        self.figure = figure
        self.hor_pos = hor_pos
        self.vert_pos = vert_pos

    def move_to(self, hor_pos: int, vert_pos: int) -> None:
        self.hor_pos = hor_pos
        self.vert_pos = vert_pos

    @property
    def position(self) -> Tuple[int, int]:
        return (self.hor_pos, self.vert_pos)

    @property
    def axis_pos(self) -> int:
        """Coordinate along the figure's own axis."""
        return self.hor_pos if self.figure.horizontal else self.vert_pos

    def cells(self) -> Iterator[Tuple[int, int]]:
        h, v = self.hor_pos, self.vert_pos
        if self.figure.horizontal:
            for i in range(self.figure.length):
                yield (h + i, v)
        else:
            for i in range(self.figure.length):
                yield (h, v + i)

    def glyph_at(self, hor_pos: int, vert_pos: int) -> str:
        if self.figure.horizontal:
            return self.figure.glyph(hor_pos - self.hor_pos)
        return self.figure.glyph(vert_pos - self.vert_pos)

    def copy(self) -> PlacedFigure:
        return PlacedFigure(self.figure, self.hor_pos, self.vert_pos)

    # ---- ordering: figure identity first, then position

    def _order_key(self) -> Tuple[int, int, int]:
        return (id(self.figure), self.hor_pos, self.vert_pos)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlacedFigure):
            return NotImplemented
        return (self.figure is other.figure
                and self.hor_pos == other.hor_pos
                and self.vert_pos == other.vert_pos)

    def __lt__(self, other: PlacedFigure) -> bool:
        return self._order_key() < other._order_key()

    __hash__ = None  # mutable

    def debug_string(self) -> str:
        return f"{self.figure.debug_string()} h={self.hor_pos} v={self.vert_pos}"

    def __repr__(self) -> str:
        return f"PlacedFigure({self.debug_string()})"
