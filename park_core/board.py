from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .figure import Figure, PlacedFigure

__all__ = [
    "EMPTY",
    "FORWARD",
    "BACK",
    "Edge",
    "WinCondition",
    "Move",
    "Board",
    "Key",
]

EMPTY = -1
FORWARD = 1
BACK = -1

# canonical state: (hor_pos, vert_pos) of every piece, in piece order
Key = Tuple[Tuple[int, int], ...]


class Edge(Enum):
    NEAR = "near"  # coordinate 0 along the piece axis
    FAR = "far"    # last cell along the piece axis


@dataclass(frozen=True)
class WinCondition:
    """Which piece has to reach which edge of the grid, along its own axis."""

    piece: int = 0
    edge: Edge = Edge.FAR


@dataclass(frozen=True)
class Move:
    piece: int
    step: int  # FORWARD or BACK

    def apply(self, board: Board) -> None:
        if self.step == FORWARD:
            board.move_forward(self.piece)
        else:
            board.move_back(self.piece)

    def __str__(self) -> str:
        return f"#{self.piece} {'forward' if self.step == FORWARD else 'back'}"


@total_ordering
class Board:
    """
    Full puzzle state: grid size, placed pieces and an occupancy index.

    The occupancy index is a flat int8 array (idx = vert*width + hor) holding
    the index of the piece on each cell, or EMPTY. It is always rebuilt from
    the piece list on copy and never shared between boards.

    Boards compare piece by piece in index order, so only boards derived from
    one initial instance can be compared.
    """

    MAX_FIGURES = 12

    def __init__(self, width: int, length: int, win: Optional[WinCondition] = None) -> None:
        if width <= 0 or length <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{length}")
        self.width = width
        self.length = length
        self.win = win if win is not None else WinCondition()
        self.figures: List[PlacedFigure] = []
        self._cells = np.full(width * length, EMPTY, dtype=np.int8)

    # ---- construction

    def add_figure(self, figure: Figure, hor_pos: int, vert_pos: int) -> PlacedFigure:
        if len(self.figures) >= self.MAX_FIGURES:
            raise ValueError(f"Too many figures: at most {self.MAX_FIGURES} per board")
        pfig = PlacedFigure(figure, hor_pos, vert_pos)
        for h, v in pfig.cells():
            if not self.in_bounds(h, v):
                raise ValueError(f"Figure {pfig.debug_string()} leaves the {self.width}x{self.length} grid")
            if self.figure_at(h, v) is not None:
                raise ValueError(f"Figure {pfig.debug_string()} overlaps figure #{self.figure_at(h, v)}")
        self.figures.append(pfig)
        self._mark(len(self.figures) - 1)
        return pfig

    def copy(self) -> Board:
        other = Board(self.width, self.length, self.win)
        other.figures = [pfig.copy() for pfig in self.figures]
        other._rebuild()
        return other

    def key(self) -> Key:
        return tuple(pfig.position for pfig in self.figures)

    def load(self, key: Key) -> None:
        """Move every piece to the positions stored in `key` (same instance only)."""
        assert len(key) == len(self.figures)
        for pfig, (h, v) in zip(self.figures, key):
            pfig.move_to(h, v)
        self._rebuild()

    def with_positions(self, key: Key) -> Board:
        other = self.copy()
        other.load(key)
        return other

    # ---- occupancy

    def in_bounds(self, hor_pos: int, vert_pos: int) -> bool:
        return 0 <= hor_pos < self.width and 0 <= vert_pos < self.length

    def figure_at(self, hor_pos: int, vert_pos: int) -> Optional[int]:
        idx = int(self._cells[vert_pos * self.width + hor_pos])
        return None if idx == EMPTY else idx

    def occupancy(self) -> np.ndarray:
        return self._cells.copy()

    def _set(self, idx: Optional[int], hor_pos: int, vert_pos: int) -> None:
        cell = vert_pos * self.width + hor_pos
        assert idx is None or self._cells[cell] == EMPTY
        self._cells[cell] = EMPTY if idx is None else idx

    def _mark(self, idx: int) -> None:
        for h, v in self.figures[idx].cells():
            self._set(idx, h, v)

    def _rebuild(self) -> None:
        self._cells = np.full(self.width * self.length, EMPTY, dtype=np.int8)
        for idx in range(len(self.figures)):
            self._mark(idx)

    def check_consistency(self) -> bool:
        """Rebuild the index from the pieces and compare it with the live one.

        Also fails on pieces outside the grid or overlapping each other.
        """
        expected = np.full(self.width * self.length, EMPTY, dtype=np.int8)
        for idx, pfig in enumerate(self.figures):
            for h, v in pfig.cells():
                if not self.in_bounds(h, v):
                    return False
                cell = v * self.width + h
                if expected[cell] != EMPTY:
                    return False
                expected[cell] = idx
        return bool(np.array_equal(expected, self._cells))

    # ---- moves

    def _extent(self, pfig: PlacedFigure) -> int:
        return self.width if pfig.figure.horizontal else self.length

    def _step_cell(self, pfig: PlacedFigure, offset: int) -> Tuple[int, int]:
        if pfig.figure.horizontal:
            return (pfig.hor_pos + offset, pfig.vert_pos)
        return (pfig.hor_pos, pfig.vert_pos + offset)

    def can_move_forward(self, idx: int) -> bool:
        pfig = self.figures[idx]
        if pfig.axis_pos + pfig.figure.length >= self._extent(pfig):
            return False
        h, v = self._step_cell(pfig, pfig.figure.length)
        return self.figure_at(h, v) is None

    def can_move_back(self, idx: int) -> bool:
        pfig = self.figures[idx]
        if pfig.axis_pos == 0:
            return False
        h, v = self._step_cell(pfig, -1)
        return self.figure_at(h, v) is None

    def move_forward(self, idx: int) -> None:
        assert self.can_move_forward(idx), f"figure #{idx} cannot move forward"
        pfig = self.figures[idx]
        assert self.figure_at(pfig.hor_pos, pfig.vert_pos) == idx
        self._set(None, pfig.hor_pos, pfig.vert_pos)
        self._set(idx, *self._step_cell(pfig, pfig.figure.length))
        pfig.move_to(*self._step_cell(pfig, 1))

    def move_back(self, idx: int) -> None:
        assert self.can_move_back(idx), f"figure #{idx} cannot move back"
        pfig = self.figures[idx]
        tail = self._step_cell(pfig, pfig.figure.length - 1)
        assert self.figure_at(*tail) == idx
        self._set(None, *tail)
        self._set(idx, *self._step_cell(pfig, -1))
        pfig.move_to(*self._step_cell(pfig, -1))

    def legal_moves(self) -> Iterable[Move]:
        for idx in range(len(self.figures)):
            if self.can_move_forward(idx):
                yield Move(idx, FORWARD)
            if self.can_move_back(idx):
                yield Move(idx, BACK)

    # ---- state properties

    def is_win(self) -> bool:
        if self.win.piece >= len(self.figures):
            return False
        pfig = self.figures[self.win.piece]
        if self.win.edge is Edge.NEAR:
            return pfig.axis_pos == 0
        return pfig.axis_pos == self._extent(pfig) - pfig.figure.length

    # ---- comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.figures == other.figures

    def __lt__(self, other: Board) -> bool:
        for mine, theirs in zip(self.figures, other.figures):
            if mine == theirs:
                continue
            return mine < theirs
        return False

    __hash__ = None  # mutable; use key() for hashing

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.length}, {len(self.figures)} figures)"
