import pytest
from park_core.board import Board, Edge
from park_core.figure import Orientation
from park_core.parser import parse_level_str

LVL = """
; 4x4 test board
XXB.
..B.
..B.
....
"""


def test_parse_basic():
    board = parse_level_str(LVL)
    assert board.width == 4 and board.length == 4
    assert len(board.figures) == 2
    x, b = board.figures
    assert x.figure.length == 2 and x.figure.orientation is Orientation.HORIZONTAL
    assert x.position == (0, 0)
    assert b.figure.length == 3 and b.figure.orientation is Orientation.VERTICAL
    assert b.position == (2, 0)
    assert board.check_consistency()


def test_target_becomes_first_piece():
    board = parse_level_str("BB.\nXX.\n")
    assert board.figures[0].position == (0, 1)
    assert board.figures[1].position == (0, 0)
    assert board.win.piece == 0


def test_custom_target_and_exit():
    board = parse_level_str("..AA\nBB..", target="B", exit_edge=Edge.NEAR)
    assert board.figures[0].position == (0, 1)
    assert board.win.edge is Edge.NEAR
    assert board.is_win()


def test_short_lines_are_padded():
    board = parse_level_str("XX..\nA\nA")
    assert board.width == 4 and board.length == 3
    assert board.figures[1].figure.orientation is Orientation.VERTICAL
    assert board.figures[1].position == (0, 1)


@pytest.mark.parametrize("lvl", [
    "",
    "; only a comment",
    "AA..\n....",       # no target
    "XX.\n..A",         # single-cell piece
    "XX.\nAA.\nA..",    # bent piece
    "XX.A.A",           # split piece
    "XX#.",             # unknown character
])
def test_malformed_levels(lvl):
    with pytest.raises(ValueError):
        parse_level_str(lvl)


def test_too_many_pieces():
    row = "XABCDEFGHIJKL"
    with pytest.raises(ValueError):
        parse_level_str(row + "\n" + row)
    assert Board.MAX_FIGURES == 12
