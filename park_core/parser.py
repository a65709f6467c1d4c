from typing import Dict, List, Tuple
from .board import Board, Edge, WinCondition
from .figure import Figure, Orientation

TOK_EMPTY = "."
TOK_COMMENT = ";"
DEFAULT_TARGET = "X"


def level_lines(level_str: str) -> List[str]:
    """Non-empty, non-comment lines of a level."""
    return [line.rstrip() for line in level_str.splitlines()
            if line.strip() != "" and not line.lstrip().startswith(TOK_COMMENT)]


def _piece_shape(label: str, cells: List[Tuple[int, int]]) -> Tuple[Orientation, int, int, int]:
    """Returns (orientation, length, hor_pos, vert_pos) for the cells of one piece."""
    hs = sorted({h for h, _ in cells})
    vs = sorted({v for _, v in cells})
    if len(cells) < 2:
        raise ValueError(f"Piece '{label}' has a single cell; pieces need length >= 2")
    if len(vs) == 1:
        orient, span = Orientation.HORIZONTAL, hs
    elif len(hs) == 1:
        orient, span = Orientation.VERTICAL, vs
    else:
        raise ValueError(f"Piece '{label}' is not a straight line")
    if len(span) != len(cells) or span[-1] - span[0] + 1 != len(cells):
        raise ValueError(f"Piece '{label}' is not contiguous")
    return orient, len(cells), hs[0], vs[0]


def parse_level_str(level_str: str, target: str = DEFAULT_TARGET, exit_edge: Edge = Edge.FAR) -> Board:
    """Parses an ASCII level into a Board.

    Supported characters:
      '.': empty cell
      letter or digit: a cell of the piece with that label
    Lines starting with ';' are comments. Short lines are padded with '.'.
    The piece labelled `target` becomes piece 0 (the one that has to reach
    `exit_edge`); the others follow in order of first appearance.
    """
    lines = level_lines(level_str)
    if not lines:
        raise ValueError("Empty level")
    length = len(lines)
    width = max(len(line) for line in lines)
    lines = [line.ljust(width, TOK_EMPTY) for line in lines]

    pieces: Dict[str, List[Tuple[int, int]]] = {}
    for v, line in enumerate(lines):
        for h, ch in enumerate(line):
            if ch == TOK_EMPTY:
                continue
            if not ch.isalnum():
                raise ValueError(f"Unexpected character {ch!r} at ({h}, {v})")
            pieces.setdefault(ch, []).append((h, v))

    if target not in pieces:
        raise ValueError(f"No target piece '{target}' found in level")

    board = Board(width, length, WinCondition(piece=0, edge=exit_edge))
    order = [target] + [label for label in pieces if label != target]
    for label in order:
        orient, n, h, v = _piece_shape(label, pieces[label])
        board.add_figure(Figure(n, orient), h, v)
    return board


def parse_level_file(path: str, target: str = DEFAULT_TARGET, exit_edge: Edge = Edge.FAR) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), target=target, exit_edge=exit_edge)
