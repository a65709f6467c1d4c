from .board import Board

TOK_EMPTY = "."


def render_ascii(board: Board) -> str:
    """ASCII visualization of the occupancy grid."""
    out_lines = []
    for v in range(board.length):
        row_chars = []
        for h in range(board.width):
            idx = board.figure_at(h, v)
            if idx is None:
                row_chars.append(TOK_EMPTY)
            else:
                row_chars.append(board.figures[idx].glyph_at(h, v))
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def render_debug(board: Board) -> str:
    """Piece list followed by the grid."""
    out_lines = [f"figure#{i}: {pfig.debug_string()}" for i, pfig in enumerate(board.figures)]
    out_lines.append(render_ascii(board))
    return "\n".join(out_lines)
