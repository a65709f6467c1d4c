from __future__ import annotations
from typing import Tuple

from ..board import Board, Edge
from ..parser import parse_level_str, DEFAULT_TARGET
from .io import split_on_blank_lines


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        k = 0
    return path, k


def load_level_by_id(level_id: str, target: str = DEFAULT_TARGET, exit_edge: Edge = Edge.FAR) -> Board:
    """Loads a SPECIFIC level file#idx even if the file contains many levels."""
    path, wanted = parse_level_id(level_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_on_blank_lines(content)
    if not blocks:
        raise ValueError(f"No levels found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_level_str(blocks[wanted], target=target, exit_edge=exit_edge)
