from __future__ import annotations
from typing import Dict, List, Optional
import time

from park_core.board import Board, Move, FORWARD, BACK
from .state_cache import StateCache

Result = Dict[str, object]


def reconstruct(cache: StateCache, handle: int, start: Board) -> List[Board]:
    return [start.with_positions(key) for key in cache.trace_path(handle)]


def solve(
    start: Board,
    time_limit_s: Optional[float] = None,
    node_limit: Optional[int] = None,
) -> Result:
    """Breadth-first search for a shortest move sequence that wins `start`.

    The frontier is an append-only list of cache handles walked by a cursor,
    so states are expanded in non-decreasing distance order and the first
    winning state found is a shortest solution. Neighbours are generated by
    applying a move to one working board, recording the new state and undoing
    the move right away. Limits are only checked between frontier steps.

    `termination` is one of "solved", "unsolvable", "timeout", "node_limit".
    """
    t0 = time.time()
    cache = StateCache()
    board = start.copy()
    frontier: List[int] = [cache.record(board.key())]

    cursor = 0
    found: Optional[int] = None
    termination = "unsolvable"

    def visit(parent: int, move: Move) -> None:
        key = board.key()
        if key not in cache:
            frontier.append(cache.record(key, parent, move))

    while cursor < len(frontier):
        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            termination = "timeout"
            break
        if node_limit is not None and cursor >= node_limit:
            termination = "node_limit"
            break

        handle = frontier[cursor]
        board.load(cache.state(handle))
        if board.is_win():
            found = handle
            termination = "solved"
            break

        for idx in range(len(board.figures)):
            if board.can_move_forward(idx):
                board.move_forward(idx)
                visit(handle, Move(idx, FORWARD))
                board.move_back(idx)
            if board.can_move_back(idx):
                board.move_back(idx)
                visit(handle, Move(idx, BACK))
                board.move_forward(idx)
        cursor += 1

    runtime = time.time() - t0
    res: Result = {
        "success": found is not None,
        "termination": termination,
        "nodes": cursor,
        "discovered": len(cache),
        "runtime": runtime,
    }
    if found is None:
        return res
    moves = cache.trace_moves(found)
    res.update({
        "solution_len": len(moves),
        "path": reconstruct(cache, found, start),
        "moves": moves,
    })
    return res
