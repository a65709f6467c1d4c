from __future__ import annotations
from typing import Dict, List, Optional
from park_core.board import Key, Move

class StateCache:
    """Visited states of one solve, stored in an append-only arena.

    States are canonical keys (Board.key()). Every recorded state gets a
    stable integer handle; parent links are handles into the same arena,
    the root's parent is None. Nothing is ever removed or overwritten.
    """
    def __init__(self) -> None:
        self._handles: Dict[Key, int] = {}
        self._states: List[Key] = []
        self._parents: List[Optional[int]] = []
        self._moves: List[Optional[Move]] = []

    def record(self, state: Key, parent: Optional[int] = None, move: Optional[Move] = None) -> int:
        """Insert `state` if absent; the first recorder's parent wins. Returns its handle."""
        handle = self._handles.get(state)
        if handle is not None:
            return handle
        assert parent is None or 0 <= parent < len(self._states)
        handle = len(self._states)
        self._handles[state] = handle
        self._states.append(state)
        self._parents.append(parent)
        self._moves.append(move)
        return handle

    def contains(self, state: Key) -> bool:
        return state in self._handles

    __contains__ = contains

    def canonical_ref(self, state: Key) -> int:
        return self._handles[state]

    def state(self, handle: int) -> Key:
        return self._states[handle]

    def parent(self, handle: int) -> Optional[int]:
        return self._parents[handle]

    def move(self, handle: int) -> Optional[Move]:
        return self._moves[handle]

    def _chain(self, handle: int) -> List[int]:
        chain = [handle]
        cur = self._parents[handle]
        while cur is not None:
            chain.append(cur)
            cur = self._parents[cur]
        chain.reverse()
        return chain

    def trace_path(self, handle: int) -> List[Key]:
        """States from the root to `handle`, both included."""
        return [self._states[h] for h in self._chain(handle)]

    def trace_moves(self, handle: int) -> List[Move]:
        return [self._moves[h] for h in self._chain(handle)[1:]]  # type: ignore

    def __len__(self) -> int:
        return len(self._states)
