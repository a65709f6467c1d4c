from park_core.board import Move, FORWARD, BACK
from search.state_cache import StateCache

ROOT = ((0, 0), (2, 0))
S1 = ((0, 0), (2, 1))
S2 = ((1, 0), (2, 1))


def test_record_and_contains():
    cache = StateCache()
    root = cache.record(ROOT)
    assert root == 0
    assert cache.contains(ROOT) and ROOT in cache
    assert S1 not in cache
    h1 = cache.record(S1, root, Move(1, FORWARD))
    assert h1 == 1
    assert cache.canonical_ref(S1) == h1
    assert cache.state(h1) == S1
    assert cache.parent(root) is None
    assert cache.parent(h1) == root
    assert len(cache) == 2


def test_first_recorder_wins():
    cache = StateCache()
    root = cache.record(ROOT)
    h1 = cache.record(S1, root, Move(1, FORWARD))
    h2 = cache.record(S2, h1, Move(0, FORWARD))
    assert cache.record(S1, h2, Move(0, BACK)) == h1
    assert cache.parent(h1) == root
    assert cache.move(h1) == Move(1, FORWARD)
    assert cache.record(ROOT, h2) == root
    assert cache.parent(root) is None
    assert len(cache) == 3


def test_trace():
    cache = StateCache()
    root = cache.record(ROOT)
    h1 = cache.record(S1, root, Move(1, FORWARD))
    h2 = cache.record(S2, h1, Move(0, FORWARD))
    assert cache.trace_path(h2) == [ROOT, S1, S2]
    assert cache.trace_moves(h2) == [Move(1, FORWARD), Move(0, FORWARD)]
    assert cache.trace_path(root) == [ROOT]
    assert cache.trace_moves(root) == []
