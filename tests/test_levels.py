import os
import pytest
from park_core.levels.io import iterate_level_strings, count_pieces, dims, filter_level
from park_core.levels.resolve import load_level_by_id, parse_level_id

LEVELS = os.path.join(os.path.dirname(__file__), "..", "park_core", "levels")
CLASSIC = os.path.join(LEVELS, "examples", "classic.txt")


def test_examples_iterate():
    pairs = list(iterate_level_strings(LEVELS, ["examples", "missing"]))
    assert len(pairs) == 7
    (ref0, s0) = pairs[0]
    assert ref0.path.endswith("classic.txt") and ref0.index == 0
    assert "XXB." in s0
    assert ref0.level_id == f"{ref0.path}#0"


def test_level_stats():
    _, s0 = next(iterate_level_strings(LEVELS, ["examples"]))
    assert count_pieces(s0) == 2
    assert dims(s0) == (4, 4)
    assert filter_level(s0, max_w=4, max_h=4, min_p=2, max_p=2)
    assert not filter_level(s0, max_w=3, max_h=None, min_p=None, max_p=None)
    assert not filter_level("XX.\n..A", max_w=None, max_h=None, min_p=None, max_p=None)


def test_load_level_by_id():
    board = load_level_by_id(f"{CLASSIC}#1")
    assert board.width == 6 and board.length == 6
    assert len(board.figures) == 8
    assert board.figures[0].position == (0, 2)
    assert len(load_level_by_id(CLASSIC).figures) == 2
    with pytest.raises(IndexError):
        load_level_by_id(f"{CLASSIC}#9")


def test_parse_level_id():
    assert parse_level_id("a/b.txt#3") == ("a/b.txt", 3)
    assert parse_level_id("a/b.txt") == ("a/b.txt", 0)
    assert parse_level_id("a/b.txt#x") == ("a/b.txt", 0)
