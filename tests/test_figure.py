import pytest
from park_core.figure import Figure, Orientation, PlacedFigure


def test_figure_rejects_short_length():
    with pytest.raises(ValueError):
        Figure(1, Orientation.HORIZONTAL)


def test_glyphs():
    hor = Figure(3, Orientation.HORIZONTAL)
    vert = Figure(3, Orientation.VERTICAL)
    assert [hor.glyph(i) for i in range(3)] == ["<", "-", ">"]
    assert [vert.glyph(i) for i in range(3)] == ["^", "|", "v"]
    assert [Figure(2, Orientation.HORIZONTAL).glyph(i) for i in range(2)] == ["<", ">"]


def test_figures_compare_by_identity():
    a = Figure(2, Orientation.HORIZONTAL)
    b = Figure(2, Orientation.HORIZONTAL)
    assert a != b
    assert PlacedFigure(a, 0, 0) != PlacedFigure(b, 0, 0)
    assert PlacedFigure(a, 0, 0) == PlacedFigure(a, 0, 0)


def test_placed_figure_order_and_cells():
    f = Figure(2, Orientation.VERTICAL)
    p = PlacedFigure(f, 1, 2)
    assert list(p.cells()) == [(1, 2), (1, 3)]
    assert p.axis_pos == 2
    assert p.glyph_at(1, 3) == "v"
    assert PlacedFigure(f, 0, 5) < PlacedFigure(f, 1, 0)
    assert PlacedFigure(f, 1, 0) < PlacedFigure(f, 1, 1)
    assert not (p < p)


def test_move_to_and_debug_string():
    p = PlacedFigure(Figure(2, Orientation.HORIZONTAL), 0, 0)
    p.move_to(3, 1)
    assert p.position == (3, 1)
    assert p.debug_string() == "l=2 o=hor h=3 v=1"
