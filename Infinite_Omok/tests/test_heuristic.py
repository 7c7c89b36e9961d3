"""Heuristic scoring table, line figures and weight loading."""

import pytest

from Infinite_Omok.Board import Board, Color
from Infinite_Omok.ai import heuristic


def _row(xs, color=Color.BLACK, y=0):
    b = Board()
    for x in xs:
        b.place(x, y, color)
    return b


def test_occupied_cell_gets_sentinel():
    b = _row([0])
    assert heuristic.OCCUPIED_SCORE < -8 * 1_000_000
    assert heuristic.score_point(b, 0, 0, Color.BLACK) == heuristic.OCCUPIED_SCORE
    assert heuristic.score_point(b, 0, 0, Color.WHITE) < 0


def test_isolated_cell_scores_open_one_on_every_axis():
    b = Board()
    assert heuristic.score_point(b, 5, 5, Color.BLACK) == 4 * 50


@pytest.mark.parametrize(
    "length,open_ends,name",
    [
        (7, 0, "five"),
        (5, 1, "five"),
        (4, 2, "open_four"),
        (4, 1, "closed_four"),
        (4, 0, "other"),
        (3, 2, "open_three"),
        (3, 1, "closed_three"),
        (2, 2, "open_two"),
        (2, 1, "closed_two"),
        (1, 2, "open_one"),
        (1, 1, "other"),
    ],
)
def test_pattern_names(length, open_ends, name):
    assert heuristic.pattern_name(length, open_ends) == name


def test_open_four_axis_contributes_exactly_50000():
    # Three in a row; either end forms an open four on the horizontal axis.
    b = _row([0, 1, 2])
    for x in (-1, 3):
        assert heuristic.line_figure(b, x, 0, 1, 0, Color.BLACK) == (4, 2)
        assert heuristic.line_figure(b, x, 0, 1, 0, Color.WHITE) == (1, 1)
        for dx, dy in [(0, 1), (1, 1), (1, -1)]:
            assert heuristic.line_figure(b, x, 0, dx, dy, Color.BLACK) == (1, 2)
        # 50,000 on the row plus 50 for each of the three empty axes.
        assert heuristic.score_point(b, x, 0, Color.BLACK) == 50_000 + 3 * 50


def test_four_in_a_row_ends_score_equally_and_as_a_five():
    b = _row([0, 1, 2, 3])
    left = heuristic.score_point(b, -1, 0, Color.BLACK)
    right = heuristic.score_point(b, 4, 0, Color.BLACK)
    assert left == right == 1_000_000 + 3 * 50


def test_defense_values_blocking_opponent_four():
    b = _row([0, 1, 2, 3], color=Color.WHITE)
    b.place(-1, 0, Color.BLACK)
    assert heuristic.line_figure(b, 4, 0, 1, 0, Color.WHITE) == (5, 1)
    # Black at (4, 0): offense row (1, 1) = 10, block five = 900,000, other axes 50 each.
    assert heuristic.score_point(b, 4, 0, Color.BLACK) == 900_000 + 10 + 3 * 50


def test_closed_three_and_two_figures():
    b = _row([0, 1])
    b.place(-1, 0, Color.WHITE)
    assert heuristic.line_figure(b, 2, 0, 1, 0, Color.BLACK) == (3, 1)
    assert heuristic.line_figure(b, 2, 0, 1, 0, Color.WHITE) == (1, 1)
    assert heuristic.line_figure(b, 0, 1, 0, 1, Color.BLACK) == (2, 2)
    assert heuristic.line_figure(b, 5, 5, 0, 1, Color.BLACK) == (1, 2)


def test_score_is_deterministic_and_pure():
    b = _row([0, 1, 2])
    b.place(0, 1, Color.WHITE)
    before = dict(b.cells)
    first = heuristic.score_point(b, 3, 0, Color.WHITE)
    assert heuristic.score_point(b, 3, 0, Color.WHITE) == first
    assert b.cells == before


def test_default_weights_file_matches_builtin_table():
    assert heuristic.load_weights() == heuristic.DEFAULT_WEIGHTS


def test_missing_weights_file_falls_back(tmp_path):
    assert heuristic.load_weights(tmp_path / "nope.yaml") is heuristic.DEFAULT_WEIGHTS


def test_weights_override_and_unknown_key(tmp_path):
    path = tmp_path / "weights.yaml"
    path.write_text("offense:\n  open_four: 7\ndefense:\n  five: 3\n", encoding="utf-8")
    w = heuristic.load_weights(path)
    assert w.offense["open_four"] == 7
    assert w.offense["five"] == 1_000_000
    assert w.defense["five"] == 3

    bad = tmp_path / "bad.yaml"
    bad.write_text("offense:\n  six: 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        heuristic.load_weights(bad)
