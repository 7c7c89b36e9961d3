"""Greedy move selection over the frontier."""

from Infinite_Omok.Board import Board, Color, Coord
from Infinite_Omok.ai import heuristic, move_selector
from Infinite_Omok.engine.frontier import origin_block, rebuild_frontier
from Infinite_Omok.Omokgame import Omokgame


def _board(black=(), white=()):
    b = Board()
    for x, y in black:
        b.place(x, y, Color.BLACK)
    for x, y in white:
        b.place(x, y, Color.WHITE)
    return b


def test_empty_board_choice_is_in_origin_block():
    b = Board()
    pos, score = move_selector.best_move(b, rebuild_frontier(b), Color.BLACK)
    assert pos in origin_block()
    assert score == 200


def test_selection_is_repeatable():
    b = _board(black=[(0, 0), (2, 1)], white=[(1, 1)])
    f = rebuild_frontier(b)
    first = move_selector.best_move(b, f, Color.WHITE)
    assert move_selector.best_move(b, set(sorted(f, reverse=True)), Color.WHITE) == first


def test_open_four_is_extended():
    b = _board(black=[(0, 0), (1, 0), (2, 0), (3, 0)])
    pos, _ = move_selector.best_move(b, rebuild_frontier(b), Color.BLACK)
    assert pos in {Coord(-1, 0), Coord(4, 0)}


def test_own_win_beats_blocking():
    b = _board(
        black=[(0, 0), (1, 0), (2, 0), (3, 0)],
        white=[(0, 5), (1, 5), (2, 5), (3, 5)],
    )
    pos, score = move_selector.best_move(b, rebuild_frontier(b), Color.BLACK)
    assert pos in {Coord(-1, 0), Coord(4, 0)}
    assert score >= 1_000_000


def test_blocks_opponent_five():
    b = _board(black=[(-1, 5)], white=[(0, 5), (1, 5), (2, 5), (3, 5)])
    pos, score = move_selector.best_move(b, rebuild_frontier(b), Color.BLACK)
    assert pos == Coord(4, 5)
    assert score >= 900_000


def test_empty_frontier_yields_none():
    assert move_selector.best_move(Board(), set(), Color.BLACK) is None


def test_best_move_is_a_maximizer():
    b = _board(black=[(0, 0), (1, 0), (2, 0)], white=[(0, 1)])
    f = rebuild_frontier(b)
    pos, score = move_selector.best_move(b, f, Color.BLACK)
    assert pos in f
    assert score == max(heuristic.score_point(b, x, y, Color.BLACK) for x, y in f)


def test_engine_best_move_defaults_to_side_to_move_and_does_not_mutate():
    g = Omokgame()
    for move in [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1), (3, 0)]:
        assert g.attempt_move(move)
    before = g.snapshot()
    # White to move must stop the open four; a defensive reply sits on an end.
    pos, _ = g.best_move()
    assert pos in {Coord(-1, 0), Coord(4, 0)}
    assert g.snapshot() == before
