"""Match controller: deferred computer moves, controller toggles and restarts."""

from Infinite_Omok.Board import Color
from Infinite_Omok.Match import Controller, MatchController
from Infinite_Omok.Omokgame import Omokgame


def test_human_move_queues_computer_reply():
    m = MatchController(Omokgame(), black=Controller.HUMAN, white=Controller.AI, ai_delay_ms=100)
    m.start(0)
    assert m.ai_due_at is None
    assert m.human_move((0, 0), 1000)
    assert m.ai_due_at == 1100
    assert not m.tick(1099)
    assert len(m.game.board) == 1
    assert m.tick(1100)
    assert len(m.game.board) == 2
    assert m.game.color is Color.BLACK
    assert m.ai_due_at is None


def test_board_clicks_ignored_on_computer_turn():
    m = MatchController(Omokgame(), black=Controller.HUMAN, white=Controller.AI)
    m.start(0)
    assert m.human_move((0, 0), 0)
    assert not m.human_move((1, 1), 1)
    assert len(m.game.board) == 1


def test_computer_vs_computer_keeps_requeueing():
    m = MatchController(Omokgame(), black=Controller.AI, white=Controller.AI, ai_delay_ms=10)
    m.start(0)
    assert m.ai_due_at == 10
    now = 10
    for _ in range(12):
        if m.game.is_over:
            break
        assert m.tick(now)
        now += 10
    assert len(m.game.board) >= 9
    assert m.game.is_over or m.ai_due_at == now


def test_toggle_side_to_move():
    m = MatchController(Omokgame(), black=Controller.HUMAN, white=Controller.HUMAN)
    m.start(0)
    m.toggle(Color.BLACK, 50)
    assert m.controllers[Color.BLACK] is Controller.AI
    assert m.ai_due_at == 130
    m.toggle(Color.BLACK, 60)
    assert m.controllers[Color.BLACK] is Controller.HUMAN
    assert m.ai_due_at is None


def test_toggle_other_side_does_not_queue():
    m = MatchController(Omokgame(), black=Controller.HUMAN, white=Controller.HUMAN)
    m.start(0)
    m.toggle(Color.WHITE, 5)
    assert m.controllers[Color.WHITE] is Controller.AI
    assert m.ai_due_at is None


def test_any_click_after_win_restarts():
    m = MatchController(Omokgame(), black=Controller.HUMAN, white=Controller.HUMAN)
    m.start(0)
    for mv in [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1), (3, 0), (3, 1), (4, 0)]:
        assert m.human_move(mv, 0)
    assert m.game.winner is Color.BLACK
    assert not m.tick(10**9)
    assert not m.human_move((7, 7), 5)
    assert m.game.stones() == []
    assert m.game.color is Color.BLACK


def test_restart_queues_computer_when_black_is_ai():
    m = MatchController(Omokgame(), black=Controller.AI, white=Controller.HUMAN, ai_delay_ms=120)
    m.start(0)
    m.tick(120)
    m.restart(500)
    assert m.game.stones() == []
    assert m.ai_due_at == 620


def test_stalemate_when_frontier_is_empty():
    lines = []
    m = MatchController(Omokgame(), black=Controller.AI, white=Controller.AI, ai_delay_ms=0, logger=lines.append)
    m.start(0)
    m.game.frontier = set()
    assert not m.tick(0)
    assert m.ai_due_at is None
    assert lines[-1].startswith("Stalemate")
