"""Match controller: owns one game, per-side controllers and computer-move pacing."""

from enum import Enum

try:
    from Board import Color
    from Omokgame import Omokgame
    from Player import AIPlayer
    from utils import timer
except ImportError:
    from Infinite_Omok.Board import Color
    from Infinite_Omok.Omokgame import Omokgame
    from Infinite_Omok.Player import AIPlayer
    from Infinite_Omok.utils import timer

AI_DELAY_MS = 120.0
TOGGLE_DELAY_MS = 80.0


class Controller(Enum):
    HUMAN = "human"
    AI = "ai"

    def toggled(self):
        return Controller.AI if self is Controller.HUMAN else Controller.HUMAN


class MatchController:
    """
    Driven by an external loop: input handlers call `human_move`, `toggle` and
    `restart`, and the loop calls `tick(now)` once per frame. A computer move is
    deferred to `ai_due_at` (a one-shot timer in milliseconds) and played by the
    first tick at or after that time.
    """

    def __init__(self, game=None, black=Controller.HUMAN, white=Controller.AI, ai_delay_ms=AI_DELAY_MS, logger=None):
        self.game = game if game is not None else Omokgame()
        self.controllers = {Color.BLACK: Controller(black), Color.WHITE: Controller(white)}
        self.ai_delay_ms = ai_delay_ms
        self.logger = logger or self.game.logger
        self.ai_due_at = None
        self.dirty = True

    def is_human(self, color):
        return self.controllers[color] is Controller.HUMAN

    def is_ai_turn(self):
        return not self.game.is_over and not self.is_human(self.game.color)

    def queue_ai(self, now, delay_ms=None):
        self.ai_due_at = now + (self.ai_delay_ms if delay_ms is None else delay_ms)

    def _after_change(self, now):
        self.dirty = True
        if self.is_ai_turn():
            self.queue_ai(now)
        else:
            self.ai_due_at = None

    def start(self, now):
        self._after_change(now)

    def tick(self, now):
        """Play the pending computer move if it is due. Returns True if a move was made."""
        if not self.is_ai_turn() or not timer.due(self.ai_due_at, now):
            return False
        try:
            move = AIPlayer(self.game.color).next_move(self.game)
        except ValueError as exc:
            self.logger(f"Stalemate: {exc}")
            self.ai_due_at = None
            return False
        played = self.game.attempt_move(move)
        self._after_change(now)
        return played

    def human_move(self, coord, now):
        """Apply a human placement. After a win, any board action starts a new game."""
        if self.game.is_over:
            self.restart(now)
            return False
        if not self.is_human(self.game.color):
            return False
        played = self.game.attempt_move(coord)
        if played:
            self._after_change(now)
        return played

    def toggle(self, color, now):
        color = Color(color)
        self.controllers[color] = self.controllers[color].toggled()
        self.logger(f"{color.label}: {self.controllers[color].value}")
        self.dirty = True
        if self.is_ai_turn() and self.game.color == color:
            self.queue_ai(now, TOGGLE_DELAY_MS)
        elif not self.is_ai_turn():
            self.ai_due_at = None

    def restart(self, now):
        self.game.reset()
        self._after_change(now)
