"""Turn engine: legality, placement, win check, turn switch and frontier rebuild."""

from enum import Enum

try:
    from Board import Board, Color, Coord
    from engine import frontier as frontier_mod, referee, rules
    from ai import move_selector
except ImportError:
    from Infinite_Omok.Board import Board, Color, Coord
    from Infinite_Omok.engine import frontier as frontier_mod, referee, rules
    from Infinite_Omok.ai import move_selector


class Phase(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"


def _silent(_message):
    pass


class Omokgame:
    def __init__(self, logger=_silent, weights=None, frontier_radius=frontier_mod.FRONTIER_RADIUS):
        self.board = Board()
        self.logger = logger
        self.weights = weights
        self.frontier_radius = frontier_radius
        self.color = Color.BLACK  # black starts
        self.winner = None
        self.last_move = None
        self.frontier = frontier_mod.rebuild_frontier(self.board, self.frontier_radius)

    @property
    def phase(self):
        return Phase.WON if self.winner is not None else Phase.IN_PROGRESS

    @property
    def state(self):
        """(Phase, Color): the side to move while in progress, the winner once won."""
        if self.winner is not None:
            return Phase.WON, self.winner
        return Phase.IN_PROGRESS, self.color

    @property
    def is_over(self):
        return self.winner is not None

    def stones(self):
        return list(self.board.stones())

    def occupant(self, x, y):
        return self.board.occupant(x, y)

    def attempt_move(self, move):
        """Play `move` for the side to move. Returns False (state untouched) if illegal."""
        try:
            referee.check_move(move, self.board, self.winner)
        except ValueError as exc:
            self.logger(f"Rejected: {self.color.label} {move!r} - {exc}")
            return False

        pos = Coord(*move)
        self.board.place(pos.x, pos.y, self.color)
        self.last_move = pos
        self.logger(f"Move {self.board.move_count}: {'B' if self.color == Color.BLACK else 'W'} {tuple(pos)}")

        if rules.wins_at(self.board, pos.x, pos.y, self.color):
            self.winner = self.color
            self.logger(f"Winner: {self.color.label}")
        else:
            self.color = self.color.opponent()

        self.frontier = frontier_mod.rebuild_frontier(self.board, self.frontier_radius)
        return True

    def best_move(self, color=None):
        """Return (Coord, score) maximizing the heuristic over the frontier, or None."""
        if color is None:
            color = self.color
        return move_selector.best_move(self.board, self.frontier, color, self.weights)

    def reset(self):
        self.board.clear()
        self.color = Color.BLACK
        self.winner = None
        self.last_move = None
        self.frontier = frontier_mod.rebuild_frontier(self.board, self.frontier_radius)
        self.logger("Reset")

    def snapshot(self):
        """Comparable view of the full game state."""
        return (
            dict(self.board.cells),
            self.color,
            self.winner,
            self.last_move,
            frozenset(self.frontier),
        )


# Functional facade for presentation layers.

def new_game(logger=_silent, weights=None):
    return Omokgame(logger=logger, weights=weights)


def attempt_move(game, coord):
    return game.attempt_move(coord), game


def best_move(game, color=None):
    result = game.best_move(color)
    return result[0] if result is not None else None


def reset(game):
    game.reset()
    return game
