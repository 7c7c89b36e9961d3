"""Player interface for human or computer controllers."""

try:
    from Board import Coord
except ImportError:
    from Infinite_Omok.Board import Coord


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, game):
        """Return (x, y) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, game):
        """Text-input player; raises ValueError on unparsable input."""
        raw = self.input_fn(f"{self.color.label} move as 'x y' (any integers): ").strip()
        return parse_move(raw)


class AIPlayer(Player):
    def next_move(self, game):
        result = game.best_move(self.color)
        if result is None:
            raise ValueError("No candidate moves")
        return result[0]


def parse_move(raw):
    """Parse 'x y' or 'x,y' into a Coord of signed integers."""
    try:
        x_str, y_str = raw.replace(",", " ").split()
        return Coord(int(x_str), int(y_str))
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers") from exc
