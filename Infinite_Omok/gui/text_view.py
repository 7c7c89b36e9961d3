"""Plain-text rendering of the occupied part of an unbounded board."""

try:
    from Board import Color
    from engine import rules
except ImportError:
    from Infinite_Omok.Board import Color
    from Infinite_Omok.engine import rules

SYMBOLS = {Color.BLACK: "X", Color.WHITE: "O"}
EMPTY = "."
LAST = {Color.BLACK: "x", Color.WHITE: "o"}
WIN = "*"

# Widest window drawn along either axis; distant stones fall outside it.
MAX_SPAN = 25


def _axis_window(lo, hi, focus, margin):
    lo, hi = lo - margin, hi + margin
    if hi - lo + 1 <= MAX_SPAN:
        return lo, hi
    half = MAX_SPAN // 2
    return focus - half, focus + half


def view_window(game, margin=2):
    """(min_x, min_y, max_x, max_y) to draw: all stones if they fit, else around the last move."""
    bounds = game.board.bounds()
    if bounds is None:
        return -margin, -margin, margin, margin
    min_x, min_y, max_x, max_y = bounds
    fx, fy = game.last_move if game.last_move is not None else (min_x, min_y)
    x0, x1 = _axis_window(min_x, max_x, fx, margin)
    y0, y1 = _axis_window(min_y, max_y, fy, margin)
    return x0, y0, x1, y1


def render_ascii(game, margin=2):
    """Render stones plus `margin` empty cells around them, with axis labels."""
    min_x, min_y, max_x, max_y = view_window(game, margin)
    winning = set()
    if game.winner is not None and game.last_move is not None:
        winning = set(rules.winning_line(game.board, *game.last_move, game.winner))

    width = max(len(str(v)) for v in (min_x, max_x, min_y, max_y)) + 1
    lines = [" " * width + "".join(f"{x:>{width}}" for x in range(min_x, max_x + 1))]
    for y in range(min_y, max_y + 1):
        row = []
        for x in range(min_x, max_x + 1):
            color = game.board.occupant(x, y)
            if color is None:
                mark = EMPTY
            elif (x, y) in winning:
                mark = WIN
            elif game.last_move == (x, y):
                mark = LAST[color]
            else:
                mark = SYMBOLS[color]
            row.append(f"{mark:>{width}}")
        lines.append(f"{y:>{width}}" + "".join(row))
    return "\n".join(lines)


def status_line(game, controllers=None):
    if game.winner is not None:
        return f"{game.winner.label} wins!"
    msg = f"{game.color.label} to move"
    if controllers:
        msg += f" ({controllers[game.color].value})"
    return msg
