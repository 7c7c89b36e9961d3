"""Win detection: five or more in a row through the last placed stone."""

try:
    from Board import Board, DIRECTIONS
except ImportError:
    from Infinite_Omok.Board import Board, DIRECTIONS

WIN_LENGTH = 5


def wins_at(board: Board, x: int, y: int, color: int) -> bool:
    """Assumes the stone is already placed. Overlines count as wins."""
    for dx, dy in DIRECTIONS:
        forward = board.count_dir(x, y, dx, dy, color)
        backward = board.count_dir(x, y, -dx, -dy, color)
        if 1 + forward + backward >= WIN_LENGTH:
            return True
    return False


def winning_line(board: Board, x: int, y: int, color: int):
    """Return the coordinates of the first 5+ run through (x, y), or []."""
    for dx, dy in DIRECTIONS:
        forward = board.count_dir(x, y, dx, dy, color)
        backward = board.count_dir(x, y, -dx, -dy, color)
        if 1 + forward + backward >= WIN_LENGTH:
            start = (x - dx * backward, y - dy * backward)
            return [(start[0] + dx * i, start[1] + dy * i) for i in range(1 + forward + backward)]
    return []
