"""Greedy move selection: maximize the heuristic over the frontier."""

try:
    from ai import heuristic
except ImportError:
    from Infinite_Omok.ai import heuristic


def _tie_key(pos):
    """Among equal scores prefer cells nearer the origin, then smaller (y, x)."""
    x, y = pos
    return (x * x + y * y, y, x)


def best_move(board, frontier, color, weights=None):
    """
    Return (Coord, score) for a maximal-scoring frontier cell, or None when the
    frontier is empty.
    """
    best = None
    best_key = None
    for pos in frontier:
        score = heuristic.score_point(board, pos[0], pos[1], color, weights)
        key = (-score, _tie_key(pos))
        if best_key is None or key < best_key:
            best, best_key = (pos, score), key
    return best
