"""Candidate move set: empty cells in a square neighbourhood of existing stones."""

try:
    from Board import Board, Coord
except ImportError:
    from Infinite_Omok.Board import Board, Coord

FRONTIER_RADIUS = 2


def origin_block(radius: int = FRONTIER_RADIUS) -> set[Coord]:
    return {Coord(dx, dy) for dx in range(-radius, radius + 1) for dy in range(-radius, radius + 1)}


def rebuild_frontier(board: Board, radius: int = FRONTIER_RADIUS) -> set[Coord]:
    """
    Recompute the frontier from scratch.
    - Empty board: the (2r+1)^2 block centred on the origin.
    - Otherwise: every empty cell within Chebyshev distance `radius` of a stone.
    """
    if not len(board):
        return origin_block(radius)

    frontier: set[Coord] = set()
    cells = board.cells
    for ox, oy in cells:
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                q = Coord(ox + dx, oy + dy)
                if q not in cells:
                    frontier.add(q)
    return frontier
