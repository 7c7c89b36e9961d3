"""Move validation for the turn engine."""


def check_move(move, board, winner=None):
    """
    Validate a move against coordinate shape, game state and occupancy.
    Raises ValueError on invalid moves.
    """
    if winner is not None:
        raise ValueError("Game already over")

    try:
        x, y = move
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed move: {move!r}") from exc
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise ValueError(f"Move coordinates must be integers: {move!r}")

    if not board.is_empty(x, y):
        raise ValueError("Cell already occupied")

    return True
