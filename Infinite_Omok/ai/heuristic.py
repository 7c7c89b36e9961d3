"""Per-cell move scoring: offensive and defensive line figures on each axis."""

from pathlib import Path
import yaml

try:
    from Board import Board, Color, DIRECTIONS
except ImportError:
    from Infinite_Omok.Board import Board, Color, DIRECTIONS

OCCUPIED_SCORE = -10**9  # below any reachable score, never selected

PATTERN_NAMES = (
    "five",
    "open_four",
    "closed_four",
    "open_three",
    "closed_three",
    "open_two",
    "closed_two",
    "open_one",
    "other",
)

# Completing our own five outranks blocking theirs; every lower tier keeps
# the same offense-over-defense ordering.
DEFAULT_OFFENSE = {
    "five": 1_000_000,
    "open_four": 50_000,
    "closed_four": 20_000,
    "open_three": 10_000,
    "closed_three": 1_000,
    "open_two": 500,
    "closed_two": 100,
    "open_one": 50,
    "other": 10,
}

DEFAULT_DEFENSE = {
    "five": 900_000,
    "open_four": 40_000,
    "closed_four": 15_000,
    "open_three": 8_000,
    "closed_three": 800,
    "open_two": 0,
    "closed_two": 0,
    "open_one": 0,
    "other": 0,
}


class Weights:
    def __init__(self, offense=None, defense=None):
        self.offense = dict(DEFAULT_OFFENSE)
        self.defense = dict(DEFAULT_DEFENSE)
        for table, overrides in ((self.offense, offense), (self.defense, defense)):
            for name, value in (overrides or {}).items():
                if name not in PATTERN_NAMES:
                    raise ValueError(f"Unknown pattern name: {name!r}")
                table[name] = int(value)

    def __eq__(self, other):
        return isinstance(other, Weights) and self.offense == other.offense and self.defense == other.defense

    def __repr__(self):
        return f"Weights(offense={self.offense!r}, defense={self.defense!r})"


DEFAULT_WEIGHTS = Weights()


def load_weights(path="config/weights.yaml"):
    """Load score tables from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Infinite_Omok.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return DEFAULT_WEIGHTS

    return Weights(offense=data.get("offense"), defense=data.get("defense"))


def pattern_name(length: int, open_ends: int) -> str:
    """Classify a (run length, open ends) figure."""
    if length >= 5:
        return "five"
    names = {
        (4, 2): "open_four",
        (4, 1): "closed_four",
        (3, 2): "open_three",
        (3, 1): "closed_three",
        (2, 2): "open_two",
        (2, 1): "closed_two",
        (1, 2): "open_one",
    }
    return names.get((length, open_ends), "other")


def line_figure(board: Board, x: int, y: int, dx: int, dy: int, color: int):
    """
    Figure of the run `color` would form through (x, y) along (dx, dy).
    Returns (length, open_ends): length counts (x, y) itself, open_ends counts
    the run's two termini that land on an empty cell.
    """
    forward = board.count_dir(x, y, dx, dy, color)
    backward = board.count_dir(x, y, -dx, -dy, color)
    open_ends = 0
    if board.is_empty(*board.run_end(x, y, dx, dy, color)):
        open_ends += 1
    if board.is_empty(*board.run_end(x, y, -dx, -dy, color)):
        open_ends += 1
    return 1 + forward + backward, open_ends


def score_point(board: Board, x: int, y: int, color: int, weights: Weights = None) -> int:
    """
    Score playing `color` at (x, y): sum over the four axes of the offensive
    value of our own run plus the defensive value of blocking the opponent's.
    """
    if not board.is_empty(x, y):
        return OCCUPIED_SCORE
    weights = weights or DEFAULT_WEIGHTS
    opp = Color(color).opponent()

    total = 0
    for dx, dy in DIRECTIONS:
        total += weights.offense[pattern_name(*line_figure(board, x, y, dx, dy, color))]
        total += weights.defense[pattern_name(*line_figure(board, x, y, dx, dy, opp))]
    return total
