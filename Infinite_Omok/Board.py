"""Sparse board state for an unbounded grid (only occupied cells are stored)."""

from enum import IntEnum
from typing import NamedTuple


class Color(IntEnum):
    BLACK = -1
    WHITE = 1

    def opponent(self) -> "Color":
        return Color(-self.value)

    @property
    def label(self) -> str:
        return "Black" if self is Color.BLACK else "White"


class Coord(NamedTuple):
    x: int
    y: int


# Horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


class Board:
    def __init__(self):
        self.cells: dict[Coord, Color] = {}
        self.move_count = 0

    def __len__(self):
        return len(self.cells)

    def __contains__(self, pos):
        return Coord(*pos) in self.cells

    def occupant(self, x, y):
        return self.cells.get(Coord(x, y))

    def is_empty(self, x, y):
        return Coord(x, y) not in self.cells

    def place(self, x, y, color):
        """Place a stone; raise if occupied. There are no bounds."""
        if color not in (Color.BLACK, Color.WHITE):
            raise ValueError("color must be -1 (black) or 1 (white)")
        pos = Coord(x, y)
        if pos in self.cells:
            raise ValueError("cell already occupied")
        self.cells[pos] = Color(color)
        self.move_count += 1

    def stones(self):
        """Yield (Coord, Color) for every occupied cell."""
        return iter(self.cells.items())

    def clear(self):
        self.cells.clear()
        self.move_count = 0

    def count_dir(self, x, y, dx, dy, color):
        """Count contiguous stones of color from (x,y) (exclusive) in (dx,dy)."""
        count = 0
        cx, cy = x + dx, y + dy
        while self.cells.get(Coord(cx, cy)) == color:
            count += 1
            cx += dx
            cy += dy
        return count

    def run_end(self, x, y, dx, dy, color):
        """First cell past the run of color stepping from (x,y) in (dx,dy)."""
        steps = self.count_dir(x, y, dx, dy, color) + 1
        return Coord(x + dx * steps, y + dy * steps)

    def bounds(self):
        """Return (min_x, min_y, max_x, max_y) over stones, or None if empty."""
        if not self.cells:
            return None
        xs = [p.x for p in self.cells]
        ys = [p.y for p in self.cells]
        return min(xs), min(ys), max(xs), max(ys)
