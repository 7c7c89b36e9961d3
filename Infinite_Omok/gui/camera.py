"""Viewport transform between screen pixels and unbounded grid cells."""

import math

MIN_CELL_PX = 12.0
MAX_CELL_PX = 80.0
ZOOM_STEP = 1.1
KEY_PAN_CELLS = 3.0


class Camera:
    def __init__(self, view_w, view_h, cell_px=36.0, cam_x=0.0, cam_y=0.0):
        self.view_w = float(view_w)
        self.view_h = float(view_h)
        self.cell_px = float(cell_px)
        self.cam_x = float(cam_x)
        self.cam_y = float(cam_y)

    def resize(self, view_w, view_h):
        self.view_w = float(view_w)
        self.view_h = float(view_h)

    def screen_to_cell_f(self, sx, sy):
        x = (sx - self.view_w / 2.0) / self.cell_px + self.cam_x
        y = (sy - self.view_h / 2.0) / self.cell_px + self.cam_y
        return x, y

    def screen_to_cell(self, sx, sy):
        """Nearest grid intersection to a screen point."""
        x, y = self.screen_to_cell_f(sx, sy)
        return int(math.floor(x + 0.5)), int(math.floor(y + 0.5))

    def cell_to_screen(self, x, y):
        sx = (x - self.cam_x) * self.cell_px + self.view_w / 2.0
        sy = (y - self.cam_y) * self.cell_px + self.view_h / 2.0
        return sx, sy

    def pan(self, dx_cells, dy_cells):
        self.cam_x += dx_cells
        self.cam_y += dy_cells

    def pan_pixels(self, dx_px):
        self.cam_x += dx_px / max(self.cell_px, 1.0)

    def set_zoom(self, cell_px):
        """Clamp and apply a new cell size; returns False if nothing changed."""
        new = min(max(cell_px, MIN_CELL_PX), MAX_CELL_PX)
        if abs(new - self.cell_px) < 1e-9:
            return False
        self.cell_px = new
        return True

    def zoom_at(self, sx, sy, zoom_in):
        """Zoom one step keeping the cell under (sx, sy) fixed on screen."""
        cell_x, cell_y = self.screen_to_cell_f(sx, sy)
        target = self.cell_px * ZOOM_STEP if zoom_in else self.cell_px / ZOOM_STEP
        if not self.set_zoom(target):
            return False
        self.cam_x = cell_x - (sx - self.view_w / 2.0) / self.cell_px
        self.cam_y = cell_y - (sy - self.view_h / 2.0) / self.cell_px
        return True

    def visible_range(self):
        """(min_x, min_y, max_x, max_y) of grid lines that can appear on screen."""
        half_w = (self.view_w / 2.0) / self.cell_px
        half_h = (self.view_h / 2.0) / self.cell_px
        return (
            math.floor(self.cam_x - half_w - 1.0),
            math.floor(self.cam_y - half_h - 1.0),
            math.ceil(self.cam_x + half_w + 1.0),
            math.ceil(self.cam_y + half_h + 1.0),
        )
