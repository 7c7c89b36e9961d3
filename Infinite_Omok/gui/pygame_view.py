"""Pygame renderer and input handling for an unbounded, pannable board."""

try:
    from Board import Color
    from engine import rules
    from gui.camera import Camera, KEY_PAN_CELLS
    from utils import timer
except ImportError:
    from Infinite_Omok.Board import Color
    from Infinite_Omok.engine import rules
    from Infinite_Omok.gui.camera import Camera, KEY_PAN_CELLS
    from Infinite_Omok.utils import timer


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (11, 13, 17)
    COLOR_GRID = (32, 36, 43)
    COLOR_BLACK_STONE = (230, 237, 243)
    COLOR_WHITE_STONE = (56, 189, 248)
    COLOR_TEXT = (229, 231, 235)
    COLOR_SUBTEXT = (203, 213, 225)
    COLOR_PILL_AI = (17, 24, 39)
    COLOR_PILL_HUMAN = (31, 41, 55)
    COLOR_PILL_OUTLINE = (55, 65, 81)
    COLOR_HIGHLIGHT = (56, 189, 248)
    COLOR_RED = (200, 0, 0)

    PILL_HEIGHT = 26
    PILL_TOP = 18
    PILL_PAD_X = 12
    PILL_GAP = 10

    def __init__(self, controller, window_size=(960, 720), cell_px=36.0, fps=60):
        import pygame

        self._pygame = pygame
        self.controller = controller
        self.fps = fps

        pygame.init()
        self.screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption("Infinite Omok")
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)

        self.camera = Camera(window_size[0], window_size[1], cell_px=cell_px)
        self.buttons = {}

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_grid(self):
        pygame = self._pygame
        cam = self.camera
        w, h = cam.view_w, cam.view_h
        min_x, min_y, max_x, max_y = cam.visible_range()
        for gx in range(min_x, max_x + 1):
            sx, _ = cam.cell_to_screen(gx, 0)
            pygame.draw.line(self.screen, self.COLOR_GRID, (sx, 0), (sx, h), 1)
        for gy in range(min_y, max_y + 1):
            _, sy = cam.cell_to_screen(0, gy)
            pygame.draw.line(self.screen, self.COLOR_GRID, (0, sy), (w, sy), 1)

    def _draw_stones(self, game):
        cam = self.camera
        radius = cam.cell_px * 0.4
        for (x, y), stone_color in game.stones():
            sx, sy = cam.cell_to_screen(x, y)
            if not (-cam.cell_px <= sx <= cam.view_w + cam.cell_px and -cam.cell_px <= sy <= cam.view_h + cam.cell_px):
                continue
            fill = self.COLOR_BLACK_STONE if stone_color == Color.BLACK else self.COLOR_WHITE_STONE
            self._pygame.draw.circle(self.screen, fill, (sx, sy), radius)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        sx, sy = self.camera.cell_to_screen(*last_move)
        self._pygame.draw.circle(self.screen, self.COLOR_RED, (sx, sy), self.camera.cell_px * 0.12)

    def _draw_winning_line(self, game):
        cam = self.camera
        for x, y in rules.winning_line(game.board, *game.last_move, game.winner):
            sx, sy = cam.cell_to_screen(x, y)
            self._pygame.draw.circle(self.screen, self.COLOR_HIGHLIGHT, (sx, sy), cam.cell_px * 0.46, width=2)

    def _draw_controller_pills(self):
        """Human/AI toggles; the pill of the side to move gets a bright outline."""
        pygame = self._pygame
        game = self.controller.game
        x = self.PILL_PAD_X
        self.buttons = {}
        for color in (Color.BLACK, Color.WHITE):
            label = f"{color.label}: {'Human' if self.controller.is_human(color) else 'AI'}"
            text_surface = self.font_small.render(label, True, self.COLOR_TEXT)
            rect = pygame.Rect(x, self.PILL_TOP, text_surface.get_width() + 20, self.PILL_HEIGHT)
            fill = self.COLOR_PILL_HUMAN if self.controller.is_human(color) else self.COLOR_PILL_AI
            pygame.draw.rect(self.screen, fill, rect, border_radius=self.PILL_HEIGHT // 2)
            if game.color == color and not game.is_over:
                pygame.draw.rect(self.screen, self.COLOR_HIGHLIGHT, rect, width=2, border_radius=self.PILL_HEIGHT // 2)
            else:
                pygame.draw.rect(self.screen, self.COLOR_PILL_OUTLINE, rect, width=1, border_radius=self.PILL_HEIGHT // 2)
            self.screen.blit(text_surface, text_surface.get_rect(midleft=(rect.x + 10, rect.centery)))
            self.buttons[color] = rect
            x = rect.right + self.PILL_GAP

    def _draw_winner_overlay(self, winner):
        pygame = self._pygame
        w2 = self.camera.view_w / 2
        h2 = self.camera.view_h / 2
        box = pygame.Surface((420, 120), pygame.SRCALPHA)
        box.fill((0, 0, 0, 140))
        self.screen.blit(box, box.get_rect(center=(w2, h2)))
        self._draw_text(f"{winner.label} wins!", self.font_large, self.COLOR_TEXT, (w2, h2 - 14))
        self._draw_text("Click or press R to play again", self.font_medium, self.COLOR_SUBTEXT, (w2, h2 + 26))

    def render(self):
        game = self.controller.game
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid()
        self._draw_stones(game)
        self._draw_last_move_marker(game.last_move)
        self._draw_controller_pills()
        if game.winner is not None:
            self._draw_winning_line(game)
            self._draw_winner_overlay(game.winner)
        self._pygame.display.flip()
        self.controller.dirty = False

    def _on_mouse_down(self, pos, now):
        if self.controller.game.is_over:
            self.controller.restart(now)
            return
        for color, rect in self.buttons.items():
            if rect.collidepoint(pos):
                self.controller.toggle(color, now)
                return
        self.controller.human_move(self.camera.screen_to_cell(*pos), now)

    def _on_wheel(self, event):
        pygame = self._pygame
        mods = pygame.key.get_mods()
        if mods & pygame.KMOD_SHIFT or abs(event.x) > abs(event.y):
            delta = event.x if event.x else event.y
            self.camera.pan_pixels(-delta * self.camera.cell_px)
        else:
            sx, sy = pygame.mouse.get_pos()
            self.camera.zoom_at(sx, sy, zoom_in=event.y > 0)
        self.controller.dirty = True

    def _on_key(self, key, unicode, now):
        pygame = self._pygame
        cam = self.camera
        if key == pygame.K_LEFT:
            cam.pan(-KEY_PAN_CELLS, 0)
        elif key == pygame.K_RIGHT:
            cam.pan(KEY_PAN_CELLS, 0)
        elif key == pygame.K_UP:
            cam.pan(0, -KEY_PAN_CELLS)
        elif key == pygame.K_DOWN:
            cam.pan(0, KEY_PAN_CELLS)
        elif unicode == "-":
            cam.set_zoom(cam.cell_px * 0.9)
        elif unicode in ("+", "="):
            cam.set_zoom(cam.cell_px * 1.1)
        elif unicode in ("r", "R"):
            self.controller.restart(now)
        else:
            return
        self.controller.dirty = True

    def run(self):
        """Frame loop: dispatch input, fire a due computer move, redraw when dirty."""
        pygame = self._pygame
        self.controller.start(timer.now_ms())
        running = True
        while running:
            now = timer.now_ms()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.camera.resize(event.w, event.h)
                    self.controller.dirty = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._on_mouse_down(event.pos, now)
                elif event.type == pygame.MOUSEWHEEL:
                    self._on_wheel(event)
                elif event.type == pygame.KEYDOWN:
                    self._on_key(event.key, event.unicode, now)

            self.controller.tick(now)
            if self.controller.dirty:
                self.render()
            self.clock.tick(self.fps)

    def close(self):
        self._pygame.quit()
