import math
import traceback

import pygame

from pathgame.core.config import GameConfig


# ── Helper utilities ──────────────────────────────────────────────────

def _lerp_color(c1, c2, t):
    """Linearly interpolate between two RGB colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(c1[0] + (c2[0] - c1[0]) * t),
        int(c1[1] + (c2[1] - c1[1]) * t),
        int(c1[2] + (c2[2] - c1[2]) * t),
    )


def _cell_center(coord, ts):
    row, col = coord
    return (col * ts + ts // 2, row * ts + ts // 2)


# ══════════════════════════════════════════════════════════════════════
#  RENDERER
# ══════════════════════════════════════════════════════════════════════

class GameRenderer:
    """
    Draws the board in a Pygame window.
    Decoupled from core logic – receives the game to draw.

    Layout:  [ board (size x TILE_SIZE square) ]
             [ status bar                      ]
    """

    STATUS_H = 44
    STATUS_BG = (14, 14, 20)
    STATUS_BORDER = (40, 110, 200)

    # ── Colour palette ───────────────────────────────────────────────
    FLOOR = (58, 56, 62)
    FLOOR_ALT = (50, 48, 53)
    BARRIER = (16, 16, 20)
    BARRIER_EDGE = (90, 90, 102)
    DESTINATION = (40, 200, 85)
    POWERUP = (255, 200, 50)
    HAZARD = (210, 55, 55)
    PLAYER = (45, 175, 220)
    PLAYER_RIM = (125, 225, 255)
    PATH = (200, 140, 255)

    STATUS_TEXT = {
        "running": ("Moving...", (80, 200, 255)),
        "won":     ("Destination reached!", (80, 255, 120)),
        "lost":    ("Lost!", (255, 80, 80)),
        "quit":    ("Stopped", (140, 145, 170)),
    }

    # ── Initialisation ────────────────────────────────────────────────

    def __init__(self, config: GameConfig = None):
        self.config = config or GameConfig()
        pygame.init()

        self.board_px = self.config.GRID_SIZE * self.config.TILE_SIZE
        self.win_w = self.board_px
        self.win_h = self.board_px + self.STATUS_H

        self.screen = pygame.display.set_mode((self.win_w, self.win_h))
        pygame.display.set_caption(self.config.TITLE)
        self.clock = pygame.time.Clock()

        self.font_md = pygame.font.SysFont("Consolas", 15)
        self.font_md_b = pygame.font.SysFont("Consolas", 15, bold=True)

        self._anim_tick = 0

    # ── Public API ────────────────────────────────────────────────────

    def get_events(self):
        events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                class QuitEvent:
                    type = "QUIT"
                events.append(QuitEvent())
        return events

    def render(self, game):
        try:
            self._anim_tick += 1
            self.screen.fill((10, 10, 14))

            self._render_tiles(game)
            self._render_path(game)
            self._render_markers(game)
            self._render_player(game)
            self._render_status(game)

            pygame.display.flip()
        except pygame.error as e:
            print(f"Renderer Error: {e}")
            traceback.print_exc()

    def tick(self, fps: int):
        self.clock.tick(fps)

    def quit(self):
        pygame.quit()

    # ══════════════════════════════════════════════════════════════════
    #  BOARD
    # ══════════════════════════════════════════════════════════════════

    def _render_tiles(self, game) -> None:
        ts = self.config.TILE_SIZE
        for row in range(game.size):
            for col in range(game.size):
                rect = pygame.Rect(col * ts, row * ts, ts, ts)
                if (row, col) in game.barriers:
                    pygame.draw.rect(self.screen, self.BARRIER, rect)
                    pygame.draw.line(self.screen, self.BARRIER_EDGE, rect.topleft, rect.bottomright, 2)
                    pygame.draw.line(self.screen, self.BARRIER_EDGE, rect.topright, rect.bottomleft, 2)
                else:
                    color = self.FLOOR if (row + col) % 2 == 0 else self.FLOOR_ALT
                    pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, (30, 30, 36), rect, 1)

    def _render_path(self, game) -> None:
        """Remaining planned route as a polyline."""
        player = game.player
        remaining = player.path[max(player._path_index - 1, 0):]
        if len(remaining) < 2:
            return
        ts = self.config.TILE_SIZE
        points = [_cell_center(coord, ts) for coord in remaining]
        pygame.draw.lines(self.screen, self.PATH, False, points, 3)

    def _render_markers(self, game) -> None:
        ts = self.config.TILE_SIZE
        pulse = 0.5 + 0.5 * math.sin(self._anim_tick * 0.2)

        cx, cy = _cell_center(game.destination, ts)
        half = ts // 3
        pygame.draw.rect(self.screen, self.DESTINATION, (cx - half, cy - half, half * 2, half * 2), 3)

        if game.powerup is not None and not game.has_powerup:
            cx, cy = _cell_center(game.powerup, ts)
            radius = int(ts * 0.2 + ts * 0.06 * pulse)
            pygame.draw.circle(self.screen, self.POWERUP, (cx, cy), radius)

        if game.hazard is not None:
            cx, cy = _cell_center(game.hazard, ts)
            r = ts // 4
            pts = [(cx, cy - r), (cx + r, cy + r), (cx - r, cy + r)]
            pygame.draw.polygon(self.screen, self.HAZARD, pts)

    def _render_player(self, game) -> None:
        ts = self.config.TILE_SIZE
        cx, cy = _cell_center(game.position, ts)
        glow = _lerp_color(self.PLAYER, self.PLAYER_RIM, 0.5 + 0.5 * math.sin(self._anim_tick * 0.3))
        pygame.draw.circle(self.screen, self.PLAYER, (cx, cy), ts // 3)
        pygame.draw.circle(self.screen, glow, (cx, cy), ts // 3, 2)

    def _render_status(self, game) -> None:
        top = self.board_px
        pygame.draw.rect(self.screen, self.STATUS_BG, (0, top, self.win_w, self.STATUS_H))
        pygame.draw.line(self.screen, self.STATUS_BORDER, (0, top), (self.win_w, top), 2)

        label, color = self.STATUS_TEXT.get(game.status.value, ("", self.config.WHITE))
        title = self.font_md_b.render(label, True, color)
        self.screen.blit(title, (8, top + 6))

        info = f"Moves: {game.moves}  Powerup: {'yes' if game.has_powerup else 'no'}"
        text = self.font_md.render(info, True, (200, 205, 220))
        self.screen.blit(text, (8, top + 24))
