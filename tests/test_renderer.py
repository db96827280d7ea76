import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from pathgame.core.config import GameConfig
from pathgame.core.engine import Game
from pathgame.rendering.renderer import GameRenderer


class TestGameRenderer(unittest.TestCase):
    def setUp(self):
        self.config = GameConfig()
        self.renderer = GameRenderer(self.config)

    def tearDown(self):
        self.renderer.quit()

    def test_window_size(self):
        ts = self.config.TILE_SIZE
        self.assertEqual(self.renderer.screen.get_size(), (8 * ts, 8 * ts + GameRenderer.STATUS_H))

    def test_draws_barrier_tiles(self):
        game = Game(self.config)
        self.renderer.render(game)
        ts = self.config.TILE_SIZE
        # Left part of barrier (0, 2), away from its cross lines
        color = self.renderer.screen.get_at((2 * ts + 5, ts // 2))
        self.assertEqual(tuple(color)[:3], GameRenderer.BARRIER)

    def test_barriers_gone_after_powerup(self):
        game = Game(self.config)
        game.plan_route()
        game.play(delay=0)
        self.renderer.render(game)
        ts = self.config.TILE_SIZE
        color = self.renderer.screen.get_at((2 * ts + 5, ts // 2))
        self.assertNotEqual(tuple(color)[:3], GameRenderer.BARRIER)

    def test_quit_event_translated(self):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        events = self.renderer.get_events()
        self.assertIn("QUIT", [e.type for e in events])


if __name__ == "__main__":
    unittest.main()
