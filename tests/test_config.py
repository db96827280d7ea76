import json
import os
import tempfile
import unittest
from dataclasses import fields

from pathgame.core.config import ConfigError, GameConfig, from_dict, load_config


class TestConfig(unittest.TestCase):
    def test_defaults_match_reference_board(self):
        config = GameConfig()
        self.assertEqual(config.GRID_SIZE, 8)
        self.assertEqual(config.START, (0, 0))
        self.assertEqual(config.DESTINATION, (4, 7))
        self.assertEqual(set(config.BARRIERS), {(row, 2) for row in range(8)})
        self.assertEqual(config.POWERUP, (5, 0))
        self.assertEqual(config.STEP_DELAY, 0.5)

    def test_only_used_colors_are_configured(self):
        names = {f.name for f in fields(GameConfig)}
        self.assertIn("WHITE", names)
        self.assertFalse(names & {"BLACK", "RED", "GREEN", "BLUE"})

    def test_from_dict_accepts_lowercase_keys_and_lists(self):
        config = from_dict({
            "grid_size": 5,
            "start": [1, 1],
            "destination": [4, 4],
            "barriers": [[2, 2], [3, 2]],
            "powerup": None,
        })
        self.assertEqual(config.GRID_SIZE, 5)
        self.assertEqual(config.START, (1, 1))
        self.assertEqual(config.BARRIERS, ((2, 2), (3, 2)))
        self.assertIsNone(config.POWERUP)

    def test_unknown_key(self):
        with self.assertRaises(ConfigError):
            from_dict({"speed": 3})

    def test_coordinate_outside_grid(self):
        with self.assertRaises(ConfigError):
            from_dict({"destination": [8, 0]})

    def test_barriers_must_fit_resized_grid(self):
        with self.assertRaises(ConfigError):
            from_dict({"grid_size": 4, "destination": [3, 3], "powerup": None})

    def test_malformed_coordinate(self):
        with self.assertRaises(ConfigError):
            from_dict({"start": "0,0,0"})

    def test_negative_delay(self):
        with self.assertRaises(ConfigError):
            from_dict({"step_delay": -1})

    def test_barriers_must_be_a_list(self):
        for value in (None, 5, "0,2"):
            with self.subTest(value=value):
                with self.assertRaises(ConfigError):
                    from_dict({"barriers": value})

    def test_barrier_entries_must_be_pairs(self):
        with self.assertRaises(ConfigError):
            from_dict({"barriers": [[1, 2], 3]})

    def test_step_delay_must_be_a_number(self):
        for value in ("fast", None, True):
            with self.subTest(value=value):
                with self.assertRaises(ConfigError):
                    from_dict({"step_delay": value})

    def test_load_config_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "board.json")
            with open(path, "w") as f:
                json.dump({"HAZARD": [7, 7], "STEP_DELAY": 0}, f)
            config = load_config(path)
        self.assertEqual(config.HAZARD, (7, 7))
        self.assertEqual(config.STEP_DELAY, 0)
        self.assertEqual(config.DESTINATION, (4, 7))

    def test_load_config_rejects_bad_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "board.json")
            with open(path, "w") as f:
                f.write("{not json")
            with self.assertRaises(ConfigError):
                load_config(path)

    def test_load_config_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config("/nonexistent/board.json")


if __name__ == "__main__":
    unittest.main()
