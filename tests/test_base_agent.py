import unittest

from pathgame.agents.base_agent import BaseAgent


class TestBaseAgent(unittest.TestCase):
    def test_set_path_skips_current_cell(self):
        agent = BaseAgent(id=1, row=0, col=0)
        agent.set_path([(0, 0), (1, 1), (2, 2)])
        self.assertTrue(agent.has_path)
        self.assertEqual(agent.update(), (1, 1))
        self.assertEqual(agent.position, (1, 1))

    def test_update_runs_out_of_path(self):
        agent = BaseAgent(id=1, row=3, col=3)
        agent.set_path([(3, 4)])
        self.assertEqual(agent.update(), (3, 4))
        self.assertFalse(agent.has_path)
        self.assertIsNone(agent.update())
        self.assertEqual(agent.position, (3, 4))

    def test_path_to_own_cell_is_empty(self):
        agent = BaseAgent(id=1, row=2, col=5)
        agent.set_path([(2, 5)])
        self.assertFalse(agent.has_path)
        self.assertIsNone(agent.update())

    def test_agent_only_follows_paths(self):
        # Planning lives in RoutingPolicy
        self.assertFalse(hasattr(BaseAgent, "plan_path"))
        self.assertFalse(hasattr(BaseAgent, "set_navigator"))


if __name__ == "__main__":
    unittest.main()
