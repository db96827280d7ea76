import csv
import time
import cProfile
import pstats
import logging
from typing import Dict, List

from pathgame.agents.astar import AStar
from pathgame.agents.routing import RoutingPolicy, UnreachableGoalError
from pathgame.world.generator import ScenarioGenerator

# Keep per-route logging out of batch runs
logging.getLogger("Routing").setLevel(logging.WARNING)
logging.getLogger("AStar").setLevel(logging.WARNING)


class _CountingAStar(AStar):
    """AStar that sums expansions over every search it runs."""

    def __init__(self):
        super().__init__()
        self.total_expanded = 0

    def find_path(self, start, goal, nav_map):
        path = super().find_path(start, goal, nav_map)
        self.total_expanded += self.expanded
        return path


def run_scenario(seed: int, size: int = 8) -> Dict:
    scenario = ScenarioGenerator(size=size, seed=seed).generate()
    navigator = _CountingAStar()
    policy = RoutingPolicy(navigator)
    grid = scenario.grid

    row = {
        "seed": seed,
        "size": size,
        "barriers": len(scenario.barriers),
        "outcome": "unreachable",
        "steps": None,
        "cost": None,
        "direct_cost": None,
    }
    try:
        plan = policy.plan(
            scenario.start,
            scenario.destination,
            grid,
            waypoint=scenario.powerup,
            after_waypoint=grid.without_obstacles(),
        )
    except UnreachableGoalError:
        pass
    else:
        row["outcome"] = "via_powerup" if plan.via_waypoint else "direct"
        row["steps"] = plan.steps
        row["cost"] = round(plan.cost, 3)
        if plan.direct_cost is not None:
            row["direct_cost"] = round(plan.direct_cost, 3)
    row["expanded"] = navigator.total_expanded
    return row


def run_matches(num_matches=100, size=8, export_path="simulation_results.csv") -> List[Dict]:
    results = []
    start_time = time.time()

    print(f"Planning {num_matches} random scenarios on a {size}x{size} grid...")

    for i in range(num_matches):
        # Unique seed for each scenario
        results.append(run_scenario(seed=1000 + i, size=size))

        if (i + 1) % 10 == 0:
            print(f"Completed {i + 1}/{num_matches} scenarios...")

    end_time = time.time()
    print(f"Finished in {end_time - start_time:.2f} seconds.")

    if results and export_path:
        keys = results[0].keys()
        with open(export_path, 'w', newline='') as f:
            dict_writer = csv.DictWriter(f, fieldnames=keys)
            dict_writer.writeheader()
            dict_writer.writerows(results)
        print(f"Results exported to {export_path}")

    if results:
        outcomes = [r["outcome"] for r in results]
        solved = [r for r in results if r["steps"] is not None]
        print("\n--- Summary ---")
        print(f"Direct:      {outcomes.count('direct') / len(results):.2%}")
        print(f"Via powerup: {outcomes.count('via_powerup') / len(results):.2%}")
        print(f"Unreachable: {outcomes.count('unreachable') / len(results):.2%}")
        if solved:
            print(f"Average route length: {sum(r['steps'] for r in solved) / len(solved):.1f} steps")
        print(f"Average expansions: {sum(r['expanded'] for r in results) / len(results):.1f}")

    return results


if __name__ == "__main__":
    # Run with profiling
    profiler = cProfile.Profile()
    profiler.enable()

    run_matches(100)

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('cumtime')
    stats.print_stats(20)
