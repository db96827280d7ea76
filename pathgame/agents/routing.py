import logging
from dataclasses import dataclass
from typing import List, Optional

from pathgame.agents.astar import AStar, Coord, path_cost
from pathgame.world.grid import Grid


logger = logging.getLogger("Routing")


class UnreachableGoalError(Exception):
    """Neither the direct route nor the powerup route reaches the goal."""

    def __init__(self, start: Coord, goal: Coord):
        super().__init__(f"No path from {start} to {goal}")
        self.start = start
        self.goal = goal


@dataclass(frozen=True)
class RoutePlan:
    path: List[Coord]
    via_waypoint: bool
    direct_cost: Optional[float] = None

    @property
    def cost(self) -> float:
        return path_cost(self.path)

    @property
    def steps(self) -> int:
        return len(self.path) - 1


def join_legs(first: List[Coord], second: List[Coord]) -> List[Coord]:
    """Concatenate two legs that meet at a shared coordinate."""
    if first and second and first[-1] == second[0]:
        return first + second[1:]
    return first + second


class RoutingPolicy:
    """
    Chooses between going straight for the goal and detouring through a
    waypoint first.

    When both waypoint legs exist the detour is taken; the direct path is
    only a fallback. Each leg is a separate search with its own state.
    """
    def __init__(self, navigator: Optional[AStar] = None):
        self.navigator = navigator or AStar()

    def plan(
        self,
        start: Coord,
        goal: Coord,
        grid: Grid,
        waypoint: Optional[Coord] = None,
        after_waypoint: Optional[Grid] = None,
    ) -> RoutePlan:
        """Plan a route to ``goal``.

        ``after_waypoint`` is the board in force once the waypoint has been
        collected; it defaults to ``grid``.
        """
        direct = self.navigator.find_path(start, goal, grid)
        direct_cost = path_cost(direct) if direct is not None else None

        if waypoint is not None:
            to_waypoint = self.navigator.find_path(start, waypoint, grid)
            from_waypoint = self.navigator.find_path(waypoint, goal, after_waypoint or grid)

            if to_waypoint is not None and from_waypoint is not None:
                path = join_legs(to_waypoint, from_waypoint)
                logger.info("Routing %s -> %s via waypoint %s (%d steps)", start, goal, waypoint, len(path) - 1)
                return RoutePlan(path=path, via_waypoint=True, direct_cost=direct_cost)

            logger.info("Waypoint %s unusable, falling back to direct route", waypoint)

        if direct is None:
            logger.warning("Goal %s unreachable from %s", goal, start)
            raise UnreachableGoalError(start, goal)

        logger.info("Routing %s -> %s directly (%d steps)", start, goal, len(direct) - 1)
        return RoutePlan(path=direct, via_waypoint=False, direct_cost=direct_cost)
