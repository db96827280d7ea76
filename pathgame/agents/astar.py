from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, field
from heapq import heappush, heappop
from typing import Dict, List, Optional, Protocol, Sequence, Tuple


logger = logging.getLogger("AStar")


class PathfindingMap(Protocol):
    def get_neighbors(self, coord: Tuple[int, int]) -> List[Tuple[int, int]]:
        ...

    def is_blocked(self, coord: Tuple[int, int]) -> bool:
        ...


Coord = Tuple[int, int]


def euclidean(a: Coord, b: Coord) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def edge_cost(a: Coord, b: Coord) -> float:
    """Cost of a single move; 1 orthogonally, sqrt(2) diagonally."""
    return euclidean(a, b)


def heuristic(coord: Coord, goal: Coord) -> float:
    """Straight-line distance to ``goal``. Never overestimates ``edge_cost`` sums."""
    return euclidean(coord, goal)


def path_cost(path: Sequence[Coord]) -> float:
    return sum(edge_cost(a, b) for a, b in zip(path, path[1:]))


@dataclass(frozen=True)
class SearchNode:
    position: Coord
    g_cost: float
    h_cost: float

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


@dataclass(order=True)
class _Entry:
    priority: float
    sequence: int
    node: SearchNode = field(compare=False)


class Frontier:
    """Min-heap of search nodes keyed by ``f_cost``.

    Equal priorities pop in insertion order. Stale entries for a coordinate
    are left in place; the search skips them when popped.
    """

    def __init__(self):
        self._heap: List[_Entry] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heappush(self._heap, _Entry(node.f_cost, next(self._counter), node))

    def pop(self) -> Optional[SearchNode]:
        if not self._heap:
            return None
        return heappop(self._heap).node

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class AStar:
    def __init__(self, ignore_obstacles: bool = False):
        self.ignore_obstacles = ignore_obstacles
        self.expanded = 0

    def find_path(
        self,
        start: Coord,
        goal: Coord,
        nav_map: PathfindingMap,
    ) -> Optional[List[Coord]]:
        """Return the cheapest 8-connected path from ``start`` to ``goal``.

        Obstacles come from ``nav_map`` alone. Returns ``None`` when the goal
        cannot be reached.
        """
        self.expanded = 0

        frontier = Frontier()
        came_from: Dict[Coord, Coord] = {}
        best_cost: Dict[Coord, float] = {start: 0.0}

        frontier.push(SearchNode(start, 0.0, heuristic(start, goal)))

        while True:
            current_node = frontier.pop()
            if current_node is None:
                logger.debug("No path from %s to %s after %d expansions", start, goal, self.expanded)
                return None

            current = current_node.position
            if current == goal:
                path = self._reconstruct_path(came_from, current)
                logger.debug(
                    "Path %s -> %s: %d steps, %d expansions",
                    start, goal, len(path) - 1, self.expanded,
                )
                return path

            # Superseded by a cheaper push of the same cell
            if current_node.g_cost > best_cost[current]:
                continue
            self.expanded += 1

            for neighbor in nav_map.get_neighbors(current):
                if not self.ignore_obstacles and nav_map.is_blocked(neighbor):
                    continue
                tentative_g = best_cost[current] + edge_cost(current, neighbor)
                if tentative_g < best_cost.get(neighbor, float("inf")):
                    came_from[neighbor] = current
                    best_cost[neighbor] = tentative_g
                    frontier.push(SearchNode(neighbor, tentative_g, heuristic(neighbor, goal)))

    def _reconstruct_path(
        self,
        came_from: Dict[Coord, Coord],
        current: Coord,
    ) -> List[Coord]:
        path: List[Coord] = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path
