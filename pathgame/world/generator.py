import random
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set

from pathgame.world.grid import Coord, Grid


@dataclass(frozen=True)
class Scenario:
    seed: int
    size: int
    start: Coord
    destination: Coord
    barriers: FrozenSet[Coord]
    powerup: Optional[Coord] = None

    @property
    def grid(self) -> Grid:
        return Grid(size=self.size, obstacles=self.barriers)


class ScenarioGenerator:
    """
    Seeded random boards for batch runs.

    Barriers are either scattered noise or a wall across one column with a
    few random gaps, which is the layout where collecting the powerup
    matters.
    """
    def __init__(self, size: int = 8, seed: int = None, density: float = 0.2, wall_chance: float = 0.5):
        self.size = size
        self.seed = seed if seed is not None else random.randint(0, 1000000)
        self.rng = random.Random(self.seed)
        self.density = density
        self.wall_chance = wall_chance

    def generate(self) -> Scenario:
        # Stage 1: pick distinct special cells
        start, destination, powerup = self.rng.sample(self._all_cells(), 3)

        # Stage 2: lay barriers
        if self.rng.random() < self.wall_chance:
            barriers = self._wall_barriers(start, destination)
        else:
            barriers = self._scattered_barriers()

        # Stage 3: keep special cells walkable
        barriers -= {start, destination, powerup}

        return Scenario(
            seed=self.seed,
            size=self.size,
            start=start,
            destination=destination,
            barriers=frozenset(barriers),
            powerup=powerup,
        )

    def _all_cells(self) -> List[Coord]:
        return [(r, c) for r in range(self.size) for c in range(self.size)]

    def _scattered_barriers(self) -> Set[Coord]:
        return {cell for cell in self._all_cells() if self.rng.random() < self.density}

    def _wall_barriers(self, start: Coord, destination: Coord) -> Set[Coord]:
        # Put the wall between start and destination when they are apart.
        lo, hi = sorted((start[1], destination[1]))
        if hi - lo >= 2:
            column = self.rng.randint(lo + 1, hi - 1)
        else:
            column = self.rng.randrange(self.size)

        gaps = self.rng.randint(0, 2)
        gap_rows = set(self.rng.sample(range(self.size), gaps))
        return {(row, column) for row in range(self.size) if row not in gap_rows}
