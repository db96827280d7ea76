from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Tuple


Coord = Tuple[int, int]

# (d_row, d_col) offsets of the 8-connected neighbourhood
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True)
class Grid:
    """Square board of ``size`` x ``size`` cells addressed as (row, col).

    The obstacle set is a snapshot taken at construction time; a board with
    its barriers cleared is a new ``Grid``.
    """

    size: int
    obstacles: FrozenSet[Coord] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        # Accept any iterable of coordinates from callers.
        if not isinstance(self.obstacles, frozenset):
            object.__setattr__(self, "obstacles", frozenset(self.obstacles))

    @classmethod
    def with_obstacles(cls, size: int, obstacles: Iterable[Coord]) -> "Grid":
        return cls(size=size, obstacles=frozenset(obstacles))

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def get_neighbors(self, coord: Coord) -> List[Coord]:
        row, col = coord
        neighbors: List[Coord] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            nr = row + dr
            nc = col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                neighbors.append((nr, nc))
        return neighbors

    def is_blocked(self, coord: Coord) -> bool:
        return coord in self.obstacles

    def without_obstacles(self) -> "Grid":
        return Grid(size=self.size)

    def cells(self) -> List[Coord]:
        return [(r, c) for r in range(self.size) for c in range(self.size)]
