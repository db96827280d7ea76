import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pathgame.agents.astar import Coord


logger = logging.getLogger("Agent")


@dataclass
class BaseAgent:
    id: int
    row: int
    col: int

    path: List[Coord] = field(default_factory=list)
    _path_index: int = 0

    @property
    def position(self) -> Coord:
        return (self.row, self.col)

    def set_path(self, path: List[Coord]) -> None:
        self.path = list(path)
        self._path_index = 0
        # A path that starts where we stand would waste a tick on a no-op move.
        if self.path and self.path[0] == self.position:
            self._path_index = 1

    @property
    def has_path(self) -> bool:
        return self._path_index < len(self.path)

    def move_to(self, coord: Coord) -> None:
        old_pos = self.position
        self.row, self.col = coord
        if old_pos != coord:
            logger.debug("[Agent %s] Move: %s -> %s", self.id, old_pos, coord)

    def update(self) -> Optional[Coord]:
        """Advance one step along the current path and return the new position."""
        if not self.has_path:
            return None
        next_pos = self.path[self._path_index]
        self._path_index += 1
        self.move_to(next_pos)
        return next_pos
