import logging
import sys
import time
from enum import Enum
from typing import Iterable, List, Optional, Set, TextIO

from pathgame.core.config import GameConfig, validate
from pathgame.core.controls import is_quit, parse_direction
from pathgame.agents.astar import AStar, Coord
from pathgame.agents.base_agent import BaseAgent
from pathgame.agents.routing import RoutePlan, RoutingPolicy
from pathgame.world.grid import Grid


logger = logging.getLogger("Game")


class GameStatus(Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Game:
    """
    Board state for one run: the player, barriers, powerup, hazard and
    destination.

    Searches never read this state directly; every plan takes a ``Grid``
    snapshot built from it.
    """
    def __init__(self, config: Optional[GameConfig] = None, renderer=None):
        self.config = config or GameConfig()
        validate(self.config)
        self.renderer = renderer

        self.size = self.config.GRID_SIZE
        self.destination: Coord = self.config.DESTINATION
        self.powerup: Optional[Coord] = self.config.POWERUP
        self.hazard: Optional[Coord] = self.config.HAZARD
        self.barriers: Set[Coord] = set(self.config.BARRIERS)
        self.has_powerup = False
        self.status = GameStatus.RUNNING
        self.moves = 0

        self.player = BaseAgent(id=1, row=self.config.START[0], col=self.config.START[1])
        self.routing = RoutingPolicy(AStar())
        self.route: Optional[RoutePlan] = None

    @property
    def position(self) -> Coord:
        return self.player.position

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.RUNNING

    # ── Board snapshots ───────────────────────────────────────────────

    def _hazards(self) -> Set[Coord]:
        return {self.hazard} if self.hazard is not None else set()

    def grid(self) -> Grid:
        """Current board with barriers and hazard as obstacles."""
        return Grid(size=self.size, obstacles=frozenset(self.barriers | self._hazards()))

    def cleared_grid(self) -> Grid:
        """Board as it will be once the powerup has cleared the barriers."""
        if not self.config.POWERUP_CLEARS_BARRIERS:
            return self.grid()
        return Grid(size=self.size, obstacles=frozenset(self._hazards()))

    # ── Planning ──────────────────────────────────────────────────────

    def plan_route(self, use_powerup: bool = True) -> RoutePlan:
        """Plan from the player's position. Raises UnreachableGoalError."""
        waypoint = self.powerup if use_powerup and not self.has_powerup else None
        self.route = self.routing.plan(
            self.position,
            self.destination,
            self.grid(),
            waypoint=waypoint,
            after_waypoint=self.cleared_grid(),
        )
        self.player.set_path(self.route.path)
        return self.route

    # ── State updates ─────────────────────────────────────────────────

    def step_to(self, coord: Coord) -> GameStatus:
        self.player.move_to(coord)
        self.moves += 1
        self._collect_powerup()
        return self.check_outcome()

    def _collect_powerup(self) -> None:
        if self.has_powerup or self.powerup is None or self.position != self.powerup:
            return
        self.has_powerup = True
        logger.info("Powerup collected at %s", self.powerup)
        if self.config.POWERUP_CLEARS_BARRIERS:
            self.barriers.clear()

    def check_outcome(self) -> GameStatus:
        pos = self.position
        if pos == self.destination:
            self.status = GameStatus.WON
        elif pos == self.hazard or pos in self.barriers:
            self.status = GameStatus.LOST
        return self.status

    def move(self, d_row: int, d_col: int) -> bool:
        """Take one step clamped to the board. Returns False if nothing moved."""
        row, col = self.position
        target = (
            min(max(row + d_row, 0), self.size - 1),
            min(max(col + d_col, 0), self.size - 1),
        )
        if target == self.position:
            return False
        if target in self.barriers:
            logger.debug("Move to %s blocked by barrier", target)
            return False
        self.step_to(target)
        return True

    # ── Collaborators ─────────────────────────────────────────────────

    def render(self) -> None:
        if self.renderer:
            self.renderer.render(self)

    def handle_input(self) -> None:
        """Process window events, if the renderer has any."""
        get_events = getattr(self.renderer, "get_events", None)
        if get_events is None:
            return
        for event in get_events():
            if event.type == "QUIT":
                self.status = GameStatus.QUIT

    def play(self, path: Optional[Iterable[Coord]] = None, delay: Optional[float] = None) -> GameStatus:
        """Replay ``path`` (the planned route by default) one step at a time."""
        delay = self.config.STEP_DELAY if delay is None else delay
        if path is not None:
            self.player.set_path(list(path))

        self.render()
        self.check_outcome()
        while self.player.has_path and not self.game_over:
            self.handle_input()
            if self.game_over:
                break
            self.step_to(self.player.update())
            self.render()
            if delay > 0:
                time.sleep(delay)

        logger.info("Playback finished after %d moves: %s", self.moves, self.status.value)
        return self.status

    def run_interactive(self, input_stream: TextIO = None, output_stream: TextIO = None) -> GameStatus:
        """Read one direction per line until the game ends or input runs out."""
        input_stream = input_stream or sys.stdin
        output_stream = output_stream or sys.stdout

        self.render()
        self.check_outcome()
        while not self.game_over:
            output_stream.write("Move (u/d/l/r/ul/ur/dl/dr, q to quit): ")
            output_stream.flush()
            line = input_stream.readline()
            if not line:
                break
            if is_quit(line):
                self.status = GameStatus.QUIT
                break
            delta = parse_direction(line)
            if delta is not None:
                self.move(*delta)
            self.render()

        if self.status is GameStatus.WON:
            output_stream.write("You reached the destination!\n")
        elif self.status is GameStatus.LOST:
            output_stream.write("You lost!\n")
        return self.status

    def summary(self) -> List[str]:
        lines = [f"Status: {self.status.value}", f"Moves: {self.moves}"]
        if self.route is not None:
            lines.append(
                f"Route: {'via powerup' if self.route.via_waypoint else 'direct'}, "
                f"{self.route.steps} steps, cost {self.route.cost:.3f}"
            )
        return lines
