import sys
from typing import List, TextIO


class TextRenderer:
    """Prints the board as rows of space-separated markers."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def cell_marker(self, game, coord) -> str:
        cfg = game.config
        if coord == game.position:
            return cfg.PLAYER_MARK
        if coord in game.barriers:
            return cfg.BARRIER_MARK
        if coord == game.destination:
            return cfg.DESTINATION_MARK
        if coord == game.powerup and not game.has_powerup:
            return cfg.POWERUP_MARK
        if coord == game.hazard:
            return cfg.HAZARD_MARK
        return cfg.EMPTY_MARK

    def board_lines(self, game) -> List[str]:
        return [
            " ".join(self.cell_marker(game, (row, col)) for col in range(game.size))
            for row in range(game.size)
        ]

    def render_board(self, game) -> str:
        return "\n".join(self.board_lines(game))

    def render(self, game) -> None:
        self.stream.write(self.render_board(game) + "\n\n")
        self.stream.flush()
