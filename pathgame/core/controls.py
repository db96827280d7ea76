from typing import Dict, Optional, Tuple


# (d_row, d_col); row 0 is the top of the board
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "u": (-1, 0),
    "d": (1, 0),
    "l": (0, -1),
    "r": (0, 1),
    "ul": (-1, -1),
    "ur": (-1, 1),
    "dl": (1, -1),
    "dr": (1, 1),
}

QUIT_TOKENS = ("q", "quit", "exit")


def parse_direction(token: str) -> Optional[Tuple[int, int]]:
    """Map an input line to a step delta, or None for anything unrecognised."""
    return DIRECTIONS.get(token.strip().lower())


def is_quit(token: str) -> bool:
    return token.strip().lower() in QUIT_TOKENS
