import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union


Coord = Tuple[int, int]


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GameConfig:
    """Global configuration constants for the game."""
    GRID_SIZE: int = 8
    START: Coord = (0, 0)
    DESTINATION: Coord = (4, 7)
    BARRIERS: Tuple[Coord, ...] = tuple((row, 2) for row in range(8))
    POWERUP: Optional[Coord] = (5, 0)
    HAZARD: Optional[Coord] = None
    POWERUP_CLEARS_BARRIERS: bool = True
    STEP_DELAY: float = 0.5

    # Board markers
    PLAYER_MARK: str = "P"
    BARRIER_MARK: str = "x"
    DESTINATION_MARK: str = "D"
    POWERUP_MARK: str = "O"
    HAZARD_MARK: str = "E"
    EMPTY_MARK: str = "-"

    # Window
    TITLE: str = "Powerup Pathfinder"
    TILE_SIZE: int = 64
    FPS: int = 30

    # Colors
    WHITE: tuple = (255, 255, 255)


_COORD_FIELDS = ("START", "DESTINATION", "POWERUP", "HAZARD")


def _to_coord(name: str, value: Any) -> Coord:
    try:
        row, col = value
        return int(row), int(col)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a [row, col] pair, got {value!r}") from None


def _to_barriers(value: Any) -> Tuple[Coord, ...]:
    if isinstance(value, (str, dict)):
        raise ConfigError(f"BARRIERS must be a list of [row, col] pairs, got {value!r}")
    try:
        cells = list(value)
    except TypeError:
        raise ConfigError(f"BARRIERS must be a list of [row, col] pairs, got {value!r}") from None
    return tuple(_to_coord("BARRIERS entry", cell) for cell in cells)


def from_dict(data: Dict[str, Any], base: Optional[GameConfig] = None) -> GameConfig:
    """Build a config from ``data`` overriding ``base`` (or the defaults).

    Keys are matched case-insensitively against the field names.
    """
    base = base or GameConfig()
    known = {f.name for f in fields(GameConfig)}
    overrides: Dict[str, Any] = {}

    for key, value in data.items():
        name = key.upper()
        if name not in known:
            raise ConfigError(f"Unknown config key: {key}")
        if name in _COORD_FIELDS:
            value = None if value is None else _to_coord(name, value)
        elif name == "BARRIERS":
            value = _to_barriers(value)
        overrides[name] = value

    config = replace(base, **overrides)
    validate(config)
    return config


def validate(config: GameConfig) -> None:
    size = config.GRID_SIZE
    if not isinstance(size, int) or size <= 0:
        raise ConfigError(f"GRID_SIZE must be a positive integer, got {size!r}")

    def check(name: str, coord: Optional[Coord]) -> None:
        if coord is None:
            return
        row, col = coord
        if not (0 <= row < size and 0 <= col < size):
            raise ConfigError(f"{name} {coord} lies outside the {size}x{size} grid")

    for name in _COORD_FIELDS:
        check(name, getattr(config, name))
    for cell in config.BARRIERS:
        check("BARRIERS entry", cell)

    delay = config.STEP_DELAY
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise ConfigError(f"STEP_DELAY must be a number, got {delay!r}")
    if delay < 0:
        raise ConfigError(f"STEP_DELAY must not be negative, got {config.STEP_DELAY}")


def load_config(path: Union[str, Path]) -> GameConfig:
    path = Path(path)
    try:
        raw = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")
    return from_dict(raw)
