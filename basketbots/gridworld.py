"""A tile grid world with a reward-collecting robot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

TILE_SIZE = 100.0


class Tile(Enum):
    """Kinds of cell, keyed by the symbol used in map layouts."""

    STATE = "\u26aa"
    WALL = "\u26ab"
    DANGER = "\U0001f534"
    GOAL = "\U0001f7e2"


class Direction(Enum):
    """Moves between neighbouring cells as (row, column) offsets."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


REWARDS = {Tile.GOAL: 10.0, Tile.DANGER: -0.5}
DEFAULT_REWARD = 0.1

DEFAULT_LAYOUT = (
    "⚪⚪🔴⚫⚪⚫⚪⚪",
    "⚫⚪⚪⚪⚪⚪⚪⚫",
    "⚪🔴⚪⚫⚪🔴⚪⚪",
    "⚪⚪⚪⚪🟢⚪⚪⚫",
    "⚪⚫⚫⚪⚪⚪🔴⚪",
    "⚪⚫⚪⚪⚫⚪⚪⚪",
)


def _hex_color(code: str) -> tuple[int, int, int]:
    return (int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16))


ROBOT_COLOR = _hex_color("3c40a3")


def parse_grid(rows: Iterable[Iterable[str]]) -> list[list[Tile]]:
    """Turn rows of tile symbols into rows of tiles; unknown symbols raise ValueError."""
    grid = []
    for row in rows:
        tiles = []
        for symbol in row:
            try:
                tiles.append(Tile(symbol))
            except ValueError:
                raise ValueError(f"unknown tile symbol {symbol!r}") from None
        grid.append(tiles)
    return grid


@dataclass
class GridRobot:
    """A robot on the grid, positioned in pixels, that accumulates reward."""

    position: tuple[float, float] = (TILE_SIZE / 2.0, TILE_SIZE / 2.0)
    reward: float = 0.0
    color: tuple[int, int, int] = ROBOT_COLOR
    velocity: float = 25.0
    radius: float = 25.0

    def collect(self, tile: Tile) -> float:
        """Add the reward for entering ``tile`` and return the new total."""
        self.reward += REWARDS.get(tile, DEFAULT_REWARD)
        return self.reward


@dataclass
class GridMap:
    """A grid of tiles with one robot on it."""

    grid: list[list[Tile]] = field(default_factory=lambda: parse_grid(DEFAULT_LAYOUT))
    robot: GridRobot = field(default_factory=GridRobot)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    def tile_at(self, row: int, col: int) -> Tile:
        """The tile at ``row``, ``col``; IndexError when outside the grid."""
        if not (0 <= row < len(self.grid) and 0 <= col < len(self.grid[row])):
            raise IndexError(f"cell ({row}, {col}) is outside the map")
        return self.grid[row][col]

    def cell_rect(self, row: int, col: int) -> tuple[float, float, float, float]:
        """Pixel rectangle (x, y, width, height) of a cell."""
        self.tile_at(row, col)
        return (col * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE)