"""The court and the robots playing on it."""

from __future__ import annotations

import random

from .geometry import MAX_ROBOTS
from .robot import Robot


class Stadium:
    """A court holding ``MAX_ROBOTS`` robots split between two teams."""

    def __init__(self, rng: random.Random, dt: float) -> None:
        self.robots = [Robot(index, rng, dt) for index in range(1, MAX_ROBOTS + 1)]

    def __repr__(self) -> str:
        return f"Stadium(robots={len(self.robots)})"

    def update(self, dt: float) -> None:
        """Advance every robot, and the ball it carries, by one frame."""
        for robot in self.robots:
            robot.update(dt)