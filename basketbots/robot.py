"""Wandering robots that shoot their ball at the opposing ring."""

from __future__ import annotations

import math
import random
from enum import Enum

from .ball import Ball
from .geometry import (
    BLUE_RING_POSITION,
    G,
    HALF_STADIUM_LENGTH,
    HALF_STADIUM_WIDTH,
    RED_RING_POSITION,
    ROBOT_RADIUS,
    Vec3,
)

HEADINGS_DEG = tuple(range(0, 360, 15))
SPEEDS = (1.0, 2.0, 4.0, 5.0, 6.0)
SHOT_SPEEDS = (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0)
MIN_STEPS = 10
MAX_STEPS = 200
SHOT_CHANCE = 0.1
ROBOT_HEIGHT = 0.05


class Team(Enum):
    """The side a robot plays for."""

    RED = "red_robot"
    BLUE = "blue_robot"

    @property
    def target(self) -> Vec3:
        """The ring this team aims at."""
        return BLUE_RING_POSITION if self is Team.RED else RED_RING_POSITION


def random_heading(rng: random.Random) -> float:
    """A heading in radians, a multiple of 15 degrees."""
    return math.radians(rng.choice(HEADINGS_DEG))


def random_speed(rng: random.Random) -> float:
    """A walking speed in metres per second."""
    return rng.choice(SPEEDS)


def random_shot_speed(rng: random.Random) -> float:
    """A launch speed in metres per second."""
    return rng.choice(SHOT_SPEEDS)


def random_steps(rng: random.Random) -> int:
    """How many updates a robot keeps its current heading."""
    return rng.randint(MIN_STEPS, MAX_STEPS)


def shot_elevation(velocity: float, horizontal_dist: float, dy: float) -> float | None:
    """Elevation angle (high arc) that reaches a target, or None if out of range."""
    v_squared = velocity * velocity
    sqrt_term = v_squared * v_squared - G * (
        G * horizontal_dist * horizontal_dist + 2.0 * dy * v_squared
    )
    if sqrt_term < 0.0:
        return None
    return math.atan2(v_squared + math.sqrt(sqrt_term), G * horizontal_dist)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class Robot:
    """A robot moving in random straight runs across the court."""

    def __init__(self, index: int, rng: random.Random, dt: float) -> None:
        self.rng = rng
        self.angle = random_heading(rng)
        self.velocity = random_speed(rng) * dt
        self.position = Vec3(
            rng.uniform(-HALF_STADIUM_WIDTH, HALF_STADIUM_WIDTH),
            ROBOT_HEIGHT,
            rng.uniform(-HALF_STADIUM_LENGTH, HALF_STADIUM_LENGTH),
        )
        self.team = Team.RED if index % 2 == 0 else Team.BLUE
        self.n_step = random_steps(rng)
        self.ball = Ball(self.position)

    def __repr__(self) -> str:
        return f"Robot(team={self.team.name}, position={self.position!r})"

    def update(self, dt: float) -> None:
        """Advance one frame: maybe change course, move, maybe shoot."""
        self.n_step -= 1
        if self.n_step <= 0:
            self.n_step = random_steps(self.rng)
            self.angle = random_heading(self.rng)
            self.velocity = random_speed(self.rng) * dt

        x = self.position.x + self.velocity * math.sin(self.angle)
        z = self.position.z + self.velocity * math.cos(self.angle)
        x_limit = HALF_STADIUM_WIDTH - ROBOT_RADIUS
        z_limit = HALF_STADIUM_LENGTH - ROBOT_RADIUS
        self.position = Vec3(
            _clamp(x, -x_limit, x_limit),
            self.position.y,
            _clamp(z, -z_limit, z_limit),
        )

        if self.rng.random() < SHOT_CHANCE and not self.ball.is_shooting:
            self.shoot()

        self.ball.update(self.position, dt)

    def shoot(self) -> bool:
        """Try to throw the ball at the opposing ring; True if it was launched."""
        self.ball.position = self.position
        target = self.team.target

        dx = target.x - self.position.x
        dz = target.z - self.position.z
        dy = target.y - self.position.y

        horizontal_dist = math.hypot(dx, dz)
        dir_angle = math.atan2(dz, dx)
        v = random_shot_speed(self.rng)

        elev_angle = shot_elevation(v, horizontal_dist, dy)
        if elev_angle is None:
            return False

        vxz = v * math.cos(elev_angle)
        velocity = Vec3(
            vxz * math.cos(dir_angle),
            v * math.sin(elev_angle),
            vxz * math.sin(dir_angle),
        )
        self.ball.launch(velocity, v, elev_angle, dir_angle)
        return True