"""Court dimensions, physical constants and a small 3D vector type."""

from __future__ import annotations

from dataclasses import dataclass

MAX_ROBOTS = 10
STADIUM_WIDTH = 10.0
STADIUM_LENGTH = 20.0

HALF_STADIUM_WIDTH = STADIUM_WIDTH / 2.0
HALF_STADIUM_LENGTH = STADIUM_LENGTH / 2.0

STADIUM_FLOOR_THICKNESS = 0.1
ROBOT_RADIUS = 0.5

G = 9.8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable point or direction in court space (y is up)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: float) -> Vec3:
        """Return this vector multiplied by ``factor``."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def with_y(self, y: float) -> Vec3:
        """Return a copy with the vertical component replaced."""
        return Vec3(self.x, y, self.z)


BLUE_RING_POSITION = Vec3(0.0, 1.25, HALF_STADIUM_LENGTH - 0.55)
RED_RING_POSITION = Vec3(0.0, 1.25, -(HALF_STADIUM_LENGTH - 0.55))