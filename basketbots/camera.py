"""Viewer camera whose height can be raised and lowered."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vec3

DEFAULT_POSITION = Vec3(20.0, 8.0, 0.0)
DEFAULT_TARGET = Vec3(0.0, 1.0, 0.0)
DEFAULT_UP = Vec3(0.0, 2.5, 0.0)
DEFAULT_FOVY = 60.0

MAX_HEIGHT = 20.0
MIN_HEIGHT = 0.8
HEIGHT_STEP = 0.2


@dataclass
class Camera:
    """A perspective camera; rising or lowering moves position and target together."""

    position: Vec3 = DEFAULT_POSITION
    target: Vec3 = DEFAULT_TARGET
    up: Vec3 = DEFAULT_UP
    fovy: float = DEFAULT_FOVY
    _step: float = field(default=HEIGHT_STEP, repr=False)

    def _shift(self, dy: float) -> None:
        self.position = self.position.with_y(self.position.y + dy)
        self.target = self.target.with_y(self.target.y + dy)

    def rise(self) -> bool:
        """Move up one step unless already at the ceiling; True if it moved."""
        if self.position.y < MAX_HEIGHT:
            self._shift(self._step)
            return True
        return False

    def lower(self) -> bool:
        """Move down one step unless already at the floor; True if it moved."""
        if self.position.y > MIN_HEIGHT:
            self._shift(-self._step)
            return True
        return False