"""The ball each robot carries and shoots."""

from __future__ import annotations

from .geometry import G, HALF_STADIUM_LENGTH, HALF_STADIUM_WIDTH, Vec3

BALL_RADIUS = 0.15


def rest_position(base_position: Vec3) -> Vec3:
    """Where the ball sits when held by a robot at ``base_position``."""
    return Vec3(base_position.x, base_position.y + BALL_RADIUS, base_position.z)


def is_outside_stadium(position: Vec3) -> bool:
    """True when ``position`` has left the court or fallen below the floor."""
    return (
        position.x > HALF_STADIUM_WIDTH
        or position.x < -HALF_STADIUM_WIDTH
        or position.z > HALF_STADIUM_LENGTH
        or position.z < -HALF_STADIUM_LENGTH
        or position.y < 0.0
    )


class Ball:
    """A ball that is either held by its robot or flying ballistically."""

    def __init__(self, base_position: Vec3) -> None:
        self.shot_velocity = 0.0
        self.elev_angle = 0.0
        self.dir_angle = 0.0
        self.y_axis_proj = 0.0
        self.velocity = Vec3()
        self.position = rest_position(base_position)
        self.is_shooting = False

    def __repr__(self) -> str:
        return (
            f"Ball(position={self.position!r}, velocity={self.velocity!r}, "
            f"is_shooting={self.is_shooting})"
        )

    def launch(
        self, velocity: Vec3, shot_velocity: float, elev_angle: float, dir_angle: float
    ) -> None:
        """Put the ball in flight with the given initial velocity."""
        self.velocity = velocity
        self.shot_velocity = shot_velocity
        self.elev_angle = elev_angle
        self.dir_angle = dir_angle
        self.is_shooting = True

    def update(self, base_position: Vec3, dt: float) -> None:
        """Advance the ball by ``dt`` seconds; a held ball follows its robot."""
        if not self.is_shooting:
            self.position = rest_position(base_position)
            self.velocity = Vec3()
            return

        pos, vel = self.position, self.velocity
        self.position = Vec3(
            pos.x + vel.x * dt,
            pos.y + vel.y * dt - 0.5 * G * dt * dt,
            pos.z + vel.z * dt,
        )
        self.velocity = vel.with_y(vel.y - G * dt)

        if is_outside_stadium(self.position):
            self.is_shooting = False
            self.position = rest_position(base_position)