import pytest

from basketbots.ball import Ball, is_outside_stadium, rest_position
from basketbots.geometry import G, HALF_STADIUM_LENGTH, HALF_STADIUM_WIDTH, Vec3

BASE = Vec3(1.0, 0.05, -2.0)


def test_rest_position_sits_on_top_of_base():
    pos = rest_position(BASE)
    assert pos.x == BASE.x
    assert pos.z == BASE.z
    assert pos.y == pytest.approx(BASE.y + 0.15)


def test_new_ball_is_held_at_rest():
    ball = Ball(BASE)
    assert ball.position == rest_position(BASE)
    assert ball.velocity == Vec3()
    assert ball.is_shooting is False


@pytest.mark.parametrize(
    "position",
    [
        Vec3(HALF_STADIUM_WIDTH + 0.01, 1.0, 0.0),
        Vec3(-HALF_STADIUM_WIDTH - 0.01, 1.0, 0.0),
        Vec3(0.0, 1.0, HALF_STADIUM_LENGTH + 0.01),
        Vec3(0.0, 1.0, -HALF_STADIUM_LENGTH - 0.01),
        Vec3(0.0, -0.01, 0.0),
    ],
)
def test_outside_positions(position):
    assert is_outside_stadium(position) is True


@pytest.mark.parametrize(
    "position",
    [
        Vec3(0.0, 0.0, 0.0),
        Vec3(HALF_STADIUM_WIDTH, 3.0, HALF_STADIUM_LENGTH),
        Vec3(-HALF_STADIUM_WIDTH, 0.5, -HALF_STADIUM_LENGTH),
    ],
)
def test_inside_positions(position):
    assert is_outside_stadium(position) is False


def test_held_ball_follows_base():
    ball = Ball(BASE)
    new_base = Vec3(3.0, 0.05, 4.0)
    ball.update(new_base, 0.016)
    assert ball.position == rest_position(new_base)
    assert ball.velocity == Vec3()


def test_launch_sets_flight_state():
    ball = Ball(BASE)
    ball.launch(Vec3(1.0, 2.0, 3.0), 4.0, 0.5, 0.25)
    assert ball.is_shooting is True
    assert ball.velocity == Vec3(1.0, 2.0, 3.0)
    assert (ball.shot_velocity, ball.elev_angle, ball.dir_angle) == (4.0, 0.5, 0.25)


def test_flight_moves_ball_and_gravity_slows_ascent():
    ball = Ball(BASE)
    start = ball.position
    ball.launch(Vec3(1.0, 5.0, -1.0), 5.0, 1.0, 0.0)
    dt = 0.02
    ball.update(BASE, dt)
    assert ball.is_shooting is True
    assert ball.position.x > start.x
    assert ball.position.z < start.z
    assert ball.position.y > start.y
    assert ball.velocity.y == pytest.approx(5.0 - G * dt)
    assert ball.velocity.x == 1.0


def test_ball_returns_to_robot_after_landing():
    ball = Ball(BASE)
    ball.launch(Vec3(0.0, 3.0, 0.5), 3.0, 1.0, 0.0)
    for _ in range(1000):
        ball.update(BASE, 0.016)
        if not ball.is_shooting:
            break
    assert ball.is_shooting is False
    assert ball.position == rest_position(BASE)


def test_ball_leaving_sideways_is_reset():
    ball = Ball(BASE)
    ball.launch(Vec3(100.0, 0.0, 0.0), 100.0, 0.0, 0.0)
    ball.update(BASE, 0.1)
    assert ball.is_shooting is False
    assert ball.position == rest_position(BASE)