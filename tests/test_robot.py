import math
import random

import pytest

from basketbots.geometry import (
    BLUE_RING_POSITION,
    G,
    HALF_STADIUM_LENGTH,
    HALF_STADIUM_WIDTH,
    RED_RING_POSITION,
    ROBOT_RADIUS,
    Vec3,
)
from basketbots.robot import (
    SHOT_SPEEDS,
    Robot,
    Team,
    random_heading,
    random_shot_speed,
    random_speed,
    random_steps,
    shot_elevation,
)

DT = 1 / 60


def _robot(index=1, seed=0):
    return Robot(index, random.Random(seed), DT)


def test_team_targets():
    red = _robot(2)
    blue = _robot(3)
    assert red.team.target == BLUE_RING_POSITION
    assert blue.team.target == RED_RING_POSITION


def test_team_alternates_by_index():
    assert _robot(2).team is Team.RED
    assert _robot(3).team is Team.BLUE


def test_random_heading_is_multiple_of_15_degrees():
    rng = random.Random(1)
    for _ in range(200):
        deg = math.degrees(random_heading(rng))
        assert 0 <= deg < 360
        assert round(deg) % 15 == 0
        assert deg == pytest.approx(round(deg))


def test_random_speed_values():
    rng = random.Random(2)
    seen = {random_speed(rng) for _ in range(500)}
    assert seen == {1.0, 2.0, 4.0, 5.0, 6.0}


def test_random_shot_speed_values():
    rng = random.Random(3)
    seen = {random_shot_speed(rng) for _ in range(500)}
    assert seen == set(SHOT_SPEEDS)


def test_random_steps_range():
    rng = random.Random(4)
    values = [random_steps(rng) for _ in range(2000)]
    assert min(values) >= 10
    assert max(values) <= 200


def test_shot_elevation_out_of_range_is_none():
    assert shot_elevation(1.0, 10.0, 1.0) is None


def test_shot_elevation_trajectory_passes_through_target():
    v, dist, dy = 8.0, 3.0, 1.2
    theta = shot_elevation(v, dist, dy)
    assert theta is not None
    height = dist * math.tan(theta) - G * dist**2 / (2 * v**2 * math.cos(theta) ** 2)
    assert height == pytest.approx(dy)


def test_shot_elevation_straight_up_when_no_horizontal_distance():
    assert shot_elevation(8.0, 0.0, 1.0) == pytest.approx(math.pi / 2)


def test_new_robot_within_court_and_holding_ball():
    for seed in range(20):
        robot = _robot(seed, seed)
        assert abs(robot.position.x) <= HALF_STADIUM_WIDTH
        assert abs(robot.position.z) <= HALF_STADIUM_LENGTH
        assert robot.ball.is_shooting is False
        assert robot.ball.position.x == robot.position.x
        assert 10 <= robot.n_step <= 200


def test_robot_stays_inside_clamped_area():
    robot = _robot(1, 5)
    x_limit = HALF_STADIUM_WIDTH - ROBOT_RADIUS
    z_limit = HALF_STADIUM_LENGTH - ROBOT_RADIUS
    for _ in range(3000):
        robot.update(DT)
        assert -x_limit <= robot.position.x <= x_limit
        assert -z_limit <= robot.position.z <= z_limit


def test_shot_from_far_away_fails():
    robot = _robot(2, 6)
    robot.position = Vec3(0.0, 0.05, -9.5)
    for _ in range(50):
        assert robot.shoot() is False
    assert robot.ball.is_shooting is False


def test_shot_from_close_launches_towards_ring():
    robot = _robot(2, 7)
    robot.position = Vec3(0.5, 0.05, 8.0)
    launched = False
    for _ in range(200):
        if robot.shoot():
            launched = True
            break
    assert launched
    ball = robot.ball
    assert ball.is_shooting is True
    assert ball.shot_velocity in SHOT_SPEEDS
    speed = math.sqrt(ball.velocity.x**2 + ball.velocity.y**2 + ball.velocity.z**2)
    assert speed == pytest.approx(ball.shot_velocity)
    dx = BLUE_RING_POSITION.x - robot.position.x
    dz = BLUE_RING_POSITION.z - robot.position.z
    assert ball.velocity.x * dz - ball.velocity.z * dx == pytest.approx(0.0, abs=1e-9)
    assert ball.velocity.x * dx + ball.velocity.z * dz > 0
    assert ball.velocity.y > 0


def test_blue_robot_aims_at_red_ring():
    robot = _robot(3, 8)
    robot.position = Vec3(0.0, 0.05, -8.0)
    while not robot.shoot():
        pass
    assert robot.ball.velocity.z < 0
    assert robot.ball.dir_angle == pytest.approx(-math.pi / 2)


def test_update_changes_course_when_steps_run_out():
    robot = _robot(1, 9)
    robot.n_step = 1
    robot.update(DT)
    assert 10 <= robot.n_step <= 200
    assert robot.velocity / DT in {1.0, 2.0, 4.0, 5.0, 6.0}