"""Top-down rendering of the court and the interactive simulation window."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from .ball import BALL_RADIUS
from .camera import DEFAULT_POSITION, Camera
from .geometry import (
    BLUE_RING_POSITION,
    RED_RING_POSITION,
    STADIUM_LENGTH,
    STADIUM_WIDTH,
    Vec3,
)
from .robot import Team
from .stadium import Stadium

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
WHITESMOKE = (245, 245, 245)
DARKSLATEGRAY = (47, 79, 79)
GRAY = (130, 130, 130)
RED = (230, 41, 55)
DARKRED = (190, 33, 55)
BLUE = (0, 121, 241)
DARKBLUE = (0, 82, 172)
GREEN = (0, 228, 48)

TEAM_COLORS = {Team.RED: DARKRED, Team.BLUE: DARKBLUE}
HOOP_COLORS = ((BLUE_RING_POSITION, BLUE), (RED_RING_POSITION, RED))

WINDOW_SIZE = (950, 800)
TITLE = "Basketbots - Robotics INFO1167"
FPS = 60

LINE_THICKNESS = 0.1
BORDER = 0.2
CENTER_CIRCLE_RADIUS = 2.0
CENTER_CIRCLE_INNER_RADIUS = 1.9
HOOP_RADIUS = 0.23
HOOP_RIM = 0.04
ROBOT_BODY_RADIUS = 0.25
ROBOT_TOP_RADIUS = 0.2
BALL_HEIGHT_ZOOM = 0.1
FILL = 0.95


def to_screen(position: Vec3, scale: float, size: Sequence[int]) -> tuple[int, int]:
    """Project a court point onto the screen, court centre at screen centre."""
    width, height = size
    return (round(width / 2 + position.x * scale), round(height / 2 + position.z * scale))


def _court_scale(size: Sequence[int]) -> float:
    width, height = size
    return FILL * min(width / (STADIUM_WIDTH + BORDER), height / (STADIUM_LENGTH + BORDER))


def _pixels(length: float, scale: float) -> int:
    return max(1, round(length * scale))


def _rect(width: float, length: float, scale: float, size: Sequence[int]) -> pygame.Rect:
    left, top = to_screen(Vec3(-width / 2, 0.0, -length / 2), scale, size)
    return pygame.Rect(left, top, _pixels(width, scale), _pixels(length, scale))


def draw_stadium(surface: pygame.Surface, stadium: Stadium) -> None:
    """Draw the court, hoops, robots and balls seen from above."""
    size = surface.get_size()
    scale = _court_scale(size)
    centre = to_screen(Vec3(), scale, size)

    surface.fill(BLACK)
    pygame.draw.rect(
        surface, WHITESMOKE, _rect(STADIUM_WIDTH + BORDER, STADIUM_LENGTH + BORDER, scale, size)
    )
    pygame.draw.rect(surface, DARKSLATEGRAY, _rect(STADIUM_WIDTH, STADIUM_LENGTH, scale, size))
    pygame.draw.circle(surface, WHITESMOKE, centre, _pixels(CENTER_CIRCLE_RADIUS, scale))
    pygame.draw.circle(surface, DARKSLATEGRAY, centre, _pixels(CENTER_CIRCLE_INNER_RADIUS, scale))
    pygame.draw.rect(
        surface, WHITESMOKE, _rect(STADIUM_WIDTH + LINE_THICKNESS, LINE_THICKNESS, scale, size)
    )

    for ring, color in HOOP_COLORS:
        pygame.draw.circle(
            surface,
            color,
            to_screen(ring, scale, size),
            _pixels(HOOP_RADIUS, scale),
            width=_pixels(HOOP_RIM, scale),
        )

    for robot in stadium.robots:
        spot = to_screen(robot.position, scale, size)
        pygame.draw.circle(surface, BLACK, spot, _pixels(ROBOT_BODY_RADIUS, scale))
        pygame.draw.circle(surface, TEAM_COLORS[robot.team], spot, _pixels(ROBOT_TOP_RADIUS, scale))
        ball = robot.ball
        # Higher balls are drawn larger to hint at their height.
        radius = BALL_RADIUS * (1.0 + max(ball.position.y, 0.0) * BALL_HEIGHT_ZOOM)
        pygame.draw.circle(
            surface, WHITESMOKE, to_screen(ball.position, scale, size), _pixels(radius, scale)
        )


def _zoom(camera: Camera) -> float:
    return DEFAULT_POSITION.y / camera.position.y


def _present(screen: pygame.Surface, court: pygame.Surface, zoom: float) -> None:
    screen.fill(BLACK)
    width, height = court.get_size()
    if zoom >= 1.0:
        crop = pygame.Rect(0, 0, max(1, round(width / zoom)), max(1, round(height / zoom)))
        crop.center = court.get_rect().center
        image = pygame.transform.smoothscale(court.subsurface(crop), screen.get_size())
    else:
        image = pygame.transform.smoothscale(
            court, (max(1, round(width * zoom)), max(1, round(height * zoom)))
        )
    screen.blit(image, image.get_rect(center=screen.get_rect().center))


def main(argv: Sequence[str] | None = None) -> None:
    """Open the simulation window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="basketbots", description="Watch two teams of robots shoot at each other's ring."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choices")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()

        # No frame has elapsed yet, so robots start with zero stride.
        stadium = Stadium(random.Random(args.seed), 0.0)
        camera = Camera()
        court = pygame.Surface(WINDOW_SIZE)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False

            keys = pygame.key.get_pressed()
            if keys[pygame.K_SPACE]:
                camera.rise()
            if keys[pygame.K_LSHIFT]:
                camera.lower()

            dt = clock.tick(FPS) / 1000.0
            stadium.update(dt)
            draw_stadium(court, stadium)
            _present(screen, court, _zoom(camera))
            pygame.display.flip()
    finally:
        pygame.quit()