"""Rendering of the grid world and its window."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

import pygame

from .gridworld import TILE_SIZE, GridMap, Tile
from .view import BLACK, GRAY, GREEN, RED, WHITE, WHITESMOKE

WINDOW_SIZE = (800, 600)
TITLE = "Basketbots - Robotics INFO1167"
FPS = 60
FONT_SIZE = 30
TEXT_OFFSET = 12

_STYLES = {
    Tile.STATE: (WHITESMOKE, ""),
    Tile.DANGER: (RED, "P"),
    Tile.WALL: (BLACK, ""),
    Tile.GOAL: (GREEN, "M"),
}


def tile_style(tile: Tile) -> tuple[tuple[int, int, int], str]:
    """Fill colour and label for a tile."""
    return _STYLES[tile]


@lru_cache(maxsize=1)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, FONT_SIZE)


def draw_map(surface: pygame.Surface, grid_map: GridMap) -> None:
    """Draw every tile with its label and outline, then the robot."""
    size = int(TILE_SIZE)
    for row_index, row in enumerate(grid_map.grid):
        for col_index, tile in enumerate(row):
            color, text = tile_style(tile)
            x, y, _, _ = grid_map.cell_rect(row_index, col_index)
            rect = pygame.Rect(int(x), int(y), size, size)
            pygame.draw.rect(surface, color, rect)
            if text:
                label = _font().render(text, True, WHITE)
                surface.blit(
                    label,
                    (int(x + TILE_SIZE / 2) - TEXT_OFFSET, int(y + TILE_SIZE / 2) - TEXT_OFFSET),
                )
            pygame.draw.rect(surface, GRAY, rect, width=1)

    robot = grid_map.robot
    pygame.draw.circle(
        surface,
        robot.color,
        (int(robot.position[0]), int(robot.position[1])),
        int(robot.radius),
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Open a window showing the grid world until it is closed."""
    del argv
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()
        grid_map = GridMap()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            screen.fill(BLACK)
            draw_map(screen, grid_map)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        _font.cache_clear()
        pygame.quit()