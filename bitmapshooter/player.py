"""The player-controlled ship."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from functools import lru_cache

import pygame

from bitmapshooter.badguy import BadGuy

IMAGE_SIZE = 64


class Direction(IntEnum):
    """Facing of the player and travel of a shot."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_ROTATION_DEGREES = {
    Direction.UP: 0,
    Direction.DOWN: 180,
    Direction.LEFT: 90,
    Direction.RIGHT: -90,
}


@lru_cache(maxsize=None)
def _player_image() -> pygame.Surface:
    image = pygame.Surface((IMAGE_SIZE, IMAGE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (75, 75, 75), pygame.Rect(0, 25, 64, 14))
    pygame.draw.rect(image, (50, 50, 50), pygame.Rect(25, 0, 14, 64))
    pygame.draw.circle(image, (0, 0, 0), (32, 32), 10, 5)
    pygame.draw.line(image, (255, 100, 255), (0, 32), (64, 32), 2)
    pygame.draw.line(image, (255, 100, 255), (32, 0), (32, 64), 2)
    pygame.draw.circle(image, (200, 200, 200), (32, 32), 18, 5)
    # The triangle marks which way the ship is facing.
    pygame.draw.polygon(image, (255, 80, 80), [(32, 0), (16, 14), (48, 14)])
    return image


class Player:
    """A ship that moves around the field and bounces off bad guys."""

    def __init__(self, height: int) -> None:
        self.x = 20
        self.y = height // 2
        self.speed = 7
        self.bound_x = IMAGE_SIZE
        self.bound_y = IMAGE_SIZE
        self.direction = Direction.UP
        self._previous = (self.x, self.y)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the ship onto ``surface``, rotated to its facing."""
        rotated = pygame.transform.rotate(_player_image(), _ROTATION_DEGREES[self.direction])
        centre = (self.x + self.bound_x // 2, self.y + self.bound_y // 2)
        surface.blit(rotated, rotated.get_rect(center=centre))

    def _remember(self) -> None:
        self._previous = (self.x, self.y)

    def move_up(self) -> None:
        self._remember()
        self.y = max(self.y - self.speed, 0)
        self.direction = Direction.UP

    def move_down(self, height: int) -> None:
        self._remember()
        self.y = min(self.y + self.speed, height - self.bound_y)
        self.direction = Direction.DOWN

    def move_left(self) -> None:
        self._remember()
        self.x = max(self.x - self.speed, 0)
        self.direction = Direction.LEFT

    def move_right(self, width: int) -> None:
        self._remember()
        self.x = min(self.x + self.speed, width - self.bound_x)
        self.direction = Direction.RIGHT

    def collide(self, bad_guys: Iterable[BadGuy]) -> None:
        """Step back to the last position if the ship overlaps any bad guy."""
        for guy in bad_guys:
            left = guy.x
            right = int(guy.x + guy.bound_x + guy.bound_x * 0.25)
            top = guy.y
            bottom = int(guy.y + guy.bound_y + guy.bound_y * 0.25)
            if (
                self.x < right
                and self.x + self.bound_x > left
                and self.y < bottom
                and self.y + self.bound_y > top
            ):
                self.x, self.y = self._previous
                return