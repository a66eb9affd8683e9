"""Shots fired by the player."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import lru_cache

import pygame

from bitmapshooter.badguy import BadGuy
from bitmapshooter.player import Direction, Player

IMAGE_SIZE = 64
SPIN_STEP = 0.1
SCALE = 0.5


@lru_cache(maxsize=None)
def _weapon_image() -> pygame.Surface:
    image = pygame.Surface((IMAGE_SIZE, IMAGE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (0, 255, 255), pygame.Rect(0, 25, 64, 14))
    pygame.draw.rect(image, (0, 255, 255), pygame.Rect(25, 0, 14, 64))
    pygame.draw.circle(image, (100, 100, 100), (32, 32), 10, 5)
    pygame.draw.line(image, (100, 100, 255), (0, 32), (64, 32), 2)
    pygame.draw.line(image, (100, 100, 255), (32, 0), (32, 64), 2)
    pygame.draw.circle(image, (200, 200, 200), (32, 32), 18, 5)
    return image


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Weapon:
    """A spinning shot travelling in a straight line."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.speed = 7
        self.bound_x = IMAGE_SIZE // 2
        self.bound_y = IMAGE_SIZE // 2
        self.live = False
        self.angle = 0.0
        self.direction = Direction.UP

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the shot centred on its position and advance its spin."""
        if not self.live:
            return
        image = pygame.transform.rotozoom(_weapon_image(), -math.degrees(self.angle), SCALE)
        surface.blit(image, image.get_rect(center=(self.x, self.y)))
        self.angle += SPIN_STEP

    def fire(self, player: Player, direction: Direction) -> None:
        """Launch from the player's centre unless already in flight."""
        if self.live:
            return
        self.x = player.x + player.bound_x // 2
        self.y = player.y + player.bound_y // 2
        self.live = True
        self.direction = Direction(direction)

    def update(self, width: int, height: int) -> None:
        """Move one step; the shot dies once it leaves the field."""
        if not self.live:
            return
        dx, dy = _STEPS[self.direction]
        self.x += dx * self.speed
        self.y += dy * self.speed
        if not (0 <= self.x <= width and 0 <= self.y <= height):
            self.live = False

    def collide(self, bad_guys: Iterable[BadGuy]) -> None:
        """Kill every live bad guy the shot is touching, and the shot with them."""
        if not self.live:
            return
        for guy in bad_guys:
            if (
                guy.live
                and guy.x - guy.bound_x < self.x < guy.x + guy.bound_x
                and guy.y - guy.bound_y < self.y < guy.y + guy.bound_y
            ):
                self.live = False
                guy.live = False