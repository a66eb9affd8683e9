"""Enemy sprites that spawn at random free spots on the field."""

from __future__ import annotations

import random
from collections.abc import Iterable
from functools import lru_cache

import pygame

IMAGE_SIZE = 64
SPAWN_BUFFER = 20
"""Extra clearance kept around other sprites when choosing a spawn point."""


@lru_cache(maxsize=None)
def _bad_guy_image() -> pygame.Surface:
    image = pygame.Surface((IMAGE_SIZE, IMAGE_SIZE))
    image.fill((0, 0, 0))
    pygame.draw.rect(image, (100, 100, 120), pygame.Rect(25, 10, 14, 44))
    pygame.draw.ellipse(image, (255, 0, 255), pygame.Rect(0, 16, 64, 32))
    pygame.draw.circle(image, (255, 255, 255), (32, 32), 4)
    pygame.draw.circle(image, (120, 255, 255), (16, 32), 4)
    pygame.draw.circle(image, (255, 255, 120), (48, 32), 4)
    return image


def _overlaps(x: int, y: int, other_x: int, other_y: int, bound_x: int, bound_y: int) -> bool:
    return (
        other_x - bound_x - SPAWN_BUFFER < x < other_x + bound_x + SPAWN_BUFFER
        and other_y - bound_y - SPAWN_BUFFER < y < other_y + bound_y + SPAWN_BUFFER
    )


class BadGuy:
    """A target that can be shot; it respawns somewhere empty once dead."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.live = False
        self.bound_x = int(IMAGE_SIZE * 0.75)
        self.bound_y = int(IMAGE_SIZE * 0.75)

    def draw(self, surface: pygame.Surface) -> None:
        """Blit the sprite onto ``surface`` if it is alive."""
        if self.live:
            surface.blit(_bad_guy_image(), (self.x, self.y))

    def start(
        self,
        width: int,
        height: int,
        bad_guys: Iterable[BadGuy],
        player_x: int,
        player_y: int,
        player_bound_x: int,
        player_bound_y: int,
        rng: random.Random | None = None,
    ) -> None:
        """Bring the bad guy to life at a spot clear of the others and the player."""
        span_x = width - self.bound_x
        span_y = height - self.bound_y
        if span_x <= 0 or span_y <= 0:
            raise ValueError("field is too small to place a bad guy")
        rng = rng if rng is not None else random.Random()
        others = [other for other in bad_guys if other is not self]
        self.live = True

        while True:
            self.x = rng.randrange(span_x)
            self.y = rng.randrange(span_y)
            hits_other = any(
                other.live
                and _overlaps(self.x, self.y, other.x, other.y, other.bound_x, other.bound_y)
                for other in others
            )
            hits_player = _overlaps(
                self.x, self.y, player_x, player_y, player_bound_x, player_bound_y
            )
            if not (hits_other or hits_player):
                return