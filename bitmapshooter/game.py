"""Game state, rules for one frame, and the window loop."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum

import pygame

from bitmapshooter.badguy import BadGuy
from bitmapshooter.player import Player
from bitmapshooter.weapon import Weapon

WIDTH = 800
HEIGHT = 400
NUM_WEAPONS = 5
NUM_BAD_GUYS = 5
FPS = 60


class Key(Enum):
    """Controls the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"


class Game:
    """The player, the shots and the bad guys, advanced one frame at a time."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        num_weapons: int = NUM_WEAPONS,
        num_bad_guys: int = NUM_BAD_GUYS,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.player = Player(height)
        self.weapons = [Weapon() for _ in range(num_weapons)]
        self.bad_guys = [BadGuy() for _ in range(num_bad_guys)]
        self.pressed = dict.fromkeys(Key, False)

    def key_down(self, key: Key) -> None:
        self.pressed[key] = True
        if key is Key.SPACE:
            for weapon in self.weapons:
                weapon.fire(self.player, self.player.direction)

    def key_up(self, key: Key) -> None:
        self.pressed[key] = False

    def tick(self) -> None:
        """Advance the game by one frame."""
        player = self.player
        if self.pressed[Key.UP]:
            player.move_up()
        if self.pressed[Key.DOWN]:
            player.move_down(self.height)
        if self.pressed[Key.LEFT]:
            player.move_left()
        if self.pressed[Key.RIGHT]:
            player.move_right(self.width)
        player.collide(self.bad_guys)

        for weapon in self.weapons:
            weapon.update(self.width, self.height)
        for guy in self.bad_guys:
            if not guy.live:
                guy.start(
                    self.width,
                    self.height,
                    self.bad_guys,
                    player.x,
                    player.y,
                    player.bound_x,
                    player.bound_y,
                    self.rng,
                )
        for weapon in self.weapons:
            weapon.collide(self.bad_guys)

    def draw(self, surface: pygame.Surface) -> None:
        self.player.draw(surface)
        for weapon in self.weapons:
            weapon.draw(surface)
        for guy in self.bad_guys:
            guy.draw(surface)


_KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(
        prog="bitmapshooter",
        description="Steer with the arrow keys, shoot with space, quit with Escape.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            print(f"bitmapshooter: cannot open display: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("Bitmap Shooter")
        clock = pygame.time.Clock()
        game = Game()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in _KEY_MAP:
                        key = _KEY_MAP[event.key]
                        if event.type == pygame.KEYDOWN:
                            game.key_down(key)
                        else:
                            game.key_up(key)
            game.tick()
            screen.fill((0, 0, 0))
            game.draw(screen)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())