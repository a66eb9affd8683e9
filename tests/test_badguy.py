import random

import pygame
import pytest

from bitmapshooter.badguy import SPAWN_BUFFER, BadGuy


def test_new_bad_guy_is_dead_at_origin():
    guy = BadGuy()
    assert (guy.x, guy.y, guy.live) == (0, 0, False)
    assert guy.bound_x == 48 and guy.bound_y == 48


@pytest.mark.parametrize("seed", range(10))
def test_start_places_inside_field(seed):
    guy = BadGuy()
    guy.start(800, 400, [guy], 20, 200, 64, 64, random.Random(seed))
    assert guy.live
    assert 0 <= guy.x < 800 - guy.bound_x
    assert 0 <= guy.y < 400 - guy.bound_y


@pytest.mark.parametrize("seed", range(10))
def test_start_avoids_player(seed):
    guy = BadGuy()
    px, py, pbx, pby = 300, 150, 64, 64
    guy.start(800, 400, [guy], px, py, pbx, pby, random.Random(seed))
    in_x = px - pbx - SPAWN_BUFFER < guy.x < px + pbx + SPAWN_BUFFER
    in_y = py - pby - SPAWN_BUFFER < guy.y < py + pby + SPAWN_BUFFER
    assert not (in_x and in_y)


@pytest.mark.parametrize("seed", range(5))
def test_start_avoids_other_live_bad_guys(seed):
    rng = random.Random(seed)
    guys = [BadGuy() for _ in range(5)]
    for guy in guys:
        guy.start(800, 400, guys, 20, 200, 64, 64, rng)
    assert all(guy.live for guy in guys)
    for i, first in enumerate(guys):
        for second in guys[i + 1:]:
            in_x = (
                first.x - first.bound_x - SPAWN_BUFFER
                < second.x
                < first.x + first.bound_x + SPAWN_BUFFER
            )
            in_y = (
                first.y - first.bound_y - SPAWN_BUFFER
                < second.y
                < first.y + first.bound_y + SPAWN_BUFFER
            )
            assert not (in_x and in_y)


def test_dead_bad_guys_do_not_block():
    blocker = BadGuy()
    guy = BadGuy()
    width = guy.bound_x + 10
    height = guy.bound_y + 10
    guy.start(width, height, [blocker, guy], 1000, 1000, 64, 64, random.Random(3))
    assert guy.live
    assert blocker.live is False
    assert 0 <= guy.x < 10
    assert 0 <= guy.y < 10
    assert (
        blocker.x - blocker.bound_x - SPAWN_BUFFER
        < guy.x
        < blocker.x + blocker.bound_x + SPAWN_BUFFER
    )
    assert (
        blocker.y - blocker.bound_y - SPAWN_BUFFER
        < guy.y
        < blocker.y + blocker.bound_y + SPAWN_BUFFER
    )


def test_start_in_too_small_field_raises():
    guy = BadGuy()
    with pytest.raises(ValueError):
        guy.start(guy.bound_x, 400, [guy], 0, 0, 64, 64, random.Random(0))


def test_draw_only_when_live():
    surface = pygame.Surface((100, 100))
    surface.fill((1, 2, 3))
    guy = BadGuy()
    guy.x, guy.y = 10, 10
    guy.draw(surface)
    assert surface.get_at((42, 42))[:3] == (1, 2, 3)
    guy.live = True
    guy.draw(surface)
    assert surface.get_at((42, 42))[:3] == (255, 255, 255)