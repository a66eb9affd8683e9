# bitmapshooter

A small top-down arcade shooter built on pygame. You steer a ship around an
800×400 arena. Five enemies are always on the field. Each one appears at a
random spot that is clear of you and of the other enemies. When you shoot an
enemy, a new one appears somewhere else on the next frame.

## Installing

```
pip install .
```

## Playing

```
bitmapshooter
```

Controls:

| Key        | Action                                      |
|------------|---------------------------------------------|
| Arrow keys | Move, and turn to face that direction       |
| Space      | Fire every idle shot in the facing direction |
| Escape     | Quit                                        |

You can also close the window to quit. The ship starts on the left side of
the arena and faces up.

There are five shots. Pressing space launches every shot that is not already
in flight. They all start from the centre of the ship and travel the way the
ship faces. A shot ends when it leaves the arena. When it hits an enemy, both
the shot and the enemy are removed.

You cannot move through enemies. If a move would overlap one, the ship goes
back to where it was before that move.

If no display can be opened, `bitmapshooter` prints an error and exits with
status 1. The only command-line option it takes is `--help`.

## Using the pieces

The game rules are kept apart from the drawing, so you can run them without a
window:

```python
import random
from bitmapshooter.game import Game, Key

game = Game(800, 400, 5, 5, random.Random(1))
game.key_down(Key.RIGHT)
game.tick()
game.key_down(Key.SPACE)
game.tick()
print(game.player.x, [w.live for w in game.weapons])
```

- `Game.key_down(key)` and `Game.key_up(key)` set which keys are held.
  `Key.SPACE` also fires.
- `Game.tick()` moves the player and then resolves player collisions. It then
  moves the shots, respawns any dead enemies, and checks shot hits.
- `Game.draw(surface)` draws the current state onto a pygame surface.

Each object's movement and collision rules live in its own module:

- `bitmapshooter.player` has `Player` and the `Direction` enum.
- `bitmapshooter.weapon` has `Weapon`.
- `bitmapshooter.badguy` has `BadGuy`.

`BadGuy.start` raises `ValueError` if the arena is too small to hold an enemy.

## What it does not do

There is no score, no lives, no level progression and no sound. Enemies do not
move or attack. The arena size is fixed at 800×400 when played from the
command line.

## Running the tests

```
pip install .[test]
pytest
```