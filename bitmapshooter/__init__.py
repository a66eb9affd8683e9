"""A small top-down arcade shooter built on pygame: player, shots, enemies and the game loop."""

__version__ = "0.1.0"