"""Arcade snake on a 20x20 grid.

The game rules live in :mod:`snake_arcade.engine` and import without pygame
display setup. The pygame front end is exported lazily so that::

	from snake_arcade import SnakeGameApp

does not pull in the renderer, audio and camera modules until it is used.
"""

__version__ = "0.2"

__all__ = ["Direction", "GameEngine", "GameState", "SnakeGameApp"]

def __getattr__(name: str):
	if name == "SnakeGameApp":
		from .app import SnakeGameApp

		return SnakeGameApp
	if name in ("GameEngine", "GameState"):
		from . import engine

		return getattr(engine, name)
	if name == "Direction":
		from .snake import Direction

		return Direction
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
