import random
from config import *


class Food:
    """A single food cell on the board."""

    def __init__(self, position=INITIAL_FOOD, score=FOOD_SCORE, board_size=BOARD_SIZE):
        self.position = tuple(position)
        self.score = score
        self.board_size = board_size

    def spawn(self, rng=random):
        """Pick a uniformly random cell on the board."""
        return (rng.randrange(self.board_size), rng.randrange(self.board_size))

    def respawn(self, occupied, rng=random):
        """Move food to a random cell that is not in ``occupied``.

        Resamples until a free cell comes up; a completely full board is not
        handled and will not terminate.
        """
        occupied = set(occupied)
        new_pos = self.spawn(rng)
        while new_pos in occupied:
            new_pos = self.spawn(rng)
        self.position = new_pos
        return new_pos

    def check_collision(self, snake_head):
        """Check if snake head is on the food."""
        return tuple(snake_head) == self.position
