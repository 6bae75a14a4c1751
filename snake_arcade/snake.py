from collections import deque
from enum import Enum
from config import *


class Direction(Enum):
    """Heading of the snake, valued by its unit step on the grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))

    def is_reverse_of(self, other):
        return isinstance(other, Direction) and self is other.opposite


class Snake:
    """Snake body on the grid, head first, tail last."""

    def __init__(self, cells=None):
        self.reset(cells)

    def reset(self, cells=None):
        """Reset snake to the starting body (or to ``cells`` when given)."""
        if cells is None:
            cells = INITIAL_SNAKE
        cells = [tuple(cell) for cell in cells]
        if not cells:
            raise ValueError("snake needs at least one cell")
        if len(set(cells)) != len(cells):
            raise ValueError("snake cells must be distinct")
        self.segments = deque(cells)

    def __len__(self):
        return len(self.segments)

    @property
    def head(self):
        return self.segments[0]

    @property
    def tail(self):
        return self.segments[-1]

    def cells(self):
        return tuple(self.segments)

    def next_head(self, direction):
        """Return the cell the head moves into when stepping in ``direction``."""
        x, y = self.head
        return (x + direction.dx, y + direction.dy)

    def check_wall_collision(self, cell, board_size=BOARD_SIZE):
        """Check if ``cell`` lies outside the board."""
        x, y = cell
        return not (0 <= x < board_size and 0 <= y < board_size)

    def check_self_collision(self, cell, include_tail=True):
        """Check if ``cell`` hits the current body.

        With ``include_tail`` False the last segment is ignored, since it is
        vacated on a move that does not grow the snake.
        """
        body = self.segments
        if not include_tail and len(body) > 1:
            body = list(body)[:-1]
        return cell in body

    def advance(self, new_head, grow=False):
        """Move the head into ``new_head``; the tail follows unless growing."""
        self.segments.appendleft(new_head)
        if not grow:
            self.segments.pop()
