"""Turn swipes, finger flicks and key presses into directions."""

import pygame

from config import SWIPE_THRESHOLD
from .snake import Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def swipe_direction(dx, dy, threshold=SWIPE_THRESHOLD):
    """Map a swipe vector (screen coordinates, y down) to a direction.

    Returns None when the swipe is shorter than ``threshold`` on its dominant
    axis. Ties between the axes resolve to vertical.
    """
    if max(abs(dx), abs(dy)) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeDetector:
    """Tracks one pointer and reports the direction it was swiped in."""

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.anchor = None

    def begin(self, pos):
        self.anchor = tuple(pos)

    def cancel(self):
        self.anchor = None

    def end(self, pos):
        """Finish a discrete swipe (touch up / mouse release)."""
        if self.anchor is None:
            return None
        start, self.anchor = self.anchor, None
        return swipe_direction(pos[0] - start[0], pos[1] - start[1], self.threshold)

    def feed(self, pos):
        """Continuous pointer: emit a direction each time it travels past the threshold.

        The pointer re-anchors after every emitted direction. A lost pointer
        (``pos`` None) drops the anchor.
        """
        if pos is None:
            self.cancel()
            return None
        if self.anchor is None:
            self.begin(pos)
            return None
        direction = swipe_direction(pos[0] - self.anchor[0], pos[1] - self.anchor[1], self.threshold)
        if direction is not None:
            self.anchor = tuple(pos)
        return direction
