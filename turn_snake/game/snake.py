import logging
from collections import deque, namedtuple
from enum import Enum

import pygame

from ..config import SNAKE_COLOR, TILE_SIZE

logger = logging.getLogger(__name__)

GridPosition = namedtuple("GridPosition", ["x", "y"])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self):
        return self.value

    @property
    def reverse(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    @staticmethod
    def opposite(a, b):
        """True if b points exactly against a (UP/DOWN, LEFT/RIGHT)."""
        return a.reverse is b


def tile_center(pos):
    return (pos.x * TILE_SIZE + TILE_SIZE // 2, pos.y * TILE_SIZE + TILE_SIZE // 2)


class Snake:
    """
    Player snake on the grid.

    body is head-first: body[0] is the head, body[-1] the tail.
    pending_growth counts the upcoming advances that keep the tail,
    so the snake grows one segment per such advance.
    """

    def __init__(self, body, facing):
        self.body = deque(GridPosition(*pos) for pos in body)
        self.facing = facing
        self.pending_growth = 0

    def __len__(self):
        return len(self.body)

    def turn(self, direction):
        # a single segment has nothing to reverse into
        if Direction.opposite(self.facing, direction) and len(self.body) > 1:
            logger.debug(f"Turn {direction.name} rejected, snake is facing {self.facing.name}")
            return False
        self.facing = direction
        return True

    def advance(self, n=1):
        dx, dy = self.facing.delta
        for _ in range(n):
            head = self.head()
            self.body.appendleft(GridPosition(head.x + dx, head.y + dy))
            if self.pending_growth == 0:
                self.body.pop()
            else:
                self.pending_growth -= 1

    def grow(self, amount):
        self.pending_growth += amount

    def head(self):
        if not self.body:
            raise RuntimeError("snake has no body segments")
        return self.body[0]

    def step(self):
        self.advance(1)

    def draw(self, surface):
        # body as a polyline through the tile centers; a lone head draws nothing
        segments = list(self.body)
        for a, b in zip(segments, segments[1:]):
            pygame.draw.line(surface, SNAKE_COLOR, tile_center(a), tile_center(b))
