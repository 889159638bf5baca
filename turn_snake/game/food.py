import random

import pygame

from ..config import FOOD_COLOR, GRID_SIZE_X, GRID_SIZE_Y, TILE_SIZE
from .snake import GridPosition


class Food:
    def __init__(self, pos, power):
        self.pos = GridPosition(*pos)
        self.power = power

    def __repr__(self):
        return f"Food(pos=({self.pos.x}, {self.pos.y}), power={self.power})"

    @classmethod
    def place_at(cls, pos, power):
        return cls(pos, power)

    @classmethod
    def place_random(cls, power, rng=None):
        """
        Food on a uniformly random cell of the grid.
        Without rng every call draws from a fresh system-seeded source, so
        two foods placed in the same tick may land on the same cell or on
        the snake. Nothing rejects that.
        """
        if rng is None:
            rng = random.Random()
        return cls((rng.randrange(GRID_SIZE_X), rng.randrange(GRID_SIZE_Y)), power)

    def consume(self, snake):
        snake.grow(self.power)

    def rect(self):
        return pygame.Rect(
            self.pos.x * TILE_SIZE + 2,
            self.pos.y * TILE_SIZE + 2,
            TILE_SIZE - 4,
            TILE_SIZE - 4,
        )

    def draw(self, surface):
        pygame.draw.rect(surface, FOOD_COLOR, self.rect())
