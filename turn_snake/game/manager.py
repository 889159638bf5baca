# game/manager.py

import logging

from ..config import FOOD_POWER, INITIAL_FOOD_COUNT, START_POSITION
from .food import Food
from .snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, snake, food, rng=None):
        self.snake = snake
        self.food = list(food)
        self.rng = rng

    def step(self):
        """
        One tick: move the snake one cell, then let it eat whatever food
        sits on its new head. Eaten food is replaced in the same tick by a
        new random food of power FOOD_POWER, whatever the eaten power was.
        Returns the number of food items eaten.
        """
        self.snake.step()
        head = self.snake.head()

        eaten = []
        for i, food in enumerate(self.food):
            if food.pos == head:
                food.consume(self.snake)
                eaten.append(i)

        for i in eaten:
            self.food[i] = Food.place_random(FOOD_POWER, self.rng)
            logger.info(f"Food eaten at ({head.x}, {head.y}), new food at {tuple(self.food[i].pos)}")

        logger.debug(f"Step: head=({head.x}, {head.y}) length={len(self.snake)} pending_growth={self.snake.pending_growth}")
        return len(eaten)

    def draw(self, surface):
        self.snake.draw(surface)
        for food in self.food:
            food.draw(surface)


def new_game(rng=None, food_count=INITIAL_FOOD_COUNT):
    snake = Snake([START_POSITION], Direction.RIGHT)
    food = [Food.place_random(FOOD_POWER, rng) for _ in range(food_count)]
    logger.info(f"Game started: snake at {START_POSITION} facing {snake.facing.name}, food at {[tuple(f.pos) for f in food]}")
    return GameState(snake, food, rng)
