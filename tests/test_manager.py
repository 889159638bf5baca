import random

from turn_snake.config import GRID_SIZE_X, GRID_SIZE_Y, INITIAL_FOOD_COUNT, START_POSITION
from turn_snake.game import Direction, Food, GameState, Snake, new_game


class FixedRandom:
    """Hands out the given cells in order, one coordinate at a time."""

    def __init__(self, cells):
        self.values = [v for cell in cells for v in cell]

    def randrange(self, *args, **kwargs):
        return self.values.pop(0)


def test_new_game():
    game = new_game(random.Random(3))
    assert list(game.snake.body) == [START_POSITION]
    assert game.snake.facing is Direction.RIGHT
    assert game.snake.pending_growth == 0
    assert len(game.food) == INITIAL_FOOD_COUNT
    for food in game.food:
        assert food.power == 1
        assert 0 <= food.pos.x < GRID_SIZE_X
        assert 0 <= food.pos.y < GRID_SIZE_Y


def test_step_eats_food_ahead_and_grows_on_next_step():
    # snake at (10, 10) facing RIGHT, power 1 food at (11, 10): the move
    # happens before the food is eaten, so the extra segment only appears
    # on the following step
    rng = FixedRandom([(0, 0)])
    game = GameState(Snake([(10, 10)], Direction.RIGHT), [Food.place_at((11, 10), 1)], rng)

    assert game.step() == 1

    assert game.snake.head() == (11, 10)
    assert len(game.snake) == 1
    assert game.snake.pending_growth == 1
    assert game.food[0].pos == (0, 0)

    game.step()
    assert len(game.snake) == 2
    assert game.snake.pending_growth == 0


def test_step_without_food():
    far = Food.place_at((0, 19), 1)
    game = GameState(Snake([(10, 10)], Direction.RIGHT), [far], random.Random(0))
    assert game.step() == 0
    assert game.snake.head() == (11, 10)
    assert game.food[0] is far
    assert game.snake.pending_growth == 0


def test_replacement_always_has_power_one():
    rng = FixedRandom([(5, 5)])
    game = GameState(Snake([(10, 10)], Direction.DOWN), [Food.place_at((10, 11), 3)], rng)
    game.step()
    assert game.snake.pending_growth == 3
    assert game.food[0].power == 1
    assert game.food[0].pos == (5, 5)


def test_food_sharing_a_cell_is_all_eaten():
    rng = FixedRandom([(1, 1), (2, 2)])
    other = Food.place_at((0, 0), 1)
    food = [Food.place_at((9, 10), 1), other, Food.place_at((9, 10), 2)]
    game = GameState(Snake([(10, 10)], Direction.LEFT), food, rng)

    assert game.step() == 2

    assert game.snake.pending_growth == 3
    assert game.food[0].pos == (1, 1)
    assert game.food[1] is other
    assert game.food[2].pos == (2, 2)
