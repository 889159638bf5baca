import logging

import pygame

from .config import FPS, parse_args
from .game import Direction, new_game
from .rendering import GameRenderer, create_window
from .utils.logger import setup_logger
from .utils.seed import make_rng

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def handle_events(game, events):
    """
    Apply one frame worth of input to the game.
    Every accepted turn moves the snake one step; returns False once the
    player asked to quit.
    """
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key == pygame.K_ESCAPE:
            return False
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is not None and game.snake.turn(direction):
            game.step()
    return True


def run(game, renderer, clock=None):
    """
    Render and poll input at FPS until the player quits.
    The snake itself only moves on accepted arrow key presses.
    """
    if clock is None:
        clock = pygame.time.Clock()
    renderer.draw_startup()
    while True:
        if not handle_events(game, pygame.event.get()):
            break
        renderer.draw_frame(game)
        renderer.present()
        clock.tick(FPS)
    logger.info(f"Quit with snake length {len(game.snake)}")


def main(argv=None):
    args = parse_args(argv)
    setup_logger(level=args.log_level)

    game = new_game(make_rng(args.seed), args.food_count)
    try:
        renderer = GameRenderer(create_window())
        run(game, renderer)
    except pygame.error:
        logger.exception("pygame failure, exiting")
        raise
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
