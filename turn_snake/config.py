"""
Configuration for Turn-Based Snake
"""
import argparse
import logging

# --- Game settings ---
GRID_SIZE_X = 20
GRID_SIZE_Y = 20
TILE_SIZE = 30
WINDOW_WIDTH = GRID_SIZE_X * TILE_SIZE    # 600 pixels
WINDOW_HEIGHT = GRID_SIZE_Y * TILE_SIZE   # 600 pixels
WINDOW_TITLE = "Turn-Based Snake"

START_POSITION = (10, 10)
INITIAL_FOOD_COUNT = 3
FOOD_POWER = 1

# only rendering and input polling run at this rate, ~16.7 ms per frame
FPS = 60

# --- Colors (RGB) ---
SNAKE_COLOR      = (200, 0, 0)
FOOD_COLOR       = (0, 0, 150)
BACKGROUND_COLOR = (100, 200, 0)
STARTUP_COLOR    = (0, 255, 255)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Turn-based snake: every arrow key press moves the snake one cell")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement (random if omitted)")
    parser.add_argument("--food_count", type=int, default=INITIAL_FOOD_COUNT, help="Number of food items on the field")
    parser.add_argument("--log_level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args(argv)
    args.log_level = getattr(logging, args.log_level)
    return args
