from .snake import Direction, GridPosition, Snake
from .food import Food
from .manager import GameState, new_game

__all__ = ["Direction", "GridPosition", "Snake", "Food", "GameState", "new_game"]
