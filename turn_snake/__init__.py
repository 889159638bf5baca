"""Turn-based snake: the snake only moves when you press an arrow key."""

__version__ = "0.1.0"
