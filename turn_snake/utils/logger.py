import logging
import sys

LOGGER_NAME = "turn_snake"


def setup_logger(name=LOGGER_NAME, level=logging.INFO):
    """
    Sets up the package logger; every turn_snake.* module logger reports
    through it. Logs to stdout as [time] [LEVEL] module: message.
    Safe to call again, the handler is only added once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter('[%(asctime)s] [%(levelname)s] %(name)s: %(message)s', "%H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
