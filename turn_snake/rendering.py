import pygame

from .config import BACKGROUND_COLOR, STARTUP_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH


def create_window():
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


class GameRenderer:
    def __init__(self, screen):
        self.screen = screen

    def clear(self, color=BACKGROUND_COLOR):
        self.screen.fill(color)

    def draw_startup(self):
        self.clear(STARTUP_COLOR)
        self.present()

    def draw_frame(self, game):
        self.clear()
        game.draw(self.screen)

    def present(self):
        pygame.display.flip()
