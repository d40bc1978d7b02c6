"""Tests for the pygame frontend that do not need a window."""

import pygame

from gridsnake.app import Layout, draw_background, draw_board
from gridsnake.constants import DOWN, FOOD_COLOR, GRID_SIZE, HUD_HEIGHT, LEFT, RIGHT, UP
from gridsnake.engine import GameState


class TestLayout:

    def test_dimensions(self):
        layout = Layout(cell_size=10)
        assert layout.width == GRID_SIZE * 10
        assert layout.board_top == HUD_HEIGHT
        assert layout.grid_rect((2, 3)) == pygame.Rect(20, HUD_HEIGHT + 30, 10, 10)

    def test_button_at(self):
        layout = Layout()
        for direction in (UP, DOWN, LEFT, RIGHT):
            assert layout.button_at(layout.buttons[direction].center) == direction
        assert layout.button_at((0, 0)) is None

    def test_buttons_below_board(self):
        layout = Layout()
        for rect in layout.buttons.values():
            assert rect.top >= layout.board_top + layout.board_size
            assert rect.bottom <= layout.height


def test_draw_board_paints_food():
    layout = Layout(cell_size=20)
    surface = pygame.Surface((layout.width, layout.height))
    state = GameState(snake=((1, 1),), direction=RIGHT, food=(5, 5), started=True)

    draw_background(surface, layout)
    draw_board(surface, layout, state)

    rect = layout.grid_rect((5, 5), padding=2)
    # Sample below the highlight, inside the pellet.
    color = surface.get_at((rect.centerx, rect.centery + rect.height // 4))
    assert tuple(color)[:3] == FOOD_COLOR
