import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from snake.config import CELL_SIZE, GREEN, RED
from snake.game import advance
from snake.render import draw_game, draw_game_over


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    yield pygame.font.SysFont(None, 24)
    pygame.font.quit()


def snapshot(state):
    return (list(state.snake), state.food, state.score, state.over, state.cleared)


def pixel(surface, cell):
    x, y = cell
    return tuple(surface.get_at((x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)))[:3]


def test_draws_food_and_head_without_touching_state(make_state, font):
    state = make_state([(2, 2), (1, 2)], food=(4, 4), score=3)
    screen = pygame.Surface((5 * CELL_SIZE, 5 * CELL_SIZE))
    before = snapshot(state)

    draw_game(screen, font, state)

    assert snapshot(state) == before
    assert pixel(screen, (4, 4)) == RED
    assert pixel(screen, (2, 2)) == GREEN


def test_game_over_overlay_leaves_state_alone(make_state, font):
    state = make_state([(4, 2)], food=(0, 0))
    advance(state)
    assert state.over is True
    screen = pygame.Surface((5 * CELL_SIZE, 5 * CELL_SIZE))
    before = snapshot(state)

    draw_game(screen, font, state)
    draw_game_over(screen, font, state)

    assert snapshot(state) == before


def test_grid_cleared_without_food(make_state, font):
    state = make_state([(0, 0)], food=(1, 0), grid=(2, 1), max_food_attempts=0)
    advance(state)
    assert state.cleared is True
    assert state.food is None
    screen = pygame.Surface((2 * CELL_SIZE, 1 * CELL_SIZE))
    before = snapshot(state)

    draw_game(screen, font, state)
    # the head is drawn before the overlay dims the board
    assert pixel(screen, (1, 0)) == GREEN
    draw_game_over(screen, font, state)

    assert snapshot(state) == before
