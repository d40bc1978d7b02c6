"""Tests for food placement."""

import random

from gridsnake.food import random_food_position


def test_resamples_until_cell_is_free(scripted):
    rng = scripted([(10, 10), (11, 10), (3, 4)])
    assert random_food_position([(10, 10), (11, 10)], rng) == (3, 4)
    assert rng.calls == 6


def test_first_free_sample_is_used(scripted):
    rng = scripted([(0, 0)])
    assert random_food_position([(10, 10)], rng) == (0, 0)


def test_never_lands_on_snake():
    rng = random.Random(7)
    snake = [(x, y) for x in range(20) for y in range(20) if (x + y) % 3]
    for _ in range(50):
        pos = random_food_position(snake, rng)
        assert pos not in snake
        assert 0 <= pos[0] < 20 and 0 <= pos[1] < 20


def test_full_grid_returns_none():
    snake = [(x, y) for x in range(3) for y in range(3)]
    assert random_food_position(snake, random.Random(0), grid_size=3) is None


def test_single_free_cell_is_found():
    snake = [(x, y) for x in range(3) for y in range(3) if (x, y) != (2, 1)]
    assert random_food_position(snake, random.Random(0), grid_size=3) == (2, 1)
