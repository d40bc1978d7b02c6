"""
Game engine for grid snake.

The engine owns the only mutable GameState. Input reaches it through
``steer`` (which consults the DirectionArbiter) and time reaches it through
``tick``; everything else reads snapshots from ``get_state``.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .arbiter import DirectionArbiter
from .board import render_text
from .constants import DIRECTIONS, GRID_SIZE, START_CELL
from .food import random_food_position

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass
class GameState:
    """
    A snapshot of the game.

    Attributes:
        snake: tuple of (x, y) cells from head at index 0 to tail at the end
        direction: current heading, or None before the first input
        food: position of the food, or None once the board is full
        started: whether a first direction has been accepted
        game_over: set by a wall or self collision
        game_over_reason: 'wall', 'self' or None
        won: set when the snake fills every cell of the grid
    """

    snake: Tuple[Cell, ...]
    direction: Optional[Cell] = None
    food: Optional[Cell] = None
    started: bool = False
    game_over: bool = False
    game_over_reason: Optional[str] = None
    won: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def score(self) -> int:
        """Food eaten since the last reset."""
        return len(self.snake) - 1

    @property
    def can_tick(self) -> bool:
        """True when a tick would advance the game."""
        return (
            self.started
            and not self.game_over
            and not self.won
            and self.direction is not None
            and self.food is not None
        )


def in_bounds(cell, grid_size=GRID_SIZE):
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def collision_reason(new_head, body, grid_size=GRID_SIZE):
    """Return 'wall', 'self' or None for a head moving into ``new_head``.

    ``body`` is the pre-move snake, tail included.
    """
    if not in_bounds(new_head, grid_size):
        return "wall"
    if new_head in body:
        return "self"
    return None


class GameEngine:
    """
    Owns and advances the authoritative GameState.

    Args:
        rng: random source for food placement; anything with ``randrange``.
            Defaults to ``random.Random(seed)``.
        seed: seed for the default random source.
        snake, direction, food: optional starting position. When omitted the
            game starts from a single cell at START_CELL with no heading.
    """

    def __init__(self, rng=None, seed=None, snake=None, direction=None, food=None):
        self._rng = rng if rng is not None else random.Random(seed)
        self._arbiter = DirectionArbiter()
        self._session = 0
        self._state = self._initial_state(snake, direction, food)

    def _initial_state(self, snake=None, direction=None, food=None):
        snake = tuple(snake) if snake is not None else (START_CELL,)
        if not snake:
            raise ValueError("Snake must have at least one cell.")
        if not all(in_bounds(cell) for cell in snake):
            raise ValueError("Snake does not fit within the grid.")
        if len(set(snake)) != len(snake):
            raise ValueError("Snake cells overlap.")
        if direction is not None and direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction!r}")

        if food is None:
            food = random_food_position(snake, self._rng)
        elif food in snake or not in_bounds(food):
            raise ValueError(f"Food cannot be placed at {food!r}.")

        return GameState(
            snake=snake,
            direction=direction,
            food=food,
            started=direction is not None,
            won=food is None,
        )

    @property
    def session(self):
        """Counter bumped by every reset; lets tick drivers spot a new game."""
        return self._session

    def get_state(self):
        """Return a read-only snapshot of the current state."""
        return replace(self._state)

    def steer(self, requested):
        """Apply a heading request if the arbiter accepts it.

        Returns True when the heading changed. Requests after the game has
        ended are ignored.
        """
        state = self._state
        if state.game_over or state.won:
            return False

        decision = self._arbiter.propose_for(requested, state)
        if decision is None:
            return False

        state.direction = decision.direction
        if decision.starts_game:
            state.started = True
            logger.info("Game started heading %s", decision.direction)
        return True

    def tick(self):
        """Advance the game by one step and return the resulting snapshot."""
        state = self._state
        if not state.can_tick:
            return self.get_state()

        head_x, head_y = state.head
        dx, dy = state.direction
        new_head = (head_x + dx, head_y + dy)

        # The old tail still counts as occupied during the check.
        reason = collision_reason(new_head, state.snake)
        if reason is not None:
            state.game_over = True
            state.game_over_reason = reason
            logger.info("Game over (%s) at %s with length %d", reason, new_head, state.length)
            logger.debug("Final board:\n%s", render_text(state))
            return self.get_state()

        moved = (new_head,) + state.snake

        if new_head == state.food:
            state.snake = moved
            state.food = random_food_position(moved, self._rng)
            if state.food is None:
                state.won = True
                logger.info("Snake filled the grid at length %d", state.length)
                logger.debug("Final board:\n%s", render_text(state))
            else:
                logger.debug("Ate food at %s, new food at %s", new_head, state.food)
        else:
            state.snake = moved[:-1]

        return self.get_state()

    def reset(self):
        """Restore the initial single-cell snake with fresh food."""
        self._state = self._initial_state()
        self._session += 1
        logger.info("Game reset, food at %s", self._state.food)
        return self.get_state()
