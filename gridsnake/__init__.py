"""
Grid snake: a deterministic snake engine with a pygame frontend.

The engine modules have no display dependency; ``gridsnake.app`` is the
only module that opens a window.
"""

from .arbiter import Decision, DirectionArbiter
from .constants import DIRECTIONS, DOWN, GRID_SIZE, LEFT, RIGHT, UP
from .engine import GameEngine, GameState

__all__ = [
    'GRID_SIZE', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS',
    'Decision', 'DirectionArbiter',
    'GameEngine', 'GameState',
]
