"""Translate raw key identifiers into directions."""

import pygame

from .constants import DOWN, LEFT, RIGHT, UP

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

# Names as delivered by browsers and other non-pygame input layers.
KEY_NAME_TO_DIRECTION = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


def direction_for_key(key):
    """Return the direction for a pygame key code or key name, else None."""
    if isinstance(key, str):
        return KEY_NAME_TO_DIRECTION.get(key)
    return KEY_TO_DIRECTION.get(key)


def direction_to_text(direction):
    """Convert a direction vector into a compact label for debug UI."""
    mapping = {
        None: "none",
        UP: "up",
        DOWN: "down",
        LEFT: "left",
        RIGHT: "right",
    }
    return mapping.get(direction, "unknown")
