"""Cell classification shared by the renderers."""

from .constants import GRID_SIZE

SNAKE = "snake"
FOOD = "food"
EMPTY = "empty"


def classify_cell(state, cell, occupied=None):
    """Return SNAKE, FOOD or EMPTY for a cell. Snake occupancy wins.

    ``occupied`` may be a precomputed set of the snake's cells.
    """
    if occupied is None:
        occupied = state.snake
    if cell in occupied:
        return SNAKE
    if state.food is not None and cell == state.food:
        return FOOD
    return EMPTY


def board_rows(state, grid_size=GRID_SIZE):
    """Return grid_size rows (top to bottom) of cell classifications."""
    occupied = set(state.snake)
    return [
        [classify_cell(state, (x, y), occupied) for x in range(grid_size)]
        for y in range(grid_size)
    ]


def render_text(state, grid_size=GRID_SIZE):
    """
    Returns a string representation of the board with:
    . = empty cell
    * = food
    @ = snake head
    # = snake body
    Row 0 is printed first, matching screen coordinates.
    """
    symbols = {SNAKE: "#", FOOD: "*", EMPTY: "."}
    head_x, head_y = state.head
    lines = []
    for y, row in enumerate(board_rows(state, grid_size)):
        chars = [symbols[kind] for kind in row]
        if head_y == y:
            chars[head_x] = "@"
        lines.append(" ".join(chars))
    return "\n".join(lines)
