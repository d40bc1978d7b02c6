"""Food placement on the grid."""

from .constants import GRID_SIZE


def random_food_position(snake, rng, grid_size=GRID_SIZE):
    """Return a random grid cell that is not occupied by the snake.

    ``rng`` is any object with a ``randrange`` method (``random.Random`` or a
    scripted stand-in). Returns None when the snake covers the whole grid.
    """
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        return None

    while True:
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in occupied:
            return pos
