"""
grid.py — Pure helpers over grid coordinates.

No game state lives here; every function takes what it needs and
returns a new value.
"""

import random

Cell = tuple[int, int]


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def step(cell: Cell, dx: int, dy: int) -> Cell:
    """Return the cell one move of (dx, dy) away."""
    return cell[0] + dx, cell[1] + dy


def free_cells(occupied, grid_size: int) -> list[Cell]:
    """All cells of the grid not in `occupied`, in row-major order."""
    taken = set(occupied)
    return [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in taken
    ]


def random_empty_cell(occupied, grid_size: int, rng: random.Random = None):
    """
    Pick a cell uniformly at random among those not in `occupied`.

    Returns None when the grid is completely filled.
    """
    candidates = free_cells(occupied, grid_size)
    if not candidates:
        return None
    return (rng or random).choice(candidates)
