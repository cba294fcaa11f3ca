import random

from classic_snake.grid import free_cells, in_bounds, random_empty_cell, step


def test_in_bounds_edges():
    assert in_bounds((0, 0), 20)
    assert in_bounds((19, 19), 20)
    assert not in_bounds((20, 10), 20)
    assert not in_bounds((10, -1), 20)
    assert not in_bounds((-1, 0), 20)


def test_step_moves_one_cell():
    assert step((10, 10), 1, 0) == (11, 10)
    assert step((10, 10), 0, -1) == (10, 9)


def test_free_cells_excludes_occupied():
    cells = free_cells([(0, 0), (1, 1)], 2)
    assert cells == [(1, 0), (0, 1)]


def test_random_empty_cell_never_picks_occupied():
    rng = random.Random(7)
    occupied = [(x, 0) for x in range(5)] + [(x, 1) for x in range(4)]
    for _ in range(200):
        cell = random_empty_cell(occupied, 5, rng)
        assert cell not in occupied
        assert in_bounds(cell, 5)


def test_random_empty_cell_single_choice():
    occupied = [(0, 0), (1, 0), (0, 1)]
    assert random_empty_cell(occupied, 2, random.Random(0)) == (1, 1)


def test_random_empty_cell_full_grid_returns_none():
    occupied = [(x, y) for x in range(3) for y in range(3)]
    assert random_empty_cell(occupied, 3) is None


def test_random_empty_cell_covers_all_free_cells():
    rng = random.Random(99)
    seen = {random_empty_cell([(0, 0)], 3, rng) for _ in range(500)}
    assert seen == set(free_cells([(0, 0)], 3))
