import random

import pytest

from lifegrid.grid import Grid


def snapshot(grid):
    return [list(grid[i]) for i in range(grid.rows)]


def alive_cells(grid):
    return {
        (i, j)
        for i in range(grid.rows)
        for j in range(grid.cols)
        if grid[i][j]
    }


def make(rows, cols, cells):
    grid = Grid(rows, cols)
    for i, j in cells:
        grid.toggle(i, j)
    return grid


def test_new_grid_is_empty():
    grid = Grid(10, 12)
    assert grid.rows == 10
    assert grid.cols == 12
    assert alive_cells(grid) == set()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 5)


def test_toggle_flips_twice_back():
    grid = Grid(5, 5)
    grid.toggle(2, 3)
    assert grid[2][3] is True
    grid.toggle(2, 3)
    assert grid[2][3] is False


def test_clear_kills_everything():
    grid = make(6, 6, [(0, 0), (1, 2), (5, 5)])
    grid.clear()
    assert alive_cells(grid) == set()


def test_fill_random_is_reproducible_with_seed():
    a = Grid(20, 20)
    b = Grid(20, 20)
    a.fill_random(random.Random(42))
    b.fill_random(random.Random(42))
    assert snapshot(a) == snapshot(b)


def test_fill_random_density_near_probability():
    grid = Grid(100, 100)
    grid.fill_random(random.Random(7))
    fraction = len(alive_cells(grid)) / (grid.rows * grid.cols)
    assert 0.35 < fraction < 0.45


def test_neighbours_count_all_surrounding_cells():
    neighbours = [(i, j) for i in (1, 2, 3) for j in (1, 2, 3) if (i, j) != (2, 2)]
    grid = make(6, 6, neighbours)
    assert grid.alive_neighbours(2, 2) == len(neighbours)


def test_neighbours_ignore_the_cell_itself():
    grid = make(6, 6, [(2, 2)])
    assert grid.alive_neighbours(2, 2) == 0


def test_neighbours_wrap_around_edges():
    corners = [(5, 5), (5, 0), (0, 5)]
    grid = make(6, 6, corners)
    assert grid.alive_neighbours(0, 0) == len(corners)


def test_block_is_still_life():
    block = [(2, 2), (2, 3), (3, 2), (3, 3)]
    grid = make(8, 8, block)
    grid.next_state()
    assert alive_cells(grid) == set(block)


def test_blinker_has_period_two():
    horizontal = {(4, 3), (4, 4), (4, 5)}
    vertical = {(3, 4), (4, 4), (5, 4)}
    grid = make(10, 10, horizontal)
    grid.next_state()
    assert alive_cells(grid) == vertical
    grid.next_state()
    assert alive_cells(grid) == horizontal


def test_lonely_cell_dies():
    grid = make(10, 10, [(5, 5)])
    grid.next_state()
    assert alive_cells(grid) == set()


def test_glider_wraps_back_to_start_on_torus():
    glider = {(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}
    size = 10
    grid = make(size, size, glider)
    for _ in range(4 * size):
        grid.next_state()
    assert alive_cells(grid) == glider


def test_glider_population_is_preserved():
    glider = {(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}
    grid = make(12, 12, glider)
    for _ in range(7):
        grid.next_state()
        assert len(alive_cells(grid)) == len(glider)


def test_row_view_is_read_only():
    grid = Grid(3, 3)
    with pytest.raises(TypeError):
        grid[0][0] = True
    assert grid[0][0] is False
    assert alive_cells(grid) == set()