import random

import pytest

from lightsout.systems.board_ops import (
    count_lit,
    create_grid,
    flip_set,
    grid_shape,
    has_won,
    toggle_around,
)
from tests.helpers import grid_of


@pytest.mark.parametrize("nrows, ncols", [(1, 1), (3, 3), (5, 5), (2, 7), (9, 4)])
def test_create_grid_has_requested_dimensions(nrows, ncols):
    grid = create_grid(nrows, ncols, 0.4, random.Random(3))
    assert len(grid) == nrows
    assert all(len(row) == ncols for row in grid)
    assert grid_shape(grid) == (nrows, ncols)


def test_create_grid_chance_zero_is_all_unlit():
    grid = create_grid(4, 6, 0.0, random.Random(1))
    assert count_lit(grid) == 0


def test_create_grid_chance_one_is_all_lit():
    grid = create_grid(4, 6, 1.0, random.Random(1))
    assert count_lit(grid) == 24
    assert has_won(grid)


def test_create_grid_is_reproducible_with_seeded_rng():
    assert create_grid(5, 5, 0.4, random.Random(42)) == create_grid(5, 5, 0.4, random.Random(42))


def test_toggle_center_flips_plus_shape_only():
    grid = grid_of("""
        ...
        ...
        ...
    """)
    assert toggle_around(grid, 1, 1) == grid_of("""
        .O.
        OOO
        .O.
    """)


def test_toggle_corner_clips_to_three_cells():
    grid = grid_of("""
        ...
        ...
        ...
    """)
    assert toggle_around(grid, 0, 0) == grid_of("""
        OO.
        O..
        ...
    """)
    assert sorted(flip_set(grid, 0, 0)) == [(0, 0), (0, 1), (1, 0)]


def test_toggle_edge_flips_four_cells():
    grid = grid_of("""
        ...
        ...
        ...
    """)
    assert count_lit(toggle_around(grid, 0, 1)) == 4
    assert count_lit(toggle_around(grid, 2, 1)) == 4


def test_toggle_inverts_lit_cells_too():
    grid = grid_of("""
        OOO
        OOO
        OOO
    """)
    assert toggle_around(grid, 2, 2) == grid_of("""
        OOO
        OO.
        O..
    """)


def test_toggle_on_single_cell_board():
    assert toggle_around(grid_of("."), 0, 0) == grid_of("O")


def test_double_toggle_restores_grid():
    rng = random.Random(7)
    grid = create_grid(5, 6, 0.5, rng)
    for row in range(5):
        for col in range(6):
            assert toggle_around(toggle_around(grid, row, col), row, col) == grid


def test_toggle_leaves_input_grid_untouched():
    grid = grid_of("""
        O..
        .O.
        ..O
    """)
    snapshot = tuple(tuple(row) for row in grid)
    result = toggle_around(grid, 1, 1)
    assert grid == snapshot
    assert result is not grid
    assert result != grid


def test_has_won_only_when_every_cell_is_lit():
    assert has_won(grid_of("OOO OOO"))
    assert not has_won(grid_of("... ..."))
    assert not has_won(grid_of("O.O .O."))


@pytest.mark.parametrize("row, col", [(r, c) for r in range(3) for c in range(4)])
def test_single_unlit_cell_is_not_a_win(row, col):
    grid = tuple(
        tuple(not (r == row and c == col) for c in range(4))
        for r in range(3)
    )
    assert not has_won(grid)


def test_empty_grid_counts_as_won():
    assert has_won(())
