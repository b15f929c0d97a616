"""Pure grid algorithms plus the board-entity lookup shared by the board systems.

A grid is a tuple of row tuples of booleans (``True`` = lit). Every
transition returns a new grid; nothing here mutates its input.
"""
from __future__ import annotations

import random
from typing import List, Tuple

from esper import World

from lightsout.components.board import Board

Coord = Tuple[int, int]
Grid = Tuple[Tuple[bool, ...], ...]

# Clicked cell first, then left, right, above, below.
FLIP_OFFSETS: Tuple[Coord, ...] = ((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0))


def create_grid(nrows: int, ncols: int, chance_light_starts_on: float, rng: random.Random | None = None) -> Grid:
    """Sample an ``nrows`` x ``ncols`` grid, each cell lit with the given probability."""
    rand = rng or random.Random()
    return tuple(
        tuple(rand.random() < chance_light_starts_on for _ in range(ncols))
        for _ in range(nrows)
    )


def grid_shape(grid: Grid) -> Coord:
    nrows = len(grid)
    ncols = len(grid[0]) if nrows else 0
    return nrows, ncols


def in_bounds(grid: Grid, row: int, col: int) -> bool:
    nrows, ncols = grid_shape(grid)
    return 0 <= row < nrows and 0 <= col < ncols


def flip_set(grid: Grid, row: int, col: int) -> List[Coord]:
    """Positions a click at (row, col) inverts; off-board neighbours are dropped."""
    return [
        (row + dr, col + dc)
        for dr, dc in FLIP_OFFSETS
        if in_bounds(grid, row + dr, col + dc)
    ]


def toggle_around(grid: Grid, row: int, col: int) -> Grid:
    """Return a copy of ``grid`` with (row, col) and its orthogonal neighbours inverted."""
    flipped = set(flip_set(grid, row, col))
    return tuple(
        tuple((not lit) if (r, c) in flipped else lit for c, lit in enumerate(cells))
        for r, cells in enumerate(grid)
    )


def has_won(grid: Grid) -> bool:
    """True when every cell is lit. An empty grid counts as won."""
    return all(all(cells) for cells in grid)


def count_lit(grid: Grid) -> int:
    return sum(sum(1 for lit in cells if lit) for cells in grid)


def grid_from_rows(rows) -> Grid:
    """Normalise any nested iterable of truthy values into a Grid."""
    return tuple(tuple(bool(v) for v in cells) for cells in rows)


def get_board_entity(world: World) -> int:
    for entity, _ in world.get_component(Board):
        return entity
    raise RuntimeError("Board entity not found")

