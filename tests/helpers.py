from __future__ import annotations

import random
from typing import Sequence

from esper import World

from lightsout.components.game_state import GameMode
from lightsout.config import BoardConfig
from lightsout.events.bus import EventBus
from lightsout.systems.board_ops import Grid, grid_from_rows
from lightsout.systems.game_board import GameBoardSystem
from lightsout.utils.game_state import set_game_mode
from lightsout.world import create_world


def grid_of(picture: str) -> Grid:
    """Build a grid from rows of ``O`` (lit) and ``.`` (unlit), whitespace separated."""
    return grid_from_rows([ch == "O" for ch in row] for row in picture.split())


def make_board(
    grid: Sequence[Sequence[bool]] | None = None,
    *,
    config: BoardConfig | None = None,
    seed: int = 0,
) -> tuple[World, EventBus, GameBoardSystem]:
    """World + bus + board system, optionally forced onto a known grid."""

    if grid is not None:
        grid = grid_from_rows(grid)
        config = config or BoardConfig(nrows=len(grid), ncols=len(grid[0]))
    bus = EventBus()
    world = create_world(rng=random.Random(seed))
    board_system = GameBoardSystem(world, bus, config)
    if grid is not None:
        board_system.state.grid = grid
        mode = GameMode.WON if board_system.has_won() else GameMode.PLAYING
        set_game_mode(world, bus, mode)
    return world, bus, board_system
