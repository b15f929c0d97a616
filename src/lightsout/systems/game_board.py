from __future__ import annotations

import logging
import random
from typing import List

from esper import World

from lightsout.components.board import Board, BoardState
from lightsout.components.cell import CellPosition
from lightsout.components.game_state import GameMode
from lightsout.config import BoardConfig
from lightsout.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_CLICK,
    EVENT_GAME_WON,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.rendering.cell_view import CellView
from lightsout.systems import board_ops
from lightsout.systems.board_ops import Grid
from lightsout.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameBoardSystem:
    """Owns the Lights Out grid: creates it, applies toggles, and reports wins.

    The grid lives in the ``BoardState`` component of a single board entity.
    Transitions are computed by the pure helpers in ``board_ops`` and the
    result replaces the stored grid, so a snapshot taken from ``grid`` stays
    valid after later clicks.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        config: BoardConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or BoardConfig()
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.board_entity = self.world.create_entity(
            Board(rows=self.config.nrows, cols=self.config.ncols),
            BoardState(grid=self.initialize()),
        )
        for r in range(self.config.nrows):
            for c in range(self.config.ncols):
                self.world.create_entity(CellPosition(row=r, col=c))
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self._sync_mode()

    @property
    def state(self) -> BoardState:
        return self.world.component_for_entity(self.board_entity, BoardState)

    @property
    def grid(self) -> Grid:
        return self.state.grid

    def initialize(self) -> Grid:
        """Sample a fresh grid from the configured size and start probability."""
        cfg = self.config
        return board_ops.create_grid(cfg.nrows, cfg.ncols, cfg.chance_light_starts_on, self._rng)

    def toggle_around(self, row: int, col: int) -> Grid:
        """Return the grid that results from clicking (row, col); the current grid is untouched."""
        return board_ops.toggle_around(self.grid, row, col)

    def has_won(self) -> bool:
        return board_ops.has_won(self.grid)

    def flip_cells_around(self, row: int, col: int) -> None:
        """Apply a click at (row, col) and replace the stored grid with the result."""
        state = self.state
        if board_ops.has_won(state.grid):
            return
        positions = board_ops.flip_set(state.grid, row, col)
        state.grid = self.toggle_around(row, col)
        state.moves += 1
        logger.debug("toggled around (%d, %d): flipped %s", row, col, positions)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="toggle", positions=positions, moves=state.moves)
        if board_ops.has_won(state.grid):
            logger.info("board solved in %d moves", state.moves)
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            self.event_bus.emit(EVENT_GAME_WON, moves=state.moves)

    def new_game(self) -> None:
        state = self.state
        state.grid = self.initialize()
        state.moves = 0
        logger.info(
            "new %dx%d game, %d lights on",
            self.config.nrows,
            self.config.ncols,
            board_ops.count_lit(state.grid),
        )
        self._sync_mode()
        self.event_bus.emit(
            EVENT_BOARD_CHANGED,
            reason="new_game",
            positions=[(r, c) for r in range(self.config.nrows) for c in range(self.config.ncols)],
            moves=0,
        )

    def cell_views(self) -> List[List[CellView]]:
        """One CellView per cell, row by row, each trigger bound to its own coordinate."""
        return [
            [self._cell_view(r, c, lit) for c, lit in enumerate(cells)]
            for r, cells in enumerate(self.grid)
        ]

    def _cell_view(self, row: int, col: int, lit: bool) -> CellView:
        return CellView(
            row=row,
            col=col,
            is_lit=lit,
            flip_cells_around_me=lambda: self.flip_cells_around(row, col),
        )

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PLAYING:
            return
        if not board_ops.in_bounds(self.grid, row, col):
            return
        self.flip_cells_around(row, col)

    def on_new_game_request(self, sender, **kwargs):
        self.new_game()

    def _sync_mode(self) -> None:
        # A sampled grid can already be solved (e.g. chance 1.0).
        mode = GameMode.WON if self.has_won() else GameMode.PLAYING
        set_game_mode(self.world, self.event_bus, mode)
