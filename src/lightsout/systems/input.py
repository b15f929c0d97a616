from __future__ import annotations

import logging

from lightsout.components.game_state import GameMode
from lightsout.constants import KEY_ENTER, KEY_N, KEY_RETURN, MOUSE_BUTTON_LEFT
from lightsout.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_MOUSE_PRESS,
    EVENT_NEW_GAME_REQUEST,
)
from lightsout.systems.board_ops import get_board_entity
from lightsout.components.board import Board
from lightsout.ui.layout import cell_at_point, compute_board_geometry
from lightsout.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class InputSystem:
    """Maps debounced mouse presses onto cells and keys onto game commands."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        if not self._playing():
            return
        # With a render system attached only the cells it drew are clickable, not the gaps between them.
        render_system = getattr(self.window, 'render_system', None)
        if render_system is not None and hasattr(render_system, 'get_cell_at_point'):
            entry = render_system.get_cell_at_point(x, y)
            if entry is not None:
                entry["view"].flip_cells_around_me()
            return
        board = self.world.component_for_entity(get_board_entity(self.world), Board)
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        hit = cell_at_point(x, y, board.rows, board.cols, tile_size, start_x, start_y)
        if hit is None:
            return
        row, col = hit
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        """``N`` always starts over; Enter starts over from the win screen."""
        if symbol == KEY_N or (symbol in (KEY_ENTER, KEY_RETURN) and not self._playing()):
            logger.debug("new game requested by key %d", symbol)
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def _playing(self) -> bool:
        state = get_game_state(self.world)
        if state is None:
            return True
        return state.mode == GameMode.PLAYING
