from __future__ import annotations

from typing import Any, Dict, Tuple

from esper import World

from lightsout.components.game_state import GameMode
from lightsout.constants import CELL_PADDING
from lightsout.events.bus import EventBus, EVENT_GAME_MODE_CHANGED
from lightsout.rendering.board_renderer import BoardRenderer
from lightsout.rendering.context import RenderContext, build_render_context
from lightsout.rendering.win_renderer import WinRenderer
from lightsout.systems.game_board import GameBoardSystem
from lightsout.ui.layout import compute_board_geometry
from lightsout.utils.game_state import get_game_state


class RenderSystem:
    """Draws the board, or the win message once the board is solved.

    ``process`` also records where each cell was laid out so input can be
    resolved against exactly what is on screen.
    """

    def __init__(self, world: World, event_bus: EventBus, window, board_system: GameBoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.board_system = board_system
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)
        self._render_ctx: RenderContext | None = None
        self._last_cell_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        self._board_renderer = BoardRenderer(self, padding=CELL_PADDING)
        self._win_renderer = WinRenderer()

    def on_game_mode_changed(self, sender, **kwargs):
        # Cells from the previous frame must not stay clickable on the win screen.
        if kwargs.get('new_mode') != GameMode.PLAYING:
            self._last_cell_layout = {}

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self.build_frame(arcade, headless=headless)

    def build_frame(self, arcade, headless: bool) -> RenderContext:
        cfg = self.board_system.config
        tile_size, board_left, board_bottom = compute_board_geometry(
            self.window.width, self.window.height, cfg.nrows, cfg.ncols
        )
        ctx = build_render_context(
            world=self.world,
            window_width=self.window.width,
            window_height=self.window.height,
            rows=cfg.nrows,
            cols=cfg.ncols,
            tile_size=tile_size,
            board_left=board_left,
            board_bottom=board_bottom,
        )
        self._render_ctx = ctx

        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.WON:
            self._last_cell_layout = {}
            self._win_renderer.render(arcade, ctx, self.board_system.state.moves, headless=headless)
        else:
            self._board_renderer.render(arcade, ctx, self.board_system.cell_views(), headless=headless)
        return ctx

    def get_cell_at_point(self, x: float, y: float):
        """Return the cell layout entry drawn under (x, y), if any."""
        for entry in self._last_cell_layout.values():
            left = entry["left"]
            bottom = entry["bottom"]
            size = entry["size"]
            if left <= x <= left + size and bottom <= y <= bottom + size:
                return entry
        return None
