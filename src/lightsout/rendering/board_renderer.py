from __future__ import annotations

from typing import TYPE_CHECKING, List

from lightsout.constants import CELL_LIT_COLOR, CELL_OUTLINE_COLOR, CELL_UNLIT_COLOR

if TYPE_CHECKING:
    from lightsout.rendering.cell_view import CellView
    from lightsout.rendering.context import RenderContext
    from lightsout.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, cell_views: List[List[CellView]], headless: bool) -> None:
        rs = self._rs
        rs._last_cell_layout = {}
        draw_size = max(ctx.tile_size - self._padding, 4)
        half = draw_size / 2

        for row_views in cell_views:
            for view in row_views:
                placed = ctx.cell_positions.get((view.row, view.col))
                if placed is None:
                    continue
                _, cx, cy = placed
                rs._last_cell_layout[(view.row, view.col)] = {
                    "view": view,
                    "left": cx - half,
                    "bottom": cy - half,
                    "size": draw_size,
                }
                if headless:
                    continue
                fill = CELL_LIT_COLOR if view.is_lit else CELL_UNLIT_COLOR
                arcade.draw_lbwh_rectangle_filled(cx - half, cy - half, draw_size, draw_size, fill)
                arcade.draw_lbwh_rectangle_outline(
                    cx - half,
                    cy - half,
                    draw_size,
                    draw_size,
                    CELL_OUTLINE_COLOR,
                    border_width=2,
                )
