from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from esper import World

from lightsout.components.cell import CellPosition
from lightsout.ui.layout import cell_center

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    tile_size: int
    cell_positions: Dict[BoardPos, Tuple[int, float, float]]


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    rows: int,
    cols: int,
    tile_size: int,
    board_left: float,
    board_bottom: float,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    positions: Dict[BoardPos, Tuple[int, float, float]] = {}
    for entity, pos in world.get_component(CellPosition):
        cx, cy = cell_center(pos.row, pos.col, rows, tile_size, board_left, board_bottom)
        positions[(pos.row, pos.col)] = (entity, cx, cy)

    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        tile_size=tile_size,
        cell_positions=positions,
    )
