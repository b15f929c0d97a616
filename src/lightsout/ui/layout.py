from __future__ import annotations

from typing import Tuple

from lightsout.constants import BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, MIN_TILE_SIZE


def compute_board_geometry(window_width: float, window_height: float, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for a rows x cols board.

    Input mapping and rendering both go through this so a click always lands
    on the cell that was drawn under it. ``start_y`` is the bottom edge.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(row: int, col: int, rows: int, tile_size: float, start_x: float, start_y: float) -> Tuple[float, float]:
    """Screen center of (row, col). Row 0 is the top row, as in a table."""
    cx = start_x + col * tile_size + tile_size / 2
    cy = start_y + (rows - 1 - row) * tile_size + tile_size / 2
    return cx, cy


def cell_at_point(
    x: float,
    y: float,
    rows: int,
    cols: int,
    tile_size: float,
    start_x: float,
    start_y: float,
) -> Tuple[int, int] | None:
    """Inverse of ``cell_center``: the (row, col) under a screen point, or None."""
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row_from_bottom = int((y - start_y) // tile_size)
    row = rows - 1 - row_from_bottom
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None
