from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class CellView:
    """Display data for one cell: its lit status and a trigger bound to its position."""

    row: int
    col: int
    is_lit: bool
    flip_cells_around_me: Callable[[], None]
