from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class Board:
    rows: int
    cols: int


@dataclass(slots=True)
class BoardState:
    """Current grid owned by the board entity.

    grid: tuple of row tuples, replaced wholesale on every toggle.
    moves: toggles applied since the current game started.
    """
    grid: Tuple[Tuple[bool, ...], ...]
    moves: int = 0
