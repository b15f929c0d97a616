"""Board configuration supplied once at game start."""
from __future__ import annotations

from dataclasses import dataclass

from lightsout.constants import DEFAULT_CHANCE_LIGHT_STARTS_ON, DEFAULT_COLS, DEFAULT_ROWS


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """Dimensions and starting density of a Lights Out board.

    Fields:
      nrows: number of rows, a positive integer (default 5).
      ncols: number of columns, a positive integer (default 5).
      chance_light_starts_on: probability in [0, 1] that any cell starts lit (default 0.40).

    Invalid values raise ``ValueError`` at construction, so a board with zero
    rows or columns can never be created.
    """

    nrows: int = DEFAULT_ROWS
    ncols: int = DEFAULT_COLS
    chance_light_starts_on: float = DEFAULT_CHANCE_LIGHT_STARTS_ON

    def __post_init__(self) -> None:
        if isinstance(self.nrows, bool) or not isinstance(self.nrows, int) or self.nrows <= 0:
            raise ValueError(f"nrows must be a positive integer, got {self.nrows!r}")
        if isinstance(self.ncols, bool) or not isinstance(self.ncols, int) or self.ncols <= 0:
            raise ValueError(f"ncols must be a positive integer, got {self.ncols!r}")
        try:
            chance = float(self.chance_light_starts_on)
        except (TypeError, ValueError):
            raise ValueError(
                f"chance_light_starts_on must be a number, got {self.chance_light_starts_on!r}"
            ) from None
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"chance_light_starts_on must be within [0, 1], got {chance}")
        object.__setattr__(self, "chance_light_starts_on", chance)
