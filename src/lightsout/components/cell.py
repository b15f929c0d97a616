from dataclasses import dataclass

@dataclass(slots=True)
class CellPosition:
    """Fixed grid coordinate of a cell entity."""
    row: int
    col: int
