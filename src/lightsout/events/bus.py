from blinker import Signal
from typing import Dict

class EventBus:
    """Named event channels backed by blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"  # payload: x, y, button, modifiers
EVENT_CELL_CLICK = "cell_click"    # payload: row, col


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"      # payload: reason=str, positions=list[(r,c)], moves=int
EVENT_GAME_WON = "game_won"                # payload: moves=int
EVENT_NEW_GAME_REQUEST = "new_game_request"  # payload: None


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
