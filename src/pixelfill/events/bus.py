from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references: systems are often constructed without being stored.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                            # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"      # payload: x, y, button, modifiers
EVENT_MOUSE_DRAG_RAW = "mouse_drag_raw"        # payload: x, y, buttons, modifiers
EVENT_BOARD_CLICK = "board_click"              # payload: x, y (board units, cell (0,0) centred at origin)


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_READY = "board_ready"              # payload: width=int, height=int, region_count=int
EVENT_REGION_FILLED = "region_filled"          # payload: root=(x,y), cells=frozenset[(x,y)], color=(r,g,b)
EVENT_BOARD_COMPLETED = "board_completed"      # payload: filled_count=int
