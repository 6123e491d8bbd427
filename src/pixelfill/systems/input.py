from pixelfill.constants import MOUSE_BUTTON_LEFT
from pixelfill.events.bus import (
    EventBus,
    EVENT_BOARD_CLICK,
    EVENT_MOUSE_DRAG_RAW,
    EVENT_MOUSE_PRESS_RAW,
)
from pixelfill.ui.layout import compute_board_geometry, window_to_board
from pixelfill.world import get_board

class InputSystem:
    """Turns window mouse input into board clicks in board units."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG_RAW, self.on_mouse_drag)

    def on_mouse_press(self, sender, **kwargs):
        if kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        self._emit_board_click(kwargs.get('x'), kwargs.get('y'))

    def on_mouse_drag(self, sender, **kwargs):
        # Holding the left button paints every region the cursor passes over.
        buttons = kwargs.get('buttons')
        try:
            held = int(buttons) & MOUSE_BUTTON_LEFT
        except (TypeError, ValueError):
            return
        if not held:
            return
        self._emit_board_click(kwargs.get('x'), kwargs.get('y'))

    def _emit_board_click(self, x, y):
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        board = get_board(self.world)
        if board is None or board.width == 0 or board.height == 0:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.width, board.height)
        cell_size, start_x, start_y = geometry
        if xf < start_x or xf > start_x + board.width * cell_size:
            return
        if yf < start_y or yf > start_y + board.height * cell_size:
            return
        bx, by = window_to_board(xf, yf, geometry)
        self.event_bus.emit(EVENT_BOARD_CLICK, x=bx, y=by)
