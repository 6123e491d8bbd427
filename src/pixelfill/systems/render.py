from esper import World

from pixelfill.components.boundary_line import BoundaryLine
from pixelfill.components.pixel import Pixel, PixelSprite
from pixelfill.constants import BOUNDARY_COLOR, BOUNDARY_LINE_WIDTH
from pixelfill.events.bus import EVENT_TICK, EventBus
from pixelfill.ui.layout import compute_board_geometry
from pixelfill.utils.grid import Direction
from pixelfill.world import get_board


def boundary_segment(x: int, y: int, direction: Direction, geometry) -> tuple[float, float, float, float]:
    """Window-space endpoints of the edge of cell (x, y) facing ``direction``."""
    cell_size, start_x, start_y = geometry
    left = start_x + x * cell_size
    bottom = start_y + y * cell_size
    right = left + cell_size
    top = bottom + cell_size
    if direction is Direction.UP:
        return left, top, right, top
    if direction is Direction.DOWN:
        return left, bottom, right, bottom
    if direction is Direction.LEFT:
        return left, bottom, left, top
    return right, bottom, right, top


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self._last_window_size = (self.window.width, self.window.height)
        self._geometry = self._compute_geometry(self.window.width, self.window.height)

    @property
    def geometry(self):
        return self._geometry

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._geometry = self._compute_geometry(width, height)

    def _compute_geometry(self, width: int, height: int):
        board = get_board(self.world)
        cols = board.width if board is not None else 1
        rows = board.height if board is not None else 1
        return compute_board_geometry(width, height, cols, rows)

    def on_tick(self, sender, **kwargs):
        self._sync_window_size()

    def _sync_window_size(self):
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self._sync_window_size()
        if headless:
            return
        cell_size, start_x, start_y = self._geometry
        draw_rect = getattr(arcade, "draw_lrbt_rectangle_filled", None)

        for _, (pixel, sprite) in self.world.get_components(Pixel, PixelSprite):
            left = start_x + pixel.x * cell_size
            bottom = start_y + pixel.y * cell_size
            if draw_rect is not None:
                draw_rect(left, left + cell_size, bottom, bottom + cell_size, sprite.color)
            else:
                arcade.draw_lrtb_rectangle_filled(left, left + cell_size, bottom + cell_size, bottom, sprite.color)

        # Lines go on top so borders stay visible over both neighbours.
        for _, line in self.world.get_component(BoundaryLine):
            x0, y0, x1, y1 = boundary_segment(line.x, line.y, line.direction, self._geometry)
            arcade.draw_line(x0, y0, x1, y1, BOUNDARY_COLOR, BOUNDARY_LINE_WIDTH)
