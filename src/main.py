"""Entry point for the Pixel Fill paint-by-number prototype.

Loads an image, sets up the ECS world, event bus and systems, and opens the
Arcade window.
"""
import argparse
import logging
import sys

from arcade import Window, run, set_background_color, color
from PIL import UnidentifiedImageError

from pixelfill.components.art_board import ArtBoard
from pixelfill.constants import DEFAULT_IMAGE_PATH, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from pixelfill.events.bus import (
    EVENT_BOARD_COMPLETED,
    EVENT_MOUSE_DRAG_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_TICK,
    EventBus,
)
from pixelfill.systems.art_board_system import ArtBoardSystem
from pixelfill.systems.input import InputSystem
from pixelfill.systems.render import RenderSystem
from pixelfill.utils.image_loader import load_raster
from pixelfill.world import create_world

logger = logging.getLogger(__name__)


class PixelFillWindow(Window):
    def __init__(self, board: ArtBoard, *, fullscreen: bool = True):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(board)
        self.board_system = ArtBoardSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.event_bus.subscribe(EVENT_BOARD_COMPLETED, self.on_board_completed)
        set_background_color(color.WHITE)
        if fullscreen:
            self.set_fullscreen(True)

    def on_resize(self, width: int, height: int):
        # Pyglet may fire a resize before the systems exist.
        if hasattr(self, "render_system"):
            self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_DRAG_RAW, x=x, y=y, buttons=buttons, modifiers=modifiers)

    def on_board_completed(self, sender, **payload):
        self.set_caption(f"{WINDOW_TITLE} - complete")


def setup_argparse() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelfill",
        description="Reveal an image one colour region at a time",
    )
    parser.add_argument(
        "image_path",
        nargs="?",
        default=DEFAULT_IMAGE_PATH,
        help=f"Path to the input image (default: {DEFAULT_IMAGE_PATH})",
    )
    parser.add_argument(
        "--windowed",
        action="store_true",
        help="Stay in a window instead of switching to fullscreen",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv=None) -> int:
    args = setup_argparse().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        rows = load_raster(args.image_path)
    except (FileNotFoundError, UnidentifiedImageError) as e:
        logger.error("Could not read image %s: %s", args.image_path, e)
        return 1
    board = ArtBoard.from_raster(rows)
    logger.info("Loaded %dx%d board with %d regions", board.width, board.height, board.region_count)

    PixelFillWindow(board, fullscreen=not args.windowed)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
