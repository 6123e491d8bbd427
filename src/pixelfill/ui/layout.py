from pixelfill.constants import BOARD_MARGIN, BOARD_MAX_HEIGHT_PCT, BOARD_MAX_WIDTH_PCT, MIN_CELL_SIZE

def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int):
    """Return (cell_size, start_x, start_y) for a board fitted and centred in the window.

    (start_x, start_y) is the lower-left corner of cell (0, 0). Shared by
    RenderSystem and InputSystem so clicks map onto what is drawn.
    """
    cols = max(cols, 1)
    rows = max(rows, 1)
    max_board_w = (window_width - 2 * BOARD_MARGIN) * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - 2 * BOARD_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = max(min(max_board_w / cols, max_board_h / rows), MIN_CELL_SIZE)
    start_x = (window_width - cols * cell_size) / 2
    start_y = (window_height - rows * cell_size) / 2
    return cell_size, start_x, start_y


def window_to_board(x: float, y: float, geometry) -> tuple[float, float]:
    """Map window pixels to board units where cell (0, 0) is centred on the origin."""
    cell_size, start_x, start_y = geometry
    return (x - start_x) / cell_size - 0.5, (y - start_y) / cell_size - 0.5
