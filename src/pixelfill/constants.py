WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Pixel Fill"
DEFAULT_IMAGE_PATH = "input.png"

# Board maximum footprint relative to window (percentage of window width/height).
# Layout sizes the board so it does not exceed either percentage.
BOARD_MAX_WIDTH_PCT = 1.0
BOARD_MAX_HEIGHT_PCT = 1.0
# Pixels kept free around the board on every side.
BOARD_MARGIN = 0
# Cells never shrink below this many screen pixels.
MIN_CELL_SIZE = 1.0

# Unfilled cells show their colour mixed towards light grey.
PALE_MIX_COLOR = (191.25, 191.25, 191.25)
PALE_MIX_WEIGHT = 0.9

BOUNDARY_COLOR = (40, 40, 40)
BOUNDARY_LINE_WIDTH = 1.0

# Arcade button constants (arcade.MOUSE_BUTTON_LEFT is 1).
MOUSE_BUTTON_LEFT = 1
