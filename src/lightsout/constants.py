# Board defaults
DEFAULT_ROWS = 5
DEFAULT_COLS = 5
DEFAULT_CHANCE_LIGHT_STARTS_ON = 0.40

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Lights Out"

MIN_TILE_SIZE = 20
BOTTOM_MARGIN = 20
# Gap left between neighbouring cells when drawn.
CELL_PADDING = 4

# Board maximum footprint relative to window (percentage of window width/height).
# Layout sizes the board so it does not exceed either percentage.
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.90

# Palette
BACKGROUND_COLOR = (12, 14, 22)
CELL_LIT_COLOR = (255, 236, 120)
CELL_UNLIT_COLOR = (36, 40, 58)
CELL_OUTLINE_COLOR = (90, 96, 120)
WIN_TEXT_COLOR = (255, 236, 120)
HINT_TEXT_COLOR = (160, 166, 190)

WIN_MESSAGE = "You won!"
NEW_GAME_HINT = "Press N or Enter for a new game"

# arcade.key values; kept numeric so input code does not need arcade imported.
KEY_ENTER = 65293
KEY_RETURN = 13
KEY_N = 110

# arcade.MOUSE_BUTTON_LEFT
MOUSE_BUTTON_LEFT = 1
