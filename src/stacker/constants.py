GRID_COLS = 7
GRID_ROWS = 11

# (platform size, tick interval in ms) per row, written bottom row first.
# Smaller interval means a faster platform.
DEFAULT_SCHEDULE = (
    (3, 400),
    (3, 350),
    (3, 300),
    (2, 250),
    (2, 200),
    (2, 150),
    (2, 100),
    (1, 100),
    (1, 80),
    (1, 80),
    (1, 50),
)
# The very first platform runs slower than the bottom row's table entry.
OPENING_ROW = (3, 500)

OCCUPIED = "~"
EMPTY = ""

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Stacker"
UPDATE_RATE = 1 / 60

# Board footprint relative to window, mirrored by input hit-testing.
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.78
BOTTOM_MARGIN = 40
MIN_CELL_SIZE = 16
CELL_PADDING = 3

# Buttons are centred boxes: (centre_x_pct, centre_y_pct, width, height)
TUTORIAL_BUTTON = (0.5, 0.95, 140.0, 36.0)
REPLAY_BUTTON = (0.5, 0.42, 160.0, 48.0)

BACKGROUND_COLOR = (16, 18, 32)
EMPTY_CELL_COLOR = (40, 44, 70)
OCCUPIED_CELL_COLOR = (214, 48, 49)
PANEL_COLOR = (20, 25, 40, 230)
TEXT_COLOR = (235, 235, 245)

# Raw key symbols (pyglet/arcade values) so input stays importable headless.
KEY_F1 = 65470
KEY_R = 114
KEY_ENTER = 65293
KEY_NUM_ENTER = 65421
MOUSE_BUTTON_LEFT = 1

TUTORIAL_TEXT = (
    "Start the game and see a row of blocks moving back and forth on a conveyor belt.\n\n"
    "Press any key or click to stop the blocks at the right time and stack them on top of each other.\n\n"
    "Keep stacking the blocks to reach the top of the machine.\n\n"
    "If you miss the timing, the block will fall off the stack and the game will be over.\n\n"
    "Retry the game if you don't reach the top.\n\n"
    "Good luck and have fun playing the stacker game!"
)
WIN_TEXT = "You won!"
LOSS_TEXT = "You lost! :("
