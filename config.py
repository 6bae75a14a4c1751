import os

# Board / rules
BOARD_SIZE = 20
GAME_SPEED = 150  # ms per tick
FOOD_SCORE = 10

INITIAL_SNAKE = [(10, 10)]
INITIAL_FOOD = (5, 5)

# True: moving into the cell the tail is about to leave counts as a collision.
TAIL_IS_SOLID = True

SWIPE_THRESHOLD = 30

# High score persistence
HIGHSCORE_KEY = "snakeHighScore"
HIGHSCORE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "highscore.json")

# Display
CELL_SIZE = 24
BOARD_PX = BOARD_SIZE * CELL_SIZE
INFO_PANEL_WIDTH = 260
WINDOW_WIDTH = BOARD_PX + INFO_PANEL_WIDTH
WINDOW_HEIGHT = BOARD_PX
FPS = 60

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 40
BUTTON_SPACING = 12

WHITE = (255, 255, 255)
GREEN = (74, 222, 128)
LIGHT_GREEN = (134, 239, 172)
DARK_GREEN = (22, 163, 74)
RED = (239, 68, 68)
YELLOW = (250, 204, 21)
DARK_GREY = (31, 41, 55)
GREY = (75, 85, 99)
BOARD_BG = (17, 24, 39)
INFO_PANEL_COLOR = (10, 10, 10)

GRID_LINE_COLOR = (28, 28, 28)
GRID_MAJOR_LINE_COLOR = (44, 44, 44)
GRID_MAJOR_EVERY = 5

# Finger tracking (optional, needs the "camera" extra)
CAMERA_ENABLED = False
CAMERA_WIDTH = 640
CAMERA_HEIGHT = 480
CAMERA_MIRROR = True
CAMERA_PREVIEW_SIZE = (240, 180)
# Finger jumps longer than this (camera px) are treated as tracking glitches
TRACKER_MAX_JUMP = 200
