"""Game-wide sizes, speeds, texts and limits."""

# Window and virtual screen
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
VIRTUAL_WIDTH = 432
VIRTUAL_HEIGHT = 243
TARGET_FPS = 60

# Font sizes
FONT_SMALL = 8
FONT_MEDIUM = 16
FONT_LARGE = 32

# Texts
GAME_TITLE = "BREAKOUT"
OPTION_START = "START"
OPTION_HIGH_SCORES = "HIGH SCORES"
GAME_OVER_TEXT = "GAME OVER"
FINAL_SCORE_TEXT = "Final Score:"
CONTINUE_TEXT = "Press Enter to continue!"

# Paddle
PADDLE_SPEED = 200
STARTING_Y = 32
PADDLE_COLORS = 4
PADDLE_SIZES = 4
PADDLE_SMALL_WIDTH = 32
PADDLE_MEDIUM_WIDTH = 64
PADDLE_LARGE_WIDTH = 96
PADDLE_HUGE_WIDTH = 128
PADDLE_HEIGHT = 16

# Ball
BALL_SIZE = 8
BALL_MAX_STARTING_SPEED_X = 200
BALL_MIN_STARTING_SPEED_Y = -50
BALL_MAX_STARTING_SPEED_Y = -60

# Bricks
BRICKS_ROW_MIN = 1
BRICKS_ROW_MAX = 5
BRICKS_COL_MIN = 7
BRICKS_COL_MAX = 13
BRICK_SKINS = 5
BRICK_TIERS = 4
BRICK_SPECIAL = 1
BRICK_WIDTH = 32
BRICK_HEIGHT = 16

# Player
MAX_HEALTH = 3
HEART_WIDTH = 10
HEART_HEIGHT = 9

# Sprite sheet slot counts
PADDLE_ARRAY_SIZE = PADDLE_SIZES * PADDLE_COLORS
BALL_ARRAY_SIZE = 7
BRICK_ARRAY_SIZE = 21
HEART_ARRAY_SIZE = 2