"""Package-wide constants for Zodiac View."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Zodiac View"

# --- Config file ---
APP_NAME = "zodiacview"
CONFIG_FILENAME = "config.json"

# --- Defaults ---
DEFAULT_STAR_COUNT = 30
DEFAULT_STAR_SIZE_MIN = 10
DEFAULT_STAR_SIZE_MAX = 20
DEFAULT_RELATION_SIZE = 5
DEFAULT_SPEED = 0.7
DEFAULT_DISTANCE = 200
DEFAULT_COLOR_BACKGROUND = "#16151f"
DEFAULT_COLOR_STAR = "#49348b"
DEFAULT_COLOR_RELATION = "#49348b"
DEFAULT_INTERACTION_ENABLED = False

# --- Relations ---
OPACITY_FACTOR = 1.4  # Lines fade out at 1.4 × distance
MAX_ALPHA = 255
