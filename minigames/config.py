import logging
import os

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def env_int(name: str, default: int) -> int:
    """Positive integer from the environment, `default` when unset or invalid."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning("Ignoring %s=%r, using %d", name, raw, default)
        return default
    return value


def env_log_level(name: str, default: str) -> str:
    level = os.environ.get(name, default).upper()
    if level not in LOG_LEVELS:
        logger.warning("Ignoring %s=%r, using %s", name, level, default)
        return default
    return level


# ====== Configuration / Defaults ======
DEFAULT_WINDOW_SIZE = 800
DEFAULT_FPS = 60
DEFAULT_LOG_LEVEL = "WARNING"

WINDOW_SIZE = env_int("MINIGAMES_WINDOW_SIZE", DEFAULT_WINDOW_SIZE)
FPS = env_int("MINIGAMES_FPS", DEFAULT_FPS)
LOG_LEVEL = env_log_level("MINIGAMES_LOG_LEVEL", DEFAULT_LOG_LEVEL)

# Colors are RGBA floats in [0, 1]
BACKGROUND = (0.3, 0.25, 0.35, 1.0)
GRID_STROKE = (1.0, 1.0, 1.0, 1.0)
GRID_STROKE_WEIGHT = 0.01
MARK_STROKE = (0.0, 0.0, 0.0, 1.0)
TRANSPARENT = (0.0, 0.0, 0.0, 0.0)
RED = (0.85, 0.15, 0.2, 1.0)
YELLOW = (0.95, 0.8, 0.2, 1.0)

# Noughts and Crosses
NOUGHTS_AND_CROSSES_SIZE = 3

# Connect 4
CONNECT_4_COLUMNS = 7
CONNECT_4_ROWS = 6
CONNECT_4_RUN = 4

# Console games
GUESS_MIN, GUESS_MAX = 0, 100
HANGMAN_LIVES = 8
HANGMAN_WORDS = (
    "code",
    "crocodile",
    "imac",
    "camel",
    "python",
    "window",
    "keyboard",
    "hangman",
)
