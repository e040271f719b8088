# config.py
"""Settings read from the environment."""
import os


def _flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


PORT = int(os.environ.get('PORT', 5000))
DEBUG = _flag('FLASK_DEBUG')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

WALL_PROBABILITY = float(os.environ.get('WALL_PROBABILITY', 0.3))
DEFAULT_ROWS = int(os.environ.get('DEFAULT_ROWS', 21))
DEFAULT_COLS = int(os.environ.get('DEFAULT_COLS', 41))
MIN_SIZE = int(os.environ.get('MIN_SIZE', 1))
MAX_SIZE = int(os.environ.get('MAX_SIZE', 101))


def clamp_size(size):
    return max(MIN_SIZE, min(size, MAX_SIZE))
