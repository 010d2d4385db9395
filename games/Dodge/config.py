"""
Dodge - Configuration.

Display settings load from a .env file beside this module, with sensible
defaults. Gameplay values are fixed: the layout, sizes and speed table
are part of the game, not settings.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from models import Color, EnemySpawn, Point2D, SpeedStep

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 500)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 500)
FPS = _get_int('FPS', 60)
WINDOW_TITLE = "Dodge"

# Arena
ARENA_MARGIN = 50  # pixels between surface edge and playable area

# Player
PLAYER_DIMENSIONS = Point2D(x=40, y=40)

# Enemies, reset to this layout at the start of every game
ENEMY_LAYOUT = (
    EnemySpawn(position=Point2D(x=300, y=85), dimensions=Point2D(x=60, y=50),
               velocity=Point2D(x=-10, y=12)),
    EnemySpawn(position=Point2D(x=350, y=340), dimensions=Point2D(x=100, y=20),
               velocity=Point2D(x=-12, y=-20)),
    EnemySpawn(position=Point2D(x=85, y=350), dimensions=Point2D(x=30, y=60),
               velocity=Point2D(x=15, y=-13)),
    EnemySpawn(position=Point2D(x=100, y=100), dimensions=Point2D(x=60, y=60),
               velocity=Point2D(x=17, y=11)),
)

# Speed divisor schedule: displacement = velocity * delta_ms / speed
INITIAL_SPEED = 80
SPEED_SCHEDULE = (
    SpeedStep(until_ms=8000, speed=80),
    SpeedStep(until_ms=14000, speed=60),
    SpeedStep(until_ms=18000, speed=40),
    SpeedStep(until_ms=21000, speed=30),
    SpeedStep(until_ms=23000, speed=20),
)

# Colors
BACKGROUND_COLOR = Color(r=211, g=211, b=211)  # outside the arena
ARENA_COLOR = Color(r=255, g=255, b=255)
PLAYER_COLOR = Color(r=139, g=0, b=0)  # darkred
ENEMY_COLOR = Color(r=0, g=0, b=139)  # darkblue
GREEN = Color(r=0, g=128, b=0)
RED = Color(r=255, g=0, b=0)
GRAY = Color(r=128, g=128, b=128)

# Text (positions are baselines, as on a canvas)
FONT_NAME = 'monospace'
HUD_FONT_SIZE = 30
BANNER_FONT_SIZE = 50
TIME_TEXT_POS = (25, 35)
BEST_TEXT_POS = (260, 35)
BANNER_POS = (100, 200)
