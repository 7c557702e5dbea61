"""Shared constants and paths for critters."""

import math
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
CREATURE_CONFIG_NAME = "creatures.json"

TWO_PI = 2.0 * math.pi

# Animation defaults
TARGET_FPS = 60
MAX_DELTA_TIME = 0.1  # Clamp dt to avoid large jumps
FPS_SMOOTHING = 0.1

# Window defaults
DEFAULT_WINDOW_SIZE = (1280, 800)
BACKGROUND_COLOR = (40, 44, 52)
OUTLINE_COLOR = (255, 255, 255)
OUTLINE_WIDTH = 4.0

# Debug spine view
DEBUG_LINK_WIDTH = 8.0
DEBUG_JOINT_DIAMETER = 32.0
DEBUG_JOINT_FILL = (42, 44, 53)
