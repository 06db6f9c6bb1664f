"""Server-wide configuration constants for Tabletop Generators."""

import logging
import os

DATA_DIR = os.environ.get("DATA_DIR", ".")  # Persistent data directory
SETTINGS_FILE = os.environ.get("SETTINGS_FILE", os.path.join(DATA_DIR, "settings.json"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
ADMIN_SECRET = os.environ.get("ADMIN_SECRET", "change-me-in-production")
SECRET_FILE = os.path.join(DATA_DIR, "admin_secret.txt")

# Character generation
MIN_LEVEL = 1
MAX_LEVEL = 20
MIN_ABILITY_SCORE = 1
MAX_ABILITY_SCORE = 30
ABILITY_ROLL = "4d6"            # Highest three dice are kept
MAX_SPELLS_SHOWN = 4            # Per spell level in a statblock

# Dungeon generation
ROOM_COUNT_RANGES = {
    "Small": (5, 8),
    "Medium": (8, 12),
    "Large": (12, 20),
}
MAP_DIMENSIONS = {              # (width, height) in grid cells
    "Small": (40, 30),
    "Medium": (56, 42),
    "Large": (72, 54),
}
PLACEMENT_ATTEMPTS = 40         # Per room, keeping a one-cell gap
RELAXED_PLACEMENT_ATTEMPTS = 20  # Per room, touching allowed, overlap not

# Template generation
DEFAULT_MAX_DEPTH = 10
MAX_SUBSTITUTIONS = 10000     # Per expansion, bounds fan-out below the depth cap


def load_secret() -> None:
    """Load admin secret from persistent file, if it exists."""
    global ADMIN_SECRET
    if os.path.exists(SECRET_FILE):
        with open(SECRET_FILE) as f:
            stored = f.read().strip()
        if stored:
            ADMIN_SECRET = stored


def setup_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
