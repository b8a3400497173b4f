"""
Word Space Configuration
Central configuration for paths, defaults, and settings.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"

# Vocabulary blob files (produced offline)
VOCAB_FILENAME = "vocab.json"
EMBEDDINGS_FILENAME = "embeddings.bin"
MANIFEST_FILENAME = "manifest.json"
VOCAB_PATH = DATA_DIR / VOCAB_FILENAME
EMBEDDINGS_PATH = DATA_DIR / EMBEDDINGS_FILENAME
MANIFEST_PATH = DATA_DIR / MANIFEST_FILENAME

# Embedding settings
DEFAULT_EMBEDDER = "vocabulary"
OPENAI_MODEL = "text-embedding-3-small"
OPENAI_EMBEDDING_DIM = 1536

# Selection settings
DEFAULT_TOP_K = 7000
WORD_PATTERN = r"^[a-z]{3,15}$"  # Pure lowercase alpha, 3-15 chars

# Projection settings
WORLD_SCALE = 80
BEACON_PADDING = 1.2  # Beacons sit 20% beyond the outermost word

# LOD settings (world units)
LOD_INNER_FADE = 5
LOD_NEAR_DISTANCE = 15
LOD_FAR_DISTANCE = 150
LOD_CULL_DISTANCE = 250

# Visual emphasis (base opacity = min + span * t)
BASE_OPACITY_MIN = 0.35
BASE_OPACITY_SPAN = 0.55
EMPHASIS_PERCENTILE_MIN_WORDS = 100

# Nearby words
NEARBY_COUNT = 5

# Viewer start position
VIEWER_START = (0.0, 5.0, 30.0)
TELEPORT_STANDOFF = 20.0

# Visualization settings
PLOT_HEIGHT = 700
PLOT_WIDTH = 900

# Axis roles in front-end order (keys 1-6)
AXIS_ROLES = ["x-", "x+", "y+", "y-", "z+", "z-"]

AXIS_LABELS = {
    "x-": "left",
    "x+": "right",
    "y+": "up",
    "y-": "down",
    "z+": "forward",
    "z-": "backward",
}

BEACON_COLORS = {
    "x+": "#ff6666",  # right = red
    "x-": "#6666ff",  # left = blue
    "y+": "#66ff66",  # up = green
    "y-": "#ffaa33",  # down = orange
    "z+": "#ff66ff",  # forward = magenta
    "z-": "#66ffff",  # backward = cyan
}

DEFAULT_AXIS_WORDS = {
    "x-": "cold",
    "x+": "hot",
    "y+": "happy",
    "y-": "sad",
    "z+": "future",
    "z-": "past",
}
