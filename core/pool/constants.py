"""
Pool Scheduling Constants

All tunable parameters for the small-pool / chunk-rotation scheduler.
"""


# ---- Chunk Rotation ----

CHUNK_CAP = 20          # Max items tested per round once chunking
GROUP_FRACTION = 0.6    # Share of a chunk drawn from committed groups
NEW_ITEM_SCAN_PASSES = 2


# ---- Trainer Defaults ----

DEFAULT_INITIAL_COUNT = 5
DEFAULT_SPEED_MS = 700
DEFAULT_INCREMENT = 1

MIN_INITIAL_COUNT = 1
MAX_INITIAL_COUNT = 20
MIN_SPEED_MS = 150
MIN_INCREMENT = 1
MAX_INCREMENT = 50


# ---- Persistence ----

SCHEMA_VERSION = 2  # 1 = legacy browser record, 2 = tagged regime
