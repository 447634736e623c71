"""
Configuration constants.

Centralizes all magic numbers and configuration values used throughout the codebase.
Organized by functional area for easy maintenance.
"""

from delve.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# None gives a different dungeon on every run. Set to an int or str to make
# the command-line preview reproducible.
RANDOM_SEED: RandomSeed = None

# =============================================================================
# DUNGEON DEFAULTS
# =============================================================================

# Map size in tiles when no DungeonConfig is supplied
DUNGEON_DEFAULT_WIDTH = 60
DUNGEON_DEFAULT_HEIGHT = 40

# Inclusive range the room-count target is drawn from
DUNGEON_DEFAULT_MIN_ROOMS = 10
DUNGEON_DEFAULT_MAX_ROOMS = 12

# Passed through to theming untouched; floors are numbered from 1
DUNGEON_DEFAULT_FLOOR_NUMBER = 1

# =============================================================================
# GENERATION PIPELINE
# =============================================================================

# Whole attempts made before falling back to the last (unvalidated) one
DUNGEON_MAX_ATTEMPTS = 10

# Rooms whose floor centers are closer than this (Manhattan) are connected
ROOM_CONNECTION_DISTANCE = 30

# =============================================================================
# VALIDATION
# =============================================================================

# Minimum fraction of grid cells that must be floor
MIN_FLOOR_COVERAGE = 0.125

# A playable floor needs at least an entrance and an exit
MIN_ROOM_COUNT = 2

# =============================================================================
# CARVING (tcod BSP carver)
# =============================================================================

# Inclusive room size ranges in tiles
CARVER_ROOM_WIDTH = (3, 9)
CARVER_ROOM_HEIGHT = (3, 9)

# Maximum BSP recursion depth. Leaf size limits stop splitting long before
# this on the map sizes used in play.
CARVER_SPLIT_DEPTH = 10

# Largest allowed aspect ratio of a BSP partition
CARVER_MAX_SPLIT_RATIO = 1.5
