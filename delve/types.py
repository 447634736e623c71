from __future__ import annotations

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================


TileCoord = int  # Always integer tile position

# Position of a single cell on the dungeon grid, as (x, y).
# x grows to the east (columns), y grows to the south (rows).
TilePos = tuple[TileCoord, TileCoord]  # Example: (5, 3) = column 5, row 3

# =============================================================================
# RENDERING-RELATED TYPES
# =============================================================================

# Index of a single frame in a sprite sheet, counted row-major from the
# top-left tile of the sheet.
FrameIndex = int

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Identifier of a room within one generated dungeon. Stable only within a
# single generation attempt (0-based, in carver discovery order).
RoomId = int

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "crypt-7".
RandomSeed = int | str | None
