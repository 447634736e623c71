"""
Tile states for dungeon grids.

A dungeon grid is a NumPy ``uint8`` array of shape ``(height, width)``, indexed
``tiles[y, x]``. Each cell holds a `TileState`. The helpers in this module turn
a grid into boolean masks and floor statistics so callers never compare raw
integers themselves.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from delve.types import TileCoord, TilePos


class TileState(IntEnum):
    """Two-valued cell state. Values match the sprite-sheet convention of the
    game (0 = wall, 1 = floor)."""

    WALL = 0
    FLOOR = 1


def create_tile_grid(
    width: TileCoord, height: TileCoord, fill: TileState = TileState.WALL
) -> np.ndarray:
    """Return a new ``(height, width)`` grid filled with ``fill``."""
    return np.full((height, width), fill_value=fill, dtype=np.uint8)


def get_floor_mask(tiles: np.ndarray) -> np.ndarray:
    """Boolean map that is True on every FLOOR cell."""
    return tiles == TileState.FLOOR


def count_floor(tiles: np.ndarray) -> int:
    return int(np.count_nonzero(tiles == TileState.FLOOR))


def floor_coverage(tiles: np.ndarray) -> float:
    """Fraction of all cells that are FLOOR (0.0 for an empty grid)."""
    if tiles.size == 0:
        return 0.0
    return count_floor(tiles) / tiles.size


def is_floor(tiles: np.ndarray, pos: TilePos) -> bool:
    """True if ``pos`` lies on the grid and is FLOOR. Off-grid is never floor."""
    x, y = pos
    height, width = tiles.shape
    if not (0 <= x < width and 0 <= y < height):
        return False
    return bool(tiles[y, x] == TileState.FLOOR)
