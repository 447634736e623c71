"""Wall autotiling.

Every WALL cell is drawn with one of fourteen sprites picked from the floor /
wall state of its eight neighbours. Classification only looks at which
neighbours are FLOOR; off-grid neighbours count as wall.

A wall with two *parallel* open sides (a one-tile-thick wall between two
floors, e.g. floor both north and south) is reported as SOLID. No sprite in
the sheet fits that shape, and callers rely on it staying SOLID.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from delve.environment.tile_types import TileState, get_floor_mask

if TYPE_CHECKING:
    from delve.types import FrameIndex, TileCoord, TilePos
    from delve.util.tilesets import TileFrameSet


class WallType(Enum):
    # Edge walls (one side exposed to floor, or all but one)
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    # Outer corners (two perpendicular sides exposed)
    CORNER_TL = "corner_tl"
    CORNER_TR = "corner_tr"
    CORNER_BL = "corner_bl"
    CORNER_BR = "corner_br"

    # Inner corners (only a diagonal exposed)
    INNER_TL = "inner_tl"
    INNER_TR = "inner_tr"
    INNER_BL = "inner_bl"
    INNER_BR = "inner_br"

    SINGLE = "single"  # Floor on all four sides
    SOLID = "solid"  # No usable exposure


@dataclass(frozen=True)
class WallNeighborPattern:
    """Which of the eight neighbours of a cell are FLOOR."""

    n: bool = False
    s: bool = False
    e: bool = False
    w: bool = False
    ne: bool = False
    nw: bool = False
    se: bool = False
    sw: bool = False

    @property
    def exposed_sides(self) -> int:
        return sum((self.n, self.s, self.e, self.w))


# (dx, dy) per neighbour; y grows southwards.
NEIGHBOR_OFFSETS: dict[str, tuple[int, int]] = {
    "n": (0, -1),
    "s": (0, 1),
    "e": (1, 0),
    "w": (-1, 0),
    "ne": (1, -1),
    "nw": (-1, -1),
    "se": (1, 1),
    "sw": (-1, 1),
}

# Outer corners are named after the corner of the room they bound, which is
# the one facing away from the open sides.
_OUTER_CORNERS: dict[tuple[str, str], WallType] = {
    ("n", "w"): WallType.CORNER_BR,
    ("n", "e"): WallType.CORNER_BL,
    ("s", "w"): WallType.CORNER_TR,
    ("s", "e"): WallType.CORNER_TL,
}

# Single open side -> edge sprite on the opposite face.
_ONE_OPEN: dict[str, WallType] = {
    "n": WallType.BOTTOM,
    "s": WallType.TOP,
    "e": WallType.LEFT,
    "w": WallType.RIGHT,
}

# Single closed side -> edge sprite on that face.
_ONE_CLOSED: dict[str, WallType] = {
    "n": WallType.TOP,
    "s": WallType.BOTTOM,
    "e": WallType.RIGHT,
    "w": WallType.LEFT,
}

_FRAME_FIELDS: dict[WallType, str] = {
    WallType.TOP: "wall_top",
    WallType.BOTTOM: "wall_bottom",
    WallType.LEFT: "wall_left",
    WallType.RIGHT: "wall_right",
    WallType.CORNER_TL: "wall_corner_tl",
    WallType.CORNER_TR: "wall_corner_tr",
    WallType.CORNER_BL: "wall_corner_bl",
    WallType.CORNER_BR: "wall_corner_br",
    WallType.INNER_TL: "wall_inner_tl",
    WallType.INNER_TR: "wall_inner_tr",
    WallType.INNER_BL: "wall_inner_bl",
    WallType.INNER_BR: "wall_inner_br",
    WallType.SINGLE: "wall_single",
    # Solid wall masses reuse the top-edge sprite.
    WallType.SOLID: "wall_top",
}


def neighbors_at(
    tiles: np.ndarray,
    x: TileCoord,
    y: TileCoord,
    width: TileCoord | None = None,
    height: TileCoord | None = None,
) -> WallNeighborPattern:
    """Read the neighbour pattern of cell ``(x, y)``.

    Args:
        tiles: ``(height, width)`` grid of TileState values.
        x: Column of the cell.
        y: Row of the cell.
        width: Grid width; defaults to the grid's own.
        height: Grid height; defaults to the grid's own.
    """
    if width is None or height is None:
        height, width = tiles.shape

    def floor_at(tx: int, ty: int) -> bool:
        if tx < 0 or ty < 0 or tx >= width or ty >= height:
            return False
        return bool(tiles[ty, tx] == TileState.FLOOR)

    return WallNeighborPattern(
        **{
            name: floor_at(x + dx, y + dy)
            for name, (dx, dy) in NEIGHBOR_OFFSETS.items()
        }
    )


def classify(pattern: WallNeighborPattern) -> WallType:
    """Pick the wall sprite category for a neighbour pattern.

    Rules, first match wins:
        1. No open cardinal: an open diagonal whose two adjacent cardinals are
           closed gives an inner corner (SE, SW, NE, NW -> INNER_TL, INNER_TR,
           INNER_BL, INNER_BR). Otherwise SOLID.
        2. All four cardinals open: SINGLE.
        3. Two perpendicular cardinals open: the matching outer corner.
        4. One cardinal open: the edge facing it (N open -> BOTTOM, ...).
           Three open: the edge of the closed side (N closed -> TOP, ...).
        5. Anything else: SOLID.
    """
    n, s, e, w = pattern.n, pattern.s, pattern.e, pattern.w
    exposed = pattern.exposed_sides

    if exposed == 0:
        if pattern.se and not s and not e:
            return WallType.INNER_TL
        if pattern.sw and not s and not w:
            return WallType.INNER_TR
        if pattern.ne and not n and not e:
            return WallType.INNER_BL
        if pattern.nw and not n and not w:
            return WallType.INNER_BR
        return WallType.SOLID

    if exposed == 4:
        return WallType.SINGLE

    cardinals = {"n": n, "s": s, "e": e, "w": w}
    open_sides = [side for side, is_open in cardinals.items() if is_open]
    closed_sides = [side for side, is_open in cardinals.items() if not is_open]

    if exposed == 2:
        corner = _OUTER_CORNERS.get((open_sides[0], open_sides[1]))
        if corner is not None:
            return corner
    elif exposed == 1:
        return _ONE_OPEN[open_sides[0]]
    elif exposed == 3:
        return _ONE_CLOSED[closed_sides[0]]

    return WallType.SOLID


def frame_for(wall_type: WallType, frames: TileFrameSet) -> FrameIndex:
    """Look up the sprite frame for ``wall_type``. SOLID uses ``wall_top``."""
    return getattr(frames, _FRAME_FIELDS[wall_type])


def resolve_wall_frame(
    tiles: np.ndarray,
    x: TileCoord,
    y: TileCoord,
    width: TileCoord,
    height: TileCoord,
    frames: TileFrameSet,
) -> FrameIndex:
    """Classify the wall at ``(x, y)`` and return its frame in one call."""
    return frame_for(classify(neighbors_at(tiles, x, y, width, height)), frames)


def _shifted_floor_masks(tiles: np.ndarray) -> dict[str, np.ndarray]:
    """One boolean map per neighbour direction, aligned with ``tiles``.

    ``masks["n"][y, x]`` is True when the cell north of ``(x, y)`` is floor.
    """
    height, width = tiles.shape
    padded = np.pad(get_floor_mask(tiles), 1, constant_values=False)
    return {
        name: padded[1 + dy : 1 + dy + height, 1 + dx : 1 + dx + width]
        for name, (dx, dy) in NEIGHBOR_OFFSETS.items()
    }


def classify_grid(tiles: np.ndarray) -> dict[TilePos, WallType]:
    """Classify every WALL cell of ``tiles``, keyed by ``(x, y)``."""
    masks = _shifted_floor_masks(tiles)
    names = [f.name for f in fields(WallNeighborPattern)]
    result: dict[TilePos, WallType] = {}
    wall_ys, wall_xs = np.nonzero(~get_floor_mask(tiles))
    for y, x in zip(wall_ys.tolist(), wall_xs.tolist(), strict=True):
        pattern = WallNeighborPattern(
            **{name: bool(masks[name][y, x]) for name in names}
        )
        result[(x, y)] = classify(pattern)
    return result


def resolve_wall_frames(tiles: np.ndarray, frames: TileFrameSet) -> np.ndarray:
    """Frame index of every WALL cell, as an int32 grid shaped like ``tiles``.

    FLOOR cells hold -1; pick floor variants separately.
    """
    result = np.full(tiles.shape, -1, dtype=np.int32)
    for (x, y), wall_type in classify_grid(tiles).items():
        result[y, x] = frame_for(wall_type, frames)
    return result
