from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from delve.environment.generators import BaseCarver, CarveParams, CarveResult, Room
from delve.environment.tile_types import TileState, create_tile_grid
from delve.types import RoomId, TileCoord, TilePos
from delve.util.coordinates import Rect
from delve.util.rng import RNG


def grid_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Build a tile grid from ASCII rows: '.' is floor, anything else wall."""
    return np.array(
        [
            [TileState.FLOOR if c == "." else TileState.WALL for c in row]
            for row in rows
        ],
        dtype=np.uint8,
    )


def carve_rects(
    width: TileCoord, height: TileCoord, rects: Iterable[Rect]
) -> np.ndarray:
    tiles = create_tile_grid(width, height)
    for rect in rects:
        tiles[rect.y1 : rect.y2, rect.x1 : rect.x2] = TileState.FLOOR
    return tiles


def carve_path(tiles: np.ndarray, points: Sequence[TilePos]) -> None:
    """Carve straight axis-aligned segments between consecutive points."""
    for (x1, y1), (x2, y2) in zip(points, points[1:], strict=False):
        tiles[min(y1, y2) : max(y1, y2) + 1, min(x1, x2) : max(x1, x2) + 1] = (
            TileState.FLOOR
        )


def make_room(
    room_id: RoomId,
    center: TilePos,
    connections: Iterable[RoomId] = (),
    bounds: Rect | None = None,
) -> Room:
    """A room whose floor centre is ``center``; bounds default to a 3x3 box."""
    x, y = center
    return Room(
        id=room_id,
        bounds=bounds if bounds is not None else Rect(x - 1, y - 1, 3, 3),
        floor_center=center,
        connections=frozenset(connections),
    )


# Three rooms on a 30x20 grid, joined 0-1 and 1-2 by L-shaped corridors.
THREE_ROOM_RECTS = (Rect(2, 2, 6, 5), Rect(12, 8, 6, 5), Rect(22, 13, 6, 5))


def three_room_layout() -> CarveResult:
    tiles = carve_rects(30, 20, THREE_ROOM_RECTS)
    carve_path(tiles, [(5, 4), (15, 4), (15, 10)])
    carve_path(tiles, [(15, 10), (25, 10), (25, 15)])
    return CarveResult(tiles=tiles, rooms=list(THREE_ROOM_RECTS))


class StubCarver(BaseCarver):
    """Replays canned carve results, repeating the last one when exhausted."""

    def __init__(self, results: Sequence[CarveResult]) -> None:
        self.results = list(results)
        self.calls: list[tuple[TileCoord, TileCoord]] = []

    def carve(
        self,
        width: TileCoord,
        height: TileCoord,
        params: CarveParams,
        rng: RNG,
    ) -> CarveResult:
        index = min(len(self.calls), len(self.results) - 1)
        self.calls.append((width, height))
        canned = self.results[index]
        return CarveResult(tiles=canned.tiles.copy(), rooms=list(canned.rooms))
