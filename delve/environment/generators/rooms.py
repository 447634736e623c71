"""Room records and the room builder.

The carver only hands back bare rectangles. The room builder keeps a
randomly sized prefix of them and turns each into a `Room` whose
``floor_center`` is guaranteed to be walkable (when the rectangle contains any
floor at all).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from delve.environment.tile_types import is_floor
from delve.util.coordinates import Rect, manhattan_distance

if TYPE_CHECKING:
    from delve.types import RoomId, TilePos
    from delve.util.rng import RNG


class RoomType(Enum):
    """Gameplay role of a room.

    TREASURE exists for content that wants it, but the generator never
    assigns it.
    """

    ENTRANCE = "entrance"
    EXIT = "exit"
    COMBAT = "combat"
    TREASURE = "treasure"


@dataclass(frozen=True)
class RoomCountRange:
    """Inclusive range the room-count target is drawn from."""

    min: int
    max: int


@dataclass(frozen=True)
class Room:
    """A typed room of one generated dungeon.

    Attributes:
        id: 0-based index in carver discovery order.
        bounds: Rectangle the carver reported for this room.
        floor_center: A FLOOR cell at (or nearest to) the rectangle's centre.
            None only if the rectangle holds no floor at all.
        type: Gameplay role; every room starts as COMBAT.
        connections: Ids of rooms reachable directly from this one.
    """

    id: RoomId
    bounds: Rect
    floor_center: TilePos | None
    type: RoomType = RoomType.COMBAT
    connections: frozenset[RoomId] = field(default_factory=frozenset)

    @property
    def geometric_center(self) -> TilePos:
        return self.bounds.center()


def find_floor_center(tiles: np.ndarray, bounds: Rect) -> TilePos | None:
    """Return the FLOOR cell inside ``bounds`` closest to its centre.

    The geometric centre wins outright when it is floor. Otherwise every cell
    of the rectangle is scanned row by row and the first FLOOR cell with the
    smallest Manhattan distance to the centre is returned.
    """
    center = bounds.center()
    if is_floor(tiles, center):
        return center

    best: TilePos | None = None
    best_distance = 0
    for cell in bounds.cells():
        if not is_floor(tiles, cell):
            continue
        distance = manhattan_distance(cell, center)
        if best is None or distance < best_distance:
            best = cell
            best_distance = distance
    return best


def build_rooms(
    tiles: np.ndarray,
    raw_rooms: Sequence[Rect],
    room_count: RoomCountRange,
    rng: RNG,
) -> list[Room]:
    """Turn carver rectangles into COMBAT rooms.

    A target count is drawn uniformly from ``room_count`` and the first
    ``min(target, len(raw_rooms))`` rectangles are kept in carver order.
    Rectangles past the cut are dropped; their floor stays in ``tiles`` but
    they are not tracked as rooms.
    """
    target = rng.randint(room_count.min, room_count.max)
    kept = raw_rooms[: min(target, len(raw_rooms))]
    return [
        Room(id=index, bounds=rect, floor_center=find_floor_center(tiles, rect))
        for index, rect in enumerate(kept)
    ]
