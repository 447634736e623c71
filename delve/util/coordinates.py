"""Rectangles and distance helpers in tile coordinates."""

from __future__ import annotations

from collections.abc import Iterator

from delve.types import TileCoord, TilePos


class Rect:
    """Rectangle/bounding box in tile coordinates.

    ``x2`` and ``y2`` are exclusive, so a Rect covers columns ``x1..x2-1`` and
    rows ``y1..y2-1``.
    """

    __slots__ = ("x1", "x2", "y1", "y2")

    x1: TileCoord
    y1: TileCoord
    x2: TileCoord
    y2: TileCoord

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        object.__setattr__(self, "x1", x)
        object.__setattr__(self, "y1", y)
        object.__setattr__(self, "x2", x + w)
        object.__setattr__(self, "y2", y + h)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Rect is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Rect is immutable, cannot delete {name!r}")

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def center(self) -> TilePos:
        return (self.x1 + self.width // 2, self.y1 + self.height // 2)

    def contains(self, pos: TilePos) -> bool:
        x, y = pos
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2

    def cells(self) -> Iterator[TilePos]:
        """Yield every cell row by row, top to bottom and left to right."""
        for y in range(self.y1, self.y2):
            for x in range(self.x1, self.x2):
                yield (x, y)

    def intersects(self, other: Rect) -> bool:
        return (
            self.x1 < other.x2
            and self.x2 > other.x1
            and self.y1 < other.y2
            and self.y2 > other.y1
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# DISTANCE HELPERS
# =============================================================================


def manhattan_distance(a: TilePos, b: TilePos) -> int:
    """Return ``|x1 - x2| + |y1 - y2|``."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

