"""Base classes for the carving step of dungeon generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from delve import config

if TYPE_CHECKING:
    from delve.types import TileCoord
    from delve.util.coordinates import Rect
    from delve.util.rng import RNG


@dataclass(frozen=True)
class CarveParams:
    """Shape parameters handed to a carver.

    Attributes:
        room_width: Inclusive (min, max) room width in tiles.
        room_height: Inclusive (min, max) room height in tiles.
        split_depth: Maximum recursion depth for partitioning carvers.
        max_split_ratio: Largest aspect ratio a partition may have.
    """

    room_width: tuple[int, int] = config.CARVER_ROOM_WIDTH
    room_height: tuple[int, int] = config.CARVER_ROOM_HEIGHT
    split_depth: int = config.CARVER_SPLIT_DEPTH
    max_split_ratio: float = config.CARVER_MAX_SPLIT_RATIO


@dataclass
class CarveResult:
    """Raw output of a carver.

    Attributes:
        tiles: ``(height, width)`` uint8 grid of TileState values.
        rooms: Room rectangles in the order the carver discovered them.
    """

    tiles: np.ndarray
    rooms: list[Rect] = field(default_factory=list)


class BaseCarver(abc.ABC):
    """Abstract room-and-corridor carving primitive.

    Implementations must honour two guarantees, which the rest of the
    pipeline relies on:

    * the FLOOR cells of ``tiles`` form a single 4-connected region;
    * every returned rectangle overlaps at least one FLOOR cell.
    """

    @abc.abstractmethod
    def carve(
        self,
        width: TileCoord,
        height: TileCoord,
        params: CarveParams,
        rng: RNG,
    ) -> CarveResult:
        """Carve a fresh grid of the given size."""
        raise NotImplementedError
