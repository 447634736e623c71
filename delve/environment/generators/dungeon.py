"""Dungeon floor generation: carve, build rooms, connect, type, validate.

One *attempt* runs the whole pipeline from scratch:

    carver -> build_rooms -> build_connection_graph -> assign_room_types

and yields an immutable `DungeonData`. `DungeonGenerator.generate` repeats
attempts until one passes validation, up to a fixed budget, and otherwise
falls back to the last attempt. Nothing is repaired in place and nothing is
carried from one attempt to the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from delve import config
from delve.environment.tile_types import count_floor, floor_coverage
from delve.util import rng

from .base import BaseCarver, CarveParams
from .carving import BspCarver
from .connectivity import build_connection_graph
from .errors import ConfigurationError
from .room_types import assign_room_types
from .rooms import Room, RoomCountRange, build_rooms
from .validation import collect_validation_failures

if TYPE_CHECKING:
    from delve.types import RoomId, TileCoord
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)

_rng = rng.get("dungeon.generation")


@dataclass(frozen=True)
class DungeonConfig:
    """What to generate.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        room_count: Inclusive range the number of kept rooms is drawn from.
        floor_number: Opaque value handed through to theming.

    Raises:
        ConfigurationError: On non-positive sizes or an empty/negative range.
    """

    width: TileCoord = config.DUNGEON_DEFAULT_WIDTH
    height: TileCoord = config.DUNGEON_DEFAULT_HEIGHT
    room_count: RoomCountRange = field(
        default_factory=lambda: RoomCountRange(
            config.DUNGEON_DEFAULT_MIN_ROOMS, config.DUNGEON_DEFAULT_MAX_ROOMS
        )
    )
    floor_number: int = config.DUNGEON_DEFAULT_FLOOR_NUMBER

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Dungeon size must be positive, got {self.width}x{self.height}"
            )
        if self.room_count.min < 1 or self.room_count.min > self.room_count.max:
            raise ConfigurationError(
                f"Invalid room count range {self.room_count.min}.."
                f"{self.room_count.max}"
            )


@dataclass(frozen=True, eq=False)
class DungeonData:
    """A finished dungeon floor. Read-only once returned.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        tiles: Read-only ``(height, width)`` uint8 grid of TileState values.
        rooms: Rooms in id order.
        entrance_room_id: Id of the ENTRANCE room.
        exit_room_id: Id of the EXIT room (equals the entrance for a lone room).
        floor_number: Copied from the config for theming.
    """

    width: TileCoord
    height: TileCoord
    tiles: np.ndarray
    rooms: tuple[Room, ...]
    entrance_room_id: RoomId
    exit_room_id: RoomId
    floor_number: int = config.DUNGEON_DEFAULT_FLOOR_NUMBER

    def room(self, room_id: RoomId) -> Room:
        return self.rooms[room_id]

    @property
    def entrance_room(self) -> Room:
        return self.rooms[self.entrance_room_id]

    @property
    def exit_room(self) -> Room:
        return self.rooms[self.exit_room_id]

    @property
    def floor_count(self) -> int:
        return count_floor(self.tiles)

    @property
    def floor_coverage(self) -> float:
        return floor_coverage(self.tiles)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of `DungeonGenerator.generate`.

    Attributes:
        dungeon: The dungeon to play.
        validated: False when every attempt failed validation and ``dungeon``
            is the best-effort last attempt.
        attempts: Number of attempts that were built.
    """

    dungeon: DungeonData
    validated: bool
    attempts: int


class DungeonGenerator:
    """Runs the generation pipeline with a bounded number of retries."""

    def __init__(
        self,
        carver: BaseCarver | None = None,
        rng: RNG | None = None,
        params: CarveParams | None = None,
        max_attempts: int = config.DUNGEON_MAX_ATTEMPTS,
    ) -> None:
        """Initialize the generator.

        Args:
            carver: Carving primitive. Defaults to `BspCarver`.
            rng: Source of randomness for carving and room selection.
                Defaults to the "dungeon.generation" stream; pass a seeded
                ``random.Random`` for reproducible output.
            params: Shape parameters handed to the carver.
            max_attempts: Attempts made before falling back.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.carver = carver if carver is not None else BspCarver()
        self.rng = rng if rng is not None else _rng
        self.params = params if params is not None else CarveParams()
        self.max_attempts = max_attempts

    def generate(self, dungeon_config: DungeonConfig | None = None) -> GenerationResult:
        """Build dungeons until one validates or the attempt budget runs out.

        Returns:
            The first validated attempt, or the last attempt with
            ``validated=False``.

        Raises:
            ConfigurationError: If an attempt cannot produce any room.
        """
        dungeon_config = dungeon_config or DungeonConfig()
        last: DungeonData | None = None

        for attempt in range(1, self.max_attempts + 1):
            dungeon = self.generate_attempt(dungeon_config)
            failures = collect_validation_failures(dungeon)
            if not failures:
                logger.debug(
                    f"Dungeon {dungeon.width}x{dungeon.height} with "
                    f"{len(dungeon.rooms)} rooms validated on attempt {attempt}"
                )
                return GenerationResult(dungeon, validated=True, attempts=attempt)
            logger.warning(
                f"Dungeon generation attempt {attempt} failed validation: "
                + "; ".join(failures)
            )
            last = dungeon

        assert last is not None
        logger.error(
            f"All {self.max_attempts} dungeon generation attempts failed "
            "validation, using the last one"
        )
        return GenerationResult(last, validated=False, attempts=self.max_attempts)

    def generate_attempt(self, dungeon_config: DungeonConfig) -> DungeonData:
        """Run the pipeline once, without validation.

        Raises:
            ConfigurationError: If no room survives, a kept room holds no
                floor, or the carver returns a grid of the wrong shape.
        """
        width, height = dungeon_config.width, dungeon_config.height
        carved = self.carver.carve(width, height, self.params, self.rng)

        tiles = np.array(carved.tiles, dtype=np.uint8, copy=True)
        if tiles.shape != (height, width):
            raise ConfigurationError(
                f"Carver returned a grid of shape {tiles.shape}, "
                f"expected {(height, width)}"
            )

        rooms = build_rooms(tiles, carved.rooms, dungeon_config.room_count, self.rng)
        if not rooms:
            raise ConfigurationError(
                f"No rooms generated for a {width}x{height} dungeon"
            )
        floorless = [room.id for room in rooms if room.floor_center is None]
        if floorless:
            raise ConfigurationError(f"Rooms {floorless} contain no floor tiles")

        rooms = build_connection_graph(rooms)
        rooms, entrance_id, exit_id = assign_room_types(rooms)

        tiles.flags.writeable = False
        return DungeonData(
            width=width,
            height=height,
            tiles=tiles,
            rooms=tuple(rooms),
            entrance_room_id=entrance_id,
            exit_room_id=exit_id,
            floor_number=dungeon_config.floor_number,
        )


def generate(
    dungeon_config: DungeonConfig | None = None,
    *,
    rng: RNG | None = None,
    carver: BaseCarver | None = None,
) -> DungeonData:
    """Generate one dungeon floor, validated when at all possible.

    Convenience wrapper around `DungeonGenerator` for callers that do not
    care whether the result came from the fallback path.
    """
    return DungeonGenerator(carver=carver, rng=rng).generate(dungeon_config).dungeon
