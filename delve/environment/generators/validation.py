"""Playability checks for a fully assembled dungeon."""

from __future__ import annotations

from typing import TYPE_CHECKING

from delve import config
from delve.environment.tile_types import is_floor

from .connectivity import reachable_room_ids

if TYPE_CHECKING:
    from .dungeon import DungeonData


def collect_validation_failures(
    dungeon: DungeonData,
    min_coverage: float = config.MIN_FLOOR_COVERAGE,
    min_rooms: int = config.MIN_ROOM_COUNT,
) -> list[str]:
    """Return one human-readable reason per failed check (empty if playable).

    Checks:
        * floor cells / all cells >= ``min_coverage``
        * the entrance room's rectangle holds at least one FLOOR cell
        * at least ``min_rooms`` rooms
        * every room reachable from the entrance over ``connections``
    """
    failures: list[str] = []

    if dungeon.floor_coverage < min_coverage:
        failures.append(
            f"only {dungeon.floor_count} floor tiles of {dungeon.tiles.size} "
            f"(minimum coverage {min_coverage:.3f})"
        )

    entrance = dungeon.entrance_room
    if not any(is_floor(dungeon.tiles, cell) for cell in entrance.bounds.cells()):
        failures.append(f"entrance room {entrance.id} has no floor tiles")

    if len(dungeon.rooms) < min_rooms:
        failures.append(f"only {len(dungeon.rooms)} rooms (minimum {min_rooms})")

    reached = reachable_room_ids(dungeon.rooms, dungeon.entrance_room_id)
    if len(reached) < len(dungeon.rooms):
        missing = sorted(r.id for r in dungeon.rooms if r.id not in reached)
        failures.append(f"rooms {missing} unreachable from the entrance")

    return failures


def validate_dungeon(
    dungeon: DungeonData,
    min_coverage: float = config.MIN_FLOOR_COVERAGE,
    min_rooms: int = config.MIN_ROOM_COUNT,
) -> bool:
    """True if ``dungeon`` passes every check of `collect_validation_failures`."""
    return not collect_validation_failures(dungeon, min_coverage, min_rooms)
