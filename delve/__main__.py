"""Generate one dungeon floor and print it as ASCII.

    python -m delve --seed crypt-7 --floor 3
"""

from __future__ import annotations

import argparse
import logging

from delve import config
from delve.environment.generators import (
    ConfigurationError,
    DungeonConfig,
    DungeonData,
    DungeonGenerator,
    RoomCountRange,
)
from delve.environment.tile_types import TileState
from delve.util import rng
from delve.util.tilesets import palette_for_floor

WALL_GLYPH = "#"
FLOOR_GLYPH = "."
ENTRANCE_GLYPH = "E"
EXIT_GLYPH = "X"


def render_ascii(dungeon: DungeonData) -> str:
    """Draw the grid with the entrance and exit centres marked."""
    rows = [
        [FLOOR_GLYPH if cell == TileState.FLOOR else WALL_GLYPH for cell in row]
        for row in dungeon.tiles.tolist()
    ]
    for room, glyph in (
        (dungeon.entrance_room, ENTRANCE_GLYPH),
        (dungeon.exit_room, EXIT_GLYPH),
    ):
        if room.floor_center is not None:
            x, y = room.floor_center
            rows[y][x] = glyph
    return "\n".join("".join(row) for row in rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delve", description="Generate and preview a dungeon floor"
    )
    parser.add_argument("--width", type=int, default=config.DUNGEON_DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=config.DUNGEON_DEFAULT_HEIGHT)
    parser.add_argument(
        "--min-rooms", type=int, default=config.DUNGEON_DEFAULT_MIN_ROOMS
    )
    parser.add_argument(
        "--max-rooms", type=int, default=config.DUNGEON_DEFAULT_MAX_ROOMS
    )
    parser.add_argument(
        "--floor",
        type=int,
        default=config.DUNGEON_DEFAULT_FLOOR_NUMBER,
        help="Floor number, used to pick the palette",
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=config.RANDOM_SEED,
        help="Master seed (any string); omit for a random floor",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    rng.init(args.seed)
    try:
        dungeon_config = DungeonConfig(
            width=args.width,
            height=args.height,
            room_count=RoomCountRange(args.min_rooms, args.max_rooms),
            floor_number=args.floor,
        )
        result = DungeonGenerator().generate(dungeon_config)
    except ConfigurationError as e:
        parser.error(str(e))
    dungeon = result.dungeon

    print(render_ascii(dungeon))
    print()
    status = "validated" if result.validated else "NOT validated (fallback)"
    print(
        f"{dungeon.width}x{dungeon.height}, floor {dungeon.floor_number} "
        f"({palette_for_floor(dungeon.floor_number).value} palette), "
        f"{len(dungeon.rooms)} rooms, coverage {dungeon.floor_coverage:.1%}, "
        f"{status} after {result.attempts} attempt(s)"
    )
    for room in dungeon.rooms:
        links = ", ".join(str(i) for i in sorted(room.connections))
        print(
            f"  room {room.id:2d} {room.type.value:<8} at {room.floor_center} "
            f"-> [{links}]"
        )
    return 0 if result.validated else 1


if __name__ == "__main__":
    raise SystemExit(main())
