"""Dungeon floor generation for Delve.

This package provides:
- BaseCarver / BspCarver: the room-and-corridor carving primitive
- build_rooms: turns carved rectangles into rooms with walkable centres
- build_connection_graph: distance-based room adjacency with repair passes
- assign_room_types: entrance / exit / combat labelling
- validate_dungeon: playability checks
- DungeonGenerator / generate: the bounded retry driver
"""

from .base import BaseCarver, CarveParams, CarveResult
from .carving import BspCarver
from .connectivity import (
    build_connection_graph,
    is_fully_connected,
    reachable_room_ids,
)
from .dungeon import (
    DungeonConfig,
    DungeonData,
    DungeonGenerator,
    GenerationResult,
    generate,
)
from .errors import ConfigurationError
from .room_types import assign_room_types
from .rooms import Room, RoomCountRange, RoomType, build_rooms, find_floor_center
from .validation import collect_validation_failures, validate_dungeon

__all__ = [
    "BaseCarver",
    "BspCarver",
    "CarveParams",
    "CarveResult",
    "ConfigurationError",
    "DungeonConfig",
    "DungeonData",
    "DungeonGenerator",
    "GenerationResult",
    "Room",
    "RoomCountRange",
    "RoomType",
    "assign_room_types",
    "build_connection_graph",
    "build_rooms",
    "collect_validation_failures",
    "find_floor_center",
    "generate",
    "is_fully_connected",
    "reachable_room_ids",
    "validate_dungeon",
]
