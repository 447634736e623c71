"""Entrance / exit selection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from delve.util.coordinates import manhattan_distance

from .errors import ConfigurationError
from .rooms import Room, RoomType

if TYPE_CHECKING:
    from delve.types import RoomId


def assign_room_types(
    rooms: Sequence[Room],
) -> tuple[list[Room], RoomId, RoomId]:
    """Label the entrance, the exit and the combat rooms.

    The first room is the entrance. The exit is the room whose floor centre
    is farthest (Manhattan) from the entrance's; the lowest index wins ties.
    Every other room keeps COMBAT. A lone room is the entrance and is also
    reported as the exit.

    Returns:
        (typed rooms, entrance room id, exit room id)

    Raises:
        ConfigurationError: If ``rooms`` is empty.
    """
    if not rooms:
        raise ConfigurationError("No rooms generated")

    entrance = rooms[0]
    exit_index = 0
    max_distance = -1
    if entrance.floor_center is not None:
        for index in range(1, len(rooms)):
            center = rooms[index].floor_center
            if center is None:
                continue
            distance = manhattan_distance(center, entrance.floor_center)
            if distance > max_distance:
                max_distance = distance
                exit_index = index
    if exit_index == 0 and len(rooms) > 1:
        exit_index = len(rooms) - 1

    typed: list[Room] = []
    for index, room in enumerate(rooms):
        if index == 0:
            room_type = RoomType.ENTRANCE
        elif index == exit_index:
            room_type = RoomType.EXIT
        else:
            room_type = RoomType.COMBAT
        typed.append(replace(room, type=room_type))

    return typed, entrance.id, rooms[exit_index].id
