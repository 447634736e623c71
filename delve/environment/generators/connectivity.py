"""Room adjacency graph.

Corridors are never traced. Two rooms count as connected when their floor
centres are close, which can link rooms that share no corridor and, rarely,
leave a room with no neighbours at all. Two repair passes follow:

1. every room left without neighbours is linked to its nearest room;
2. while part of the graph is unreachable from room 0, the closest pair of
   rooms spanning the reached and unreached parts is linked.

After both passes every room is reachable from room 0.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

from delve import config
from delve.util.coordinates import manhattan_distance

if TYPE_CHECKING:
    from delve.types import RoomId

    from .rooms import Room


def _center_distance(a: Room, b: Room) -> int:
    if a.floor_center is None or b.floor_center is None:
        raise ValueError(f"Room {a.id} or {b.id} has no floor center")
    return manhattan_distance(a.floor_center, b.floor_center)


def _link(adjacency: dict[RoomId, set[RoomId]], a: RoomId, b: RoomId) -> None:
    adjacency[a].add(b)
    adjacency[b].add(a)


def _traverse(adjacency: dict[RoomId, set[RoomId]], start: RoomId) -> set[RoomId]:
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in sorted(adjacency.get(current, ())):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def _link_by_distance(
    rooms: Sequence[Room], adjacency: dict[RoomId, set[RoomId]], threshold: int
) -> None:
    for i, first in enumerate(rooms):
        for second in rooms[i + 1 :]:
            if _center_distance(first, second) < threshold:
                _link(adjacency, first.id, second.id)


def _link_isolated(
    rooms: Sequence[Room], adjacency: dict[RoomId, set[RoomId]]
) -> None:
    # Checked room by room, so a room linked earlier in this pass is skipped.
    for room in rooms:
        if adjacency[room.id]:
            continue
        nearest: Room | None = None
        best = 0
        for other in rooms:
            if other.id == room.id:
                continue
            distance = _center_distance(room, other)
            if nearest is None or distance < best:
                nearest = other
                best = distance
        if nearest is not None:
            _link(adjacency, room.id, nearest.id)


def _bridge_components(
    rooms: Sequence[Room], adjacency: dict[RoomId, set[RoomId]]
) -> None:
    if not rooms:
        return
    reached = _traverse(adjacency, rooms[0].id)
    while len(reached) < len(rooms):
        best_pair: tuple[RoomId, RoomId] | None = None
        best = 0
        for inside in rooms:
            if inside.id not in reached:
                continue
            for outside in rooms:
                if outside.id in reached:
                    continue
                distance = _center_distance(inside, outside)
                if best_pair is None or distance < best:
                    best_pair = (inside.id, outside.id)
                    best = distance
        assert best_pair is not None
        _link(adjacency, *best_pair)
        reached = _traverse(adjacency, rooms[0].id)


def build_connection_graph(
    rooms: Sequence[Room],
    threshold: int = config.ROOM_CONNECTION_DISTANCE,
) -> list[Room]:
    """Return copies of ``rooms`` with symmetric ``connections`` filled in.

    Args:
        rooms: Rooms with resolved floor centres, ids equal to their index.
        threshold: Rooms closer than this (Manhattan, exclusive) are linked.

    Raises:
        ValueError: If a room has no floor centre.
    """
    adjacency: dict[RoomId, set[RoomId]] = {room.id: set() for room in rooms}
    _link_by_distance(rooms, adjacency, threshold)
    _link_isolated(rooms, adjacency)
    _bridge_components(rooms, adjacency)
    return [
        replace(room, connections=frozenset(adjacency[room.id])) for room in rooms
    ]


def reachable_room_ids(rooms: Sequence[Room], start_id: RoomId) -> set[RoomId]:
    """Breadth-first walk over ``connections`` starting at ``start_id``."""
    adjacency = {room.id: set(room.connections) for room in rooms}
    if start_id not in adjacency:
        return set()
    return _traverse(adjacency, start_id)


def is_fully_connected(rooms: Sequence[Room], start_id: RoomId) -> bool:
    return len(reachable_room_ids(rooms, start_id)) == len(rooms)
