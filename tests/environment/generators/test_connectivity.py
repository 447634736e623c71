"""Tests for the room adjacency graph."""

from __future__ import annotations

import random

import pytest

from delve.environment.generators import (
    Room,
    RoomCountRange,
    build_connection_graph,
    build_rooms,
    is_fully_connected,
    reachable_room_ids,
)
from delve.util.coordinates import Rect
from tests.helpers import make_room, three_room_layout


def _connections(rooms: list[Room]) -> dict[int, set[int]]:
    return {room.id: set(room.connections) for room in rooms}


class TestDistanceLinks:
    def test_three_room_layout(self) -> None:
        """Rooms 0-1 and 1-2 are close; 0-2 is 31 apart and stays unlinked."""
        layout = three_room_layout()
        rooms = build_rooms(
            layout.tiles, layout.rooms, RoomCountRange(3, 3), random.Random(0)
        )

        linked = build_connection_graph(rooms)

        assert _connections(linked) == {0: {1}, 1: {0, 2}, 2: {1}}

    def test_threshold_is_exclusive(self) -> None:
        rooms = [make_room(0, (0, 0)), make_room(1, (10, 0)), make_room(2, (30, 0))]
        assert _connections(build_connection_graph(rooms)) == {
            0: {1},
            1: {0, 2},
            2: {1},
        }

        rooms[2] = make_room(2, (29, 0))
        assert 2 in _connections(build_connection_graph(rooms))[0]

    def test_custom_threshold(self) -> None:
        rooms = [make_room(0, (0, 0)), make_room(1, (10, 0)), make_room(2, (20, 0))]
        linked = build_connection_graph(rooms, threshold=100)
        assert _connections(linked)[0] == {1, 2}

    def test_links_are_symmetric_and_never_self(self) -> None:
        rooms = [make_room(i, (i * 7 % 50, i * 13 % 40)) for i in range(12)]
        linked = build_connection_graph(rooms)

        for room in linked:
            assert room.id not in room.connections
            for other in room.connections:
                assert room.id in linked[other].connections

    def test_input_rooms_are_not_modified(self) -> None:
        rooms = [make_room(0, (0, 0)), make_room(1, (5, 0))]
        build_connection_graph(rooms)
        assert rooms[0].connections == frozenset()


class TestRepairPasses:
    def test_isolated_room_joins_nearest(self) -> None:
        rooms = [make_room(0, (0, 0)), make_room(1, (5, 0)), make_room(2, (100, 0))]
        assert _connections(build_connection_graph(rooms))[2] == {1}

    def test_isolated_room_tie_goes_to_lowest_index(self) -> None:
        rooms = [make_room(0, (0, 0)), make_room(1, (4, 0)), make_room(2, (2, 40))]
        assert _connections(build_connection_graph(rooms))[2] == {0}

    def test_room_linked_earlier_in_pass_is_not_relinked(self) -> None:
        """Room 2 gains a link from room 0 and is then no longer isolated."""
        rooms = [make_room(0, (10, 0)), make_room(1, (90, 0)), make_room(2, (50, 0))]
        assert _connections(build_connection_graph(rooms)) == {
            0: {2},
            1: {2},
            2: {0, 1},
        }

    def test_separate_clusters_are_bridged(self) -> None:
        rooms = [
            make_room(0, (0, 0)),
            make_room(1, (5, 0)),
            make_room(2, (100, 0)),
            make_room(3, (105, 0)),
        ]
        linked = build_connection_graph(rooms)

        assert _connections(linked) == {0: {1}, 1: {0, 2}, 2: {1, 3}, 3: {2}}
        assert is_fully_connected(linked, 0)

    def test_random_layouts_are_always_connected(self) -> None:
        rng = random.Random(11)
        for _ in range(50):
            count = rng.randint(1, 15)
            rooms = [
                make_room(i, (rng.randint(0, 200), rng.randint(0, 200)))
                for i in range(count)
            ]
            assert is_fully_connected(build_connection_graph(rooms), 0)


class TestEdgeCases:
    def test_no_rooms(self) -> None:
        assert build_connection_graph([]) == []

    def test_single_room_has_no_connections(self) -> None:
        linked = build_connection_graph([make_room(0, (3, 3))])
        assert linked[0].connections == frozenset()

    def test_room_without_floor_center_raises(self) -> None:
        rooms = [
            make_room(0, (0, 0)),
            Room(id=1, bounds=Rect(10, 10, 3, 3), floor_center=None),
        ]
        with pytest.raises(ValueError, match="no floor center"):
            build_connection_graph(rooms)


class TestReachability:
    def test_reachable_room_ids(self) -> None:
        rooms = [
            make_room(0, (0, 0), connections=[1]),
            make_room(1, (5, 0), connections=[0]),
            make_room(2, (50, 0)),
        ]
        assert reachable_room_ids(rooms, 0) == {0, 1}
        assert reachable_room_ids(rooms, 2) == {2}
        assert not is_fully_connected(rooms, 0)

    def test_unknown_start(self) -> None:
        assert reachable_room_ids([make_room(0, (0, 0))], 5) == set()
