from __future__ import annotations

import pytest

from delve.environment.generators import Room
from delve.util.coordinates import Rect, manhattan_distance


class TestRect:
    def test_exclusive_far_edges(self) -> None:
        rect = Rect(2, 3, 4, 5)
        assert (rect.x1, rect.y1, rect.x2, rect.y2) == (2, 3, 6, 8)
        assert rect.width == 4
        assert rect.height == 5

    def test_contains_stops_before_far_edges(self) -> None:
        rect = Rect(2, 2, 6, 5)
        assert rect.contains((7, 6))
        assert not rect.contains((8, 6))
        assert not rect.contains((7, 7))

    def test_center_rounds_down(self) -> None:
        assert Rect(2, 2, 6, 5).center() == (5, 4)
        assert Rect(0, 0, 3, 3).center() == (1, 1)

    def test_cells_are_row_major(self) -> None:
        assert list(Rect(1, 1, 2, 2).cells()) == [(1, 1), (2, 1), (1, 2), (2, 2)]

    def test_intersects_requires_overlap(self) -> None:
        a = Rect(0, 0, 4, 4)
        assert a.intersects(Rect(3, 3, 2, 2))
        assert not a.intersects(Rect(4, 0, 2, 2))

    def test_hashable_and_equal_by_value(self) -> None:
        assert {Rect(0, 0, 1, 1), Rect(0, 0, 1, 1)} == {Rect(0, 0, 1, 1)}


class TestRectImmutability:
    """Rects end up inside frozen rooms, so they must not change either."""

    def test_fields_cannot_be_reassigned(self) -> None:
        rect = Rect(2, 2, 6, 5)
        with pytest.raises(AttributeError):
            rect.x1 = 9
        with pytest.raises(AttributeError):
            del rect.y2
        assert rect == Rect(2, 2, 6, 5)

    def test_room_bounds_and_hash_stay_fixed(self) -> None:
        room = Room(id=0, bounds=Rect(2, 2, 6, 5), floor_center=(5, 4))
        before = hash(room)

        with pytest.raises(AttributeError):
            room.bounds.x1 = 9

        assert room.bounds.x1 == 2
        assert hash(room) == before

    def test_no_new_attributes(self) -> None:
        with pytest.raises(AttributeError):
            Rect(0, 0, 1, 1).label = "vault"  # type: ignore[attr-defined]


def test_manhattan_distance() -> None:
    assert manhattan_distance((5, 4), (25, 15)) == 31
    assert manhattan_distance((3, 3), (3, 3)) == 0
