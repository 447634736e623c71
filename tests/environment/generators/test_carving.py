"""Tests for the tcod BSP carver."""

from __future__ import annotations

import random
from collections import deque

import numpy as np
import pytest

from delve.environment.generators import BspCarver, CarveParams
from delve.environment.tile_types import TileState, count_floor


def _floor_regions(tiles: np.ndarray) -> int:
    """Count 4-connected FLOOR regions."""
    height, width = tiles.shape
    seen = np.zeros(tiles.shape, dtype=bool)
    regions = 0
    for y, x in zip(*np.nonzero(tiles == TileState.FLOOR), strict=True):
        if seen[y, x]:
            continue
        regions += 1
        seen[y, x] = True
        queue = deque([(int(x), int(y))])
        while queue:
            cx, cy = queue.popleft()
            for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                if (
                    0 <= nx < width
                    and 0 <= ny < height
                    and not seen[ny, nx]
                    and tiles[ny, nx] == TileState.FLOOR
                ):
                    seen[ny, nx] = True
                    queue.append((nx, ny))
    return regions


class TestBspCarver:
    @pytest.mark.parametrize(("width", "height"), [(60, 40), (30, 20), (100, 80)])
    def test_floor_is_one_connected_region(self, width: int, height: int) -> None:
        for seed in range(5):
            result = BspCarver().carve(
                width, height, CarveParams(), random.Random(seed)
            )

            assert result.tiles.shape == (height, width)
            assert result.tiles.dtype == np.uint8
            assert _floor_regions(result.tiles) == 1

    def test_rooms_are_floor_inside_a_wall_margin(self) -> None:
        result = BspCarver().carve(60, 40, CarveParams(), random.Random(3))

        assert result.rooms
        for room in result.rooms:
            assert room.x1 >= 1 and room.y1 >= 1
            assert room.x2 <= 59 and room.y2 <= 39
            assert np.all(result.tiles[room.y1 : room.y2, room.x1 : room.x2] == 1)

    def test_rooms_do_not_overlap(self) -> None:
        rooms = BspCarver().carve(60, 40, CarveParams(), random.Random(4)).rooms
        for i, a in enumerate(rooms):
            for b in rooms[i + 1 :]:
                assert not a.intersects(b)

    def test_room_sizes_follow_params(self) -> None:
        params = CarveParams(room_width=(4, 4), room_height=(5, 5))
        rooms = BspCarver().carve(60, 40, params, random.Random(5)).rooms

        assert rooms
        assert {(r.width, r.height) for r in rooms} == {(4, 5)}

    def test_same_seed_same_layout(self) -> None:
        a = BspCarver().carve(60, 40, CarveParams(), random.Random(8))
        b = BspCarver().carve(60, 40, CarveParams(), random.Random(8))

        assert np.array_equal(a.tiles, b.tiles)
        assert a.rooms == b.rooms

    def test_different_seeds_differ(self) -> None:
        a = BspCarver().carve(60, 40, CarveParams(), random.Random(8))
        b = BspCarver().carve(60, 40, CarveParams(), random.Random(9))

        assert not np.array_equal(a.tiles, b.tiles)

    def test_grid_too_small_returns_no_rooms(self) -> None:
        result = BspCarver().carve(4, 4, CarveParams(), random.Random(0))

        assert result.rooms == []
        assert result.tiles.shape == (4, 4)
        assert count_floor(result.tiles) == 0

    def test_smallest_usable_grid_gets_one_room(self) -> None:
        result = BspCarver().carve(5, 5, CarveParams(), random.Random(0))

        assert len(result.rooms) == 1
        assert count_floor(result.tiles) == 9
