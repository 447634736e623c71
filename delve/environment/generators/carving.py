"""Room-and-corridor carving on top of tcod's binary space partitioning."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import tcod.bsp
import tcod.random

from delve.environment.tile_types import TileState, create_tile_grid
from delve.util.coordinates import Rect

from .base import BaseCarver, CarveParams, CarveResult

if TYPE_CHECKING:
    from delve.types import TileCoord, TilePos
    from delve.util.rng import RNG


class BspCarver(BaseCarver):
    """Carves one room per BSP leaf and joins sibling partitions with corridors.

    Partitions are joined bottom-up: every internal node links one room of
    its first subtree to one room of its second subtree with an L-shaped
    corridor. Each subtree is therefore connected before its parent links it
    to its sibling, so the whole floor ends up as one connected region.

    Rooms are reported in BSP pre-order, which walks the map partition by
    partition rather than in a uniformly random order.
    """

    def carve(
        self,
        width: TileCoord,
        height: TileCoord,
        params: CarveParams,
        rng: RNG,
    ) -> CarveResult:
        tiles = create_tile_grid(max(width, 0), max(height, 0))
        min_room_w, _ = params.room_width
        min_room_h, _ = params.room_height
        # A leaf needs a one-tile wall margin on each side of its room.
        if width < min_room_w + 2 or height < min_room_h + 2:
            return CarveResult(tiles=tiles, rooms=[])

        root = tcod.bsp.BSP(x=0, y=0, width=width, height=height)
        root.split_recursive(
            depth=params.split_depth,
            min_width=self._min_leaf_size(params.room_width),
            min_height=self._min_leaf_size(params.room_height),
            max_horizontal_ratio=params.max_split_ratio,
            max_vertical_ratio=params.max_split_ratio,
            seed=tcod.random.Random(
                tcod.random.MERSENNE_TWISTER, seed=rng.getrandbits(32)
            ),
        )

        rooms: list[Rect] = []
        # id(node) -> a floor cell somewhere inside that node's subtree
        anchors: dict[int, TilePos] = {}

        for node in root.pre_order():
            if node.children:
                continue
            room = self._place_room(node, params, rng)
            if room is None:
                continue
            self._carve_room(tiles, room)
            rooms.append(room)
            anchors[id(node)] = room.center()

        for node in root.post_order():
            if not node.children:
                continue
            first, second = node.children
            ends = [anchors[id(c)] for c in (first, second) if id(c) in anchors]
            if len(ends) == 2:
                self._carve_corridor(tiles, ends[0], ends[1], rng)
            if ends:
                anchors[id(node)] = rng.choice(ends)

        return CarveResult(tiles=tiles, rooms=rooms)

    @staticmethod
    def _min_leaf_size(size_range: tuple[int, int]) -> int:
        low, high = size_range
        return (low + high) // 2 + 2

    def _place_room(
        self, node: tcod.bsp.BSP, params: CarveParams, rng: RNG
    ) -> Rect | None:
        min_w, max_w = params.room_width
        min_h, max_h = params.room_height
        fit_w = min(max_w, node.width - 2)
        fit_h = min(max_h, node.height - 2)
        if fit_w < min_w or fit_h < min_h:
            return None

        w = rng.randint(min_w, fit_w)
        h = rng.randint(min_h, fit_h)
        x = rng.randint(node.x + 1, node.x + node.width - 1 - w)
        y = rng.randint(node.y + 1, node.y + node.height - 1 - h)
        return Rect(x, y, w, h)

    def _carve_room(self, tiles: np.ndarray, room: Rect) -> None:
        tiles[room.y1 : room.y2, room.x1 : room.x2] = TileState.FLOOR

    def _carve_h_tunnel(self, tiles: np.ndarray, x1: int, x2: int, y: int) -> None:
        tiles[y, min(x1, x2) : max(x1, x2) + 1] = TileState.FLOOR

    def _carve_v_tunnel(self, tiles: np.ndarray, y1: int, y2: int, x: int) -> None:
        tiles[min(y1, y2) : max(y1, y2) + 1, x] = TileState.FLOOR

    def _carve_corridor(
        self, tiles: np.ndarray, start: TilePos, end: TilePos, rng: RNG
    ) -> None:
        (x1, y1), (x2, y2) = start, end
        if rng.random() < 0.5:
            self._carve_h_tunnel(tiles, x1, x2, y1)
            self._carve_v_tunnel(tiles, y1, y2, x2)
        else:
            self._carve_v_tunnel(tiles, y1, y2, x1)
            self._carve_h_tunnel(tiles, x1, x2, y2)
