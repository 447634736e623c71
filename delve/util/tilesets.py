"""Frame indices for the 1-bit roguelike sprite sheet.

The sheet is 88 columns by 39 rows of 16x16 tiles. Each colour palette has a
"Fantasy" section starting at its own column offset, and terrain tiles sit on
fixed rows within that section. A frame index is ``row * 88 + column``.

Floors 1-6 each get their own palette; deeper floors stay on ORANGE.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.types import FrameIndex
    from delve.util.rng import RNG

TILESET_COLUMNS = 88
TILESET_ROWS = 39


class TilesetPalette(Enum):
    WHITE = "white"
    BLUE = "blue"
    TEAL = "teal"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    ORANGE = "orange"


FLOOR_PALETTE_MAP: dict[int, TilesetPalette] = {
    1: TilesetPalette.WHITE,
    2: TilesetPalette.BLUE,
    3: TilesetPalette.TEAL,
    4: TilesetPalette.MAGENTA,
    5: TilesetPalette.YELLOW,
    6: TilesetPalette.ORANGE,
}

# First column of each palette's Fantasy section. The sheet alternates
# Ancient Greece | Fantasy per colour.
PALETTE_COLUMN_OFFSET: dict[TilesetPalette, int] = {
    TilesetPalette.WHITE: 7,
    TilesetPalette.BLUE: 22,
    TilesetPalette.TEAL: 37,
    TilesetPalette.MAGENTA: 52,
    TilesetPalette.YELLOW: 67,
    TilesetPalette.ORANGE: 82,
}

# Terrain rows inside a Fantasy section.
FLOOR_VARIANT_ROWS = (5, 6)
WALL_TOP_ROW = 8
WALL_SIDE_ROW = 9
WALL_CORNER_ROW = 10
WALL_INNER_CORNER_ROW = WALL_CORNER_ROW + 1


@dataclass(frozen=True)
class TileFrameSet:
    """Terrain frames for one palette.

    ``floors`` lists interchangeable floor variants; every other field is the
    single frame for that wall shape.
    """

    floors: tuple[FrameIndex, ...]
    wall_top: FrameIndex
    wall_bottom: FrameIndex
    wall_left: FrameIndex
    wall_right: FrameIndex
    wall_corner_tl: FrameIndex
    wall_corner_tr: FrameIndex
    wall_corner_bl: FrameIndex
    wall_corner_br: FrameIndex
    wall_inner_tl: FrameIndex
    wall_inner_tr: FrameIndex
    wall_inner_bl: FrameIndex
    wall_inner_br: FrameIndex
    wall_single: FrameIndex


def calculate_frame(row: int, column: int) -> FrameIndex:
    return row * TILESET_COLUMNS + column


def generate_palette_frames(palette: TilesetPalette) -> TileFrameSet:
    col = PALETTE_COLUMN_OFFSET[palette]
    first_floor_row, second_floor_row = FLOOR_VARIANT_ROWS

    return TileFrameSet(
        floors=(
            calculate_frame(first_floor_row, col),
            calculate_frame(first_floor_row, col + 1),
            calculate_frame(first_floor_row, col + 2),
            calculate_frame(second_floor_row, col),
            calculate_frame(second_floor_row, col + 1),
        ),
        wall_top=calculate_frame(WALL_TOP_ROW, col),
        wall_bottom=calculate_frame(WALL_TOP_ROW, col + 1),
        wall_left=calculate_frame(WALL_SIDE_ROW, col),
        wall_right=calculate_frame(WALL_SIDE_ROW, col + 1),
        wall_corner_tl=calculate_frame(WALL_CORNER_ROW, col),
        wall_corner_tr=calculate_frame(WALL_CORNER_ROW, col + 1),
        wall_corner_bl=calculate_frame(WALL_CORNER_ROW, col + 2),
        wall_corner_br=calculate_frame(WALL_CORNER_ROW, col + 3),
        wall_inner_tl=calculate_frame(WALL_INNER_CORNER_ROW, col),
        wall_inner_tr=calculate_frame(WALL_INNER_CORNER_ROW, col + 1),
        wall_inner_bl=calculate_frame(WALL_INNER_CORNER_ROW, col + 2),
        wall_inner_br=calculate_frame(WALL_INNER_CORNER_ROW, col + 3),
        wall_single=calculate_frame(WALL_TOP_ROW, col + 2),
    )


PALETTE_FRAMES: dict[TilesetPalette, TileFrameSet] = {
    palette: generate_palette_frames(palette) for palette in TilesetPalette
}


def palette_for_floor(floor_number: int) -> TilesetPalette:
    """Palette used on ``floor_number``. Unknown floors fall back to ORANGE."""
    return FLOOR_PALETTE_MAP.get(floor_number, TilesetPalette.ORANGE)


def frame_set_for_floor(floor_number: int) -> TileFrameSet:
    return PALETTE_FRAMES[palette_for_floor(floor_number)]


def all_palettes() -> list[TilesetPalette]:
    return list(TilesetPalette)


def random_palette(rng: RNG) -> TilesetPalette:
    """Pick any palette, for mixed-palette bonus floors."""
    return rng.choice(all_palettes())
