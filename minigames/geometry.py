"""
Mapping between board cells and the normalized drawing space.

The board covers [-1, 1] on both axes, y pointing up. A cell index (x, y)
covers [x, x + 1] x [y, y + 1] in index space, which is linearly mapped
onto the drawing range.
"""

import math
from typing import Optional, Tuple

from .board import CellIndex

Point = Tuple[float, float]

DRAWING_MIN = -1.0
DRAWING_MAX = 1.0

# Interpolated indices are rounded to this many decimals before flooring,
# so a cell corner maps back to its own cell despite float error.
_SNAP_DECIMALS = 9


def map_range(value: float, from_min: float, from_max: float,
              to_min: float, to_max: float) -> float:
    return to_min + (value - from_min) * (to_max - to_min) / (from_max - from_min)


def cell_radius(board_size: int) -> float:
    return 1.0 / board_size


def cell_bottom_left_corner(index: CellIndex, board_size: int) -> Point:
    return (
        map_range(index.x, 0, board_size, DRAWING_MIN, DRAWING_MAX),
        map_range(index.y, 0, board_size, DRAWING_MIN, DRAWING_MAX),
    )


def cell_center(index: CellIndex, board_size: int) -> Point:
    x, y = cell_bottom_left_corner(index, board_size)
    r = cell_radius(board_size)
    return x + r, y + r


def cell_to_region(index: CellIndex, board_size: int) -> Tuple[Point, float]:
    """Returns (bottom-left origin, side length) of the cell."""
    return cell_bottom_left_corner(index, board_size), 2 * cell_radius(board_size)


def _to_cell_coordinate(value: float, board_size: int) -> int:
    pos = map_range(value, DRAWING_MIN, DRAWING_MAX, 0, board_size)
    return math.floor(round(pos, _SNAP_DECIMALS))


def cell_hovered_by(position: Point, board_size: int) -> Optional[CellIndex]:
    index = CellIndex(
        _to_cell_coordinate(position[0], board_size),
        _to_cell_coordinate(position[1], board_size),
    )
    if 0 <= index.x < board_size and 0 <= index.y < board_size:
        return index
    return None


point_to_cell = cell_hovered_by


# ====== Pixel space ======
def to_pixels(point: Point, surface_size: Tuple[int, int]) -> Tuple[float, float]:
    """Normalized point -> pixel position. The surface height spans [-1, 1]."""
    w, h = surface_size
    scale = h / 2
    return w / 2 + point[0] * scale, h / 2 - point[1] * scale


def from_pixels(pixel: Tuple[float, float], surface_size: Tuple[int, int]) -> Point:
    w, h = surface_size
    scale = h / 2
    return (pixel[0] - w / 2) / scale, (h / 2 - pixel[1]) / scale


def length_to_pixels(length: float, surface_size: Tuple[int, int]) -> float:
    return length * surface_size[1] / 2
