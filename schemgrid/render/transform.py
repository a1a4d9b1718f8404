"""Coordinate to grid-cell conversion.

Every canvas write goes through the same transform so a chip's border and
its pin rows round onto identical cells.

A zero scale factor is accepted and collapses that axis onto cell 0.
Negative factors mirror the axis. Neither raises; the picture is just
garbled.
"""

import math
from dataclasses import dataclass
from typing import Tuple


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def inverse(scale: float) -> float:
    """Size of one cell in coordinate units (0 for a zero scale)."""
    return 1 / scale if scale else 0.0


def to_cell(value: float, scale: float) -> int:
    """Convert a continuous coordinate to an integer cell index."""
    return round_half_up(value * scale)


def snap(value: float, scale: float) -> float:
    """Snap a continuous coordinate onto the nearest cell boundary."""
    return to_cell(value, scale) * inverse(scale)


@dataclass(frozen=True)
class GridTransform:
    """Scale factors shared by every pass of one render."""
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def cell_width(self) -> float:
        return inverse(self.scale_x)

    @property
    def cell_height(self) -> float:
        return inverse(self.scale_y)

    def col(self, x: float) -> int:
        return to_cell(x, self.scale_x)

    def row(self, y: float) -> int:
        return to_cell(y, self.scale_y)

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        """Get the (col, row) cell containing a coordinate."""
        return self.col(x), self.row(y)

    def coord_of(self, col: int, row: int) -> Tuple[float, float]:
        """Get the coordinate of a cell."""
        return col * self.cell_width, row * self.cell_height

    def snap_point(self, x: float, y: float) -> Tuple[float, float]:
        return snap(x, self.scale_x), snap(y, self.scale_y)
