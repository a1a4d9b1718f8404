"""Row composition for active chip bodies.

A chip body is drawn as a stack of rows, each a left wall glyph, an
interior string and a right wall glyph. Row classification is kept pure
so it can be tested without a canvas.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from ..circuit.abstraction import Pin
from .glyphs import GlyphSet
from .transform import GridTransform


@dataclass(frozen=True)
class RowGlyphs:
    """Wall glyphs and interior fill for one chip row.

    `fill` is repeated across the interior on border rows and is None on
    pin rows, where the interior carries pin numbers instead.
    """
    left: str
    right: str
    fill: Optional[str] = None

    @property
    def is_border(self) -> bool:
        return self.fill is not None


def classify_row(row_index: int, total_rows: int,
                 left_pin: Optional[Pin], right_pin: Optional[Pin],
                 glyphs: GlyphSet) -> RowGlyphs:
    """Pick wall glyphs for a row (row 0 is the bottom border)."""
    if row_index == 0:
        return RowGlyphs(glyphs.bottom_left, glyphs.bottom_right, glyphs.horizontal)
    if row_index == total_rows - 1:
        return RowGlyphs(glyphs.top_left, glyphs.top_right, glyphs.horizontal)
    return RowGlyphs(
        glyphs.left_pin_wall if left_pin is not None else glyphs.vertical,
        glyphs.right_pin_wall if right_pin is not None else glyphs.vertical,
    )


def match_pin_to_row(pins: Iterable[Pin], row: int,
                     transform: GridTransform) -> Optional[Pin]:
    """Find the pin whose rounded y lands on a grid row.

    Rounding can put several pins on one row; the first declared wins.
    """
    for pin in pins:
        if transform.row(pin.y) == row:
            return pin
    return None


def fit(text: str, width: int) -> str:
    """Pad or truncate text to exactly width characters."""
    width = max(0, width)
    return text[:width].ljust(width)


def compose_pin_interior(left_pin: Optional[Pin], right_pin: Optional[Pin],
                         width: int) -> str:
    """Lay out pin numbers inside a pin row.

    Left numbers are left-justified and right numbers right-justified;
    when both are present at least one space separates them.
    """
    left = str(left_pin.number) if left_pin is not None else None
    right = str(right_pin.number) if right_pin is not None else None

    if left and right:
        gap = max(1, width - len(left) - len(right))
        text = left + " " * gap + right
    elif left:
        text = left.ljust(width)
    elif right:
        text = right.rjust(width)
    else:
        text = ""
    return fit(text, width)


def compose_row(row_index: int, total_rows: int, interior_width: int,
                left_pin: Optional[Pin], right_pin: Optional[Pin],
                glyphs: GlyphSet) -> str:
    """Build the full text of one chip row, walls included."""
    row = classify_row(row_index, total_rows, left_pin, right_pin, glyphs)
    if row.is_border:
        interior = row.fill * max(0, interior_width)
    else:
        interior = compose_pin_interior(left_pin, right_pin, interior_width)
    return row.left + interior + row.right
