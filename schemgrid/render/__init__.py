"""Text rendering of circuit snapshots.

- Canvas: sparse character grid with overlay and wire-edge writes
- GlyphSet: box-drawing palettes (unicode, ascii)
- render_circuit: the five-pass renderer
"""

from .canvas import Canvas
from .directions import Direction
from .glyphs import GlyphSet, ASCII, UNICODE, get_glyph_set, list_glyph_sets
from .transform import GridTransform, round_half_up, snap, to_cell
from .chip_rows import RowGlyphs, classify_row, compose_pin_interior, match_pin_to_row
from .passes import render_circuit

__all__ = [
    "Canvas",
    "Direction",
    "GlyphSet",
    "ASCII",
    "UNICODE",
    "get_glyph_set",
    "list_glyph_sets",
    "GridTransform",
    "round_half_up",
    "snap",
    "to_cell",
    "RowGlyphs",
    "classify_row",
    "compose_pin_interior",
    "match_pin_to_row",
    "render_circuit",
]
