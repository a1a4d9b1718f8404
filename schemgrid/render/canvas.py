"""Character canvas for schematic rendering.

Stores two kinds of writes per cell: overlays (single characters, last
write wins) and wire edges (direction markers that accumulate). When the
canvas is serialized, an overlay always wins over edges; cells with only
edges are drawn with the box-drawing glyph for their direction set.

Rows are printed top-down from the largest y, so the picture has y
growing upward like the layout it came from.
"""

import math
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from .directions import Direction
from .glyphs import GlyphSet, UNICODE
from .transform import GridTransform

Cell = Tuple[int, int]


class Canvas:
    """A sparse, unbounded character grid addressed by continuous coordinates.

    A canvas is owned by exactly one render call; concurrent renders need
    their own instances.
    """

    def __init__(
        self,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        show_axis_labels: bool = False,
        glyphs: GlyphSet = UNICODE,
        axis_tick_interval: float = 5.0,
    ):
        self.transform = GridTransform(scale_x, scale_y)
        self.show_axis_labels = show_axis_labels
        self.glyphs = glyphs
        self.axis_tick_interval = axis_tick_interval

        self._overlays: Dict[Cell, str] = {}
        self._edges: Dict[Cell, Set[Direction]] = {}

    @property
    def scale_x(self) -> float:
        return self.transform.scale_x

    @property
    def scale_y(self) -> float:
        return self.transform.scale_y

    # --- writes ---------------------------------------------------------

    def put_overlay(self, x: float, y: float, char: str):
        """Write a character at a coordinate, replacing any earlier overlay."""
        self._overlays[self.transform.cell_of(x, y)] = char

    def add_edge(self, x: float, y: float, direction: Direction):
        """Mark that a wire leaves the cell at (x, y) in the given direction."""
        cell = self.transform.cell_of(x, y)
        self._edges.setdefault(cell, set()).add(direction)

    # --- reads ----------------------------------------------------------

    def get_overlay(self, col: int, row: int) -> Optional[str]:
        return self._overlays.get((col, row))

    def get_edges(self, col: int, row: int) -> FrozenSet[Direction]:
        return frozenset(self._edges.get((col, row), ()))

    def get_cell(self, col: int, row: int) -> str:
        """Resolve the character displayed at a cell."""
        overlay = self._overlays.get((col, row))
        if overlay is not None:
            return overlay
        edges = self._edges.get((col, row))
        if edges:
            return self.glyphs.edge_glyph(frozenset(edges))
        return " "

    def char_at(self, x: float, y: float) -> str:
        """Resolve the character displayed at a continuous coordinate."""
        return self.get_cell(*self.transform.cell_of(x, y))

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Get occupied cell bounds.

        Returns:
            (min_col, min_row, max_col, max_row), or None for an empty canvas
        """
        cells = set(self._overlays) | set(self._edges)
        if not cells:
            return None
        cols = [c for c, _ in cells]
        rows = [r for _, r in cells]
        return (min(cols), min(rows), max(cols), max(rows))

    def is_empty(self) -> bool:
        return not self._overlays and not self._edges

    # --- serialization --------------------------------------------------

    def to_lines(self) -> List[str]:
        """Render the occupied area as text lines, top row first."""
        bounds = self.bounds()
        if bounds is None:
            return []
        min_col, min_row, max_col, max_row = bounds

        body = []
        for row in range(max_row, min_row - 1, -1):
            text = "".join(
                self.get_cell(col, row) for col in range(min_col, max_col + 1)
            )
            body.append((row, text))

        if not self.show_axis_labels:
            return [text.rstrip() for _, text in body]

        y_labels = {row: f"{row * self.transform.cell_height:.1f}" for row, _ in body}
        gutter = max(len(label) for label in y_labels.values())

        lines = [self._axis_header(min_col, max_col, gutter + 1)]
        for row, text in body:
            lines.append(f"{y_labels[row].rjust(gutter)} {text}".rstrip())
        return lines

    def to_string(self) -> str:
        return "\n".join(self.to_lines())

    def __str__(self) -> str:
        return self.to_string()

    def _axis_header(self, min_col: int, max_col: int, offset: int) -> str:
        """Build the x tick row, labels centered over their column."""
        if not self.axis_tick_interval > 0:
            return ""
        header: List[str] = [" "] * (offset + max_col - min_col + 1)
        last_end = 0
        for col in range(min_col, max_col + 1):
            x = col * self.transform.cell_width
            ticks = x / self.axis_tick_interval
            if not math.isclose(ticks, round(ticks), abs_tol=1e-9):
                continue
            text = f"{x:.1f}"
            start = max(0, offset + (col - min_col) - len(text) // 2)
            if start < last_end:
                continue
            end = start + len(text)
            if end > len(header):
                header.extend([" "] * (end - len(header)))
            header[start:end] = list(text)
            last_end = end + 1
        return "".join(header).rstrip()
