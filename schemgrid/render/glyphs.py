"""
Glyph Sets

Defines the characters used to draw chip bodies, wires, junctions and
passives. Each set is a complete palette; the unicode set is the default
and the ascii set is for terminals without box-drawing support.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List

from .directions import Direction


@dataclass(frozen=True)
class GlyphSet:
    """Characters for every element the renderer draws."""

    name: str
    description: str = ""

    # Chip body
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"
    horizontal: str = "─"
    vertical: str = "│"
    left_pin_wall: str = "┤"
    right_pin_wall: str = "├"

    # Wire junctions (by connected directions)
    tee_right: str = "├"  # up, down, right
    tee_left: str = "┤"  # up, down, left
    tee_down: str = "┬"  # left, right, down
    tee_up: str = "┴"  # left, right, up
    cross: str = "┼"

    # Markers
    junction: str = "●"
    passive_open: str = "["
    passive_close: str = "]"
    passive_cap_low: str = "┬"
    passive_cap_high: str = "┴"

    def edge_glyph(self, directions: FrozenSet[Direction]) -> str:
        """Select the wire glyph for a set of connected directions.

        Cells touched from a single direction render as a straight run.
        """
        up = Direction.UP in directions
        down = Direction.DOWN in directions
        left = Direction.LEFT in directions
        right = Direction.RIGHT in directions
        vertical = up or down
        horizontal = left or right

        if not horizontal:
            return self.vertical if vertical else " "
        if not vertical:
            return self.horizontal

        if up and down:
            if left and right:
                return self.cross
            return self.tee_left if left else self.tee_right
        if left and right:
            return self.tee_up if up else self.tee_down

        # Corners
        if up:
            return self.bottom_left if right else self.bottom_right
        return self.top_left if right else self.top_right


UNICODE = GlyphSet(
    name="unicode",
    description="Box-drawing characters (default)",
)

ASCII = GlyphSet(
    name="ascii",
    description="Plain 7-bit characters for limited terminals",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal="-",
    vertical="|",
    left_pin_wall="+",
    right_pin_wall="+",
    tee_right="+",
    tee_left="+",
    tee_down="+",
    tee_up="+",
    cross="+",
    junction="*",
    passive_cap_low="+",
    passive_cap_high="+",
)

# Glyph set registry
GLYPH_SETS: Dict[str, GlyphSet] = {
    "unicode": UNICODE,
    "ascii": ASCII,
}


def get_glyph_set(name: str) -> GlyphSet:
    """
    Get a glyph set by name.

    Args:
        name: Glyph set identifier (e.g., "unicode")

    Returns:
        GlyphSet instance

    Raises:
        ValueError: If the name is not registered
    """
    if name not in GLYPH_SETS:
        available = ", ".join(sorted(GLYPH_SETS.keys()))
        raise ValueError(f"Unknown glyph set '{name}'. Available: {available}")
    return GLYPH_SETS[name]


def list_glyph_sets() -> List[str]:
    """List all available glyph set names."""
    return sorted(GLYPH_SETS.keys())
