"""
Fluent circuit builder.

Builds Circuit snapshots by walking wires out from chip pins:

    C = circuit()
    U1 = C.chip().leftpins(2).rightpins(2)
    U1.pin(1).line(-5, 0).passive().line(-2, 0).label("X")
    U1.pin(3).line(4, 0).label("Z")
    print(C.to_string())

Geometry is in schematic units with one unit per pin pitch. Pins are
numbered counter-clockwise starting at the top of the left side. Wire
walks are recorded and resolved in build(), so chips may be moved with
at() after their pins have been wired.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .abstraction import (
    Chip,
    Circuit,
    ConnectionPoint,
    Line,
    NetLabel,
    Pin,
    Point,
    Side,
)

logger = logging.getLogger(__name__)

DEFAULT_CHIP_WIDTH = 5

# Horizontal passives span two cells along the wire. Vertical ones span one
# more, since their end caps sit half the height either side of the center.
# The walk resumes one cell past the far end in both cases.
PASSIVE_LENGTH = 2

_OUTWARD = {
    Side.LEFT: (-1, 0),
    Side.RIGHT: (1, 0),
    Side.TOP: (0, 1),
    Side.BOTTOM: (0, -1),
}


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


class PinBuilder:
    """Records a wire walk starting at a chip pin."""

    def __init__(self, chip: "ChipBuilder", number: int):
        self.chip = chip
        self.number = number
        self._ops: List[Tuple] = []

    def line(self, dx: float, dy: float) -> "PinBuilder":
        """Extend the wire by (dx, dy) from the current point."""
        self._ops.append(("line", dx, dy))
        return self

    def label(self, net_id: str) -> "PinBuilder":
        """Place a net label at the current point."""
        self._ops.append(("label", net_id))
        return self

    def passive(self, chip_id: Optional[str] = None) -> "PinBuilder":
        """Insert a two-pin passive continuing in the current direction."""
        chip_id = chip_id or self.chip.circuit.next_id("R")
        self._ops.append(("passive", chip_id))
        return self

    def intersect(self) -> "PinBuilder":
        """Mark the current point as an explicit junction."""
        self._ops.append(("intersect",))
        return self

    def resolve(self, out: "_BuildState"):
        """Replay the recorded walk into the build state."""
        pin = self.chip.get_pin(self.number)
        cursor = pin.location
        direction = _OUTWARD[pin.side]

        for op in self._ops:
            kind = op[0]
            if kind == "line":
                _, dx, dy = op
                end = cursor.offset(dx, dy)
                out.lines.append(Line(cursor, end))
                if (dx == 0) != (dy == 0):
                    direction = (_sign(dx), _sign(dy))
                cursor = end
            elif kind == "label":
                out.net_labels.append(NetLabel(op[1], cursor.x, cursor.y))
            elif kind == "intersect":
                out.connection_points.append(
                    ConnectionPoint(cursor.x, cursor.y, show_as_intersection=True)
                )
            elif kind == "passive":
                chip, cursor = _make_passive(op[1], cursor, direction)
                out.passives.append(chip)


def _make_passive(chip_id: str, cursor: Point,
                  direction: Tuple[int, int]) -> Tuple[Chip, Point]:
    """Place a passive after cursor along direction.

    Returns the passive and the point where the walk resumes.
    """
    dx, dy = direction
    near = cursor.offset(dx, dy)

    if dy == 0:
        far = cursor.offset(dx * PASSIVE_LENGTH, 0)
        center = Point((near.x + far.x) / 2, cursor.y)
        pin_near = Pin(1, Side.LEFT if dx > 0 else Side.RIGHT, near.x, near.y)
        pin_far = Pin(2, Side.RIGHT if dx > 0 else Side.LEFT, far.x, far.y)
        left, right = (pin_near, pin_far) if dx > 0 else (pin_far, pin_near)
        chip = Chip(
            chip_id=chip_id,
            x=center.x,
            y=center.y,
            width=PASSIVE_LENGTH,
            height=1,
            left_pins=(left,),
            right_pins=(right,),
            is_passive=True,
        )
    else:
        far = cursor.offset(0, dy * (PASSIVE_LENGTH + 1))
        center = Point(cursor.x, (near.y + far.y) / 2)
        pin_near = Pin(1, Side.BOTTOM if dy > 0 else Side.TOP, near.x, near.y)
        pin_far = Pin(2, Side.TOP if dy > 0 else Side.BOTTOM, far.x, far.y)
        bottom, top = (pin_near, pin_far) if dy > 0 else (pin_far, pin_near)
        chip = Chip(
            chip_id=chip_id,
            x=center.x,
            y=center.y,
            width=1,
            height=PASSIVE_LENGTH,
            top_pins=(top,),
            bottom_pins=(bottom,),
            is_passive=True,
        )
    return chip, far.offset(dx, dy)


class ChipBuilder:
    """Declares an active chip and its pins."""

    def __init__(self, circuit: "CircuitBuilder", chip_id: str):
        self.circuit = circuit
        self.chip_id = chip_id
        self.x = 0.0
        self.y = 0.0
        self._width: Optional[float] = None
        self.left_pin_count = 0
        self.right_pin_count = 0
        self.top_pin_count = 0
        self.bottom_pin_count = 0
        self._pins: Dict[int, PinBuilder] = {}

    def at(self, x: float, y: float) -> "ChipBuilder":
        """Set the lower-left corner."""
        self.x = x
        self.y = y
        return self

    def width(self, width: float) -> "ChipBuilder":
        self._width = width
        return self

    def leftpins(self, count: int) -> "ChipBuilder":
        self.left_pin_count = count
        return self

    def rightpins(self, count: int) -> "ChipBuilder":
        self.right_pin_count = count
        return self

    def toppins(self, count: int) -> "ChipBuilder":
        self.top_pin_count = count
        return self

    def bottompins(self, count: int) -> "ChipBuilder":
        self.bottom_pin_count = count
        return self

    @property
    def pin_count(self) -> int:
        return (self.left_pin_count + self.right_pin_count +
                self.top_pin_count + self.bottom_pin_count)

    def get_width(self) -> float:
        if self._width is not None:
            return self._width
        digits = len(str(max(self.pin_count, 1)))
        return max(
            DEFAULT_CHIP_WIDTH,
            2 * digits + 3,
            self.top_pin_count + 2,
            self.bottom_pin_count + 2,
        )

    def get_height(self) -> float:
        return max(self.left_pin_count, self.right_pin_count) + 2

    def pin(self, number: int) -> PinBuilder:
        """Start (or continue) a wire walk from a pin.

        Raises:
            ValueError: If the chip has no such pin
        """
        if not 1 <= number <= self.pin_count:
            raise ValueError(
                f"Chip {self.chip_id} has no pin {number} "
                f"(pins 1-{self.pin_count})"
            )
        if number not in self._pins:
            self._pins[number] = PinBuilder(self, number)
        return self._pins[number]

    def get_pin(self, number: int) -> Pin:
        """Compute a pin's side and absolute location."""
        width = self.get_width()
        height = self.get_height()
        left, bottom, right = (self.left_pin_count, self.bottom_pin_count,
                               self.right_pin_count)

        index = number - 1
        if index < left:
            # Top to bottom
            return Pin(number, Side.LEFT, self.x, self.y + height - 2 - index)
        index -= left
        if index < bottom:
            # Left to right
            return Pin(number, Side.BOTTOM, self.x + 1 + index, self.y)
        index -= bottom
        if index < right:
            # Bottom to top
            return Pin(number, Side.RIGHT, self.x + width - 1, self.y + 1 + index)
        index -= right
        # Top side, right to left
        return Pin(number, Side.TOP, self.x + width - 2 - index, self.y + height - 1)

    def get_pin_location(self, number: int) -> Point:
        return self.get_pin(number).location

    def build(self) -> Chip:
        pins = [self.get_pin(n) for n in range(1, self.pin_count + 1)]
        by_side = {side: tuple(p for p in pins if p.side == side) for side in Side}
        return Chip(
            chip_id=self.chip_id,
            x=self.x,
            y=self.y,
            width=self.get_width(),
            height=self.get_height(),
            left_pins=by_side[Side.LEFT],
            right_pins=by_side[Side.RIGHT],
            top_pins=by_side[Side.TOP],
            bottom_pins=by_side[Side.BOTTOM],
        )


class _BuildState:
    def __init__(self):
        self.passives: List[Chip] = []
        self.lines: List[Line] = []
        self.net_labels: List[NetLabel] = []
        self.connection_points: List[ConnectionPoint] = []


class CircuitBuilder:
    """Collects chips and wire walks and produces a Circuit."""

    def __init__(self):
        self.chips: List[ChipBuilder] = []
        self._id_counter = 0

    def next_id(self, prefix: str) -> str:
        """Allocate the next identifier; chips and passives share one counter."""
        self._id_counter += 1
        return f"{prefix}{self._id_counter}"

    def chip(self, chip_id: Optional[str] = None) -> ChipBuilder:
        builder = ChipBuilder(self, chip_id or self.next_id("U"))
        self.chips.append(builder)
        return builder

    def build(self) -> Circuit:
        state = _BuildState()
        for chip in self.chips:
            for number in sorted(chip._pins):
                chip._pins[number].resolve(state)

        chips = [chip.build() for chip in self.chips] + state.passives
        logger.debug(
            f"Built circuit: {len(chips)} chips, {len(state.lines)} lines, "
            f"{len(state.net_labels)} labels"
        )
        return Circuit(
            chips=chips,
            lines=state.lines,
            net_labels=state.net_labels,
            connection_points=state.connection_points,
        )

    def to_string(self, **options) -> str:
        """Build and render, passing options through to RenderOptions."""
        from ..config import RenderOptions
        from ..render.passes import render_circuit

        return render_circuit(self.build(), RenderOptions(**options)).to_string()

    def __str__(self) -> str:
        return self.to_string()


def circuit() -> CircuitBuilder:
    """Start a new circuit."""
    return CircuitBuilder()
