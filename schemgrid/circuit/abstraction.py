"""
Circuit Abstraction Layer

Read-only snapshot of a finished schematic layout: chips with their pins,
wire segments, net labels and connection points. The layout/matching
stages upstream produce these; the renderer only reads them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class Side(Enum):
    """Chip side a pin is attached to."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Point:
    """A continuous schematic coordinate (y grows upward)."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Pin:
    """A chip pin with its absolute location."""
    number: int
    side: Side
    x: float
    y: float

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Chip:
    """A placed component.

    Active chips are anchored at their lower-left corner; passives are
    anchored at their center.
    """
    chip_id: str
    x: float
    y: float
    width: float
    height: float
    left_pins: Tuple[Pin, ...] = ()
    right_pins: Tuple[Pin, ...] = ()
    top_pins: Tuple[Pin, ...] = ()
    bottom_pins: Tuple[Pin, ...] = ()
    is_passive: bool = False

    @property
    def left_pin_count(self) -> int:
        return len(self.left_pins)

    @property
    def right_pin_count(self) -> int:
        return len(self.right_pins)

    @property
    def top_pin_count(self) -> int:
        return len(self.top_pins)

    @property
    def bottom_pin_count(self) -> int:
        return len(self.bottom_pins)

    @property
    def pins(self) -> Tuple[Pin, ...]:
        """All pins, in side order left, bottom, right, top."""
        return self.left_pins + self.bottom_pins + self.right_pins + self.top_pins

    def get_pin(self, number: int) -> Optional[Pin]:
        """Get a pin by its number."""
        for pin in self.pins:
            if pin.number == number:
                return pin
        return None

    def get_pin_location(self, number: int) -> Point:
        """Get the absolute location of a pin.

        Raises:
            KeyError: If the chip has no pin with that number
        """
        pin = self.get_pin(number)
        if pin is None:
            raise KeyError(f"Chip {self.chip_id} has no pin {number}")
        return pin.location


@dataclass(frozen=True)
class Line:
    """A wire segment. Only axis-aligned segments are drawable."""
    start: Point
    end: Point

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def is_degenerate(self) -> bool:
        """True for zero-length segments."""
        return self.start == self.end


@dataclass(frozen=True)
class NetLabel:
    """Textual net identifier placed at a coordinate."""
    net_id: str
    x: float
    y: float


@dataclass(frozen=True)
class ConnectionPoint:
    """Point where wires meet."""
    x: float
    y: float
    show_as_intersection: bool = False


@dataclass(frozen=True)
class Circuit:
    """Immutable input snapshot for a single render."""
    chips: Tuple[Chip, ...] = ()
    lines: Tuple[Line, ...] = ()
    net_labels: Tuple[NetLabel, ...] = ()
    connection_points: Tuple[ConnectionPoint, ...] = ()

    # Lookup index, built once
    _chip_index: Dict[str, Chip] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        # Accept any iterable but always store tuples
        for name in ("chips", "lines", "net_labels", "connection_points"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(
            self, "_chip_index", {chip.chip_id: chip for chip in self.chips}
        )

    @property
    def active_chips(self) -> List[Chip]:
        return [chip for chip in self.chips if not chip.is_passive]

    @property
    def passive_chips(self) -> List[Chip]:
        return [chip for chip in self.chips if chip.is_passive]

    def get_chip(self, chip_id: str) -> Optional[Chip]:
        return self._chip_index.get(chip_id)

    def iter_pins(self) -> Iterator[Tuple[Chip, Pin]]:
        for chip in self.chips:
            for pin in chip.pins:
                yield chip, pin
