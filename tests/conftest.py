"""
Shared test fixtures for SchemGrid tests.

Provides reusable chips, passives and circuits for the renderer,
builder and loader tests.
"""

import pytest

from schemgrid.circuit.abstraction import (
    Chip,
    Circuit,
    ConnectionPoint,
    Line,
    NetLabel,
    Pin,
    Point,
    Side,
)
from schemgrid.circuit.builder import circuit
from schemgrid.config import RenderOptions


@pytest.fixture
def dual_chip() -> Chip:
    """A 5x4 chip with two pins on each side."""
    return Chip(
        chip_id="U1",
        x=0.0,
        y=0.0,
        width=5.0,
        height=4.0,
        left_pins=(
            Pin(1, Side.LEFT, 0.0, 2.0),
            Pin(2, Side.LEFT, 0.0, 1.0),
        ),
        right_pins=(
            Pin(3, Side.RIGHT, 4.0, 1.0),
            Pin(4, Side.RIGHT, 4.0, 2.0),
        ),
    )


@pytest.fixture
def horizontal_resistor() -> Chip:
    """A two-cell horizontal passive spanning x = 0..1."""
    return Chip(
        chip_id="R2",
        x=1.0,
        y=0.0,
        width=2.0,
        height=1.0,
        left_pins=(Pin(1, Side.LEFT, 0.0, 0.0),),
        right_pins=(Pin(2, Side.RIGHT, 1.0, 0.0),),
        is_passive=True,
    )


@pytest.fixture
def vertical_capacitor() -> Chip:
    """A vertical passive centered on the origin."""
    return Chip(
        chip_id="C5",
        x=0.0,
        y=0.0,
        width=1.0,
        height=2.0,
        top_pins=(Pin(1, Side.TOP, 0.0, 1.0),),
        bottom_pins=(Pin(2, Side.BOTTOM, 0.0, -1.0),),
        is_passive=True,
    )


@pytest.fixture
def labelled_circuit(dual_chip) -> Circuit:
    """The dual chip with a wire and net label on every pin."""
    return Circuit(
        chips=[dual_chip],
        lines=[
            Line(Point(0, 2), Point(-3, 2)),
            Line(Point(0, 1), Point(-3, 1)),
            Line(Point(4, 1), Point(7, 1)),
            Line(Point(4, 2), Point(7, 2)),
        ],
        net_labels=[
            NetLabel("VCC", -3, 2),
            NetLabel("GND", -3, 1),
            NetLabel("SDA", 7, 1),
            NetLabel("SCL", 7, 2),
        ],
    )


@pytest.fixture
def builder_circuit():
    """A builder-made circuit: one chip, a series passive and four labels."""
    C = circuit()
    U1 = C.chip().leftpins(2).rightpins(2)
    U1.pin(1).line(-5, 0).passive().line(-2, 0).label("X")
    U1.pin(2).line(-3, 0).label("Y")
    U1.pin(3).line(4, 0).label("Z")
    U1.pin(4).line(4, 0).label("W")
    return C


@pytest.fixture
def no_labels() -> RenderOptions:
    """Render options with chip labels turned off."""
    return RenderOptions(chip_labels=False)


def scale_circuit(source: Circuit, kx: float, ky: float) -> Circuit:
    """Divide every coordinate and dimension by (kx, ky)."""

    def pin(p: Pin) -> Pin:
        return Pin(p.number, p.side, p.x / kx, p.y / ky)

    def point(p: Point) -> Point:
        return Point(p.x / kx, p.y / ky)

    chips = [
        Chip(
            chip_id=c.chip_id,
            x=c.x / kx,
            y=c.y / ky,
            width=c.width / kx,
            height=c.height / ky,
            left_pins=tuple(pin(p) for p in c.left_pins),
            right_pins=tuple(pin(p) for p in c.right_pins),
            top_pins=tuple(pin(p) for p in c.top_pins),
            bottom_pins=tuple(pin(p) for p in c.bottom_pins),
            is_passive=c.is_passive,
        )
        for c in source.chips
    ]
    return Circuit(
        chips=chips,
        lines=[Line(point(l.start), point(l.end)) for l in source.lines],
        net_labels=[NetLabel(n.net_id, n.x / kx, n.y / ky) for n in source.net_labels],
        connection_points=[
            ConnectionPoint(cp.x / kx, cp.y / ky, cp.show_as_intersection)
            for cp in source.connection_points
        ],
    )


@pytest.fixture
def scaler():
    """The scale_circuit helper, for scale-invariance tests."""
    return scale_circuit
