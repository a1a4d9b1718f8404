"""
SchemGrid - Text Schematic Renderer

Draws finished circuit layouts (chips, passives, wires, net labels and
junctions) as a grid of box-drawing characters for terminals, logs and
snapshot tests.
"""

__version__ = "0.1.0"

from .circuit.abstraction import (
    Chip,
    Circuit,
    ConnectionPoint,
    Line,
    NetLabel,
    Pin,
    Point,
    Side,
)
from .circuit.builder import circuit, CircuitBuilder
from .config import RenderOptions, load_render_options
from .render.canvas import Canvas
from .render.passes import render_circuit

__all__ = [
    "Chip",
    "Circuit",
    "ConnectionPoint",
    "Line",
    "NetLabel",
    "Pin",
    "Point",
    "Side",
    "circuit",
    "CircuitBuilder",
    "RenderOptions",
    "load_render_options",
    "Canvas",
    "render_circuit",
]
