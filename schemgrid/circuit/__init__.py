"""Circuit snapshot model, builder and file loader."""

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
from .builder import circuit, CircuitBuilder, ChipBuilder, PinBuilder
from .loader import (
    CircuitFileError,
    circuit_from_dict,
    circuit_to_dict,
    load_circuit,
    save_circuit,
)

__all__ = [
    # Core model
    "Chip",
    "Circuit",
    "ConnectionPoint",
    "Line",
    "NetLabel",
    "Pin",
    "Point",
    "Side",
    # Builder
    "circuit",
    "CircuitBuilder",
    "ChipBuilder",
    "PinBuilder",
    # Files
    "CircuitFileError",
    "circuit_from_dict",
    "circuit_to_dict",
    "load_circuit",
    "save_circuit",
]
