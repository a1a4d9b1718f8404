"""
Circuit File Loader

Reads and writes circuit snapshots as YAML or JSON so finished layouts
can be rendered outside the pipeline that produced them.

File Format (YAML):
```yaml
chips:
  - id: U1
    x: 0
    y: 0
    width: 5
    height: 4
    pins:
      left:
        - {number: 1, x: 0, y: 2}
        - {number: 2, x: 0, y: 1}
      right:
        - {number: 3, x: 4, y: 1}
  - id: R2
    passive: true
    x: -6.5
    y: 2
    width: 2
    height: 1
    pins:
      left: [{number: 2, x: -7, y: 2}]
      right: [{number: 1, x: -6, y: 2}]
lines:
  - start: [0, 2]
    end: [-5, 2]
net_labels:
  - {net: X, x: -10, y: 2}
connection_points:
  - {x: 0, y: 1, intersection: true}
```

JSON files use the same structure.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .abstraction import Chip, Circuit, ConnectionPoint, Line, NetLabel, Pin, Point, Side

logger = logging.getLogger(__name__)


class CircuitFileError(ValueError):
    """Raised when a circuit file or mapping is malformed."""


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CircuitFileError(f"{what} must be a number, got {value!r}")
    return float(value)


def _point(value: Any, what: str) -> Point:
    if isinstance(value, dict):
        return Point(_number(value.get("x"), f"{what}.x"),
                     _number(value.get("y"), f"{what}.y"))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Point(_number(value[0], f"{what}[0]"), _number(value[1], f"{what}[1]"))
    raise CircuitFileError(f"{what} must be [x, y] or {{x, y}}, got {value!r}")


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise CircuitFileError(f"{what} must be a mapping, got {value!r}")
    return value


def _entries(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise CircuitFileError(f"'{key}' must be a list")
    return value


def _pin_from_dict(data: Any, side: Side, what: str) -> Pin:
    data = _mapping(data, what)
    number = data.get("number")
    if isinstance(number, bool) or not isinstance(number, int):
        raise CircuitFileError(f"{what}.number must be an integer, got {number!r}")
    return Pin(
        number=number,
        side=side,
        x=_number(data.get("x"), f"{what}.x"),
        y=_number(data.get("y"), f"{what}.y"),
    )


def _chip_from_dict(data: Any, index: int) -> Chip:
    what = f"chips[{index}]"
    data = _mapping(data, what)
    chip_id = data.get("id")
    if not isinstance(chip_id, str):
        raise CircuitFileError(f"{what}.id must be a string, got {chip_id!r}")

    pins = _mapping(data.get("pins") or {}, f"{what}.pins")
    unknown = set(pins) - {side.value for side in Side}
    if unknown:
        raise CircuitFileError(f"{what}.pins has unknown sides: {sorted(unknown)}")

    by_side = {}
    for side in Side:
        entries = pins.get(side.value) or []
        if not isinstance(entries, list):
            raise CircuitFileError(f"{what}.pins.{side.value} must be a list")
        by_side[side] = tuple(
            _pin_from_dict(entry, side, f"{what}.pins.{side.value}[{i}]")
            for i, entry in enumerate(entries)
        )

    return Chip(
        chip_id=chip_id,
        x=_number(data.get("x", 0), f"{what}.x"),
        y=_number(data.get("y", 0), f"{what}.y"),
        width=_number(data.get("width"), f"{what}.width"),
        height=_number(data.get("height"), f"{what}.height"),
        left_pins=by_side[Side.LEFT],
        right_pins=by_side[Side.RIGHT],
        top_pins=by_side[Side.TOP],
        bottom_pins=by_side[Side.BOTTOM],
        is_passive=bool(data.get("passive", False)),
    )


def circuit_from_dict(data: Any) -> Circuit:
    """
    Build a Circuit from its mapping form.

    Raises:
        CircuitFileError: If any entry is malformed
    """
    data = _mapping(data, "circuit")

    chips = [_chip_from_dict(c, i) for i, c in enumerate(_entries(data, "chips"))]

    lines = []
    for i, entry in enumerate(_entries(data, "lines")):
        entry = _mapping(entry, f"lines[{i}]")
        lines.append(Line(_point(entry.get("start"), f"lines[{i}].start"),
                          _point(entry.get("end"), f"lines[{i}].end")))

    labels = []
    for i, entry in enumerate(_entries(data, "net_labels")):
        entry = _mapping(entry, f"net_labels[{i}]")
        net_id = entry.get("net", "")
        if not isinstance(net_id, str):
            net_id = str(net_id)
        location = _point(entry, f"net_labels[{i}]")
        labels.append(NetLabel(net_id, location.x, location.y))

    points = []
    for i, entry in enumerate(_entries(data, "connection_points")):
        entry = _mapping(entry, f"connection_points[{i}]")
        location = _point(entry, f"connection_points[{i}]")
        points.append(ConnectionPoint(
            location.x, location.y,
            show_as_intersection=bool(entry.get("intersection", False)),
        ))

    return Circuit(chips=chips, lines=lines, net_labels=labels,
                   connection_points=points)


def _chip_to_dict(chip: Chip) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "id": chip.chip_id,
        "x": chip.x,
        "y": chip.y,
        "width": chip.width,
        "height": chip.height,
    }
    if chip.is_passive:
        d["passive"] = True
    pins = {}
    for side, side_pins in ((Side.LEFT, chip.left_pins), (Side.RIGHT, chip.right_pins),
                            (Side.TOP, chip.top_pins), (Side.BOTTOM, chip.bottom_pins)):
        if side_pins:
            pins[side.value] = [{"number": p.number, "x": p.x, "y": p.y}
                                for p in side_pins]
    if pins:
        d["pins"] = pins
    return d


def circuit_to_dict(circuit: Circuit) -> Dict[str, Any]:
    """Convert a Circuit to its mapping form."""
    return {
        "chips": [_chip_to_dict(chip) for chip in circuit.chips],
        "lines": [
            {"start": [line.start.x, line.start.y], "end": [line.end.x, line.end.y]}
            for line in circuit.lines
        ],
        "net_labels": [
            {"net": label.net_id, "x": label.x, "y": label.y}
            for label in circuit.net_labels
        ],
        "connection_points": [
            {"x": cp.x, "y": cp.y, "intersection": cp.show_as_intersection}
            for cp in circuit.connection_points
        ],
    }


def load_circuit(path: Union[str, Path]) -> Circuit:
    """
    Load a circuit from a YAML or JSON file.

    Args:
        path: File path; `.json` files are parsed as JSON, anything else as YAML

    Returns:
        Circuit snapshot

    Raises:
        FileNotFoundError: If the file does not exist
        CircuitFileError: If the content is malformed
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CircuitFileError(f"Cannot parse {path}: {e}") from e

    circuit = circuit_from_dict(data or {})
    logger.debug(
        f"Loaded circuit from {path}: {len(circuit.chips)} chips, "
        f"{len(circuit.lines)} lines"
    )
    return circuit


def save_circuit(circuit: Circuit, path: Union[str, Path]):
    """Write a circuit to a YAML or JSON file (chosen by suffix)."""
    path = Path(path)
    data = circuit_to_dict(circuit)

    if path.suffix.lower() == ".json":
        content = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        content = yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    path.write_text(content, encoding="utf-8")
    logger.info(f"Saved circuit: {path} ({len(circuit.chips)} chips)")
