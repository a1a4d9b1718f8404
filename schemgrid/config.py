"""Render configuration.

All options are optional; defaults render one character cell per
coordinate unit with chip labels on and axis labels off. Options can be
loaded from a YAML file so a project can pin its rendering style.
"""

import logging
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """Options for a single render."""

    # Draw chip identifiers above chips that have no top pins
    chip_labels: bool = True

    # Axis ticks and row values (handled by the canvas)
    show_axis_labels: bool = False

    # Character cells per coordinate unit
    grid_scale_x: float = 1.0
    grid_scale_y: float = 1.0

    glyph_set: str = "unicode"

    # Coordinate units between x-axis ticks
    axis_tick_interval: float = 5.0

    @property
    def glyphs(self):
        """Resolve the configured GlyphSet."""
        from .render.glyphs import get_glyph_set

        return get_glyph_set(self.glyph_set)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderOptions":
        """Build options from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If a value has the wrong type or the glyph set is unknown
        """
        types = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(types))
        if unknown:
            logger.warning(f"Ignoring unknown render options: {', '.join(unknown)}")
        values = {k: _check_type(k, v, types[k]) for k, v in data.items() if k in types}
        options = cls(**values)
        # Fail early on a bad glyph set name
        options.glyphs
        return options

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def merged(self, **overrides: Any) -> "RenderOptions":
        """Return a copy with non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return RenderOptions.from_dict(data)


def _check_type(key: str, value: Any, expected: type) -> Any:
    if expected is bool:
        if not isinstance(value, bool):
            raise ValueError(f"Render option '{key}' must be true or false, got {value!r}")
    elif expected is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Render option '{key}' must be a number, got {value!r}")
        return float(value)
    elif not isinstance(value, expected):
        raise ValueError(
            f"Render option '{key}' must be a {expected.__name__}, got {value!r}"
        )
    return value


def load_render_options(path: Optional[Union[str, Path]]) -> RenderOptions:
    """Load render options from a YAML file.

    A missing file falls back to defaults with a warning. The file may
    hold the options at top level or under a `render` key.

    Raises:
        ValueError: If the file is not a YAML mapping
    """
    if path is None:
        return RenderOptions()

    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Render config not found at {config_path}, using defaults")
        return RenderOptions()

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Render config must be a mapping: {config_path}")
    if isinstance(data.get("render"), dict):
        data = data["render"]

    logger.debug(f"Loaded render options from {config_path}")
    return RenderOptions.from_dict(data)
