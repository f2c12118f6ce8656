"""Sketch rendering settings."""

import numbers
from dataclasses import asdict, dataclass, replace
from enum import Enum

from models.errors import UnsupportedModeError


class SketchMode(str, Enum):
    """Rendering style; each member has one row in the pipeline recipe table."""

    PENCIL = 'pencil'
    INK = 'ink'
    LINE_ART = 'lineart'
    COLORING = 'coloring'

    @classmethod
    def parse(cls, value) -> "SketchMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedModeError(f"Unknown sketch mode: {value!r}") from None


_RANGES = {
    'line_thickness': (1, 5),
    'edge_intensity': (10, 100),
    'contrast': (0, 100),
    'noise_reduction': (0, 100),
    'smoothing': (0, 100),
    'brightness': (0, 100),
}


@dataclass(frozen=True)
class SketchSettings:
    """Slider values for one pipeline run. Immutable; use ``with_changes``."""

    mode: SketchMode = SketchMode.PENCIL
    line_thickness: int = 1
    edge_intensity: int = 50
    contrast: int = 50
    noise_reduction: int = 30
    smoothing: int = 20
    brightness: int = 50

    def __post_init__(self):
        object.__setattr__(self, 'mode', SketchMode.parse(self.mode))
        for name, (low, high) in _RANGES.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not (low <= value <= high):
                raise ValueError(f"{name} must be {low}-{high}, got {value}")
            object.__setattr__(self, name, int(value))

    def with_changes(self, **changes) -> "SketchSettings":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        data = asdict(self)
        data['mode'] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SketchSettings":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
