"""Sprite sheet configuration and geometry types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .diagnostics import ConfigError


@dataclass(frozen=True)
class Offset:
    """Translation applied to the sheet image to show one frame."""

    translate_x: float = 0.0
    translate_y: float = 0.0

    def as_tuple(self) -> tuple[float, float]:
        """Return the offset as an (x, y) tuple."""
        return (self.translate_x, self.translate_y)


IDENTITY_OFFSET = Offset(0.0, 0.0)


@dataclass(frozen=True)
class SheetDimensions:
    """Pixel size of the full sprite sheet image."""

    width: float = 0.0
    height: float = 0.0

    @property
    def is_resolved(self) -> bool:
        """True once both dimensions are known."""
        return self.width > 0 and self.height > 0


UNRESOLVED_DIMENSIONS = SheetDimensions(0.0, 0.0)


@dataclass(frozen=True)
class AnimationDefinition:
    """A named run of frames on a single sheet row."""

    name: str
    row: int
    start_frame: int
    end_frame: int

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> "AnimationDefinition":
        """Create a definition from a config mapping.

        Accepts both ``startFrame``/``endFrame`` and ``start_frame``/``end_frame``.

        Raises:
            ConfigError: If a field is missing, not an integer, or out of order.
        """
        row = _int_field(data, name, "row")
        start = _int_field(data, name, "start_frame", "startFrame")
        end = _int_field(data, name, "end_frame", "endFrame")

        if row < 0 or start < 0:
            raise ConfigError(f"Animation {name!r}: row and start frame must be >= 0")
        if end < start:
            raise ConfigError(
                f"Animation {name!r}: end frame {end} is before start frame {start}"
            )

        return cls(name=name, row=row, start_frame=start, end_frame=end)

    @property
    def frame_count(self) -> int:
        """Number of frames in the inclusive range."""
        return self.end_frame - self.start_frame + 1


@dataclass(frozen=True)
class SheetGeometry:
    """Resolved grid layout used for offset calculation."""

    columns: int
    rows: int
    frame_width: float
    frame_height: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    @property
    def total_frames(self) -> int:
        """Number of addressable frames on the sheet."""
        return self.columns * self.rows


@dataclass(frozen=True)
class SheetConfig:
    """User-declared sprite configuration."""

    columns: int
    rows: int
    animations: dict[str, AnimationDefinition] = field(default_factory=dict)
    frame_width: Optional[float] = None
    frame_height: Optional[float] = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    width: Optional[float] = None
    height: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SheetConfig":
        """Create a config from a mapping.

        Keys may be camelCase (``frameWidth``) or snake_case (``frame_width``).

        Raises:
            ConfigError: If required keys are missing or malformed.
        """
        for key in ("columns", "rows"):
            if key not in data:
                raise ConfigError(f"Missing required key: {key!r}")
            if not isinstance(data[key], int) or isinstance(data[key], bool):
                raise ConfigError(f"{key!r} must be an integer, got {data[key]!r}")

        raw_animations = data.get("animations", {})
        if not isinstance(raw_animations, Mapping):
            raise ConfigError("'animations' must be a mapping of name to frame range")

        animations = {
            name: AnimationDefinition.from_dict(name, frame_range)
            for name, frame_range in raw_animations.items()
        }

        return cls(
            columns=data["columns"],
            rows=data["rows"],
            animations=animations,
            frame_width=_optional_number(data, "frame_width", "frameWidth"),
            frame_height=_optional_number(data, "frame_height", "frameHeight"),
            offset_x=_optional_number(data, "offset_x", "offsetX") or 0.0,
            offset_y=_optional_number(data, "offset_y", "offsetY") or 0.0,
            width=_optional_number(data, "width"),
            height=_optional_number(data, "height"),
        )

    def definitions(self) -> tuple[AnimationDefinition, ...]:
        """Animation definitions in declaration order."""
        return tuple(self.animations.values())


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _int_field(data: Mapping[str, Any], name: str, *keys: str) -> int:
    value = _lookup(data, *keys)
    if value is None:
        raise ConfigError(f"Animation {name!r} is missing {keys[-1]!r}")
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"Animation {name!r}: {keys[-1]!r} must be an integer")
    return value


def _optional_number(data: Mapping[str, Any], *keys: str) -> Optional[float]:
    value = _lookup(data, *keys)
    if value is None:
        return None
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ConfigError(f"{keys[-1]!r} must be a number, got {value!r}")
    return float(value)
