"""Type definitions for the sprite player."""

from .diagnostics import (
    Diagnostic,
    DiagnosticCategory,
    Severity,
    SpriteError,
    ConfigError,
    ResourceError,
)
from .sheet import (
    Offset,
    IDENTITY_OFFSET,
    SheetDimensions,
    UNRESOLVED_DIMENSIONS,
    AnimationDefinition,
    SheetGeometry,
    SheetConfig,
)
from .curves import (
    Keyframe,
    AnimationCurve,
)
from .playback import (
    DEFAULT_FPS,
    PlaybackStatus,
    PlayOptions,
    PlaybackSession,
)

__all__ = [
    # Diagnostics
    "Diagnostic",
    "DiagnosticCategory",
    "Severity",
    "SpriteError",
    "ConfigError",
    "ResourceError",
    # Sheet
    "Offset",
    "IDENTITY_OFFSET",
    "SheetDimensions",
    "UNRESOLVED_DIMENSIONS",
    "AnimationDefinition",
    "SheetGeometry",
    "SheetConfig",
    # Curves
    "Keyframe",
    "AnimationCurve",
    # Playback
    "DEFAULT_FPS",
    "PlaybackStatus",
    "PlayOptions",
    "PlaybackSession",
]
