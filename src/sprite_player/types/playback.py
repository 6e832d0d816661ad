"""Playback session types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from .diagnostics import ConfigError

DEFAULT_FPS = 24.0


class PlaybackStatus(Enum):
    """States of the playback state machine."""

    IDLE = "idle"
    PLAYING = "playing"
    LOOPING = "looping"
    STOPPED = "stopped"


@dataclass
class PlayOptions:
    """Arguments for starting an animation.

    An ``fps`` of None falls back to the sprite default.
    """

    animation: str
    fps: Optional[float] = None
    loop: bool = False
    reset_after_finish: bool = False
    on_finish: Optional[Callable[[], None]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PlayOptions":
        """Create options from a mapping.

        The animation name may be given as ``type`` or ``animation``, and
        ``resetAfterFinish``/``onFinish`` are accepted alongside the snake_case
        names.
        """
        name = data.get("animation", data.get("type"))
        if not isinstance(name, str):
            raise ConfigError("Play options need an animation name ('type')")

        return cls(
            animation=name,
            fps=data.get("fps"),
            loop=bool(data.get("loop", False)),
            reset_after_finish=bool(
                data.get("reset_after_finish", data.get("resetAfterFinish", False))
            ),
            on_finish=data.get("on_finish", data.get("onFinish")),
        )


@dataclass
class PlaybackSession:
    """Mutable playback state owned by a single controller."""

    active_animation: Optional[str] = None
    progress: float = 0.0
    fps: float = DEFAULT_FPS
    looping: bool = False
    reset_on_finish: bool = False
    on_finish: Optional[Callable[[], None]] = None
    status: PlaybackStatus = PlaybackStatus.IDLE

    @property
    def is_running(self) -> bool:
        """True while a run is advancing progress."""
        return self.status in (PlaybackStatus.PLAYING, PlaybackStatus.LOOPING)
