"""Playback state machine."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from sprite_player.types import (
    AnimationDefinition,
    DEFAULT_FPS,
    DiagnosticCategory,
    Offset,
    PlaybackSession,
    PlaybackStatus,
)
from .curves import CurveSet
from .diagnostics import DiagnosticsChannel, report_to
from .sampler import sample
from .ticker import CallHandle, Ticker
from .tween import LinearTween

logger = logging.getLogger(__name__)


class PlaybackController:
    """Drives one playback session over a curve set.

    ``play`` always restarts from progress 0, replacing any run in flight.
    ``stop`` freezes progress where it is; ``reset`` returns it to 0. Their
    callbacks, like ``on_finish``, fire on a later tick.
    """

    def __init__(
        self,
        curves: CurveSet,
        ticker: Ticker,
        diagnostics: Optional[DiagnosticsChannel] = None,
    ):
        """Initialize the controller.

        Args:
            curves: Curves available for playback.
            ticker: Tick source for advancing progress.
            diagnostics: Channel for playback errors.
        """
        self._curves = curves
        self._ticker = ticker
        self._diagnostics = diagnostics
        self._session = PlaybackSession()
        self._tween: Optional[LinearTween] = None
        self._pending: list[CallHandle] = []
        self._disposed = False

    @property
    def session(self) -> PlaybackSession:
        return self._session

    @property
    def status(self) -> PlaybackStatus:
        return self._session.status

    @property
    def progress(self) -> float:
        return self._session.progress

    @property
    def active_animation(self) -> Optional[str]:
        return self._session.active_animation

    @property
    def disposed(self) -> bool:
        return self._disposed

    def play(
        self,
        animation: str,
        fps: float = DEFAULT_FPS,
        loop: bool = False,
        reset_after_finish: bool = False,
        on_finish: Optional[Callable[[], None]] = None,
    ) -> bool:
        """Start an animation from its first frame.

        Args:
            animation: Name of a registered animation.
            fps: Frames per second.
            loop: Repeat until stopped; ``on_finish`` is never called.
            reset_after_finish: Return to progress 0 when a single run ends.
            on_finish: Called once when a single run ends naturally.

        Returns:
            True if playback started. On failure a playback error is
            reported and the session is left untouched.
        """
        if self._disposed:
            self._fail(f'Cannot play "{animation}": sprite has been disposed.', animation)
            return False

        curve = self._curves.get(animation)
        if curve is None:
            definition = self._find_definition(animation)
            if definition is not None and self._curves.geometry is None:
                self._fail(
                    f'Animation "{animation}" cannot play before sheet dimensions are known.',
                    animation,
                )
            elif definition is not None:
                self._fail(
                    f'Animation "{animation}" requires at least 2 frames, '
                    f"but received {definition.frame_count}.",
                    animation,
                )
            else:
                self._fail(f'Animation type "{animation}" not found.', animation)
            return False

        if not isinstance(fps, (int, float)) or not math.isfinite(fps) or fps <= 0:
            self._fail(f"Invalid fps {fps!r} for animation \"{animation}\".", animation)
            return False

        self._cancel_run()

        session = self._session
        session.active_animation = animation
        session.progress = 0.0
        session.fps = float(fps)
        session.looping = loop
        session.reset_on_finish = reset_after_finish
        session.on_finish = on_finish
        session.status = PlaybackStatus.LOOPING if loop else PlaybackStatus.PLAYING

        duration_ms = curve.duration_ms(fps)
        logger.debug(
            "Playing %s: %d frames over %.2fms (loop=%s)",
            animation, curve.frame_count, duration_ms, loop,
        )

        tween = LinearTween(
            to_value=curve.frame_count,
            duration_ms=duration_ms,
            on_update=self._set_progress,
            on_complete=None if loop else self._complete,
            loop=loop,
        )
        self._tween = tween
        tween.start(self._ticker)
        return True

    def stop(self, cb: Optional[Callable[[], None]] = None) -> None:
        """Freeze playback at the current progress."""
        self._cancel_run()
        if self._session.status is not PlaybackStatus.IDLE:
            self._session.status = PlaybackStatus.STOPPED
        self._defer(cb)

    def reset(self, cb: Optional[Callable[[], None]] = None) -> None:
        """Cancel playback and return progress to 0."""
        self._cancel_run()
        self._session.progress = 0.0
        if self._session.status is not PlaybackStatus.IDLE:
            self._session.status = PlaybackStatus.STOPPED
        self._defer(cb)

    def dispose(self) -> None:
        """Cancel playback and every pending callback."""
        self._cancel_run()
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()
        self._disposed = True

    def current_offset(self) -> Offset:
        """Sample the active curve at the current progress."""
        return sample(self._session.progress, self._curves.get(self._session.active_animation))

    def _set_progress(self, value: float) -> None:
        self._session.progress = value

    def _complete(self) -> None:
        session = self._session
        self._tween = None
        session.status = PlaybackStatus.STOPPED
        if session.reset_on_finish:
            session.progress = 0.0
        on_finish, session.on_finish = session.on_finish, None
        if on_finish is not None:
            on_finish()

    def _cancel_run(self) -> None:
        if self._tween is not None:
            self._tween.cancel()
            self._tween = None

    def _defer(self, cb: Optional[Callable[[], None]]) -> None:
        if cb is None or self._disposed:
            return
        self._pending = [h for h in self._pending if not h.cancelled]
        self._pending.append(self._ticker.call_soon(cb))

    def _find_definition(self, name: str) -> Optional[AnimationDefinition]:
        for definition in self._curves.definitions:
            if definition.name == name:
                return definition
        return None

    def _fail(self, message: str, animation: str) -> None:
        report_to(
            self._diagnostics,
            DiagnosticCategory.PLAYBACK_ERROR,
            message,
            animation=animation,
        )
