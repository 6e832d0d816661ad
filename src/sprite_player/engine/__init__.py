"""Playback engine for sprite sheets."""

from __future__ import annotations

from .diagnostics import DiagnosticsChannel
from .geometry import validate_grid, frame_size, display_size, build_geometry, offset_for
from .curves import build_frame_list, build_curve, CurveSet
from .sampler import sample
from .ticker import Ticker, ManualTicker, AsyncioTicker, CallHandle
from .tween import LinearTween
from .controller import PlaybackController

__all__ = [
    "DiagnosticsChannel",
    "validate_grid",
    "frame_size",
    "display_size",
    "build_geometry",
    "offset_for",
    "build_frame_list",
    "build_curve",
    "CurveSet",
    "sample",
    "Ticker",
    "ManualTicker",
    "AsyncioTicker",
    "CallHandle",
    "LinearTween",
    "PlaybackController",
]
