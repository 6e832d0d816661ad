"""Renderer package for the sprite player."""

from __future__ import annotations

from .viewport import FrameView, build_frame_view
from .frame_renderer import FrameRenderer

__all__ = [
    "FrameView",
    "build_frame_view",
    "FrameRenderer",
]
