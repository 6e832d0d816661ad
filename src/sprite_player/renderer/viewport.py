"""Renderer-facing view of the current frame."""

from __future__ import annotations

from dataclasses import dataclass

from sprite_player.types import Offset, SheetConfig, SheetDimensions
from sprite_player.engine.geometry import display_size, frame_size


@dataclass(frozen=True)
class FrameView:
    """How to place the sheet so a single frame shows through the clip.

    The sheet is drawn at ``display_width x display_height``, translated by
    ``(translate_x, translate_y)``, inside a clip of ``clip_width x
    clip_height``. Nothing is drawn while ``visible`` is False.
    """

    translate_x: float
    translate_y: float
    clip_width: float
    clip_height: float
    display_width: float
    display_height: float
    visible: bool

    @property
    def source_box(self) -> tuple[float, float, float, float]:
        """Visible region in display coordinates as (left, top, right, bottom)."""
        left = -self.translate_x
        top = -self.translate_y
        return (left, top, left + self.clip_width, top + self.clip_height)


def build_frame_view(
    config: SheetConfig,
    dimensions: SheetDimensions,
    offset: Offset,
) -> FrameView:
    """Combine the sheet layout with the current offset."""
    clip_width, clip_height = frame_size(config, dimensions)
    display_width, display_height = display_size(config, dimensions)

    return FrameView(
        translate_x=offset.translate_x,
        translate_y=offset.translate_y,
        clip_width=clip_width,
        clip_height=clip_height,
        display_width=display_width,
        display_height=display_height,
        visible=dimensions.is_resolved,
    )
