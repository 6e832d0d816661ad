"""Headless frame renderer backed by Pillow."""

from __future__ import annotations

from typing import Optional

from PIL import Image

from .viewport import FrameView


class FrameRenderer:
    """Crops the current frame out of a sprite sheet image.

    Used for headless rendering, previews and tests.
    """

    def __init__(self, sheet: Image.Image):
        """Initialize the renderer.

        Args:
            sheet: The full sprite sheet image.
        """
        self.sheet = sheet.convert("RGBA")
        self._scaled: Optional[Image.Image] = None
        self._scaled_size: Optional[tuple[int, int]] = None
        self.render_count = 0

    def _sheet_at(self, size: tuple[int, int]) -> Image.Image:
        if size == self.sheet.size:
            return self.sheet
        if self._scaled is None or self._scaled_size != size:
            self._scaled = self.sheet.resize(size, Image.Resampling.NEAREST)
            self._scaled_size = size
        return self._scaled

    def render(self, view: FrameView) -> Image.Image:
        """Render one frame.

        Args:
            view: Placement of the sheet for the current tick.

        Returns:
            A clip-sized RGBA image; fully transparent when the view is
            not visible.
        """
        self.render_count += 1
        clip = (max(int(round(view.clip_width)), 1), max(int(round(view.clip_height)), 1))

        if not view.visible or view.display_width <= 0 or view.display_height <= 0:
            return Image.new("RGBA", clip, (0, 0, 0, 0))

        sheet = self._sheet_at((int(round(view.display_width)), int(round(view.display_height))))
        left, top, _, _ = view.source_box
        left, top = int(round(left)), int(round(top))

        # crop() pads out-of-bounds regions with transparent pixels
        return sheet.crop((left, top, left + clip[0], top + clip[1]))
