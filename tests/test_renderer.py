"""Tests for the frame view and headless frame renderer."""

from __future__ import annotations

import pytest

from sprite_player.assets import cell_color, generate_grid_sheet
from sprite_player.renderer import FrameRenderer, FrameView, build_frame_view
from sprite_player.types import Offset, SheetConfig, SheetDimensions


@pytest.fixture
def renderer() -> FrameRenderer:
    """A renderer over a 5x1 sheet of 64px frames."""
    return FrameRenderer(generate_grid_sheet(5, 1, 64, 64))


class TestBuildFrameView:
    """Tests for frame view construction."""

    def test_visible_once_resolved(self):
        """Test the view is visible with known dimensions."""
        view = build_frame_view(
            SheetConfig(columns=4, rows=4), SheetDimensions(256, 256), Offset(-64, -64)
        )
        assert view == FrameView(-64, -64, 64, 64, 256, 256, True)

    def test_hidden_until_resolved(self):
        """Test nothing is drawn at 0x0."""
        view = build_frame_view(SheetConfig(columns=4, rows=4), SheetDimensions(), Offset())
        assert view.visible is False


class TestFrameRenderer:
    """Tests for rendering frames with Pillow."""

    def test_renders_selected_frame(self, renderer):
        """Test the crop shows the frame under the offset."""
        view = FrameView(-128, 0, 64, 64, 320, 64, True)
        frame = renderer.render(view)
        assert frame.size == (64, 64)
        assert frame.getpixel((0, 0)) == cell_color(2)
        assert frame.getpixel((63, 63)) == cell_color(2)

    def test_scales_to_display_size(self, renderer):
        """Test the sheet is scaled before cropping."""
        view = FrameView(-32, 0, 32, 32, 160, 32, True)
        frame = renderer.render(view)
        assert frame.size == (32, 32)
        assert frame.getpixel((16, 16)) == cell_color(1)

    def test_hidden_view_is_transparent(self, renderer):
        """Test an invisible view renders nothing."""
        frame = renderer.render(FrameView(0, 0, 64, 64, 0, 0, False))
        assert frame.getpixel((10, 10)) == (0, 0, 0, 0)

    def test_outside_sheet_is_transparent(self, renderer):
        """Test regions past the sheet edge are empty."""
        frame = renderer.render(FrameView(-300, 0, 64, 64, 320, 64, True))
        assert frame.getpixel((10, 10)) == cell_color(4)
        assert frame.getpixel((40, 10)) == (0, 0, 0, 0)

    def test_counts_renders(self, renderer):
        """Test render calls are counted."""
        renderer.render(FrameView(0, 0, 64, 64, 320, 64, True))
        renderer.render(FrameView(0, 0, 64, 64, 320, 64, True))
        assert renderer.render_count == 2

    def test_renders_from_sprite(self, renderer, run_sprite, ticker):
        """Test a playing sprite's view selects its current frame."""
        run_sprite.handle.play({"type": "run"})
        ticker.advance(160)
        frame = renderer.render(run_sprite.frame_view())
        assert frame.getpixel((32, 32)) == cell_color(3)
