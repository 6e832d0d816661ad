"""Tests for frame geometry."""

from __future__ import annotations

import pytest

from sprite_player.engine.geometry import (
    INVALID_GRID_MESSAGE,
    build_geometry,
    display_size,
    frame_size,
    offset_for,
    validate_grid,
)
from sprite_player.types import (
    DiagnosticCategory,
    IDENTITY_OFFSET,
    Offset,
    SheetConfig,
    SheetDimensions,
    SheetGeometry,
)


class TestOffsetFor:
    """Tests for per-frame offsets."""

    def test_second_row_second_column(self, grid_geometry):
        """Test frame 5 on a 4-column grid is column 1, row 1."""
        assert offset_for(5, grid_geometry) == Offset(-64, -64)

    def test_first_frame_is_origin(self, grid_geometry):
        """Test frame 0 needs no translation."""
        assert offset_for(0, grid_geometry) == Offset(0, 0)

    def test_last_frame(self, grid_geometry):
        """Test the last addressable frame."""
        assert offset_for(15, grid_geometry) == Offset(-192, -192)

    def test_offsets_are_subtracted(self):
        """Test sheet offsets shift every frame."""
        geometry = SheetGeometry(columns=4, rows=2, frame_width=32, frame_height=16, offset_x=3, offset_y=5)
        assert offset_for(6, geometry) == Offset(-2 * 32 - 3, -1 * 16 - 5)

    @pytest.mark.parametrize("frame_index", [-1, 16, 100])
    def test_out_of_bounds_returns_origin_with_warning(self, grid_geometry, diagnostics, frame_index):
        """Test out-of-range indices fall back to (0, 0)."""
        result = offset_for(frame_index, grid_geometry, diagnostics)
        assert result == IDENTITY_OFFSET
        warnings = diagnostics.of_category(DiagnosticCategory.BOUNDS_WARNING)
        assert len(warnings) == 1
        assert f"Frame index {frame_index} is out of bounds (0-15)" in warnings[0].message

    def test_out_of_bounds_without_channel_does_not_raise(self, grid_geometry, caplog):
        """Test the warning is still logged without a channel."""
        with caplog.at_level("WARNING"):
            assert offset_for(99, grid_geometry) == IDENTITY_OFFSET
        assert "out of bounds" in caplog.text


class TestValidateGrid:
    """Tests for grid validation."""

    def test_single_column_warns(self, diagnostics):
        """Test one column is reported."""
        assert validate_grid(1, 4, diagnostics) is False
        (warning,) = diagnostics.records
        assert warning.category is DiagnosticCategory.CONFIGURATION_WARNING
        assert warning.message == INVALID_GRID_MESSAGE
        assert warning.message.startswith("Invalid columns or rows")

    def test_zero_rows_warns(self, diagnostics):
        """Test zero rows is reported."""
        assert validate_grid(4, 0, diagnostics) is False
        assert len(diagnostics.records) == 1

    def test_valid_grid_is_silent(self, diagnostics):
        """Test a usable grid emits nothing."""
        assert validate_grid(2, 1, diagnostics) is True
        assert diagnostics.records == []


class TestFrameSize:
    """Tests for frame and display sizing."""

    def test_derived_from_sheet(self):
        """Test frame size is the sheet split across the grid."""
        config = SheetConfig(columns=4, rows=4)
        assert frame_size(config, SheetDimensions(256, 256)) == (64, 64)

    def test_explicit_frame_size_wins(self):
        """Test explicit frame size overrides derivation."""
        config = SheetConfig(columns=4, rows=4, frame_width=50, frame_height=40)
        assert frame_size(config, SheetDimensions(256, 256)) == (50, 40)

    def test_declared_size_beats_sheet(self):
        """Test declared display size is divided before the sheet size."""
        config = SheetConfig(columns=4, rows=2, width=128, height=64)
        assert frame_size(config, SheetDimensions(256, 256)) == (32, 32)

    def test_unresolved_sheet_gives_zero(self):
        """Test nothing is derived before dimensions resolve."""
        config = SheetConfig(columns=4, rows=4)
        assert frame_size(config, SheetDimensions()) == (0, 0)

    def test_display_keeps_aspect_for_width(self):
        """Test height follows aspect ratio when only width is set."""
        config = SheetConfig(columns=4, rows=2, width=200)
        assert display_size(config, SheetDimensions(400, 100)) == (200, 50)

    def test_display_keeps_aspect_for_height(self):
        """Test width follows aspect ratio when only height is set."""
        config = SheetConfig(columns=4, rows=2, height=50)
        assert display_size(config, SheetDimensions(400, 100)) == (200, 50)

    def test_display_defaults_to_sheet(self):
        """Test the sheet's own size is used by default."""
        config = SheetConfig(columns=4, rows=2)
        assert display_size(config, SheetDimensions(400, 100)) == (400, 100)


class TestBuildGeometry:
    """Tests for geometry snapshots."""

    def test_none_until_resolved(self):
        """Test no geometry exists without a frame size."""
        assert build_geometry(SheetConfig(columns=4, rows=4), SheetDimensions()) is None

    def test_built_from_dimensions(self):
        """Test geometry carries the derived frame size and offsets."""
        config = SheetConfig(columns=4, rows=4, offset_x=1, offset_y=2)
        geometry = build_geometry(config, SheetDimensions(256, 128))
        assert geometry == SheetGeometry(4, 4, 64, 32, 1, 2)

    def test_invalid_grid_has_no_geometry(self):
        """Test a zero-column grid cannot be laid out."""
        assert build_geometry(SheetConfig(columns=0, rows=1), SheetDimensions(10, 10)) is None
