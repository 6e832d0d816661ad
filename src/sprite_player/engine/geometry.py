"""Frame geometry: grid validation, frame sizes and per-frame offsets."""

from __future__ import annotations

from typing import Optional

from sprite_player.types import (
    DiagnosticCategory,
    IDENTITY_OFFSET,
    Offset,
    SheetConfig,
    SheetDimensions,
    SheetGeometry,
)
from .diagnostics import DiagnosticsChannel, report_to

INVALID_GRID_MESSAGE = "Invalid columns or rows. At least 2 columns and 1 row are required."


def validate_grid(
    columns: int,
    rows: int,
    diagnostics: Optional[DiagnosticsChannel] = None,
) -> bool:
    """Check the grid shape, warning when it is unusable.

    The grid is still used as given; this only reports.

    Returns:
        True if the grid has at least 2 columns and 1 row.
    """
    if columns <= 1 or rows < 1:
        report_to(
            diagnostics,
            DiagnosticCategory.CONFIGURATION_WARNING,
            INVALID_GRID_MESSAGE,
            columns=columns,
            rows=rows,
        )
        return False
    return True


def frame_size(config: SheetConfig, dimensions: SheetDimensions) -> tuple[float, float]:
    """Compute the size of a single frame.

    Explicit frame sizes win, then the declared display size, then the
    resolved sheet size, each divided across the grid.
    """
    if config.frame_width:
        width = config.frame_width
    elif config.width:
        width = config.width / config.columns
    else:
        width = dimensions.width / config.columns if config.columns > 0 else 0.0

    if config.frame_height:
        height = config.frame_height
    elif config.height:
        height = config.height / config.rows
    else:
        height = dimensions.height / config.rows if config.rows > 0 else 0.0

    return width, height


def display_size(config: SheetConfig, dimensions: SheetDimensions) -> tuple[float, float]:
    """Compute the on-screen size of the whole sheet.

    When only one of width or height is declared, the other follows the
    sheet's aspect ratio.
    """
    if config.width and config.height:
        return config.width, config.height
    if config.width:
        if not dimensions.width:
            return config.width, 0.0
        return config.width, dimensions.height / dimensions.width * config.width
    if config.height:
        if not dimensions.height:
            return 0.0, config.height
        return dimensions.width / dimensions.height * config.height, config.height
    return dimensions.width, dimensions.height


def build_geometry(
    config: SheetConfig,
    dimensions: SheetDimensions,
) -> Optional[SheetGeometry]:
    """Build the geometry snapshot for a config.

    Returns:
        The geometry, or None while the frame size is not yet known.
    """
    if config.columns <= 0 or config.rows <= 0:
        return None

    width, height = frame_size(config, dimensions)
    if width <= 0 or height <= 0:
        return None

    return SheetGeometry(
        columns=config.columns,
        rows=config.rows,
        frame_width=width,
        frame_height=height,
        offset_x=config.offset_x,
        offset_y=config.offset_y,
    )


def offset_for(
    frame_index: int,
    geometry: SheetGeometry,
    diagnostics: Optional[DiagnosticsChannel] = None,
) -> Offset:
    """Translation that brings ``frame_index`` into the viewport.

    Out-of-range indices fall back to the identity offset with a warning.
    """
    total = geometry.total_frames
    if frame_index < 0 or frame_index >= total:
        report_to(
            diagnostics,
            DiagnosticCategory.BOUNDS_WARNING,
            f"Frame index {frame_index} is out of bounds (0-{total - 1}). Returning (0,0).",
            frame_index=frame_index,
            total_frames=total,
        )
        return IDENTITY_OFFSET

    column = frame_index % geometry.columns
    row = frame_index // geometry.columns
    return Offset(
        translate_x=-column * geometry.frame_width - geometry.offset_x,
        translate_y=-row * geometry.frame_height - geometry.offset_y,
    )
