"""Generate placeholder sprite sheets for demos and testing."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image


def cell_color(frame_index: int) -> tuple[int, int, int, int]:
    """Distinct opaque color for a frame index."""
    r = (frame_index * 67 + 40) % 256
    g = (frame_index * 131 + 90) % 256
    b = (frame_index * 29 + 160) % 256
    return (r, g, b, 255)


def generate_grid_sheet(
    columns: int,
    rows: int,
    frame_width: int,
    frame_height: int,
    output_path: Optional[Path] = None,
) -> Image.Image:
    """Create a sheet where every frame is a solid, distinct color.

    Args:
        columns: Frames per row.
        rows: Number of rows.
        frame_width: Width of one frame in pixels.
        frame_height: Height of one frame in pixels.
        output_path: Optional PNG path to save the sheet to.

    Returns:
        The generated RGBA sheet.
    """
    pixels = np.zeros((rows * frame_height, columns * frame_width, 4), dtype=np.uint8)

    for row in range(rows):
        for column in range(columns):
            top = row * frame_height
            left = column * frame_width
            pixels[top:top + frame_height, left:left + frame_width] = cell_color(
                row * columns + column
            )

    sheet = Image.fromarray(pixels)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        sheet.save(output_path)

    return sheet
