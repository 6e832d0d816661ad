"""Asset helpers: sheet dimensions and configuration files."""

from __future__ import annotations

from .dimensions import (
    AssetSource,
    UriSource,
    ImageSource,
    resolve_dimensions,
    read_asset_size,
    fetch_remote_size,
)
from .config_loader import load_sheet_config
from .placeholder import cell_color, generate_grid_sheet

__all__ = [
    "AssetSource",
    "UriSource",
    "ImageSource",
    "resolve_dimensions",
    "read_asset_size",
    "fetch_remote_size",
    "load_sheet_config",
    "cell_color",
    "generate_grid_sheet",
]
