"""Resolving sprite sheet pixel dimensions."""

from __future__ import annotations

import asyncio
import io
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from sprite_player.types import ResourceError, SheetDimensions

logger = logging.getLogger(__name__)

REMOTE_TIMEOUT_S = 10.0


@dataclass(frozen=True)
class AssetSource:
    """An image bundled with the application."""

    path: Path

    def __post_init__(self):
        if isinstance(self.path, str):
            object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class UriSource:
    """An image fetched from a URI (``http(s)://`` or ``file://``)."""

    uri: str


ImageSource = Union[AssetSource, UriSource, Path, str]


def _normalize(source: Optional[ImageSource]) -> Union[AssetSource, UriSource, None]:
    if isinstance(source, (AssetSource, UriSource)):
        return source
    if isinstance(source, Path):
        return AssetSource(source)
    if isinstance(source, str) and source:
        if "://" in source:
            return UriSource(source)
        return AssetSource(Path(source))
    return None


def read_asset_size(path: Path) -> SheetDimensions:
    """Read the pixel size of a local image file.

    Raises:
        ResourceError: If the file is missing or not an image.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (OSError, UnidentifiedImageError) as exc:
        raise ResourceError(
            f"Failed to resolve image dimensions for the local image: {path}"
        ) from exc

    return SheetDimensions(float(width), float(height))


def fetch_remote_size(uri: str, timeout: float = REMOTE_TIMEOUT_S) -> SheetDimensions:
    """Download an image and read its pixel size.

    Raises:
        ResourceError: If the download fails or the payload is not an image.
    """
    try:
        with urllib.request.urlopen(uri, timeout=timeout) as response:
            payload = response.read()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise ResourceError(f"Failed to get remote image dimensions: {exc}") from exc

    try:
        with Image.open(io.BytesIO(payload)) as img:
            width, height = img.size
    except (OSError, UnidentifiedImageError) as exc:
        raise ResourceError(f"Failed to get remote image dimensions: {uri}") from exc

    return SheetDimensions(float(width), float(height))


async def resolve_dimensions(
    source: Optional[ImageSource],
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> SheetDimensions:
    """Resolve the pixel size of a sprite sheet.

    Declared dimensions win when both are given. Otherwise local assets are
    read from disk and remote sources are downloaded, both off the event
    loop.

    Args:
        source: Bundled asset path or remote URI.
        width: Declared sheet width.
        height: Declared sheet height.

    Returns:
        The sheet dimensions.

    Raises:
        ResourceError: If the dimensions cannot be resolved.
    """
    if width and height:
        return SheetDimensions(float(width), float(height))

    resolved = _normalize(source)

    if isinstance(resolved, AssetSource):
        logger.debug("Reading sheet size from %s", resolved.path)
        return await asyncio.to_thread(read_asset_size, resolved.path)

    if isinstance(resolved, UriSource):
        logger.debug("Fetching sheet size from %s", resolved.uri)
        return await asyncio.to_thread(fetch_remote_size, resolved.uri)

    raise ResourceError("Invalid image source or missing dimensions.")
