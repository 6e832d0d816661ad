"""Loading sprite configurations from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from sprite_player.types import ConfigError, SheetConfig


def load_sheet_config(path: Union[str, Path]) -> SheetConfig:
    """Load a sprite configuration from a JSON file.

    Args:
        path: Path to a JSON object with ``columns``, ``rows`` and
            ``animations``.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read sprite config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in sprite config {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Sprite config {path} must contain a JSON object")

    return SheetConfig.from_dict(data)
