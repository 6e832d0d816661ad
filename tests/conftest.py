"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from sprite_player import AnimatedSprite
from sprite_player.engine import (
    CurveSet,
    DiagnosticsChannel,
    ManualTicker,
    PlaybackController,
)
from sprite_player.types import (
    AnimationDefinition,
    SheetConfig,
    SheetDimensions,
    SheetGeometry,
)


@pytest.fixture
def diagnostics() -> DiagnosticsChannel:
    """A fresh diagnostics channel."""
    return DiagnosticsChannel()


@pytest.fixture
def ticker() -> ManualTicker:
    """A manually driven ticker."""
    return ManualTicker()


@pytest.fixture
def run_config() -> SheetConfig:
    """Five frames in one row with a single 'run' animation."""
    return SheetConfig(
        columns=5,
        rows=1,
        animations={"run": AnimationDefinition("run", row=0, start_frame=0, end_frame=4)},
    )


@pytest.fixture
def grid_geometry() -> SheetGeometry:
    """A 4x4 grid of 64px frames."""
    return SheetGeometry(columns=4, rows=4, frame_width=64, frame_height=64)


@pytest.fixture
def walk_config() -> SheetConfig:
    """A 4x4 sheet with several animations, one of them too short."""
    return SheetConfig.from_dict(
        {
            "columns": 4,
            "rows": 4,
            "animations": {
                "down": {"row": 0, "startFrame": 0, "endFrame": 3},
                "left": {"row": 1, "startFrame": 0, "endFrame": 3},
                "right": {"row": 2, "startFrame": 1, "endFrame": 3},
                "idle": {"row": 3, "startFrame": 0, "endFrame": 0},
            },
        }
    )


@pytest.fixture
def curve_set(run_config, diagnostics) -> CurveSet:
    """Curves for the run config on a 320x64 sheet."""
    curves = CurveSet(diagnostics)
    curves.update(
        SheetGeometry(columns=5, rows=1, frame_width=64, frame_height=64),
        run_config.definitions(),
    )
    return curves


@pytest.fixture
def controller(curve_set, ticker, diagnostics) -> PlaybackController:
    """A controller over the run curves."""
    return PlaybackController(curve_set, ticker, diagnostics)


@pytest.fixture
def run_sprite(run_config, ticker, diagnostics) -> AnimatedSprite:
    """A sprite with resolved 320x64 dimensions."""
    sprite = AnimatedSprite(run_config, ticker=ticker, diagnostics=diagnostics)
    sprite.set_dimensions(SheetDimensions(320, 64))
    return sprite
