"""Animated sprite: configuration, dimensions and playback in one place."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

from sprite_player.assets.dimensions import ImageSource, resolve_dimensions
from sprite_player.engine import (
    CurveSet,
    DiagnosticsChannel,
    PlaybackController,
    Ticker,
    ManualTicker,
    build_geometry,
    validate_grid,
)
from sprite_player.renderer.viewport import FrameView, build_frame_view
from sprite_player.types import (
    ConfigError,
    DEFAULT_FPS,
    DiagnosticCategory,
    Offset,
    PlayOptions,
    ResourceError,
    SheetConfig,
    SheetDimensions,
    SheetGeometry,
    UNRESOLVED_DIMENSIONS,
)

logger = logging.getLogger(__name__)


class SpriteHandle:
    """Imperative control surface handed to callers."""

    def __init__(self, sprite: "AnimatedSprite"):
        self._sprite = sprite

    def play(self, options: Union[PlayOptions, Mapping[str, Any]]) -> bool:
        """Start an animation.

        Args:
            options: Play options, or a mapping with ``type`` and the
                optional ``fps``, ``loop``, ``resetAfterFinish`` and
                ``onFinish`` keys.

        Returns:
            True if playback started.
        """
        if not isinstance(options, PlayOptions):
            try:
                options = PlayOptions.from_dict(options)
            except ConfigError as exc:
                self._sprite.diagnostics.report(DiagnosticCategory.PLAYBACK_ERROR, str(exc))
                return False
        return self._sprite.controller.play(
            options.animation,
            fps=self._sprite.default_fps if options.fps is None else options.fps,
            loop=options.loop,
            reset_after_finish=options.reset_after_finish,
            on_finish=options.on_finish,
        )

    def stop(self, cb: Optional[Callable[[], None]] = None) -> None:
        """Freeze playback on the current frame."""
        self._sprite.controller.stop(cb)

    def reset(self, cb: Optional[Callable[[], None]] = None) -> None:
        """Stop playback and return to the first frame."""
        self._sprite.controller.reset(cb)


class AnimatedSprite:
    """One sprite instance with its own curves and playback session."""

    def __init__(
        self,
        config: SheetConfig,
        ticker: Optional[Ticker] = None,
        diagnostics: Optional[DiagnosticsChannel] = None,
        default_fps: float = DEFAULT_FPS,
        on_load: Optional[Callable[[], None]] = None,
    ):
        """Initialize the sprite.

        Args:
            config: Grid, animations and optional size overrides.
            ticker: Tick source; a ManualTicker is created if omitted.
            diagnostics: Channel for warnings and errors.
            default_fps: FPS used when play options omit it.
            on_load: Called after sheet dimensions are resolved by ``load``.
        """
        self.ticker = ticker or ManualTicker()
        self.diagnostics = diagnostics or DiagnosticsChannel()
        self.default_fps = default_fps
        self.on_load = on_load

        self._config = config
        self._dimensions = UNRESOLVED_DIMENSIONS
        if config.width and config.height:
            self._dimensions = SheetDimensions(config.width, config.height)

        self._curves = CurveSet(self.diagnostics)
        self.controller = PlaybackController(self._curves, self.ticker, self.diagnostics)
        self.handle = SpriteHandle(self)

        validate_grid(config.columns, config.rows, self.diagnostics)
        self._refresh()

    @property
    def config(self) -> SheetConfig:
        return self._config

    @property
    def dimensions(self) -> SheetDimensions:
        return self._dimensions

    @property
    def geometry(self) -> Optional[SheetGeometry]:
        return self._curves.geometry

    @property
    def curves(self) -> CurveSet:
        return self._curves

    def configure(self, config: SheetConfig) -> None:
        """Replace the configuration and rebuild curves if it changed."""
        if config == self._config:
            return
        if (config.columns, config.rows) != (self._config.columns, self._config.rows):
            validate_grid(config.columns, config.rows, self.diagnostics)
        self._config = config
        if config.width and config.height:
            self._dimensions = SheetDimensions(config.width, config.height)
        self._refresh()

    def set_dimensions(self, dimensions: SheetDimensions) -> None:
        """Apply resolved sheet dimensions."""
        self._dimensions = dimensions
        self._refresh()

    async def load(self, source: Optional[ImageSource]) -> bool:
        """Resolve sheet dimensions from an image source.

        Failures are reported as resource errors; the sprite then stays
        unrendered until dimensions are supplied.

        Returns:
            True if the dimensions were resolved.
        """
        try:
            dimensions = await resolve_dimensions(
                source, self._config.width, self._config.height
            )
        except ResourceError as exc:
            self.diagnostics.report(
                DiagnosticCategory.RESOURCE_ERROR,
                str(exc),
                source=str(source),
            )
            return False

        self.set_dimensions(dimensions)
        logger.debug("Sheet dimensions resolved: %sx%s", dimensions.width, dimensions.height)
        if self.on_load is not None:
            self.on_load()
        return True

    def offset(self) -> Offset:
        """Translation for the current tick."""
        return self.controller.current_offset()

    def frame_view(self) -> FrameView:
        """Everything a renderer needs to draw the current frame."""
        return build_frame_view(self._config, self._dimensions, self.offset())

    def dispose(self) -> None:
        """Tear down playback; no callback fires afterwards."""
        self.controller.dispose()

    def _refresh(self) -> None:
        geometry = build_geometry(self._config, self._dimensions)
        self._curves.update(geometry, self._config.definitions())
