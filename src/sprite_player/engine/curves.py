"""Animation curve building and the per-sprite curve set."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from sprite_player.types import (
    AnimationCurve,
    AnimationDefinition,
    DiagnosticCategory,
    Keyframe,
    SheetGeometry,
)
from .diagnostics import DiagnosticsChannel, report_to
from .geometry import offset_for

logger = logging.getLogger(__name__)

MIN_FRAMES = 2


def build_frame_list(row: int, start_frame: int, end_frame: int, columns: int) -> list[int]:
    """Flatten a row-relative frame range into sheet frame indices."""
    base = row * columns
    return [base + i for i in range(start_frame, end_frame + 1)]


def build_curve(
    definition: AnimationDefinition,
    geometry: SheetGeometry,
    diagnostics: Optional[DiagnosticsChannel] = None,
) -> Optional[AnimationCurve]:
    """Build the step curve for an animation.

    Args:
        definition: The animation's row and frame range.
        geometry: Grid used to place each frame.
        diagnostics: Channel for warnings.

    Returns:
        The curve, or None if the animation has fewer than two frames.
    """
    frames = build_frame_list(
        definition.row, definition.start_frame, definition.end_frame, geometry.columns
    )

    if len(frames) < MIN_FRAMES:
        report_to(
            diagnostics,
            DiagnosticCategory.CONFIGURATION_WARNING,
            f'Animation "{definition.name}" requires at least {MIN_FRAMES} frames, '
            f"but received {len(frames)}.",
            animation=definition.name,
            frame_count=len(frames),
        )
        return None

    keyframes: list[Keyframe] = []
    for position, frame_index in enumerate(frames):
        offset = offset_for(frame_index, geometry, diagnostics)
        # Same offset at both ends of the span: hold, then snap
        keyframes.append(Keyframe(position, offset.translate_x, offset.translate_y))
        keyframes.append(Keyframe(position + 1, offset.translate_x, offset.translate_y))

    return AnimationCurve(
        name=definition.name,
        frames=tuple(frames),
        keyframes=tuple(keyframes),
    )


class CurveSet:
    """Curves for every valid animation of one sprite.

    The set is rebuilt only when the geometry or the definitions change by
    value. Without geometry it is empty.
    """

    def __init__(self, diagnostics: Optional[DiagnosticsChannel] = None):
        """Initialize an empty curve set.

        Args:
            diagnostics: Channel for build warnings.
        """
        self._diagnostics = diagnostics
        self._geometry: Optional[SheetGeometry] = None
        self._definitions: tuple[AnimationDefinition, ...] = ()
        self._curves: dict[str, AnimationCurve] = {}
        self._generation = 0

    @property
    def geometry(self) -> Optional[SheetGeometry]:
        return self._geometry

    @property
    def definitions(self) -> tuple[AnimationDefinition, ...]:
        return self._definitions

    @property
    def generation(self) -> int:
        """Incremented on every rebuild."""
        return self._generation

    @property
    def names(self) -> list[str]:
        """Names of the animations that produced a valid curve."""
        return list(self._curves)

    def update(
        self,
        geometry: Optional[SheetGeometry],
        definitions: Iterable[AnimationDefinition],
    ) -> bool:
        """Rebuild the curves if the inputs changed.

        Returns:
            True if the set was rebuilt.
        """
        definitions = tuple(definitions)
        if geometry == self._geometry and definitions == self._definitions:
            return False

        self._geometry = geometry
        self._definitions = definitions
        self._curves = {}
        self._generation += 1

        if geometry is None:
            logger.debug("Geometry unavailable, curve set cleared")
            return True

        for definition in definitions:
            curve = build_curve(definition, geometry, self._diagnostics)
            if curve is not None:
                self._curves[definition.name] = curve

        logger.debug(
            "Built %d of %d curves (generation %d)",
            len(self._curves), len(definitions), self._generation,
        )
        return True

    def get(self, name: Optional[str]) -> Optional[AnimationCurve]:
        """Look up a curve by animation name."""
        if name is None:
            return None
        return self._curves.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._curves

    def __len__(self) -> int:
        return len(self._curves)
