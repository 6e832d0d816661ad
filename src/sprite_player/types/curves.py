"""Animation curve types."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Keyframe:
    """Offset pinned at a progress value."""

    progress: float
    translate_x: float
    translate_y: float


@dataclass(frozen=True)
class AnimationCurve:
    """Step curve for one animation.

    Each frame contributes two keyframes with the same offset, at progress
    ``k`` and ``k + 1``, so the offset holds for the whole span of the frame
    and snaps when progress crosses an integer.
    """

    name: str
    frames: tuple[int, ...]
    keyframes: tuple[Keyframe, ...]

    @property
    def frame_count(self) -> int:
        """Number of distinct frames in the curve."""
        return len(self.frames)

    @property
    def max_progress(self) -> float:
        """Progress value at the end of the last frame."""
        return self.keyframes[-1].progress if self.keyframes else 0.0

    @property
    def input_range(self) -> np.ndarray:
        return np.array([k.progress for k in self.keyframes], dtype=float)

    @property
    def output_x(self) -> np.ndarray:
        return np.array([k.translate_x for k in self.keyframes], dtype=float)

    @property
    def output_y(self) -> np.ndarray:
        return np.array([k.translate_y for k in self.keyframes], dtype=float)

    def duration_ms(self, fps: float) -> float:
        """Time to play every frame once at ``fps``."""
        return (self.frame_count / fps) * 1000
