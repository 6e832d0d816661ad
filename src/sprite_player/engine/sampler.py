"""Sampling a step curve at a progress value."""

from __future__ import annotations

from typing import Optional

import numpy as np

from sprite_player.types import AnimationCurve, IDENTITY_OFFSET, Offset


def sample(progress: float, curve: Optional[AnimationCurve]) -> Offset:
    """Offset of the frame under ``progress``.

    Progress is clamped to the curve and the end of the curve holds the
    last frame. Each frame boundary appears twice in the input range; the
    later keyframe wins, so progress ``k`` shows frame ``k`` rather than
    the frame ending at ``k``. A piecewise interpolation that searches for
    the first input ``>= progress`` would pick frame ``k - 1`` instead.
    """
    if curve is None or not curve.keyframes:
        return IDENTITY_OFFSET

    inputs = curve.input_range
    clamped = float(np.clip(progress, inputs[0], inputs[-1]))

    # Starts of each frame's span sit at the even keyframes
    starts = inputs[0::2]
    step = int(np.searchsorted(starts, clamped, side="right")) - 1
    step = min(max(step, 0), len(starts) - 1)

    keyframe = curve.keyframes[step * 2]
    return Offset(keyframe.translate_x, keyframe.translate_y)

