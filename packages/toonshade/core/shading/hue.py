"""Hue-wrap policy for shade derivation.

Shades rotate toward blue: hues between yellow and blue move up the wheel,
hues past blue move back down, and warm hues below yellow move down and wrap
through red into the purple range.
"""

from __future__ import annotations

from toonshade.core.utils.math import clamp01

YELLOW_HUE = 60
BLUE_HUE = 240
FULL_TURN = 360


def shift_hue(hue: float, hue_shift_degrees: int) -> float:
    """Rotate a normalized hue one shading step.

    The branch, including the wrap test, is chosen on the hue rounded to
    whole degrees; the rotation itself is applied to the unrounded hue so a
    zero shift is the identity.

    Args:
        hue: Normalized hue [0, 1)
        hue_shift_degrees: Rotation in degrees [0, 360]

    Returns:
        Rotated hue, normalized and clamped to [0, 1]

    Example:
        >>> round(shift_hue(2 / 360, 5) * 360)
        357
    """
    degrees = hue * FULL_TURN
    h = round(degrees)
    shift = hue_shift_degrees

    if YELLOW_HUE <= h <= BLUE_HUE:
        result = degrees + shift
    elif h > BLUE_HUE:
        result = degrees - shift
    elif h - shift < 0:
        result = FULL_TURN - (shift - degrees)
    else:
        result = degrees - shift

    return clamp01(result / FULL_TURN)
