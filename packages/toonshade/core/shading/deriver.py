"""Shade color derivation."""

from __future__ import annotations

from toonshade.core.color import Color
from toonshade.core.shading.hue import shift_hue
from toonshade.core.shading.models import ShadeParameters, ShadeResult
from toonshade.core.utils.math import clamp01


def derive_shade(color: Color, params: ShadeParameters) -> Color:
    """Derive a single shade one step darker than ``color``.

    Args:
        color: Color to shade
        params: Shade parameters

    Returns:
        Shaded color
    """
    hue, saturation, value = color.to_hsv()

    new_hue = shift_hue(hue, params.hue_shift_degrees)
    new_saturation = clamp01(saturation - params.normalized_saturation_delta)
    new_value = clamp01(value - params.normalized_value_delta)

    return Color.from_hsv(new_hue, new_saturation, new_value)


def derive_shade_result(base_color: Color, params: ShadeParameters | None = None) -> ShadeResult:
    """Derive the toon shading palette for a base color.

    The second shade is derived from the first, not from the base.

    Args:
        base_color: Lit color of the material
        params: Shade parameters (defaults if None)

    Returns:
        ShadeResult with base, first and second shade
    """
    if params is None:
        params = ShadeParameters()

    first_shade = derive_shade(base_color, params)
    second_shade = derive_shade(first_shade, params)

    return ShadeResult(
        base_color=base_color,
        first_shade=first_shade,
        second_shade=second_shade,
    )
