"""Toon shade palette derivation."""

from toonshade.core.shading.batch import derive_shade_table
from toonshade.core.shading.deriver import derive_shade, derive_shade_result
from toonshade.core.shading.hue import BLUE_HUE, YELLOW_HUE, shift_hue
from toonshade.core.shading.models import ShadeParameters, ShadeResult

__all__ = [
    "BLUE_HUE",
    "YELLOW_HUE",
    "ShadeParameters",
    "ShadeResult",
    "derive_shade",
    "derive_shade_result",
    "derive_shade_table",
    "shift_hue",
]
