"""Batch palette derivation into numpy arrays."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from toonshade.core.color import Color
from toonshade.core.shading.deriver import derive_shade_result
from toonshade.core.shading.models import ShadeParameters


def derive_shade_table(
    colors: Iterable[Color], params: ShadeParameters | None = None
) -> np.ndarray:
    """Derive palettes for many base colors at once.

    Args:
        colors: Base colors
        params: Shade parameters shared by every row (defaults if None)

    Returns:
        Array of shape (n, 3, 3): row per base color, then
        (base, first shade, second shade), then (r, g, b).
    """
    rows = [
        [c.to_tuple() for c in derive_shade_result(color, params).as_tuple()] for color in colors
    ]
    if not rows:
        return np.empty((0, 3, 3), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)
