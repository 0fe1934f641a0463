"""Color value types."""

from toonshade.core.color.models import HSV, Color

__all__ = [
    "Color",
    "HSV",
]
