"""Color value model with RGB, HSV and hex codecs."""

from __future__ import annotations

import colorsys
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from toonshade.core.errors import ColorParseError

_HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")


class HSV(NamedTuple):
    """Hue/saturation/value triple, all normalized to [0, 1].

    Hue is a fraction of 360 degrees.
    """

    hue: float
    saturation: float
    value: float


class Color(BaseModel):
    """Immutable RGB color with normalized channels.

    Attributes:
        r: Red channel [0, 1]
        g: Green channel [0, 1]
        b: Blue channel [0, 1]

    Example:
        >>> Color.from_hex("#FF0000").to_hsv()
        HSV(hue=0.0, saturation=1.0, value=1.0)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    r: float = Field(ge=0.0, le=1.0, description="Red channel")
    g: float = Field(ge=0.0, le=1.0, description="Green channel")
    b: float = Field(ge=0.0, le=1.0, description="Blue channel")

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> Color:
        """Build a color from normalized hue, saturation and value."""
        r, g, b = colorsys.hsv_to_rgb(hue, saturation, value)
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Parse a ``#RRGGBB`` (or ``RRGGBB``) hex string.

        Raises:
            ColorParseError: If the string is not a 6-digit hex color
        """
        if not isinstance(hex_color, str):
            raise ColorParseError(hex_color, "expected a hex string")
        stripped = hex_color.strip().removeprefix("#")
        if len(stripped) != 6:
            raise ColorParseError(hex_color, "expected 6 hex digits")
        if not all(c in _HEX_DIGITS for c in stripped):
            raise ColorParseError(hex_color, "contains non-hex characters")
        return cls.from_rgb255(
            int(stripped[0:2], 16),
            int(stripped[2:4], 16),
            int(stripped[4:6], 16),
        )

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> Color:
        """Build a color from 8-bit channel values."""
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ColorParseError((r, g, b), "8-bit channels must be in [0, 255]")
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_hsv(self) -> HSV:
        """Convert to normalized HSV."""
        return HSV(*colorsys.rgb_to_hsv(self.r, self.g, self.b))

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to rounded 8-bit channel values."""
        return (
            int(round(self.r * 255)),
            int(round(self.g * 255)),
            int(round(self.b * 255)),
        )

    def to_hex(self) -> str:
        """Format as an uppercase ``#RRGGBB`` string."""
        r, g, b = self.to_rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def is_close(self, other: Color, tol: float = 1e-6) -> bool:
        """Channel-wise comparison within an absolute tolerance."""
        return all(abs(a - b) <= tol for a, b in zip(self.to_tuple(), other.to_tuple(), strict=True))

    def __str__(self) -> str:
        return self.to_hex()
