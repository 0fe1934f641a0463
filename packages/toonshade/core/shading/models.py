"""Shade palette models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from toonshade.core.color import Color


class ShadeParameters(BaseModel):
    """Tunable parameters for deriving shade colors.

    Each shading step rotates the hue by ``hue_shift_degrees`` and lowers
    saturation and value by the given percentage points.

    Attributes:
        hue_shift_degrees: Hue rotation per step, degrees [0, 360]
        saturation_delta: Saturation decrease per step, percent [0, 100]
        value_delta: Value (brightness) decrease per step, percent [0, 100]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hue_shift_degrees: int = Field(default=5, ge=0, le=360, description="Hue shift per step")
    saturation_delta: int = Field(
        default=20, ge=0, le=100, description="Saturation decrease per step (percent)"
    )
    value_delta: int = Field(default=20, ge=0, le=100, description="Value decrease per step (percent)")

    @property
    def normalized_hue_shift(self) -> float:
        return self.hue_shift_degrees / 360.0

    @property
    def normalized_saturation_delta(self) -> float:
        return self.saturation_delta / 100.0

    @property
    def normalized_value_delta(self) -> float:
        return self.value_delta / 100.0


class ShadeResult(BaseModel):
    """Base color and its two derived shades, in slot order."""

    model_config = ConfigDict(frozen=True)

    base_color: Color
    first_shade: Color
    second_shade: Color

    @property
    def shades(self) -> tuple[Color, Color]:
        return (self.first_shade, self.second_shade)

    def as_tuple(self) -> tuple[Color, Color, Color]:
        """Return (base_color, first_shade, second_shade)."""
        return (self.base_color, self.first_shade, self.second_shade)
