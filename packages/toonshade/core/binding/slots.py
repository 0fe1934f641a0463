"""Named color slots written on the target material."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ShadeSlots(BaseModel):
    """Property names the shader reads the palette from.

    Attributes:
        base: Slot for the base (lit) color
        first_shade: Slot for the first shade band
        second_shade: Slot for the second shade band
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: str = Field(default="BaseColor", min_length=1)
    first_shade: str = Field(default="FirstShadeColor", min_length=1)
    second_shade: str = Field(default="SecondShadeColor", min_length=1)

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.base, self.first_shade, self.second_shade)


DEFAULT_SLOTS = ShadeSlots()

# Unity Toon Shader material properties
UTS_SLOTS = ShadeSlots(
    base="_BaseColor",
    first_shade="_1st_ShadeColor",
    second_shade="_2nd_ShadeColor",
)

SLOT_PRESETS: dict[str, ShadeSlots] = {
    "default": DEFAULT_SLOTS,
    "uts": UTS_SLOTS,
}


def get_slot_preset(name: str) -> ShadeSlots:
    """Look up a slot preset by name.

    Raises:
        ValueError: If the preset is unknown
    """
    try:
        return SLOT_PRESETS[name.lower()]
    except KeyError:
        available = ", ".join(sorted(SLOT_PRESETS))
        raise ValueError(f"Unknown slot preset {name!r} (available: {available})") from None
