"""Binding of shade palettes to renderer materials."""

from toonshade.core.binding.adapter import ShadeColorBinding
from toonshade.core.binding.protocols import ShadeRenderer, ShadeSurface
from toonshade.core.binding.slots import (
    DEFAULT_SLOTS,
    SLOT_PRESETS,
    UTS_SLOTS,
    ShadeSlots,
    get_slot_preset,
)
from toonshade.core.binding.surfaces import (
    InMemorySurface,
    JsonMaterialSurface,
    MaterialRenderer,
    write_shade_result,
)

__all__ = [
    "DEFAULT_SLOTS",
    "SLOT_PRESETS",
    "UTS_SLOTS",
    "InMemorySurface",
    "JsonMaterialSurface",
    "MaterialRenderer",
    "ShadeColorBinding",
    "ShadeRenderer",
    "ShadeSlots",
    "ShadeSurface",
    "get_slot_preset",
    "write_shade_result",
]
