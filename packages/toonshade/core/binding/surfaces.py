"""Concrete surfaces and renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from toonshade.core.binding.protocols import ShadeSurface
from toonshade.core.binding.slots import DEFAULT_SLOTS, ShadeSlots
from toonshade.core.color import Color
from toonshade.core.shading import ShadeResult
from toonshade.core.utils.json import read_json, write_json

logger = logging.getLogger(__name__)


def write_shade_result(
    surface: ShadeSurface, result: ShadeResult, slots: ShadeSlots = DEFAULT_SLOTS
) -> None:
    """Write base, first and second shade into their slots, in that order."""
    for name, color in zip(slots.as_tuple(), result.as_tuple(), strict=True):
        surface.set_color(name, color)


class InMemorySurface:
    """Dict-backed surface, used for previews and tests."""

    def __init__(self, name: str = "material") -> None:
        self.name = name
        self.colors: dict[str, Color] = {}

    def set_color(self, name: str, color: Color) -> None:
        self.colors[name] = color

    def get_color(self, name: str) -> Color | None:
        return self.colors.get(name)

    def __repr__(self) -> str:
        return f"InMemorySurface(name={self.name!r}, slots={sorted(self.colors)})"


class JsonMaterialSurface:
    """Surface backed by a JSON material file.

    File layout::

        {
          "name": "Skin",
          "colors": {
            "BaseColor": {"hex": "#E0A080", "rgb": [0.878, 0.627, 0.502]},
            ...
          }
        }

    Slots written as plain ``"#RRGGBB"`` strings are also read. Properties
    other than the written slots are preserved on save.
    """

    def __init__(self, path: str | Path, name: str | None = None) -> None:
        self.path = Path(path)
        self.name = name or self.path.stem
        self._data: dict[str, Any] = {"name": self.name, "colors": {}}

    def load(self) -> JsonMaterialSurface:
        """Load the material file if it exists.

        Raises:
            ValueError: If the file is not a JSON object or "colors" is not a mapping
        """
        if self.path.exists():
            data = read_json(self.path)
            data.setdefault("name", self.name)
            data.setdefault("colors", {})
            if not isinstance(data["colors"], dict):
                raise ValueError(
                    f"Invalid material {self.path}: 'colors' must be an object, "
                    f"got {type(data['colors']).__name__}"
                )
            self._data = data
            self.name = data["name"]
            logger.debug(f"Loaded material {self.name!r} from {self.path}")
        return self

    def set_color(self, name: str, color: Color) -> None:
        self._data["colors"][name] = {"hex": color.to_hex(), "rgb": list(color.to_tuple())}

    def get_color(self, name: str) -> Color | None:
        entry = self._data["colors"].get(name)
        if entry is None:
            return None
        if isinstance(entry, str):
            return Color.from_hex(entry)
        if "rgb" in entry:
            r, g, b = entry["rgb"]
            return Color(r=r, g=g, b=b)
        return Color.from_hex(entry["hex"])

    def save(self) -> Path:
        write_json(self.path, self._data)
        logger.info(f"Saved material {self.name!r} to {self.path}")
        return self.path


@dataclass
class MaterialRenderer:
    """Minimal renderer holding a shared and an instance material.

    When no instance material is given, the shared one is used for both.
    """

    name: str
    shared_material: ShadeSurface | None = None
    material: ShadeSurface | None = None

    def __post_init__(self) -> None:
        if self.material is None:
            self.material = self.shared_material
