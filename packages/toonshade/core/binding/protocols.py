"""Protocol definitions for engine-side shading targets.

A surface is anything that accepts named color properties (a material).
A renderer owns two surfaces: the shared material edited in the editor and
the per-instance material used at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from toonshade.core.color import Color


@runtime_checkable
class ShadeSurface(Protocol):
    """Writable material-like target with named color slots."""

    def set_color(self, name: str, color: Color) -> None:
        """Assign a color to a named property.

        Args:
            name: Property name (e.g. "BaseColor")
            color: Color to write
        """
        ...


@runtime_checkable
class ShadeRenderer(Protocol):
    """Renderer holding the materials a binding writes into.

    Attributes:
        name: Display name, used in diagnostics
        shared_material: Material asset shared by every instance
        material: Per-instance material
    """

    name: str
    shared_material: ShadeSurface | None
    material: ShadeSurface | None
