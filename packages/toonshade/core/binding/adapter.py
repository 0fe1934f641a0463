"""Adapter binding the shade palette to a renderer's material."""

from __future__ import annotations

from toonshade.core.binding.protocols import ShadeRenderer, ShadeSurface
from toonshade.core.binding.slots import DEFAULT_SLOTS, ShadeSlots
from toonshade.core.binding.surfaces import write_shade_result
from toonshade.core.color import Color
from toonshade.core.errors import SurfaceNotFoundError
from toonshade.core.shading import ShadeParameters, ShadeResult, derive_shade_result
from toonshade.core.utils.logging import get_logger

logger = get_logger(__name__)


class ShadeColorBinding:
    """Owns a renderer reference and shade configuration for one object.

    In editor mode the shared material is written so the change is visible on
    the asset; at runtime the per-instance material is written instead.

    Example:
        >>> surface = InMemorySurface()
        >>> binding = ShadeColorBinding(
        ...     owner="Body",
        ...     renderer=MaterialRenderer(name="Body", shared_material=surface),
        ...     base_color=Color.from_hex("#CC6644"),
        ... )
        >>> result = binding.set_colors()
    """

    def __init__(
        self,
        *,
        owner: str,
        renderer: ShadeRenderer | None,
        base_color: Color,
        params: ShadeParameters | None = None,
        slots: ShadeSlots = DEFAULT_SLOTS,
        editor_mode: bool = True,
    ) -> None:
        self.owner = owner
        self.base_color = base_color
        self.params = params or ShadeParameters()
        self.slots = slots
        self.editor_mode = editor_mode
        self._renderer = renderer

    @property
    def renderer(self) -> ShadeRenderer | None:
        return self._renderer

    def refresh(self, renderer: ShadeRenderer | None) -> None:
        """Reassign the renderer handle (e.g. after the object was rebuilt)."""
        self._renderer = renderer

    def resolve_surface(self) -> ShadeSurface:
        """Pick the material to write into.

        Raises:
            SurfaceNotFoundError: If there is no renderer or no material
        """
        if self._renderer is None:
            raise SurfaceNotFoundError(owner=self.owner, reason="There is no renderer attached")

        surface = self._renderer.shared_material if self.editor_mode else self._renderer.material
        if surface is None:
            kind = "shared material" if self.editor_mode else "material"
            raise SurfaceNotFoundError(
                owner=self.owner,
                reason=f"Renderer {self._renderer.name!r} has no {kind}",
            )
        return surface

    def set_colors(self) -> ShadeResult | None:
        """Derive the palette and write it into the resolved material.

        Returns:
            The written ShadeResult, or None if there was nothing to write into
        """
        try:
            surface = self.resolve_surface()
        except SurfaceNotFoundError as e:
            logger.error(str(e), extra={"owner": self.owner})
            return None

        result = derive_shade_result(self.base_color, self.params)
        write_shade_result(surface, result, self.slots)

        logger.debug(
            f"Applied shade colors to {self.owner}: "
            f"{result.base_color} / {result.first_shade} / {result.second_shade}"
        )
        return result

    def __repr__(self) -> str:
        return (
            f"ShadeColorBinding(owner={self.owner!r}, base_color={self.base_color}, "
            f"editor_mode={self.editor_mode})"
        )
