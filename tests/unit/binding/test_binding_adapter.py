"""Tests for the renderer/material binding."""

from __future__ import annotations

import logging

import pytest

from toonshade.core.binding import (
    DEFAULT_SLOTS,
    UTS_SLOTS,
    InMemorySurface,
    MaterialRenderer,
    ShadeColorBinding,
    ShadeRenderer,
    ShadeSurface,
    write_shade_result,
)
from toonshade.core.color import Color
from toonshade.core.errors import SurfaceNotFoundError
from toonshade.core.shading import ShadeParameters, derive_shade_result


class RecordingSurface:
    """Surface that records the order of writes."""

    def __init__(self) -> None:
        self.writes: list[tuple[str, Color]] = []

    def set_color(self, name: str, color: Color) -> None:
        self.writes.append((name, color))


def test_protocols_are_satisfied(renderer, shared_surface):
    assert isinstance(shared_surface, ShadeSurface)
    assert isinstance(RecordingSurface(), ShadeSurface)
    assert isinstance(renderer, ShadeRenderer)


def test_write_shade_result_order_and_names(green_base):
    surface = RecordingSurface()
    result = derive_shade_result(green_base)

    write_shade_result(surface, result)

    assert surface.writes == [
        ("BaseColor", result.base_color),
        ("FirstShadeColor", result.first_shade),
        ("SecondShadeColor", result.second_shade),
    ]


def test_write_shade_result_with_uts_slots(green_base):
    surface = InMemorySurface()
    result = derive_shade_result(green_base)

    write_shade_result(surface, result, UTS_SLOTS)

    assert surface.get_color("_BaseColor") == result.base_color
    assert surface.get_color("_1st_ShadeColor") == result.first_shade
    assert surface.get_color("_2nd_ShadeColor") == result.second_shade


def test_set_colors_writes_shared_material_in_editor(binding, shared_surface, instance_surface):
    result = binding.set_colors()

    assert result is not None
    assert shared_surface.colors == dict(zip(DEFAULT_SLOTS.as_tuple(), result.as_tuple(), strict=True))
    assert instance_surface.colors == {}


def test_set_colors_writes_instance_material_at_runtime(
    renderer, green_base, shared_surface, instance_surface
):
    binding = ShadeColorBinding(
        owner="Body", renderer=renderer, base_color=green_base, editor_mode=False
    )

    binding.set_colors()

    assert shared_surface.colors == {}
    assert set(instance_surface.colors) == set(DEFAULT_SLOTS.as_tuple())


def test_set_colors_uses_current_params(binding, shared_surface, green_base):
    binding.params = ShadeParameters(hue_shift_degrees=0, saturation_delta=0, value_delta=0)

    binding.set_colors()

    assert shared_surface.get_color("FirstShadeColor").is_close(green_base, 1e-9)


def test_missing_renderer_logs_error(green_base, caplog):
    binding = ShadeColorBinding(owner="Ghost", renderer=None, base_color=green_base)

    with caplog.at_level(logging.ERROR):
        result = binding.set_colors()

    assert result is None
    assert "There is no renderer attached on Ghost" in caplog.text


def test_missing_material_logs_error(green_base, caplog):
    renderer = MaterialRenderer(name="Empty")
    binding = ShadeColorBinding(owner="Prop", renderer=renderer, base_color=green_base)

    with caplog.at_level(logging.ERROR):
        assert binding.set_colors() is None

    assert "no shared material" in caplog.text


def test_resolve_surface_raises_without_renderer(green_base):
    binding = ShadeColorBinding(owner="Ghost", renderer=None, base_color=green_base)

    with pytest.raises(SurfaceNotFoundError) as exc_info:
        binding.resolve_surface()

    assert exc_info.value.owner == "Ghost"


def test_refresh_reassigns_renderer(green_base, shared_surface):
    binding = ShadeColorBinding(owner="Body", renderer=None, base_color=green_base)
    assert binding.set_colors() is None

    binding.refresh(MaterialRenderer(name="Body", shared_material=shared_surface))

    assert binding.set_colors() is not None
    assert shared_surface.get_color("BaseColor") == green_base


def test_material_renderer_falls_back_to_shared(shared_surface):
    renderer = MaterialRenderer(name="Body", shared_material=shared_surface)
    assert renderer.material is shared_surface
