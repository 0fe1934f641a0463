"""Shared pytest fixtures for toonshade tests."""

from __future__ import annotations

import pytest

from toonshade.core.binding import InMemorySurface, MaterialRenderer, ShadeColorBinding
from toonshade.core.color import Color
from toonshade.core.shading import ShadeParameters

# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def green_base() -> Color:
    """HSV(100deg, 0.8, 0.8), the reference base color for chain tests."""
    return Color.from_hsv(100 / 360, 0.8, 0.8)


@pytest.fixture
def sample_colors() -> list[Color]:
    """A spread of base colors across the hue wheel plus neutrals."""
    return [
        Color.from_hex("#FF0000"),
        Color.from_hex("#FFCC00"),
        Color.from_hex("#33AA55"),
        Color.from_hex("#2040E0"),
        Color.from_hex("#B030C0"),
        Color.from_hex("#FFFFFF"),
        Color.from_hex("#000000"),
        Color.from_hex("#808080"),
    ]


@pytest.fixture
def default_params() -> ShadeParameters:
    return ShadeParameters()


@pytest.fixture
def zero_params() -> ShadeParameters:
    return ShadeParameters(hue_shift_degrees=0, saturation_delta=0, value_delta=0)


# ============================================================================
# Binding Fixtures
# ============================================================================


@pytest.fixture
def shared_surface() -> InMemorySurface:
    return InMemorySurface(name="shared")


@pytest.fixture
def instance_surface() -> InMemorySurface:
    return InMemorySurface(name="instance")


@pytest.fixture
def renderer(shared_surface: InMemorySurface, instance_surface: InMemorySurface) -> MaterialRenderer:
    return MaterialRenderer(
        name="BodyRenderer",
        shared_material=shared_surface,
        material=instance_surface,
    )


@pytest.fixture
def binding(renderer: MaterialRenderer, green_base: Color) -> ShadeColorBinding:
    return ShadeColorBinding(owner="Body", renderer=renderer, base_color=green_base)
