"""Tests for the hue-wrap policy."""

from __future__ import annotations

import pytest

from toonshade.core.shading import BLUE_HUE, YELLOW_HUE, shift_hue


def _shift_deg(hue_deg: float, shift: int) -> float:
    return shift_hue(hue_deg / 360, shift) * 360


def test_anchor_constants():
    assert YELLOW_HUE == 60
    assert BLUE_HUE == 240


@pytest.mark.parametrize(
    ("hue_deg", "expected_deg"),
    [
        (50, 45),  # below yellow, no wrap
        (2, 357),  # below yellow, wraps past red
        (100, 105),  # between yellow and blue, rotates up
        (250, 245),  # past blue, rotates back down
    ],
)
def test_shift_hue_reference_cases(hue_deg, expected_deg):
    assert _shift_deg(hue_deg, 5) == pytest.approx(expected_deg)


def test_below_yellow_without_wrap_is_not_zero():
    """Hues below yellow that stay positive are shifted, not reset to red."""
    result = _shift_deg(30, 5)
    assert result == pytest.approx(25)
    assert result != 0


def test_yellow_and_blue_boundaries_rotate_up():
    assert _shift_deg(60, 5) == pytest.approx(65)
    assert _shift_deg(240, 5) == pytest.approx(245)


def test_just_past_blue_rotates_down():
    assert _shift_deg(241, 5) == pytest.approx(236)


def test_exact_zero_after_shift_does_not_wrap():
    assert _shift_deg(5, 5) == pytest.approx(0)


def test_wrap_decision_uses_rounded_degrees():
    """4.6 degrees rounds to 5, so a shift of 5 does not wrap and floors at 0."""
    assert _shift_deg(4.6, 5) < 1
    assert _shift_deg(4.4, 5) == pytest.approx(359.4)


def test_red_wraps_to_purple():
    assert _shift_deg(0, 5) == pytest.approx(355)


def test_branch_uses_rounded_degrees():
    """59.6 degrees rounds to 60, so it takes the yellow-to-blue branch."""
    assert _shift_deg(59.6, 5) == pytest.approx(64.6)
    assert _shift_deg(59.4, 5) == pytest.approx(54.4)


@pytest.mark.parametrize("hue_deg", [0, 17.3, 60, 138.46, 240, 300.5, 359.7])
def test_zero_shift_is_identity(hue_deg):
    assert _shift_deg(hue_deg, 0) == pytest.approx(hue_deg)


@pytest.mark.parametrize("shift", [0, 5, 90, 180, 360])
@pytest.mark.parametrize("hue_deg", [0, 30, 59, 60, 120, 240, 241, 359])
def test_result_is_normalized(hue_deg, shift):
    result = shift_hue(hue_deg / 360, shift)
    assert 0.0 <= result <= 1.0


def test_large_shift_clamps_to_one():
    """Rotating past a full turn saturates at the top of the range."""
    assert shift_hue(200 / 360, 360) == 1.0
