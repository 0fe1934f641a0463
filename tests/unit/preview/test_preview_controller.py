"""Tests for the live preview state machine."""

from __future__ import annotations

from toonshade.core.binding import ShadeColorBinding
from toonshade.core.color import Color
from toonshade.core.preview import PreviewController, PreviewState


class CountingBinding(ShadeColorBinding):
    """Binding that counts set_colors calls."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls = 0

    def set_colors(self):
        self.calls += 1
        return super().set_colors()


def _controller(renderer, base: Color) -> tuple[PreviewController, CountingBinding]:
    binding = CountingBinding(owner="Body", renderer=renderer, base_color=base)
    return PreviewController(binding), binding


def test_starts_idle(binding):
    controller = PreviewController(binding)
    assert controller.state is PreviewState.IDLE
    assert not controller.is_previewing


def test_tick_while_idle_does_nothing(renderer, green_base, shared_surface):
    controller, binding = _controller(renderer, green_base)

    assert controller.tick() is None
    assert binding.calls == 0
    assert shared_surface.colors == {}


def test_toggle_enters_preview_and_applies(renderer, green_base, shared_surface):
    controller, binding = _controller(renderer, green_base)

    result = controller.toggle()

    assert controller.state is PreviewState.PREVIEWING
    assert result is not None
    assert binding.calls == 1
    assert shared_surface.get_color("BaseColor") == green_base


def test_tick_reapplies_while_previewing(renderer, green_base, shared_surface):
    controller, binding = _controller(renderer, green_base)
    controller.start()

    new_base = Color.from_hex("#2040E0")
    binding.base_color = new_base
    controller.tick()
    controller.tick()

    assert binding.calls == 3
    assert shared_surface.get_color("BaseColor") == new_base


def test_toggle_twice_returns_to_idle(renderer, green_base):
    controller, binding = _controller(renderer, green_base)

    controller.toggle()
    assert controller.toggle() is None

    assert controller.state is PreviewState.IDLE
    controller.tick()
    assert binding.calls == 1


def test_start_and_stop_are_idempotent(renderer, green_base):
    controller, binding = _controller(renderer, green_base)

    controller.start()
    assert controller.start() is None
    assert binding.calls == 1

    controller.stop()
    controller.stop()
    assert controller.state is PreviewState.IDLE


def test_deselection_exits_preview(renderer, green_base):
    controller, _ = _controller(renderer, green_base)
    controller.start()

    controller.on_selection_changed(selected=True)
    assert controller.is_previewing

    controller.on_selection_changed(selected=False)
    assert controller.state is PreviewState.IDLE


def test_preview_without_renderer_keeps_state(green_base):
    controller, binding = _controller(None, green_base)

    assert controller.start() is None
    assert controller.is_previewing
    assert controller.tick() is None
    assert binding.calls == 2
