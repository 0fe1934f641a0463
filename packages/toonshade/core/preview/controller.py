"""Live preview state machine.

While previewing, every editor tick re-applies the palette so edits to the
base color or parameters show up on the material immediately. Preview ends
when the user toggles it off or the owning object is deselected.
"""

from __future__ import annotations

from enum import Enum

from toonshade.core.binding import ShadeColorBinding
from toonshade.core.shading import ShadeResult
from toonshade.core.utils.logging import get_logger

logger = get_logger(__name__)


class PreviewState(str, Enum):
    """Preview controller states."""

    IDLE = "idle"
    PREVIEWING = "previewing"


class PreviewController:
    """Drives a binding from editor update ticks."""

    def __init__(self, binding: ShadeColorBinding) -> None:
        self.binding = binding
        self._state = PreviewState.IDLE

    @property
    def state(self) -> PreviewState:
        return self._state

    @property
    def is_previewing(self) -> bool:
        return self._state is PreviewState.PREVIEWING

    def start(self) -> ShadeResult | None:
        """Enter PREVIEWING and apply once. No-op if already previewing."""
        if self.is_previewing:
            return None
        self._transition(PreviewState.PREVIEWING)
        return self.binding.set_colors()

    def stop(self) -> None:
        """Return to IDLE. No-op if already idle."""
        if self.is_previewing:
            self._transition(PreviewState.IDLE)

    def toggle(self) -> ShadeResult | None:
        """Flip between IDLE and PREVIEWING.

        Returns:
            The applied result when entering PREVIEWING, otherwise None
        """
        if self.is_previewing:
            self.stop()
            return None
        return self.start()

    def tick(self) -> ShadeResult | None:
        """Editor update hook: re-apply while previewing."""
        if not self.is_previewing:
            return None
        return self.binding.set_colors()

    def on_selection_changed(self, selected: bool) -> None:
        """Leave preview when the owning object is no longer selected."""
        if not selected and self.is_previewing:
            logger.debug(f"{self.binding.owner} deselected, leaving preview")
            self.stop()

    def _transition(self, new_state: PreviewState) -> None:
        logger.debug(f"Preview {self.binding.owner}: {self._state.value} -> {new_state.value}")
        self._state = new_state
