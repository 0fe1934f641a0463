"""Editor live preview."""

from toonshade.core.preview.controller import PreviewController, PreviewState

__all__ = [
    "PreviewController",
    "PreviewState",
]
