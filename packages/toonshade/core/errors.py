"""Exception types for toonshade."""

from __future__ import annotations


class ToonShadeError(Exception):
    """Base exception for all toonshade errors."""


class ColorParseError(ToonShadeError, ValueError):
    """Raised when a color literal (hex or 8-bit triple) cannot be parsed.

    Attributes:
        value: The rejected input.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        super().__init__(f"Invalid color {value!r}: {reason}")


class SurfaceNotFoundError(ToonShadeError):
    """Raised when a binding has no renderer or material to write into.

    Attributes:
        owner: Name of the object the binding belongs to.
        reason: What is missing.
    """

    def __init__(self, *, owner: str, reason: str) -> None:
        self.owner = owner
        self.reason = reason
        super().__init__(f"{reason} on {owner}")
