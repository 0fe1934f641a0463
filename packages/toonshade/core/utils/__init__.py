"""Shared utilities for toonshade."""

from toonshade.core.utils.json import read_json, write_json
from toonshade.core.utils.math import clamp, clamp01

__all__ = [
    "clamp",
    "clamp01",
    "read_json",
    "write_json",
]
