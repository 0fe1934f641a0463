"""Configuration models for toonshade."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toonshade.core.binding import (
    DEFAULT_SLOTS,
    ShadeColorBinding,
    ShadeRenderer,
    ShadeSlots,
    get_slot_preset,
)
from toonshade.core.color import Color
from toonshade.core.preview import PreviewController
from toonshade.core.shading import ShadeParameters


class ConfigBase(BaseModel):
    """Base class for toonshade configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from toonshade.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if None)")


class ShadeConfig(ConfigBase):
    """Per-object shading configuration.

    Example (YAML):
        base_color: "#E0A080"
        preview: false
        params:
          hue_shift_degrees: 5
          saturation_delta: 20
          value_delta: 20
        slots: uts
    """

    base_color: Color = Field(default_factory=lambda: Color(r=1.0, g=1.0, b=1.0))
    preview: bool = Field(default=False, description="Re-apply on every editor tick")
    params: ShadeParameters = Field(default_factory=ShadeParameters)
    slots: ShadeSlots = Field(default=DEFAULT_SLOTS)
    editor_mode: bool = Field(
        default=True, description="Write the shared material instead of the instance"
    )

    @field_validator("base_color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Color.from_hex(value)
        if isinstance(value, (list, tuple)):
            r, g, b = value
            return Color(r=r, g=g, b=b)
        return value

    @field_validator("slots", mode="before")
    @classmethod
    def _parse_slots(cls, value: Any) -> Any:
        if isinstance(value, str):
            return get_slot_preset(value)
        return value

    @classmethod
    def default_path(cls) -> Path:
        return Path("shade.yaml")

    def to_binding(self, owner: str, renderer: ShadeRenderer | None) -> ShadeColorBinding:
        """Build a binding for a renderer from this configuration."""
        return ShadeColorBinding(
            owner=owner,
            renderer=renderer,
            base_color=self.base_color,
            params=self.params,
            slots=self.slots,
            editor_mode=self.editor_mode,
        )

    def to_preview(self, owner: str, renderer: ShadeRenderer | None) -> PreviewController:
        """Build a preview controller, already previewing when ``preview`` is set."""
        controller = PreviewController(self.to_binding(owner, renderer))
        if self.preview:
            controller.start()
        return controller


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = LoggingConfig()
    shade: ShadeConfig = Field(default_factory=ShadeConfig)

    @classmethod
    def default_path(cls) -> Path:
        return Path("config.json")
