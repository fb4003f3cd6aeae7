"""Star field configuration: defaults, validation, builder and JSON file.

Uses platformdirs for the cross-platform config location:
  Linux:   ~/.config/zodiacview/config.json
  macOS:   ~/Library/Application Support/zodiacview/config.json
  Windows: C:/Users/.../AppData/Local/zodiacview/config.json

Only configuration is stored here; star positions are never persisted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pygame
from platformdirs import user_config_dir
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from ..constants import (
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULT_COLOR_BACKGROUND,
    DEFAULT_COLOR_RELATION,
    DEFAULT_COLOR_STAR,
    DEFAULT_DISTANCE,
    DEFAULT_INTERACTION_ENABLED,
    DEFAULT_RELATION_SIZE,
    DEFAULT_SPEED,
    DEFAULT_STAR_COUNT,
    DEFAULT_STAR_SIZE_MAX,
    DEFAULT_STAR_SIZE_MIN,
)

logger = logging.getLogger(__name__)

ColorLike = pygame.Color | str | int | tuple[int, ...] | list[int]

_COLOR_FIELDS = ("color_background", "color_star", "color_relation")


class ConfigError(ValueError):
    """Raised when a star field configuration is malformed."""


# ── Colors ────────────────────────────────────────────────────────────

def parse_color(value: ColorLike) -> pygame.Color:
    """Convert a color spec into a ``pygame.Color``.

    Integers are packed ARGB (``0xAARRGGBB``), strings are ``#rrggbb``,
    ``#rrggbbaa`` or a pygame color name.
    """
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    if isinstance(value, bool):
        raise ConfigError(f"Invalid color {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ConfigError(f"Color integer out of range: {value:#x}")
        return pygame.Color(
            (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF
        )
    if isinstance(value, str):
        try:
            return pygame.Color(value.strip())
        except ValueError as exc:
            raise ConfigError(f"Invalid color {value!r}") from exc
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            return pygame.Color(*value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid color {value!r}") from exc
    raise ConfigError(f"Invalid color {value!r}")


def color_to_hex(color: pygame.Color) -> str:
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}{color.a:02x}"


# ── Config value ──────────────────────────────────────────────────────

def _describe(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "config"
        problems.append(f"{loc}: {err['msg']}")
    return "Invalid configuration: " + "; ".join(problems)


class ZodiacConfig(BaseModel):
    """Everything a StarField needs to know, fixed at construction.

    Construction raises ConfigError rather than pydantic's ValidationError,
    so callers only ever handle one exception type.
    """

    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True)

    star_count: int = Field(default=DEFAULT_STAR_COUNT, ge=0)
    star_size_min: float = Field(default=DEFAULT_STAR_SIZE_MIN, ge=0, allow_inf_nan=False)
    star_size_max: float = Field(default=DEFAULT_STAR_SIZE_MAX, ge=0, allow_inf_nan=False)
    relation_size: int = Field(default=DEFAULT_RELATION_SIZE, ge=0, description="Line stroke width")
    speed: float = Field(default=DEFAULT_SPEED, ge=0, allow_inf_nan=False)
    distance: float = Field(
        default=DEFAULT_DISTANCE, gt=0, allow_inf_nan=False, description="Connection threshold in pixels"
    )
    color_background: pygame.Color = Field(default_factory=lambda: parse_color(DEFAULT_COLOR_BACKGROUND))
    color_star: pygame.Color = Field(default_factory=lambda: parse_color(DEFAULT_COLOR_STAR))
    color_relation: pygame.Color = Field(default_factory=lambda: parse_color(DEFAULT_COLOR_RELATION))
    interaction_enabled: bool = Field(default=DEFAULT_INTERACTION_ENABLED, strict=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigError(_describe(exc)) from exc

    @model_validator(mode="before")
    @classmethod
    def _warn_unknown_options(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for key in data:
                if key not in cls.model_fields:
                    logger.warning("Ignoring unknown config option %r", key)
        return data

    @field_validator(*_COLOR_FIELDS, mode="before")
    @classmethod
    def _parse_colors(cls, value: Any) -> pygame.Color:
        return parse_color(value)

    @model_validator(mode="after")
    def _validate_star_sizes(self) -> ZodiacConfig:
        if self.star_size_min > self.star_size_max:
            raise ValueError(
                f"star_size_min ({self.star_size_min}) is greater than "
                f"star_size_max ({self.star_size_max})"
            )
        return self

    @field_serializer(*_COLOR_FIELDS)
    def _color_hex(self, color: pygame.Color) -> str:
        return color_to_hex(color)


def validate_config(data: Any) -> ZodiacConfig:
    """Build a config from raw (e.g. JSON-decoded) data."""
    try:
        return ZodiacConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_describe(exc)) from exc


class ZodiacBuilder:
    """Fluent alternative to passing keyword arguments.

    Values are only validated in ``build()``, so setters can be chained in
    any order.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def build(self) -> ZodiacConfig:
        return ZodiacConfig(**self._values)

    def star_count(self, count: int) -> ZodiacBuilder:
        self._values["star_count"] = count
        return self

    def star_size_min(self, size: float) -> ZodiacBuilder:
        self._values["star_size_min"] = size
        return self

    def star_size_max(self, size: float) -> ZodiacBuilder:
        self._values["star_size_max"] = size
        return self

    def relation_size(self, size: int) -> ZodiacBuilder:
        self._values["relation_size"] = size
        return self

    def speed(self, speed: float) -> ZodiacBuilder:
        self._values["speed"] = speed
        return self

    def distance(self, distance: float) -> ZodiacBuilder:
        self._values["distance"] = distance
        return self

    def color_background(self, color: ColorLike) -> ZodiacBuilder:
        self._values["color_background"] = color
        return self

    def color_star(self, color: ColorLike) -> ZodiacBuilder:
        self._values["color_star"] = color
        return self

    def color_relation(self, color: ColorLike) -> ZodiacBuilder:
        self._values["color_relation"] = color
        return self

    def interaction_enabled(self, enabled: bool) -> ZodiacBuilder:
        self._values["interaction_enabled"] = enabled
        return self


# ── Config file ───────────────────────────────────────────────────────

def config_path() -> Path:
    """Default location of the user's config file."""
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def load_config(path: Path | None = None) -> ZodiacConfig:
    """Read a config file. Returns defaults if the file does not exist."""
    path = path or config_path()
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return ZodiacConfig()
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")

    config = validate_config(data)
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: ZodiacConfig, path: Path | None = None) -> Path:
    """Write the config as JSON and return the path."""
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2))
    return path
