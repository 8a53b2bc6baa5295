"""Editor configuration with environment-variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass

from termipaint.core.color import Color
from termipaint.core.constants import (
    DEFAULT_BRUSH_CHAR,
    DEFAULT_FILE_NAME,
    UNDO_LIMIT,
    clamp_brush_size,
)
from termipaint.errors import ConfigError

ENV_PREFIX = "TERMIPAINT_"


@dataclass
class PaintConfig:
    """
    Settings an editing session starts from.

    Attributes:
        undo_limit: Operations kept in the undo history
        brush_char: Initial brush character
        color: Initial foreground color
        brush_size: Initial brush size (clamped to 1-3)
        default_file: File name offered when saving or loading
        width: Width of a new canvas in cells
        height: Height of a new canvas in cells
    """
    undo_limit: int = UNDO_LIMIT
    brush_char: str = DEFAULT_BRUSH_CHAR
    color: Color = Color.WHITE
    brush_size: int = 1
    default_file: str = DEFAULT_FILE_NAME
    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        self.brush_size = clamp_brush_size(self.brush_size)
        if self.undo_limit < 0:
            raise ConfigError(f"undo_limit must not be negative, got {self.undo_limit}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PaintConfig:
        """Build a config, overriding defaults from TERMIPAINT_* variables.

        Recognized: TERMIPAINT_UNDO_LIMIT, TERMIPAINT_WIDTH,
        TERMIPAINT_HEIGHT, TERMIPAINT_DEFAULT_FILE.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if value := env.get(ENV_PREFIX + "UNDO_LIMIT"):
            config.undo_limit = _parse_int("UNDO_LIMIT", value, minimum=0)
        if value := env.get(ENV_PREFIX + "WIDTH"):
            config.width = _parse_int("WIDTH", value, minimum=1)
        if value := env.get(ENV_PREFIX + "HEIGHT"):
            config.height = _parse_int("HEIGHT", value, minimum=1)
        if value := env.get(ENV_PREFIX + "DEFAULT_FILE"):
            config.default_file = value.strip() or DEFAULT_FILE_NAME
        return config


def _parse_int(name: str, value: str, minimum: int) -> int:
    try:
        number = int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from exc
    if number < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name} must be at least {minimum}, got {number}")
    return number
