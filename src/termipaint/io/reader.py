"""Load canvas files."""

from __future__ import annotations

import logging
from pathlib import Path

from termipaint.core.cell import Cell
from termipaint.core.grid import Grid
from termipaint.errors import CanvasIOError
from termipaint.io import json_format

logger = logging.getLogger(__name__)


def is_json_path(path: str | Path) -> bool:
    """Structured files are recognized by a .json extension."""
    return Path(path).suffix.lower() == ".json"


def parse_path(text: str, fallback: str) -> Path:
    """Turn user input into a path, using `fallback` when it is blank."""
    trimmed = text.strip()
    return Path(trimmed if trimmed else fallback)


def parse_text(text: str) -> Grid:
    """Build a grid from plain text, one row per line.

    Every character becomes a cell in default colors. The grid is as wide
    as the longest line; shorter lines are padded with blank cells.
    """
    if not text:
        lines = [""]
    else:
        lines = [line.rstrip("\r") for line in text.split("\n")]
        if text.endswith("\n"):
            lines.pop()
    height = len(lines)
    width = max(1, max(len(line) for line in lines))

    grid = Grid(width=width, height=height)
    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            grid.set(x, y, Cell(char=ch))
    return grid


def load(path: str | Path) -> Grid:
    """
    Load a canvas from disk.

    Files ending in .json are read as the structured format; anything
    else is read as plain text.

    Raises:
        CanvasIOError: if the file cannot be read or parsed
    """
    path = Path(path)
    kind = "JSON" if is_json_path(path) else "ASCII"

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        raise CanvasIOError(f"failed to read {kind} file {path}: {exc}") from exc

    if kind == "ASCII":
        grid = parse_text(text)
    else:
        try:
            grid = json_format.loads(text)
        except ValueError as exc:
            logger.warning("Could not parse %s: %s", path, exc)
            raise CanvasIOError(f"failed to parse JSON file {path}: {exc}") from exc

    logger.debug("Loaded %s (%dx%d)", path, grid.width, grid.height)
    return grid
