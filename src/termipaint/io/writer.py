"""Save canvas files."""

from __future__ import annotations

import logging
from pathlib import Path

from termipaint.core.grid import Grid
from termipaint.errors import CanvasIOError
from termipaint.io import json_format
from termipaint.io.reader import is_json_path
from termipaint.render.text import TextRenderer

logger = logging.getLogger(__name__)


def save(grid: Grid, path: str | Path) -> None:
    """
    Save a canvas to disk.

    A .json extension selects the lossless structured format; any other
    path gets plain text (characters only, colors are lost).

    Raises:
        CanvasIOError: if the file cannot be written
    """
    path = Path(path)
    if is_json_path(path):
        content = json_format.dumps(grid)
    else:
        # One newline-terminated line per row, blank trailing rows included.
        content = TextRenderer().render(grid) + "\n"

    # Encode before touching the destination.
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.warning("Could not encode %s: %s", path, exc)
        raise CanvasIOError(f"failed to write {path}: {exc}") from exc

    try:
        path.write_bytes(data)
    except OSError as exc:
        logger.warning("Could not write %s: %s", path, exc)
        raise CanvasIOError(f"failed to write {path}: {exc}") from exc

    logger.debug("Saved %s (%dx%d)", path, grid.width, grid.height)
