"""Shared constants for the drawing surface."""

# Undo entries kept before the oldest is dropped
UNDO_LIMIT = 100

# Brush stamp sizes (1 = single cell, 3 = 5x5 square)
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 3

DEFAULT_BRUSH_CHAR = '#'

# Characters offered by the brush picker, in cycling order
BRUSH_CHOICES: tuple[str, ...] = ('#', '@', '.', '*', '+', '%', ' ')

DEFAULT_FILE_NAME = "canvas.json"


def clamp_brush_size(size: int) -> int:
    """Clamp a brush size into the supported range."""
    return max(MIN_BRUSH_SIZE, min(MAX_BRUSH_SIZE, size))
