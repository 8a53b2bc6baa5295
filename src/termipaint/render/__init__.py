"""Renderers for grids."""

from termipaint.render.preview import PreviewStyle
from termipaint.render.terminal import TerminalRenderer
from termipaint.render.text import TextRenderer

__all__ = ["PreviewStyle", "TerminalRenderer", "TextRenderer"]
