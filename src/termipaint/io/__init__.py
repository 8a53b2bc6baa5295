"""File I/O for canvases."""

from termipaint.io.reader import load, parse_path
from termipaint.io.writer import save

__all__ = ["load", "parse_path", "save"]
