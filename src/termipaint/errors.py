"""Exception types raised by termipaint.

Drawing code never raises for coordinates; these cover the layers that
talk to the outside world (files, scripts, environment).
"""


class TermipaintError(Exception):
    """Base class for all termipaint errors."""


class CanvasIOError(TermipaintError):
    """Reading, parsing or writing a canvas file failed."""


class ScriptError(TermipaintError):
    """An event script line could not be parsed."""

    def __init__(self, line_no: int, message: str) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


class ConfigError(TermipaintError):
    """A configuration value is malformed."""
