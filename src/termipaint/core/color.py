"""Color palette for character cells."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """
    One of the nine colors a cell can carry.

    DEFAULT means "whatever the terminal uses"; the other eight map
    directly onto the standard SGR color codes. There is no RGB.
    """
    DEFAULT = "Default"
    BLACK = "Black"
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    MAGENTA = "Magenta"
    CYAN = "Cyan"
    WHITE = "White"

    @property
    def display_name(self) -> str:
        """Human-readable name, also used in the JSON format."""
        return self.value

    @classmethod
    def quick_palette(cls) -> list[Color]:
        """The eight selectable colors, in number-key order."""
        return [
            cls.BLACK,
            cls.RED,
            cls.GREEN,
            cls.YELLOW,
            cls.BLUE,
            cls.MAGENTA,
            cls.CYAN,
            cls.WHITE,
        ]

    @classmethod
    def from_quick_index(cls, index: int) -> Color | None:
        """Map 1..8 onto the quick palette; anything else gives None."""
        palette = cls.quick_palette()
        if 1 <= index <= len(palette):
            return palette[index - 1]
        return None

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse a color name case-insensitively."""
        wanted = name.strip().lower()
        for color in cls:
            if color.value.lower() == wanted:
                return color
        raise ValueError(f"Unknown color name: {name!r}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameter for this color as foreground."""
        if self is Color.DEFAULT:
            return "39"
        return str(30 + _SGR_OFFSETS[self])

    def to_sgr_bg(self) -> str:
        """Return SGR parameter for this color as background."""
        if self is Color.DEFAULT:
            return "49"
        return str(40 + _SGR_OFFSETS[self])


_SGR_OFFSETS: dict[Color, int] = {
    color: offset for offset, color in enumerate(Color.quick_palette())
}
