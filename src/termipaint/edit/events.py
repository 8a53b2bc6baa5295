"""Discrete input events and the line-oriented event script format.

An input layer (keyboard, mouse, or a script file) produces these events;
EditSession.dispatch maps each one onto a session call.

Script syntax, one event per line:

    tool line          select a tool (pencil, eraser, line, rect, ellipse, fill)
    color red          select a color by name
    char @             select the brush character ("char space" for a space)
    size 2             set the brush size
    filled [on|off]    toggle (or set) filled rectangles
    down 3 4           begin a stroke at (3, 4)
    move 5 6           drag to (5, 6)
    up [7 8]           end the stroke, optionally at (7, 8)
    cancel             abandon a shape drag
    undo / redo
    resize 40 20

Blank lines and lines whose first word is "#" are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from termipaint.core.color import Color
from termipaint.core.point import Point
from termipaint.edit.tools import Tool
from termipaint.errors import ScriptError


@dataclass(frozen=True)
class BeginStroke:
    point: Point


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class EndStroke:
    point: Point | None = None


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class SelectTool:
    tool: Tool


@dataclass(frozen=True)
class SelectColor:
    color: Color


@dataclass(frozen=True)
class SelectBrushChar:
    char: str


@dataclass(frozen=True)
class SetBrushSize:
    size: int


@dataclass(frozen=True)
class ToggleFilled:
    value: bool | None = None


@dataclass(frozen=True)
class CancelShape:
    pass


InputEvent = Union[
    BeginStroke, MoveTo, EndStroke, Undo, Redo, Resize,
    SelectTool, SelectColor, SelectBrushChar, SetBrushSize,
    ToggleFilled, CancelShape,
]


def _ints(line_no: int, args: list[str], count: int) -> list[int]:
    if len(args) != count:
        raise ScriptError(line_no, f"expected {count} integer arguments, got {len(args)}")
    try:
        return [int(a) for a in args]
    except ValueError as exc:
        raise ScriptError(line_no, f"invalid integer in {' '.join(args)!r}") from exc


def _point(line_no: int, args: list[str]) -> Point:
    x, y = _ints(line_no, args, 2)
    return Point(x, y)


def parse_line(line_no: int, line: str) -> InputEvent | None:
    """Parse one script line; returns None for blank and comment lines."""
    words = line.split()
    if not words or words[0] == "#":
        return None

    command, args = words[0].lower(), words[1:]

    if command == "down":
        return BeginStroke(_point(line_no, args))
    if command == "move":
        return MoveTo(_point(line_no, args))
    if command == "up":
        return EndStroke(_point(line_no, args) if args else None)
    if command in ("undo", "redo", "cancel"):
        if args:
            raise ScriptError(line_no, f"{command} takes no arguments")
        return {"undo": Undo, "redo": Redo, "cancel": CancelShape}[command]()
    if command == "resize":
        width, height = _ints(line_no, args, 2)
        return Resize(width, height)
    if command == "size":
        (size,) = _ints(line_no, args, 1)
        return SetBrushSize(size)
    if command == "filled":
        if not args:
            return ToggleFilled()
        if len(args) == 1 and args[0].lower() in ("on", "off"):
            return ToggleFilled(args[0].lower() == "on")
        raise ScriptError(line_no, "filled takes 'on', 'off' or nothing")
    if command == "char":
        if len(args) != 1:
            raise ScriptError(line_no, "char takes exactly one character")
        char = ' ' if args[0].lower() == "space" else args[0]
        if len(char) != 1:
            raise ScriptError(line_no, f"brush must be a single character, got {char!r}")
        return SelectBrushChar(char)
    if command in ("tool", "color"):
        if len(args) != 1:
            raise ScriptError(line_no, f"{command} takes exactly one name")
        try:
            if command == "tool":
                return SelectTool(Tool.from_name(args[0]))
            return SelectColor(Color.from_name(args[0]))
        except ValueError as exc:
            raise ScriptError(line_no, str(exc)) from exc

    raise ScriptError(line_no, f"unknown command {command!r}")


def parse_script(text: str) -> list[InputEvent]:
    """Parse a whole event script.

    Raises:
        ScriptError: on the first malformed line
    """
    events: list[InputEvent] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        event = parse_line(line_no, line)
        if event is not None:
            events.append(event)
    return events
