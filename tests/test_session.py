"""Tests for the edit session, input events and event scripts."""

from pathlib import Path

import pytest

from termipaint.config import PaintConfig
from termipaint.core.cell import Cell
from termipaint.core.color import Color
from termipaint.core.grid import Grid
from termipaint.core.point import Point
from termipaint.edit import events as ev
from termipaint.edit.events import parse_script
from termipaint.edit.session import EditSession
from termipaint.edit.tools import Tool
from termipaint.errors import ConfigError, ScriptError


class TestStrokes:
    """Tests for drawing through the session."""

    def test_pencil_stroke_is_one_undo_step(self, session: EditSession, rows) -> None:
        session.begin_stroke(Point(0, 0))
        session.move_to(Point(3, 0))
        session.move_to(Point(3, 2))
        session.end_stroke()
        assert rows(session.grid)[0].startswith("####")
        assert session.history.undo_depth == 1

        assert session.undo()
        assert all(cell.is_blank() for _, _, cell in session.grid.cells())
        assert session.status == "Undo"

    def test_undo_redo_status(self, session: EditSession) -> None:
        assert session.undo() is False
        assert session.status == "Nothing to undo"
        assert session.redo() is False
        assert session.status == "Nothing to redo"

    def test_redo_after_undo(self, session: EditSession) -> None:
        session.select_tool(Tool.LINE)
        session.begin_stroke(Point(0, 5))
        session.end_stroke(Point(9, 5))
        after = session.grid.copy()
        session.undo()
        assert session.redo()
        assert session.grid == after
        assert session.status == "Redo"

    def test_new_stroke_discards_redo(self, session: EditSession) -> None:
        session.begin_stroke(Point(0, 0))
        session.end_stroke()
        session.undo()
        session.begin_stroke(Point(1, 1))
        session.end_stroke()
        assert session.redo() is False

    def test_fill_commits_on_press(self, session: EditSession) -> None:
        session.select_tool(Tool.FILL)
        session.select_color(Color.BLUE)
        session.begin_stroke(Point(4, 4))
        assert session.gesture is None
        assert session.history.undo_depth == 1
        assert session.grid.get(9, 5) == Cell.of('#', Color.BLUE)

    def test_noop_stroke_not_recorded(self, session: EditSession) -> None:
        session.select_tool(Tool.ERASER)
        session.begin_stroke(Point(0, 0))
        session.end_stroke()
        assert session.history.undo_depth == 0

    def test_cancel_shape(self, session: EditSession) -> None:
        session.select_tool(Tool.RECTANGLE)
        session.begin_stroke(Point(0, 0))
        session.move_to(Point(4, 4))
        assert len(session.preview_points()) == 16
        assert session.cancel_shape()
        assert session.status == "Shape cancelled"
        session.end_stroke()
        assert session.history.undo_depth == 0
        assert session.preview_points() == []

    def test_cancel_without_shape(self, session: EditSession) -> None:
        session.begin_stroke(Point(0, 0))
        assert session.cancel_shape() is False
        assert session.gesture is not None

    def test_settings_captured_at_press(self, session: EditSession) -> None:
        session.select_color(Color.RED)
        session.begin_stroke(Point(0, 0))
        session.select_color(Color.GREEN)
        session.move_to(Point(2, 0))
        session.end_stroke()
        assert session.grid.get(2, 0).fg is Color.RED

    def test_preview_style_for_line(self, session: EditSession) -> None:
        session.select_tool(Tool.LINE)
        session.begin_stroke(Point(0, 0))
        assert session.preview_style().erase is False


class TestSettings:
    """Tests for brush settings."""

    def test_defaults(self, session: EditSession) -> None:
        assert session.tool is Tool.PENCIL
        assert session.brush_char == '#'
        assert session.brush_size == 1
        assert session.color is Color.WHITE
        assert session.status == "Ready"

    def test_brush_size_clamped(self, session: EditSession) -> None:
        session.shrink_brush()
        assert session.brush_size == 1
        for _ in range(5):
            session.grow_brush()
        assert session.brush_size == 3

    def test_cycle_color_wraps(self, session: EditSession) -> None:
        session.cycle_color(forward=True)
        assert session.color is Color.BLACK
        session.cycle_color(forward=False)
        assert session.color is Color.WHITE

    def test_cycle_color_from_default(self, session: EditSession) -> None:
        session.select_color(Color.DEFAULT)
        session.cycle_color()
        assert session.color is Color.RED

    def test_cycle_brush_char(self, session: EditSession) -> None:
        session.cycle_brush_char()
        assert session.brush_char == '@'
        session.cycle_brush_char(forward=False)
        session.cycle_brush_char(forward=False)
        assert session.brush_char == ' '

    def test_toggle_filled(self, session: EditSession) -> None:
        session.toggle_filled()
        assert session.filled_shapes
        assert session.status == "Rectangle fill enabled"
        session.toggle_filled(True)
        assert session.filled_shapes

    def test_sample(self, session: EditSession) -> None:
        session.grid.set(1, 1, Cell.of('%', Color.MAGENTA))
        assert session.sample(Point(1, 1))
        assert session.brush_char == '%'
        assert session.color is Color.MAGENTA

    def test_sample_space_keeps_brush(self, session: EditSession) -> None:
        assert session.sample(Point(0, 0))
        assert session.brush_char == '#'
        assert session.color is Color.DEFAULT
        assert not session.sample(Point(-1, 0))


class TestCanvasManagement:
    """Tests for resize, save and load."""

    def test_resize_keeps_history_usable(self, session: EditSession) -> None:
        session.begin_stroke(Point(1, 1))
        session.end_stroke()
        session.resize(4, 3)
        assert (session.grid.width, session.grid.height) == (4, 3)
        assert session.undo()
        assert session.grid.get(1, 1).is_blank()

    def test_save_and_load(self, session: EditSession, tmp_path: Path) -> None:
        session.select_color(Color.CYAN)
        session.begin_stroke(Point(2, 3))
        session.end_stroke()
        path = tmp_path / "art.json"
        assert session.save(path)
        assert session.current_file == path

        other = EditSession(Grid(10, 6))
        other.begin_stroke(Point(0, 0))
        other.end_stroke()
        assert other.load(path)
        assert other.grid.get(2, 3) == Cell.of('#', Color.CYAN)
        assert other.grid.get(0, 0).is_blank()
        assert other.history.undo_depth == 0
        assert other.status == f"Loaded {path}"

    def test_load_fits_current_size(self, session: EditSession, tmp_path: Path) -> None:
        path = tmp_path / "big.txt"
        path.write_text("abcdefghijklmnop\n" * 20)
        assert session.load(path)
        assert (session.grid.width, session.grid.height) == (10, 6)
        assert session.grid.get(9, 5).char == 'j'

    def test_failed_load_leaves_state(self, session: EditSession, tmp_path: Path) -> None:
        session.begin_stroke(Point(0, 0))
        session.end_stroke()
        before = session.grid.copy()
        grid = session.grid

        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        assert session.load(bad) is False
        assert session.status.startswith("Load failed:")
        assert session.grid is grid
        assert session.grid == before
        assert session.history.undo_depth == 1
        assert session.current_file is None

    def test_failed_save(self, session: EditSession, tmp_path: Path) -> None:
        assert session.save(tmp_path / "missing" / "x.json") is False
        assert session.status.startswith("Save failed:")

    def test_unencodable_save_reports_failure(self, session: EditSession, tmp_path: Path) -> None:
        session.grid.set(0, 0, Cell(char='\ud800'))
        path = tmp_path / "out.json"
        assert session.save(path) is False
        assert session.status.startswith("Save failed:")
        assert session.current_file is None
        assert not path.exists()

    def test_default_file_from_config(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        session = EditSession(Grid(3, 3), PaintConfig(default_file="pic.txt"))
        assert session.save()
        assert (tmp_path / "pic.txt").exists()


class TestDispatch:
    """Tests for input events and scripts."""

    def test_dispatch_events(self, session: EditSession, rows) -> None:
        session.play([
            ev.SelectTool(Tool.RECTANGLE),
            ev.SelectBrushChar('+'),
            ev.BeginStroke(Point(0, 0)),
            ev.MoveTo(Point(3, 2)),
            ev.EndStroke(),
            ev.Undo(),
            ev.Redo(),
            ev.Resize(5, 4),
        ])
        assert rows(session.grid) == ["++++ ", "+  + ", "++++ ", "     "]

    def test_dispatch_unknown_event(self, session: EditSession) -> None:
        with pytest.raises(TypeError):
            session.dispatch("undo")  # type: ignore[arg-type]

    def test_parse_script(self) -> None:
        events = parse_script(
            "# a comment\n"
            "\n"
            "tool ellipse\n"
            "color Red\n"
            "char space\n"
            "size 2\n"
            "filled on\n"
            "down 1 2\n"
            "move 3 4\n"
            "up\n"
            "up 5 6\n"
            "cancel\n"
            "undo\n"
            "redo\n"
            "resize 20 10\n"
        )
        assert events == [
            ev.SelectTool(Tool.ELLIPSE),
            ev.SelectColor(Color.RED),
            ev.SelectBrushChar(' '),
            ev.SetBrushSize(2),
            ev.ToggleFilled(True),
            ev.BeginStroke(Point(1, 2)),
            ev.MoveTo(Point(3, 4)),
            ev.EndStroke(None),
            ev.EndStroke(Point(5, 6)),
            ev.CancelShape(),
            ev.Undo(),
            ev.Redo(),
            ev.Resize(20, 10),
        ]

    @pytest.mark.parametrize("text,line_no", [
        ("jump 1 2", 1),
        ("undo\ndown 1", 2),
        ("undo\nundo\nmove a b", 3),
        ("tool spray", 1),
        ("color orange", 1),
        ("char ab", 1),
        ("filled maybe", 1),
        ("redo now", 1),
    ])
    def test_script_errors(self, text: str, line_no: int) -> None:
        with pytest.raises(ScriptError) as excinfo:
            parse_script(text)
        assert excinfo.value.line_no == line_no
        assert str(excinfo.value).startswith(f"line {line_no}:")

    def test_script_round_trip_through_session(self, session: EditSession) -> None:
        session.play(parse_script("tool fill\ncolor green\ndown 0 0\nundo\nredo\n"))
        assert session.grid.get(5, 5) == Cell.of('#', Color.GREEN)
        assert session.history.undo_depth == 1


class TestConfig:
    """Tests for PaintConfig."""

    def test_defaults(self) -> None:
        config = PaintConfig()
        assert config.undo_limit == 100
        assert config.default_file == "canvas.json"

    def test_from_env(self) -> None:
        config = PaintConfig.from_env({
            "TERMIPAINT_UNDO_LIMIT": "5",
            "TERMIPAINT_WIDTH": "40",
            "TERMIPAINT_HEIGHT": "12",
            "TERMIPAINT_DEFAULT_FILE": "art.txt",
        })
        assert (config.undo_limit, config.width, config.height) == (5, 40, 12)
        assert config.default_file == "art.txt"

    @pytest.mark.parametrize("env", [
        {"TERMIPAINT_UNDO_LIMIT": "lots"},
        {"TERMIPAINT_UNDO_LIMIT": "-1"},
        {"TERMIPAINT_WIDTH": "0"},
    ])
    def test_from_env_rejects_bad_values(self, env: dict[str, str]) -> None:
        with pytest.raises(ConfigError):
            PaintConfig.from_env(env)

    def test_undo_limit_applies_to_session(self) -> None:
        session = EditSession(Grid(5, 1), PaintConfig(undo_limit=2))
        for x in range(5):
            session.begin_stroke(Point(x, 0))
            session.end_stroke()
        assert session.history.undo_depth == 2
