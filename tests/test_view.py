"""Tests for frame and status-line composition."""

from linepad.buffer import LineBuffer
from linepad.commands import InsertChar, MoveCursorDown
from linepad.controller import EditorController
from linepad.document import Document
from linepad.view import TerminalView, compose_status, display_text


def create_controller(lines, row=0, col=0, visible_rows=3):
    controller = EditorController(visible_rows=visible_rows)
    controller.document = Document(LineBuffer(lines))
    controller.set_cursor(row, col)
    return controller


def test_render_shows_visible_rows_only():
    controller = create_controller(["a", "b", "c", "d", "e"], 4, 0)
    frame = TerminalView(num_columns=10).render(controller)
    assert frame.lines == ["c", "d", "e"]
    assert (frame.cursor_y, frame.cursor_x) == (2, 0)


def test_render_short_document():
    controller = create_controller(["only"], 0, 2, visible_rows=5)
    frame = TerminalView(num_columns=10).render(controller)
    assert frame.lines == ["only"]
    assert (frame.cursor_y, frame.cursor_x) == (0, 2)


def test_long_line_is_truncated_not_wrapped():
    controller = create_controller(["0123456789abcdef"], 0, 0)
    frame = TerminalView(num_columns=8).render(controller)
    assert frame.lines == ["01234567"]


def test_horizontal_scroll_keeps_cursor_visible():
    controller = create_controller(["0123456789abcdef", "xy"], 0, 12)
    view = TerminalView(num_columns=8)
    frame = view.render(controller)
    assert view.left_column == 5
    assert frame.lines == ["56789abc", ""]
    assert frame.cursor_x == 7

    # Moving to a short line scrolls back left
    controller.execute(MoveCursorDown())
    frame = view.render(controller)
    assert view.left_column == 2
    assert frame.cursor_x == 0


def test_horizontal_scroll_is_sticky():
    controller = create_controller(["0123456789abcdef"], 0, 12)
    view = TerminalView(num_columns=8)
    view.render(controller)
    controller.set_cursor(0, 9)
    frame = view.render(controller)
    assert view.left_column == 5
    assert frame.cursor_x == 4


def test_tabs_take_one_cell():
    assert display_text("a\tb") == "a b"


def test_status_shows_name_and_position():
    controller = create_controller(["abc"], 0, 2)
    controller.document.set_path("/some/dir/notes.txt")
    status = compose_status(controller, 40)
    assert len(status) == 40
    assert status.startswith(" notes.txt")
    assert status.endswith("Ln 1, Col 3 ")


def test_status_marks_dirty_untitled_document():
    controller = create_controller([""])
    controller.execute(InsertChar('x'))
    status = compose_status(controller, 40)
    assert status.startswith(" [untitled] *")


def test_status_message_replaces_everything():
    controller = create_controller([""])
    status = compose_status(controller, 20, " Saved to a.txt")
    assert status == " Saved to a.txt".ljust(20)


def test_status_hint_dropped_when_narrow():
    controller = create_controller([""])
    wide = compose_status(controller, 80, hint="^S Save")
    narrow = compose_status(controller, 30, hint="^S Save  ^O Open  ^N New  ^Q Quit")
    assert "^S Save" in wide
    assert "^S" not in narrow
    assert len(narrow) == 30
