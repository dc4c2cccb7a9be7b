import curses
from unittest.mock import patch

import pytest

from niceeditor.document import Document, read_lines
from niceeditor.editor import (
    CTRL_A,
    CTRL_C,
    CTRL_E,
    CTRL_Q,
    CTRL_S,
    CTRL_V,
    CTRL_X,
    CTRL_Z,
    JUMP_PROMPT,
    Editor,
    main,
)


class FakeScreen:
    def __init__(self, rows=10, cols=40, keys=()):
        self.rows = rows
        self.cols = cols
        self.grid = [[" "] * cols for _ in range(rows)]
        self.keys = list(keys)
        self.cursor = (0, 0)

    def getmaxyx(self):
        return self.rows, self.cols

    def move(self, y, x):
        self.cursor = (y, x)

    def clrtoeol(self):
        y, x = self.cursor
        for k in range(x, self.cols):
            self.grid[y][k] = " "

    def addstr(self, y, x, text, attr=0):
        for offset, ch in enumerate(text):
            if x + offset < self.cols:
                self.grid[y][x + offset] = ch
        self.cursor = (y, min(x + len(text), self.cols - 1))

    def refresh(self):
        pass

    def getch(self):
        return self.keys.pop(0)

    def row(self, y):
        return "".join(self.grid[y]).rstrip()


def make_editor(lines, tmp_path, keys=(), rows=10, cols=40):
    screen = FakeScreen(rows, cols, keys)
    doc = Document(lines, rows)
    return Editor(doc, str(tmp_path / "prog.c"), screen), screen


def test_typing_inserts_characters(tmp_path):
    editor, _ = make_editor([], tmp_path)
    for ch in "abc":
        assert editor.handle_key(ord(ch)) is True
    assert editor.document.lines == ["abc"]


def test_enter_splits_line(tmp_path):
    editor, _ = make_editor(["ab"], tmp_path)
    editor.handle_key(curses.KEY_RIGHT)
    editor.handle_key(10)
    assert editor.document.lines == ["a", "b"]
    assert editor.document.row == 1


def test_backspace_joins_lines(tmp_path):
    editor, _ = make_editor(["foo", "bar"], tmp_path)
    editor.handle_key(curses.KEY_DOWN)
    editor.handle_key(curses.KEY_LEFT)
    editor.handle_key(curses.KEY_LEFT)
    editor.handle_key(curses.KEY_LEFT)
    editor.handle_key(127)
    assert editor.document.lines == ["foobar"]


def test_copy_then_paste(tmp_path):
    editor, _ = make_editor(["one", "two"], tmp_path)
    editor.handle_key(CTRL_C)
    editor.handle_key(curses.KEY_DOWN)
    editor.handle_key(CTRL_V)
    assert editor.document.lines == ["one", "one"]


def test_undo_restores_line(tmp_path):
    editor, _ = make_editor(["one", "two"], tmp_path)
    editor.handle_key(curses.KEY_DOWN)
    editor.handle_key(ord("x"))
    editor.handle_key(CTRL_Z)
    assert editor.document.lines[1] == "two"


def test_tab_inserts_spaces(tmp_path):
    editor, _ = make_editor(["x"], tmp_path)
    editor.handle_key(9)
    assert editor.document.lines[0] == " " * 4 + "x"


def test_ctrl_s_saves_file(tmp_path):
    editor, _ = make_editor(["int x;", "return 0;"], tmp_path)
    editor.handle_key(CTRL_S)
    assert read_lines(editor.filename) == ["int x;", "return 0;"]


def test_ctrl_q_saves_and_quits(tmp_path):
    editor, _ = make_editor(["hello"], tmp_path)
    with patch("niceeditor.editor.subprocess.run") as run:
        assert editor.handle_key(CTRL_Q) is False
    assert run.call_args_list[0].args[0] == ["tmux", "kill-pane", "-a"]
    assert read_lines(editor.filename) == ["hello"]


def test_ctrl_a_resizes_pane(tmp_path):
    editor, _ = make_editor(["x"], tmp_path)
    with patch("niceeditor.editor.subprocess.run") as run:
        assert editor.handle_key(CTRL_A) is True
    assert run.call_args.args[0] == ["tmux", "resize-pane", "-L", "5"]
    assert editor.document.lines == ["x"]


def test_compile_saves_and_splits(tmp_path):
    editor, _ = make_editor(["int main() {}"], tmp_path)
    with patch("niceeditor.editor.subprocess.run") as run:
        editor.handle_key(CTRL_X)
    calls = [c.args[0] for c in run.call_args_list]
    assert calls[0] == ["tmux", "kill-pane", "-a"]
    assert calls[1][:5] == ["tmux", "split-window", "-h", "-l", "40"]
    assert "niceeditor.runner" in calls[1][5]
    assert read_lines(editor.filename) == ["int main() {}"]


def test_render_right_aligns_line_numbers(tmp_path):
    editor, screen = make_editor([str(n) for n in range(11)], tmp_path)
    editor.render()
    assert screen.row(0).startswith(" 0")


def test_render_truncates_to_width(tmp_path):
    editor, screen = make_editor(["a" * 80], tmp_path, cols=30)
    editor.render()
    assert len(screen.row(0)) <= 30


def test_render_places_cursor_after_gutter(tmp_path):
    editor, screen = make_editor(["abc"], tmp_path)
    editor.handle_key(curses.KEY_RIGHT)
    editor.render()
    assert screen.cursor == (0, editor.document.col + 2)


def test_prompt_reads_digits_with_backspace(tmp_path):
    keys = [ord("1"), ord("2"), 127, ord("5"), 10]
    editor, screen = make_editor([], tmp_path, keys=keys)
    assert editor.prompt_line_number() == 15
    assert screen.row(screen.rows - 1).startswith(JUMP_PROMPT.rstrip())


def test_prompt_keeps_three_digits(tmp_path):
    keys = [ord(c) for c in "1234"] + [10]
    editor, _ = make_editor([], tmp_path, keys=keys)
    assert editor.prompt_line_number() == 123


def test_prompt_empty_is_zero(tmp_path):
    editor, _ = make_editor([], tmp_path, keys=[ord("a"), 10])
    assert editor.prompt_line_number() == 0


def test_ctrl_e_jumps(tmp_path):
    editor, _ = make_editor([str(n) for n in range(8)], tmp_path, keys=[ord("3"), 10])
    editor.handle_key(CTRL_E)
    assert editor.document.row == 3
    assert editor.document.top == 3
    assert editor.document.screen_row == 0


def test_resize_key_updates_height(tmp_path):
    editor, screen = make_editor([str(n) for n in range(20)], tmp_path, rows=10)
    screen.rows = 6
    editor.handle_key(curses.KEY_RESIZE)
    assert editor.document.height == screen.rows


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "filename" in capsys.readouterr().err


@pytest.mark.parametrize("key", [0, 200])
def test_unknown_keys_change_nothing(tmp_path, key):
    editor, _ = make_editor(["abc"], tmp_path)
    assert editor.handle_key(key) is True
    assert editor.document.lines == ["abc"]