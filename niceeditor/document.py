"""Line buffer with cursor, scrolling and the editing operations of the editor."""

from __future__ import annotations

import os
from collections.abc import Iterable

MAX_LINE_LEN = 100
MAX_LINES = 256
TAB = " " * 4

_AUTO_PAIRS = {"(": "()", "{": "{}", "'": "''", '"': '""'}


def read_lines(path: str | os.PathLike) -> list[str]:
    """Read a file into lines of at most ``MAX_LINE_LEN - 1`` characters.

    A character that arrives while the current line is full ends that line
    and is not kept.
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        data = fh.read()
    lines: list[str] = []
    current: list[str] = []
    for ch in data:
        if ch == "\n" or len(current) >= MAX_LINE_LEN - 1:
            lines.append("".join(current))
            current = []
        else:
            current.append(ch)
    if current:
        lines.append("".join(current))
    return lines


def write_lines(path: str | os.PathLike, lines: Iterable[str]) -> None:
    """Write every line followed by a newline, replacing the file."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.writelines(f"{line}\n" for line in lines)


class Document:
    """Text lines plus the cursor and the window onto them.

    ``height`` is the terminal height; its last row is the status line, so
    ``height - 1`` text rows are visible starting at line ``top``.
    """

    def __init__(self, lines: Iterable[str] = (), height: int = 24) -> None:
        if height < 2:
            raise ValueError("height must be at least 2")
        self.lines: list[str] = list(lines) or [""]
        self.height = height
        self.row = 0
        self.col = 0
        self.screen_row = 0
        self.top = 0
        self.clipboard = ""
        self._undo = ""

    @property
    def total_lines(self) -> int:
        """Index of the last line."""
        return len(self.lines) - 1

    @property
    def current_line(self) -> str:
        return self.lines[self.row]

    def _remember(self) -> None:
        self._undo = self.current_line

    def _scroll_up(self) -> None:
        if self.row < self.top and self.screen_row == 0:
            self.top -= 1
        else:
            self.screen_row -= 1

    def _scroll_down(self) -> None:
        last = self.height - 2
        if self.row > last and self.screen_row == last:
            self.top += 1
        else:
            self.screen_row += 1

    def move_left(self) -> None:
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = len(self.current_line)
            self._scroll_up()
            self._remember()

    def move_right(self) -> None:
        if self.col < len(self.current_line):
            self.col += 1
        elif self.row < self.total_lines:
            self.row += 1
            self.col = 0
            self._scroll_down()
            self._remember()

    def move_up(self) -> None:
        if self.row > 0:
            self.row -= 1
            self.col = len(self.current_line)
            self._scroll_up()
            self._remember()

    def move_down(self) -> None:
        if self.row < self.total_lines:
            self.row += 1
            self.col = len(self.current_line)
            self._scroll_down()
            self._remember()

    def newline(self) -> None:
        """Break the line at the cursor, moving the rest to a new line below."""
        if len(self.lines) >= MAX_LINES:
            return
        line = self.current_line
        self.lines[self.row] = line[: self.col]
        self.lines.insert(self.row + 1, line[self.col :])
        self.row += 1
        self.col = 0
        self._scroll_down()
        self._remember()

    def backspace(self) -> None:
        """Delete before the cursor, joining with the line above at column 0."""
        if self.col > 0:
            line = self.current_line
            self.col -= 1
            self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
        elif self.row > 0:
            below = self.lines.pop(self.row)
            self.row -= 1
            self.col = len(self.current_line)
            self.lines[self.row] += below
            self._scroll_up()
            self._remember()

    def insert_char(self, ch: str) -> None:
        """Insert a printable ASCII character; brackets and quotes come in pairs."""
        if len(ch) != 1 or not 32 <= ord(ch) <= 126:
            raise ValueError(f"not a printable character: {ch!r}")
        text = _AUTO_PAIRS.get(ch, ch)
        line = self.current_line
        if len(line) + len(text) >= MAX_LINE_LEN:
            return
        self.lines[self.row] = line[: self.col] + text + line[self.col :]
        self.col += 1

    def insert_tab(self) -> None:
        line = self.current_line
        if len(line) + len(TAB) < MAX_LINE_LEN:
            self.lines[self.row] = line[: self.col] + TAB + line[self.col :]
            self.col += len(TAB)

    def copy_line(self) -> None:
        self.clipboard = self.current_line

    def paste_line(self) -> None:
        """Replace the current line with the copied one."""
        self.lines[self.row] = self.clipboard
        self.col = min(self.col, len(self.clipboard))

    def undo_line(self) -> None:
        """Restore the current line as it was when the cursor entered it."""
        self.lines[self.row] = self._undo
        self.col = len(self._undo)

    def jump(self, line: int) -> None:
        """Put ``line`` at the top of the window with the cursor on it."""
        line = max(0, min(line, self.total_lines))
        self.top = line
        self.row = line
        self.col = 0
        self.screen_row = 0

    def click(self, y: int, x: int) -> None:
        """Move the cursor to screen row ``y``, column ``x`` of the text."""
        target = self.top + y
        if 0 <= y < self.height - 1 and target <= self.total_lines:
            self.screen_row = y
            self.row = target
            self.col = min(max(x, 0), len(self.current_line))
        self._remember()

    def resize(self, height: int) -> None:
        """Adapt to a new terminal height, pulling the cursor into view."""
        if height < 2:
            raise ValueError("height must be at least 2")
        self.height = height
        last = height - 2
        if self.screen_row > last:
            self.row = min(self.top + last, self.total_lines)
            self.screen_row = self.row - self.top
            self.col = len(self.current_line)

    def save(self, path: str | os.PathLike) -> None:
        write_lines(path, list(self.lines))