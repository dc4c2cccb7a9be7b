"""Curses front end: drawing, key handling, autosave and the compile pane."""

from __future__ import annotations

import curses
import os
import shlex
import subprocess
import sys
import threading

from niceeditor.document import Document, read_lines
from niceeditor.highlight import Style, highlight_line, line_number_width

AUTOSAVE_INTERVAL = 5.0
JUMP_PROMPT = "please enter page number: "
JUMP_MAX_DIGITS = 3

CTRL_A = 1
CTRL_C = 3
CTRL_D = 4
CTRL_E = 5
CTRL_Q = 17
CTRL_S = 19
CTRL_V = 22
CTRL_X = 24
CTRL_Z = 26

_ENTER_KEYS = frozenset({10, 13, curses.KEY_ENTER})
_BACKSPACE_KEYS = frozenset({127, 8, curses.KEY_BACKSPACE})
_TAB = 9


class Editor:
    """Binds a document to a curses screen and a file name."""

    def __init__(self, document: Document, filename: str, stdscr) -> None:
        self.document = document
        self.filename = filename
        self.stdscr = stdscr
        self._colors = False
        self._lock = threading.RLock()
        self._stop = threading.Event()

    # -- output ---------------------------------------------------------

    def _attr(self, style: Style) -> int:
        if not self._colors or style.color_pair == 0:
            return 0
        return curses.color_pair(style.color_pair)

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        _, cols = self.stdscr.getmaxyx()
        text = text[: max(cols - x, 0)]
        if not text:
            return
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing into the bottom-right cell reports an error after drawing.
            pass

    def _clear_line(self, y: int, x: int = 0) -> None:
        try:
            self.stdscr.move(y, x)
            self.stdscr.clrtoeol()
        except curses.error:
            pass

    def render(self) -> None:
        """Draw the visible lines with numbers and colours, then the status line."""
        with self._lock:
            doc = self.document
            rows, cols = self.stdscr.getmaxyx()
            width = line_number_width(doc.total_lines)
            start = width + 1
            text_width = max(cols - start, 0)
            for screen_y in range(rows - 1):
                index = doc.top + screen_y
                self._clear_line(screen_y)
                if index > doc.total_lines:
                    continue
                self._put(screen_y, 0, str(index).rjust(width))
                x = start
                for span in highlight_line(doc.lines[index][:text_width]):
                    self._put(screen_y, x, span.text, self._attr(span.style))
                    x += len(span.text)
            col = min(doc.col, text_width)
            self._clear_line(rows - 1)
            self._put(rows - 1, 0, f"row:{doc.row}, col:{col} {self.filename:>20}")
            try:
                self.stdscr.move(doc.screen_row, col + start)
            except curses.error:
                pass
            self.stdscr.refresh()

    # -- external commands ----------------------------------------------

    @staticmethod
    def _tmux(*args: str) -> None:
        try:
            subprocess.run(
                ["tmux", *args],
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            pass

    def _save(self) -> None:
        with self._lock:
            self.document.save(self.filename)

    def compile(self) -> None:
        """Save, then build and run the file in a tmux pane on the right."""
        self._save()
        inner = (
            f"{shlex.quote(sys.executable)} -m niceeditor.runner "
            f"{shlex.quote(self.filename)}; exec bash"
        )
        self._tmux("kill-pane", "-a")
        self._tmux("split-window", "-h", "-l", "40", f"sh -c {shlex.quote(inner)}")

    # -- input ----------------------------------------------------------

    def prompt_line_number(self) -> int:
        """Read up to three digits on the status line; Enter finishes."""
        rows, _ = self.stdscr.getmaxyx()
        y = rows - 1
        self._clear_line(y)
        self._put(y, 0, JUMP_PROMPT)
        x = len(JUMP_PROMPT)
        try:
            self.stdscr.move(y, x)
        except curses.error:
            pass
        digits: list[str] = []
        while True:
            key = self.stdscr.getch()
            if key in _ENTER_KEYS:
                break
            if key in _BACKSPACE_KEYS:
                if digits:
                    digits.pop()
                    x -= 1
                    self._put(y, x, " ")
                    try:
                        self.stdscr.move(y, x)
                    except curses.error:
                        pass
                    self.stdscr.refresh()
            elif 0 <= key < 128 and chr(key).isdigit():
                if len(digits) < JUMP_MAX_DIGITS:
                    digits.append(chr(key))
                    self._put(y, x, chr(key))
                    x += 1
                    self.stdscr.refresh()
        return int("".join(digits)) if digits else 0

    def _click(self) -> None:
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            return
        if bstate & curses.BUTTON1_PRESSED:
            start = line_number_width(self.document.total_lines) + 1
            self.document.click(y, x - start)

    def handle_key(self, key: int) -> bool:
        """Apply one key press; return False when the editor should quit."""
        with self._lock:
            doc = self.document
            if key == CTRL_Q:
                self._tmux("kill-pane", "-a")
                self._save()
                return False
            if key == CTRL_S:
                self._save()
            elif key == CTRL_C:
                doc.copy_line()
            elif key == CTRL_V:
                doc.paste_line()
            elif key == CTRL_Z:
                doc.undo_line()
            elif key == CTRL_X:
                self.compile()
            elif key == CTRL_E:
                doc.jump(self.prompt_line_number())
            elif key == CTRL_A:
                self._tmux("resize-pane", "-L", "5")
            elif key == CTRL_D:
                self._tmux("resize-pane", "-R", "5")
            elif key == curses.KEY_LEFT:
                doc.move_left()
            elif key == curses.KEY_RIGHT:
                doc.move_right()
            elif key == curses.KEY_UP:
                doc.move_up()
            elif key == curses.KEY_DOWN:
                doc.move_down()
            elif key == curses.KEY_MOUSE:
                self._click()
            elif key == curses.KEY_RESIZE:
                rows, _ = self.stdscr.getmaxyx()
                doc.resize(max(rows, 2))
            elif key in _ENTER_KEYS:
                doc.newline()
            elif key in _BACKSPACE_KEYS:
                doc.backspace()
            elif 32 <= key <= 126:
                doc.insert_char(chr(key))
            elif key == _TAB:
                doc.insert_tab()
            return True

    # -- main loop ------------------------------------------------------

    def _setup_terminal(self) -> None:
        curses.raw()
        curses.noecho()
        self.stdscr.keypad(True)
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_CYAN, -1)
            curses.init_pair(2, curses.COLOR_YELLOW, -1)
            curses.init_pair(3, curses.COLOR_GREEN, -1)
            curses.init_pair(4, curses.COLOR_RED, -1)
            curses.init_pair(5, curses.COLOR_MAGENTA, -1)
            self._colors = True
        except curses.error:
            self._colors = False
        curses.mousemask(curses.BUTTON1_PRESSED | curses.BUTTON2_PRESSED)

    def _autosave_loop(self) -> None:
        while not self._stop.wait(AUTOSAVE_INTERVAL):
            try:
                self._save()
            except OSError:
                pass

    def run(self) -> None:
        """Edit until Ctrl+Q, saving in the background every few seconds."""
        self._setup_terminal()
        self._stop.clear()
        saver = threading.Thread(target=self._autosave_loop, daemon=True)
        saver.start()
        try:
            while True:
                self.render()
                curses.flushinp()
                key = self.stdscr.getch()
                if key == -1:
                    continue
                if not self.handle_key(key):
                    break
        finally:
            self._stop.set()
            saver.join()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("please command ./ne [filename]", file=sys.stderr)
        return 1
    filename = args[0]
    lines = read_lines(filename) if os.path.isfile(filename) else []

    def session(stdscr) -> None:
        rows, _ = stdscr.getmaxyx()
        Editor(Document(lines, max(rows, 2)), filename, stdscr).run()

    curses.wrapper(session)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())