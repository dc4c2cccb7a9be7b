# niceeditor

niceeditor is a small curses editor for C source files, meant to be used
inside tmux. It numbers every line, colours C keywords, string literals,
`//` comments, preprocessor lines and semicolons, and saves the file in the
background every five seconds.

## Installing

```
pip install .
```

The editor needs a terminal with curses support. Opening a session and the
compile pane need `tmux`; compiling needs `gcc`. All of them must be on your
`PATH`.

## Starting

Open a new tmux session named `nice_editor` with the editor in it:

```
nice-editor hello.c
```

Without a file name, `nice-editor` prints a usage line and exits.

Or start the editor directly, for example in a terminal that is already
inside tmux:

```
ne hello.c
```

If the file exists it is loaded; otherwise you start with an empty buffer and
the file is created when it is first saved. Lines longer than 99 characters
are split when the file is read.

## Keys

| Key      | Action                                                          |
|----------|-----------------------------------------------------------------|
| Ctrl+S   | Save the file                                                   |
| Ctrl+Q   | Close the other tmux panes, save and quit                       |
| Ctrl+C   | Copy the current line                                           |
| Ctrl+V   | Replace the current line with the copied one                    |
| Ctrl+Z   | Restore the current line to what it was when the cursor entered it |
| Ctrl+E   | Jump to a line number (up to three digits, then Enter)          |
| Ctrl+X   | Save, then compile and run the file in a tmux pane on the right |
| Ctrl+A   | Run `tmux resize-pane -L 5`                                     |
| Ctrl+D   | Run `tmux resize-pane -R 5`                                     |
| Arrows   | Move the cursor; left/right wrap across line ends               |
| Enter    | Split the line at the cursor                                    |
| Backspace| Delete before the cursor, or join with the line above           |
| Tab      | Insert four spaces                                              |
| Mouse    | Left click places the cursor                                    |

Typing `(`, `{`, `'` or `"` inserts the matching closing character as well.
Only printable ASCII characters are inserted. A line holds at most 99
characters and a file at most 256 lines; input beyond that is ignored.

The jump target is put at the top of the window and is clamped to the last
line of the file. The status line shows the cursor row and column and the
file name.

## Compiling

Ctrl+X saves the file, closes the other tmux panes and opens a 40-column
pane on the right that runs the compile step for the current file. You can
also run that step yourself:

```
ne-compile hello.c
```

It runs `gcc -o hello hello.c` and, if that succeeds, `./hello`. It then
selects the tmux pane to the left and waits for Enter so that you can read
the output. The file name must end in `.c`.

## Using the pieces from Python

- `niceeditor.document.Document` holds the lines, the cursor (`row`, `col`)
  and the visible window (`top`, `screen_row`, `height`), with the editing
  operations `move_left`, `move_right`, `move_up`, `move_down`, `newline`,
  `backspace`, `insert_char`, `insert_tab`, `copy_line`, `paste_line`,
  `undo_line`, `jump`, `click`, `resize` and `save`.
- `niceeditor.document.read_lines` and `write_lines` load and store files the
  way the editor does.
- `niceeditor.highlight.highlight_line` splits a line into `Span`s, each with
  its text and a `Style`; `Style.color_pair` gives the curses colour pair.
  `line_number_width` gives the width of the line-number column.
- `niceeditor.launcher.build_command` and `niceeditor.runner.derive_executable`
  give the tmux command line and the executable name used by the commands.

## What it does not do

There is no search, no selection of more than one line, and only one level
of undo per line. Only C syntax is highlighted, and highlighting does not
follow block comments or strings across lines.