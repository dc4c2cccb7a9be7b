"""Start the editor inside a new tmux session."""

from __future__ import annotations

import shlex
import subprocess
import sys

SESSION_NAME = "nice_editor"


def build_command(filename: str) -> list[str]:
    """The tmux command line that opens ``filename`` in the editor."""
    editor = shlex.join([sys.executable, "-m", "niceeditor.editor", filename])
    return ["tmux", "new-session", "-s", SESSION_NAME, editor]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ./base [FileName]")
        return 0
    try:
        subprocess.run(build_command(args[0]), check=False)
    except OSError as exc:
        print(f"cannot start tmux: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())