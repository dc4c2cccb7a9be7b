"""Build a C file with gcc, run it, then hand focus back to the editor pane."""

from __future__ import annotations

import os
import subprocess
import sys

SOURCE_SUFFIX = ".c"


def derive_executable(source: str) -> str:
    """Name of the program built from ``source``: the path without ``.c``."""
    if not source.endswith(SOURCE_SUFFIX) or len(source) <= len(SOURCE_SUFFIX):
        raise ValueError(f"not a C source file: {source!r}")
    return source[: -len(SOURCE_SUFFIX)]


def _local(executable: str) -> str:
    return executable if os.path.isabs(executable) else f"./{executable}"


def _run(command: list[str]) -> int | None:
    try:
        return subprocess.run(command, check=False).returncode
    except OSError as exc:
        print(f"{command[0]}: {exc}", file=sys.stderr)
        return None


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    source = args[0]
    executable = derive_executable(source)
    if _run(["gcc", "-o", executable, source]) == 0:
        _run([_local(executable)])
    _run(["tmux", "select-pane", "-L"])
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())