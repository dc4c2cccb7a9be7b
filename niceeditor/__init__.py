"""A small curses text editor for C sources, with tmux session and compile helpers."""

__version__ = "0.1.0"
__all__ = ["document", "highlight", "editor", "launcher", "runner"]