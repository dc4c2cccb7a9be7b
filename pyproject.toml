[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "niceeditor"
version = "0.1.0"
description = "A small curses text editor for C sources with syntax highlighting, autosave and a tmux compile pane"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "curses", "tmux", "c"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nice-editor = "niceeditor.launcher:main"
ne = "niceeditor.editor:main"
ne-compile = "niceeditor.runner:main"

[tool.hatch.build.targets.wheel]
packages = ["niceeditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
