"""Syntax colouring of C source lines."""

from __future__ import annotations

import enum
from dataclasses import dataclass

CYAN_KEYWORDS = frozenset(
    {
        "int", "double", "float", "enum", "char", "short", "long",
        "malloc", "free", "calloc", "realloc",
    }
)
MAGENTA_KEYWORDS = frozenset(
    {
        "void", "unsigned", "signed", "sizeof", "typedef", "struct", "union",
        "extern", "static", "const", "if", "else", "switch", "case", "default",
        "while", "for", "do", "continue", "break", "return",
    }
)

_MAX_WORD = 63


class Style(enum.Enum):
    """How a piece of a line is shown."""

    PLAIN = "plain"
    CYAN = "cyan"
    STRING = "string"
    COMMENT = "comment"
    PREPROCESSOR = "preprocessor"
    SEMICOLON = "semicolon"
    MAGENTA = "magenta"

    @property
    def color_pair(self) -> int:
        """Curses colour pair number; 0 means the default colours."""
        return _COLOR_PAIRS[self]


_COLOR_PAIRS = {
    Style.PLAIN: 0,
    Style.CYAN: 1,
    Style.STRING: 2,
    Style.PREPROCESSOR: 2,
    Style.COMMENT: 3,
    Style.SEMICOLON: 4,
    Style.MAGENTA: 5,
}


@dataclass(frozen=True)
class Span:
    text: str
    style: Style


def is_cyan_keyword(word: str) -> bool:
    return word in CYAN_KEYWORDS


def is_magenta_keyword(word: str) -> bool:
    return word in MAGENTA_KEYWORDS


def _is_word_start(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def _is_word_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def _word_style(word: str) -> Style:
    if is_cyan_keyword(word):
        return Style.CYAN
    if is_magenta_keyword(word):
        return Style.MAGENTA
    return Style.PLAIN


def _tokens(line: str):
    n = len(line)
    j = 0
    while j < n:
        ch = line[j]
        if ch == '"':
            start = j
            j += 1
            while j < n:
                if line[j] == '"' and line[j - 1] != "\\":
                    j += 1
                    break
                j += 1
            yield line[start:j], Style.STRING
        elif line.startswith("//", j):
            yield line[j:], Style.COMMENT
            return
        elif j == 0 and ch == "#":
            yield line, Style.PREPROCESSOR
            return
        elif ch == ";":
            yield ch, Style.SEMICOLON
            j += 1
        elif _is_word_start(ch):
            start = j
            while j < n and _is_word_char(line[j]) and j - start < _MAX_WORD:
                j += 1
            word = line[start:j]
            yield word, _word_style(word)
        else:
            yield ch, Style.PLAIN
            j += 1


def highlight_line(line: str) -> list[Span]:
    """Split ``line`` into styled spans whose texts join back to the line."""
    spans: list[Span] = []
    for text, style in _tokens(line):
        if spans and spans[-1].style is style:
            spans[-1] = Span(spans[-1].text + text, style)
        else:
            spans.append(Span(text, style))
    return spans


def line_number_width(total_lines: int) -> int:
    """Number of digits needed to show line numbers up to ``total_lines``."""
    width = 1
    limit = 10
    while total_lines >= limit:
        limit *= 10
        width += 1
    return width