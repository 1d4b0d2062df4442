"""Terminal dimensions and word wrapping for help texts."""

from __future__ import annotations

import shutil
from typing import TextIO, TypeVar

__all__ = ["Terminal"]

ANSI_RESET = "\033[0m"
ANSI_BOLD = "\033[1m"

Out = TypeVar("Out", bound=TextIO)


class Terminal:
    """Size of the output terminal, in characters and lines."""

    __slots__ = ("_chars", "_lines")

    def __init__(
        self, default_chars: int = 80, default_lines: int = 24, *, detect: bool = True
    ) -> None:
        if detect:
            size = shutil.get_terminal_size((default_chars, default_lines))
            self._chars, self._lines = size.columns, size.lines
        else:
            self._chars, self._lines = default_chars, default_lines

    @property
    def chars(self) -> int:
        return self._chars

    @property
    def lines(self) -> int:
        return self._lines

    def wrap(self, out: Out, tab: int, text: str) -> Out:
        """Write text to out, broken at spaces or newlines to fit the width.

        Continuation lines are indented by ``tab`` spaces; the first line is
        assumed to start at the cursor and may use the full width.
        """
        prefix = " " * tab
        width = max(1, self._chars)
        while text:
            end, resume = _split(text, width)
            out.write(text[:end])
            out.write("\n")
            text = text[resume:]
            if text:
                out.write(prefix)
            width = max(1, self._chars - tab)
        return out

    def __str__(self) -> str:
        return (
            f"{ANSI_BOLD}{self._chars}{ANSI_RESET} chars by "
            f"{ANSI_BOLD}{self._lines}{ANSI_RESET} lines"
        )

    def __repr__(self) -> str:
        return f"Terminal(chars={self._chars}, lines={self._lines})"


def _split(text: str, width: int) -> tuple[int, int]:
    """Where to end the current line and where the next one starts."""
    cut = 0
    for i, ch in enumerate(text[:width]):
        if ch == "\n":
            return i, i + 1
        if ch == " ":
            cut = i
    if len(text) <= width:
        return len(text), len(text)
    if cut > 0:
        return cut, cut + 1
    return width, width