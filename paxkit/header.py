"""Column header of a text table."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

__all__ = ["Header"]


class Header:
    """An ordered list of column identifiers."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[str] = ()) -> None:
        self._cells: list[str] = list(cells)

    @property
    def cells(self) -> tuple[str, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __getitem__(self, i: int) -> str:
        return self._cells[i]

    def __setitem__(self, i: int, value: str) -> None:
        self._cells[i] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Header):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Header({self._cells!r})"

    def id(self, i: int) -> str:
        """Identifier at index i, or an empty string if i is out of range."""
        return self._cells[i] if 0 <= i < len(self._cells) else ""

    def index(self, item: str) -> int:
        """Index of item, or -1 if it is not in the header."""
        try:
            return self._cells.index(item)
        except ValueError:
            return -1

    def add(self, item: str) -> int:
        """Add item unless already present; return its index."""
        if not item:
            raise ValueError("Text_table: No header item is allowed to be empty.")
        found = self.index(item)
        if found >= 0:
            return found
        self._cells.append(item)
        return len(self._cells) - 1

    def stream(self, out: TextIO, col_mark: str) -> None:
        """Write the identifiers to out, separated by col_mark."""
        out.write(col_mark.join(self._cells))