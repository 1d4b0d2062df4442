"""Random-access cursor over a sequence with a step other than one."""

from __future__ import annotations

from collections.abc import Sequence
from functools import total_ordering
from typing import Any

__all__ = ["StridedIterator"]


@total_ordering
class StridedIterator:
    """A position in a sequence that moves ``stride`` items per step (stride may be negative)."""

    __slots__ = ("_data", "_pos", "_stride")

    def __init__(self, data: Sequence[Any], position: int = 0, stride: int = 1) -> None:
        self._data = data
        self._pos = position
        self._stride = stride

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def position(self) -> int:
        return self._pos

    def _at(self, pos: int) -> Any:
        if not 0 <= pos < len(self._data):
            raise IndexError(f"strided position {pos} is out of range")
        return self._data[pos]

    def value(self) -> Any:
        """The item at the current position."""
        return self._at(self._pos)

    def __getitem__(self, offset: int) -> Any:
        return self._at(self._pos + self._stride * offset)

    def increment(self) -> StridedIterator:
        self._pos += self._stride
        return self

    def decrement(self) -> StridedIterator:
        self._pos -= self._stride
        return self

    def __iadd__(self, offset: int) -> StridedIterator:
        self._pos += self._stride * offset
        return self

    def __isub__(self, offset: int) -> StridedIterator:
        self._pos -= self._stride * offset
        return self

    def __add__(self, offset: int) -> StridedIterator:
        if not isinstance(offset, int):
            return NotImplemented
        return StridedIterator(self._data, self._pos + self._stride * offset, self._stride)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, StridedIterator):
            if other._data is not self._data:
                raise ValueError("iterators refer to different sequences")
            if other._stride != self._stride or self._stride == 0:
                raise ValueError("iterators must share the same non-zero stride")
            diff = self._pos - other._pos
            if diff % self._stride:
                raise ValueError("distance is not a whole number of strides")
            return diff // self._stride
        if isinstance(other, int):
            return StridedIterator(self._data, self._pos - self._stride * other, self._stride)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        return (
            self._data is other._data
            and self._pos == other._pos
            and self._stride == other._stride
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StridedIterator):
            return NotImplemented
        return (self._pos, self._stride) < (other._pos, other._stride)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"StridedIterator(position={self._pos}, stride={self._stride})"