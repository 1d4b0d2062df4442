"""Named metric functions evaluated on ordered samples."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from enum import IntEnum
from functools import total_ordering

from .ordered import l_moment, median_mad, percentile

__all__ = ["Function"]


class _Kind(IntEnum):
    COUNT = 0
    MEAN = 1
    MEAN2 = 2
    VARIANCE = 3
    SKEWNESS = 4
    KURTOSIS = 5
    L2 = 6
    L3 = 7
    L4 = 8
    MAD = 9
    PN = 10


_ID_DESCR: tuple[tuple[str, str], ...] = (
    ("count", "Number of values."),
    ("mean", "Mean of the values."),
    ("mean2", "Mean of the values^2."),
    ("variance", "Sample variance."),
    ("skewness", "Sample skewness."),
    ("kurtosis", "Sample kurtosis."),
    ("L2", "L2-moment (L-scale)."),
    ("L3", "L3-moment (L-skewness)."),
    ("L4", "L4-moment (L-kurtosis)."),
    ("mad", "Median absolute deviation."),
    ("p{}", "Percentile {}, where {} is in [0, 100]."),
)

_NAMED = {ident: _Kind(i) for i, (ident, _) in enumerate(_ID_DESCR[: _Kind.PN])}
_PERCENTILE = re.compile(r"p(-?[0-9]+)")


def _fdiv(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _mean(values: Sequence[float]) -> float:
    return _fdiv(math.fsum(values), len(values))


def _central_moment(values: Sequence[float], k: int) -> float:
    m = _mean(values)
    return math.fsum((v - m) ** k for v in values) / len(values)


def _sample_variance(values: Sequence[float]) -> float:
    n = len(values)
    if n < 2:
        return math.nan
    m = _mean(values)
    return math.fsum((v - m) ** 2 for v in values) / (n - 1)


def _sample_skewness(values: Sequence[float]) -> float:
    n = len(values)
    if n < 3:
        return math.nan
    m2 = _central_moment(values, 2)
    m3 = _central_moment(values, 3)
    g1 = _fdiv(m3, m2 ** 1.5)
    return g1 * math.sqrt(n * (n - 1)) / (n - 2)


def _sample_kurtosis(values: Sequence[float]) -> float:
    n = len(values)
    if n < 4:
        return math.nan
    m2 = _central_moment(values, 2)
    m4 = _central_moment(values, 4)
    g2 = _fdiv(m4, m2 * m2) - 3
    return ((n + 1) * g2 + 6) * (n - 1) / ((n - 2) * (n - 3))


@total_ordering
class Function:
    """A metric calculation, identified by a text such as ``"mean"`` or ``"p95"``."""

    __slots__ = ("_kind", "_percentile")

    def __init__(self, spec: str) -> None:
        kind = _NAMED.get(spec)
        perc = 0
        if kind is None:
            match = _PERCENTILE.fullmatch(spec)
            if match and 0 <= int(match.group(1)) <= 100:
                kind, perc = _Kind.PN, int(match.group(1))
        if kind is None:
            raise ValueError(
                f"Metric function identification failed: could not properly parse '{spec}'"
            )
        self._kind = kind
        self._percentile = perc

    @classmethod
    def _of(cls, kind: _Kind, perc: int = 0) -> Function:
        obj = cls.__new__(cls)
        obj._kind = kind
        obj._percentile = perc
        return obj

    @classmethod
    def count(cls) -> Function:
        return cls._of(_Kind.COUNT)

    @classmethod
    def mean(cls) -> Function:
        return cls._of(_Kind.MEAN)

    @classmethod
    def mean2(cls) -> Function:
        return cls._of(_Kind.MEAN2)

    @classmethod
    def variance(cls) -> Function:
        return cls._of(_Kind.VARIANCE)

    @classmethod
    def skewness(cls) -> Function:
        return cls._of(_Kind.SKEWNESS)

    @classmethod
    def kurtosis(cls) -> Function:
        return cls._of(_Kind.KURTOSIS)

    @classmethod
    def l2(cls) -> Function:
        return cls._of(_Kind.L2)

    @classmethod
    def l3(cls) -> Function:
        return cls._of(_Kind.L3)

    @classmethod
    def l4(cls) -> Function:
        return cls._of(_Kind.L4)

    @classmethod
    def mad(cls) -> Function:
        return cls._of(_Kind.MAD)

    @classmethod
    def p(cls, percentile: int) -> Function:
        """Percentile function; values above 100 are clamped to 100."""
        if percentile < 0:
            raise ValueError(f"percentile must not be negative, got {percentile}")
        return cls._of(_Kind.PN, min(int(percentile), 100))

    def description(self) -> str:
        return _ID_DESCR[self._kind][1]

    def __call__(self, ordered_values: Sequence[float]) -> float:
        """Calculate the metric for an ascending-ordered sample."""
        values = ordered_values
        kind = self._kind
        if kind is _Kind.COUNT:
            return float(len(values))
        if kind is _Kind.MEAN:
            return _mean(values)
        if kind is _Kind.MEAN2:
            return _fdiv(math.fsum(v * v for v in values), len(values))
        if kind is _Kind.VARIANCE:
            return _sample_variance(values)
        if kind is _Kind.SKEWNESS:
            return _sample_skewness(values)
        if kind is _Kind.KURTOSIS:
            return _sample_kurtosis(values)
        if kind is _Kind.L2:
            return l_moment(values, 2)
        if kind is _Kind.L3:
            return l_moment(values, 3)
        if kind is _Kind.L4:
            return l_moment(values, 4)
        if kind is _Kind.MAD:
            return median_mad(values).mad
        return percentile(values, self._percentile)

    @staticmethod
    def help(pre: str = "") -> str:
        """One line per available metric: identifier and description."""
        return "".join(f"{pre}    {ident:10}{descr}\n" for ident, descr in _ID_DESCR)

    def _key(self) -> tuple[int, int]:
        return (int(self._kind), self._percentile)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Function):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self._kind is _Kind.PN:
            return f"p{self._percentile}"
        return _ID_DESCR[self._kind][0]

    def __repr__(self) -> str:
        return f"Function({str(self)!r})"