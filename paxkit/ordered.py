"""Statistics on ordered (sorted ascending) samples.

Every function except :func:`order` assumes that ``values`` is already
sorted in ascending order; otherwise the result is meaningless.  Empty or
too short samples give NaN rather than raising.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "MAD",
    "order",
    "min_value",
    "max_value",
    "count_lt",
    "count_ge",
    "quantile",
    "percentile",
    "quartile",
    "median",
    "median_mad",
    "quartiles",
    "binom",
    "l_moment",
    "l_moments",
    "l_moment_ratio",
    "tl_moment",
    "tl_moments",
    "tl_moment_ratio",
]

NAN = math.nan


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero gives inf or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return NAN
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _lerp(a: float, b: float, t: float) -> float:
    if (a <= 0 <= b) or (a >= 0 >= b):
        return t * b + (1 - t) * a
    if t == 1:
        return b
    x = a + t * (b - a)
    return max(x, b) if (t > 1) == (b > a) else min(x, b)


def _check_order(r: int) -> None:
    if r < 1:
        raise ValueError(f"moment order must be at least 1, got {r}")


def order(values) -> list[float]:
    """Return the values sorted in ascending order."""
    return sorted(values)


def min_value(values: Sequence[float]) -> float:
    """Smallest value, NaN if empty."""
    return values[0] if values else NAN


def max_value(values: Sequence[float]) -> float:
    """Largest value, NaN if empty."""
    return values[-1] if values else NAN


def count_lt(values: Sequence[float], v: float) -> int:
    """Number of items < v (also the index of the first item >= v)."""
    return bisect_left(values, v)


def count_ge(values: Sequence[float], v: float) -> int:
    """Number of items >= v."""
    return len(values) - count_lt(values, v)


def quantile(values: Sequence[float], q: float) -> float:
    """Quantile by linear interpolation of the nearest samples; q is clamped to [0, 1]."""
    if not values:
        return NAN
    f = min(max(float(q), 0.0), 1.0) * (len(values) - 1)
    i = int(f)
    if len(values) > i + 1:
        return _lerp(values[i], values[i + 1], f - i)
    return values[-1]


def percentile(values: Sequence[float], p: float) -> float:
    """Percentile p, clamped to [0, 100]."""
    return quantile(values, 0.01 * p)


def quartile(values: Sequence[float], q: float) -> float:
    """Quartile q, clamped to [0, 4]."""
    return quantile(values, 0.25 * q)


def median(values: Sequence[float]) -> float:
    """Median by linear interpolation of the nearest samples."""
    return quantile(values, 0.5)


@dataclass(frozen=True)
class MAD:
    """Median and median absolute deviation of a sample (mad is -1 if empty)."""

    median: float
    mad: float

    def valid(self) -> bool:
        return self.mad >= 0


def median_mad(values: Sequence[float]) -> MAD:
    """Compute the median and the median absolute deviation in one pass."""
    n = len(values)
    med = median(values)
    if n == 0:
        return MAD(med, -1.0)
    if n == 1:
        return MAD(med, 0.0)

    def below(i: int) -> float:
        return med - values[i] if i < n else -math.inf

    def above(i: int) -> float:
        return values[i] - med if i >= 0 else -math.inf

    # Deviations are ordered from both ends towards the median; take the
    # larger end each step until the middle deviation(s) are reached.
    d_idx, u_idx = 0, n - 1
    d_val, u_val = below(d_idx), above(u_idx)
    val = val2 = 0.0
    for _ in range(n // 2 + 1):
        val2 = val
        if d_val > u_val:
            val = d_val
            d_idx += 1
            d_val = below(d_idx)
        else:
            val = u_val
            u_idx -= 1
            u_val = above(u_idx)
    return MAD(med, val if n % 2 else (val + val2) * 0.5)


def quartiles(values: Sequence[float]) -> tuple[float, float, float, float, float]:
    """Return (min, first quartile, median, third quartile, max)."""
    return (
        min_value(values),
        quartile(values, 1),
        median(values),
        quartile(values, 3),
        max_value(values),
    )


def binom(a: int, b: int) -> int:
    """Binomial coefficient a over b."""
    a0 = b + 1 if a - b <= b else a - b + 1
    p = 1
    i = 1
    while a0 <= a:
        p = (p * a0) // i
        i += 1
        a0 += 1
    return p


def _l_moment_1(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _l_moment_2(values: Sequence[float]) -> float:
    n = len(values)
    total = sum(v * k for v, k in zip(values, range(-(n - 1), n, 2)))
    return total / (n * (n - 1))


def _l_moment_3(values: Sequence[float]) -> float:
    n = len(values)
    total = 0.0
    i = 0
    k = (n - 1) * (n - 2)
    for v in values:
        total += k * v
        i += 12
        k += i - 6 * n
    return total / (n * (n - 1) * (n - 2))


def _l_moment_4(values: Sequence[float]) -> float:
    n = len(values)
    k0 = 12 * (n * n + 1)
    total = 0.0
    i = 0
    k = -(n - 1) * (n - 2) * (n - 3)
    for v in values:
        total += k * v
        i += 1
        k += 60 * i * (i - n) + k0
    return total / (n * (n - 1) * (n - 2) * (n - 3))


def _l_moment_general(values: Sequence[float], r: int) -> float:
    n = len(values)
    p = [0.0] * r
    p[0] = (1 if r % 2 else -1) / n
    total = values[0] * p[0]
    for j, x in enumerate(values[1:], start=1):
        if j < r:
            p[j] = -((r + j - 1) * (r - j) * p[j - 1] / (j * (n - j)))
            sum_k = p[j]
            terms = j
        else:
            sum_k = 0.0
            terms = r
        for k in range(terms):
            p[k] *= j / (j - k)
            sum_k += p[k]
        total += sum_k * x
    return total


_L_SPECIAL = {1: _l_moment_1, 2: _l_moment_2, 3: _l_moment_3, 4: _l_moment_4}


def l_moment(values: Sequence[float], r: int) -> float:
    """L-moment of order r; NaN if there are fewer than r values."""
    _check_order(r)
    if len(values) < r:
        return NAN
    special = _L_SPECIAL.get(r)
    return special(values) if special else _l_moment_general(values, r)


def _l_fill(w: list[float], kn2: int, r: int) -> None:
    for big_r in range(3, r + 1):
        w[big_r] = _fdiv(
            w[big_r - 1] * (2 * big_r - 3) * kn2
            - w[big_r - 2] * (big_r - 2) * (w[0] + big_r - 2),
            (big_r - 1) * (w[0] - big_r + 1),
        )


def _l_weights(n: int, r: int) -> Iterator[tuple[float, ...]]:
    w = [0.0] * (r + 1)
    w[0] = float(n)
    w[1] = 1.0
    if r > 1:
        w[2] = -1.0
    kn2 = 1 - n
    _l_fill(w, kn2, r)
    while True:
        yield tuple(w)
        kn2 += 2
        if r > 1:
            w[2] += _fdiv(2, w[0] - 1)
        _l_fill(w, kn2, r)


def l_moments(values: Sequence[float], r: int) -> list[float]:
    """Return [n, L1, ..., Lr] computed together in one pass."""
    _check_order(r)
    n = len(values)
    sums = [0.0] * (r + 1)
    for x, w in zip(values, _l_weights(n, r)):
        for big_r in range(1, r + 1):
            sums[big_r] += x * w[big_r]
    return [float(n)] + [_fdiv(s, n) for s in sums[1:]]


def l_moment_ratio(values: Sequence[float], r: int) -> float:
    """L-moment ratio L_r / L_2 for r > 2."""
    if r <= 2:
        raise ValueError(f"L-moment ratio needs order above 2, got {r}")
    if len(values) < r:
        return NAN
    moments = l_moments(values, r)
    return _fdiv(moments[r], moments[2])


def _tl_fill(w: list[float], n: int, j: int, s: int, t: int, r: int) -> None:
    if r < 2:
        return
    k_2st = 2 + s + t
    w[2] = _fdiv(
        k_2st * (k_2st * (j + 1) - (s + 1) * (n + 1)) * w[1],
        2 * (s + 1) * (t + 1) * (n - s - t - 1),
    )
    for big_r in range(2, r):
        rm1, rp1 = big_r - 1, big_r + 1
        k_rst = big_r + s + t
        k_2rst = k_rst + big_r
        a_big = _fdiv(k_rst * (big_r + s) * (n - k_rst), k_2rst * (k_2rst - 1))
        c_big = _fdiv(rm1 * (rm1 + t) * (n + rm1), (k_2rst - 1) * (k_2rst - 2))
        a_small = _fdiv(rp1 * (big_r + t), big_r * (k_rst + 1))
        c_small = _fdiv(rm1 * k_rst, big_r * (rm1 + t))
        w[big_r + 1] = _fdiv(
            (j - s - a_big - c_big) * w[big_r] - c_small * c_big * w[rm1],
            a_small * a_big,
        )


def _tl_weights(n: int, r: int, s: int, t: int) -> Iterator[tuple[float, ...]]:
    w = [0.0] * (r + 1)
    w[0] = float(n)
    j = s
    w[1] = binom(n - j - 1, t) / binom(n, 1 + s + t)
    _tl_fill(w, n, j, s, t, r)
    while True:
        yield tuple(w)
        j += 1
        w[1] *= _fdiv(j * (n - j - t), (j - s) * (n - j))
        _tl_fill(w, n, j, s, t, r)


def tl_moments(values: Sequence[float], r: int, s: int, t: int | None = None) -> list[float]:
    """Return [n, TL1, ..., TLr], trimming s smallest and t largest (t defaults to s)."""
    _check_order(r)
    t = s if t is None else t
    n = len(values)
    if s < 0 or t < 0:
        raise ValueError("trimming counts must not be negative")
    if s + t > n:
        raise ValueError(f"cannot trim {s} + {t} values from a sample of {n}")
    result = [float(n)] + [0.0] * r
    for x, w in zip(values[s:n - t], _tl_weights(n, r, s, t)):
        for big_r in range(1, r + 1):
            result[big_r] += x * w[big_r]
    for big_r in range(n - s - t, r + 1):
        result[big_r] = NAN
    return result


def tl_moment(values: Sequence[float], r: int, s: int, t: int | None = None) -> float:
    """TL-moment of order r with trimming s and t (t defaults to s)."""
    t = s if t is None else t
    if s + t == 0:
        return l_moment(values, r)
    return tl_moments(values, r, s, t)[r]


def tl_moment_ratio(values: Sequence[float], r: int, s: int, t: int | None = None) -> float:
    """TL-moment ratio TL_r / TL_2 for r > 2 (t defaults to s)."""
    if r <= 2:
        raise ValueError(f"TL-moment ratio needs order above 2, got {r}")
    t = s if t is None else t
    if s + t == 0:
        return l_moment_ratio(values, r)
    moments = tl_moments(values, r, s, t)
    return _fdiv(moments[r], moments[2])