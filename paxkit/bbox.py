"""Axis-aligned bounding boxes and raster indexing of coordinates."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Box2",
    "BboxIndexer",
    "align_le",
    "align_ge",
    "bbox_of",
    "indexer_for_points",
]


def _is_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def align_le(value, alignment):
    """Largest multiple of |alignment| that is <= value (value itself if alignment is zero)."""
    step = abs(alignment)
    if step == 0:
        return value
    if _is_int(value) and _is_int(step):
        return value // step * step
    if not math.isfinite(value):
        return value
    return float(math.floor(value / step) * step)


def align_ge(value, alignment):
    """Smallest multiple of |alignment| that is >= value (value itself if alignment is zero)."""
    step = abs(alignment)
    if step == 0:
        return value
    if _is_int(value) and _is_int(step):
        return -(-value // step) * step
    if not math.isfinite(value):
        return value
    return float(math.ceil(value / step) * step)


@dataclass(frozen=True)
class Box2:
    """A two-dimensional bounding box; the default box is empty."""

    minx: float = math.inf
    maxx: float = -math.inf
    miny: float = math.inf
    maxy: float = -math.inf

    @property
    def empty(self) -> bool:
        return self.minx > self.maxx or self.miny > self.maxy


def bbox_of(points: Iterable[Sequence[float]]) -> Box2:
    """Bounding box of (x, y, ...) points; an empty box if there are none."""
    minx = miny = math.inf
    maxx = maxy = -math.inf
    for point in points:
        x, y = point[0], point[1]
        minx, maxx = min(minx, x), max(maxx, x)
        miny, maxy = min(miny, y), max(maxy, y)
    return Box2(minx, maxx, miny, maxy)


class BboxIndexer:
    """A bounding box aligned to a resolution that maps coordinates to raster cells.

    Cells are indexed row first, with row 0 at the top (largest y).
    """

    __slots__ = ("_minx", "_maxx", "_miny", "_maxy", "_resolution", "_rows", "_cols")

    def __init__(self, bbox: Box2, resolution: float) -> None:
        self._minx = align_le(bbox.minx, resolution)
        self._maxx = align_ge(bbox.maxx, resolution)
        self._miny = align_le(bbox.miny, resolution)
        self._maxy = align_ge(bbox.maxy, resolution)
        self._resolution = resolution
        if self._minx > self._maxx:
            raise ValueError("Bbox indexer failed: min_x > max_x.")
        if self._miny > self._maxy:
            raise ValueError("Bbox indexer failed: min_y > max_y.")
        if resolution <= 0:
            raise ValueError("Bbox indexer failed: resolution <= 0.")
        self._rows = max(1, int((self._maxy - self._miny) / resolution))
        self._cols = max(1, int((self._maxx - self._minx) / resolution))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def pixels(self) -> int:
        return self._rows * self._cols

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def minx(self) -> float:
        return self._minx

    @property
    def maxx(self) -> float:
        return self._maxx

    @property
    def miny(self) -> float:
        return self._miny

    @property
    def maxy(self) -> float:
        return self._maxy

    @property
    def bbox(self) -> Box2:
        return Box2(self._minx, self._maxx, self._miny, self._maxy)

    def affine_vector(self) -> tuple[float, float, float, float, float, float]:
        """The affine geotransform of the raster, in the GDAL layout."""
        return (self._minx, self._resolution, 0.0, self._maxy, 0.0, -self._resolution)

    def contains(self, x: float, y: float) -> bool:
        """Does the point lie within the box (borders included)?"""
        return self._minx <= x <= self._maxx and self._miny <= y <= self._maxy

    def col(self, x: float) -> int:
        """Column of x; points right on the border are nudged inside."""
        if not math.isfinite(x):
            raise ValueError(f"x is not finite: {x}")
        c = math.floor((x - self._minx) / self._resolution)
        if 0 <= c < self._cols:
            return c
        nudge = 0.125 * self._resolution
        if self._minx <= x <= self._minx + nudge:
            return self.col(x + nudge)
        if self._maxx - nudge <= x <= self._maxx:
            return self.col(x - nudge)
        if x <= self._minx:
            message = f"x < min_x: {x} < {self._minx} (diff {self._minx - x})"
        elif x >= self._maxx:
            message = f"x > max_x: {x} > {self._maxx} (diff {x - self._maxx})"
        else:
            message = f"Calculated col >= cols: {c} >= {self._cols}"
        raise ValueError(message)

    def row(self, y: float) -> int:
        """Row of y, counted downwards from the top; border points are nudged inside."""
        if not math.isfinite(y):
            raise ValueError(f"y is not finite: {y}")
        r = math.floor((self._maxy - y) / self._resolution)
        if 0 <= r < self._rows:
            return r
        nudge = 0.125 * self._resolution
        if self._miny <= y <= self._miny + nudge:
            return self.row(y + nudge)
        if self._maxy - nudge <= y <= self._maxy:
            return self.row(y - nudge)
        if y <= self._miny:
            message = f"y < min_y: {y} < {self._miny} (diff {self._miny - y})"
        elif y >= self._maxy:
            message = f"y > max_y: {y} > {self._maxy} (diff {y - self._maxy})"
        else:
            message = f"Calculated row >= rows: {r} >= {self._rows}"
        raise ValueError(message)

    def index(self, x: float, y: float) -> int:
        """Row-first cell index of the point; raises ValueError if it is outside."""
        return self._cols * self.row(y) + self.col(x)

    def __str__(self) -> str:
        return (
            f"{{E[{self._minx}, {self._maxx}], N[{self._miny}, {self._maxy}], "
            f"res {self._resolution}}}"
        )

    def __repr__(self) -> str:
        return f"BboxIndexer({self.bbox!r}, {self._resolution!r})"


def indexer_for_points(points: Iterable[Sequence[float]], alignment: float) -> BboxIndexer:
    """An indexer whose box just encloses the points, aligned to ``alignment``."""
    pts = list(points)
    if not pts:
        raise ValueError(
            "Bbox indexer failed: Can not create a raster for an empty point-cloud."
        )
    if len(pts) == 1:
        raise ValueError(
            "Bbox indexer failed: Will not create a raster for a one-point point-cloud."
        )
    return BboxIndexer(bbox_of(pts), alignment)