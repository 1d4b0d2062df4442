"""Circular sample plots located by their centre coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .bbox import Box2

__all__ = ["PlotBase"]


class _Inclusion(Enum):
    OVERLAPPED = "overlapped"
    CONTAINED = "contained"


_INCLUSION = _Inclusion.CONTAINED


def _bounds(bbox) -> tuple[float, float, float, float]:
    """(lower x, lower y, upper x, upper y) of a Box2 or ((lx, ly), (ux, uy))."""
    if isinstance(bbox, Box2):
        return bbox.minx, bbox.miny, bbox.maxx, bbox.maxy
    (lx, ly), (ux, uy) = bbox
    return lx, ly, ux, uy


@dataclass(frozen=True)
class PlotBase:
    """The centre of a plot, as east and north coordinates."""

    east: float
    north: float

    @staticmethod
    def inclusion_id() -> str:
        """Name of the rule deciding whether a plot takes points from a box."""
        return _INCLUSION.value

    def _overlapped(self, bbox, max_distance: float) -> bool:
        lx, ly, ux, uy = _bounds(bbox)
        return (
            lx < self.east + max_distance
            and ly < self.north + max_distance
            and ux > self.east - max_distance
            and uy > self.north - max_distance
        )

    def _contained(self, bbox, max_distance: float) -> bool:
        lx, ly, ux, uy = _bounds(bbox)
        return (
            lx <= self.east - max_distance
            and ly <= self.north - max_distance
            and ux >= self.east + max_distance
            and uy >= self.north + max_distance
        )

    def in_box(self, bbox, max_distance: float) -> bool:
        """Should the plot receive points from a file with this bounding box?"""
        if _INCLUSION is _Inclusion.OVERLAPPED:
            return self._overlapped(bbox, max_distance)
        return self._contained(bbox, max_distance)

    def contains(self, x: float, y: float, max_distance: float) -> bool:
        """Is the point within max_distance of the plot centre?"""
        return (self.east - x) ** 2 + (self.north - y) ** 2 <= max_distance * max_distance