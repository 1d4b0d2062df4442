import pytest

from paxkit.bbox import Box2
from paxkit.plot import PlotBase


def test_inclusion_id():
    assert PlotBase.inclusion_id() == "contained"


def test_plot_inside_box():
    plot = PlotBase(100.0, 200.0)
    assert plot.in_box(Box2(minx=0.0, maxx=1000.0, miny=0.0, maxy=1000.0), 10.0)


@pytest.mark.parametrize(
    "box",
    [
        Box2(minx=95.0, maxx=1000.0, miny=0.0, maxy=1000.0),
        Box2(minx=0.0, maxx=105.0, miny=0.0, maxy=1000.0),
        Box2(minx=0.0, maxx=1000.0, miny=195.0, maxy=1000.0),
        Box2(minx=0.0, maxx=1000.0, miny=0.0, maxy=205.0),
    ],
)
def test_plot_partly_outside_box(box):
    assert not PlotBase(100.0, 200.0).in_box(box, 10.0)


def test_plot_touching_border_is_contained():
    plot = PlotBase(100.0, 200.0)
    assert plot.in_box(Box2(minx=90.0, maxx=110.0, miny=190.0, maxy=210.0), 10.0)


def test_box_as_corner_pairs_matches_box2():
    plot = PlotBase(100.0, 200.0)
    for lx, ly, ux, uy in [(0, 0, 1000, 1000), (95, 0, 1000, 1000), (90, 190, 110, 210)]:
        box = Box2(minx=lx, maxx=ux, miny=ly, maxy=uy)
        assert plot.in_box(((lx, ly), (ux, uy)), 10.0) == plot.in_box(box, 10.0)


def test_contains_point_on_circle():
    plot = PlotBase(100.0, 200.0)
    assert plot.contains(103.0, 204.0, 5.0)
    assert not plot.contains(103.0, 204.0, 4.9)


def test_contains_centre_and_symmetry():
    plot = PlotBase(-3.5, 12.25)
    assert plot.contains(-3.5, 12.25, 0.0)
    for dx, dy in [(1.0, 2.0), (-2.5, 0.5), (0.0, -3.0)]:
        assert plot.contains(-3.5 + dx, 12.25 + dy, 3.2) == plot.contains(
            -3.5 - dx, 12.25 - dy, 3.2
        )