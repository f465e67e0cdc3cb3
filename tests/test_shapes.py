import numpy as np
import pytest

from rectscan_core.geometry import BoundingRect, Point2D, interval_intersection


def rect(x1, y1, x2, y2):
    return BoundingRect(from_point=Point2D(x1, y1), to_point=Point2D(x2, y2))


def test_from_points_canonicalizes_each_axis():
    expected = rect(1, 1, 5, 5)
    assert BoundingRect.from_points(Point2D(1, 1), Point2D(5, 5)) == expected
    assert BoundingRect.from_points(Point2D(5, 5), Point2D(1, 1)) == expected
    assert BoundingRect.from_points(Point2D(1, 5), Point2D(5, 1)) == expected
    assert BoundingRect.from_points(Point2D(5, 1), Point2D(1, 5)) == expected


def test_from_points_allows_degenerate_rectangles():
    line = BoundingRect.from_points(Point2D(2, 3), Point2D(2, 7))
    assert line == rect(2, 3, 2, 7)
    assert line.width == 0
    assert line.is_degenerate

    dot = BoundingRect.from_points(Point2D(4, 4), Point2D(4, 4))
    assert dot.area == 0


def test_from_xywh_handles_negative_size():
    assert BoundingRect.from_xywh(1, 1, 4, 4) == rect(1, 1, 5, 5)
    assert BoundingRect.from_xywh(5, 5, -4, -4) == rect(1, 1, 5, 5)


def test_size_properties_and_xyxy():
    r = rect(3, -1, 5, 5)
    assert r.width == 2
    assert r.height == 6
    assert r.area == 12
    assert not r.is_degenerate
    np.testing.assert_array_equal(r.as_xyxy(), np.array([3.0, -1.0, 5.0, 5.0]))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((3.0, 7.0), (6.0, 10.0), (6.0, 7.0)),
        ((3.0, 7.0), (8.0, 10.0), None),
        ((3.0, 10.0), (4.0, 6.0), (4.0, 6.0)),
        ((0.0, 5.0), (5.0, 10.0), None),
        ((2.0, 4.0), (2.0, 4.0), (2.0, 4.0)),
        ((2.0, 4.0), (2.0, 9.0), (2.0, 4.0)),
        ((3.0, 3.0), (3.0, 5.0), None),
    ],
    ids=[
        "partial overlap",
        "disjoint",
        "containment",
        "touching",
        "equal",
        "shared lower bound",
        "zero width at shared lower bound",
    ],
)
def test_interval_intersection_is_order_independent(a, b, expected):
    assert interval_intersection(a, b) == expected
    assert interval_intersection(b, a) == expected


RECT_CASES = [
    (rect(1, 1, 5, 5), rect(3, 2, 6, 7), rect(3, 2, 5, 5)),
    (rect(1, 1, 10, 10), rect(3, 3, 5, 5), rect(3, 3, 5, 5)),
    (rect(1, 1, 5, 5), rect(6, 2, 7, 7), None),
    (rect(1, 1, 5, 5), rect(3, 6, 6, 7), None),
    (rect(1, 1, 5, 5), rect(5, 1, 9, 5), None),
    (rect(1, 1, 5, 5), rect(1, 1, 5, 5), rect(1, 1, 5, 5)),
]


@pytest.mark.parametrize(
    "a, b, expected",
    RECT_CASES,
    ids=[
        "intersection",
        "containment",
        "no intersection by x",
        "no intersection by y",
        "shared edge",
        "same rect",
    ],
)
def test_rect_intersection_is_symmetric(a, b, expected):
    assert not a.is_degenerate and not b.is_degenerate
    assert a.intersect(b) == expected
    assert b.intersect(a) == expected


def test_self_intersection_returns_same_rect():
    for r in (rect(1, 1, 5, 5), rect(-3, -2, 0.5, 7.25)):
        assert r.intersect(r) == r


def test_degenerate_rect_intersections():
    line = rect(2, 0, 2, 10)
    assert line.intersect(line) is None
    # A zero-width line strictly inside a box keeps its zero width
    assert line.intersect(rect(0, 0, 5, 5)) == rect(2, 0, 2, 5)
    assert rect(0, 0, 5, 5).intersect(line) == rect(2, 0, 2, 5)
    # A line on the box's far edge only touches it
    assert rect(5, 0, 5, 10).intersect(rect(0, 0, 5, 5)) is None


def test_intersection_result_is_canonical():
    result = rect(-5, -5, 0, 0).intersect(rect(-2, -8, 4, -1))
    assert result == rect(-2, -5, 0, -1)
    assert result.from_point.x <= result.to_point.x
    assert result.from_point.y <= result.to_point.y


def test_rects_are_immutable():
    r = rect(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        r.from_point = Point2D(2, 2)
