import math

import pytest
from pymunk import BB

from slingshot.geometry import boxes_intersect, circle_box, distance, is_degenerate, rect_box


def test_distance():
    assert distance((0, 0), (3, 4)) == pytest.approx(5)


def test_circle_box():
    box = circle_box((100, 300), 15)
    assert (box.left, box.bottom, box.right, box.top) == (85, 285, 115, 315)


def test_rect_box_grows_downwards():
    box = rect_box(10, 20, 30, 40)
    assert (box.left, box.bottom, box.right, box.top) == (10, 20, 40, 60)


def test_overlapping_boxes_intersect():
    assert boxes_intersect(rect_box(0, 0, 10, 10), rect_box(5, 5, 10, 10))


def test_touching_edges_count_as_a_hit():
    assert boxes_intersect(rect_box(0, 0, 10, 10), rect_box(10, 0, 10, 10))


def test_separate_boxes_miss():
    assert not boxes_intersect(rect_box(0, 0, 10, 10), rect_box(20, 20, 10, 10))


@pytest.mark.parametrize("box", [
    None,
    rect_box(5, 5, 0, 10),
    rect_box(5, 5, 10, 0),
    BB(10, 10, 0, 0),
    BB(0, 0, math.nan, 10),
    BB(0, 0, math.inf, 10),
])
def test_degenerate_boxes_never_intersect(box):
    assert is_degenerate(box)
    assert not boxes_intersect(box, rect_box(0, 0, 20, 20))
    assert not boxes_intersect(rect_box(0, 0, 20, 20), box)
