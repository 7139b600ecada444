"""
2D helpers on top of pymunk's Vec2d and BB.

All coordinates are playfield coordinates with y growing downwards, so a
``BB``'s ``bottom`` is its smallest y and ``top`` its largest.
"""
import math

from pymunk import BB, Vec2d


def as_vec(point) -> Vec2d:
    return Vec2d(float(point[0]), float(point[1]))


def distance(a, b) -> float:
    return (as_vec(a) - as_vec(b)).length


def circle_box(center, radius: float) -> BB:
    return BB.newForCircle(as_vec(center), radius)


def rect_box(left: float, top: float, width: float, height: float) -> BB:
    return BB(left, top, left + width, top + height)


def is_degenerate(box: BB | None) -> bool:
    """True for a missing box, a box with no area or one with non-finite edges."""
    if box is None:
        return True
    if not all(math.isfinite(edge) for edge in (box.left, box.bottom, box.right, box.top)):
        return True
    return box.right - box.left <= 0 or box.top - box.bottom <= 0


def boxes_intersect(a: BB | None, b: BB | None) -> bool:
    """Overlap test that treats touching edges as a hit and degenerate boxes as a miss."""
    if is_degenerate(a) or is_degenerate(b):
        return False
    return a.intersects(b)
