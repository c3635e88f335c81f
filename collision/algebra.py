"""
Algebra shared by the intersection functions.

Lines are handled in standard form (Ax + By = C) so vertical lines need no
special casing. Degeneracy checks compare against EPSILON rather than exact
zero.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

from pygame.math import Vector2

EPSILON = 1e-9


@dataclass(frozen=True)
class StandardForm:
    """Coefficients of Ax + By = C."""

    A: float
    B: float
    C: float


def standard_form(line) -> StandardForm:
    """Return the standard form of the line through line.p1 and line.p2."""
    A = line.p2.y - line.p1.y
    B = line.p1.x - line.p2.x
    C = A * line.p1.x + B * line.p1.y
    return StandardForm(A, B, C)


def is_between(value, low, high):
    """Strict low < value < high."""
    return low < value < high


def _axis_fraction(value, start, end, epsilon):
    span = end - start
    if abs(span) < epsilon:
        return None  # no defined fraction along a flat axis
    return (value - start) / span


def is_legal_segment(point, segment, epsilon=EPSILON) -> bool:
    """
    Check whether a point already on a segment's line lies inside the segment.

    The parametric fraction is computed separately along x and y, and the point
    is accepted when EITHER fraction is strictly inside (0, 1). A flat axis
    (zero span) never accepts on its own.

    Args:
        point: Candidate point on the segment's infinite line
        segment: Segment to test against
        epsilon: Tolerance for treating an axis span as zero

    Returns:
        True if the point is strictly within the segment bounds
    """
    fractions = (
        _axis_fraction(point.x, segment.p1.x, segment.p2.x, epsilon),
        _axis_fraction(point.y, segment.p1.y, segment.p2.y, epsilon),
    )
    return any(f is not None and is_between(f, 0.0, 1.0) for f in fractions)


def segment_intersections(intersections: Iterable[Vector2], seg1, seg2=None) -> List[Vector2]:
    """
    Keep the candidate points that fall inside one or two segments.

    Args:
        intersections: Raw candidates, e.g. from line_vs_line
        seg1: Segment every kept point must lie in
        seg2: Optional second segment every kept point must also lie in

    Returns:
        New list of the accepted points, in input order
    """
    result = []
    for p in intersections:
        if not is_legal_segment(p, seg1):
            continue
        if seg2 is not None and not is_legal_segment(p, seg2):
            continue
        result.append(p)
    return result


def circle_vs_standard_line(circle, form: StandardForm, epsilon=EPSILON) -> List[Vector2]:
    """
    Intersect a circle centered at the origin with a line in standard form.

    Both operands must already be in circle-local coordinates. The result is
    in the same local space; translate it back with the circle center.

    Returns:
        Two points, or an empty list when the line misses, only touches the
        circle, or is degenerate (A = B = 0)
    """
    a2b2 = form.A * form.A + form.B * form.B
    if abs(a2b2) < epsilon:
        return []

    discriminant = circle.radius * circle.radius * a2b2 - form.C * form.C
    if discriminant <= epsilon:
        return []

    root = math.sqrt(discriminant)
    return [
        Vector2((form.A * form.C + form.B * root) / a2b2,
                (form.B * form.C - form.A * root) / a2b2),
        Vector2((form.A * form.C - form.B * root) / a2b2,
                (form.B * form.C + form.A * root) / a2b2),
    ]


def translate(points: Iterable[Vector2], offset: Vector2) -> List[Vector2]:
    """Return a new list with every point shifted by offset."""
    return [p + offset for p in points]


def solve_line_system(s1: StandardForm, s2: StandardForm, epsilon=EPSILON) -> Optional[Vector2]:
    """Solve two standard-form equations; None when parallel or coincident."""
    denom = s1.A * s2.B - s2.A * s1.B
    if abs(denom) < epsilon:
        return None
    return Vector2(
        (s2.B * s1.C - s1.B * s2.C) / denom,
        (s2.C * s1.A - s1.C * s2.A) / denom,
    )
