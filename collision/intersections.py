"""
Pairwise boundary intersections between collision shapes.

Everything is built from line_vs_line:
- segments and rays are their line plus a membership filter
- polygons and rectangles are the concatenation of their edge segments
- circles are solved in circle-local space and shifted back

Every function returns a new list of Vector2 points. An empty list means no
intersection or a degenerate input; nothing here raises for bad geometry.
Results follow edge order and are not deduplicated.
"""

from typing import List

from pygame.math import Vector2

from .algebra import (
    StandardForm,
    circle_vs_standard_line,
    segment_intersections,
    solve_line_system,
    standard_form,
    translate,
)
from .shapes import AxisAlignedRect, Circle, Line, Polygon, Ray, Segment

Points = List[Vector2]


# ---------------------------------------------------------------- line vs.

def line_vs_line(l1: Line, l2: Line) -> Points:
    """Single crossing point of two infinite lines; empty if parallel or coincident."""
    point = solve_line_system(standard_form(l1), standard_form(l2))
    return [] if point is None else [point]


def line_vs_segment(line: Line, seg: Segment) -> Points:
    return segment_intersections(line_vs_line(line, seg.as_line()), seg)


def line_vs_ray(line: Line, ray: Ray) -> Points:
    return segment_intersections(line_vs_line(line, ray.as_line()), ray.as_segment())


def line_vs_circle(line: Line, circle: Circle) -> Points:
    local = Line(line.p1 - circle.pos, line.p2 - circle.pos)
    return translate(circle_vs_standard_line(circle, standard_form(local)), circle.pos)


def line_vs_polygon(line: Line, poly: Polygon) -> Points:
    result = []
    for edge in poly.edges():
        result.extend(line_vs_segment(line, edge))
    return result


def line_vs_rect(line: Line, rect: AxisAlignedRect) -> Points:
    return line_vs_polygon(line, rect.as_polygon())


# ------------------------------------------------------------- segment vs.

def segment_vs_segment(s1: Segment, s2: Segment) -> Points:
    return segment_intersections(line_vs_line(s1.as_line(), s2.as_line()), s1, s2)


def segment_vs_ray(seg: Segment, ray: Ray) -> Points:
    return segment_intersections(line_vs_line(seg.as_line(), ray.as_line()), seg, ray.as_segment())


def segment_vs_circle(seg: Segment, circle: Circle) -> Points:
    return segment_intersections(line_vs_circle(seg.as_line(), circle), seg)


def segment_vs_polygon(seg: Segment, poly: Polygon) -> Points:
    result = []
    for edge in poly.edges():
        result.extend(segment_vs_segment(seg, edge))
    return result


def segment_vs_rect(seg: Segment, rect: AxisAlignedRect) -> Points:
    return segment_vs_polygon(seg, rect.as_polygon())


# ----------------------------------------------------------------- ray vs.

def ray_vs_ray(r1: Ray, r2: Ray) -> Points:
    return segment_intersections(line_vs_line(r1.as_line(), r2.as_line()),
                                 r1.as_segment(), r2.as_segment())


def ray_vs_circle(ray: Ray, circle: Circle) -> Points:
    return segment_intersections(line_vs_circle(ray.as_line(), circle), ray.as_segment())


def ray_vs_polygon(ray: Ray, poly: Polygon) -> Points:
    result = []
    for edge in poly.edges():
        result.extend(segment_vs_ray(edge, ray))
    return result


def ray_vs_rect(ray: Ray, rect: AxisAlignedRect) -> Points:
    return ray_vs_polygon(ray, rect.as_polygon())


# -------------------------------------------------------------- circle vs.

def circle_vs_circle(c1: Circle, c2: Circle) -> Points:
    """
    Crossing points of two circle outlines.

    Subtracting the two circle equations (with c1 moved to the origin) leaves
    the radical line through both crossings, which is then solved against c1.
    """
    offset = c2.pos - c1.pos
    radical_line = StandardForm(
        2 * offset.x,
        2 * offset.y,
        c1.radius * c1.radius - c2.radius * c2.radius + offset.x * offset.x + offset.y * offset.y,
    )
    return translate(circle_vs_standard_line(c1, radical_line), c1.pos)


def circle_vs_polygon(circle: Circle, poly: Polygon) -> Points:
    result = []
    for edge in poly.edges():
        result.extend(segment_vs_circle(edge, circle))
    return result


def circle_vs_rect(circle: Circle, rect: AxisAlignedRect) -> Points:
    return circle_vs_polygon(circle, rect.as_polygon())


# ------------------------------------------------------------- polygon vs.

def polygon_vs_polygon(p1: Polygon, p2: Polygon) -> Points:
    result = []
    for edge in p1.edges():
        result.extend(segment_vs_polygon(edge, p2))
    return result


def polygon_vs_rect(poly: Polygon, rect: AxisAlignedRect) -> Points:
    return polygon_vs_polygon(poly, rect.as_polygon())


def rect_vs_rect(r1: AxisAlignedRect, r2: AxisAlignedRect) -> Points:
    return polygon_vs_polygon(r1.as_polygon(), r2.as_polygon())


# ---------------------------------------------------------------- dispatch

# One entry per unordered pair; intersect() handles the reversed order.
INTERSECTIONS = {
    (Line, Line): line_vs_line,
    (Line, Segment): line_vs_segment,
    (Line, Ray): line_vs_ray,
    (Line, Circle): line_vs_circle,
    (Line, Polygon): line_vs_polygon,
    (Line, AxisAlignedRect): line_vs_rect,
    (Segment, Segment): segment_vs_segment,
    (Segment, Ray): segment_vs_ray,
    (Segment, Circle): segment_vs_circle,
    (Segment, Polygon): segment_vs_polygon,
    (Segment, AxisAlignedRect): segment_vs_rect,
    (Ray, Ray): ray_vs_ray,
    (Ray, Circle): ray_vs_circle,
    (Ray, Polygon): ray_vs_polygon,
    (Ray, AxisAlignedRect): ray_vs_rect,
    (Circle, Circle): circle_vs_circle,
    (Circle, Polygon): circle_vs_polygon,
    (Circle, AxisAlignedRect): circle_vs_rect,
    (Polygon, Polygon): polygon_vs_polygon,
    (Polygon, AxisAlignedRect): polygon_vs_rect,
    (AxisAlignedRect, AxisAlignedRect): rect_vs_rect,
}


def intersect(a, b) -> Points:
    """
    Intersect any two shapes by looking up the matching pairwise function.

    Raises:
        TypeError: if either operand is not one of the six shape kinds
    """
    func = INTERSECTIONS.get((type(a), type(b)))
    if func is not None:
        return func(a, b)
    func = INTERSECTIONS.get((type(b), type(a)))
    if func is not None:
        return func(b, a)
    raise TypeError(f"No intersection defined for {type(a).__name__} and {type(b).__name__}")
