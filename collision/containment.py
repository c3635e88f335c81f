"""
Point containment tests. Both exclude the boundary.
"""

from .shapes import AxisAlignedRect, Circle


def point_in_circle(p, c: Circle) -> bool:
    return (c.pos - p).length() < c.radius


def point_in_rect(p, r: AxisAlignedRect) -> bool:
    return (
        r.pos.x < p[0] < r.pos.x + r.size.x and
        r.pos.y < p[1] < r.pos.y + r.size.y
    )
