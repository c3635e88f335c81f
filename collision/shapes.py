"""
Collision shape value types.

Every shape is an immutable value (frozen dataclass). Points may be passed as
(x, y) pairs or pygame Vector2 and are stored as private Vector2 copies.

Frozen only stops fields from being rebound: the stored Vector2 objects are
still mutable, so callers must not modify them in place (seg.p1.x = ...).
Shapes are unhashable because Vector2 is.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from pygame.math import Vector2

from utils.geometry import as_vector, contour_to_segments

# Ray.as_segment() stretches the origin->through delta by this factor
RAY_LENGTH_FACTOR = 1000.0


def _freeze_points(instance, *names):
    for name in names:
        object.__setattr__(instance, name, as_vector(getattr(instance, name)))


@dataclass(frozen=True)
class Line:
    """Infinite line through p1 and p2."""

    p1: Vector2
    p2: Vector2

    def __post_init__(self):
        _freeze_points(self, 'p1', 'p2')


@dataclass(frozen=True)
class Segment:
    """Bounded line segment from p1 to p2."""

    p1: Vector2
    p2: Vector2

    def __post_init__(self):
        _freeze_points(self, 'p1', 'p2')

    def as_line(self) -> Line:
        return Line(self.p1, self.p2)


@dataclass(frozen=True)
class Ray:
    """
    Half-infinite ray starting at pos and passing through dir.

    Note that dir is a point on the ray, not a unit direction.
    """

    pos: Vector2
    dir: Vector2

    def __post_init__(self):
        _freeze_points(self, 'pos', 'dir')

    def as_line(self) -> Line:
        return Line(self.pos, self.dir)

    def as_segment(self) -> Segment:
        """Finite stand-in for the ray: pos to pos + (dir - pos) * RAY_LENGTH_FACTOR."""
        # Anchored at pos; an unanchored (dir - pos) * factor end only matches for rays from the origin
        return Segment(self.pos, self.pos + (self.dir - self.pos) * RAY_LENGTH_FACTOR)


@dataclass(frozen=True)
class Circle:
    pos: Vector2
    radius: float

    def __post_init__(self):
        _freeze_points(self, 'pos')
        object.__setattr__(self, 'radius', float(self.radius))


@dataclass(frozen=True)
class Polygon:
    """
    Closed polygon given by its ordered vertices.

    The last vertex connects back to the first. Concave and self-intersecting
    vertex loops are accepted as-is.
    """

    points: Tuple[Vector2, ...]

    def __post_init__(self):
        object.__setattr__(self, 'points', tuple(as_vector(p) for p in self.points))

    def edges(self) -> Sequence[Segment]:
        """Edge segments in vertex order, closing edge last."""
        return [Segment(start, end) for start, end in contour_to_segments(self.points)]


@dataclass(frozen=True)
class AxisAlignedRect:
    """Axis-aligned rectangle with corner pos and size (width, height)."""

    pos: Vector2
    size: Vector2

    def __post_init__(self):
        _freeze_points(self, 'pos', 'size')

    def as_polygon(self) -> Polygon:
        return Polygon((
            self.pos,
            (self.pos.x + self.size.x, self.pos.y),
            self.pos + self.size,
            (self.pos.x, self.pos.y + self.size.y),
        ))
