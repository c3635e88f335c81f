"""
Small point helpers shared by the collision shapes and the sensors.
"""

import math
from pygame.math import Vector2


def as_vector(point):
    """Coerce an (x, y) pair or Vector2 into a fresh Vector2."""
    return Vector2(point[0], point[1])


def distance_squared(p1, p2):
    """Calculate squared distance between two points (avoids sqrt for speed)."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    return dx * dx + dy * dy


def distance(p1, p2):
    """Calculate distance between two points."""
    return math.sqrt(distance_squared(p1, p2))


def contour_to_segments(points):
    """
    Convert a list of contour points to consecutive point pairs.

    Args:
        points: Sequence of polygon vertices

    Returns:
        List of (start, end) pairs, including the closing pair from the
        last vertex back to the first
    """
    if len(points) < 2:
        return []

    segments = []
    for i in range(len(points)):
        start = points[i]
        end = points[(i + 1) % len(points)]  # Wrap around to close the polygon
        segments.append((start, end))

    return segments
