"""
Collision package - 2D shapes and their pairwise boundary intersections.
"""

from .shapes import Line, Segment, Ray, Circle, Polygon, AxisAlignedRect, RAY_LENGTH_FACTOR
from .algebra import EPSILON, StandardForm, standard_form, is_between, is_legal_segment, \
    segment_intersections, circle_vs_standard_line, translate
from .intersections import (
    INTERSECTIONS,
    intersect,
    line_vs_line, line_vs_segment, line_vs_ray, line_vs_circle, line_vs_polygon, line_vs_rect,
    segment_vs_segment, segment_vs_ray, segment_vs_circle, segment_vs_polygon, segment_vs_rect,
    ray_vs_ray, ray_vs_circle, ray_vs_polygon, ray_vs_rect,
    circle_vs_circle, circle_vs_polygon, circle_vs_rect,
    polygon_vs_polygon, polygon_vs_rect,
    rect_vs_rect,
)
from .containment import point_in_circle, point_in_rect

SHAPE_TYPES = (Line, Segment, Ray, Circle, Polygon, AxisAlignedRect)

__all__ = [
    'Line', 'Segment', 'Ray', 'Circle', 'Polygon', 'AxisAlignedRect', 'SHAPE_TYPES', 'RAY_LENGTH_FACTOR',
    'EPSILON', 'StandardForm', 'standard_form', 'is_between', 'is_legal_segment',
    'segment_intersections', 'circle_vs_standard_line', 'translate',
    'INTERSECTIONS', 'intersect',
    'line_vs_line', 'line_vs_segment', 'line_vs_ray', 'line_vs_circle', 'line_vs_polygon', 'line_vs_rect',
    'segment_vs_segment', 'segment_vs_ray', 'segment_vs_circle', 'segment_vs_polygon', 'segment_vs_rect',
    'ray_vs_ray', 'ray_vs_circle', 'ray_vs_polygon', 'ray_vs_rect',
    'circle_vs_circle', 'circle_vs_polygon', 'circle_vs_rect',
    'polygon_vs_polygon', 'polygon_vs_rect',
    'rect_vs_rect',
    'point_in_circle', 'point_in_rect',
]
