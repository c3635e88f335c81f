import pytest
from pygame.math import Vector2

from collision import (
    Circle, Line, Segment, StandardForm,
    circle_vs_standard_line, is_between, is_legal_segment,
    segment_intersections, standard_form, translate,
)
from helpers import assert_points


def test_standard_form_horizontal_line():
    form = standard_form(Line((0, 0), (10, 0)))
    assert (form.A, form.B, form.C) == (0, -10, 0)


def test_standard_form_satisfied_by_points_on_line():
    line = Line((1, 2), (3, 6))
    form = standard_form(line)
    assert (form.A, form.B, form.C) == (4, -2, 0)
    for x, y in [(1, 2), (3, 6), (2, 4), (-1, -2)]:
        assert form.A * x + form.B * y == pytest.approx(form.C)


def test_is_between_is_strict():
    assert is_between(0.5, 0.0, 1.0)
    assert not is_between(0.0, 0.0, 1.0)
    assert not is_between(1.0, 0.0, 1.0)
    assert not is_between(-0.1, 0.0, 1.0)


class TestIsLegalSegment:
    def test_inside_horizontal_segment(self):
        assert is_legal_segment(Vector2(5, 0), Segment((0, 0), (10, 0)))

    def test_endpoints_are_excluded(self):
        seg = Segment((0, 0), (10, 0))
        assert not is_legal_segment(Vector2(0, 0), seg)
        assert not is_legal_segment(Vector2(10, 0), seg)

    def test_beyond_segment(self):
        assert not is_legal_segment(Vector2(15, 0), Segment((0, 0), (10, 0)))
        assert not is_legal_segment(Vector2(-5, 0), Segment((0, 0), (10, 0)))

    def test_vertical_segment_uses_y_axis(self):
        seg = Segment((5, -5), (5, 5))
        assert is_legal_segment(Vector2(5, 0), seg)
        assert not is_legal_segment(Vector2(5, 6), seg)

    def test_reversed_segment(self):
        assert is_legal_segment(Vector2(3, 0), Segment((10, 0), (0, 0)))

    def test_zero_length_segment_accepts_nothing(self):
        seg = Segment((3, 3), (3, 3))
        assert not is_legal_segment(Vector2(3, 3), seg)
        assert not is_legal_segment(Vector2(4, 4), seg)

    def test_accepts_when_either_axis_is_inside(self):
        # Known quirk: the axes are OR-ed, so an off-line point passes as long
        # as one axis fraction is inside (0, 1). Callers only pass points that
        # are already on the segment's line.
        seg = Segment((0, 0), (10, 10))
        assert is_legal_segment(Vector2(5, 20), seg)
        assert not is_legal_segment(Vector2(20, 20), seg)


class TestSegmentIntersections:
    def test_single_segment_filter(self):
        seg = Segment((0, 0), (10, 0))
        result = segment_intersections([Vector2(5, 0), Vector2(20, 0)], seg)
        assert_points(result, [(5, 0)])

    def test_both_segments_must_accept(self):
        seg = Segment((0, 0), (10, 0))
        assert_points(segment_intersections([Vector2(5, 0)], seg, Segment((5, -5), (5, 5))), [(5, 0)])
        assert segment_intersections([Vector2(5, 0)], seg, Segment((5, 1), (5, 5))) == []

    def test_empty_candidates(self):
        assert segment_intersections([], Segment((0, 0), (1, 1))) == []

    def test_zero_valued_second_segment_is_a_real_segment(self):
        # A degenerate segment at the origin is still checked, not ignored
        seg = Segment((0, 0), (10, 0))
        assert segment_intersections([Vector2(5, 0)], seg, Segment((0, 0), (0, 0))) == []


class TestCircleVsStandardLine:
    def test_two_points_through_center(self):
        result = circle_vs_standard_line(Circle((0, 0), 5), StandardForm(0, -20, 0))
        assert_points(result, [(-5, 0), (5, 0)])

    def test_result_is_in_local_space(self):
        # Only the radius is used; the center is applied by the caller
        result = circle_vs_standard_line(Circle((100, 100), 5), StandardForm(0, -20, 0))
        assert_points(result, [(-5, 0), (5, 0)])

    def test_tangent_line_gives_nothing(self):
        assert circle_vs_standard_line(Circle((0, 0), 5), StandardForm(0, 1, 5)) == []

    def test_missing_line_gives_nothing(self):
        assert circle_vs_standard_line(Circle((0, 0), 5), StandardForm(0, 1, 6)) == []

    def test_degenerate_line_gives_nothing(self):
        assert circle_vs_standard_line(Circle((0, 0), 5), StandardForm(0, 0, 0)) == []


def test_translate_returns_new_points():
    points = [Vector2(1, 2), Vector2(-3, 4)]
    moved = translate(points, Vector2(10, 10))
    assert_points(moved, [(11, 12), (7, 14)])
    assert_points(points, [(1, 2), (-3, 4)])
    assert moved is not points
