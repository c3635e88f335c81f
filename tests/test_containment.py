from pygame.math import Vector2

from collision import AxisAlignedRect, Circle, point_in_circle, point_in_rect


class TestPointInCircle:
    circle = Circle((0, 0), 5)

    def test_inside(self):
        assert point_in_circle(Vector2(3, 0), self.circle)
        assert point_in_circle((1, 1), self.circle)

    def test_boundary_is_outside(self):
        assert not point_in_circle(Vector2(5, 0), self.circle)
        assert not point_in_circle(Vector2(3, 4), self.circle)

    def test_outside(self):
        assert not point_in_circle(Vector2(6, 0), self.circle)


class TestPointInRect:
    rect = AxisAlignedRect((0, 0), (10, 10))

    def test_inside(self):
        assert point_in_rect(Vector2(5, 5), self.rect)
        assert point_in_rect((0.5, 9.5), self.rect)

    def test_boundary_is_outside(self):
        for p in [(0, 5), (10, 5), (5, 0), (5, 10), (0, 0), (10, 10)]:
            assert not point_in_rect(Vector2(p), self.rect)

    def test_outside(self):
        assert not point_in_rect(Vector2(11, 5), self.rect)
        assert not point_in_rect(Vector2(5, -1), self.rect)
