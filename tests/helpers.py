import pytest


def assert_points(actual, expected, abs_tol=1e-6):
    """Ordered comparison of Vector2 results against (x, y) pairs."""
    assert len(actual) == len(expected), f"{list(actual)} != {expected}"
    for point, (x, y) in zip(actual, expected):
        assert point.x == pytest.approx(x, abs=abs_tol)
        assert point.y == pytest.approx(y, abs=abs_tol)


def sorted_points(points):
    return sorted(points, key=lambda p: (round(p.x, 3), round(p.y, 3)))


def assert_same_point_set(a, b, abs_tol=1e-6):
    """Unordered comparison of two result lists."""
    assert_points(sorted_points(a), [(p.x, p.y) for p in sorted_points(b)], abs_tol)
