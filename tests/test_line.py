import numpy as np
import pytest

from geoprim import (DimensionError, Line, Line2d, Line2f, Line3d, Point2d,
                     Point2f, Point3d, Vec2d, Vec3d, close)
## unit tests for geoprim line.py


class TestConstruction:
    def test_through_points(self):
        l = Line2d((1, 1), (3, 2))
        assert l.anchor == Point2d(1, 1)
        assert l.direction() == Vec2d(2, 1)
        assert Line2d.through((1, 1), (3, 2)) == l

    def test_from_direction(self):
        l = Line2d((1, 1), Vec2d(3, 2))
        assert l.anchor == Point2d(1, 1)
        assert l.direction() == Vec2d(3, 2)
        assert Line2d.from_direction((1, 1), (3, 2)) == l

    def test_generic_and_copies(self):
        l = Line((0, 0, 0), (1, 0, 0))
        assert l.dim == 3
        d = l.direction()
        d[0] = 7
        assert l.direction() == Vec3d(1, 0, 0)
        assert l.copy() == l

    def test_bad_dimension(self):
        with pytest.raises(DimensionError):
            Line2d((0, 0, 0), (1, 0))

    def test_repr(self):
        assert repr(Line2d((0, 0), (1, 2))) == 'Line2d(anchor=(0, 0), direction=(1, 2))'


class TestParametric:
    def test_point_at(self):
        l = Line2d((1, 1), Vec2d(2, 0))
        assert l.point_at(0) == Point2d(1, 1)
        assert l.point_at(1) == Point2d(3, 1)
        assert l.point_at(-2.5) == Point2d(-4, 1)

    def test_closest_point(self):
        l = Line2f((0, 0), (10, 0))
        assert l.closest_point((5, 7)) == Point2f(5, 0)
        assert l.closest_point((-3, 2)) == Point2f(-3, 0)
        assert close(l.closest_parameter((-3, 2)), -0.3)

    def test_closest_point_is_orthogonal(self):
        rng = np.random.default_rng(3)
        l = Line3d((1, 2, 3), Vec3d(1, -1, 2))
        for _ in range(10):
            p = Point3d(rng.uniform(-5, 5, 3))
            c = l.closest_point(p)
            assert abs((p - c).dot(l.direction())) < 1e-9
            assert l.contains(c)

    def test_point_distance(self):
        l = Line2d((0, 0), (10, 0))
        assert l.distance((5, 7)) == 7.0
        assert close(l.distance_squared((-3, 2)), 4.0)
        assert l.contains((25, 0))
        assert not l.contains((25, 1e-3))


class TestLineRelations:
    def test_skew_distance(self):
        a = Line3d((0, 0, 0), Vec3d(1, 0, 0))
        b = Line3d((0, 0, 3), Vec3d(0, 1, 0))
        assert close(a.distance(b), 3.0)
        assert close(b.distance(a), 3.0)

    def test_parallel_distance_3d(self):
        a = Line3d((0, 0, 0), Vec3d(1, 0, 0))
        b = Line3d((5, 2, 0), Vec3d(2, 0, 0))
        assert close(a.distance(b), 2.0)

    def test_distance_2d(self):
        a = Line2d((0, 0), (1, 0))
        assert a.distance(Line2d((0, 5), (1, 6))) == 0.0
        assert close(a.distance(Line2d((0, 4), Vec2d(3, 0))), 4.0)

    def test_distance_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            Line2d((0, 0), (1, 0)).distance(Line3d((0, 0, 0), (1, 0, 0)))

    def test_parallel_perpendicular(self):
        a = Line2d((0, 0), (1, 1))
        assert a.is_parallel(Line2d((5, 0), (7, 2)))
        assert a.is_perpendicular(Line2d((0, 0), Vec2d(1, -1)))
        assert not a.is_parallel(Line2d((0, 0), (1, 0)))

    def test_intersect_2d(self):
        a = Line2d((0, 0), (2, 2))
        b = Line2d((0, 2), (2, 0))
        assert a.intersect(b) == Point2d(1, 1)
        # lines are unbounded, so the meeting point need not lie between anchors
        c = Line2d((5, 0), (5, 1))
        assert a.intersect(c) == Point2d(5, 5)
        assert a.intersect(Line2d((0, 1), (1, 2))) is None

    def test_intersect_3d(self):
        a = Line3d((0, 0, 1), (1, 0, 1))
        b = Line3d((3, -2, 1), (3, 2, 1))
        assert a.intersect(b) == Point3d(3, 0, 1)
        skew = Line3d((3, -2, 2), (3, 2, 2))
        assert a.intersect(skew) is None

    def test_intersect_needs_2d_or_3d(self):
        l4 = Line[np.float64, 4]((0, 0, 0, 0), (1, 0, 0, 0))
        m4 = Line[np.float64, 4]((0, 0, 0, 0), (0, 1, 0, 0))
        with pytest.raises(DimensionError):
            l4.intersect(m4)
        with pytest.raises(DimensionError):
            l4.distance(m4)
        assert close(l4.distance((3, 4, 0, 0)), 4.0)


class TestLineInvariants:
    @pytest.mark.parametrize('t', [-100.0, -1.5, 0.0, 0.3, 42.0])
    def test_points_on_line(self, t):
        l = Line3d((1, 2, 3), Vec3d(0.5, -1, 2))
        assert l.distance(l.point_at(t)) < 1e-6
        assert close(l.closest_parameter(l.point_at(t)), t)

    @pytest.mark.parametrize('p', [(0, 0, 0), (5, -5, 5), (1, 2, 3)])
    def test_closest_point_minimizes(self, p):
        l = Line3d((1, 2, 3), Vec3d(0.5, -1, 2))
        c = l.closest_point(p)
        d = Point3d(p).distance(c)
        for dt in (-0.1, 0.1):
            other = l.point_at(l.closest_parameter(p) + dt)
            assert Point3d(p).distance(other) > d
