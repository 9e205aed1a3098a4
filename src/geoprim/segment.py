## bounded line segments for geoprim
## Copyright (c) 2024 geoprim contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""bounded line segments

A ``LineSegment`` is a pair of points, ``start`` and ``end``, and
represents the points `lerp(start, end, t)` for `0 <= t <= 1`.
Parameters outside that interval are still meaningful to ``lerp()``,
and name points on the supporting line outside the segment.

A segment whose endpoints compare equal is *degenerate*.  Operations
that would divide by its squared length treat it as the single point
``start``.

=============
intersection
=============

Two segments intersect when they share a point to within ``eps``.  In
2D the intersection is found by solving the 2x2 linear system for the
two segment parameters.  In 3D the segments are first checked for
coplanarity: if their supporting lines pass each other at more than
``eps`` they do not intersect, otherwise the system is solved within
the common plane.  Parameters are accepted over `[0, 1]` widened by
`eps/length`, which is a distance tolerance of ``eps`` along each
segment.

Segments whose directions are parallel to within ``eps`` (as a sine),
and segments whose solved parameters fall outside that window, are
tested at a few candidate parameters along the receiver:
its ends, the feet of the other segment's ends and the closest
approach of the two supporting lines.  The first candidate within
``eps`` of the other segment is reported, which for collinear
overlapping segments is the first shared point along the receiver.
Every reported point lies within ``eps`` of both segments.

A degenerate segment intersects another when its point lies within
``eps`` of it.

The intersection family is: ::

   s1.is_intersecting(s2)      # bool
   s1.intersect(s2)            # Point or None
   s1.intersect_parameter(s2)  # parameter along s1, or None
   s1.intersection(s2)         # SegmentIntersection(point, t, u) or None

"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import numpy as np

from geoprim.coords import Specializable
from geoprim.core import DIM2, DIM3, clamp
from geoprim.errors import DimensionError
from geoprim.line import _meet, _parallel, _solve
from geoprim.point import Point
from geoprim.vector import Vector

logger = logging.getLogger(__name__)


def _point_segment_distance(q, p, d):
    """ distance from the array ``q`` to the segment `p + u*d`,
    `0 <= u <= 1`, and the parameter ``u`` of the closest point"""
    u = clamp(float(np.dot(q - p, d)) / float(np.dot(d, d)), 0.0, 1.0)
    diff = q - (p + u * d)
    return float(np.sqrt(np.dot(diff, diff))), u


class SegmentIntersection(NamedTuple):
    """Where two segments meet: the point, the parameter ``t`` along the
    first segment and the parameter ``u`` along the second."""
    point: Point
    t: float
    u: float


class LineSegment(Specializable):
    """Segment between two points of dimension ``dim``."""

    __hash__ = None

    def __init__(self, start=None, end=None):
        point = self._point_type()
        self._start = point() if start is None else point(start)
        self._end = point() if end is None else point(end)

    @classmethod
    def _point_type(cls) -> type:
        return Point[cls.dtype, cls.dim]

    def _as_point(self, p) -> Point:
        if isinstance(p, Point) and p.dim == self.dim:
            return p
        return self._point_type()(p)

    def _as_segment(self, other) -> LineSegment:
        if not isinstance(other, LineSegment):
            raise TypeError('expected a LineSegment, got {!r}'.format(other))
        if other.dim != self.dim:
            raise DimensionError(
                'dimension mismatch between segments: {} and {}'.format(self.dim, other.dim))
        return other

    @property
    def start(self) -> Point:
        return self._start.copy()

    @property
    def end(self) -> Point:
        return self._end.copy()

    @property
    def is_degenerate(self) -> bool:
        """ do the endpoints coincide to within ``eps``?"""
        return self._start == self._end

    def copy(self) -> LineSegment:
        return type(self)(self._start, self._end)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    ## metric

    def length(self) -> float:
        return self._start.distance(self._end)

    def length_squared(self) -> float:
        return self._start.distance_squared(self._end)

    def direction(self) -> Vector:
        """ `end - start`, not normalized"""
        return self._end - self._start

    ## parametric operations

    def lerp(self, t: float) -> Point:
        """ the point `start + t*(end - start)`; ``t`` is not clamped"""
        return self._start.lerp(self._end, t)

    def closest_parameter(self, p) -> float:
        """Parameter in ``[0, 1]`` of the point of the segment closest to
        ``p``.  A degenerate segment gives 0."""
        p = self._as_point(p)
        if self.is_degenerate:
            logger.debug('closest point requested on degenerate segment %r', self)
            return 0.0
        d = self._end._data - self._start._data
        t = np.dot(d, p._data - self._start._data) / np.dot(d, d)
        return clamp(float(t), 0.0, 1.0)

    def closest_point(self, p) -> Point:
        """ the point of the segment closest to ``p``"""
        return self.lerp(self.closest_parameter(p))

    def distance(self, p) -> float:
        p = self._as_point(p)
        return p.distance(self.closest_point(p))

    def distance_squared(self, p) -> float:
        p = self._as_point(p)
        return p.distance_squared(self.closest_point(p))

    ## relations

    def is_parallel(self, other) -> bool:
        return self.direction().is_parallel(other.direction())

    def is_perpendicular(self, other) -> bool:
        return self.direction().is_perpendicular(other.direction())

    ## extension along the unit direction

    def _unit_offset(self, distance: float) -> Vector:
        return self.direction().normalize() * distance

    def extend(self, distance: float) -> LineSegment:
        """ new segment with both ends pushed outward by ``distance``"""
        offset = self._unit_offset(distance)
        return type(self)(self._start - offset, self._end + offset)

    def extend_start(self, distance: float) -> LineSegment:
        offset = self._unit_offset(distance)
        return type(self)(self._start - offset, self._end)

    def extend_end(self, distance: float) -> LineSegment:
        offset = self._unit_offset(distance)
        return type(self)(self._start, self._end + offset)

    ## intersection

    def _hit(self, t: float, u: float) -> SegmentIntersection:
        return SegmentIntersection(self.lerp(t), t, u)

    def intersection(self, other) -> Optional[SegmentIntersection]:
        """Return where this segment meets ``other`` as a
        ``SegmentIntersection``, or ``None`` if they do not meet.  The
        reported point is within ``eps`` of both segments."""
        other = self._as_segment(other)
        if self.dim not in (DIM2, DIM3):
            raise DimensionError(
                'segment intersection needs 2D or 3D segments, not {}D'.format(self.dim))
        eps = self.eps

        if self.is_degenerate:
            if other.distance(self._start) <= eps:
                return self._hit(0.0, other.closest_parameter(self._start))
            return None
        if other.is_degenerate:
            if self.distance(other._start) <= eps:
                return self._hit(self.closest_parameter(other._start), 0.0)
            return None

        p1 = self._start._data.astype(np.float64)
        d1 = self._end._data.astype(np.float64) - p1
        p2 = other._start._data.astype(np.float64)
        d2 = other._end._data.astype(np.float64) - p2

        if _parallel(d1, d2, eps):
            return self._candidate_intersection(p1, d1, p2, d2)
        params = _meet(p1, d1, p2, d2, eps)
        if params is None:
            return None

        t, u = params
        tol1 = eps / float(np.sqrt(np.dot(d1, d1)))
        tol2 = eps / float(np.sqrt(np.dot(d2, d2)))
        if -tol1 <= t <= 1.0 + tol1 and -tol2 <= u <= 1.0 + tol2:
            t = clamp(t, 0.0, 1.0)
            gap, _ = _point_segment_distance(p1 + t * d1, p2, d2)
            if gap <= eps:
                return self._hit(t, clamp(u, 0.0, 1.0))
        # an end may still lie within eps of the other segment
        return self._candidate_intersection(p1, d1, p2, d2)

    def _candidate_intersection(self, p1, d1, p2, d2):
        # The gap between the two segments is convex in t, so if they
        # come within eps at all they do so at one of these parameters:
        # the ends of self, the feet of other's ends, or the closest
        # approach of the supporting lines.
        len1sq = float(np.dot(d1, d1))
        candidates = [0.0, 1.0]
        for q in (p2, p2 + d2):
            candidates.append(clamp(float(np.dot(q - p1, d1)) / len1sq, 0.0, 1.0))
        params = _solve(p1, d1, p2, d2, self.eps)
        if params is not None:
            candidates.append(clamp(params[0], 0.0, 1.0))

        for t in sorted(candidates):
            gap, u = _point_segment_distance(p1 + t * d1, p2, d2)
            if gap <= self.eps:
                return self._hit(t, u)
        return None

    def is_intersecting(self, other) -> bool:
        return self.intersection(other) is not None

    def intersect(self, other) -> Optional[Point]:
        """ the intersection point with ``other``, or ``None``"""
        result = self.intersection(other)
        return None if result is None else result.point

    def intersect_parameter(self, other) -> Optional[float]:
        """ the parameter along this segment of the intersection with
        ``other``, or ``None``"""
        result = self.intersection(other)
        return None if result is None else result.t

    ## comparison

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return (self.dim == other.dim and self._start == other._start
                and self._end == other._end)

    def __repr__(self):
        return '{}(start={}, end={})'.format(type(self).__name__, self._start, self._end)


__all__ = [
    'LineSegment',
    'SegmentIntersection',
]
