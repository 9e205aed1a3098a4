## unbounded lines for geoprim
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

"""unbounded lines

A ``Line`` is an anchor point and a direction vector, and represents
the set `anchor + t*direction` for every real ``t``.  The direction is
not normalized; parametric operations use it as given.  Distance
computations assume it is not the zero vector.

Lines are built either through two points, in which case the first
point is the anchor and the direction runs from the first point to the
second, or from an anchor point and a direction ``Vector``: ::

   l1 = Line2d((0, 0), (2, 1))                  # through two points
   l2 = Line2d((0, 0), Vec2d(2, 1))             # anchor and direction
   l3 = Line2d.from_direction((0, 0), (2, 1))   # same as l2

"""

from __future__ import annotations

import logging

import numpy as np

from geoprim.coords import Specializable
from geoprim.core import DIM2, DIM3
from geoprim.errors import DimensionError
from geoprim.point import Point
from geoprim.vector import Vector, _cross2, _cross3

logger = logging.getLogger(__name__)


def _parallel(d1, d2, eps) -> bool:
    """ is the sine of the angle between two direction arrays at most
    ``eps``?  Zero-length directions count as parallel."""
    len1 = np.sqrt(np.dot(d1, d1))
    len2 = np.sqrt(np.dot(d2, d2))
    if d1.shape[0] == DIM2:
        sine = abs(_cross2(d1, d2))
    else:
        n = _cross3(d1, d2)
        sine = np.sqrt(np.dot(n, n))
    return bool(sine <= eps * len1 * len2)


def _solve(p1, d1, p2, d2, eps):
    """Solve `p1 + t*d1 = p2 + u*d2` for ``(t, u)`` with no parallel test.

    Return ``None`` only when the directions are exactly parallel, or when
    in 3D the two lines pass each other at a distance greater than ``eps``.
    For 3D lines within ``eps`` of each other the result is the pair of
    parameters of closest approach.
    """
    r = p2 - p1
    if p1.shape[0] == DIM2:
        denom = _cross2(d1, d2)
        if denom == 0:
            return None
        return float(_cross2(r, d2) / denom), float(_cross2(r, d1) / denom)

    n = _cross3(d1, d2)
    nn = np.dot(n, n)
    if nn == 0:
        return None
    if abs(np.dot(n, r)) > eps * np.sqrt(nn):
        return None             # skew
    return (float(np.dot(_cross3(r, d2), n) / nn),
            float(np.dot(_cross3(r, d1), n) / nn))


def _meet(p1, d1, p2, d2, eps):
    """Solve `p1 + t*d1 = p2 + u*d2` for ``(t, u)``.

    The arguments are numpy arrays of dimension 2 or 3.  Return ``None``
    if the directions are parallel, meaning the sine of the angle between
    them is at most ``eps``, or if in 3D the two lines pass each other at
    a distance greater than ``eps``.

    In 2D this is Cramer's rule on the 2x2 system.  In 3D, with
    `n = d1 x d2` and `r = p2 - p1`, the lines are coplanar when
    `|n . r| <= eps*|n|`, and the system is then solved within the
    common plane.
    """
    dim = p1.shape[0]
    if dim not in (DIM2, DIM3):
        raise DimensionError('intersection needs 2D or 3D operands, not {}D'.format(dim))
    if _parallel(d1, d2, eps):
        return None
    return _solve(p1, d1, p2, d2, eps)


class Line(Specializable):
    """Unbounded line `anchor + t*direction` of dimension ``dim``."""

    __hash__ = None

    def __init__(self, anchor, through):
        point = self._point_type()
        self._anchor = point(anchor)
        if isinstance(through, Vector):
            self._direction = self._vector_type()(through)
        else:
            self._direction = point(through) - self._anchor

    @classmethod
    def through(cls, p1, p2) -> Line:
        """ line through two points, anchored at the first"""
        return cls(p1, cls._point_type()(p2))

    @classmethod
    def from_direction(cls, anchor, direction) -> Line:
        """ line through ``anchor`` along ``direction``"""
        return cls(anchor, cls._vector_type()(direction))

    @classmethod
    def _point_type(cls) -> type:
        return Point[cls.dtype, cls.dim]

    @classmethod
    def _vector_type(cls) -> type:
        return Vector[cls.dtype, cls.dim]

    def _as_point(self, p) -> Point:
        if isinstance(p, Point) and p.dim == self.dim:
            return p
        return self._point_type()(p)

    @property
    def anchor(self) -> Point:
        return self._anchor.copy()

    def direction(self) -> Vector:
        return self._direction.copy()

    def copy(self) -> Line:
        return type(self)(self._anchor, self._direction)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    ## parametric operations

    def point_at(self, t: float) -> Point:
        """ the point `anchor + t*direction`; ``t`` is unbounded"""
        return self._anchor + self._direction * t

    def closest_parameter(self, p) -> float:
        """ parameter of the point on the line closest to ``p``"""
        p = self._as_point(p)
        d = self._direction._data
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.dot(p._data - self._anchor._data, d) / np.dot(d, d))

    def closest_point(self, p) -> Point:
        return self.point_at(self.closest_parameter(p))

    ## metric

    def distance_squared(self, p) -> float:
        p = self._as_point(p)
        return p.distance_squared(self.closest_point(p))

    def distance(self, other) -> float:
        """Distance from a point to this line, or between two lines.

        For two 3D lines this is `|n . (p1 - p2)| / |n|` with
        `n = d1 x d2`.  Two 2D lines that are not parallel meet, so
        their distance is zero.  Parallel lines fall back to the distance
        from the other line's anchor to this line.
        """
        if isinstance(other, Line):
            return self._line_distance(other)
        p = self._as_point(other)
        return p.distance(self.closest_point(p))

    def _line_distance(self, other: Line) -> float:
        if other.dim != self.dim:
            raise DimensionError(
                'dimension mismatch in distance: {} and {}'.format(self.dim, other.dim))
        d1 = self._direction
        d2 = other._direction
        if self.dim == DIM3:
            n = d1.cross(d2)
            nmag = n.magnitude()
            if nmag >= self.eps:
                return abs(n.dot(self._anchor - other._anchor)) / nmag
        elif self.dim == DIM2:
            if abs(d1.cross(d2)) >= self.eps:
                return 0.0
        else:
            raise DimensionError(
                'line distance needs 2D or 3D lines, not {}D'.format(self.dim))
        logger.debug('parallel lines in distance(), measuring from anchor %s', other._anchor)
        return self.distance(other._anchor)

    def contains(self, p) -> bool:
        return self.distance(p) < self.eps

    ## relations

    def is_parallel(self, other) -> bool:
        return self._direction.is_parallel(other.direction())

    def is_perpendicular(self, other) -> bool:
        return self._direction.is_perpendicular(other.direction())

    def intersect(self, other: Line):
        """Return the point where two lines meet, or ``None`` if they are
        parallel or, in 3D, skew."""
        if other.dim != self.dim:
            raise DimensionError(
                'dimension mismatch in intersect: {} and {}'.format(self.dim, other.dim))
        params = _meet(self._anchor._data.astype(np.float64),
                       self._direction._data.astype(np.float64),
                       other._anchor._data.astype(np.float64),
                       other._direction._data.astype(np.float64),
                       self.eps)
        if params is None:
            return None
        return self.point_at(params[0])

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return (self.dim == other.dim and self._anchor == other._anchor
                and self._direction == other._direction)

    def __repr__(self):
        return '{}(anchor={}, direction={})'.format(
            type(self).__name__, self._anchor, self._direction)


__all__ = [
    'Line',
]
