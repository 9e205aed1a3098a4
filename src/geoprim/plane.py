## planes in 3D for geoprim
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

"""planes in three dimensions

A ``Plane`` is a unit normal ``n`` and a signed offset ``d``, and
represents the points ``x`` with `n . x = d`.  There are three ways to
build one: ::

   Plane(normal, 2.0)                  # normal and signed offset
   Plane(normal, point_on_plane)       # offset is normal . point
   Plane.from_points(p1, p2, p3)       # normal from (p2-p1) x (p3-p1)

Only ``from_points()`` normalizes the normal; the other two constructors
trust the caller to pass a unit vector.  Three collinear points give a
*degenerate* plane with a non-finite normal.  This is reported by
``is_degenerate`` rather than raised.

Positions may be given as points, vectors, or sequences of three
numbers.  ``distance()`` is signed and positive on the side the normal
points to.  ``project()`` returns a value of the same type as its
argument.

"""

from __future__ import annotations

import logging

import numpy as np

from geoprim.coords import Coords
from geoprim.core import DIM3, EPS, isgoodnum
from geoprim.errors import DimensionError
from geoprim.point import Point
from geoprim.vector import Vector

logger = logging.getLogger(__name__)


def _as_vector3(value) -> Vector:
    if isinstance(value, Coords):
        if value.dim != DIM3:
            raise DimensionError('planes are 3D only, got a {}D value'.format(value.dim))
        return Vector[value.dtype, DIM3](value)
    return Vector[np.float64, DIM3](value)


class Plane:
    """Plane `n . x = d` in three dimensions."""

    __hash__ = None
    eps = EPS

    def __init__(self, normal, offset):
        self._normal = _as_vector3(normal)
        if isgoodnum(offset):
            self._d = float(offset)
        else:
            self._d = self._normal.dot(_as_vector3(offset))
        if self.is_degenerate:
            logger.debug('degenerate plane: normal %s', self._normal)

    @classmethod
    def from_points(cls, p1, p2, p3) -> Plane:
        """Plane through three points, with normal
        `normalize((p2 - p1) x (p3 - p1))`.  Collinear points give a
        degenerate plane."""
        a = _as_vector3(p1)
        b = _as_vector3(p2)
        c = _as_vector3(p3)
        normal = (b - a).cross(c - a).normalize()
        return cls(normal, normal.dot(a))

    @property
    def normal(self) -> Vector:
        return self._normal.copy()

    @property
    def d(self) -> float:
        return self._d

    offset = d

    @property
    def is_degenerate(self) -> bool:
        """ is the normal non-finite or (nearly) zero?"""
        data = self._normal.to_array()
        if not np.all(np.isfinite(data)):
            return True
        return self._normal.magnitude() < self.eps

    def copy(self) -> Plane:
        return Plane(self._normal, self._d)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def distance(self, p) -> float:
        """ signed distance `n . p - d` of a position from the plane"""
        return self._normal.dot(_as_vector3(p)) - self._d

    def project(self, p):
        """ foot of the perpendicular from ``p`` to the plane, as the same
        type as ``p``"""
        if not isinstance(p, Coords):
            p = Point[np.float64, DIM3](p)
        return p - self._normal * self.distance(p)

    def contains(self, p) -> bool:
        return abs(self.distance(p)) < self.eps

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        eps = max(type(self).eps, type(other).eps)
        return self._normal == other._normal and abs(self._d - other._d) <= eps

    def __repr__(self):
        return 'Plane(normal={}, d={!r})'.format(self._normal, self._d)


__all__ = [
    'Plane',
]
