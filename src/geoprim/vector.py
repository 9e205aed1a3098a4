## free vectors for geoprim
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

"""free vectors in 2 and 3 dimensions

A ``Vector`` is a direction with a magnitude.  Besides the component
algebra it shares with ``Point``, it provides the inner product, the
cross product, magnitude and normalization, projection and rejection,
and the angle between two vectors.

The cross product depends on dimension: for 3-vectors it is the usual
right-handed vector cross product, and for 2-vectors it is the scalar
perp-dot product `a0*b1 - a1*b0`.  Other dimensions have no cross
product.

None of the operations here raise on degenerate input.  Normalizing a
zero vector, projecting onto one, or taking an angle with one produces
non-finite components; callers are expected to check magnitudes first.

"""

from __future__ import annotations

import numpy as np

from geoprim.coords import Coords
from geoprim.core import DIM2, DIM3
from geoprim.errors import DimensionError


def _cross3(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.array([a[1]*b[2] - a[2]*b[1],
                     a[2]*b[0] - a[0]*b[2],
                     a[0]*b[1] - a[1]*b[0]])


def _cross2(a: np.ndarray, b: np.ndarray):
    return a[0]*b[1] - a[1]*b[0]


class Vector(Coords):
    """Free vector of ``dim`` coordinates of scalar kind ``dtype``."""

    ## linear combinations; a vector plus a point is handled by Point

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._wrap(self._data + self._operand(other, '+'))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._wrap(self._data - self._operand(other, '-'))

    def __iadd__(self, other):
        if not isinstance(other, Vector):
            if isinstance(other, Coords):
                # a vector plus a point is a point, which cannot be
                # stored in place
                raise TypeError('cannot add {} to a vector in place'.format(
                    type(other).__name__))
            return NotImplemented
        self._data += self._operand(other, '+=')
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._data -= self._operand(other, '-=')
        return self

    ## magnitude

    def magnitude_squared(self) -> float:
        return float(np.dot(self._data, self._data))

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._data, self._data)))

    def normalize(self) -> Vector:
        """Return a unit vector in the direction of this one.  The receiver
        is left unchanged.  A zero vector normalizes to non-finite
        components.

        """
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / np.sqrt(np.dot(self._data, self._data)))

    ## products

    def dot(self, other) -> float:
        """ inner product ``self . other``"""
        return float(np.dot(self._data, self._operand(other, 'dot')))

    def cross(self, other):
        """Cross product.  For 3-vectors, return the right-handed cross
        product as a vector.  For 2-vectors, return the scalar perp-dot
        product `a0*b1 - a1*b0`.

        """
        b = self._operand(other, 'cross')
        if self.dim == DIM3:
            return self._wrap(_cross3(self._data, b))
        if self.dim == DIM2:
            return float(_cross2(self._data, b))
        raise DimensionError(
            'cross product is only defined for 2D and 3D vectors, not {}D'.format(self.dim))

    def angle(self, other) -> float:
        """Angle in radians, in ``[0, pi]``, between two non-zero vectors.

        The cosine is clipped to ``[-1, 1]`` so that round-off on
        (anti)parallel vectors does not produce NaN.  A zero operand
        still does.
        """
        b = self._operand(other, 'angle')
        with np.errstate(divide='ignore', invalid='ignore'):
            cosine = np.dot(self._data, b) / (np.sqrt(np.dot(self._data, self._data))
                                             * np.sqrt(np.dot(b, b)))
            return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    def project(self, other) -> Vector:
        """ component of this vector along ``other``: `other * (a.b)/(b.b)`"""
        b = self._operand(other, 'project')
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(b * (np.dot(self._data, b) / np.dot(b, b)))

    def reject(self, other) -> Vector:
        """ component of this vector orthogonal to ``other``"""
        return self - self.project(other)

    ## relations

    def is_parallel(self, other) -> bool:
        """ is the cross product of the two vectors shorter than ``eps``?"""
        c = self.cross(other)
        if isinstance(c, Vector):
            return c.magnitude() < self.eps
        return abs(c) < self.eps

    def is_perpendicular(self, other) -> bool:
        """ is the inner product of the two vectors smaller than ``eps``?"""
        return abs(self.dot(other)) < self.eps


def triple(a: Vector, b: Vector, c: Vector) -> Vector:
    """ vector triple product `a x (b x c)` of three 3-vectors"""
    for v in (a, b, c):
        if not isinstance(v, Vector) or v.dim != DIM3:
            raise DimensionError('triple product is only defined for 3D vectors')
    return a.cross(b.cross(c))


__all__ = [
    'Vector',
    'triple',
]
