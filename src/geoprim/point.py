## points for geoprim
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

"""positions in 2 and 3 dimensions

A ``Point`` shares its representation with ``Vector`` but is a
different type, so that affine and linear combinations stay distinct:

* `Point - Point` is a ``Vector``,
* `Point + Vector` and `Point - Vector` are points,
* `Vector + Point` is a ``Point``.

`Point + Point` is kept as plain componentwise addition, which is what
sums of positions (for centroids, for instance) need.  Points never
compare equal to vectors.

"""

from __future__ import annotations

from geoprim.coords import Coords
from geoprim.vector import Vector


class Point(Coords):
    """Position given by ``dim`` coordinates of scalar kind ``dtype``."""

    def _vector_type(self) -> type:
        return Vector[self.dtype, self.dim]

    def __add__(self, other):
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return self._wrap(self._data + self._operand(other, '+'))

    def __radd__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._wrap(self._operand(other, '+') + self._data)

    def __sub__(self, other):
        if isinstance(other, Point):
            return self._vector_type()._wrap(self._data - self._operand(other, '-'))
        if isinstance(other, Vector):
            return self._wrap(self._data - self._operand(other, '-'))
        return NotImplemented

    ## compound assignment is componentwise and always leaves a point
    def __iadd__(self, other):
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        self._data += self._operand(other, '+=')
        return self

    def __isub__(self, other):
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        self._data -= self._operand(other, '-=')
        return self

    def lerp(self, other, t: float) -> Point:
        """ linear interpolation from this point toward ``other``; ``t`` is
        not clamped"""
        b = self._operand(other, 'lerp')
        return self._wrap(self._data + t * (b - self._data))

    def to_vector(self) -> Vector:
        """ the position vector of this point"""
        return self._vector_type()._wrap(self._data.copy())


__all__ = [
    'Point',
]
