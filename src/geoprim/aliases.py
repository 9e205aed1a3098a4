## concrete type names for geoprim
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

"""concrete single- and double-precision types in 2 and 3 dimensions

The suffix names the scalar kind: ``f`` for ``numpy.float32`` and ``d``
for ``numpy.float64``.
"""

import numpy as np

from geoprim.core import DIM2, DIM3
from geoprim.line import Line
from geoprim.point import Point
from geoprim.segment import LineSegment
from geoprim.vector import Vector

Point2f = Point[np.float32, DIM2]
Point3f = Point[np.float32, DIM3]
Point2d = Point[np.float64, DIM2]
Point3d = Point[np.float64, DIM3]

Vec2f = Vector[np.float32, DIM2]
Vec3f = Vector[np.float32, DIM3]
Vec2d = Vector[np.float64, DIM2]
Vec3d = Vector[np.float64, DIM3]

LineSegment2f = LineSegment[np.float32, DIM2]
LineSegment3f = LineSegment[np.float32, DIM3]
LineSegment2d = LineSegment[np.float64, DIM2]
LineSegment3d = LineSegment[np.float64, DIM3]

Line2f = Line[np.float32, DIM2]
Line3f = Line[np.float32, DIM3]
Line2d = Line[np.float64, DIM2]
Line3d = Line[np.float64, DIM3]


__all__ = [
    'DIM2', 'DIM3',
    'Point2f', 'Point3f', 'Point2d', 'Point3d',
    'Vec2f', 'Vec3f', 'Vec2d', 'Vec3d',
    'LineSegment2f', 'LineSegment3f', 'LineSegment2d', 'LineSegment3d',
    'Line2f', 'Line3f', 'Line2d', 'Line3d',
]
