## scalar constants and tolerant scalar helpers for geoprim
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

"""scalar constants, scalar kinds and tolerant scalar helpers

=========
constants
=========

``EPS`` is the single tolerance used for every approximate comparison
in **geoprim**.  ``PI`` is spelled out to the precision of a double,
and ``DIM2`` and ``DIM3`` name the two dimensions that every type in
the library fully supports.

============
scalar kinds
============

Coordinates are stored in ``numpy`` arrays of one of two scalar kinds,
``numpy.float32`` (suffix ``f``) or ``numpy.float64`` (suffix ``d``).
The suffix is what the concrete aliases (``Vec2f``, ``Point3d``,
*etc.*) are named after.

=======
helpers
=======

The helpers are total: none of them raise, and none of them look at
anything but their arguments.  ``sign()`` is two-valued, and maps zero
to ``+1``.  ``equal()`` is a neighbourhood test, not an equivalence
relation; it is not transitive.

"""

from __future__ import annotations

import numpy as np

from geoprim.errors import ScalarKindError

## constants
EPS = 1e-6
PI = 3.14159265358979323846

DIM2 = 2
DIM3 = 3

## supported scalar kinds, and the suffix used in type names
SCALAR_KINDS = {np.float32: 'f',
                np.float64: 'd'}


def scalar_kind(dtype) -> type:
    """Return the numpy scalar type for ``dtype``, which may be anything
    ``numpy.dtype()`` accepts.  Only single and double precision
    floating point are supported.

    """
    try:
        kind = np.dtype(dtype).type
    except TypeError as exc:
        raise ScalarKindError('bad scalar kind: {!r}'.format(dtype)) from exc
    if kind not in SCALAR_KINDS:
        raise ScalarKindError('unsupported scalar kind: {!r}'.format(dtype))
    return kind


## utility function to determine if argument is a "real" number,
## since booleans are considered ints but should never be used as
## coordinates
def isgoodnum(n) -> bool:
    """ is the argument a real scalar number, and not a boolean?"""
    if isinstance(n, (bool, np.bool_)):
        return False
    return isinstance(n, (int, float, np.integer, np.floating))


## angular conversions
def deg2rad(x: float) -> float:
    """ degrees to radians"""
    return x * PI / 180.0


def rad2deg(x: float) -> float:
    """ radians to degrees"""
    return x * 180.0 / PI


## named so as not to shadow the builtins
def minimum(a, b):
    return a if a < b else b


def maximum(a, b):
    return a if a > b else b


def clamp(x, a, b):
    """ clamp ``x`` to the interval ``[a, b]``"""
    return minimum(maximum(x, a), b)


def lerp(a, b, t):
    """ linear interpolation `a + t*(b - a)`, with no clamping of ``t``"""
    return a + t * (b - a)


def absolute(x):
    return -x if x < 0 else x


def sqr(x):
    return x * x


def sign(x) -> int:
    """two-valued sign: -1 for negative numbers, +1 otherwise (including
    zero)"""
    return -1 if x < 0 else 1


## are two scalars the same to within EPS?
def equal(a, b) -> bool:
    """ are two scalars the same within ``EPS``"""
    return absolute(a - b) < EPS


def not_equal(a, b) -> bool:
    """ do two scalars differ by more than ``EPS``"""
    return absolute(a - b) > EPS


close = equal


__all__ = [
    'EPS',
    'PI',
    'DIM2',
    'DIM3',
    'SCALAR_KINDS',
    'scalar_kind',
    'isgoodnum',
    'deg2rad',
    'rad2deg',
    'minimum',
    'maximum',
    'clamp',
    'lerp',
    'absolute',
    'sqr',
    'sign',
    'equal',
    'not_equal',
    'close',
]
