## shared coordinate-tuple storage for geoprim points and vectors
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

"""coordinate tuples and template-style specialization

=====================
specialized classes
=====================

Every geoprim value type is parameterized by a scalar kind and a
dimension, which live on the *class* rather than on the instance.
Subscripting a generic class with ``[dtype, dim]`` returns a cached
subclass carrying those parameters: ::

   Vec3f = Vector[numpy.float32, 3]
   Vector[numpy.float32, 3] is Vec3f      # True, the class is cached
   Vec3f(1, 2, 3).dim                     # 3

The unsubscripted generic class behaves as its double-precision,
three-dimensional specialization would.

=================
coordinate tuples
=================

``Coords`` holds the coordinates of a point or vector in a private
``numpy`` array of the class's scalar kind.  It implements what points
and vectors have in common: indexing, scalar multiplication and
division, negation, metric distance, tolerant equality and conversion.
Addition and subtraction are left to ``Point`` and ``Vector``, because
that is where affine and linear combinations differ.

Values are independent: constructors copy their input, and every
operation returns a freshly allocated result.  The only mutation is
through item assignment and compound assignment on the receiver.

"""

from __future__ import annotations

import numpy as np

from geoprim.core import DIM3, EPS, SCALAR_KINDS, isgoodnum, scalar_kind
from geoprim.errors import DimensionError, GeometryError

## cache of specialized classes, keyed on (generic, scalar kind, dim)
_specializations = {}


def specialize(generic: type, dtype, dim: int) -> type:
    """Return the subclass of ``generic`` specialized for scalar kind
    ``dtype`` and dimension ``dim``, creating and caching it on first use.

    """
    kind = scalar_kind(dtype)
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim < 1:
        raise DimensionError('bad dimension: {!r}'.format(dim))
    dim = int(dim)

    key = (generic, kind, dim)
    cls = _specializations.get(key)
    if cls is None:
        name = '{}{}{}'.format(generic.__name__, dim, SCALAR_KINDS[kind])
        cls = type(generic)(name, (generic,), {
            '__module__': generic.__module__,
            '__qualname__': name,
            '_specialization': True,
            'dtype': kind,
            'dim': dim,
        })
        _specializations[key] = cls
    return cls


class Specializable:
    """Mixin giving a class the parameters ``dtype`` and ``dim``, and the
    ``Cls[dtype, dim]`` subscript that specializes it."""

    dtype = np.float64
    dim = DIM3
    eps = EPS

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get('_specialization', False):
            cls._generic = cls

    def __class_getitem__(cls, params):
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError('expected [dtype, dim], got {!r}'.format(params))
        dtype, dim = params
        return specialize(cls._generic, dtype, dim)


class Coords(Specializable):
    """Fixed-dimension tuple of coordinates stored in a numpy array."""

    __hash__ = None

    def __init__(self, *args):
        if not args:
            self._data = np.zeros(self.dim, dtype=self.dtype)
        elif len(args) == 1 and not isgoodnum(args[0]):
            self._data = self._coerce(args[0])
        else:
            if len(args) != self.dim:
                raise DimensionError(
                    '{} takes {} coordinates, got {}'.format(
                        type(self).__name__, self.dim, len(args)))
            if not all(isgoodnum(x) for x in args):
                raise GeometryError(
                    'bad values passed to {}: {!r}'.format(type(self).__name__, args))
            self._data = np.array(args, dtype=self.dtype)

    @classmethod
    def _coerce(cls, values) -> np.ndarray:
        """Return a fresh array of our scalar kind and dimension built from
        ``values``, which may be another coordinate tuple, a numpy array or
        any sequence of numbers."""
        if isinstance(values, Coords):
            values = values._data
        elif not isinstance(values, np.ndarray):
            values = list(values)
            if not all(isgoodnum(x) for x in values):
                raise GeometryError(
                    'bad values passed to {}: {!r}'.format(cls.__name__, values))
        data = np.array(values, dtype=cls.dtype)
        if data.shape != (cls.dim,):
            raise DimensionError(
                '{} needs {} coordinates, got shape {}'.format(
                    cls.__name__, cls.dim, data.shape))
        return data

    @classmethod
    def _wrap(cls, data) -> Coords:
        # data must be freshly computed; it is adopted, not copied
        obj = cls.__new__(cls)
        obj._data = np.asarray(data, dtype=cls.dtype)
        return obj

    def _operand(self, other, opname: str) -> np.ndarray:
        if isinstance(other, Coords):
            if other.dim != self.dim:
                raise DimensionError(
                    'dimension mismatch in {}: {} and {}'.format(
                        opname, self.dim, other.dim))
            return other._data
        return type(self)._coerce(other)

    ## access

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, index):
        return self._data[index].tolist()

    def __setitem__(self, index, value):
        self._data[index] = value

    def __iter__(self):
        return iter(self._data.tolist())

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def tolist(self) -> list:
        return self._data.tolist()

    def to_array(self) -> np.ndarray:
        """ return a copy of the coordinates as a numpy array"""
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def copy(self):
        return self._wrap(self._data.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    ## scalar arithmetic

    def __mul__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        with np.errstate(over='ignore', invalid='ignore'):
            return self._wrap(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        # dividing by (nearly) zero gives inf or nan, never an exception
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return self._wrap(np.true_divide(self._data, scalar))

    def __imul__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        with np.errstate(over='ignore', invalid='ignore'):
            self._data *= scalar
        return self

    def __itruediv__(self, scalar):
        if not isgoodnum(scalar):
            return NotImplemented
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            np.true_divide(self._data, scalar, out=self._data, casting='unsafe')
        return self

    def __neg__(self):
        return self._wrap(-self._data)

    ## metric

    def distance_squared(self, other) -> float:
        """ squared euclidean distance between two coordinate tuples"""
        diff = self._data - self._operand(other, 'distance_squared')
        return float(np.dot(diff, diff))

    def distance(self, other) -> float:
        """ euclidean distance between two coordinate tuples"""
        diff = self._data - self._operand(other, 'distance')
        return float(np.sqrt(np.dot(diff, diff)))

    ## comparison

    def __eq__(self, other):
        if not isinstance(other, Coords):
            return NotImplemented
        if self._generic is not other._generic or self.dim != other.dim:
            return False
        eps = max(type(self).eps, type(other).eps)
        return bool(np.all(np.abs(self._data - other._data) <= eps))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    ## formatting

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join(repr(x) for x in self._data.tolist()))

    def __str__(self):
        return '({})'.format(', '.join('{:g}'.format(x) for x in self._data.tolist()))


__all__ = [
    'Specializable',
    'Coords',
    'specialize',
]
