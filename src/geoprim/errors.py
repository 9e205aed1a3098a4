## exception types for geoprim
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

"""Exception types raised by **geoprim**.

Numerical domain problems (normalizing a zero vector, projecting onto
one, dividing by a tiny scalar) are *not* errors: they produce
non-finite values and the caller is expected to guard its inputs.
The exceptions here cover misuse that can be detected when a value is
built or when two operands are combined.
"""


class GeometryError(ValueError):
    """Base class for geoprim errors."""


class DimensionError(GeometryError):
    """Raised when operands, constructor arguments or an operation do not
    agree on dimension."""


class ScalarKindError(GeometryError, TypeError):
    """Raised for a scalar kind other than single or double precision
    floating point."""


__all__ = [
    'GeometryError',
    'DimensionError',
    'ScalarKindError',
]
