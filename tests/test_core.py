import math

import numpy as np
import pytest

from geoprim.core import *
from geoprim.errors import ScalarKindError
## unit tests for geoprim core.py


class TestConstants:
    """scalar constants"""

    def test_values(self):
        assert EPS == 1e-6
        assert math.isclose(PI, math.pi)
        assert DIM2 == 2
        assert DIM3 == 3

    def test_angles(self):
        assert math.isclose(deg2rad(180.0), PI)
        assert math.isclose(deg2rad(90.0), PI / 2)
        assert math.isclose(rad2deg(PI / 2), 90.0)
        assert math.isclose(rad2deg(deg2rad(37.5)), 37.5)


class TestHelpers:
    def test_min_max_clamp(self):
        assert minimum(1, 2) == 1
        assert maximum(1, 2) == 2
        assert minimum(-3.5, -3.4) == -3.5
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    def test_lerp_is_unclamped(self):
        assert lerp(2.0, 4.0, 0.5) == 3.0
        assert lerp(0.0, 10.0, 0.0) == 0.0
        assert lerp(0.0, 10.0, 1.0) == 10.0
        assert lerp(0.0, 10.0, 1.5) == 15.0
        assert lerp(0.0, 10.0, -0.5) == -5.0

    def test_abs_sqr(self):
        assert absolute(-3) == 3
        assert absolute(3) == 3
        assert sqr(-3) == 9
        assert sqr(0.5) == 0.25

    def test_sign_is_two_valued(self):
        assert sign(-2) == -1
        assert sign(5) == 1
        assert sign(0) == 1
        assert sign(0.0) == 1
        assert sign(-0.0) == 1


class TestTolerance:
    def test_equal(self):
        assert equal(1.0, 1.0)
        assert equal(1.0, 1.0 + 5e-7)
        assert not equal(1.0, 1.0 + 2e-6)
        assert close(2.0, 2.0 - 5e-7)

    def test_not_equal(self):
        assert not_equal(1.0, 1.0 + 2e-6)
        assert not not_equal(1.0, 1.0 + 5e-7)

    def test_equal_is_symmetric_but_not_transitive(self):
        a, b, c = 0.0, 0.6e-6, 1.2e-6
        assert equal(a, b) and equal(b, a)
        assert equal(b, c)
        assert not equal(a, c)


class TestScalarKinds:
    def test_isgoodnum(self):
        assert isgoodnum(3)
        assert isgoodnum(3.5)
        assert isgoodnum(np.float32(1.0))
        assert isgoodnum(np.int64(2))
        assert not isgoodnum(True)
        assert not isgoodnum(np.bool_(False))
        assert not isgoodnum('1')
        assert not isgoodnum([1])

    def test_scalar_kind(self):
        assert scalar_kind(np.float32) is np.float32
        assert scalar_kind('float32') is np.float32
        assert scalar_kind(float) is np.float64
        assert scalar_kind(np.dtype('float64')) is np.float64
        assert SCALAR_KINDS[np.float32] == 'f'
        assert SCALAR_KINDS[np.float64] == 'd'

    def test_bad_scalar_kind(self):
        with pytest.raises(ScalarKindError):
            scalar_kind(np.int32)
        with pytest.raises(ScalarKindError):
            scalar_kind(np.float16)
        with pytest.raises(TypeError):
            scalar_kind('bogus')
