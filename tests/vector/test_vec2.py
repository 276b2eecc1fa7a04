"""
Tests for Vec2.
"""

import math

import numpy as np
import pytest

from pymatrix import Mat, Vec2, Vec3


class TestVec2:

    def test_new(self):
        vec = Vec2(1.0, 2.0)
        assert vec.x == 1.0
        assert vec.y == 2.0

    def test_default_is_zero(self):
        assert Vec2() == Vec2.zero()

    def test_zero(self):
        assert Vec2.zero() == Vec2(0.0, 0.0)

    def test_zero_dtype(self):
        assert type(Vec2.zero(np.float32).x) is np.float32

    def test_fill(self):
        assert Vec2.fill(1.0) == Vec2(1.0, 1.0)

    def test_add(self):
        assert Vec2(5.0, 5.0) + Vec2(1.0, 2.0) == Vec2(6.0, 7.0)

    def test_sub(self):
        assert Vec2(5.0, 5.0) - Vec2(1.0, 2.0) == Vec2(4.0, 3.0)

    def test_neg(self):
        assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)

    def test_add_assign(self):
        vec = Vec2(5.0, 5.0)
        alias = vec
        vec += Vec2(1.0, 2.0)
        assert vec is alias
        assert vec == Vec2(6.0, 7.0)

    def test_sub_assign(self):
        vec = Vec2(5.0, 5.0)
        vec -= Vec2(1.0, 2.0)
        assert vec == Vec2(4.0, 3.0)

    def test_dot(self):
        assert Vec2(5.0, 5.0).dot(Vec2(1.0, 2.0)) == 15.0

    def test_mag(self):
        assert Vec2(3.0, 4.0).mag() == 5.0

    def test_mag_of_zero_is_zero(self):
        assert Vec2.zero().mag() == 0.0

    def test_mag_inf(self):
        assert math.isinf(Vec2(float("inf"), 0.0).mag())

    def test_ordering_is_lexicographic(self):
        assert Vec2(1.0, 9.0) < Vec2(2.0, 0.0)
        assert Vec2(1.0, 1.0) < Vec2(1.0, 2.0)
        assert sorted([Vec2(2.0, 0.0), Vec2(1.0, 5.0)]) == [Vec2(1.0, 5.0), Vec2(2.0, 0.0)]

    def test_different_arity_undefined(self):
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) + Vec3(1.0, 2.0, 3.0)
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0).dot(Vec3(1.0, 2.0, 3.0))
        assert Vec2(1.0, 2.0) != Vec3(1.0, 2.0, 0.0)

    def test_to_column(self):
        column = Vec2(1.0, 2.0).to_column()
        assert type(column) is Mat[2, 1]
        assert column == Mat([[1.0], [2.0]])

    def test_from_column(self):
        assert Vec2.from_column(Mat([[3.0], [4.0]])) == Vec2(3.0, 4.0)

    def test_from_wrong_column(self):
        with pytest.raises(TypeError, match="expected Mat\\[2, 1\\]"):
            Vec2.from_column(Mat([[1.0], [2.0], [3.0]]))

    def test_sequence_protocol(self):
        assert tuple(Vec2(1.0, 2.0)) == (1.0, 2.0)
        assert len(Vec2()) == 2
        np.testing.assert_array_equal(Vec2(1.0, 2.0).to_numpy(), [1.0, 2.0])
