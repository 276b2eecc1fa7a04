"""
Tests for Vec4, including Vec4 @ single-row matrix.
"""

import pytest

from pymatrix import Mat, Vec4


class TestVec4Basics:

    def test_new(self):
        vec = Vec4(1.0, 2.0, 3.0, 4.0)
        assert vec.x == 1.0
        assert vec.y == 2.0
        assert vec.z == 3.0
        assert vec.w == 4.0

    def test_zero(self):
        assert Vec4.zero() == Vec4(0.0, 0.0, 0.0, 0.0)

    def test_fill(self):
        assert Vec4.fill(1.0) == Vec4(1.0, 1.0, 1.0, 1.0)

    def test_add(self):
        assert Vec4(5.0, 5.0, 5.0, 5.0) + Vec4(1.0, 2.0, 3.0, 4.0) == Vec4(6.0, 7.0, 8.0, 9.0)

    def test_sub(self):
        assert Vec4(5.0, 5.0, 5.0, 5.0) - Vec4(1.0, 2.0, 3.0, 4.0) == Vec4(4.0, 3.0, 2.0, 1.0)

    def test_neg(self):
        assert -Vec4(1.0, 2.0, 3.0, 4.0) == Vec4(-1.0, -2.0, -3.0, -4.0)

    def test_dot(self):
        assert Vec4(5.0, 5.0, 5.0, 5.0).dot(Vec4(1.0, 2.0, 3.0, 4.0)) == 50.0

    def test_mag(self):
        assert Vec4(1.0, 1.0, 1.0, 1.0).mag() == 2.0

    def test_to_column(self):
        assert Vec4(1.0, 2.0, 3.0, 4.0).to_column() == Mat([[1.0], [2.0], [3.0], [4.0]])


class TestVec4RowProduct:
    """Vec4 @ Mat[1, C] expands to Mat[4, C]."""

    def test_mul_mat(self):
        result = Vec4(1.0, 2.0, 3.0, 4.0) @ Mat([[4.0, 3.0, 2.0, 1.0]])
        assert type(result) is Mat[4, 4]
        assert result == Mat([
            [4.0, 3.0, 2.0, 1.0],
            [8.0, 6.0, 4.0, 2.0],
            [12.0, 9.0, 6.0, 3.0],
            [16.0, 12.0, 8.0, 4.0],
        ])

    def test_star_alias(self):
        assert Vec4(1.0, 2.0, 3.0, 4.0) * Mat([[2.0]]) == Mat([[2.0], [4.0], [6.0], [8.0]])

    def test_narrow_row(self):
        result = Vec4(1.0, 0.0, -1.0, 2.0) @ Mat([[1.0, 10.0]])
        assert type(result) is Mat[4, 2]
        assert result == Mat([[1.0, 10.0], [0.0, 0.0], [-1.0, -10.0], [2.0, 20.0]])

    def test_multi_row_matrix_undefined(self):
        with pytest.raises(TypeError, match="unsupported operand"):
            Vec4(1.0, 2.0, 3.0, 4.0) @ Mat[2, 4].zero()

    def test_scalar_undefined(self):
        with pytest.raises(TypeError):
            Vec4(1.0, 2.0, 3.0, 4.0) @ 2.0
