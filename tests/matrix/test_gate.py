"""
Tests for the dimension compatibility gate on matrix multiplication.

The gate decides from operand classes alone. Incompatible pairs leave the
operator undefined: Python raises TypeError and no element is read.
"""

import pytest

from pymatrix import Mat, Vec2, Vec3, Vec4
from pymatrix.matrix import can_multiply, product_type
from pymatrix.matrix._gate import dims_equal


class TestProductType:
    """product_type(left, right) is Mat[LR, RC] when LC == RR."""

    def test_compatible(self):
        assert product_type(Mat[2, 3], Mat[3, 4]) is Mat[2, 4]

    def test_incompatible(self):
        assert product_type(Mat[2, 3], Mat[2, 2]) is None

    def test_column_result(self):
        assert product_type(Mat[4, 2], Mat[2, 1]) is Mat[4, 1]

    def test_outer_product_shape(self):
        assert product_type(Mat[4, 1], Mat[1, 3]) is Mat[4, 3]

    def test_unshaped_never_multiplies(self):
        assert product_type(Mat, Mat[2, 2]) is None

    def test_memoized(self):
        product_type(Mat[5, 6], Mat[6, 7])
        hits = product_type.cache_info().hits
        product_type(Mat[5, 6], Mat[6, 7])
        assert product_type.cache_info().hits == hits + 1

    def test_dims_equal(self):
        assert dims_equal(3, 3)
        assert not dims_equal(3, 2)


class TestCanMultiply:
    """can_multiply accepts classes, vector classes and instances."""

    def test_classes(self):
        assert can_multiply(Mat[2, 3], Mat[3, 2])
        assert not can_multiply(Mat[2, 3], Mat[2, 2])

    def test_instances(self):
        assert can_multiply(Mat[2, 3].zero(), Mat[3, 1].zero())

    def test_vectors_as_columns(self):
        assert can_multiply(Mat[4, 2], Vec2)
        assert can_multiply(Mat[1, 3], Vec3(1.0, 2.0, 3.0))
        assert not can_multiply(Mat[4, 3], Vec4)

    def test_vec4_on_left(self):
        assert can_multiply(Vec4, Mat[1, 3])
        assert not can_multiply(Vec4, Mat[2, 3])


class TestIncompatibleProductsUndefined:
    """Mismatched products raise TypeError from the operator protocol."""

    def test_2x3_times_2x2(self):
        with pytest.raises(TypeError, match=r"unsupported operand type\(s\) for @"):
            Mat[2, 3].zero() @ Mat[2, 2].zero()

    def test_star_alias(self):
        with pytest.raises(TypeError, match=r"unsupported operand type\(s\) for \*"):
            Mat[2, 3].zero() * Mat[2, 2].zero()

    def test_message_names_both_shapes(self):
        with pytest.raises(TypeError, match=r"'Mat\[2, 3\]' and 'Mat\[2, 2\]'"):
            Mat[2, 3].zero() @ Mat[2, 2].zero()

    def test_rejected_regardless_of_values(self):
        # elements are irrelevant: only the classes decide
        a = Mat([[float("nan"), 1.0, 2.0], [3.0, 4.0, 5.0]])
        b = Mat([[1.0, 0.0], [0.0, 1.0]])
        with pytest.raises(TypeError):
            a @ b

    def test_non_matrix_operand(self):
        with pytest.raises(TypeError):
            Mat[2, 2].zero() @ 2.0

    def test_transposed_order(self):
        a = Mat[2, 3].zero()
        b = Mat[3, 4].zero()
        assert type(a @ b) is Mat[2, 4]
        with pytest.raises(TypeError):
            b @ a
