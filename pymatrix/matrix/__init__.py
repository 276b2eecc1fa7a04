"""
Generic rectangular matrices.

Public API:
    Mat                 - unshaped entry point; Mat[R, C] names a shape class
    SquareMat           - base of the N x N shape classes (diagonal, identity)
    can_multiply(a, b)  - whether a @ b is defined for these shapes
    Mat2, Mat2x3, ...   - aliases of common shape classes
"""

from pymatrix.matrix._gate import can_multiply, product_type
from pymatrix.matrix.mat import Mat, SquareMat
from pymatrix.matrix.aliases import (
    Mat2, Mat3, Mat4,
    Mat2x2, Mat2x3, Mat2x4,
    Mat3x2, Mat3x3, Mat3x4,
    Mat4x2, Mat4x3, Mat4x4,
)

__all__ = [
    "Mat",
    "SquareMat",
    "can_multiply",
    "product_type",
    "Mat2", "Mat3", "Mat4",
    "Mat2x2", "Mat2x3", "Mat2x4",
    "Mat3x2", "Mat3x3", "Mat3x4",
    "Mat4x2", "Mat4x3", "Mat4x4",
]
