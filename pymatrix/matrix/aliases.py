"""
Names for the small shape classes.

These are the shape classes themselves, not wrappers: Mat2x3 is Mat[2, 3]
and behaves exactly like it. diagonal() and identity() exist on the
square ones only.
"""

from pymatrix.matrix.mat import Mat

Mat2 = Mat2x2 = Mat[2, 2]
Mat3 = Mat3x3 = Mat[3, 3]
Mat4 = Mat4x4 = Mat[4, 4]

Mat2x3 = Mat[2, 3]
Mat2x4 = Mat[2, 4]
Mat3x2 = Mat[3, 2]
Mat3x4 = Mat[3, 4]
Mat4x2 = Mat[4, 2]
Mat4x3 = Mat[4, 3]

__all__ = [
    "Mat2", "Mat3", "Mat4",
    "Mat2x2", "Mat2x3", "Mat2x4",
    "Mat3x2", "Mat3x3", "Mat3x4",
    "Mat4x2", "Mat4x3", "Mat4x4",
]
