"""
pymatrix: small fixed-dimension linear algebra for Python.

Vectors of 2, 3 and 4 components and rectangular matrices whose
dimensions are part of their type, over NumPy floating scalars. Meant as
a foundation layer for graphics, physics and simulation code.

Submodules:
    core: Exceptions, precision constants, scalar capability, validation
    vector: Vec2, Vec3, Vec4
    matrix: Mat, SquareMat and shape aliases
    prelude: Vec2, Vec3, Vec4 in one import
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    MixedPrecisionWarning,
)
from pymatrix.matrix import Mat, SquareMat, can_multiply
from pymatrix.vector import Vec2, Vec3, Vec4

__all__ = [
    "__version__",
    "Mat",
    "SquareMat",
    "can_multiply",
    "Vec2",
    "Vec3",
    "Vec4",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "MixedPrecisionWarning",
]
