"""Four-component vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymatrix.core.scalar import Scalar
from pymatrix.matrix._gate import can_multiply
from pymatrix.matrix.mat import Mat
from pymatrix.vector._common import Vector


@dataclass(order=True)
class Vec4(Vector):
    """
    Vector (x, y, z, w).

    Converts to Mat[4, 1], so Mat[R, 4] @ Vec4 yields Mat[R, 1]. A Vec4 may
    also stand on the left of a single-row matrix: Vec4 @ Mat[1, C] is the
    outer product Mat[4, C].
    """

    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0
    w: Scalar = 0.0

    _FIELDS = ("x", "y", "z", "w")

    def __matmul__(self, other: Any) -> Mat:
        if not isinstance(other, Mat) or not can_multiply(type(self), other):
            return NotImplemented
        return self.to_column() @ other

    __mul__ = __matmul__
