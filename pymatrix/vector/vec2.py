"""Two-component vector."""

from __future__ import annotations

from dataclasses import dataclass

from pymatrix.core.scalar import Scalar
from pymatrix.vector._common import Vector


@dataclass(order=True)
class Vec2(Vector):
    """
    Vector (x, y).

    Converts to Mat[2, 1], so Mat[R, 2] @ Vec2 yields Mat[R, 1].
    """

    x: Scalar = 0.0
    y: Scalar = 0.0

    _FIELDS = ("x", "y")
