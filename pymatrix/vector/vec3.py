"""Three-component vector with cross product."""

from __future__ import annotations

from dataclasses import dataclass

from pymatrix.core.scalar import Scalar
from pymatrix.vector._common import Vector


@dataclass(order=True)
class Vec3(Vector):
    """
    Vector (x, y, z).

    Converts to Mat[3, 1], so Mat[R, 3] @ Vec3 yields Mat[R, 1].
    """

    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0

    _FIELDS = ("x", "y", "z")

    def cross(self, other: Vec3) -> Vec3:
        """
        Right-handed cross product self x other.

        Anti-commutative, and zero for parallel, anti-parallel or
        identical operands.

        Raises:
            TypeError: If other is not a Vec3
        """
        if not isinstance(other, Vec3):
            raise TypeError(f"cross: expected Vec3, got {type(other).__name__}")
        return Vec3(
            self.y * other.z - other.y * self.z,
            other.x * self.z - self.x * other.z,
            self.x * other.y - other.x * self.y,
        )
