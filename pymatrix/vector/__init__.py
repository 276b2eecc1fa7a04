"""
Fixed-arity vector types.

Public API:
    Vec2, Vec3, Vec4  - vectors of 2, 3 and 4 scalar components
    vector_type(n)    - the vector class of arity n
"""

from pymatrix.vector._common import Vector
from pymatrix.vector.vec2 import Vec2
from pymatrix.vector.vec3 import Vec3
from pymatrix.vector.vec4 import Vec4

_BY_ARITY = {cls.arity(): cls for cls in (Vec2, Vec3, Vec4)}


def vector_type(arity: int) -> type[Vector]:
    """
    Vector class with the given number of components.

    Raises:
        TypeError: If no vector type has that arity
    """
    try:
        return _BY_ARITY[arity]
    except KeyError:
        raise TypeError(f"no vector type with {arity} components") from None


__all__ = [
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "vector_type",
]
