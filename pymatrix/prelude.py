"""
Common imports in one place.

    from pymatrix.prelude import *
"""

from pymatrix.vector import Vec2, Vec3, Vec4

__all__ = ["Vec2", "Vec3", "Vec4"]
