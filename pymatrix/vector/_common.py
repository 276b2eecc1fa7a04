"""
Shared behavior for the fixed-arity vector types.

Vec2, Vec3 and Vec4 are dataclasses whose fields are the components in
declared order. Everything that does not depend on the arity lives here
and works through the _FIELDS tuple each subclass declares.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.scalar import Scalar, result_dtype, sqrt, zero
from pymatrix.matrix._gate import can_multiply
from pymatrix.matrix.mat import Mat


def _require_same(left: Vector, right: Any, op: str) -> None:
    if type(right) is not type(left):
        raise TypeError(
            f"{op}: expected {type(left).__name__}, got {type(right).__name__}"
        )


class Vector:
    """
    Base class of Vec2, Vec3 and Vec4.

    Subclasses are dataclasses with order=True: equality and ordering are
    exact and lexicographic over the components.
    """

    _FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def arity(cls) -> int:
        return len(cls._FIELDS)

    @classmethod
    def column_type(cls) -> type[Mat]:
        """Shape class of the column form, Mat[N, 1]."""
        return Mat[cls.arity(), 1]

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, dtype: Any = None) -> Vector:
        """All components equal to the scalar zero."""
        return cls.fill(zero(dtype))

    @classmethod
    def fill(cls, value: Scalar) -> Vector:
        """All components equal to value."""
        return cls(*([value] * cls.arity()))

    @classmethod
    def from_column(cls, column: Mat) -> Vector:
        """
        Inverse of to_column().

        Raises:
            TypeError: If column is not a Mat[N, 1] for this arity
        """
        if type(column) is not cls.column_type():
            raise TypeError(
                f"{cls.__name__}.from_column: expected {cls.column_type().__name__}, "
                f"got {type(column).__name__}"
            )
        return cls(*(column[i, 0] for i in range(cls.arity())))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def components(self) -> tuple[Scalar, ...]:
        return tuple(getattr(self, name) for name in self._FIELDS)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.components())

    def __len__(self) -> int:
        return self.arity()

    def to_column(self) -> Mat:
        """Column matrix Mat[N, 1] whose rows are the components in order."""
        values = self.components()
        column = np.array(values, dtype=result_dtype(*values)).reshape(-1, 1)
        return self.column_type()._wrap(column)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        values = self.components()
        return np.array(values, dtype=result_dtype(*values))

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def dot(self, other: Vector) -> Scalar:
        """Sum of pairwise component products, accumulated in field order."""
        _require_same(self, other, "dot")
        return reduce(
            operator.add,
            (a * b for a, b in zip(self.components(), other.components())),
        )

    def mag(self) -> Scalar:
        """Euclidean length, sqrt(self.dot(self))."""
        return sqrt(self.dot(self))

    def __rmatmul__(self, other: Any) -> Mat:
        # Mat[R, N] @ VecN goes through the column form
        if not isinstance(other, Mat) or not can_multiply(other, type(self)):
            return NotImplemented
        return other @ self.to_column()

    __rmul__ = __rmatmul__

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def __neg__(self) -> Vector:
        return type(self)(*(-c for c in self.components()))

    def __add__(self, other: Any) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*map(operator.add, self.components(), other.components()))

    def __sub__(self, other: Any) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*map(operator.sub, self.components(), other.components()))

    def __iadd__(self, other: Any) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        for name in self._FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))
        return self

    def __isub__(self, other: Any) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        for name in self._FIELDS:
            setattr(self, name, getattr(self, name) - getattr(other, name))
        return self
