"""
Mat: generic rectangular matrix with dimensions fixed by its class.

Every matrix is an instance of a shape class Mat[R, C]. Shape classes are
created on first use and cached, so Mat[2, 3] always names the same class
and two matrices share a class exactly when they share a shape. Square
shape classes derive from SquareMat, which adds the constructors and the
in-place product that only make sense for N x N matrices.

Storage is a row-major numpy array of shape (R, C) owned by the instance.
Constructors copy their input and to_numpy() returns a copy.

Usage:
    >>> a = Mat([[1.0, 2.0], [3.0, 4.0]])          # Mat[2, 2]
    >>> a @ Mat[2, 2].identity() == a
    True
    >>> Mat[2, 3].zero() @ Mat[2, 2].zero()
    Traceback (most recent call last):
        ...
    TypeError: unsupported operand type(s) for @: 'Mat[2, 3]' and 'Mat[2, 2]'
"""

from __future__ import annotations

import warnings
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError, MixedPrecisionWarning
from pymatrix.core.scalar import one, resolve_dtype, result_dtype, zero
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_count,
    check_dimension,
    check_index,
    check_scalar,
    check_shape,
)
from pymatrix.matrix._gate import product_type


_SHAPE_CLASSES: dict[tuple[int, int], type[Mat]] = {}


def _shape_class(rows: Any, cols: Any) -> type[Mat]:
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    key = (rows, cols)
    cls = _SHAPE_CLASSES.get(key)
    if cls is None:
        base = SquareMat if rows == cols else Mat
        name = f"Mat[{rows}, {cols}]"
        created = type(name, (base,), {
            "__slots__": (),
            "__module__": __name__,
            "__qualname__": name,
            "ROWS": rows,
            "COLS": cols,
        })
        # setdefault keeps a single class per shape under concurrent creation
        cls = _SHAPE_CLASSES.setdefault(key, created)
    return cls


def _product(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Row-by-column product with a fixed accumulation order.

    Each output cell is accumulated from zero over k = 0, 1, ..., LC - 1,
    exactly as a scalar triple loop would. The loop runs over k only and
    updates every output cell at once, so rounding matches the scalar
    loop while avoiding per-element Python overhead. np.matmul is not
    used: BLAS kernels may reorder or fuse the sums.
    """
    acc = np.zeros((left.shape[0], right.shape[1]), dtype=np.result_type(left, right))
    for k in range(left.shape[1]):
        acc = acc + left[:, k:k + 1] * right[k:k + 1, :]
    return acc


def _warn_mixed(left: Mat, right: Mat, op: str, result: np.dtype | None = None) -> None:
    """
    Warn when the operands of a binary operation differ in dtype.

    Out-of-place results follow numpy promotion. In-place operations keep
    the receiver's storage, so their result dtype is passed explicitly.
    """
    if left.dtype != right.dtype:
        if result is None:
            result = np.result_type(left.dtype, right.dtype)
        warnings.warn(
            f"{op}: operands have dtypes {left.dtype} and {right.dtype}, "
            f"result uses {result}",
            MixedPrecisionWarning,
            stacklevel=3,
        )


class Row:
    """
    Row i of a matrix as a fixed-length window into its storage.

    Reads and writes go straight to the matrix. Column indices are checked
    against [0, C) like m[i, j]; negative indices do not wrap.
    """

    __slots__ = ("_data",)

    _data: NDArray[np.floating[Any]]

    def __init__(self, data: NDArray[np.floating[Any]]) -> None:
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: Any) -> Any:
        return self._data[check_index(index, len(self._data), "col")]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[check_index(index, len(self._data), "col")] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray:
        if copy is False:
            raise ValueError("Row storage cannot be shared; a copy is always made")
        return self._data.astype(dtype if dtype is not None else self._data.dtype)

    def tolist(self) -> list[Any]:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"Row({self._data.tolist()})"


class Mat:
    """
    Rectangular R x C matrix of floating-point scalars.

    Mat itself is unshaped: Mat(grid) infers the shape from the grid and
    returns an instance of the matching shape class. Mat[R, C] names the
    shape class directly; Mat[R, C](grid) rejects grids of any other
    shape.

    Operators:
        -a              elementwise negation
        a + b, a - b    elementwise, identical shape classes only
        a += b, a -= b  elementwise, in place; the receiver keeps its dtype
        a @ b, a * b    matrix product, Mat[LR, LC] x Mat[LC, RC] only
        a @= b, a *= b  in-place product, identical square classes only;
                        the receiver keeps its dtype

    Attributes:
        ROWS: Row count of the shape class (None on Mat itself)
        COLS: Column count of the shape class (None on Mat itself)
    """

    __slots__ = ("_data",)

    ROWS: int | None = None
    COLS: int | None = None

    # numpy must defer binary operators to this class instead of
    # converting it and broadcasting around the shape checks
    __array_ufunc__ = None

    _data: NDArray[np.floating[Any]]

    def __class_getitem__(cls, shape: Any) -> type[Mat]:
        if cls.ROWS is not None:
            raise TypeError(f"{cls.__name__} is already shaped")
        if not isinstance(shape, tuple) or len(shape) != 2:
            raise DimensionError(
                f"Mat[...] takes exactly two dimensions (rows, cols), got {shape!r}"
            )
        return _shape_class(*shape)

    def __new__(cls, grid: ArrayLike, dtype: Any = None) -> Mat:
        data = check_array(grid, "grid", dtype)
        check_2d(data, "grid")
        if cls.ROWS is None:
            shaped = _shape_class(*data.shape)
            if not issubclass(shaped, cls):
                raise DimensionError(
                    f"grid: {cls.__name__} requires a square grid, "
                    f"got {data.shape[0]}x{data.shape[1]}",
                    actual=data.shape,
                )
            cls = shaped
        else:
            check_shape(data, (cls.ROWS, cls.COLS), "grid")
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> Mat:
        """Adopt an array of the right shape without copying or checking."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def _require_shape(cls) -> tuple[int, int]:
        if cls.ROWS is None:
            raise TypeError(
                f"{cls.__name__} has no shape; use {cls.__name__}[R, C] to pick one"
            )
        return cls.ROWS, cls.COLS

    @classmethod
    def with_shape(cls, rows: int, cols: int) -> type[Mat]:
        """Shape class for the given dimensions (same as Mat[rows, cols])."""
        return _shape_class(rows, cols)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, *elements: Any, dtype: Any = None) -> Mat:
        """
        Build from R*C scalars given in row-major order.

        Mat[2, 2].of(1.0, 2.0, 3.0, 4.0) == Mat([[1.0, 2.0], [3.0, 4.0]])
        """
        rows, cols = cls._require_shape()
        check_count(elements, rows * cols, "elements")
        data = check_array(elements, "elements", dtype)
        return cls._wrap(data.reshape(rows, cols))

    @classmethod
    def fill(cls, value: Any, dtype: Any = None) -> Mat:
        """Every element equal to value."""
        shape = cls._require_shape()
        value = check_scalar(value, "value")
        dt = resolve_dtype(dtype) if dtype is not None else result_dtype(value)
        return cls._wrap(np.full(shape, value, dtype=dt))

    @classmethod
    def zero(cls, dtype: Any = None) -> Mat:
        """Every element equal to the scalar zero."""
        return cls.fill(zero(dtype))

    @classmethod
    def from_vector(cls, vector: Any) -> Mat:
        """Column matrix Mat[N, 1] holding the components of a VecN."""
        return vector.to_column()

    # ------------------------------------------------------------------
    # Shape and storage
    # ------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self.ROWS, self.COLS

    @property
    def rows(self) -> int:
        return self.ROWS

    @property
    def cols(self) -> int:
        return self.COLS

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_square(self) -> bool:
        return self.ROWS == self.COLS

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the element grid as a (R, C) array."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray:
        if copy is False:
            raise ValueError("Mat storage cannot be shared; a copy is always made")
        return self._data.astype(dtype if dtype is not None else self._data.dtype)

    def tolist(self) -> list[list[Any]]:
        return self._data.tolist()

    def to_vector(self) -> Any:
        """
        Vector holding the single column of a Mat[2|3|4, 1].

        Raises:
            TypeError: If this is not a column matrix of a vector arity
        """
        from pymatrix.vector import vector_type

        return vector_type(self.ROWS).from_column(self)

    def copy(self) -> Mat:
        return type(self)._wrap(self._data.copy())

    def __copy__(self) -> Mat:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Mat:
        return self.copy()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.ROWS

    def __iter__(self) -> Iterator[Row]:
        return (Row(row) for row in self._data)

    def __getitem__(self, index: Any) -> Any:
        """
        m[i] is row i as a writable length-C Row, m[i, j] the element.

        Raises:
            IndexError: If any index lies outside [0, R) or [0, C)
        """
        if isinstance(index, tuple):
            i, j = self._element_index(index)
            return self._data[i, j]
        return Row(self._data[check_index(index, self.ROWS, "row")])

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, tuple):
            i, j = self._element_index(index)
            self._data[i, j] = value
        else:
            self._data[check_index(index, self.ROWS, "row")] = value

    def _element_index(self, index: tuple) -> tuple[int, int]:
        if len(index) != 2:
            raise IndexError(f"expected (row, col), got {len(index)} indices")
        return (
            check_index(index[0], self.ROWS, "row"),
            check_index(index[1], self.COLS, "col"),
        )

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        suffix = "" if self.dtype == np.float64 else f", dtype={self.dtype}"
        return f"{type(self).__name__}({self._data.tolist()}{suffix})"

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def __neg__(self) -> Mat:
        return type(self)._wrap(-self._data)

    def __add__(self, other: Any) -> Mat:
        if type(other) is not type(self):
            return NotImplemented
        _warn_mixed(self, other, "+")
        return type(self)._wrap(self._data + other._data)

    def __sub__(self, other: Any) -> Mat:
        if type(other) is not type(self):
            return NotImplemented
        _warn_mixed(self, other, "-")
        return type(self)._wrap(self._data - other._data)

    def __iadd__(self, other: Any) -> Mat:
        if type(other) is not type(self):
            return NotImplemented
        _warn_mixed(self, other, "+=", self.dtype)
        np.add(self._data, other._data, out=self._data, casting="same_kind")
        return self

    def __isub__(self, other: Any) -> Mat:
        if type(other) is not type(self):
            return NotImplemented
        _warn_mixed(self, other, "-=", self.dtype)
        np.subtract(self._data, other._data, out=self._data, casting="same_kind")
        return self

    def scale(self, factor: Any) -> Mat:
        """Every element multiplied by a scalar factor."""
        return type(self)._wrap(self._data * factor)

    # ------------------------------------------------------------------
    # Matrix product
    # ------------------------------------------------------------------

    def __matmul__(self, other: Any) -> Mat:
        if not isinstance(other, Mat):
            return NotImplemented
        result_cls = product_type(type(self), type(other))
        if result_cls is None:
            return NotImplemented
        _warn_mixed(self, other, "@")
        return result_cls._wrap(_product(self._data, other._data))

    __mul__ = __matmul__

    def __imatmul__(self, other: Any) -> Mat:
        raise TypeError(
            f"in-place product requires identical square operands, "
            f"got {type(self).__name__} and {type(other).__name__}"
        )

    __imul__ = __imatmul__


class SquareMat(Mat):
    """
    Base of all N x N shape classes.

    SquareMat[N] is Mat[N, N]. SquareMat(grid) accepts square grids only.
    """

    __slots__ = ()

    def __class_getitem__(cls, n: Any) -> type[Mat]:
        if cls.ROWS is not None:
            raise TypeError(f"{cls.__name__} is already shaped")
        return _shape_class(n, n)

    @classmethod
    def diagonal(cls, value: Any, dtype: Any = None) -> SquareMat:
        """value on the main diagonal, zero elsewhere."""
        n, _ = cls._require_shape()
        value = check_scalar(value, "value")
        dt = resolve_dtype(dtype) if dtype is not None else result_dtype(value)
        data = np.zeros((n, n), dtype=dt)
        np.fill_diagonal(data, value)
        return cls._wrap(data)

    @classmethod
    def identity(cls, dtype: Any = None) -> SquareMat:
        """Multiplicative identity: diagonal(one)."""
        return cls.diagonal(one(dtype))

    def __imatmul__(self, other: Any) -> SquareMat:
        if type(other) is not type(self):
            return super().__imatmul__(other)
        _warn_mixed(self, other, "@=", self.dtype)
        # full product first; writing cell by cell would read overwritten entries
        product = _product(self._data, other._data)
        # stored in the receiver's dtype, as with += and -=
        self._data[...] = product
        return self

    __imul__ = __imatmul__
