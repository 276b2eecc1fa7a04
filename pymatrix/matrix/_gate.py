"""
Dimension compatibility for matrix multiplication.

Shape classes carry their dimensions as class attributes, so whether two
operands can be multiplied is a property of their types alone. The proof
is derived once per pair of classes and memoized; the multiplication
operators consult it before touching any element and return
NotImplemented for incompatible pairs, which leaves the operator
undefined for those types.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any


def dims_equal(a: int, b: int) -> bool:
    """Equality of two dimension constants."""
    return a == b


@lru_cache(maxsize=None)
def product_type(left: type, right: type) -> type | None:
    """
    Result class of left @ right, or None when the product does not exist.

    Args:
        left: Shape class Mat[LR, LC]
        right: Shape class Mat[RR, RC]

    Returns:
        Mat[LR, RC] if LC == RR, otherwise None. Unshaped classes never
        multiply.
    """
    lr, lc = getattr(left, "ROWS", None), getattr(left, "COLS", None)
    rr, rc = getattr(right, "ROWS", None), getattr(right, "COLS", None)
    if None in (lr, lc, rr, rc):
        return None
    if not dims_equal(lc, rr):
        return None
    return left.with_shape(lr, rc)


def _operand_class(operand: Any) -> type:
    cls = operand if isinstance(operand, type) else type(operand)
    # vectors take part through their column form
    column_type = getattr(cls, "column_type", None)
    if column_type is not None:
        return column_type()
    return cls


def can_multiply(left: Any, right: Any) -> bool:
    """
    Whether left @ right is defined.

    Accepts shape classes, vector classes, or instances of either.
    """
    return product_type(_operand_class(left), _operand_class(right)) is not None
