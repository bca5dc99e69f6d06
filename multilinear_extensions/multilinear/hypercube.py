# (C) 2024 Irreducible Inc.

"""Two encodings of a point of the boolean hypercube {0,1}^dim.

A point is either its index i in [0, 2^dim), where bit j of i (least-significant first) is coordinate j, or the
explicit tuple of field elements (b_0, ..., b_{dim-1}) with every b_j equal to zero or one.
"""

from collections.abc import Iterator, Sequence
from typing import TypeVar

from ..finite_fields.finite_field import FiniteFieldElem
from ..utils.utils import bits_to_int, int_to_bits
from .errors import IncorrectOraclePointDimension, NonbooleanOraclePoint

F = TypeVar("F", bound=FiniteFieldElem)


def num_points(dim: int) -> int:
    if dim < 0:
        raise ValueError(f"dimension must be non-negative, got {dim}")
    return 1 << dim


def to_hypercube_point(field: type[F], dim: int, index: int) -> tuple[F, ...]:
    assert 0 <= index < num_points(dim)
    zero, one = field.zero(), field.one()
    return tuple(one if bit else zero for bit in int_to_bits(index, dim))


def validate_hypercube_point(point: Sequence[FiniteFieldElem], dim: int) -> None:
    if len(point) != dim:
        raise IncorrectOraclePointDimension(expected=dim, found=len(point))
    if not all(coordinate.is_boolean() for coordinate in point):
        raise NonbooleanOraclePoint(point)


def from_hypercube_point(point: Sequence[FiniteFieldElem], dim: int) -> int:
    validate_hypercube_point(point, dim)
    return bits_to_int(1 if coordinate.is_one() else 0 for coordinate in point)


def hypercube_points(field: type[F], dim: int) -> Iterator[tuple[int, tuple[F, ...]]]:
    for index in range(num_points(dim)):
        yield index, to_hypercube_point(field, dim, index)
