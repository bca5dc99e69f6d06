# (C) 2024 Irreducible Inc.

from collections.abc import Sequence
from typing import TypeVar

from ..finite_fields.finite_field import FiniteFieldElem
from ..utils.utils import is_bit_set
from .errors import InconsistentDimensions

F = TypeVar("F", bound=FiniteFieldElem)


def eq_coordinate(field: type[F], b: F, z: F) -> F:
    """
    Evaluation of the multilinear polynomial which indicates the condition b == z, in a single variable.
    """
    return b * z + (field.one() - b) * (field.one() - z)


def eq(b: Sequence[F], z: Sequence[F], field: type[F] | None = None) -> F:
    """The multilinear Lagrange basis polynomial eq(b, z) = ∏ⱼ (bⱼ ⋅ zⱼ + (1 − bⱼ) ⋅ (1 − zⱼ)).

    Equal to 1 when z == b over the boolean domain and extending multilinearly elsewhere. `field` is only needed
    when both vectors are empty, where the value is the empty product.
    """
    if len(b) != len(z):
        raise InconsistentDimensions(b_dim=len(b), z_dim=len(z))
    if field is None:
        assert len(b) > 0, "the field of an empty product must be given"
        field = type(b[0])
    value = field.one()
    for b_j, z_j in zip(b, z):
        value *= eq_coordinate(field, b_j, z_j)
    return value


def one_minus(field: type[F], z: Sequence[F]) -> list[F]:
    return [field.one() - z_j for z_j in z]


def eq_at_index(field: type[F], index: int, z: Sequence[F], one_minus_z: Sequence[F]) -> F:
    # b is the hypercube point of `index`, so each factor of eq(b, z) is either zⱼ (bit j set) or 1 − zⱼ.
    assert len(z) == len(one_minus_z)
    assert index >> len(z) == 0
    value = field.one()
    for j in range(len(z)):
        value *= z[j] if is_bit_set(index, j) else one_minus_z[j]
    return value


def eq_over_hypercube(field: type[F], z: Sequence[F]) -> list[F]:
    """Evaluates eq(b, z) at every point b of the hypercube, in index order, with 2ᵈ multiplications."""
    array = [field.one()] * (1 << len(z))
    for k in range(len(z)):
        for i in range(1 << k):
            array[1 << k | i] = array[i] * z[k]
            array[i] -= array[1 << k | i]
    return array
