# (C) 2024 Irreducible Inc.

from typing import TypeVar

from hypothesis import strategies as st

from multilinear_extensions.finite_fields.finite_field import FiniteFieldElem
from multilinear_extensions.multilinear.oracle import DenseOracle

F = TypeVar("F", bound=FiniteFieldElem)


def random_integers_strategy(
    min_value: int,
    max_value: int,
) -> st.SearchStrategy[int]:
    return st.builds(lambda rng: rng.randint(min_value, max_value), st.randoms(use_true_random=True))


def field_elements(field: type[F]) -> st.SearchStrategy[F]:
    return st.integers(0, field.field.order - 1).map(lambda i: field(field.field.from_index(i)))


def field_vectors(field: type[F], length: int) -> st.SearchStrategy[list[F]]:
    return st.lists(field_elements(field), min_size=length, max_size=length)


def dense_oracles(field: type[F], dim: int) -> st.SearchStrategy[DenseOracle[F]]:
    return field_vectors(field, 1 << dim).map(lambda values: DenseOracle(dim, values))


def oracles_with_points(field: type[F], max_dim: int) -> st.SearchStrategy[tuple[DenseOracle[F], list[F]]]:
    # an oracle of some dimension d ≤ max_dim together with a point of Fᵈ
    return st.integers(0, max_dim).flatmap(lambda d: st.tuples(dense_oracles(field, d), field_vectors(field, d)))
