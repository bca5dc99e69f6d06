# (C) 2024 Irreducible Inc.

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from typing import Generic, Self, TypeVar

import numpy as np

from ..finite_fields.finite_field import FiniteFieldElem, RandomSource
from ..finite_fields.galois_field import GaloisFieldElem
from .errors import IncorrectOracleSize, PointNotFound
from .hypercube import (
    from_hypercube_point,
    hypercube_points,
    num_points,
    to_hypercube_point,
    validate_hypercube_point,
)

F = TypeVar("F", bound=FiniteFieldElem)
G = TypeVar("G", bound=GaloisFieldElem)

logger = logging.getLogger(__name__)


class BooleanHypercubeOracle(ABC, Generic[F]):
    """A read-only map from the boolean hypercube {0,1}^dim to a field, queryable in constant time.

    Points are addressed by index (bit j of the index is coordinate j) or by their explicit boolean tuple.
    Implementations own their storage and never mutate it after construction.
    """

    @property
    @abstractmethod
    def dim(self) -> int:
        pass

    @property
    @abstractmethod
    def field(self) -> type[F]:
        """The element class of the stored values."""
        pass

    @abstractmethod
    def query(self, index: int) -> F:
        """Returns f(point) for the point with the given index; raises PointNotFound outside [0, 2^dim)."""
        pass

    def query_point(self, point: Sequence[F]) -> F:
        return self.query(from_hypercube_point(point, self.dim))

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[int, F]]:
        """A fresh traversal of every (index, value) pair, each point exactly once."""
        pass

    def __len__(self) -> int:
        return num_points(self.dim)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise PointNotFound(index)


class DenseOracle(BooleanHypercubeOracle[F]):
    """Oracle backed by the 2^dim values in index order; entry i is f at the point with index i."""

    def __init__(self, dim: int, values: Sequence[F]) -> None:
        values = tuple(values)
        if len(values) != num_points(dim):
            raise IncorrectOracleSize(dim, len(values))
        self._dim = dim
        self.values = values
        logger.debug("dense oracle over {0,1}^%d", dim)

    @classmethod
    def random(cls, field: type[F], dim: int, rng: RandomSource | None = None) -> Self:
        return cls(dim, [field.random(rng) for _ in range(num_points(dim))])

    @classmethod
    def from_field_array(cls, field: type[G], array: np.ndarray) -> DenseOracle[G]:
        values = field.from_array(array)
        dim = len(values).bit_length() - 1
        return cls(dim, values)

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def field(self) -> type[F]:
        return type(self.values[0])

    def query(self, index: int) -> F:
        self._check_index(index)
        return self.values[index]

    def __iter__(self) -> Iterator[tuple[int, F]]:
        return enumerate(self.values)

    def to_sparse(self) -> SparseOracle[F]:
        return SparseOracle(
            self.dim,
            {to_hypercube_point(self.field, self.dim, index): value for index, value in self},
        )

    def __repr__(self) -> str:
        return f"DenseOracle(dim={self.dim}, values={list(self.values)!r})"


class SparseOracle(BooleanHypercubeOracle[F]):
    """Oracle backed by an explicit map from boolean tuples of length dim to values.

    The map must cover every point of the hypercube exactly once. Construction checks, in order, the number of
    entries, then for each key its length and that every coordinate is zero or one.
    """

    def __init__(self, dim: int, mapping: Mapping[Sequence[F], F]) -> None:
        if len(mapping) != num_points(dim):
            raise IncorrectOracleSize(dim, len(mapping))
        self._dim = dim
        self.table: dict[tuple[F, ...], F] = {}
        self.indices: dict[tuple[F, ...], int] = {}
        for point, value in mapping.items():
            index = from_hypercube_point(point, dim)
            key = tuple(point)
            self.table[key] = value
            self.indices[key] = index
        if len(self.table) != num_points(dim):
            # distinct keys in `mapping` collapsed onto the same point
            raise IncorrectOracleSize(dim, len(self.table))
        logger.debug("sparse oracle over {0,1}^%d", dim)

    @classmethod
    def random(cls, field: type[F], dim: int, rng: RandomSource | None = None) -> Self:
        return cls(dim, {point: field.random(rng) for _, point in hypercube_points(field, dim)})

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def field(self) -> type[F]:
        return type(next(iter(self.table.values())))

    def query(self, index: int) -> F:
        self._check_index(index)
        return self.query_point(to_hypercube_point(self.field, self.dim, index))

    def query_point(self, point: Sequence[F]) -> F:
        validate_hypercube_point(point, self.dim)
        try:
            return self.table[tuple(point)]
        except KeyError:
            raise PointNotFound(tuple(point)) from None

    def __iter__(self) -> Iterator[tuple[int, F]]:
        return ((self.indices[point], value) for point, value in self.table.items())

    def to_dense(self) -> DenseOracle[F]:
        return DenseOracle(self.dim, [self.query(index) for index in range(len(self))])

    def __repr__(self) -> str:
        return f"SparseOracle(dim={self.dim}, entries={len(self.table)})"
