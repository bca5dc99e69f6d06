# (C) 2024 Irreducible Inc.

"""Evaluation of the multilinear extension of a function on the boolean hypercube.

For f: {0,1}ᵈ → F, MLE_f is the unique polynomial of degree ≤ 1 in each variable agreeing with f on {0,1}ᵈ:

    MLE_f(z) = Σ_b f(b) ⋅ eq(b, z).

Several algorithms compute the same value; `MultilinearExtension` binds an oracle for f to one of them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Generic, TypeVar, assert_never

from ..finite_fields.finite_field import FiniteFieldElem
from .errors import (
    InconsistentDimensions,
    OracleError,
    OracleFailure,
    PointNotFound,
    StrategyNotImplemented,
    WrongDimension,
)
from .hypercube import num_points, to_hypercube_point
from .lagrange import eq_at_index, one_minus
from .oracle import BooleanHypercubeOracle

F = TypeVar("F", bound=FiniteFieldElem)

logger = logging.getLogger(__name__)


class EvaluationType(Enum):
    NAIVE = "naive"  # O(d ⋅ 2ᵈ) time, O(2ᵈ) space
    ZHU = "zhu"
    ROTHBLUM = "rothblum"
    RAMAKRISHNA = "ramakrishna"


class MultilinearExtension(Generic[F]):
    def __init__(
        self,
        oracle: BooleanHypercubeOracle[F],
        dim: int,
        strategy: EvaluationType = EvaluationType.NAIVE,
    ) -> None:
        # no validation here; evaluate() checks z and the oracle against dim
        self.oracle = oracle
        self.dim = dim
        self.strategy = strategy

    def evaluate(self, z: Sequence[F]) -> F:
        """Evaluates MLE_f(z) for z ∈ Fᵈ with the configured strategy.

        Every strategy returns the same value; they differ only in cost.
        """
        if len(z) != self.dim:
            raise WrongDimension(expected=self.dim, found=len(z))
        if self.oracle.dim != self.dim:
            raise InconsistentDimensions(b_dim=self.oracle.dim, z_dim=len(z))

        logger.debug("evaluating %s multilinear extension over %d variables", self.strategy.value, self.dim)
        try:
            match self.strategy:
                case EvaluationType.NAIVE:
                    return self._naive(z)
                case EvaluationType.ZHU | EvaluationType.ROTHBLUM | EvaluationType.RAMAKRISHNA:
                    logger.warning("%s evaluation requested but not implemented", self.strategy.value)
                    raise StrategyNotImplemented(self.strategy)
                case _:
                    assert_never(self.strategy)
        except OracleError as e:
            raise OracleFailure(e) from e

    def __call__(self, z: Sequence[F]) -> F:
        return self.evaluate(z)

    def evaluate_at_index(self, index: int) -> F:
        """Evaluates at the boolean point with the given index, which by interpolation is f at that point."""
        if not 0 <= index < num_points(self.dim):
            raise PointNotFound(index)
        return self.evaluate(to_hypercube_point(self.oracle.field, self.dim, index))

    def _naive(self, z: Sequence[F]) -> F:
        # the brute-force sum Σᵢ f(i) ⋅ eq(i, z), one O(d) product per point of the cube.
        field = self.oracle.field
        one_minus_z = one_minus(field, z)
        result = field.zero()
        for index, value in self.oracle:
            result += value * eq_at_index(field, index, z, one_minus_z)
        return result
