# (C) 2024 Irreducible Inc.

"""Errors raised when constructing or querying oracles and when evaluating multilinear extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .mle import EvaluationType


class OracleError(ValueError):
    """Base class for failures constructing or querying a hypercube oracle."""


class IncorrectOracleSize(OracleError):
    def __init__(self, dim: int, found: int) -> None:
        self.dim = dim
        self.found = found
        super().__init__(f"Oracle size must be 2^dim: expected {1 << dim} entries, but found {found}")


class IncorrectOraclePointDimension(OracleError):
    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Dimension mismatch: expected dimension {expected}, but found dimension {found}")


class NonbooleanOraclePoint(OracleError):
    def __init__(self, point: Any) -> None:
        self.point = point
        super().__init__(f"Non-boolean value encountered: all coordinates must be in {{0, 1}}, got {point!r}")


class PointNotFound(OracleError):
    def __init__(self, point: Any) -> None:
        self.point = point
        super().__init__(f"Point not found in boolean hypercube map: {point!r}")


class MLEError(ValueError):
    """Base class for failures evaluating a multilinear extension."""


class WrongDimension(MLEError):
    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Dimension mismatch: expected dimension {expected}, but found dimension {found}")


class InconsistentDimensions(MLEError):
    def __init__(self, b_dim: int, z_dim: int) -> None:
        self.b_dim = b_dim
        self.z_dim = z_dim
        super().__init__(f"b and z must have consistent dimensions: b has {b_dim}, z has {z_dim}")


class OracleFailure(MLEError):
    """An oracle error surfaced while evaluating; the original is kept as `inner` and as `__cause__`."""

    def __init__(self, inner: OracleError) -> None:
        self.inner = inner
        super().__init__(f"Oracle error: {inner}")


class StrategyNotImplemented(MLEError, NotImplementedError):
    def __init__(self, strategy: EvaluationType) -> None:
        self.strategy = strategy
        super().__init__(f"{strategy.name.lower()} evaluation of the multilinear extension is not implemented")
