# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import ClassVar, Self, TypeVar

import numpy as np
from galois import GF, FieldArray

from .finite_field import FiniteField, FiniteFieldElem

RR = TypeVar("RR")

# GHASH modulus; the monomial basis of GF(2¹²⁸) that galois uses when given this polynomial.
GF2_128_POLYNOMIAL = "x^128 + x^7 + x^2 + x + 1"


class GaloisField(FiniteField[int]):
    """A field of any prime-power order whose arithmetic is delegated to a `galois.GF` array class.

    Elements are represented by galois' integer encoding rather than by 0-d field arrays, so that they stay hashable
    and can key a sparse oracle. Each operation lifts its operands into the array class and drops the result back to
    an integer.
    """

    def __init__(self, order: int, irreducible_poly: str | None = None) -> None:
        self.gf: type[FieldArray] = GF(order, irreducible_poly=irreducible_poly)
        self.bitlen = (order - 1).bit_length()
        self.fmt = f"GF({order})({{:d}})"

    @property
    def characteristic(self) -> int:
        return int(self.gf.characteristic)

    @property
    def dimension(self) -> int:
        return int(self.gf.degree)

    @property
    def order(self) -> int:
        return int(self.gf.order)

    def from_index(self, index: int) -> int:
        assert 0 <= index < self.order
        return index

    def add(self, left: int, right: int) -> int:
        return int(self.gf(left) + self.gf(right))

    def subtract(self, left: int, right: int) -> int:
        return int(self.gf(left) - self.gf(right))

    def negate(self, operand: int) -> int:
        return int(-self.gf(operand))

    def multiply(self, left: int, right: int) -> int:
        return int(self.gf(left) * self.gf(right))

    def pow(self, base: int, exponent: int) -> int:
        return int(self.gf(base) ** exponent)

    def inverse(self, operand: int) -> int:
        if operand == 0:
            raise ValueError("inverting zero")
        return int(self.gf(1) / self.gf(operand))

    def from_int(self, val: int) -> int:
        return val % self.characteristic

    def format_str(self, elem: int) -> str:
        return str(elem)

    def format_repr(self, elem: int) -> str:
        return self.fmt.format(elem)

    def to_bytes(self, elem: int) -> bytes:
        return elem.to_bytes(self.bytes_len, byteorder="little")

    def from_bytes(self, serialized: bytes) -> int:
        if len(serialized) != self.bytes_len:
            raise ValueError(f"serialized element must be {self.bytes_len} bytes")
        val = int.from_bytes(serialized, byteorder="little")
        if val >= self.order:
            raise ValueError("serialized element is out of range")
        return val

    @property
    def bytes_len(self) -> int:
        return (self.bitlen + 7) // 8

    def convert_repr(self, elem: int, field: FiniteField[RR]) -> RR:
        if not self.is_isomorphic(field):
            raise ValueError("cannot convert to non-isomorphic field")
        if self.dimension != 1:
            # extension fields need an explicit isomorphism between bases
            raise NotImplementedError()
        return field.from_int(elem)


class GaloisFieldElem(FiniteFieldElem[int]):
    field: ClassVar[GaloisField]

    def to_field_array(self) -> FieldArray:
        return self.field.gf(self.value)

    @classmethod
    def from_array(cls, array: np.ndarray) -> list[Self]:
        """Converts a one-dimensional galois field array (or integer array) into a list of elements."""
        if np.ndim(array) != 1:
            raise ValueError(f"expected a one-dimensional array, got {np.ndim(array)} dimensions")
        return [cls(cls.field.from_index(int(x))) for x in np.asarray(array).tolist()]

    @classmethod
    def to_array(cls, elems: list[Self]) -> FieldArray:
        return cls.field.gf([elem.value for elem in elems])
