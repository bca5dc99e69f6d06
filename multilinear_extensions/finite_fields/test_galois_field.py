# (C) 2024 Irreducible Inc.

import pytest
from galois import GF
from hypothesis import given

from multilinear_extensions.tests.helpers import field_elements

from .galois_field import GF2_128_POLYNOMIAL, GaloisField, GaloisFieldElem
from .prime_field import PrimeFieldElem, PrimeFieldNative


class Elem7(PrimeFieldElem):
    field = PrimeFieldNative(7)


class GaloisElem7(GaloisFieldElem):
    field = GaloisField(7)


class Elem128b(GaloisFieldElem):
    field = GaloisField(2**128, GF2_128_POLYNOMIAL)


def test_field_parameters() -> None:
    assert GaloisElem7.field.characteristic == 7
    assert GaloisElem7.field.dimension == 1
    assert Elem128b.field.characteristic == 2
    assert Elem128b.field.degree == 128
    assert Elem128b.field.order == 2**128
    assert Elem128b.field.bytes_len == 16


@given(a=field_elements(GaloisElem7), b=field_elements(GaloisElem7))
def test_agrees_with_native_prime_field(a: GaloisElem7, b: GaloisElem7) -> None:
    native_a, native_b = Elem7.convert_from(a), Elem7.convert_from(b)
    assert Elem7.convert_from(a + b) == native_a + native_b
    assert Elem7.convert_from(a - b) == native_a - native_b
    assert Elem7.convert_from(a * b) == native_a * native_b
    assert Elem7.convert_from(-a) == -native_a


@given(a=field_elements(Elem128b))
def test_characteristic_two(a: Elem128b) -> None:
    assert a + a == Elem128b.zero()
    assert -a == a
    assert Elem128b.one() - a == Elem128b.one() + a


@given(a=field_elements(Elem128b))
def test_inverse(a: Elem128b) -> None:
    if a.is_zero():
        with pytest.raises(ValueError, match="inverting zero"):
            a.inverse()
    else:
        assert a * a.inverse() == Elem128b.one()


def test_from_int_embeds_prime_subfield() -> None:
    assert Elem128b.from_int(2) == Elem128b.zero()
    assert Elem128b.from_int(3) == Elem128b.one()
    assert GaloisElem7.from_int(9) == GaloisElem7(2)


def test_field_array_conversion() -> None:
    gf7 = GF(7)
    elems = GaloisElem7.from_array(gf7([1, 2, 3, 6]))
    assert elems == [GaloisElem7(1), GaloisElem7(2), GaloisElem7(3), GaloisElem7(6)]
    assert GaloisElem7.to_array(elems).tolist() == [1, 2, 3, 6]
    assert elems[3].to_field_array() == gf7(6)

    with pytest.raises(ValueError, match="one-dimensional"):
        GaloisElem7.from_array(gf7([[1, 2], [3, 4]]))


def test_extension_conversion_not_supported() -> None:
    other = GaloisField(2**128, "x^128 + x^127 + x^126 + x^121 + 1")
    with pytest.raises(NotImplementedError):
        Elem128b.field.convert_repr(1, other)
