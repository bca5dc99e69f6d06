# (C) 2024 Irreducible Inc.

from collections.abc import Iterable


def is_bit_set(x: int, i: int) -> bool:
    return (x >> i) & 1 != 0


def int_to_bits(x: int, n_bits: int) -> list[int]:
    # little-endian: entry i is bit i of x
    return [(x >> i) & 1 for i in range(n_bits)]


def bits_to_int(bits: Iterable[int]) -> int:
    x = 0
    for i, bit in enumerate(bits):
        assert bit in (0, 1)
        x |= bit << i
    return x
