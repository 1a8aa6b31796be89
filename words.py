"""32-bit word primitives shared by the schedule and compression stages."""

from __future__ import annotations


MASK32 = 0xFFFFFFFF


def rotr(x: int, n: int) -> int:
    """Right-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32
