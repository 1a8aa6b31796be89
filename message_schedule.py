"""SHA-256 message schedule.

Each parsed block of sixteen 32-bit words is expanded into the 64-word
schedule `W[0..63]` consumed by the 64 compression rounds.
"""

from __future__ import annotations

from typing import List, Sequence

from words import MASK32, rotr


BLOCK_WORDS = 16
SCHEDULE_WORDS = 64


def small_sigma0(x: int) -> int:
    """SHA-256 function σ0 used in the message schedule."""
    x &= MASK32
    return rotr(x, 7) ^ rotr(x, 18) ^ (x >> 3)


def small_sigma1(x: int) -> int:
    """SHA-256 function σ1 used in the message schedule."""
    x &= MASK32
    return rotr(x, 17) ^ rotr(x, 19) ^ (x >> 10)


def expand(block: Sequence[int]) -> List[int]:
    """Expand a 16-word block into the 64-word message schedule.

    The first 16 words are copied verbatim; the rest follow the recurrence

        W[t] = σ1(W[t-2]) + W[t-7] + σ0(W[t-15]) + W[t-16]   (mod 2**32)

    evaluated in ascending `t`, since every entry depends on earlier ones.
    """
    if len(block) != BLOCK_WORDS:
        raise ValueError(f"Expected {BLOCK_WORDS}-word block, got {len(block)}")

    w: List[int] = [word & MASK32 for word in block]
    for t in range(BLOCK_WORDS, SCHEDULE_WORDS):
        s0 = small_sigma0(w[t - 15])
        s1 = small_sigma1(w[t - 2])
        w.append((s1 + w[t - 7] + s0 + w[t - 16]) & MASK32)

    return w
