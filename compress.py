"""SHA-256 compression function.

The compression function consumes one parsed 512-bit block (sixteen 32-bit
words) and the running hash state, and returns the next running state:

    W        = expand(block)                  # 64-word message schedule
    a..h     = state
    for t in 0..63:
        T1 = h + S1(e) + ch(e, f, g) + K[t] + W[t]
        T2 = S0(a) + maj(a, b, c)
        h, g, f, e, d, c, b, a = g, f, e, d + T1, c, b, a, T1 + T2
    state'   = state + (a, b, c, d, e, f, g, h)   # elementwise

All additions are performed modulo 2**32, as in FIPS 180-2.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from message_schedule import expand
from words import MASK32, rotr


State = Tuple[int, int, int, int, int, int, int, int]

# First 32 bits of the fractional parts of the cube roots of the first
# 64 primes (FIPS 180-2, section 4.2.2).
K_VALUES: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

ROUNDS = len(K_VALUES)


def ch(x: int, y: int, z: int) -> int:
    """Choice: for each bit, take `y` where `x` is set and `z` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK32


def maj(x: int, y: int, z: int) -> int:
    """Majority vote of the three inputs, bit by bit."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK32


def big_sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def compression(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    w: int,
    k: int,
) -> State:
    """Perform one SHA-256 compression round.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        32-bit words representing the current working state.
    w : int
        Message schedule word `W[t]`.
    k : int
        Round constant `K[t]`.

    Returns
    -------
    (a, b, c, d, e, f, g, h) : tuple[int, ...]
        Working state after the round, all reduced modulo 2**32.
    """
    temp1 = (h + big_sigma1(e) + ch(e, f, g) + k + w) & MASK32
    temp2 = (big_sigma0(a) + maj(a, b, c)) & MASK32

    return (
        (temp1 + temp2) & MASK32,
        a,
        b,
        c,
        (d + temp1) & MASK32,
        e,
        f,
        g,
    )


def compress64(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    ws: Sequence[int],
    track: bool = False,
):
    """Run the full 64-round loop for one block.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        Initial working state words (the current running hash state).
    ws : Sequence[int]
        The 64-word message schedule `W[0..63]` for this block.
    track : bool
        When true, also return the working state after every round.

    Returns
    -------
    (a, b, c, d, e, f, g, h)
        Final working state words after 64 rounds, or
        ``((a, ..., h), rounds)`` when `track` is set, where ``rounds[t]`` is
        the working state after round `t`.
    """
    if len(ws) != ROUNDS:
        raise ValueError(f"compress64 expects {ROUNDS} message schedule words, got {len(ws)}")

    work: State = (a, b, c, d, e, f, g, h)
    rounds: List[State] = []
    for t in range(ROUNDS):
        work = compression(*work, ws[t], K_VALUES[t])
        if track:
            rounds.append(work)

    if track:
        return work, rounds
    return work


def fold(state: Sequence[int], work: Sequence[int]) -> State:
    """Add the post-round working registers into the running state."""
    return tuple((s + v) & MASK32 for s, v in zip(state, work))


def compress(state: Sequence[int], block: Sequence[int]) -> State:
    """Apply the compression function to one parsed 16-word block.

    Returns the new running state; `state` itself is left untouched.
    """
    work = compress64(*state, expand(block))
    return fold(state, work)
