"""SHA-256 built from the stages in `preprocess`, `message_schedule` and `compress`.

This module provides:

- `SHA256`: a stateless hasher value (``SHA256.new()``) exposing each stage.
- `sha256_words(data)`: the final 8-word hash state.
- `sha256(data)`: the 32-byte digest.
- `digest_hex(data)`: the 64-character lowercase hex digest.
- `sha256_with_trace(data)`: the digest plus the working state after every
  round of every block.

Text inputs are hashed as their UTF-8 encoding.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from compress import State, compress, compress64, fold
from preprocess import pad_message, parse_blocks
from message_schedule import expand
from words import MASK32


Message = Union[bytes, bytearray, memoryview, str]

# Initial hash values (first 32 bits of the fractional parts of the
# square roots of the first 8 primes 2..19), FIPS 180-2 section 5.3.2.
H0: State = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

DIGEST_BYTES = 32
DIGEST_HEX_CHARS = 2 * DIGEST_BYTES


def _to_bytes(data: Message) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"SHA-256 input must be bytes-like or str, not {type(data).__name__}"
    )


def encode_hex(words: Sequence[int]) -> str:
    """Render hash words as lowercase hex, each zero-padded to 8 digits."""
    return "".join(f"{word & MASK32:08x}" for word in words)


def encode_bytes(words: Sequence[int]) -> bytes:
    """Render hash words as big-endian bytes."""
    return b"".join((word & MASK32).to_bytes(4, byteorder="big") for word in words)


class SHA256:
    """Stateless SHA-256 hasher.

    Instances carry no data, so a single one can be shared freely between
    threads; every method is a pure function of its argument.
    """

    __slots__ = ()

    @classmethod
    def new(cls) -> "SHA256":
        return cls()

    def pad(self, message: Message) -> bytes:
        return pad_message(_to_bytes(message))

    def parse_blocks(self, padded: bytes) -> List[List[int]]:
        return parse_blocks(padded)

    def hash(self, message: Message) -> State:
        """Return the final 8-word state for `message`."""
        state = H0
        for block in parse_blocks(self.pad(message)):
            state = compress(state, block)
        return state

    def digest(self, message: Message) -> bytes:
        return encode_bytes(self.hash(message))

    def digest_hex(self, message: Message) -> str:
        return encode_hex(self.hash(message))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SHA256)

    def __hash__(self) -> int:
        return hash(SHA256)

    def __repr__(self) -> str:
        return "SHA256()"


_DEFAULT = SHA256()


def sha256_words(data: Message) -> State:
    return _DEFAULT.hash(data)


def sha256(data: Message) -> bytes:
    """Compute the 32-byte SHA-256 digest of `data`."""
    return _DEFAULT.digest(data)


def digest_hex(data: Message) -> str:
    """Compute the SHA-256 digest of `data` as 64 lowercase hex characters."""
    return _DEFAULT.digest_hex(data)


def sha256_with_trace(data: Message) -> Tuple[bytes, List[List[State]]]:
    """Compute SHA-256 while recording the working state after each round.

    Returns:
        (digest, rounds_per_block)
        where rounds_per_block[block_idx][t] is the (a, ..., h) working state
        after round t of that block
    """
    state = H0
    all_rounds: List[List[State]] = []

    for block in parse_blocks(pad_message(_to_bytes(data))):
        work, rounds = compress64(*state, expand(block), track=True)
        all_rounds.append(rounds)
        state = fold(state, work)

    return encode_bytes(state), all_rounds
