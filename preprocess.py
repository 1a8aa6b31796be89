"""Message preprocessing: padding and parsing into 512-bit blocks."""

from __future__ import annotations

from typing import Iterable, List

from errors import InputTooLarge


BLOCK_BYTES = 64
LENGTH_BYTES = 8
DELIMITER = 0x80

# The bit length must fit in the 64-bit length field.
MAX_MESSAGE_BYTES = 2 ** 61 - 1


def pad_message(message: bytes) -> bytes:
    """Pad the message so its length is a multiple of 64 bytes (512 bits).

    Padding rules:
    1. Append the '1' bit as a single 0x80 byte.
    2. Append zero bytes until the length is 56 mod 64.
    3. Append the original length in bits as a 64-bit big-endian integer.

    A message that is already block aligned still gets a full extra block,
    so the result is always at least ``len(message) + 9`` bytes long.

    Raises
    ------
    InputTooLarge
        If the bit length of `message` cannot be encoded in 64 bits.
    """
    length = len(message)
    if length > MAX_MESSAGE_BYTES:
        raise InputTooLarge(length)

    padded = bytearray(message)
    padded.append(DELIMITER)

    zero_fill = (BLOCK_BYTES - LENGTH_BYTES - len(padded)) % BLOCK_BYTES
    padded.extend(b"\x00" * zero_fill)

    padded.extend((length * 8).to_bytes(LENGTH_BYTES, byteorder="big"))
    return bytes(padded)


def _chunks(data: bytes, size: int) -> Iterable[bytes]:
    """Yield successive `size`-byte chunks from `data`."""
    for i in range(0, len(data), size):
        yield data[i : i + size]


def parse_blocks(padded: bytes) -> List[List[int]]:
    """Split a padded message into blocks of sixteen big-endian 32-bit words.

    The input must come from `pad_message`; a length that is not a multiple
    of 64 bytes is a caller bug.
    """
    assert len(padded) % BLOCK_BYTES == 0, (
        f"Padded message length must be a multiple of {BLOCK_BYTES} bytes, "
        f"got {len(padded)}"
    )

    blocks: List[List[int]] = []
    for chunk in _chunks(padded, BLOCK_BYTES):
        blocks.append(
            [int.from_bytes(chunk[i : i + 4], byteorder="big") for i in range(0, BLOCK_BYTES, 4)]
        )
    return blocks


def blocks_to_bytes(blocks: Iterable[Iterable[int]]) -> bytes:
    """Re-pack parsed blocks into the padded byte stream they came from."""
    return b"".join(
        word.to_bytes(4, byteorder="big") for block in blocks for word in block
    )
