"""Exceptions raised by the SHA-256 modules."""

from __future__ import annotations


class Sha256Error(Exception):
    """Base class for errors raised by this package."""


class InputTooLarge(Sha256Error, ValueError):
    """The message bit length does not fit in the 64-bit length field."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Message of {length} bytes is too large: its bit length "
            f"does not fit in 64 bits"
        )


class VectorFormatError(Sha256Error, ValueError):
    """A known-answer vector file entry is malformed."""
