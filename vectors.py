"""Known-answer vectors for checking the SHA-256 implementation.

Vectors are YAML documents of the form::

    vectors:
      - name: abc
        message: abc            # or message_hex: "616263"
        repeat: 1               # optional
        digest: ba7816bf...

The default set is embedded below as `BUNDLED_VECTORS`, so it travels with
the module; other sets are read from a file with `load_vectors(path)`.
Every `message`, `message_hex` and `digest` must be a YAML string: quote
values such as ``yes`` or ``0123`` that YAML would otherwise read as
booleans or numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import yaml

from errors import VectorFormatError
from sha256 import DIGEST_HEX_CHARS, SHA256


BUNDLED_VECTORS = """\
vectors:
  - name: empty
    message: ""
    digest: e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855
  - name: abc
    message: abc
    digest: ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
  - name: hello
    message: hello
    digest: 2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824
  - name: hello world
    message: hello world
    digest: b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9
  - name: quick brown fox
    message: The quick brown fox jumps over the lazy dog
    digest: d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592
  - name: nist two block
    message: abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq
    digest: 248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1
  - name: nist 896 bit
    message: abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmnhijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu
    digest: cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1
  - name: 55 bytes
    message: a
    repeat: 55
    digest: 9f4390f8d30c2dd92ec9f095b65e2b9ae9b0a925a5258e241c9f1e910f734318
  - name: 56 bytes
    message: a
    repeat: 56
    digest: b35439a4ac6f0948b6d6f9e3c6af0f5f590ce20f1bde7090ef7970686ec6738a
  - name: 64 bytes
    message: a
    repeat: 64
    digest: ffe054fe7ae0cb6dc65c3af9b61d5209f439851db43d0ba5997337df154668eb
  - name: utf-8 text
    message: あいうえお
    digest: fdb481ea956fdb654afcc327cff9b626966b2abdabc3f3e6dbcb1667a888ed9a
  - name: abc as hex
    message_hex: "616263"
    digest: ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
"""

_HEX_DIGITS = frozenset("0123456789abcdef")


@dataclass(frozen=True)
class KnownAnswer:
    name: str
    message: bytes
    digest: str


def _string_field(name: str, entry: dict, field: str) -> str:
    value = entry[field]
    if not isinstance(value, str):
        raise VectorFormatError(
            f"Vector {name!r} field {field!r} must be a string, got "
            f"{type(value).__name__} {value!r} (quote it in YAML)"
        )
    return value


def _parse_entry(index: int, entry) -> KnownAnswer:
    if not isinstance(entry, dict):
        raise VectorFormatError(f"Vector #{index} must be a mapping, got {type(entry).__name__}")

    name = f"vector-{index}"
    if "name" in entry:
        name = _string_field(name, entry, "name")

    if "message" in entry and "message_hex" in entry:
        raise VectorFormatError(f"Vector {name!r} has both 'message' and 'message_hex'")
    if "message" in entry:
        message = _string_field(name, entry, "message").encode("utf-8")
    elif "message_hex" in entry:
        message_hex = _string_field(name, entry, "message_hex")
        try:
            message = bytes.fromhex(message_hex)
        except ValueError as e:
            raise VectorFormatError(f"Vector {name!r} has invalid message_hex: {e}") from e
    else:
        raise VectorFormatError(f"Vector {name!r} has neither 'message' nor 'message_hex'")

    repeat = entry.get("repeat", 1)
    if not isinstance(repeat, int) or isinstance(repeat, bool) or repeat < 0:
        raise VectorFormatError(f"Vector {name!r} has invalid repeat count {repeat!r}")

    if "digest" not in entry:
        raise VectorFormatError(f"Vector {name!r} has no 'digest'")
    digest = _string_field(name, entry, "digest").lower()
    if len(digest) != DIGEST_HEX_CHARS or not set(digest) <= _HEX_DIGITS:
        raise VectorFormatError(
            f"Vector {name!r} digest must be {DIGEST_HEX_CHARS} hex characters, got {digest!r}"
        )

    return KnownAnswer(name=name, message=message * repeat, digest=digest)


def parse_vectors(document) -> List[KnownAnswer]:
    """Build `KnownAnswer` records from an already-loaded YAML document."""
    if not isinstance(document, dict) or not isinstance(document.get("vectors"), list):
        raise VectorFormatError("Vector document must contain a 'vectors' list")
    return [_parse_entry(i, entry) for i, entry in enumerate(document["vectors"])]


def load_vectors(path: Optional[str] = None) -> List[KnownAnswer]:
    """Read known-answer vectors from a YAML file, or the bundled set."""
    if path is None:
        return parse_vectors(yaml.safe_load(BUNDLED_VECTORS))
    with open(path, "r", encoding="utf-8") as f:
        document = yaml.safe_load(f)
    return parse_vectors(document)


def check_vectors(
    vectors: List[KnownAnswer], hasher: Optional[SHA256] = None
) -> List[tuple[KnownAnswer, str]]:
    """Hash every vector and return ``(vector, actual_digest)`` for mismatches."""
    if hasher is None:
        hasher = SHA256.new()

    failures = []
    for vector in vectors:
        actual = hasher.digest_hex(vector.message)
        if actual != vector.digest:
            failures.append((vector, actual))
    return failures
