"""Command-line front end for the SHA-256 implementation.

Usage:
    python sha256_cli.py "message"
    python sha256_cli.py -- "-message starting with a dash"
    python sha256_cli.py -f path/to/file
    python sha256_cli.py --self-test [path/to/vectors.yaml]
    python sha256_cli.py "message" --trace rounds.yaml

Without flags, the argument is interpreted as a UTF-8 string and hashed.
With `-f`, the raw bytes of the named file are hashed. The hex digest is
printed to stdout. `--trace` additionally writes the working state after
every compression round of every block to a YAML file; it cannot be
combined with `--self-test`.

Messages that begin with `-` (such as `-x` or `--help`) would be read as
options, so put `--` before them.
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List

import yaml

from errors import Sha256Error
from sha256 import digest_hex, sha256_with_trace
from vectors import check_vectors, load_vectors


_REGISTERS = "abcdefgh"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sha256_cli.py",
        description="Compute the SHA-256 digest of a string or file",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "message",
        nargs="?",
        help="Message to hash (UTF-8 encoded)",
    )
    source.add_argument(
        "-f",
        "--file",
        dest="filename",
        help="Hash the raw bytes of this file instead",
    )
    source.add_argument(
        "--self-test",
        nargs="?",
        const="",
        metavar="VECTORS",
        help="Check known-answer vectors from this YAML file (default: the bundled set)",
    )
    parser.add_argument(
        "--trace",
        metavar="PATH",
        help="Write the per-round working state of every block to this YAML file",
    )
    return parser


def _trace_document(data: bytes) -> Dict:
    digest, rounds_per_block = sha256_with_trace(data)

    blocks: List[Dict] = []
    for block_idx, rounds in enumerate(rounds_per_block):
        blocks.append(
            {
                "block_index": block_idx,
                "rounds": [
                    {reg: f"{word:08x}" for reg, word in zip(_REGISTERS, work)}
                    for work in rounds
                ],
            }
        )

    return {
        "message_hex": data.hex(),
        "message_length_bytes": len(data),
        "digest_hex": digest.hex(),
        "blocks": blocks,
    }


def _write_trace(path: str, data: bytes) -> None:
    with open(path, "w") as f:
        yaml.dump(_trace_document(data), f, default_flow_style=False, sort_keys=False)


def _self_test(path: str) -> int:
    try:
        vectors = load_vectors(path or None)
    except OSError as e:
        sys.stderr.write(f"Error reading vectors '{path}': {e}\n")
        return 1
    except (yaml.YAMLError, Sha256Error) as e:
        sys.stderr.write(f"Invalid vectors file '{path}': {e}\n")
        return 1

    failures = check_vectors(vectors)
    for vector, actual in failures:
        print(f"[FAIL] {vector.name}")
        print(f"  expected: {vector.digest}")
        print(f"  got:      {actual}")

    passed = len(vectors) - len(failures)
    print(f"[SUMMARY] {passed} passed, {len(failures)} failed")
    return 0 if not failures else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.self_test is not None:
        if args.trace:
            parser.error("--trace cannot be combined with --self-test")
        return _self_test(args.self_test)

    if args.filename is not None:
        try:
            with open(args.filename, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.filename}': {e}\n")
            return 1
    else:
        data = args.message.encode("utf-8")

    print(digest_hex(data))

    if args.trace:
        try:
            _write_trace(args.trace, data)
        except OSError as e:
            sys.stderr.write(f"Error writing trace '{args.trace}': {e}\n")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
