import hashlib

import pytest
import yaml

from errors import VectorFormatError
from sha256 import SHA256
from vectors import KnownAnswer, check_vectors, load_vectors, parse_vectors


def test_bundled_vectors_pass():
    vectors = load_vectors()
    assert len(vectors) >= 5
    assert check_vectors(vectors) == []


def test_bundled_vectors_include_edge_cases():
    names = {v.name: v for v in load_vectors()}
    assert names["empty"].message == b""
    assert names["abc as hex"].message == b"abc"
    assert names["55 bytes"].message == b"a" * 55
    assert names["56 bytes"].message == b"a" * 56
    assert names["64 bytes"].message == b"a" * 64
    assert names["utf-8 text"].message == "あいうえお".encode("utf-8")


def test_bundled_boundary_vectors_match_reference():
    for vector in load_vectors():
        assert vector.digest == hashlib.sha256(vector.message).hexdigest(), vector.name


def test_load_from_custom_file(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(
        yaml.dump(
            {
                "vectors": [
                    {
                        "name": "repeated",
                        "message": "ab",
                        "repeat": 3,
                        "digest": SHA256.new().digest_hex(b"ababab"),
                    }
                ]
            }
        )
    )

    vectors = load_vectors(str(path))
    assert vectors == [
        KnownAnswer(name="repeated", message=b"ababab", digest=SHA256.new().digest_hex(b"ababab"))
    ]
    assert check_vectors(vectors) == []


def test_mismatch_is_reported():
    bad = KnownAnswer(name="wrong", message=b"abc", digest="0" * 64)
    failures = check_vectors([bad])

    assert len(failures) == 1
    vector, actual = failures[0]
    assert vector is bad
    assert actual == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.mark.parametrize("document", [
    None,
    {"vectors": "nope"},
    {"vectors": ["not a mapping"]},
    {"vectors": [{"name": "x", "digest": "0" * 64}]},
    {"vectors": [{"message": "a", "message_hex": "61", "digest": "0" * 64}]},
    {"vectors": [{"message_hex": "zz", "digest": "0" * 64}]},
    {"vectors": [{"message": "a", "digest": "0" * 63}]},
    {"vectors": [{"message": "a", "digest": "g" * 64}]},
    {"vectors": [{"message": "a", "repeat": -1, "digest": "0" * 64}]},
    {"vectors": [{"message": True, "digest": "0" * 64}]},
    {"vectors": [{"message_hex": 83, "digest": "0" * 64}]},
    {"vectors": [{"message": "a", "digest": None}]},
    {"vectors": [{"name": 7, "message": "a", "digest": "0" * 64}]},
])
def test_malformed_documents_are_rejected(document):
    with pytest.raises(VectorFormatError):
        parse_vectors(document)


@pytest.mark.parametrize("text", [
    "vectors:\n  - message: yes\n    digest: " + "0" * 64 + "\n",
    "vectors:\n  - message_hex: 0123\n    digest: " + "0" * 64 + "\n",
])
def test_unquoted_yaml_scalars_are_not_coerced(tmp_path, text):
    path = tmp_path / "scalars.yaml"
    path.write_text(text)

    with pytest.raises(VectorFormatError):
        load_vectors(str(path))


def test_quoted_yaml_scalars_are_kept_verbatim(tmp_path):
    path = tmp_path / "quoted.yaml"
    path.write_text(
        "vectors:\n"
        "  - message: \"yes\"\n"
        "    digest: " + hashlib.sha256(b"yes").hexdigest() + "\n"
        "  - message_hex: \"0123\"\n"
        "    digest: " + hashlib.sha256(b"\x01\x23").hexdigest() + "\n"
    )

    vectors = load_vectors(str(path))
    assert [v.message for v in vectors] == [b"yes", b"\x01\x23"]
    assert check_vectors(vectors) == []
