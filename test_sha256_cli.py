import hashlib

import pytest
import yaml

from sha256_cli import main


def test_hashes_message_argument(capsys):
    assert main(["hello"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"


def test_hashes_empty_message(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out.strip() == hashlib.sha256(b"").hexdigest()


def test_hashes_file_bytes(tmp_path, capsys):
    path = tmp_path / "data.bin"
    data = bytes(range(256)) * 3
    path.write_bytes(data)

    assert main(["-f", str(path)]) == 0
    assert capsys.readouterr().out.strip() == hashlib.sha256(data).hexdigest()


def test_missing_file_is_reported(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.bin")]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_requires_an_input():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_self_test_passes(capsys):
    assert main(["--self-test"]) == 0
    assert "0 failed" in capsys.readouterr().out


def test_self_test_reports_failures(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.dump({"vectors": [{"name": "bad", "message": "abc", "digest": "1" * 64}]}))

    assert main(["--self-test", str(path)]) == 1
    out = capsys.readouterr().out
    assert "[FAIL] bad" in out
    assert "1 failed" in out


def test_self_test_rejects_malformed_file(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("vectors: 3\n")

    assert main(["--self-test", str(path)]) == 1
    assert "Invalid vectors file" in capsys.readouterr().err


def test_trace_is_written_as_yaml(tmp_path, capsys):
    path = tmp_path / "trace.yaml"
    message = "a" * 60

    assert main([message, "--trace", str(path)]) == 0
    capsys.readouterr()

    with open(path) as f:
        trace = yaml.safe_load(f)

    assert trace["digest_hex"] == hashlib.sha256(message.encode()).hexdigest()
    assert trace["message_length_bytes"] == 60
    assert [b["block_index"] for b in trace["blocks"]] == [0, 1]
    first_round = trace["blocks"][0]["rounds"][0]
    assert list(first_round) == list("abcdefgh")
    assert all(len(word) == 8 for word in first_round.values())


def test_trace_cannot_be_combined_with_self_test(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--self-test", "--trace", str(tmp_path / "trace.yaml")])
    assert excinfo.value.code == 2
    assert "--trace cannot be combined" in capsys.readouterr().err
    assert not (tmp_path / "trace.yaml").exists()


@pytest.mark.parametrize("message", ["-x", "--help"])
def test_dash_messages_after_double_dash(message, capsys):
    assert main(["--", message]) == 0
    assert capsys.readouterr().out.strip() == hashlib.sha256(message.encode()).hexdigest()
