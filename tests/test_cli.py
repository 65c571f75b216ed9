import io
import json
import sys

import pytest

from sshminisig.cli import main

from sshsig_fixtures import armor_blob, build_blob

ARMORED = armor_blob(build_blob("ssh-ed25519", b"\x01\x02\x03"))


def test_encode_from_file(tmp_path, capsys):
    p = tmp_path / "sig.txt"
    p.write_bytes(ARMORED)
    assert main(["encode", "--input", str(p)]) == 0
    assert capsys.readouterr().out == "eAQID"


def test_encode_from_stdin_is_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(ARMORED)))
    assert main([]) == 0
    assert capsys.readouterr().out == "eAQID"


def test_encode_newline(tmp_path, capsys):
    p = tmp_path / "sig.txt"
    p.write_bytes(ARMORED)
    assert main(["encode", "--input", str(p), "--newline"]) == 0
    assert capsys.readouterr().out == "eAQID\n"


def test_encode_error_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"not a valid armor")))
    assert main(["encode"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("sshminisig: invalid armored SSH signature")


def test_missing_input_file(tmp_path, capsys):
    assert main(["encode", "--input", str(tmp_path / "nope")]) == 1
    assert capsys.readouterr().err.startswith("sshminisig: ")


def test_decode(capsys):
    assert main(["decode", "eAQID"]) == 0
    assert capsys.readouterr().out == "ssh-ed25519 sha512 010203\n"


def test_decode_json(capsys):
    assert main(["decode", "5AQID", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"sig_alg": "ssh-rsa", "hash_alg": "sha512", "signature_hex": "010203"}


@pytest.mark.parametrize("token,needle", [
    ("xAAAA", "unknown prefix"),
    ("e", "too short"),
    ("e!!!", "failed to decode signature"),
])
def test_decode_errors(token, needle, capsys):
    assert main(["decode", token]) == 1
    assert needle in capsys.readouterr().err
