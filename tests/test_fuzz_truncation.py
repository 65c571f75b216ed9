from hypothesis import given, strategies as st

import pytest

from sshminisig.blob import parse_signature_blob
from sshminisig.errors import ParseError, TruncatedBlob

from sshsig_fixtures import build_blob

VALID = build_blob("sk-ecdsa-sha2-nistp256@openssh.com", bytes(range(72)), hash_alg="sha256", trailer=b"\x05\x00\x00\x00\x2a")


@pytest.mark.parametrize("n", range(len(VALID)))
def test_every_strict_prefix_is_truncated(n):
    with pytest.raises(TruncatedBlob):
        parse_signature_blob(VALID[:n])


def test_full_blob_parses():
    assert parse_signature_blob(VALID).hash_alg == "sha256"


@given(st.binary(max_size=512))
def test_random_bytes_only_raise_parse_errors(data):
    try:
        parse_signature_blob(data)
    except ParseError:
        pass


@given(st.binary(max_size=512))
def test_random_bytes_after_magic_only_raise_parse_errors(data):
    try:
        parse_signature_blob(b"SSHSIG\x00\x00\x00\x01" + data)
    except ParseError:
        pass


names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-@.", min_size=1, max_size=40)


@given(names, names, st.binary(max_size=600), st.binary(max_size=8), st.binary(max_size=64))
def test_fields_recovered(sig_alg, hash_alg, sig, trailer, namespace):
    got = parse_signature_blob(build_blob(sig_alg, sig, hash_alg=hash_alg, trailer=trailer, namespace=namespace))
    assert got.sig_alg == sig_alg
    assert got.hash_alg == hash_alg
    assert got.signature == sig + trailer
