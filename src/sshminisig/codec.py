"""Convert armored SSH signatures to the compact sshminisig format and back.

An sshminisig is:
  - one prefix character naming the (signature, hash) algorithm pair
  - the raw signature bytes, base64url-encoded without padding

The public key and namespace are dropped; consumers are expected to know
them out of band.
"""

from __future__ import annotations

import base64
import re
from typing import Tuple

from .armor import SSH_SIGNATURE_LABEL, ArmorError, unwrap
from .blob import parse_signature_blob
from .errors import (
    ArmoredTooLarge,
    InvalidArmor,
    MinisigError,
    SignatureDecodeError,
    TokenTooShort,
    UnknownPrefix,
)
from .registry import AlgorithmPair, algs_for_prefix, prefix_for
from .utils.logging import get_logger

# RSA-8192 with a long namespace armors to ~4 KiB
MAX_ARMORED_SIZE = 8 * 1024

_B64URL_NOPAD = re.compile(r"[A-Za-z0-9_-]*")

log = get_logger()


def b64url_nopad_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_nopad_decode(text: str) -> bytes:
    # CR and LF are skipped anywhere, as Go's RawURLEncoding does
    text = text.replace("\r", "").replace("\n", "")
    if not _B64URL_NOPAD.fullmatch(text):
        raise ValueError("illegal character in unpadded base64url data")
    if len(text) % 4 == 1:
        raise ValueError(f"illegal unpadded base64url length {len(text)}")
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _encode(armored: bytes) -> str:
    if len(armored) > MAX_ARMORED_SIZE:
        raise ArmoredTooLarge(len(armored), MAX_ARMORED_SIZE)
    try:
        label, payload = unwrap(armored)
    except ArmorError as e:
        raise InvalidArmor(f"invalid armored SSH signature: {e}") from e
    if label != SSH_SIGNATURE_LABEL:
        raise InvalidArmor(f"invalid armored SSH signature: unexpected label {label!r}")

    sig = parse_signature_blob(payload)
    prefix = prefix_for(sig.sig_alg, sig.hash_alg)
    log.debug("encoded %s with %s as prefix %r", sig.sig_alg, sig.hash_alg, prefix)
    return prefix + b64url_nopad_encode(sig.signature)


def encode(armored: bytes) -> str:
    """Encode the output of ``ssh-keygen -Y sign`` as an sshminisig."""
    if isinstance(armored, str):
        armored = armored.encode("utf-8")
    try:
        return _encode(armored)
    except MinisigError as e:
        log.debug("encode rejected at %s stage: %s", e.stage, e)
        raise


def _decode(minisig: str) -> Tuple[AlgorithmPair, bytes]:
    if len(minisig) < 2:
        raise TokenTooShort(len(minisig))

    algs = algs_for_prefix(minisig[0])
    if algs.is_empty:
        raise UnknownPrefix(minisig[0])

    try:
        sig = b64url_nopad_decode(minisig[1:])
    except ValueError as e:
        raise SignatureDecodeError(f"failed to decode signature: {e}") from e
    log.debug("decoded prefix %r as %s with %s", minisig[0], algs.sig.value, algs.hash.value)
    return algs, sig


def decode(minisig: str) -> Tuple[AlgorithmPair, bytes]:
    """Split an sshminisig into its algorithm pair and raw signature bytes."""
    try:
        return _decode(minisig)
    except MinisigError as e:
        log.debug("decode rejected at %s stage: %s", e.stage, e)
        raise


__all__ = ["MAX_ARMORED_SIZE", "encode", "decode", "b64url_nopad_encode", "b64url_nopad_decode"]
