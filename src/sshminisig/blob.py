"""Parser for the binary SSHSIG blob carried inside the armor.

Layout (all integers big-endian, ``string`` = uint32 length + bytes):

    byte[6]  "SSHSIG"
    uint32   version (1)
    string   public key
    string   namespace
    string   reserved
    string   hash algorithm
    string   signature
               string  signature algorithm
               string  signature data
               ...     algorithm-specific trailer (SK flags + counter)

Every length is attacker controlled; reads go through ``Reader`` which
reports short input as ``None`` instead of slicing past the end.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from .errors import BadMagic, BadVersion, MissingSignatureData, TruncatedBlob

MAGIC = b"SSHSIG"
SIG_VERSION = 1

_U32 = struct.Struct(">I")


@dataclass(frozen=True)
class SignatureBlob:
    sig_alg: str
    hash_alg: str
    signature: bytes


class Reader:
    """Forward-only cursor over an untrusted byte buffer."""

    def __init__(self, buf: bytes):
        self._buf = bytes(buf)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._pos

    def read(self, n: int) -> Optional[bytes]:
        if n < 0 or n > self.remaining:
            return None
        out = self._buf[self._pos : self._pos + n]
        self._pos += n
        return out

    def read_uint32(self) -> Optional[int]:
        raw = self.read(_U32.size)
        if raw is None:
            return None
        return _U32.unpack(raw)[0]

    def read_string(self) -> Optional[bytes]:
        """Read a uint32-length-prefixed string.

        On failure the cursor is left where it was, so a caller may report
        the position of the field that did not fit.
        """
        start = self._pos
        n = self.read_uint32()
        if n is None:
            return None
        data = self.read(n)
        if data is None:
            self._pos = start
            return None
        return data

    def rest(self) -> bytes:
        out = self._buf[self._pos :]
        self._pos = len(self._buf)
        return out


def _name(raw: bytes) -> str:
    # names are ASCII on the wire; anything else just fails the registry lookup
    return raw.decode("utf-8", errors="backslashreplace")


def parse_signature_blob(blob: bytes) -> SignatureBlob:
    r = Reader(blob)

    magic = r.read(len(MAGIC))
    if magic is None:
        raise TruncatedBlob("magic")
    if magic != MAGIC:
        raise BadMagic()

    version = r.read_uint32()
    if version is None:
        raise TruncatedBlob("version")
    if version != SIG_VERSION:
        raise BadVersion(version)

    # public key, namespace and reserved are not needed for the minisig
    for field in ("public key", "namespace", "reserved"):
        if r.read_string() is None:
            raise TruncatedBlob(field)

    hash_alg = r.read_string()
    if hash_alg is None:
        raise TruncatedBlob("hash algorithm")
    sig_blob = r.read_string()
    if sig_blob is None:
        raise TruncatedBlob("signature")

    inner = Reader(sig_blob)
    sig_alg = inner.read_string()
    if sig_alg is None:
        raise MissingSignatureData("signature algorithm")
    sig_data = inner.read_string()
    if sig_data is None:
        raise MissingSignatureData("signature data")

    # SK algorithms append flags (1 byte) and counter (uint32); keep verbatim
    sig_data += inner.rest()

    return SignatureBlob(sig_alg=_name(sig_alg), hash_alg=_name(hash_alg), signature=sig_data)


__all__ = ["MAGIC", "SIG_VERSION", "SignatureBlob", "Reader", "parse_signature_blob"]
