"""Error taxonomy for sshminisig.

Every failure is an ordinary ``ValueError`` subclass tagged with the stage
that produced it:

  envelope  oversized input, armor unwrap failure, wrong armor label
  parse     bad magic, bad version, truncated field, missing signature data
  lookup    unsupported algorithm pair, unknown prefix byte
  decode    token too short
  encoding  malformed base64 payload
"""

from __future__ import annotations


class MinisigError(ValueError):
    stage = "unknown"


class EnvelopeError(MinisigError):
    stage = "envelope"


class ArmoredTooLarge(EnvelopeError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"armored signature too large ({size} > {limit} bytes)")
        self.size = size
        self.limit = limit


class InvalidArmor(EnvelopeError):
    pass


class ParseError(MinisigError):
    stage = "parse"


class BadMagic(ParseError):
    def __init__(self) -> None:
        super().__init__("invalid magic preamble")


class BadVersion(ParseError):
    def __init__(self, version: int):
        super().__init__(f"invalid signature version: {version}")
        self.version = version


class TruncatedBlob(ParseError):
    def __init__(self, field: str):
        super().__init__(f"truncated signature blob (reading {field})")
        self.field = field


class MissingSignatureData(ParseError):
    def __init__(self, field: str):
        super().__init__(f"invalid signature blob: missing {field}")
        self.field = field


class AlgorithmLookupError(MinisigError):
    stage = "lookup"


class UnsupportedAlgorithm(AlgorithmLookupError):
    def __init__(self, sig_alg: str, hash_alg: str):
        super().__init__(f"unsupported algorithm: {sig_alg!r} with {hash_alg!r}")
        self.sig_alg = sig_alg
        self.hash_alg = hash_alg


class UnknownPrefix(AlgorithmLookupError):
    def __init__(self, prefix: str):
        super().__init__(f"unknown prefix: {prefix!r}")
        self.prefix = prefix


class TokenTooShort(MinisigError):
    stage = "decode"

    def __init__(self, length: int):
        super().__init__(f"sshminisig too short ({length} characters)")
        self.length = length


class SignatureDecodeError(MinisigError):
    stage = "encoding"


__all__ = [
    "MinisigError",
    "EnvelopeError",
    "ArmoredTooLarge",
    "InvalidArmor",
    "ParseError",
    "BadMagic",
    "BadVersion",
    "TruncatedBlob",
    "MissingSignatureData",
    "AlgorithmLookupError",
    "UnsupportedAlgorithm",
    "UnknownPrefix",
    "TokenTooShort",
    "SignatureDecodeError",
]
