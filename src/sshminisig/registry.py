"""Algorithm registry for the sshminisig prefix byte.

Each supported (signature algorithm, hash algorithm) pair has exactly one
ASCII prefix character:

  e  ssh-ed25519                          + sha512
  r  rsa-sha2-256                         + sha256
  s  rsa-sha2-512                         + sha512
  c  ecdsa-sha2-nistp256                  + sha512
  d  ecdsa-sha2-nistp384                  + sha512
  p  ecdsa-sha2-nistp521                  + sha512
  f  sk-ssh-ed25519@openssh.com           + sha512
  g  sk-ecdsa-sha2-nistp256@openssh.com   + sha256
  2  ssh-rsa                              + sha256
  5  ssh-rsa                              + sha512
  z  reserved (never produced, decodes like any unknown prefix)

The forward table is the source of truth; the reverse table is derived from
it once at import time and covers all 256 byte values, with ``EMPTY`` for
bytes that name no pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from .errors import UnsupportedAlgorithm


class SigAlg(str, Enum):
    ED25519 = "ssh-ed25519"
    RSA_SHA2_256 = "rsa-sha2-256"
    RSA_SHA2_512 = "rsa-sha2-512"
    ECDSA_P256 = "ecdsa-sha2-nistp256"
    ECDSA_P384 = "ecdsa-sha2-nistp384"
    ECDSA_P521 = "ecdsa-sha2-nistp521"
    SK_ED25519 = "sk-ssh-ed25519@openssh.com"
    SK_ECDSA_P256 = "sk-ecdsa-sha2-nistp256@openssh.com"
    LEGACY_RSA = "ssh-rsa"


class HashAlg(str, Enum):
    SHA256 = "sha256"
    SHA512 = "sha512"


@dataclass(frozen=True)
class AlgorithmPair:
    sig: Optional[SigAlg] = None
    hash: Optional[HashAlg] = None

    @property
    def is_empty(self) -> bool:
        return self.sig is None or self.hash is None


EMPTY = AlgorithmPair()

PREFIX_ED25519 = "e"
PREFIX_RSA256 = "r"
PREFIX_RSA512 = "s"
PREFIX_ECDSA_P256 = "c"
PREFIX_ECDSA_P384 = "d"
PREFIX_ECDSA_P521 = "p"
PREFIX_SK_ED25519 = "f"
PREFIX_SK_ECDSA = "g"
PREFIX_LEGACY_RSA256 = "2"
PREFIX_LEGACY_RSA512 = "5"
PREFIX_RESERVED = "z"

ALGS_TO_PREFIX: Mapping[AlgorithmPair, str] = MappingProxyType({
    AlgorithmPair(SigAlg.ED25519, HashAlg.SHA512): PREFIX_ED25519,
    AlgorithmPair(SigAlg.RSA_SHA2_256, HashAlg.SHA256): PREFIX_RSA256,
    AlgorithmPair(SigAlg.RSA_SHA2_512, HashAlg.SHA512): PREFIX_RSA512,
    AlgorithmPair(SigAlg.ECDSA_P256, HashAlg.SHA512): PREFIX_ECDSA_P256,
    AlgorithmPair(SigAlg.ECDSA_P384, HashAlg.SHA512): PREFIX_ECDSA_P384,
    AlgorithmPair(SigAlg.ECDSA_P521, HashAlg.SHA512): PREFIX_ECDSA_P521,
    AlgorithmPair(SigAlg.SK_ED25519, HashAlg.SHA512): PREFIX_SK_ED25519,
    AlgorithmPair(SigAlg.SK_ECDSA_P256, HashAlg.SHA256): PREFIX_SK_ECDSA,
    AlgorithmPair(SigAlg.LEGACY_RSA, HashAlg.SHA256): PREFIX_LEGACY_RSA256,
    AlgorithmPair(SigAlg.LEGACY_RSA, HashAlg.SHA512): PREFIX_LEGACY_RSA512,
})


def _build_prefix_table() -> Tuple[AlgorithmPair, ...]:
    table = [EMPTY] * 256
    for algs, prefix in ALGS_TO_PREFIX.items():
        idx = ord(prefix)
        if idx == ord(PREFIX_RESERVED) or not table[idx].is_empty:
            raise RuntimeError(f"prefix {prefix!r} assigned twice or reserved")
        table[idx] = algs
    return tuple(table)


# Indexed by byte value; never mutated after import.
PREFIX_TO_ALGS: Tuple[AlgorithmPair, ...] = _build_prefix_table()


def _plain(name: Union[str, Enum]) -> str:
    return name.value if isinstance(name, Enum) else name


def prefix_for(sig_alg: Union[str, SigAlg], hash_alg: Union[str, HashAlg]) -> str:
    """Return the prefix character for an exact (signature, hash) name match."""
    try:
        algs = AlgorithmPair(SigAlg(sig_alg), HashAlg(hash_alg))
    except ValueError:
        raise UnsupportedAlgorithm(_plain(sig_alg), _plain(hash_alg)) from None
    prefix = ALGS_TO_PREFIX.get(algs)
    if prefix is None:
        raise UnsupportedAlgorithm(_plain(sig_alg), _plain(hash_alg))
    return prefix


def algs_for_prefix(prefix: Union[int, str]) -> AlgorithmPair:
    """Reverse lookup. Total: anything that is not a known prefix gives ``EMPTY``."""
    if isinstance(prefix, str):
        if len(prefix) != 1:
            return EMPTY
        prefix = ord(prefix)
    if 0 <= prefix < len(PREFIX_TO_ALGS):
        return PREFIX_TO_ALGS[prefix]
    return EMPTY


__all__ = [
    "SigAlg",
    "HashAlg",
    "AlgorithmPair",
    "EMPTY",
    "ALGS_TO_PREFIX",
    "PREFIX_TO_ALGS",
    "PREFIX_ED25519",
    "PREFIX_RSA256",
    "PREFIX_RSA512",
    "PREFIX_ECDSA_P256",
    "PREFIX_ECDSA_P384",
    "PREFIX_ECDSA_P521",
    "PREFIX_SK_ED25519",
    "PREFIX_SK_ECDSA",
    "PREFIX_LEGACY_RSA256",
    "PREFIX_LEGACY_RSA512",
    "PREFIX_RESERVED",
    "prefix_for",
    "algs_for_prefix",
]
