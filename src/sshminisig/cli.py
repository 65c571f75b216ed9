"""Command line driver.

    ssh-keygen -Y sign -f ~/.ssh/id_ed25519 -n file < message.txt | sshminisig
    sshminisig decode eAbC...
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .codec import decode, encode
from .config import TRAILING_NEWLINE
from .errors import MinisigError


def cmd_encode(args: argparse.Namespace) -> int:
    if args.input:
        armored = Path(args.input).read_bytes()
    else:
        armored = sys.stdin.buffer.read()
    minisig = encode(armored)
    sys.stdout.write(minisig + ("\n" if args.newline else ""))
    sys.stdout.flush()
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    algs, sig = decode(args.token)
    if args.json:
        print(json.dumps({
            "sig_alg": algs.sig.value,
            "hash_alg": algs.hash.value,
            "signature_hex": sig.hex(),
        }))
    else:
        print(f"{algs.sig.value} {algs.hash.value} {sig.hex()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("sshminisig", description="Convert armored SSH signatures to sshminisig")
    p.set_defaults(func=cmd_encode, input=None, newline=TRAILING_NEWLINE)
    sub = p.add_subparsers(dest="cmd")

    p_enc = sub.add_parser("encode", help="armored signature (stdin or --input) -> sshminisig")
    p_enc.add_argument("--input", help="read the armored signature from this file instead of stdin")
    p_enc.add_argument("--newline", action="store_true", default=TRAILING_NEWLINE)
    p_enc.set_defaults(func=cmd_encode)

    p_dec = sub.add_parser("decode", help="print the algorithms and signature of an sshminisig")
    p_dec.add_argument("token")
    p_dec.add_argument("--json", action="store_true")
    p_dec.set_defaults(func=cmd_decode)

    args = p.parse_args(argv)
    try:
        return args.func(args)
    except (MinisigError, OSError) as e:
        print(f"sshminisig: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
