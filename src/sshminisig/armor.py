"""PEM-style armor used by ``ssh-keygen -Y sign``.

  -----BEGIN SSH SIGNATURE-----
  U1NIU0lHAAAAAQAAADMAAAALc3NoLWVkMjU1MTkAAAAg...
  -----END SSH SIGNATURE-----

Only the first block whose BEGIN line starts a line is considered. Optional
``Key: value`` headers, with or without a trailing blank line, are skipped.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Tuple

SSH_SIGNATURE_LABEL = "SSH SIGNATURE"
LINE_WIDTH = 70

_BEGIN = re.compile(rb"^-----BEGIN ([^\r\n]*?)-----[ \t]*\r?\n", re.MULTILINE)


class ArmorError(ValueError):
    """Raised when the input is not a well-formed armored block."""


def _strip_headers(body: bytes) -> bytes:
    # headers end at the first line without a colon; the blank separator is optional
    lines = body.splitlines(keepends=True)
    i = 0
    while i < len(lines) and b":" in lines[i]:
        i += 1
    return b"".join(lines[i:])


def unwrap(data: bytes) -> Tuple[str, bytes]:
    """Return ``(label, payload)`` of the first armored block in ``data``."""
    m = _BEGIN.search(data)
    if m is None:
        raise ArmorError("no armor BEGIN line found")
    label = m.group(1)
    end_marker = b"-----END " + label + b"-----"
    end = data.find(end_marker, m.end())
    if end < 0:
        raise ArmorError("missing armor END line")
    # END must open its own line
    if end != m.end() and data[end - 1 : end] != b"\n":
        raise ArmorError("armor END line is not at the start of a line")
    body = _strip_headers(data[m.end() : end])
    try:
        payload = base64.b64decode(b"".join(body.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ArmorError("armor body is not valid base64") from e
    return label.decode("ascii", errors="replace"), payload


def wrap(label: str, payload: bytes, width: int = LINE_WIDTH) -> bytes:
    b64 = base64.b64encode(payload).decode("ascii")
    lines = [b64[i : i + width] for i in range(0, len(b64), width)]
    out = [f"-----BEGIN {label}-----"]
    out.extend(lines)
    out.append(f"-----END {label}-----")
    return ("\n".join(out) + "\n").encode("ascii")


__all__ = ["ArmorError", "SSH_SIGNATURE_LABEL", "unwrap", "wrap"]
