from __future__ import annotations

import string

from binx.core.io import ByteBuffer

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidPattern(ValueError):
    """Raised when a search pattern is not a well-formed hex byte string."""


def decode_pattern(text: str) -> bytes:
    """Decode a hex pattern like 'DEADBEEF', 'de ad be ef' or '0x0a0b'.

    Empty, odd-length and non-hex patterns raise `InvalidPattern`.
    """
    s = "".join(text.split())
    if s[:2].lower() == "0x":
        s = s[2:]
    if not s:
        raise InvalidPattern("empty pattern")
    if any(c not in _HEX_DIGITS for c in s):
        raise InvalidPattern(f"not hex: {text!r}")
    if len(s) % 2:
        raise InvalidPattern(f"odd number of hex digits: {text!r}")
    return bytes.fromhex(s)


def find_bytes(buffer: ByteBuffer, needle: bytes, start: int = 0) -> int | None:
    """Find `needle` bytes at or after `start`. Returns offset or None."""
    if not needle:
        start = max(0, start)
        return start if start <= buffer.size else None
    return buffer.find(needle, start)


def find(hex_pattern: str, buffer: ByteBuffer) -> int | None:
    """Offset of the first occurrence of `hex_pattern` in `buffer`.

    Returns None when the pattern decodes but does not occur; raises
    `InvalidPattern` when it does not decode.
    """
    return find_bytes(buffer, decode_pattern(hex_pattern), 0)
