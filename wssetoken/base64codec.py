"""RFC 4648 base64 encoding/decoding.

Standard alphabet, no line breaks. Input to the encoder is a byte string
(bytes, or a str restricted to code points 0..255); anything wider is
rejected rather than truncated. The decoder validates the whole text before
producing any output.

Output length: 4 * ceil(n/3) characters for n input bytes with padding,
  20 bytes (SHA-1 digest) -> 28 chars
"""

from __future__ import annotations

import re
from typing import List

from .errors import DomainError, FormatError
from .words import Units, code_units

CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="
_DECODE_MAP = {c: i for i, c in enumerate(CHARS)}
_VALID_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")


def _octets(data: Units) -> List[int]:
    units = code_units(data)
    for i, v in enumerate(units):
        if not 0 <= v <= 0xFF:
            raise DomainError(f"unit {v:#x} at index {i} is outside the byte range")
    return units


def encode(data: Units, pad: str = PAD) -> str:
    """Encode a byte string to base64 text.

    Full 3-byte groups map to 4 characters. A trailing group of 1 byte yields
    2 characters plus 2 pads, a trailing group of 2 bytes 3 characters plus
    1 pad.
    """
    octets = _octets(data)
    n = len(octets)
    full = n - n % 3
    out = []
    for i in range(0, full, 3):
        bits = (octets[i] << 16) | (octets[i + 1] << 8) | octets[i + 2]
        out.append(CHARS[(bits >> 18) & 0x3F])
        out.append(CHARS[(bits >> 12) & 0x3F])
        out.append(CHARS[(bits >> 6) & 0x3F])
        out.append(CHARS[bits & 0x3F])

    rem = n - full
    if rem == 1:
        bits = octets[full] << 16
        out.append(CHARS[(bits >> 18) & 0x3F])
        out.append(CHARS[(bits >> 12) & 0x3F])
        out.append(pad * 2)
    elif rem == 2:
        bits = (octets[full] << 16) | (octets[full + 1] << 8)
        out.append(CHARS[(bits >> 18) & 0x3F])
        out.append(CHARS[(bits >> 12) & 0x3F])
        out.append(CHARS[(bits >> 6) & 0x3F])
        out.append(pad)
    return "".join(out)


def decode(text: str) -> bytes:
    """Decode base64 text to bytes. Raises FormatError on any malformed input."""
    if not isinstance(text, str):
        raise FormatError(f"base64 text must be str, got {type(text).__name__}")
    if len(text) % 4 != 0:
        raise FormatError(f"base64 length must be a multiple of 4, got {len(text)}")
    if _VALID_RE.fullmatch(text) is None:
        raise FormatError("not a base64 string")

    n_pad = len(text) - len(text.rstrip(PAD))
    result = bytearray()
    for c in range(0, len(text), 4):
        group = text[c : c + 4]
        h = [_DECODE_MAP.get(ch, 0) for ch in group]
        bits = (h[0] << 18) | (h[1] << 12) | (h[2] << 6) | h[3]
        result.append((bits >> 16) & 0xFF)
        result.append((bits >> 8) & 0xFF)
        result.append(bits & 0xFF)
    if n_pad:
        del result[-n_pad:]
    return bytes(result)


def decode_str(text: str) -> str:
    return decode(text).decode("latin-1")
