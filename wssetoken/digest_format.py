from __future__ import annotations

from typing import Sequence

from . import base64codec
from .words import unpack_str, words_to_bytes_be

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def to_hex(digest: Sequence[int], hex_case: str = "lower") -> str:
    if hex_case not in ("lower", "upper"):
        raise ValueError(f"hex_case must be 'lower' or 'upper', got {hex_case!r}")
    tab = _HEX_UPPER if hex_case == "upper" else _HEX_LOWER
    out = []
    for b in words_to_bytes_be(digest):
        out.append(tab[b >> 4])
        out.append(tab[b & 0xF])
    return "".join(out)


def to_base64(digest: Sequence[int], pad: str = base64codec.PAD) -> str:
    return base64codec.encode(words_to_bytes_be(digest), pad=pad)


def to_str(digest: Sequence[int], bits_per_unit: int = 8) -> str:
    return unpack_str(digest, bits_per_unit)
