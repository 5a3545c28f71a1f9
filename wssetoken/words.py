from __future__ import annotations

from typing import List, Sequence, Union

from .core import u32

Units = Union[str, bytes, bytearray, Sequence[int]]


def code_units(message: Units) -> List[int]:
    """Return the unit values of a str (code points) or byte sequence."""
    if isinstance(message, str):
        return [ord(ch) for ch in message]
    return [int(v) for v in message]


def _check_bits(bits_per_unit: int) -> None:
    if bits_per_unit not in (8, 16):
        raise ValueError(f"bits_per_unit must be 8 or 16, got {bits_per_unit!r}")


def pack(message: Units, bits_per_unit: int = 8) -> List[int]:
    """Pack units MSB-first into big-endian 32-bit words.

    Units wider than bits_per_unit lose their high bits.
    """
    _check_bits(bits_per_unit)
    mask = (1 << bits_per_unit) - 1
    units = code_units(message)
    words = [0] * ((len(units) * bits_per_unit + 31) >> 5)
    for i, v in enumerate(units):
        pos = i * bits_per_unit
        words[pos >> 5] |= (v & mask) << (32 - bits_per_unit - (pos % 32))
    return words


def unpack(words: Sequence[int], bits_per_unit: int = 8) -> List[int]:
    _check_bits(bits_per_unit)
    mask = (1 << bits_per_unit) - 1
    return [
        (u32(words[pos >> 5]) >> (32 - bits_per_unit - (pos % 32))) & mask
        for pos in range(0, len(words) * 32, bits_per_unit)
    ]


def unpack_str(words: Sequence[int], bits_per_unit: int = 8) -> str:
    return "".join(chr(v) for v in unpack(words, bits_per_unit))


def bytes_to_words_be(data: bytes) -> List[int]:
    if len(data) % 4:
        raise ValueError("data length must be a multiple of 4")
    return [int.from_bytes(data[i : i + 4], "big") for i in range(0, len(data), 4)]


def words_to_bytes_be(words: Sequence[int]) -> bytes:
    return b"".join(u32(w).to_bytes(4, "big") for w in words)
