from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

HEX_CASES = ("lower", "upper")
BITS_PER_UNIT = (8, 16)


@dataclass(frozen=True)
class Sha1Config:
    """Output and input settings shared by the hash and codec functions.

    hex_case:       "lower" or "upper" hex digits
    pad_char:       base64 pad character, "=" for strict RFC 4648 or "" to omit
    bits_per_unit:  8 treats input as 8-bit characters, 16 as 16-bit code units
    """

    hex_case: str = "lower"
    pad_char: str = "="
    bits_per_unit: int = 8

    def __post_init__(self) -> None:
        if self.hex_case not in HEX_CASES:
            raise ValueError(f"hex_case must be one of {HEX_CASES}, got {self.hex_case!r}")
        if len(self.pad_char) > 1:
            raise ValueError("pad_char must be a single character or empty")
        if self.bits_per_unit not in BITS_PER_UNIT:
            raise ValueError(f"bits_per_unit must be 8 or 16, got {self.bits_per_unit!r}")

    @classmethod
    def from_env(cls, base: Optional["Sha1Config"] = None) -> "Sha1Config":
        cfg = base if base is not None else cls()
        hex_case = os.getenv("WSSETOKEN_HEXCASE")
        pad = os.getenv("WSSETOKEN_B64PAD")
        chrsz = os.getenv("WSSETOKEN_CHRSZ")
        if hex_case:
            cfg = replace(cfg, hex_case=hex_case.strip().lower())
        if pad is not None:
            cfg = replace(cfg, pad_char=pad)
        if chrsz:
            try:
                bits = int(chrsz, 10)
            except ValueError:
                raise ValueError(f"WSSETOKEN_CHRSZ must be 8 or 16, got {chrsz!r}") from None
            cfg = replace(cfg, bits_per_unit=bits)
        return cfg


DEFAULT_CONFIG = Sha1Config()
