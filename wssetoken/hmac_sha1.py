from __future__ import annotations

from typing import List

from .config import DEFAULT_CONFIG, Sha1Config
from .core import Digest, core_sha1
from .digest_format import to_base64, to_hex, to_str
from .words import Units, code_units, pack

BLOCK_WORDS = 16
IPAD = 0x36363636
OPAD = 0x5C5C5C5C


def normalize_key(key: Units, bits_per_unit: int = 8) -> List[int]:
    """Return the key as exactly 16 words (512 bits).

    Keys longer than one block are replaced by their SHA-1 digest; shorter
    keys are zero-padded.
    """
    bkey = pack(key, bits_per_unit)
    if len(bkey) > BLOCK_WORDS:
        bkey = list(core_sha1(bkey, len(code_units(key)) * bits_per_unit))
    return bkey + [0] * (BLOCK_WORDS - len(bkey))


def core_hmac_sha1(key: Units, data: Units, config: Sha1Config = DEFAULT_CONFIG) -> Digest:
    bits = config.bits_per_unit
    bkey = normalize_key(key, bits)
    ipad = [w ^ IPAD for w in bkey]
    opad = [w ^ OPAD for w in bkey]

    inner = core_sha1(ipad + pack(data, bits), 512 + len(code_units(data)) * bits)
    return core_sha1(opad + list(inner), 512 + 160)


def hmac_sha1_hex(key: Units, data: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_hex(core_hmac_sha1(key, data, config), config.hex_case)


def hmac_sha1_base64(key: Units, data: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_base64(core_hmac_sha1(key, data, config), config.pad_char)


def hmac_sha1_str(key: Units, data: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_str(core_hmac_sha1(key, data, config), config.bits_per_unit)
