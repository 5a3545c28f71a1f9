from __future__ import annotations

from .config import DEFAULT_CONFIG, Sha1Config
from .core import Digest, core_sha1
from .digest_format import to_base64, to_hex, to_str
from .words import Units, code_units, pack

SELF_TEST_HEX = "a9993e364706816aba3e25717850c26c9cd0d89d"


def sha1_digest(message: Units, config: Sha1Config = DEFAULT_CONFIG) -> Digest:
    bits = config.bits_per_unit
    return core_sha1(pack(message, bits), len(code_units(message)) * bits)


def sha1_hex(message: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_hex(sha1_digest(message, config), config.hex_case)


def sha1_base64(message: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_base64(sha1_digest(message, config), config.pad_char)


def sha1_str(message: Units, config: Sha1Config = DEFAULT_CONFIG) -> str:
    return to_str(sha1_digest(message, config), config.bits_per_unit)


def sha1_vm_test() -> bool:
    """Check the engine against the FIPS 180-1 "abc" vector."""
    return sha1_hex("abc") == SELF_TEST_HEX
