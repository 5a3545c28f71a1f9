from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Dict, List, Tuple

from . import base64codec
from .hmac_sha1 import hmac_sha1_hex
from .numpy_sha1 import sha1_many
from .sha1 import sha1_digest, sha1_hex

SHA1_VECTORS: List[bytes] = [
    b"",
    b"a",
    b"abc",
    b"message digest",
    b"abcdefghijklmnopqrstuvwxyz",
    b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    b"1234567890" * 8,
]

HMAC_VECTORS: List[Tuple[bytes, bytes]] = [
    (b"", b""),
    (b"key", b"The quick brown fox jumps over the lazy dog"),
    (b"\x0b" * 20, b"Hi There"),
    (b"Jefe", b"what do ya want for nothing?"),
    (b"\xaa" * 80, b"Test Using Larger Than Block-Size Key - Hash Key First"),
]


def check_sha1_vectors(vectors: List[bytes] = SHA1_VECTORS) -> Tuple[bool, Dict[str, str]]:
    bad: Dict[str, str] = {}
    for m in vectors:
        ours = sha1_hex(m)
        ref = hashlib.sha1(m).hexdigest()
        if ours != ref:
            bad[repr(m[:20])] = ours
    return (len(bad) == 0), bad


def check_hmac_vectors(vectors: List[Tuple[bytes, bytes]] = HMAC_VECTORS) -> Tuple[bool, Dict[str, str]]:
    bad: Dict[str, str] = {}
    for key, data in vectors:
        ours = hmac_sha1_hex(key, data)
        ref = hmac.new(key, data, hashlib.sha1).hexdigest()
        if ours != ref:
            bad[repr((key[:8], data[:20]))] = ours
    return (len(bad) == 0), bad


def check_base64_vectors(vectors: List[bytes] = SHA1_VECTORS) -> Tuple[bool, Dict[str, str]]:
    bad: Dict[str, str] = {}
    for m in vectors + [b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", bytes(range(256))]:
        ours = base64codec.encode(m)
        ref = base64.b64encode(m).decode("ascii")
        if ours != ref or base64codec.decode(ours) != m:
            bad[repr(m[:20])] = ours
    return (len(bad) == 0), bad


def check_batch_engine(vectors: List[bytes] = SHA1_VECTORS) -> Tuple[bool, Dict[str, int]]:
    mismatches = 0
    for m, digest in zip(vectors, sha1_many(vectors)):
        if digest != sha1_digest(m):
            mismatches += 1
    return mismatches == 0, {"mismatches": mismatches}
