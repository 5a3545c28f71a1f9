"""
Vectorized SHA-1 over many messages at once using NumPy uint32 lanes.

Each message occupies one row; the 80 rounds run over whole columns, so the
32-bit wraparound comes from the dtype instead of explicit masking. Messages
that need fewer blocks than the longest one keep their state once their last
block has been absorbed.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .config import DEFAULT_CONFIG, Sha1Config
from .core import SHA1_IV, Digest, sha1_pad
from .words import Units, code_units, pack

_SHA1_IV_U32 = np.array(SHA1_IV, dtype=np.uint32)
_SHA1_KT_U32 = np.array((0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6), dtype=np.uint32)


def _rol_u32(x: np.ndarray, n: int) -> np.ndarray:
    return (x << np.uint32(n)) | (x >> np.uint32(32 - n))


def sha1_compress_u32(state: np.ndarray, blocks: np.ndarray) -> np.ndarray:
    """Compress one block per row. state is (n, 5), blocks is (n, 16), both uint32."""
    n = blocks.shape[0]
    w = np.empty((n, 80), dtype=np.uint32)
    w[:, :16] = blocks
    for j in range(16, 80):
        w[:, j] = _rol_u32(w[:, j - 3] ^ w[:, j - 8] ^ w[:, j - 14] ^ w[:, j - 16], 1)

    a = state[:, 0].copy()
    b = state[:, 1].copy()
    c = state[:, 2].copy()
    d = state[:, 3].copy()
    e = state[:, 4].copy()
    for t in range(80):
        if t < 20:
            f = d ^ (b & (c ^ d))
        elif t < 40:
            f = b ^ c ^ d
        elif t < 60:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d
        tmp = _rol_u32(a, 5) + f + e + w[:, t] + _SHA1_KT_U32[t // 20]
        a, b, c, d, e = tmp, a, _rol_u32(b, 30), c, d

    return np.stack(
        (state[:, 0] + a, state[:, 1] + b, state[:, 2] + c, state[:, 3] + d, state[:, 4] + e),
        axis=1,
    )


def sha1_many(messages: Sequence[Units], config: Sha1Config = DEFAULT_CONFIG) -> List[Digest]:
    bits = config.bits_per_unit
    padded = [sha1_pad(pack(m, bits), len(code_units(m)) * bits) for m in messages]
    if not padded:
        return []

    n_blocks = np.array([len(x) // 16 for x in padded], dtype=np.int64)
    max_blocks = int(n_blocks.max())
    x = np.zeros((len(padded), max_blocks * 16), dtype=np.uint32)
    for i, words in enumerate(padded):
        x[i, : len(words)] = words

    state = np.tile(_SHA1_IV_U32, (len(padded), 1))
    for blk in range(max_blocks):
        new_state = sha1_compress_u32(state, x[:, blk * 16 : (blk + 1) * 16])
        active = (n_blocks > blk)[:, None]
        state = np.where(active, new_state, state)

    return [tuple(int(v) for v in row) for row in state]
