from __future__ import annotations

from typing import List, Tuple

MASK32 = 0xFFFFFFFF

Digest = Tuple[int, int, int, int, int]


def u32(x: int) -> int:
    return x & MASK32


def rl(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


def add32(*xs: int) -> int:
    s = 0
    for v in xs:
        s = (s + (v & MASK32)) & MASK32
    return s


# SHA-1 initial value (FIPS 180-1)
SHA1_IV: Digest = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Round constants K_t, one per 20-round range
_KT: Tuple[int, int, int, int] = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def ft(t: int, b: int, c: int, d: int) -> int:
    b, c, d = u32(b), u32(c), u32(d)
    if 0 <= t < 20:
        # Ch
        return u32((b & c) | ((~b) & d))
    if 20 <= t < 40:
        return b ^ c ^ d
    if 40 <= t < 60:
        # Maj
        return (b & c) | (b & d) | (c & d)
    if 60 <= t < 80:
        return b ^ c ^ d
    raise ValueError("t out of range")


def kt(t: int) -> int:
    if not 0 <= t < 80:
        raise ValueError("t out of range")
    return _KT[t // 20]


def expand_schedule(block: List[int]) -> List[int]:
    if len(block) != 16:
        raise ValueError("block must have 16 words")
    w = [u32(x) for x in block] + [0] * 64
    for j in range(16, 80):
        w[j] = rl(w[j - 3] ^ w[j - 8] ^ w[j - 14] ^ w[j - 16], 1)
    return w


def compress_block(state: Digest, block: List[int]) -> Digest:
    """
    SHA-1 compression of one 512-bit block.
    Inputs:
      - state: (a, b, c, d, e) chaining value
      - block: 16 big-endian 32-bit words
    Returns the new chaining value (working registers added into state).
    """
    w = expand_schedule(block)
    a, b, c, d, e = (u32(x) for x in state)

    for t in range(80):
        tmp = add32(rl(a, 5), ft(t, b, c, d), e, w[t], _KT[t // 20])
        e = d
        d = c
        c = rl(b, 30)
        b = a
        a = tmp

    return (
        add32(state[0], a),
        add32(state[1], b),
        add32(state[2], c),
        add32(state[3], d),
        add32(state[4], e),
    )


def sha1_pad(words: List[int], bit_len: int) -> List[int]:
    """Append the 0x80 marker and the 32-bit bit length, block aligned.

    The marker goes at bit ``bit_len`` counting MSB-first; the length fills
    the last word of the final 16-word block. When fewer than 64 bits are
    left in the last block an extra block is added.
    """
    n_words = (((bit_len + 64) >> 9) << 4) + 16
    x = [u32(v) for v in words[:n_words]]
    x += [0] * (n_words - len(x))
    x[bit_len >> 5] |= 0x80 << (24 - (bit_len % 32))
    x[n_words - 1] = u32(bit_len)
    return x


def core_sha1(words: List[int], bit_len: int, iv: Digest = SHA1_IV) -> Digest:
    x = sha1_pad(words, bit_len)
    state = (u32(iv[0]), u32(iv[1]), u32(iv[2]), u32(iv[3]), u32(iv[4]))
    for off in range(0, len(x), 16):
        state = compress_block(state, x[off : off + 16])
    return state
