import hashlib
import unittest

from wssetoken.core import SHA1_IV, add32, compress_block, core_sha1, ft, kt, rl, sha1_pad
from wssetoken.sha1 import sha1_digest, sha1_hex, sha1_str, sha1_vm_test
from wssetoken.config import Sha1Config
from wssetoken.words import pack


class TestSha1Core(unittest.TestCase):
    def test_fips_vectors(self) -> None:
        self.assertEqual(sha1_hex("abc"), "a9993e364706816aba3e25717850c26c9cd0d89d")
        self.assertEqual(sha1_hex(""), "da39a3ee5e6b4b0d3255bfef95601890afd80709")
        self.assertEqual(
            sha1_hex("abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"),
            "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
        )
        self.assertTrue(sha1_vm_test())

    def test_matches_hashlib(self) -> None:
        vectors = [
            b"",
            b"a",
            b"abc",
            b"message digest",
            b"The quick brown fox jumps over the lazy dog",
            bytes(range(256)),
            b"\xff" * 1000,
        ]
        for m in vectors:
            self.assertEqual(sha1_hex(m), hashlib.sha1(m).hexdigest())

    def test_padding_boundaries(self) -> None:
        # 55 bytes fits one block, 56..63 need a second one
        for n in (54, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129):
            m = bytes((i * 7 + 3) & 0xFF for i in range(n))
            self.assertEqual(sha1_hex(m), hashlib.sha1(m).hexdigest(), msg=f"len={n}")

    def test_str_and_bytes_agree(self) -> None:
        s = "".join(chr(i) for i in range(256))
        self.assertEqual(sha1_digest(s), sha1_digest(s.encode("latin-1")))

    def test_wide_chars_masked_in_8bit_mode(self) -> None:
        # 0x161 keeps only its low byte 0x61 ('a')
        self.assertEqual(sha1_hex("š"), hashlib.sha1(b"a").hexdigest())

    def test_16bit_units(self) -> None:
        cfg = Sha1Config(bits_per_unit=16)
        for s in ("", "abc", "š中文", "x" * 40):
            self.assertEqual(sha1_hex(s, cfg), hashlib.sha1(s.encode("utf-16-be")).hexdigest())

    def test_digest_shape(self) -> None:
        for m in ("", "a", "a" * 1000):
            d = sha1_digest(m)
            self.assertEqual(len(d), 5)
            self.assertTrue(all(0 <= w <= 0xFFFFFFFF for w in d))
            self.assertEqual(len(sha1_hex(m)), 40)

    def test_idempotent(self) -> None:
        self.assertEqual(sha1_hex("same input"), sha1_hex("same input"))

    def test_raw_string(self) -> None:
        self.assertEqual(sha1_str("abc"), hashlib.sha1(b"abc").digest().decode("latin-1"))
        self.assertEqual(len(sha1_str("abc", Sha1Config(bits_per_unit=16))), 10)

    def test_uppercase_hex(self) -> None:
        cfg = Sha1Config(hex_case="upper")
        self.assertEqual(sha1_hex("abc", cfg), "A9993E364706816ABA3E25717850C26C9CD0D89D")


class TestSha1Primitives(unittest.TestCase):
    def test_rotate_and_add(self) -> None:
        self.assertEqual(rl(0x80000000, 1), 1)
        self.assertEqual(rl(0x12345678, 8), 0x34567812)
        self.assertEqual(add32(0xFFFFFFFF, 1), 0)
        self.assertEqual(add32(0xEFCDAB89, 0x98BADCFE), (0xEFCDAB89 + 0x98BADCFE) & 0xFFFFFFFF)

    def test_round_functions(self) -> None:
        b, c, d = 0xF0F0F0F0, 0xCCCCCCCC, 0xAAAAAAAA
        self.assertEqual(ft(0, b, c, d), (b & c) | (~b & d) & 0xFFFFFFFF)
        self.assertEqual(ft(20, b, c, d), b ^ c ^ d)
        self.assertEqual(ft(40, b, c, d), (b & c) | (b & d) | (c & d))
        self.assertEqual(ft(79, b, c, d), b ^ c ^ d)
        self.assertEqual([kt(t) for t in (0, 20, 40, 60)], [0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6])
        with self.assertRaises(ValueError):
            ft(80, b, c, d)
        with self.assertRaises(ValueError):
            kt(-1)

    def test_padding_layout(self) -> None:
        x = sha1_pad([], 0)
        self.assertEqual(len(x), 16)
        self.assertEqual(x[0], 0x80000000)
        self.assertEqual(x[15], 0)

        x = sha1_pad(pack("abc"), 24)
        self.assertEqual(x[0], 0x61626380)
        self.assertEqual(x[15], 24)

        x = sha1_pad(pack("a" * 56), 448)
        self.assertEqual(len(x), 32)
        self.assertEqual(x[14], 0x80000000)
        self.assertEqual(x[31], 448)

    def test_single_block_compression(self) -> None:
        block = sha1_pad(pack("abc"), 24)
        self.assertEqual(compress_block(SHA1_IV, block), core_sha1(pack("abc"), 24))
        self.assertEqual(
            compress_block(SHA1_IV, block),
            (0xA9993E36, 0x4706816A, 0xBA3E2571, 0x7850C26C, 0x9CD0D89D),
        )
        with self.assertRaises(ValueError):
            compress_block(SHA1_IV, [0] * 15)


if __name__ == "__main__":
    unittest.main()
