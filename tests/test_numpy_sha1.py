import hashlib
import unittest

import numpy as np

from wssetoken.config import Sha1Config
from wssetoken.core import SHA1_IV, compress_block, sha1_pad
from wssetoken.numpy_sha1 import sha1_compress_u32, sha1_many
from wssetoken.sha1 import sha1_digest
from wssetoken.words import pack


class TestNumpySha1(unittest.TestCase):
    def test_mixed_lengths(self) -> None:
        messages = [b"", b"abc", b"a" * 55, b"a" * 56, b"b" * 64, bytes(range(256)) * 3]
        digests = sha1_many(messages)
        self.assertEqual(len(digests), len(messages))
        for m, d in zip(messages, digests):
            self.assertEqual(b"".join(w.to_bytes(4, "big") for w in d), hashlib.sha1(m).digest())
            self.assertIsInstance(d[0], int)

    def test_matches_python_engine(self) -> None:
        messages = ["abc", "There is more than words", "š" * 70]
        self.assertEqual(sha1_many(messages), [sha1_digest(m) for m in messages])
        cfg = Sha1Config(bits_per_unit=16)
        self.assertEqual(sha1_many(messages, cfg), [sha1_digest(m, cfg) for m in messages])

    def test_empty_batch(self) -> None:
        self.assertEqual(sha1_many([]), [])

    def test_compress_u32(self) -> None:
        block = sha1_pad(pack("abc"), 24)
        state = np.array([SHA1_IV, SHA1_IV], dtype=np.uint32)
        blocks = np.array([block, [0] * 16], dtype=np.uint32)
        out = sha1_compress_u32(state, blocks)
        self.assertEqual(out.dtype, np.uint32)
        self.assertEqual(tuple(int(v) for v in out[0]), compress_block(SHA1_IV, block))
        self.assertEqual(tuple(int(v) for v in out[1]), compress_block(SHA1_IV, [0] * 16))


if __name__ == "__main__":
    unittest.main()
