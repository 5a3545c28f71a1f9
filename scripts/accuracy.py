#!/usr/bin/env python3
"""Randomized accuracy checks of SHA-1, HMAC-SHA1 and base64 against the standard library."""
from __future__ import annotations

import argparse
import base64
import hashlib
import hmac
import random
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from wssetoken import base64codec
from wssetoken.config import Sha1Config
from wssetoken.hmac_sha1 import hmac_sha1_hex
from wssetoken.numpy_sha1 import sha1_many
from wssetoken.sha1 import sha1_digest, sha1_hex
from wssetoken.verify import check_base64_vectors, check_hmac_vectors, check_sha1_vectors


def _random_bytes(rng: random.Random, max_len: int) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(rng.randrange(max_len + 1)))


def check_vectors() -> bool:
    ok = True
    for name, check in (("sha1", check_sha1_vectors), ("hmac", check_hmac_vectors), ("base64", check_base64_vectors)):
        passed, bad = check()
        if not passed:
            print(f"{name} vector mismatches: {bad}")
        ok &= passed
    print(f"known_vectors: {'PASS' if ok else 'FAIL'}")
    return ok


def check_random_sha1(trials: int, seed: int) -> bool:
    rng = random.Random(seed)
    fails = 0
    for _ in range(trials):
        m = _random_bytes(rng, 300)
        if sha1_hex(m) != hashlib.sha1(m).hexdigest():
            fails += 1
            print(f"sha1 mismatch: len={len(m)}")
    print(f"random_sha1: {'PASS' if fails == 0 else 'FAIL'} fails={fails}/{trials}")
    return fails == 0


def check_random_sha1_16bit(trials: int, seed: int) -> bool:
    rng = random.Random(seed)
    cfg = Sha1Config(bits_per_unit=16)
    fails = 0
    for _ in range(trials):
        s = "".join(chr(rng.randrange(0xD800)) for _ in range(rng.randrange(100)))
        if sha1_hex(s, cfg) != hashlib.sha1(s.encode("utf-16-be")).hexdigest():
            fails += 1
    print(f"random_sha1_16bit: {'PASS' if fails == 0 else 'FAIL'} fails={fails}/{trials}")
    return fails == 0


def check_random_hmac(trials: int, seed: int) -> bool:
    rng = random.Random(seed)
    fails = 0
    for _ in range(trials):
        key = _random_bytes(rng, 150)
        data = _random_bytes(rng, 200)
        if hmac_sha1_hex(key, data) != hmac.new(key, data, hashlib.sha1).hexdigest():
            fails += 1
            print(f"hmac mismatch: key_len={len(key)} data_len={len(data)}")
    print(f"random_hmac: {'PASS' if fails == 0 else 'FAIL'} fails={fails}/{trials}")
    return fails == 0


def check_random_base64(trials: int, seed: int) -> bool:
    rng = random.Random(seed)
    fails = 0
    for _ in range(trials):
        data = _random_bytes(rng, 100)
        text = base64codec.encode(data)
        if text != base64.b64encode(data).decode("ascii") or base64codec.decode(text) != data:
            fails += 1
    print(f"random_base64: {'PASS' if fails == 0 else 'FAIL'} fails={fails}/{trials}")
    return fails == 0


def check_batch(trials: int, seed: int) -> bool:
    rng = random.Random(seed)
    messages = [_random_bytes(rng, 300) for _ in range(trials)]
    ok = sha1_many(messages) == [sha1_digest(m) for m in messages]
    print(f"batch_engine: {'PASS' if ok else 'FAIL'} messages={trials}")
    return ok


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--trials", type=int, default=200)
    ap.add_argument("--seed", type=int, default=123)
    args = ap.parse_args()

    ok = True
    ok &= check_vectors()
    ok &= check_random_sha1(args.trials, args.seed)
    ok &= check_random_sha1_16bit(args.trials, args.seed)
    ok &= check_random_hmac(args.trials, args.seed)
    ok &= check_random_base64(args.trials, args.seed)
    ok &= check_batch(args.trials, args.seed)

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
