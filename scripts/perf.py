#!/usr/bin/env python3
"""Performance micro-benchmarks for the SHA-1 engines and the base64 codec."""
from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from wssetoken import base64codec
from wssetoken.numpy_sha1 import sha1_many
from wssetoken.sha1 import sha1_digest
from wssetoken.wsse import wsse_header


def bench_sha1_python(messages: list) -> None:
    start = time.time()
    for m in messages:
        sha1_digest(m)
    elapsed = time.time() - start
    rate = len(messages) / elapsed if elapsed else 0.0
    print(f"sha1_python: messages={len(messages)} time={elapsed:.3f}s rate={rate:.2f}/s")


def bench_sha1_numpy(messages: list) -> None:
    start = time.time()
    sha1_many(messages)
    elapsed = time.time() - start
    rate = len(messages) / elapsed if elapsed else 0.0
    print(f"sha1_numpy: messages={len(messages)} time={elapsed:.3f}s rate={rate:.2f}/s")


def bench_base64(messages: list) -> None:
    start = time.time()
    for m in messages:
        base64codec.decode(base64codec.encode(m))
    elapsed = time.time() - start
    rate = len(messages) / elapsed if elapsed else 0.0
    print(f"base64_roundtrip: messages={len(messages)} time={elapsed:.3f}s rate={rate:.2f}/s")


def bench_header(count: int) -> None:
    start = time.time()
    for i in range(count):
        wsse_header("user", f"password{i}")
    elapsed = time.time() - start
    rate = count / elapsed if elapsed else 0.0
    print(f"wsse_header: count={count} time={elapsed:.3f}s rate={rate:.2f}/s")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--messages", type=int, default=500)
    ap.add_argument("--length", type=int, default=120)
    ap.add_argument("--seed", type=int, default=2024)
    args = ap.parse_args()

    rng = random.Random(args.seed)
    messages = [bytes(rng.getrandbits(8) for _ in range(args.length)) for _ in range(args.messages)]

    bench_sha1_python(messages)
    bench_sha1_numpy(messages)
    bench_base64(messages)
    bench_header(min(args.messages, 200))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
