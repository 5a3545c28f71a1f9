from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import List

from . import base64codec
from .config import Sha1Config
from .hmac_sha1 import hmac_sha1_base64, hmac_sha1_hex, hmac_sha1_str
from .isodate import isodatetime
from .sha1 import sha1_base64, sha1_hex, sha1_str, sha1_vm_test
from .wsse import NONCE_SALT, X_WSSE, wsse_header


def _read_arg(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _config(ns: argparse.Namespace) -> Sha1Config:
    cfg = Sha1Config.from_env()
    if getattr(ns, "upper", False):
        cfg = replace(cfg, hex_case="upper")
    if getattr(ns, "no_pad", False):
        cfg = replace(cfg, pad_char="")
    if getattr(ns, "chrsz", None) is not None:
        cfg = replace(cfg, bits_per_unit=ns.chrsz)
    return cfg


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", choices=["hex", "b64", "str"], default="hex")
    p.add_argument("--upper", action="store_true", help="uppercase hex output")
    p.add_argument("--no-pad", action="store_true", help="omit base64 '=' padding")
    p.add_argument("--chrsz", type=int, choices=[8, 16], default=None, help="bits per input character")


def cmd_verify_core(_: argparse.Namespace) -> int:
    from .verify import (
        check_base64_vectors,
        check_batch_engine,
        check_hmac_vectors,
        check_sha1_vectors,
    )

    ok_all = sha1_vm_test()
    print(f"sha1-vm-test: {'OK' if ok_all else 'FAIL'}")
    for name, check in (
        ("sha1", check_sha1_vectors),
        ("hmac-sha1", check_hmac_vectors),
        ("base64", check_base64_vectors),
        ("sha1-batch", check_batch_engine),
    ):
        ok, bad = check()
        print(f"{name}: {'OK' if ok else 'FAIL'}")
        for k, v in bad.items():
            print(f"  {k} -> {v}")
        ok_all = ok_all and ok
    print("verify-core:", "PASS" if ok_all else "FAIL")
    return 0 if ok_all else 1


def cmd_sha1(ns: argparse.Namespace) -> int:
    cfg = _config(ns)
    message = _read_arg(ns.message)
    fn = {"hex": sha1_hex, "b64": sha1_base64, "str": sha1_str}[ns.format]
    print(fn(message, cfg))
    return 0


def cmd_hmac_sha1(ns: argparse.Namespace) -> int:
    cfg = _config(ns)
    data = _read_arg(ns.data)
    fn = {"hex": hmac_sha1_hex, "b64": hmac_sha1_base64, "str": hmac_sha1_str}[ns.format]
    print(fn(ns.key, data, cfg))
    return 0


def cmd_b64encode(ns: argparse.Namespace) -> int:
    pad = "" if ns.no_pad else base64codec.PAD
    print(base64codec.encode(_read_arg(ns.text), pad=pad))
    return 0


def cmd_b64decode(ns: argparse.Namespace) -> int:
    print(base64codec.decode_str(_read_arg(ns.text).strip()))
    return 0


def cmd_isodate(_: argparse.Namespace) -> int:
    print(isodatetime())
    return 0


def cmd_header(ns: argparse.Namespace) -> int:
    password = _read_arg(ns.password).rstrip("\n")
    header = wsse_header(ns.username, password, salt=ns.salt, config=Sha1Config.from_env())
    if ns.with_name:
        print(f"{X_WSSE}: {header}")
    else:
        print(header)
    return 0


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="wssetoken")
    sub = p.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("verify-core", help="check SHA-1, HMAC-SHA1 and base64 against the standard library")
    s1.set_defaults(func=cmd_verify_core)

    s2 = sub.add_parser("sha1", help="SHA-1 digest of a message")
    s2.add_argument("message", help="message text (or - for stdin)")
    _add_config_args(s2)
    s2.set_defaults(func=cmd_sha1)

    s3 = sub.add_parser("hmac-sha1", help="HMAC-SHA1 of data under a key")
    s3.add_argument("key")
    s3.add_argument("data", help="data text (or - for stdin)")
    _add_config_args(s3)
    s3.set_defaults(func=cmd_hmac_sha1)

    s4 = sub.add_parser("b64encode", help="base64-encode text (code points 0..255)")
    s4.add_argument("text", help="text (or - for stdin)")
    s4.add_argument("--no-pad", action="store_true")
    s4.set_defaults(func=cmd_b64encode)

    s5 = sub.add_parser("b64decode", help="decode RFC 4648 base64 text")
    s5.add_argument("text", help="base64 text (or - for stdin)")
    s5.set_defaults(func=cmd_b64decode)

    s6 = sub.add_parser("isodate", help="print the current ISO 8601 timestamp")
    s6.set_defaults(func=cmd_isodate)

    s7 = sub.add_parser("header", help="build a WSSE UsernameToken header value")
    s7.add_argument("username")
    s7.add_argument("password", help="password (or - for stdin)")
    s7.add_argument("--salt", default=NONCE_SALT, help="nonce salt string")
    s7.add_argument("--with-name", action="store_true", help=f"prefix with '{X_WSSE}: '")
    s7.set_defaults(func=cmd_header)

    args = p.parse_args(argv)
    try:
        return int(args.func(args))
    except ValueError as exc:
        print(f"{args.cmd}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
