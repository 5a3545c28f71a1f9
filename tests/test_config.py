import os
import unittest
from dataclasses import FrozenInstanceError
from unittest import mock

from wssetoken.config import DEFAULT_CONFIG, Sha1Config


class TestSha1Config(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(DEFAULT_CONFIG.hex_case, "lower")
        self.assertEqual(DEFAULT_CONFIG.pad_char, "=")
        self.assertEqual(DEFAULT_CONFIG.bits_per_unit, 8)
        with self.assertRaises(FrozenInstanceError):
            DEFAULT_CONFIG.hex_case = "upper"  # type: ignore[misc]

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            Sha1Config(hex_case="title")
        with self.assertRaises(ValueError):
            Sha1Config(pad_char="==")
        with self.assertRaises(ValueError):
            Sha1Config(bits_per_unit=32)
        Sha1Config(pad_char="")

    def test_from_env(self) -> None:
        env = {"WSSETOKEN_HEXCASE": "UPPER", "WSSETOKEN_B64PAD": "", "WSSETOKEN_CHRSZ": "16"}
        with mock.patch.dict(os.environ, env):
            cfg = Sha1Config.from_env()
        self.assertEqual(cfg, Sha1Config(hex_case="upper", pad_char="", bits_per_unit=16))

    def test_from_env_unset(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(Sha1Config.from_env(), DEFAULT_CONFIG)

    def test_from_env_bad_chrsz(self) -> None:
        with mock.patch.dict(os.environ, {"WSSETOKEN_CHRSZ": "eight"}):
            with self.assertRaises(ValueError):
                Sha1Config.from_env()
        with mock.patch.dict(os.environ, {"WSSETOKEN_CHRSZ": "12"}):
            with self.assertRaises(ValueError):
                Sha1Config.from_env()


if __name__ == "__main__":
    unittest.main()
