import os
import sys
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from securepayload.aes import (  # noqa: E402
    aes128_cbc_decrypt,
    aes128_cbc_encrypt,
    generate_iv,
)
from securepayload.errors import EncryptionFailure, EntropyUnavailable, Malformed  # noqa: E402

# NIST SP 800-38A F.2.1 / F.2.2 CBC-AES128
KEY = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
IV = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
PT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a"
    "ae2d8a571e03ac9c9eb76fac45af8e51"
    "30c81c46a35ce411e5fbc1191a0a52ef"
    "f69f2445df4f9b17ad2b417be66c3710"
)
CT = bytes.fromhex(
    "7649abac8119b246cee98e9b12e9197d"
    "5086cb9b507219ee95db113a917678b2"
    "73bed6b8e3c1743b7116e69e22229516"
    "3ff1caa1681fac09120eca307586e1a7"
)


class _FixedSource:
    def __init__(self, fill: int = 0xAB):
        self.fill = fill
        self.calls = []

    def read(self, n):
        self.calls.append(n)
        return bytes([self.fill]) * n


class _BrokenSource:
    def read(self, n):
        raise OSError("no entropy")


class CipherEngineTests(unittest.TestCase):
    def test_nist_cbc_aes128_vectors(self):
        self.assertEqual(aes128_cbc_encrypt(KEY, IV, PT), CT)
        self.assertEqual(aes128_cbc_decrypt(KEY, IV, CT), PT)

    def test_no_cipher_level_padding(self):
        self.assertEqual(len(aes128_cbc_encrypt(KEY, IV, PT[:32])), 32)

    def test_caller_iv_left_untouched(self):
        iv = bytearray(IV)
        aes128_cbc_encrypt(KEY, iv, PT)
        self.assertEqual(bytes(iv), IV)
        # same IV reused for decryption must still work
        self.assertEqual(aes128_cbc_decrypt(KEY, iv, CT), PT)

    def test_generate_iv_uses_injected_source(self):
        src = _FixedSource(0x5A)
        iv = generate_iv(src)
        self.assertEqual(iv, b"\x5a" * 16)
        self.assertEqual(src.calls, [16])

    def test_generate_iv_system_random(self):
        a, b = generate_iv(), generate_iv()
        self.assertEqual(len(a), 16)
        self.assertNotEqual(a, b)

    def test_generate_iv_entropy_failure(self):
        with self.assertRaises(EntropyUnavailable):
            generate_iv(_BrokenSource())

    def test_bad_key_length(self):
        for key in (KEY[:15], KEY + KEY, b""):
            with self.assertRaises(EncryptionFailure):
                aes128_cbc_encrypt(key, IV, PT)
            with self.assertRaises(EncryptionFailure):
                aes128_cbc_decrypt(key, IV, CT)

    def test_key_must_be_bytes(self):
        with self.assertRaises(EncryptionFailure):
            aes128_cbc_encrypt(KEY.hex(), IV, PT)

    def test_bad_iv_length(self):
        with self.assertRaises(EncryptionFailure):
            aes128_cbc_encrypt(KEY, IV[:8], PT)

    def test_misaligned_input(self):
        with self.assertRaises(EncryptionFailure):
            aes128_cbc_encrypt(KEY, IV, PT[:20])
        with self.assertRaises(Malformed):
            aes128_cbc_decrypt(KEY, IV, CT[:20])


if __name__ == "__main__":
    unittest.main(verbosity=2)
