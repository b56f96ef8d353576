# securepayload/aes.py
from typing import Optional

from Crypto.Cipher import AES

from securepayload.entropy import EntropySource, read_random
from securepayload.errors import EncryptionFailure, Malformed

BLOCK_SIZE = AES.block_size  # 16
KEY_SIZE = 16
IV_SIZE = BLOCK_SIZE


def generate_iv(source: Optional[EntropySource] = None) -> bytes:
    return read_random(source, IV_SIZE)


def _new_cipher(key16: bytes, iv: bytes):
    if not isinstance(key16, (bytes, bytearray)) or len(key16) != KEY_SIZE:
        got = len(key16) if hasattr(key16, "__len__") else "n/a"
        raise EncryptionFailure(f"AES-128 needs a {KEY_SIZE}-byte key, got {got}")
    if len(iv) != IV_SIZE:
        raise EncryptionFailure(f"IV must be {IV_SIZE} bytes, got {len(iv)}")
    try:
        # CBC state lives in the cipher object; the caller's IV is never touched
        return AES.new(bytes(key16), AES.MODE_CBC, iv=bytes(iv))
    except (ValueError, TypeError) as e:
        raise EncryptionFailure(str(e)) from e


def aes128_cbc_encrypt(key16: bytes, iv: bytes, frame: bytes) -> bytes:
    # No cipher-level padding: frames arrive block-aligned from framing.build_frame
    if len(frame) % BLOCK_SIZE != 0:
        raise EncryptionFailure(f"frame length {len(frame)} is not a multiple of {BLOCK_SIZE}")
    cipher = _new_cipher(key16, iv)
    try:
        return cipher.encrypt(bytes(frame))
    except (ValueError, TypeError) as e:
        raise EncryptionFailure(str(e)) from e


def aes128_cbc_decrypt(key16: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    if len(ciphertext) % BLOCK_SIZE != 0:
        raise Malformed(f"ciphertext length {len(ciphertext)} is not a multiple of {BLOCK_SIZE}")
    cipher = _new_cipher(key16, iv)
    try:
        return cipher.decrypt(bytes(ciphertext))
    except (ValueError, TypeError) as e:
        raise EncryptionFailure(str(e)) from e
