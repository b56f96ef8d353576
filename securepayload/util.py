# securepayload/util.py
"""
Small byte/identifier helpers shared by device tooling.
"""
from typing import Optional

from cryptography.hazmat.primitives import hashes

from securepayload.entropy import EntropySource, read_random

UUID_BYTE_LEN = 16
UUID_STRING_LEN = UUID_BYTE_LEN * 2


def bytes_hexlify(data: bytes) -> str:
    return "".join(f"{b:02x}" for b in data)


def bytes_unhexlify(text: str, byte_len: int) -> bytes:
    if text is None or len(text) < byte_len * 2:
        raise ValueError(f"need {byte_len * 2} hex chars")
    try:
        return bytes.fromhex(text[:byte_len * 2])
    except ValueError as e:
        raise ValueError(f"invalid hex: {e}") from e


def bytes_to_char(data: bytes) -> Optional[str]:
    """Return data as text if every byte is printable ASCII, else None."""
    if any(b < 32 or b > 126 for b in data):
        return None
    return bytes(data).decode("ascii")


def uuid4_key(source: Optional[EntropySource] = None) -> bytes:
    key = bytearray(read_random(source, UUID_BYTE_LEN))
    key[6] = (key[6] & 0x0F) | 0x40  # version 4
    key[8] = (key[8] & 0x3F) | 0x80  # DCE variant
    return bytes(key)


def uuid4_string(key: bytes) -> str:
    return bytes_hexlify(key[:UUID_BYTE_LEN])


def valid_uuid4(text: str) -> bool:
    # dashless form: 32 hex chars, version at 12, variant at 16
    if len(text) != UUID_STRING_LEN:
        return False
    if text[12] != "4":
        return False
    return text[16] in "89ab"


def md5_string(text: str) -> str:
    digest = hashes.Hash(hashes.MD5())
    digest.update(text.encode("utf-8"))
    return bytes_hexlify(digest.finalize())
