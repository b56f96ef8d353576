# securepayload/b64.py
"""
ASCII-safe transport encoding (RFC 1341 base64 alphabet).

The encoder never wraps lines. The decoder is strict: anything outside
A-Z a-z 0-9 + / and trailing '=' padding is rejected. C peers send their
strings nul-terminated, so a single trailing NUL is tolerated.
"""
import base64
import binascii
from typing import Union

from securepayload.errors import DecodeError


def b64_encode(data: bytes) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes")
    return base64.b64encode(bytes(data)).decode("ascii")


def b64_decode(text: Union[str, bytes]) -> bytes:
    if isinstance(text, str):
        try:
            raw = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise DecodeError("transport string contains non-ASCII characters") from e
    elif isinstance(text, (bytes, bytearray)):
        raw = bytes(text)
    else:
        raise TypeError("text must be str or bytes")

    if raw.endswith(b"\x00"):
        raw = raw[:-1]
    if len(raw) % 4 != 0:
        raise DecodeError(f"base64 length {len(raw)} is not a multiple of 4")
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"invalid base64: {e}") from e
