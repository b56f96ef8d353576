# securepayload/framing.py
"""
Block-aligned plaintext frame carried inside the AES envelope.

    offset 0..4   pattern bytes P0 P1 P0 P1 (corruption check, not a MAC)
    offset 4..8   big-endian uint32 message length
    offset 8..    message bytes, then random filler up to a 16-byte boundary

Flipping a filler byte is undetectable; only the header and message region
are covered by the checks in parse_frame.
"""
import struct
from typing import Optional

from securepayload.aes import BLOCK_SIZE
from securepayload.entropy import EntropySource, read_random
from securepayload.errors import Corrupted, EmptyInput, Malformed, OversizedInput

PATTERN_SIZE = 4
LENGTH_OFFSET = 4
HEADER_SIZE = 8
# padded size must still fit the 32-bit length arithmetic of C peers
MAX_MESSAGE_LEN = 0xFFFFFFF0 - HEADER_SIZE

_BE_UINT32 = struct.Struct(">I")


def padded_size(msg_len: int) -> int:
    if msg_len < 0:
        raise ValueError("msg_len must be non-negative")
    if msg_len > MAX_MESSAGE_LEN:
        raise OversizedInput(f"message of {msg_len} bytes exceeds {MAX_MESSAGE_LEN}")
    return (msg_len + HEADER_SIZE + BLOCK_SIZE - 1) & ~(BLOCK_SIZE - 1)


def write_be_uint32(buf: bytearray, offset: int, value: int) -> None:
    _BE_UINT32.pack_into(buf, offset, value)


def read_be_uint32(buf: bytes, offset: int) -> int:
    return _BE_UINT32.unpack_from(buf, offset)[0]


def frame_length_field(frame: bytes) -> int:
    return read_be_uint32(frame, LENGTH_OFFSET)


def build_frame(message: bytes, source: Optional[EntropySource] = None) -> bytes:
    if not message:
        raise EmptyInput("message is empty")
    size = padded_size(len(message))

    buf = bytearray(read_random(source, size))
    # stamp the pattern from filler already present
    buf[0] = buf[2]
    buf[1] = buf[3]
    write_be_uint32(buf, LENGTH_OFFSET, len(message))
    buf[HEADER_SIZE:HEADER_SIZE + len(message)] = message
    return bytes(buf)


def parse_frame(frame: bytes) -> bytes:
    if len(frame) < HEADER_SIZE or len(frame) % BLOCK_SIZE != 0:
        raise Malformed(f"frame length {len(frame)} is too short or not block-aligned")
    if frame[0] != frame[2] or frame[1] != frame[3]:
        raise Corrupted("frame pattern bytes do not match")
    msg_len = read_be_uint32(frame, LENGTH_OFFSET)
    if HEADER_SIZE + msg_len > len(frame):
        raise Malformed(f"embedded length {msg_len} exceeds frame of {len(frame)} bytes")
    return bytes(frame[HEADER_SIZE:HEADER_SIZE + msg_len])
