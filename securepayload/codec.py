# securepayload/codec.py
"""
Payload encryption pipeline.

encrypt: frame -> AES-128-CBC -> IV || ciphertext -> base64
decrypt: base64 -> split IV -> AES-128-CBC -> unframe

Every call is stateless. The key belongs to the caller and is never stored
or logged.
"""
import logging
from typing import Optional, Union

from securepayload import aes, b64, framing
from securepayload.entropy import EntropySource, SYSTEM_RANDOM
from securepayload.errors import EncryptionFailure, Malformed, PayloadError
from securepayload.log import NOTICE

logger = logging.getLogger(__name__)

Message = Union[bytes, bytearray, str]


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError("message must be str or bytes")


class PayloadCodec:
    def __init__(self, entropy: Optional[EntropySource] = None) -> None:
        self.entropy = entropy if entropy is not None else SYSTEM_RANDOM

    def encrypt_payload(self, message: Message, key: bytes) -> str:
        data = _as_bytes(message)
        try:
            frame = framing.build_frame(data, self.entropy)
            iv = aes.generate_iv(self.entropy)
        except PayloadError as e:
            logger.error("Failed to prepare payload frame: %s", e)
            raise

        try:
            ciphertext = aes.aes128_cbc_encrypt(key, iv, frame)
        except EncryptionFailure as e:
            logger.error("Failed to encrypt message: %s", e)
            raise

        envelope = iv + ciphertext
        logger.debug("Encrypted %d bytes into %d-byte envelope", len(data), len(envelope))
        return b64.b64_encode(envelope)

    def decrypt_payload(self, payload: Union[str, bytes], key: bytes) -> bytes:
        try:
            envelope = b64.b64_decode(payload)
        except PayloadError as e:
            logger.error("Failed to decode transport payload: %s", e)
            raise

        body_len = len(envelope) - aes.IV_SIZE
        if body_len <= 0 or body_len % aes.BLOCK_SIZE != 0:
            logger.error("Malformed envelope of %d bytes", len(envelope))
            raise Malformed(f"envelope of {len(envelope)} bytes has no whole ciphertext blocks")

        iv = envelope[:aes.IV_SIZE]
        ciphertext = envelope[aes.IV_SIZE:]
        try:
            frame = aes.aes128_cbc_decrypt(key, iv, ciphertext)
        except EncryptionFailure as e:
            logger.error("AES decryption failed: %s", e)
            raise

        try:
            message = framing.parse_frame(frame)
        except PayloadError as e:
            logger.error("Failed to unpad data: %s", e)
            raise

        logger.log(NOTICE, "Unpadded msg[%d bytes]", len(message))
        return message


_default_codec = PayloadCodec()


def encrypt_payload(message: Message, key: bytes) -> str:
    return _default_codec.encrypt_payload(message, key)


def decrypt_payload(payload: Union[str, bytes], key: bytes) -> bytes:
    return _default_codec.decrypt_payload(payload, key)
