# securepayload/__init__.py
from securepayload.codec import PayloadCodec, decrypt_payload, encrypt_payload
from securepayload.errors import (
    Corrupted,
    DecodeError,
    EmptyInput,
    EncryptionFailure,
    EntropyUnavailable,
    KeyProvisioningError,
    Malformed,
    OversizedInput,
    PayloadError,
)

__all__ = [
    "PayloadCodec",
    "encrypt_payload",
    "decrypt_payload",
    "PayloadError",
    "EmptyInput",
    "OversizedInput",
    "EntropyUnavailable",
    "EncryptionFailure",
    "DecodeError",
    "Malformed",
    "Corrupted",
    "KeyProvisioningError",
]
