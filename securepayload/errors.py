# securepayload/errors.py
"""
Failure taxonomy for the payload codec.

Corrupted and Malformed both mean "do not trust this plaintext". The pattern
check behind Corrupted is advisory, not a MAC.
"""


class PayloadError(Exception):
    """Base class for every codec failure."""


class EmptyInput(PayloadError):
    """No message bytes were supplied to encrypt."""


class OversizedInput(PayloadError):
    """Message is too long for the 32-bit length field."""


class EntropyUnavailable(PayloadError):
    """The random source could not supply the requested bytes."""


class EncryptionFailure(PayloadError):
    """The AES step failed, e.g. wrong key length."""


class DecodeError(PayloadError):
    """Transport string is not valid base64."""


class Malformed(PayloadError):
    """Decoded lengths are inconsistent."""


class Corrupted(PayloadError):
    """Header pattern bytes disagree after decryption."""


class KeyProvisioningError(PayloadError):
    """Configuration could not produce a 128-bit key."""
