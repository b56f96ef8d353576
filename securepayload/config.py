# securepayload/config.py
import os
from typing import Optional

from dotenv import load_dotenv

from securepayload.errors import KeyProvisioningError

FA_LOCAL_KEY = "FA_LOCAL_KEY"
FA_CLOUD_KEY = "FA_CLOUD_KEY"
FA_USE_DEFAULT_KEY = "FA_USE_DEFAULT_KEY"

KEY_BYTE_LEN = 16
_TRUTHY = ("1", "true", "yes", "on")


def parse_key_hex(text: str) -> bytes:
    cleaned = (text or "").strip()
    if len(cleaned) != KEY_BYTE_LEN * 2:
        raise KeyProvisioningError(f"key must be {KEY_BYTE_LEN * 2} hex chars, got {len(cleaned)}")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise KeyProvisioningError(f"invalid hex key: {e}") from e


def load_key(name: str, dotenv_path: Optional[str] = None) -> bytes:
    load_dotenv(dotenv_path)
    value = os.getenv(name)
    if not value:
        raise KeyProvisioningError(f"{name} is not set")
    return parse_key_hex(value)


def use_default_key() -> bool:
    return os.getenv(FA_USE_DEFAULT_KEY, "").strip().lower() in _TRUTHY


def select_key(dotenv_path: Optional[str] = None) -> bytes:
    # FA_USE_DEFAULT_KEY pins the device-local key, otherwise the cloud key wins
    load_dotenv(dotenv_path)
    name = FA_LOCAL_KEY if use_default_key() else FA_CLOUD_KEY
    return load_key(name, dotenv_path)
