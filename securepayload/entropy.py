# securepayload/entropy.py
import os
from typing import Optional, Protocol

from securepayload.errors import EntropyUnavailable


class EntropySource(Protocol):
    def read(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """OS random source. May block until the kernel pool is seeded."""

    def read(self, n: int) -> bytes:
        return os.urandom(n)


SYSTEM_RANDOM = SystemRandomSource()


def read_random(source: Optional[EntropySource], n: int) -> bytes:
    if source is None:
        source = SYSTEM_RANDOM
    try:
        data = source.read(n)
    except OSError as e:
        raise EntropyUnavailable(f"random source failed: {e}") from e
    if data is None or len(data) != n:
        got = 0 if data is None else len(data)
        raise EntropyUnavailable(f"random source returned {got} of {n} bytes")
    return bytes(data)
