"""Random-number workloads, one per generator the standard library offers."""

from __future__ import annotations

import os
import random
import secrets

_UPPER = 1_000_000


def random_basic(limit: int) -> int:
    value = 0
    for _ in range(limit):
        value = int(random.random() * (_UPPER + 1))
    return value


def random_mersenne(limit: int) -> int:
    value = 0
    for _ in range(limit):
        value = random.randint(0, _UPPER)
    return value


def random_csprng(limit: int) -> int:
    """Draw from the operating system's cryptographically secure source."""
    value = 0
    for _ in range(limit):
        value = secrets.randbelow(_UPPER + 1)
    return value


def random_bytes(limit: int) -> bytes:
    chunk = b""
    for _ in range(limit):
        chunk = os.urandom(32)
    return chunk
