"""Text workloads: string manipulation, hashing and serialization."""

from __future__ import annotations

import base64
import hashlib
import json
import os
import pickle
import random
import re

_PANGRAM = "The quick brown fox jumps over the lazy dog"

_WORD_RE = re.compile(r"(quick|lazy)")
_VOWEL_RE = re.compile(r"[aeiou]", re.IGNORECASE)
_SPACE_RE = re.compile(r"\s+")

# One key derivation every N hashes
_KDF_EVERY = 500
_KDF_ROUNDS = 1000

_SAMPLE_DOCUMENT = {"test": 123, "array": [1, 2, 3], "text": "lorem ipsum"}


def string_manipulation(limit: int) -> str:
    """Shuffle, case, search, slice, pad, split/join, digest and regex a short sentence."""
    shuffled = ""
    for _ in range(limit):
        shuffled = "".join(random.sample(_PANGRAM, len(_PANGRAM)))
        reversed_upper = shuffled.upper()[::-1]

        _PANGRAM.find("fox")
        _PANGRAM[5:15].lower()

        _PANGRAM.replace(" ", "")
        _PANGRAM.center(60, ".")
        f"  {_PANGRAM}  ".strip()

        "-".join(_PANGRAM.split(" "))

        hashlib.md5(reversed_upper.encode()).hexdigest()
        base64.b64encode(_PANGRAM.encode())

        _WORD_RE.search(_PANGRAM)
        _VOWEL_RE.sub("*", _PANGRAM)
        _SPACE_RE.split(_PANGRAM)
    return shuffled


def hashing(limit: int) -> str:
    """SHA-256 digests with a periodic salted PBKDF2 key derivation."""
    digest = ""
    for i in range(limit):
        digest = hashlib.sha256(f"string to hash {i}".encode()).hexdigest()
        if i % _KDF_EVERY == 0:
            hashlib.pbkdf2_hmac("sha256", b"password", os.urandom(16), _KDF_ROUNDS)
    return digest


def serialization(limit: int) -> bytes:
    """JSON and pickle round trips of a small document."""
    blob = b""
    for _ in range(limit):
        json.loads(json.dumps(_SAMPLE_DOCUMENT))
        blob = pickle.dumps(_SAMPLE_DOCUMENT)
        pickle.loads(blob)  # noqa: S301
    return blob
