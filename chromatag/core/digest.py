#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromatag/core/digest.py

import hashlib
from typing import Union

from . import config as c


def to_bytes(text: Union[str, bytes, bytearray]) -> bytes:
    """Encode text as UTF-8; byte sequences pass through untouched."""
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"expected str or bytes, got {type(text).__name__}")


def digest(data: bytes) -> bytes:
    """
    SHA-256 digest of the input bytes.

    A cryptographic hash keeps neighbouring inputs such as 'a' and 'b'
    uncorrelated, so similar strings do not land on similar colors.
    """
    return hashlib.sha256(data).digest()


def hash_token(data: bytes, length: int = c.HASH_TOKEN_BYTES) -> str:
    """Lowercase hex of the first `length` digest bytes."""
    return digest(data)[:length].hex()
