"""Base64 coding and whole-file binary reading."""

from __future__ import annotations

import base64
import binascii
import os
from pathlib import Path

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def base64_encode(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Decode standard base64 text; raise ValueError on malformed input."""
    if len(text) % 4:
        raise ValueError("base64 text length must be a multiple of 4")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"invalid base64 text: {exc}") from exc


def read_binary_file(path: str | os.PathLike) -> bytes:
    """Return the whole contents of a file as bytes."""
    return Path(path).read_bytes()