"""Decoding of Gmail's base64url body data."""

from __future__ import annotations

import base64
import binascii

from .errors import DecodeError

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def decode(text: str) -> bytes:
    """Decode URL-safe base64 (padding optional) into raw bytes.

    Raises DecodeError when the text uses characters outside the alphabet or
    has an impossible length.
    """
    standard = text.strip().translate(_URLSAFE_TO_STANDARD).rstrip("=")
    standard += "=" * (-len(standard) % 4)
    try:
        return base64.b64decode(standard, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Malformed base64url data: {exc}") from exc


def decode_text(text: str) -> str:
    """Decode base64url body data into UTF-8 text."""
    raw = decode(text)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Body is not valid UTF-8: {exc}") from exc
