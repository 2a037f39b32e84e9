"""Base58 and Base58Check encoding with the Bitcoin alphabet."""

from __future__ import annotations

import hashlib

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}
CHECKSUM_SIZE = 4


class Base58Error(ValueError):
    """Raised when text is not valid Base58 or fails its checksum."""


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_SIZE]


def encode(data: bytes) -> str:
    """Encode bytes as Base58 text."""
    data = bytes(data)
    stripped = data.lstrip(b"\x00")
    leading_zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * leading_zeros + "".join(reversed(digits))


def decode(text: str) -> bytes:
    """Decode Base58 text to bytes."""
    number = 0
    for position, char in enumerate(text):
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise Base58Error(
                f"invalid character {char!r} at position {position}"
            ) from None
    stripped = text.lstrip(ALPHABET[0])
    leading_zeros = len(text) - len(stripped)
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_zeros + body


def encode_check(payload: bytes) -> str:
    """Encode bytes with a four-byte double-SHA256 checksum appended."""
    payload = bytes(payload)
    return encode(payload + _checksum(payload))


def decode_check(text: str) -> bytes:
    """Decode Base58Check text and return the payload without its checksum."""
    raw = decode(text)
    if len(raw) < CHECKSUM_SIZE:
        raise Base58Error("data too short to hold a checksum")
    payload, checksum = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if _checksum(payload) != checksum:
        raise Base58Error("checksum mismatch")
    return payload