"""Bech32 / Bech32m decoding of segregated-witness addresses."""

from __future__ import annotations

import enum

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: value for value, char in enumerate(CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
MAX_LENGTH = 90


class SegwitError(ValueError):
    """Raised when an address is not a valid segwit address."""


class Encoding(enum.Enum):
    """Checksum variant of a Bech32 string."""

    BECH32 = 1
    BECH32M = 0x2BC830A3


def _polymod(values) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = (checksum & 0x1FFFFFF) << 5 ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def bech32_decode(text: str) -> tuple[str, list[int], Encoding]:
    """Split a Bech32 string into its human-readable part, data and encoding."""
    if any(ord(c) < 33 or ord(c) > 126 for c in text):
        raise SegwitError("character out of range")
    if text.lower() != text and text.upper() != text:
        raise SegwitError("mixed case")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 1 or separator + 7 > len(text) or len(text) > MAX_LENGTH:
        raise SegwitError("invalid separator position or length")
    hrp = text[:separator]
    try:
        data = [_CHARSET_INDEX[c] for c in text[separator + 1 :]]
    except KeyError:
        raise SegwitError("invalid data character") from None
    constant = _polymod(_hrp_expand(hrp) + data)
    try:
        encoding = Encoding(constant)
    except ValueError:
        raise SegwitError("invalid checksum") from None
    return hrp, data[:-6], encoding


def _convert_bits(data, from_bits: int, to_bits: int) -> bytes:
    accumulator = 0
    bits = 0
    result = bytearray()
    max_value = (1 << to_bits) - 1
    for value in data:
        accumulator = (accumulator << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((accumulator >> bits) & max_value)
    if bits >= from_bits or (accumulator << (to_bits - bits)) & max_value:
        raise SegwitError("invalid padding")
    return bytes(result)


def decode(hrp: str, address: str) -> tuple[int, bytes]:
    """Decode a segwit address, returning its witness version and program."""
    found_hrp, data, encoding = bech32_decode(address)
    if found_hrp != hrp:
        raise SegwitError(f"expected prefix {hrp!r}, found {found_hrp!r}")
    if not data:
        raise SegwitError("missing witness version")
    version = data[0]
    if version > 16:
        raise SegwitError("invalid witness version")
    program = _convert_bits(data[1:], 5, 8)
    if not 2 <= len(program) <= 40:
        raise SegwitError("invalid witness program length")
    if version == 0 and len(program) not in (20, 32):
        raise SegwitError("invalid version 0 program length")
    expected = Encoding.BECH32 if version == 0 else Encoding.BECH32M
    if encoding is not expected:
        raise SegwitError("wrong checksum variant for witness version")
    return version, program