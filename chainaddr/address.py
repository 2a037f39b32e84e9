"""Identification and conversion of Bitcoin, Ethereum and Tron addresses."""

from __future__ import annotations

import enum
import hashlib
import re

from Crypto.Hash import keccak

from chainaddr import base58, segwit

_BASE58_CLASS = "[1-9A-HJ-NP-Za-km-z]"
_BECH32_CLASS = "[qpzry9x8gf2tvdw0s3jn54khce6mua7l]"

_REGEX_P2PKH = re.compile(rf"1{_BASE58_CLASS}{{25,34}}")
_REGEX_P2SH = re.compile(rf"3{_BASE58_CLASS}{{25,34}}")
_REGEX_BECH32 = re.compile(rf"bc1(?:{_BECH32_CLASS}{{39}}|{_BECH32_CLASS}{{59}})")
_REGEX_ETH_BODY = re.compile(r"[0-9a-fA-F]{40}")
_REGEX_TRON = re.compile(rf"T{_BASE58_CLASS}{{33}}")

_BITCOIN_VERSIONS = (0x00, 0x05)
_TRON_PREFIX = b"\x41"
_ETH_BODY_LENGTH = 40


class Network(enum.Enum):
    """Blockchain an address belongs to."""

    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    TRON = "tron"


class AddressError(ValueError):
    """Raised when an address is not valid for the requested operation."""


def identify(address: str) -> Network | None:
    """Return the network an address belongs to, or None."""
    if is_bitcoin(address):
        return Network.BITCOIN
    if is_ethereum(address):
        return Network.ETHEREUM
    if is_tron(address):
        return Network.TRON
    return None


def _eth_body(address: str) -> str:
    """Return the 40 hex digits of an address already known to be valid."""
    body = address[2:] if address.startswith("0x") else address
    return body[-_ETH_BODY_LENGTH:]


def eth_to_tron(address: str) -> str:
    """Convert an Ethereum address to the matching Tron address."""
    if not is_ethereum(address):
        raise AddressError("not a valid ethereum address")
    payload = _TRON_PREFIX + bytes.fromhex(_eth_body(address))
    return base58.encode_check(payload)


def tron_to_eth(address: str) -> str:
    """Convert a Tron address to the matching checksummed Ethereum address."""
    if not is_tron(address):
        raise AddressError("not a valid tron address")
    body = base58.decode(address)[1:21]
    return to_checksum(body.hex())


def to_checksum(address: str) -> str:
    """Return the mixed-case checksummed form of an Ethereum address."""
    if not is_ethereum(address):
        raise AddressError("not a valid ethereum address")
    lower = _eth_body(address).lower()
    digest = keccak.new(digest_bits=256, data=lower.encode("ascii")).hexdigest()
    return "0x" + "".join(
        char.upper() if not char.isdigit() and int(nibble, 16) >= 8 else char
        for char, nibble in zip(lower, digest)
    )


def is_bitcoin(address: str) -> bool:
    """Tell whether the text is a valid Bitcoin mainnet address."""
    if _REGEX_BECH32.fullmatch(address):
        try:
            segwit.decode("bc", address)
        except segwit.SegwitError:
            return False
        return True
    if _REGEX_P2PKH.fullmatch(address) or _REGEX_P2SH.fullmatch(address):
        try:
            payload = base58.decode_check(address)
        except base58.Base58Error:
            return False
        return len(payload) == 21 and payload[0] in _BITCOIN_VERSIONS
    return False


def is_ethereum(address: str) -> bool:
    """Tell whether the text is an Ethereum address, zero-padded to 32 bytes or not."""
    body = address[2:] if address.startswith("0x") else address
    if len(body) < _ETH_BODY_LENGTH:
        return False
    padding, body = body[:-_ETH_BODY_LENGTH], body[-_ETH_BODY_LENGTH:]
    if padding.strip("0"):
        return False
    return _REGEX_ETH_BODY.fullmatch(body) is not None


def is_tron(address: str) -> bool:
    """Tell whether the text is a valid Tron address."""
    if not _REGEX_TRON.fullmatch(address):
        return False
    try:
        decoded = base58.decode(address)
    except base58.Base58Error:
        return False
    if len(decoded) != 25:
        return False
    body, checksum = decoded[:21], decoded[21:]
    expected = hashlib.sha256(hashlib.sha256(body).digest()).digest()[:4]
    return expected == checksum