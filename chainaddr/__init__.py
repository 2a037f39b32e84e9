"""Identify, validate and convert Bitcoin, Ethereum and Tron addresses.

Modules: address (identification and conversion), base58 (Base58 and
Base58Check codecs) and segwit (bech32/bech32m segwit address decoding).
"""

__version__ = "0.1.0"
__all__ = ["address", "base58", "segwit"]