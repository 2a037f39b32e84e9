# chainaddr

Identify, validate and convert cryptocurrency addresses for Bitcoin, Ethereum
and Tron.

## Installation

```
pip install chainaddr
```

## Identifying an address

```python
from chainaddr.address import identify, Network

identify("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t")          # Network.TRON
identify("0xdAC17F958D2ee523a2206206994597C13D831ec7")  # Network.ETHEREUM
identify("hello world")                                 # None
```

`identify` checks Bitcoin first, then Ethereum, then Tron, and returns `None`
for anything that is valid on none of them. `Network` has the members
`BITCOIN`, `ETHEREUM` and `TRON`.

## Validation

```python
from chainaddr.address import is_bitcoin, is_ethereum, is_tron

is_bitcoin("bc1qgll00eher0sferr6d5xsa9puxv8ez0z76xquyp")  # True
is_ethereum("0x000000000000000000000000dAC17F958D2ee523a2206206994597C13D831ec7")  # True
is_tron("TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj7t")            # False, bad checksum
```

* Bitcoin: mainnet only. Base58Check P2PKH (`1...`) and P2SH (`3...`)
  addresses with their checksum and version byte verified, and lower-case
  `bc1` segwit addresses (P2WPKH, P2WSH, P2TR) with their bech32 or bech32m
  checksum verified.
* Ethereum: 40 hex digits in any case, with or without a `0x` prefix; the
  digits may be left-padded with zeros, as in a 32-byte value. The mixed-case
  checksum is not enforced.
* Tron: 34-character Base58Check addresses starting with `T`, with the
  checksum verified.

## Conversion

```python
from chainaddr.address import to_checksum, eth_to_tron, tron_to_eth

to_checksum("0xdac17f958d2ee523a2206206994597c13d831ec7")
# '0xdAC17F958D2ee523a2206206994597C13D831ec7'

eth_to_tron("0xdAC17F958D2ee523a2206206994597C13D831ec7")
# 'TVut7P3Wnem9TFcSAjow2WGETKFBs5CMyj'

tron_to_eth("TVut7P3Wnem9TFcSAjow2WGETKFBs5CMyj")
# '0xdAC17F958D2ee523a2206206994597C13D831ec7'
```

`to_checksum` drops any zero padding and returns the 42-character `0x` form
with letter case set from the Keccak-256 hash of the address. `tron_to_eth`
always returns the checksummed form.

Invalid input raises `chainaddr.address.AddressError`, a subclass of
`ValueError`:

```python
from chainaddr.address import AddressError, eth_to_tron

try:
    eth_to_tron("hello world")
except AddressError as exc:
    print(exc)  # not a valid ethereum address
```

## Lower-level codecs

`chainaddr.base58` works with the Bitcoin Base58 alphabet:

```python
from chainaddr import base58

base58.encode(b"\x00\x01")        # '12'
base58.decode("12")               # b'\x00\x01'
text = base58.encode_check(b"payload")
base58.decode_check(text)         # b'payload'
```

`decode` and `decode_check` raise `base58.Base58Error` (a `ValueError`) on a
character outside the alphabet, on data too short for a checksum, or on a
checksum mismatch.

`chainaddr.segwit` decodes segwit addresses:

* `bech32_decode(text)` returns `(hrp, data, encoding)`, where `data` is the
  list of 5-bit values without the checksum and `encoding` is
  `Encoding.BECH32` or `Encoding.BECH32M`.
* `decode(hrp, address)` returns `(witness_version, program)` after checking
  the prefix, the witness version, the program length and that the checksum
  variant matches the version.

Both raise `segwit.SegwitError` (a `ValueError`) on invalid input.

## What it does not do

chainaddr is a library only: it has no command-line tool. It recognises
Bitcoin mainnet addresses only, not testnet or other networks, and it decodes
but does not encode segwit addresses. It does not look anything up on a
blockchain; every check is made on the text of the address alone.

## Running the tests

```
pip install -e ".[test]"
pytest
```