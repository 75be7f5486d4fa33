# blowfishkit

A small, dependency-free implementation of the Blowfish block cipher in
pure Python.

Blowfish works on 64-bit blocks. The key schedule cycles the key bytes
over the 18-entry P-array and then re-encrypts the P-array and the four
S-boxes. Any non-empty key is accepted. Keys longer than 72 bytes have
no further effect.

## Installation

```
pip install blowfishkit
```

## Usage

```python
from blowfishkit.blowfish import Blowfish

cipher = Blowfish(b"secret")

# Work on 8-byte blocks (big-endian halves).
ciphertext = cipher.encrypt_block(b"ABCDEFGH")
assert cipher.decrypt_block(ciphertext) == b"ABCDEFGH"

# Or on a pair of 32-bit words directly.
left, right = cipher.encrypt_pair(0x01234567, 0x89ABCDEF)
assert cipher.decrypt_pair(left, right) == (0x01234567, 0x89ABCDEF)
```

The module `blowfishkit.blowfish` provides the class `Blowfish`:

- `Blowfish(key)` runs the key schedule. `key` may be `bytes`,
  `bytearray`, `memoryview` or `str`. A `str` is encoded as UTF-8. An
  empty key raises `ValueError`. Any other type raises `TypeError`.
- `encrypt_pair(left, right)` / `decrypt_pair(left, right)` transform
  two 32-bit unsigned integers and return the resulting pair as a tuple.
  A value that is not an `int` (or is a `bool`) raises `TypeError`. A
  value outside `0 .. 0xFFFFFFFF` raises `ValueError`.
- `encrypt_block(block)` / `decrypt_block(block)` transform exactly
  eight bytes and return eight bytes. Each half is read and written
  big-endian. A block of any other length raises `ValueError`.
- `Blowfish.block_size` is `8`.

## What it does not do

The package is only the block primitive. It has:

- no mode of operation and no padding. Data longer than one block must
  be split and chained by the caller.
- no file encryption, no compression and no key prompting.
- no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```