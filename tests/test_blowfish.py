import pytest
from hypothesis import given, settings, strategies as st

from blowfishkit.blowfish import Blowfish

words = st.integers(min_value=0, max_value=0xFFFFFFFF)


@pytest.fixture(scope="module")
def cipher():
    return Blowfish(b"placeholder")


@pytest.mark.parametrize(
    "key_hex, plain_hex, cipher_hex",
    [
        ("0000000000000000", "0000000000000000", "4ef997456198dd78"),
        ("ffffffffffffffff", "ffffffffffffffff", "51866fd5b85ecb8a"),
        ("3000000000000000", "1000000000000001", "7d856f9a613063f2"),
    ],
)
def test_known_vectors(key_hex, plain_hex, cipher_hex):
    bf = Blowfish(bytes.fromhex(key_hex))
    assert bf.encrypt_block(bytes.fromhex(plain_hex)).hex() == cipher_hex
    assert bf.decrypt_block(bytes.fromhex(cipher_hex)).hex() == plain_hex


@settings(max_examples=50)
@given(left=words, right=words)
def test_pair_round_trip(cipher, left, right):
    encrypted = cipher.encrypt_pair(left, right)
    assert cipher.decrypt_pair(*encrypted) == (left, right)


@settings(max_examples=50)
@given(block=st.binary(min_size=8, max_size=8))
def test_block_round_trip(cipher, block):
    assert cipher.decrypt_block(cipher.encrypt_block(block)) == block


def test_block_matches_pair_big_endian(cipher):
    block = bytes(range(1, 9))
    left = int.from_bytes(block[:4], "big")
    right = int.from_bytes(block[4:], "big")
    out_left, out_right = cipher.encrypt_pair(left, right)
    expected = out_left.to_bytes(4, "big") + out_right.to_bytes(4, "big")
    assert cipher.encrypt_block(block) == expected


def test_encryption_changes_block(cipher):
    block = bytes(8)
    assert cipher.encrypt_block(block) != block
    assert len(cipher.encrypt_block(block)) == 8


def test_different_keys_give_different_output():
    block = bytes(8)
    assert Blowfish(b"secret").encrypt_block(block) != Blowfish(b"token").encrypt_block(block)


def test_str_key_equals_utf8_bytes():
    block = b"ABCDEFGH"
    assert Blowfish("secret").encrypt_block(block) == Blowfish(b"secret").encrypt_block(block)


def test_key_is_cycled():
    block = b"12345678"
    assert Blowfish(b"ab").encrypt_block(block) == Blowfish(b"abab").encrypt_block(block)


def test_key_bytes_beyond_72_are_ignored():
    block = b"12345678"
    first = Blowfish(b"x" * 72 + b"a").encrypt_block(block)
    second = Blowfish(b"x" * 72 + b"b").encrypt_block(block)
    assert first == second


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        Blowfish(b"")


def test_key_of_wrong_type_rejected():
    with pytest.raises(TypeError):
        Blowfish(12345)


@pytest.mark.parametrize("size", [0, 7, 9, 16])
def test_wrong_block_size_rejected(cipher, size):
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(size))


@pytest.mark.parametrize("left, right", [(-1, 0), (0, 1 << 32), (1 << 40, 5)])
def test_out_of_range_halves_rejected(cipher, left, right):
    with pytest.raises(ValueError):
        cipher.encrypt_pair(left, right)
    with pytest.raises(ValueError):
        cipher.decrypt_pair(left, right)


def test_halves_stay_32_bit(cipher):
    left, right = cipher.encrypt_pair(0xFFFFFFFF, 0xFFFFFFFF)
    assert 0 <= left <= 0xFFFFFFFF
    assert 0 <= right <= 0xFFFFFFFF
    assert cipher.decrypt_pair(left, right) == (0xFFFFFFFF, 0xFFFFFFFF)