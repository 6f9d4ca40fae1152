"""
Tests for the Kerl sponge and its trit/byte conversions.
"""

import pytest

from migaddr.lib.digest import blake2b_256, kerl_digest
from migaddr.lib.kerl import (
    BYTE_HASH_LENGTH,
    HASH_LENGTH,
    Kerl,
    bytes_to_trits,
    trits_to_bytes,
)
from migaddr.lib.ternary import trits_to_trytes, trytes_to_trits


def test_trits_to_bytes_small_values():
    zero = [0] * HASH_LENGTH
    assert trits_to_bytes(zero) == bytes(BYTE_HASH_LENGTH)

    one = [1] + [0] * (HASH_LENGTH - 1)
    assert trits_to_bytes(one) == bytes(BYTE_HASH_LENGTH - 1) + b"\x01"

    minus_one = [-1] + [0] * (HASH_LENGTH - 1)
    assert trits_to_bytes(minus_one) == b"\xff" * BYTE_HASH_LENGTH


def test_bytes_to_trits_small_values():
    assert bytes_to_trits(bytes(BYTE_HASH_LENGTH)) == [0] * HASH_LENGTH
    assert bytes_to_trits(b"\xff" * BYTE_HASH_LENGTH) == [-1] + [0] * (
        HASH_LENGTH - 1
    )


def test_conversion_round_trip():
    trits = trytes_to_trits("EMIDYNHBWMBCXVDEFOFWINXTERALUKYYPPHKP9JJFGJEIUY9MUDVNFZHMMWZUYUSWAIOWEVTHNWMHANBH")
    trits[-1] = 0
    assert bytes_to_trits(trits_to_bytes(trits)) == trits


def test_conversion_length_checks():
    with pytest.raises(ValueError):
        trits_to_bytes([0] * 242)
    with pytest.raises(ValueError):
        bytes_to_trits(bytes(47))


def test_kerl_known_vector():
    trits = trytes_to_trits(
        "EMIDYNHBWMBCXVDEFOFWINXTERALUKYYPPHKP9JJFGJEIUY9MUDVNFZHMMWZUYUSWAIOWEVTHNWMHANBH"
    )
    digest = kerl_digest(trits)
    assert trits_to_trytes(digest) == (
        "EJEAOOZYSAWFPZQESYDHZCGYNSTWXUMVJOVDWUNZJXDGWCLUFGIMZRMGCAZGKNPLBRLGUNYWKLJTYEAQX"
    )


def test_kerl_digest_is_deterministic():
    trits = trytes_to_trits("TRANSFER" + "9" * 73)
    assert kerl_digest(trits) == kerl_digest(trits)


def test_kerl_last_trit_is_zero():
    trits = trytes_to_trits("A" * 81)
    digest = kerl_digest(trits)
    assert len(digest) == HASH_LENGTH
    assert digest[-1] == 0


def test_kerl_ignores_last_input_trit():
    trits = trytes_to_trits("M" * 81)
    assert trits[-1] == 1
    flipped = list(trits)
    flipped[-1] = -flipped[-1]
    assert kerl_digest(trits) == kerl_digest(flipped)


def test_kerl_does_not_modify_input():
    trits = trytes_to_trits("M" * 81)
    original = list(trits)
    kerl_digest(trits)
    assert trits == original


def test_kerl_multi_block_squeeze():
    kerl = Kerl()
    kerl.absorb(trytes_to_trits("A" * 81))
    out = kerl.squeeze(2 * HASH_LENGTH)
    assert len(out) == 2 * HASH_LENGTH
    # the first block matches a single squeeze
    assert out[:HASH_LENGTH] == kerl_digest(trytes_to_trits("A" * 81))
    assert out[:HASH_LENGTH] != out[HASH_LENGTH:]


@pytest.mark.parametrize("length", [0, 3, 242, 244])
def test_kerl_absorb_requires_whole_blocks(length):
    with pytest.raises(ValueError):
        Kerl().absorb([0] * length)


def test_kerl_squeeze_requires_whole_blocks():
    kerl = Kerl()
    kerl.absorb([0] * HASH_LENGTH)
    with pytest.raises(ValueError):
        kerl.squeeze(81)


def test_blake2b_256():
    assert len(blake2b_256(b"")) == 32
    assert blake2b_256(bytes(32)) != blake2b_256(bytes(31))
