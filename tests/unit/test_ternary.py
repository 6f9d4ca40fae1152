"""
Tests for the balanced ternary primitives and the b1t6 codec.
"""

import secrets

import pytest

from migaddr.config import TRYTE_ALPHABET
from migaddr.lib.ternary import (
    TernaryDecodeError,
    b1t6_decode,
    b1t6_encode,
    is_trytes,
    trits_to_trytes,
    trits_to_value,
    tryte_to_value,
    trytes_to_trits,
    value_to_trits,
    value_to_tryte,
)


def test_tryte_values():
    assert tryte_to_value("9") == 0
    assert tryte_to_value("A") == 1
    assert tryte_to_value("M") == 13
    assert tryte_to_value("N") == -13
    assert tryte_to_value("Z") == -1


def test_every_tryte_maps_back_to_itself():
    for tryte in TRYTE_ALPHABET:
        assert value_to_tryte(tryte_to_value(tryte)) == tryte


@pytest.mark.parametrize("bad", ["a", "0", "", "AB", " "])
def test_invalid_tryte_rejected(bad):
    with pytest.raises(ValueError):
        tryte_to_value(bad)


def test_tryte_value_out_of_range():
    with pytest.raises(ValueError):
        value_to_tryte(14)
    with pytest.raises(ValueError):
        value_to_tryte(-14)


def test_trits_are_little_endian():
    assert trytes_to_trits("A") == [1, 0, 0]
    assert trytes_to_trits("M") == [1, 1, 1]
    assert trytes_to_trits("N") == [-1, -1, -1]
    assert trytes_to_trits("Z") == [-1, 0, 0]
    # T is -7 = -1 + 3*1 + 9*(-1)
    assert trytes_to_trits("T") == [-1, 1, -1]


def test_value_to_trits_overflow():
    with pytest.raises(ValueError):
        value_to_trits(14, 3)
    assert trits_to_value(value_to_trits(-364, 6)) == -364


def test_trytes_round_trip():
    trytes = "TRANSFER9ABCXYZ"
    trits = trytes_to_trits(trytes)
    assert len(trits) == 3 * len(trytes)
    assert trits_to_trytes(trits) == trytes


def test_trits_to_trytes_requires_whole_trytes():
    with pytest.raises(ValueError):
        trits_to_trytes([0, 1])


def test_trits_to_trytes_rejects_invalid_trit():
    with pytest.raises(ValueError):
        trits_to_trytes([0, 2, 0])


def test_is_trytes():
    assert is_trytes("TRANSFER9")
    assert not is_trytes("transfer")
    assert not is_trytes("TRANSFER1")


@pytest.mark.parametrize(
    "byte,trytes",
    [
        (0x00, "99"),
        (0x01, "A9"),
        (0xFF, "Z9"),
        (0x7F, "SE"),
        (0x80, "GV"),
    ],
)
def test_b1t6_known_groups(byte, trytes):
    assert trits_to_trytes(b1t6_encode(bytes([byte]))) == trytes


def test_b1t6_covers_every_byte():
    data = bytes(range(256))
    trits = b1t6_encode(data)
    assert len(trits) == 6 * 256
    assert b1t6_decode(trits) == data

    # every byte gets its own tryte pair
    pairs = {trits_to_trytes(trits[i : i + 6]) for i in range(0, len(trits), 6)}
    assert len(pairs) == 256


def test_b1t6_round_trip_random():
    for _ in range(20):
        data = secrets.token_bytes(36)
        assert b1t6_decode(b1t6_encode(data)) == data


def test_b1t6_empty():
    assert b1t6_encode(b"") == []
    assert b1t6_decode([]) == b""


def test_b1t6_decode_wrong_length():
    with pytest.raises(TernaryDecodeError):
        b1t6_decode([0, 0, 0])


def test_b1t6_decode_out_of_range_group():
    # "9M" is 0 + 27 * 13 = 351, which is not a signed byte
    with pytest.raises(TernaryDecodeError):
        b1t6_decode(trytes_to_trits("9M"))


def test_b1t6_decode_invalid_trit():
    with pytest.raises(TernaryDecodeError):
        b1t6_decode([0, 0, 0, 0, 0, 5])


def test_ternary_decode_error_is_value_error():
    assert issubclass(TernaryDecodeError, ValueError)
