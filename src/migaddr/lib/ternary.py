"""
Balanced ternary primitives

Trits are plain ints in {-1, 0, 1}. A tryte is 3 trits in little-endian
order, giving values in [-13, 13], and is displayed as one character of
TRYTE_ALPHABET.

The b1t6 codec maps every byte to 6 trits (2 trytes). The byte is read as a
signed 8-bit value v and split into two trytes so that v = lo + 27 * hi:

    0x00 -> "99"    0x01 -> "A9"    0xFF -> "Z9"
    0x7F -> "SE"    0x80 -> "GV"

Every value in [-128, 127] has exactly one such pair, so the mapping is
injective and b1t6_decode(b1t6_encode(data)) == data for any input.
"""

from typing import Iterable, List, Sequence

from migaddr.config import TRITS_PER_TRYTE, TRYTE_ALPHABET

TRYTE_MIN_VALUE = -13
TRYTE_MAX_VALUE = 13
TRYTE_RADIX = 27
TRITS_PER_BYTE = 6


class TernaryDecodeError(ValueError):
    """Trits that cannot be decoded back into bytes"""

    pass


def tryte_to_value(tryte: str) -> int:
    """Return the balanced value of a single tryte character."""
    index = TRYTE_ALPHABET.find(tryte)
    if len(tryte) != 1 or index < 0:
        raise ValueError(f"Invalid tryte: {tryte!r}")
    return index if index <= TRYTE_MAX_VALUE else index - TRYTE_RADIX


def value_to_tryte(value: int) -> str:
    """Return the tryte character for a value in [-13, 13]."""
    if not TRYTE_MIN_VALUE <= value <= TRYTE_MAX_VALUE:
        raise ValueError(f"Tryte value out of range: {value}")
    return TRYTE_ALPHABET[value % TRYTE_RADIX]


def value_to_trits(value: int, length: int = TRITS_PER_TRYTE) -> List[int]:
    """
    Convert an integer to ``length`` balanced trits, least significant first.

    Raises:
        ValueError: If the value does not fit in ``length`` trits
    """
    trits = []
    remaining = value
    for _ in range(length):
        remaining, remainder = divmod(remaining, 3)
        if remainder == 2:
            # Borrow from the next place so this digit becomes -1
            remainder = -1
            remaining += 1
        trits.append(remainder)

    if remaining != 0:
        raise ValueError(f"Value {value} does not fit in {length} trits")
    return trits


def trits_to_value(trits: Sequence[int]) -> int:
    """Interpret balanced trits (least significant first) as an integer."""
    value = 0
    for trit in reversed(trits):
        value = value * 3 + trit
    return value


def is_trytes(text: str) -> bool:
    """Return True if every character of ``text`` is a tryte."""
    return all(char in TRYTE_ALPHABET for char in text)


def trytes_to_trits(trytes: str) -> List[int]:
    """
    Convert a tryte string to trits.

    Raises:
        ValueError: If the string contains characters outside the alphabet
    """
    trits: List[int] = []
    for tryte in trytes:
        trits.extend(value_to_trits(tryte_to_value(tryte)))
    return trits


def trits_to_trytes(trits: Sequence[int]) -> str:
    """
    Convert trits to a tryte string.

    Raises:
        ValueError: If the length is not a multiple of 3 or a trit is invalid
    """
    if len(trits) % TRITS_PER_TRYTE != 0:
        raise ValueError(
            f"Trit count must be a multiple of {TRITS_PER_TRYTE}, got {len(trits)}"
        )
    _check_trits(trits)

    return "".join(
        value_to_tryte(trits_to_value(trits[i : i + TRITS_PER_TRYTE]))
        for i in range(0, len(trits), TRITS_PER_TRYTE)
    )


def b1t6_encode(data: bytes) -> List[int]:
    """Encode bytes to trits, 6 trits per byte."""
    trits: List[int] = []
    for byte in data:
        signed = byte - 256 if byte > 127 else byte
        hi, lo = divmod(signed - TRYTE_MIN_VALUE, TRYTE_RADIX)
        trits.extend(value_to_trits(lo + TRYTE_MIN_VALUE))
        trits.extend(value_to_trits(hi))
    return trits


def b1t6_decode(trits: Sequence[int]) -> bytes:
    """
    Decode trits produced by b1t6_encode back into bytes.

    Raises:
        TernaryDecodeError: If the length is not a multiple of 6, a trit is
            not in {-1, 0, 1}, or a group lies outside the signed byte range
    """
    if len(trits) % TRITS_PER_BYTE != 0:
        raise TernaryDecodeError(
            f"Trit count must be a multiple of {TRITS_PER_BYTE}, got {len(trits)}"
        )
    try:
        _check_trits(trits)
    except ValueError as e:
        raise TernaryDecodeError(str(e))

    result = bytearray()
    for offset in range(0, len(trits), TRITS_PER_BYTE):
        lo = trits_to_value(trits[offset : offset + TRITS_PER_TRYTE])
        hi = trits_to_value(trits[offset + TRITS_PER_TRYTE : offset + TRITS_PER_BYTE])
        value = lo + hi * TRYTE_RADIX
        if not -128 <= value <= 127:
            raise TernaryDecodeError(
                f"Trit group at offset {offset} decodes to {value}, outside a byte"
            )
        result.append(value & 0xFF)
    return bytes(result)


def _check_trits(trits: Iterable[int]):
    for trit in trits:
        if trit not in (-1, 0, 1):
            raise ValueError(f"Invalid trit: {trit!r}")
