"""
Kerl ternary sponge

Kerl runs Keccak-384 over ternary data. Each 243-trit block is read as a
balanced ternary integer (its most significant trit forced to zero) and
absorbed as a 48-byte big-endian two's-complement number. Squeezing reverses
the conversion; between squeezed blocks the Keccak state is reset and fed
the bitwise complement of the previous digest.
"""

from typing import List, Sequence

from Crypto.Hash import keccak

from migaddr.lib.ternary import trits_to_value, value_to_trits

HASH_LENGTH = 243
BYTE_HASH_LENGTH = 48


def trits_to_bytes(trits: Sequence[int]) -> bytes:
    """Convert one 243-trit block to 48 signed big-endian bytes."""
    if len(trits) != HASH_LENGTH:
        raise ValueError(f"Expected {HASH_LENGTH} trits, got {len(trits)}")
    return trits_to_value(trits).to_bytes(BYTE_HASH_LENGTH, "big", signed=True)


def bytes_to_trits(data: bytes) -> List[int]:
    """Convert 48 signed big-endian bytes to one 243-trit block."""
    if len(data) != BYTE_HASH_LENGTH:
        raise ValueError(f"Expected {BYTE_HASH_LENGTH} bytes, got {len(data)}")
    return value_to_trits(int.from_bytes(data, "big", signed=True), HASH_LENGTH)


class Kerl:
    """Keccak-384 based sponge over balanced trits."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._keccak = keccak.new(digest_bits=384)

    def absorb(self, trits: Sequence[int]):
        """
        Absorb trits in 243-trit blocks.

        Raises:
            ValueError: If the length is not a positive multiple of 243
        """
        if not trits or len(trits) % HASH_LENGTH != 0:
            raise ValueError(
                f"Kerl absorbs multiples of {HASH_LENGTH} trits, got {len(trits)}"
            )

        for offset in range(0, len(trits), HASH_LENGTH):
            block = list(trits[offset : offset + HASH_LENGTH])
            block[-1] = 0
            self._keccak.update(trits_to_bytes(block))

    def squeeze(self, length: int = HASH_LENGTH) -> List[int]:
        """
        Squeeze ``length`` trits out of the sponge.

        Raises:
            ValueError: If the length is not a positive multiple of 243
        """
        if length <= 0 or length % HASH_LENGTH != 0:
            raise ValueError(
                f"Kerl squeezes multiples of {HASH_LENGTH} trits, got {length}"
            )

        result: List[int] = []
        while len(result) < length:
            digest = self._keccak.digest()
            block = bytes_to_trits(digest)
            block[-1] = 0
            result.extend(block)

            self.reset()
            self._keccak.update(bytes(~b & 0xFF for b in digest))
        return result
