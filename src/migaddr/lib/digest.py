"""
Hash functions used by the migration address format.

BLAKE2b-256 binds the address to its own encoding; Kerl produces the legacy
tryte checksum. The two are never interchangeable.
"""

import hashlib
from typing import List, Sequence

from migaddr.lib.kerl import HASH_LENGTH, Kerl


def blake2b_256(data: bytes) -> bytes:
    """BLAKE2b with a 32-byte digest."""
    return hashlib.blake2b(data, digest_size=32).digest()


def kerl_digest(trits: Sequence[int], length: int = HASH_LENGTH) -> List[int]:
    """Absorb ``trits`` into a fresh Kerl sponge and squeeze ``length`` trits."""
    kerl = Kerl()
    kerl.absorb(trits)
    return kerl.squeeze(length)
