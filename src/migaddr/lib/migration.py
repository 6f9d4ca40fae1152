"""
Migration address encoding and decoding.

A migration address carries an Ed25519 address A inside an 81-tryte legacy
address:

    TRANSFER | b1t6(A || BLAKE2b-256(A)[0:4]) | 9
    0..7       8..79 (72 trytes, 36 bytes)       80

On the wire it is followed by the 9-tryte Kerl checksum of the legacy
network, giving 90 trytes. Decoding checks the prefix, the padding tryte and
the embedded BLAKE2b prefix. It ignores the checksum unless asked to verify
it.
"""

from dataclasses import dataclass
from typing import List, Sequence

from migaddr.config import (
    ADDRESS_TRYTES,
    ADDRESS_WITH_CHECKSUM_TRYTES,
    CHECKSUM_TRYTES,
    DEFAULT_HRP,
    ED25519_ADDRESS_LENGTH,
    MIGRATION_PADDING,
    MIGRATION_PREFIX,
    PAYLOAD_DIGEST_BYTES,
    PAYLOAD_TRIT_END,
    PAYLOAD_TRIT_START,
    TRITS_PER_TRYTE,
)
from migaddr.lib.bech32_address import (
    Ed25519Address,
    format_modern_address,
    parse_modern_address,
)
from migaddr.lib.digest import blake2b_256, kerl_digest
from migaddr.lib.errors import (
    IntegrityMismatchError,
    InvalidChecksumError,
    InvalidFormatError,
    ParseError,
)
from migaddr.lib.kerl import HASH_LENGTH
from migaddr.lib.log import get_logger, log
from migaddr.lib.ternary import (
    TernaryDecodeError,
    b1t6_decode,
    b1t6_encode,
    is_trytes,
    trits_to_trytes,
    trytes_to_trits,
)

_logger = get_logger("migration")

TO_LEGACY = "to-legacy"
TO_MODERN = "to-modern"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of an auto-detected conversion."""

    source: str
    result: str
    direction: str

    @property
    def is_legacy_result(self) -> bool:
        return self.direction == TO_LEGACY


def parse_tryte_string(text: str) -> List[int]:
    """
    Parse a tryte string into trits.

    Raises:
        ParseError: If the string contains characters outside the tryte alphabet
    """
    trytes = text.strip()
    if not trytes or not is_trytes(trytes):
        raise ParseError(f"Invalid tryte string: {text!r}")
    return trytes_to_trits(trytes)


def format_tryte_string(trits: Sequence[int]) -> str:
    return trits_to_trytes(trits)


def encode_migration_address(address: Ed25519Address) -> str:
    """
    Encode an Ed25519 address as an 81-tryte migration address.

    Args:
        address: The Ed25519 address to embed

    Returns:
        Migration address without checksum
    """
    address_bytes = bytes(address)
    digest = blake2b_256(address_bytes)
    payload = address_bytes + digest[:PAYLOAD_DIGEST_BYTES]

    body = MIGRATION_PREFIX + trits_to_trytes(b1t6_encode(payload)) + MIGRATION_PADDING
    log(_logger, "debug", "Encoded migration address", address=address.hex)
    return body


def decode_migration_address(trytes: str) -> Ed25519Address:
    """
    Recover the Ed25519 address embedded in a migration address.

    Accepts the 81-tryte body or the 90-tryte form with checksum; trytes after
    the body are not read.

    Raises:
        InvalidFormatError: If the address has the wrong length or alphabet,
            does not start with TRANSFER, does not end with 9, or its payload
            does not decode to bytes
        IntegrityMismatchError: If the embedded BLAKE2b prefix is wrong
    """
    if len(trytes) not in (ADDRESS_TRYTES, ADDRESS_WITH_CHECKSUM_TRYTES):
        raise InvalidFormatError(
            f"Invalid address length {len(trytes)}, expected {ADDRESS_TRYTES} "
            f"or {ADDRESS_WITH_CHECKSUM_TRYTES} trytes"
        )
    if not is_trytes(trytes[:ADDRESS_TRYTES]):
        raise InvalidFormatError("Invalid address, contains non-tryte characters")

    if trytes[: len(MIGRATION_PREFIX)] != MIGRATION_PREFIX:
        log(_logger, "info", "Rejected migration address", reason="prefix")
        raise InvalidFormatError(
            f"Invalid address, doesn't start with '{MIGRATION_PREFIX}'"
        )
    if trytes[ADDRESS_TRYTES - 1] != MIGRATION_PADDING:
        log(_logger, "info", "Rejected migration address", reason="padding")
        raise InvalidFormatError(
            f"Invalid address, doesn't end with '{MIGRATION_PADDING}'"
        )

    trits = trytes_to_trits(trytes[:ADDRESS_TRYTES])
    try:
        payload = b1t6_decode(trits[PAYLOAD_TRIT_START:PAYLOAD_TRIT_END])
    except TernaryDecodeError as e:
        log(_logger, "info", "Rejected migration address", reason="payload")
        raise InvalidFormatError(f"Invalid address payload: {e}")

    # The first 32 bytes are the address A, the last 4 bytes the hash prefix H.
    address_bytes = payload[:ED25519_ADDRESS_LENGTH]
    embedded_digest = payload[ED25519_ADDRESS_LENGTH:]
    if blake2b_256(address_bytes)[:PAYLOAD_DIGEST_BYTES] != embedded_digest:
        log(_logger, "info", "Rejected migration address", reason="integrity")
        raise IntegrityMismatchError(
            "Blake2b hash of the Ed25519 address doesn't match"
        )

    return Ed25519Address(address_bytes)


def tryte_checksum(body: str) -> str:
    """Return the 9-tryte Kerl checksum of an 81-tryte address body."""
    if len(body) != ADDRESS_TRYTES:
        raise InvalidFormatError(
            f"Checksums are computed over {ADDRESS_TRYTES} trytes, got {len(body)}"
        )
    if not is_trytes(body):
        raise InvalidFormatError("Invalid address, contains non-tryte characters")

    # Three zero trits are appended; only the first 243 trits are absorbed.
    padded = trytes_to_trits(body) + [0] * TRITS_PER_TRYTE
    digest = trits_to_trytes(kerl_digest(padded[:HASH_LENGTH]))
    return digest[-CHECKSUM_TRYTES:]


def add_tryte_checksum(body: str) -> str:
    """Append the 9-tryte Kerl checksum to an 81-tryte address body."""
    return body + tryte_checksum(body)


def verify_tryte_checksum(address: str) -> bool:
    """
    Check the trailing checksum of a 90-tryte address.

    Raises:
        InvalidFormatError: If the address is not 90 trytes long
    """
    if len(address) != ADDRESS_WITH_CHECKSUM_TRYTES:
        raise InvalidFormatError(
            f"Expected {ADDRESS_WITH_CHECKSUM_TRYTES} trytes with checksum, got {len(address)}"
        )
    return tryte_checksum(address[:ADDRESS_TRYTES]) == address[ADDRESS_TRYTES:]


def convert_to_tryte_address(address: str) -> str:
    """
    Convert a bech32 Ed25519 address into a 90-tryte migration address.

    Raises:
        ParseError: If the bech32 string is malformed
        UnsupportedAddressTypeError: If the address is not an Ed25519 address
    """
    ed25519_address = parse_modern_address(address)
    migration_address = add_tryte_checksum(encode_migration_address(ed25519_address))
    log(_logger, "debug", "Converted to migration address", result=migration_address)
    return migration_address


def convert_to_migration_address(
    address: str, hrp: str = DEFAULT_HRP, verify_checksum: bool = False
) -> str:
    """
    Convert a migration address back into a bech32 Ed25519 address.

    Args:
        address: 81- or 90-tryte migration address
        hrp: Human readable part of the returned address
        verify_checksum: Also require a valid trailing Kerl checksum

    Raises:
        ParseError: If the string is not made of trytes
        InvalidFormatError: If the migration address is malformed
        InvalidChecksumError: If verify_checksum is set and the checksum is wrong
        IntegrityMismatchError: If the embedded hash prefix is wrong
    """
    trytes = format_tryte_string(parse_tryte_string(address))

    if verify_checksum and not verify_tryte_checksum(trytes):
        log(_logger, "info", "Rejected migration address", reason="checksum")
        raise InvalidChecksumError("Invalid address, tryte checksum doesn't match")

    result = format_modern_address(decode_migration_address(trytes), hrp)
    log(_logger, "debug", "Converted to modern address", result=result)
    return result


def convert_address(address: str, hrp: str = DEFAULT_HRP) -> ConversionResult:
    """
    Convert in whichever direction the input calls for.

    Inputs longer than 80 characters are treated as migration addresses,
    anything shorter as a bech32 address.
    """
    source = address.strip()
    if len(source) >= ADDRESS_TRYTES:
        return ConversionResult(
            source, convert_to_migration_address(source, hrp), TO_MODERN
        )
    return ConversionResult(source, convert_to_tryte_address(source), TO_LEGACY)
