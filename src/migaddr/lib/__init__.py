"""
Conversion between Chrysalis Ed25519 addresses and legacy migration addresses.

Example Usage:
    from migaddr.lib import convert_to_tryte_address, convert_to_migration_address

    legacy = convert_to_tryte_address("iota1q...")        # TRANSFER...9 + checksum
    modern = convert_to_migration_address(legacy)          # iota1q...
"""

from .errors import (
    MigrationAddressError,
    ParseError,
    InvalidFormatError,
    InvalidChecksumError,
    IntegrityMismatchError,
    UnsupportedAddressTypeError,
)

from .bech32_address import (
    Ed25519Address,
    parse_modern_address,
    format_modern_address,
)

from .migration import (
    ConversionResult,
    TO_LEGACY,
    TO_MODERN,
    encode_migration_address,
    decode_migration_address,
    tryte_checksum,
    add_tryte_checksum,
    verify_tryte_checksum,
    parse_tryte_string,
    format_tryte_string,
    convert_to_tryte_address,
    convert_to_migration_address,
    convert_address,
)

__all__ = [
    # Errors
    "MigrationAddressError",
    "ParseError",
    "InvalidFormatError",
    "InvalidChecksumError",
    "IntegrityMismatchError",
    "UnsupportedAddressTypeError",
    # Modern addresses
    "Ed25519Address",
    "parse_modern_address",
    "format_modern_address",
    # Migration addresses
    "ConversionResult",
    "TO_LEGACY",
    "TO_MODERN",
    "encode_migration_address",
    "decode_migration_address",
    "tryte_checksum",
    "add_tryte_checksum",
    "verify_tryte_checksum",
    "parse_tryte_string",
    "format_tryte_string",
    "convert_to_tryte_address",
    "convert_to_migration_address",
    "convert_address",
]
