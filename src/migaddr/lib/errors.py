"""
Exceptions raised while converting between modern and migration addresses.
"""


class MigrationAddressError(Exception):
    """Base exception for address conversion errors"""

    pass


class ParseError(MigrationAddressError):
    """Malformed input string (wrong alphabet, bad bech32 checksum, bad length)"""

    pass


class InvalidFormatError(MigrationAddressError):
    """Migration address fails its structural checks"""

    pass


class InvalidChecksumError(InvalidFormatError):
    """Trailing tryte checksum does not match the address body"""

    pass


class IntegrityMismatchError(MigrationAddressError):
    """Embedded BLAKE2b prefix does not match the decoded address"""

    pass


class UnsupportedAddressTypeError(MigrationAddressError):
    """Modern address is not an Ed25519 address"""

    pass
