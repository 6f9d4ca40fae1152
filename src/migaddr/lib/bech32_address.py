"""
Modern (Chrysalis) address handling.

A modern address is shown as a bech32 string whose data part is one type
byte followed by the address bytes. Only Ed25519 addresses (type 0, 32 bytes
of BLAKE2b-256 public key hash) take part in the migration.
"""

from typing import Union

from bech32 import bech32_decode, bech32_encode, convertbits

from migaddr.config import DEFAULT_HRP, ED25519_ADDRESS_LENGTH, ED25519_ADDRESS_TYPE
from migaddr.lib.errors import ParseError, UnsupportedAddressTypeError


class Ed25519Address:
    """Immutable 32-byte Ed25519 address."""

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray]):
        if len(data) != ED25519_ADDRESS_LENGTH:
            raise ValueError(
                f"Ed25519 address must be {ED25519_ADDRESS_LENGTH} bytes, got {len(data)}"
            )
        object.__setattr__(self, "_data", bytes(data))

    def __setattr__(self, name, value):
        raise AttributeError("Ed25519Address is immutable")

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ed25519Address):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Ed25519Address({self._data.hex()})"

    @property
    def hex(self) -> str:
        return self._data.hex()

    @classmethod
    def from_hex(cls, value: str) -> "Ed25519Address":
        try:
            return cls(bytes.fromhex(value))
        except ValueError as e:
            raise ParseError(f"Invalid hex address: {e}")


def parse_modern_address(address: str) -> Ed25519Address:
    """
    Parse a bech32 address string into an Ed25519 address.

    Any human readable part is accepted.

    Raises:
        ParseError: If the string is not valid bech32 or has the wrong length
        UnsupportedAddressTypeError: If the address is not an Ed25519 address
    """
    hrp, data = bech32_decode(address.strip())
    if hrp is None or data is None:
        raise ParseError(f"Invalid bech32 address: {address!r}")

    payload = convertbits(data, 5, 8, False)
    if not payload:
        raise ParseError(f"Invalid bech32 data part in {address!r}")

    address_type = payload[0]
    if address_type != ED25519_ADDRESS_TYPE:
        raise UnsupportedAddressTypeError(
            f"Unsupported address type {address_type}, only Ed25519 addresses can be migrated"
        )

    if len(payload) != ED25519_ADDRESS_LENGTH + 1:
        raise ParseError(
            f"Ed25519 address must hold {ED25519_ADDRESS_LENGTH} bytes, got {len(payload) - 1}"
        )
    return Ed25519Address(bytes(payload[1:]))


def format_modern_address(address: Ed25519Address, hrp: str = DEFAULT_HRP) -> str:
    """Format an Ed25519 address as a bech32 string."""
    payload = bytes([ED25519_ADDRESS_TYPE]) + bytes(address)
    return bech32_encode(hrp.lower(), convertbits(payload, 8, 5))
