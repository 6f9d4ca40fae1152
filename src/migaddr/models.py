from pydantic import BaseModel, Field
from typing import Optional


class ToLegacyRequest(BaseModel):
    address: str = Field(..., description="Bech32 Ed25519 address, e.g. iota1q...")


class ToModernRequest(BaseModel):
    address: str = Field(..., description="81- or 90-tryte migration address.")
    verify_checksum: bool = Field(
        False, description="Reject addresses whose trailing tryte checksum is wrong."
    )
    hrp: Optional[str] = Field(
        None, description="Human readable part of the returned bech32 address."
    )


class ConversionResponse(BaseModel):
    """Result of a single address conversion."""

    source: str
    result: str
    direction: str  # "to-legacy" or "to-modern"
    explorer_url: Optional[str] = None  # only set for migration addresses
