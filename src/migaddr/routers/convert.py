"""
Address conversion API endpoints
"""

from fastapi import APIRouter, HTTPException

from ..config import get_explorer_url, get_hrp
from ..lib.errors import IntegrityMismatchError, MigrationAddressError
from ..lib.migration import (
    TO_LEGACY,
    TO_MODERN,
    ConversionResult,
    convert_address,
    convert_to_migration_address,
    convert_to_tryte_address,
)
from ..models import ConversionResponse, ToLegacyRequest, ToModernRequest

router = APIRouter(tags=["convert"])


def _error_status(error: MigrationAddressError) -> int:
    # Well-formed input that fails the hash check is unprocessable, anything else is bad input
    return 422 if isinstance(error, IntegrityMismatchError) else 400


def _to_response(result: ConversionResult) -> ConversionResponse:
    explorer_url = None
    if result.is_legacy_result:
        explorer_url = f"{get_explorer_url()}{result.result}"
    return ConversionResponse(
        source=result.source,
        result=result.result,
        direction=result.direction,
        explorer_url=explorer_url,
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/convert/{address}", response_model=ConversionResponse)
def convert(address: str):
    """
    Convert an address in whichever direction it needs.

    Addresses longer than 80 characters are treated as migration addresses
    and converted to bech32; anything else is converted to a migration address.
    """
    try:
        return _to_response(convert_address(address, get_hrp()))
    except MigrationAddressError as e:
        raise HTTPException(status_code=_error_status(e), detail=str(e))


@router.post("/to-legacy", response_model=ConversionResponse)
def to_legacy(request: ToLegacyRequest):
    """Convert a bech32 Ed25519 address to a 90-tryte migration address."""
    try:
        result = convert_to_tryte_address(request.address)
    except MigrationAddressError as e:
        raise HTTPException(status_code=_error_status(e), detail=str(e))
    return _to_response(ConversionResult(request.address.strip(), result, TO_LEGACY))


@router.post("/to-modern", response_model=ConversionResponse)
def to_modern(request: ToModernRequest):
    """Convert a migration address back to its bech32 Ed25519 address."""
    try:
        result = convert_to_migration_address(
            request.address,
            request.hrp or get_hrp(),
            verify_checksum=request.verify_checksum,
        )
    except MigrationAddressError as e:
        raise HTTPException(status_code=_error_status(e), detail=str(e))
    return _to_response(ConversionResult(request.address.strip(), result, TO_MODERN))
