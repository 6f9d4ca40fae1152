import sys

import click

from migaddr.config import get_hrp
from migaddr.lib.bech32_address import Ed25519Address
from migaddr.lib.errors import MigrationAddressError
from migaddr.lib.migration import (
    add_tryte_checksum,
    encode_migration_address,
    convert_address,
    convert_to_migration_address,
    convert_to_tryte_address,
    verify_tryte_checksum,
)


@click.command("to-legacy")
@click.argument("address")
@click.option(
    "--hex",
    "from_hex",
    is_flag=True,
    help="Treat ADDRESS as the 32 raw Ed25519 address bytes in hex.",
)
def to_legacy(address, from_hex):
    """Converts a bech32 Ed25519 address to a 90-tryte migration address."""
    try:
        if from_hex:
            ed25519_address = Ed25519Address.from_hex(address.strip())
            click.echo(add_tryte_checksum(encode_migration_address(ed25519_address)))
        else:
            click.echo(convert_to_tryte_address(address))
    except MigrationAddressError as e:
        raise click.ClickException(f"Failed to convert address: {e}")


@click.command("to-modern")
@click.argument("address")
@click.option(
    "--hrp",
    envvar="MIGADDR_HRP",
    default=get_hrp,
    help="Human readable part of the bech32 address.",
)
@click.option(
    "--verify-checksum",
    is_flag=True,
    help="Reject 90-tryte addresses whose trailing checksum doesn't match.",
)
def to_modern(address, hrp, verify_checksum):
    """Converts a migration address back to its bech32 Ed25519 address."""
    try:
        click.echo(
            convert_to_migration_address(address, hrp, verify_checksum=verify_checksum)
        )
    except MigrationAddressError as e:
        raise click.ClickException(f"Failed to convert address: {e}")


@click.command("convert")
@click.argument("addresses", nargs=-1, required=True)
@click.option(
    "--hrp",
    envvar="MIGADDR_HRP",
    default=get_hrp,
    help="Human readable part of the bech32 address.",
)
def convert(addresses, hrp):
    """
    Converts addresses in whichever direction they need.

    Addresses longer than 80 characters are treated as migration addresses.
    Pass '-' to read addresses from stdin, one per line.
    """
    if addresses == ("-",):
        addresses = tuple(line.strip() for line in sys.stdin if line.strip())

    failures = 0
    for address in addresses:
        try:
            result = convert_address(address, hrp)
        except MigrationAddressError as e:
            failures += 1
            click.echo(f"{address}: {e}", err=True)
            continue

        if len(addresses) > 1:
            click.echo(f"{result.source} -> {result.result}")
        else:
            click.echo(result.result)

    if failures:
        raise click.ClickException(f"{failures} of {len(addresses)} address(es) failed")


@click.command("verify-checksum")
@click.argument("address")
def verify_checksum(address):
    """Checks the 9-tryte checksum of a 90-tryte migration address."""
    try:
        valid = verify_tryte_checksum(address.strip())
    except MigrationAddressError as e:
        raise click.ClickException(f"Failed to verify checksum: {e}")

    if not valid:
        raise click.ClickException("Checksum doesn't match")
    click.echo("✓ Checksum is valid")


@click.command("serve")
@click.option("--host", default="127.0.0.1", help="Interface to bind.")
@click.option("--port", default=8000, type=int, help="Port to listen on.")
def serve(host, port):
    """Runs the web converter."""
    import uvicorn

    click.echo(f"Starting migration address converter on {host}:{port}...", err=True)
    uvicorn.run("migaddr.main:app", host=host, port=port)
