import click

# Import individual commands from modules
from migaddr.cli.convert import (
    to_legacy,
    to_modern,
    convert,
    verify_checksum,
    serve,
)


@click.group()
def cli():
    """A CLI tool for converting Chrysalis addresses to and from migration addresses."""
    pass


# Add conversion commands
cli.add_command(to_legacy)
cli.add_command(to_modern)
cli.add_command(convert)
cli.add_command(verify_checksum)

# Add web converter command
cli.add_command(serve)


if __name__ == "__main__":
    cli()
