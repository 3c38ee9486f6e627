"""
tonpayload CLI

Developer front end for the address codec and the transfer payload
builders. Nothing here talks to the network.

Commands:
  address parse     - Decode an address and show every representation
  address format    - Re-render an address with explicit flags
  address friendly  - Friendly form using configured defaults
  address validate  - Check an address
  payload jetton    - Jetton transfer payload (base64 BOC)
  payload nft       - NFT transfer payload (base64 BOC)
  info              - Show version and effective settings

Addresses that start with "-" (masterchain raw form) must follow "--".
"""

from __future__ import annotations

import sys

import click

from . import __version__
from . import config
from .config import Settings
from .errors import TonPayloadError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tonpayload")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """tonpayload - TON address codec and transfer payload builder."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


from .commands.address import address
from .commands.payload import payload

cli.add_command(address)
cli.add_command(payload)


@cli.command()
def info() -> None:
    """Show version and effective settings."""
    try:
        settings = Settings.from_env()
    except TonPayloadError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    click.echo(f"tonpayload v{__version__}")
    env_path = config.TONPAYLOAD_ENV
    click.echo(f"  Config file:  {env_path}{'' if env_path.exists() else ' (not found)'}")
    click.echo(f"  Testnet:      {settings.testnet}")
    click.echo(f"  URL safe:     {settings.url_safe}")
    click.echo(f"  Bounceable:   {settings.bounceable}")
    click.echo(f"  Forward TON:  {settings.forward_ton_amount}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
