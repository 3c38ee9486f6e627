"""
Address commands - inspect, convert and validate TON addresses.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from ..address import Address
from ..config import Settings
from ..errors import AddressFormatError, TonPayloadError


def _parse_or_exit(value: str) -> Address:
    try:
        return Address.parse(value)
    except TonPayloadError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)


@click.group()
def address() -> None:
    """Inspect and convert TON addresses."""


@address.command("parse")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def parse_cmd(value: str, as_json: bool) -> None:
    """Decode an address and show every representation."""
    addr = _parse_or_exit(value)
    info = {
        "workchain": addr.workchain,
        "hash": addr.hash_part.hex(),
        "bounceable": addr.is_bounceable,
        "test_only": addr.is_test_only,
        "user_friendly": addr.is_user_friendly,
        "url_safe": addr.is_url_safe,
        "raw": addr.to_raw(),
        "bounceable_url_safe": addr.to_friendly(url_safe=True, bounceable=True, test_only=False),
        "non_bounceable_url_safe": addr.to_friendly(url_safe=True, bounceable=False, test_only=False),
    }
    if as_json:
        click.echo(json.dumps(info, indent=2))
        return

    click.echo(f"  Workchain:      {info['workchain']}")
    click.echo(f"  Hash:           {info['hash']}")
    click.echo(f"  Bounceable:     {info['bounceable']}")
    click.echo(f"  Test only:      {info['test_only']}")
    click.echo(f"  URL safe:       {info['url_safe']}")
    click.echo("")
    click.echo(f"  Raw:            {info['raw']}")
    click.echo(f"  Bounceable:     {info['bounceable_url_safe']}")
    click.echo(f"  Non-bounceable: {info['non_bounceable_url_safe']}")


@address.command("format")
@click.argument("value")
@click.option("--raw/--friendly", "raw", default=None, help="Output form (default: same as input)")
@click.option("--url-safe/--no-url-safe", default=None, help="Use the base64url alphabet")
@click.option("--bounceable/--non-bounceable", default=None, help="Bounceable tag")
@click.option("--testnet/--mainnet", default=None, help="Set the test-only flag")
def format_cmd(
    value: str,
    raw: Optional[bool],
    url_safe: Optional[bool],
    bounceable: Optional[bool],
    testnet: Optional[bool],
) -> None:
    """Re-render an address. Omitted options keep the input's flags."""
    addr = _parse_or_exit(value)
    user_friendly = None if raw is None else not raw
    click.echo(addr.format(user_friendly=user_friendly, url_safe=url_safe, bounceable=bounceable, test_only=testnet))


@address.command("friendly")
@click.argument("value")
@click.option("--url-safe/--no-url-safe", default=None, help="Override TONPAYLOAD_URL_SAFE")
@click.option("--bounceable/--non-bounceable", default=None, help="Override TONPAYLOAD_BOUNCEABLE")
@click.option("--testnet/--mainnet", default=None, help="Override TONPAYLOAD_TESTNET")
def friendly_cmd(
    value: str,
    url_safe: Optional[bool],
    bounceable: Optional[bool],
    testnet: Optional[bool],
) -> None:
    """Render an address in friendly form using the configured defaults."""
    try:
        settings = Settings.from_env()
    except TonPayloadError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    addr = _parse_or_exit(value)
    click.echo(
        addr.to_friendly(
            url_safe=settings.url_safe if url_safe is None else url_safe,
            bounceable=settings.bounceable if bounceable is None else bounceable,
            test_only=settings.testnet if testnet is None else testnet,
        )
    )


@address.command("validate")
@click.argument("value")
def validate_cmd(value: str) -> None:
    """Exit 0 if the address is valid, 2 otherwise."""
    try:
        Address.parse(value)
    except AddressFormatError as exc:
        click.secho(f"INVALID: {exc}", fg="red")
        sys.exit(exc.exit_code)
    click.secho("OK: valid address", fg="green")
