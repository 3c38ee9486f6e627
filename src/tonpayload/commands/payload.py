"""
Payload commands - print base64 BOC payloads for token transfers.

The output goes into the ``payload`` field of a wallet message; the
message itself (target contract, attached TON) is assembled by the caller.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from ..config import Settings
from ..errors import TonPayloadError
from ..transfer import (
    JETTON_TRANSFER_OPCODE,
    NFT_TRANSFER_OPCODE,
    JettonTransfer,
    NftTransfer,
    from_nano,
    normalize_raw_amount,
    to_nano,
    to_raw_amount,
)


def _fail(exc: TonPayloadError) -> None:
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(exc.exit_code)


def _emit(payload: str, opcode: int, as_json: bool, extra: dict) -> None:
    if as_json:
        click.echo(json.dumps({"opcode": f"0x{opcode:08x}", "payload": payload, **extra}, indent=2))
        return
    click.echo(payload)


@click.group()
def payload() -> None:
    """Build transfer payloads."""


@payload.command()
@click.option("--to", "recipient", required=True, help="Recipient owner address")
@click.option("--response", "response", required=True, help="Response destination (usually the sender)")
@click.option("--amount", required=True, help="Token amount (raw units unless --decimals is given)")
@click.option("--decimals", type=int, default=None, help="Token decimals; treat --amount as human-readable")
@click.option("--forward-ton", default=None, help="TON forwarded with the notification")
@click.option("--comment", default="", help="Text comment")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def jetton(
    recipient: str,
    response: str,
    amount: str,
    decimals: Optional[int],
    forward_ton: Optional[str],
    comment: str,
    as_json: bool,
) -> None:
    """Build a jetton transfer payload."""
    try:
        settings = Settings.from_env()
        forward = forward_ton if forward_ton is not None else settings.forward_ton_amount
        raw_amount = to_raw_amount(amount, decimals) if decimals is not None else amount
        transfer = JettonTransfer(
            recipient_address=recipient,
            transfer_amount_raw=raw_amount,
            response_destination=response,
            forward_ton_amount=forward,
            forward_message=comment,
        )
        boc = transfer.to_boc_base64()
    except TonPayloadError as exc:
        _fail(exc)
        return

    _emit(
        boc,
        JETTON_TRANSFER_OPCODE,
        as_json,
        {"amount_raw": str(normalize_raw_amount(raw_amount)), "forward_ton": from_nano(to_nano(forward))},
    )


@payload.command()
@click.option("--to", "recipient", required=True, help="New owner address")
@click.option("--response", "response", required=True, help="Response destination (usually the sender)")
@click.option("--forward-ton", default=None, help="TON forwarded with the notification")
@click.option("--comment", default="", help="Text comment")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def nft(
    recipient: str,
    response: str,
    forward_ton: Optional[str],
    comment: str,
    as_json: bool,
) -> None:
    """Build an NFT transfer payload."""
    try:
        settings = Settings.from_env()
        forward = forward_ton if forward_ton is not None else settings.forward_ton_amount
        boc = NftTransfer(
            recipient_address=recipient,
            response_destination=response,
            forward_ton_amount=forward,
            forward_message=comment,
        ).to_boc_base64()
    except TonPayloadError as exc:
        _fail(exc)
        return

    _emit(boc, NFT_TRANSFER_OPCODE, as_json, {"forward_ton": from_nano(to_nano(forward))})
