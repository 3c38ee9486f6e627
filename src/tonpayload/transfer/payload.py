"""
Transfer payloads - Build the message bodies of the standard token
transfer interfaces.

- Jetton (fungible token) ``transfer``, op 0x0f8a7ea5
- NFT item ``transfer``, op 0x5fcc3d14

Both bodies end with the same tail: destination, response destination,
an empty custom payload, the forward TON amount and an optional text
comment carried in a referenced cell. The result is returned as a base64
BOC, ready to go into the ``payload`` field of a wallet message.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from ..address import Address, parse_address
from ..boc import MAX_BITS, Builder, Cell, begin_cell, end_cell, store_address, to_boc_base64
from ..errors import CellOverflowError, InvalidArgumentType
from .coins import AmountLike, normalize_raw_amount, to_nano

logger = logging.getLogger(__name__)

JETTON_TRANSFER_OPCODE = 0x0F8A7EA5
NFT_TRANSFER_OPCODE = 0x5FCC3D14
TEXT_COMMENT_PREFIX = 0

QUERY_ID_RANDOM_SPREAD = 1024

# Bytes of comment text that fit in the first cell (after the 32-bit prefix)
# and in each continuation cell.
_FIRST_COMMENT_CHUNK = (MAX_BITS - 32) // 8
_NEXT_COMMENT_CHUNK = MAX_BITS // 8

MAX_COMMENT_CELLS = 64
MAX_COMMENT_BYTES = _FIRST_COMMENT_CHUNK + _NEXT_COMMENT_CHUNK * (MAX_COMMENT_CELLS - 1)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


AddressLike = Union[str, Address]


# ---------------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------------


def build_comment_cell(text: str) -> Cell:
    """
    Build a text comment cell: 32 zero bits followed by the UTF-8 text.

    Text that does not fit in one cell continues in a chain of cells,
    each linked as the single reference of the previous one.

    Raises:
        CellOverflowError: If the text needs more than MAX_COMMENT_CELLS cells.
    """
    data = text.encode("utf-8")
    if len(data) > MAX_COMMENT_BYTES:
        raise CellOverflowError(
            f"Comment is {len(data)} bytes, at most {MAX_COMMENT_BYTES} fit in {MAX_COMMENT_CELLS} cells",
            {"length": len(data), "max_length": MAX_COMMENT_BYTES},
        )

    rest = data[_FIRST_COMMENT_CHUNK:]
    chunks = [rest[i:i + _NEXT_COMMENT_CHUNK] for i in range(0, len(rest), _NEXT_COMMENT_CHUNK)]

    # Cells are immutable once ended, so the chain is built from its tail.
    tail: Optional[Cell] = None
    for chunk in reversed(chunks):
        builder = begin_cell().store_bytes(chunk)
        if tail is not None:
            builder.store_ref(tail)
        tail = end_cell(builder)

    head = begin_cell().store_uint(TEXT_COMMENT_PREFIX, 32).store_bytes(data[:_FIRST_COMMENT_CHUNK])
    if tail is not None:
        head.store_ref(tail)
    return end_cell(head)


def store_address_and_forward(
    builder: Builder,
    recipient: Address,
    response_destination: Address,
    forward_amount_nano: int,
    comment: str = "",
) -> Builder:
    """Store the tail shared by the jetton and NFT transfer bodies."""
    store_address(builder, recipient)
    store_address(builder, response_destination)
    builder.store_uint(0, 1)  # no custom_payload
    builder.store_coins(forward_amount_nano)
    if comment:
        builder.store_uint(1, 1)
        builder.store_ref(build_comment_cell(comment))
    else:
        builder.store_uint(0, 1)
    return builder


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentType(f"{name} must be a string, got {type(value).__name__}")
    return value


def _comment(value: Optional[str]) -> str:
    if value is None:
        return ""
    return _require_str("forward_message", value)


def make_query_id(
    clock: Optional[Callable[[], int]] = None,
    rng: Optional[RandomSource] = None,
) -> int:
    """
    Pseudo-unique 64-bit query id: ``now_ms * 1024 + randint(0, 1023)``.

    Args:
        clock: Returns the current time in milliseconds.
        rng: Random source with ``randint``; defaults to the ``random`` module.
    """
    now_ms = clock() if clock is not None else int(time.time() * 1000)
    residual = (rng or random).randint(0, QUERY_ID_RANDOM_SPREAD - 1)
    return now_ms * QUERY_ID_RANDOM_SPREAD + residual


# ---------------------------------------------------------------------------
# Transfer instructions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JettonTransfer:
    """
    Jetton wallet ``transfer`` message body.

    Attributes:
        recipient_address: Owner that receives the tokens
        transfer_amount_raw: Amount in the token's smallest unit
        response_destination: Where excess TON is returned (usually the sender)
        forward_ton_amount: TON forwarded to the recipient with the notification
        forward_message: Optional text comment
    """
    recipient_address: AddressLike
    transfer_amount_raw: AmountLike
    response_destination: AddressLike
    forward_ton_amount: AmountLike = "0"
    forward_message: Optional[str] = ""
    query_id: int = 0

    def to_cell(self) -> Cell:
        amount = normalize_raw_amount(self.transfer_amount_raw)
        recipient = parse_address(self.recipient_address)
        response = parse_address(self.response_destination)
        forward_nano = to_nano(self.forward_ton_amount)
        comment = _comment(self.forward_message)

        builder = (
            begin_cell()
            .store_uint(JETTON_TRANSFER_OPCODE, 32)
            .store_uint(self.query_id, 64)
            .store_coins(amount)
        )
        store_address_and_forward(builder, recipient, response, forward_nano, comment)
        cell = end_cell(builder)
        logger.debug(
            "Built jetton transfer: amount=%s forward_nano=%s bits=%d refs=%d",
            amount, forward_nano, len(cell.bits), len(cell.refs),
        )
        return cell

    def to_boc_base64(self) -> str:
        return to_boc_base64(self.to_cell())


@dataclass(frozen=True)
class NftTransfer:
    """NFT item ``transfer`` message body (ownership change)."""
    recipient_address: str
    response_destination: str
    forward_ton_amount: AmountLike = 0
    forward_message: Optional[str] = ""
    query_id: Optional[int] = None

    def to_cell(
        self,
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[RandomSource] = None,
    ) -> Cell:
        recipient = parse_address(_require_str("recipient_address", self.recipient_address))
        response = parse_address(_require_str("response_destination", self.response_destination))
        forward_nano = to_nano(self.forward_ton_amount)
        comment = _comment(self.forward_message)
        query_id = self.query_id if self.query_id is not None else make_query_id(clock, rng)

        builder = begin_cell().store_uint(NFT_TRANSFER_OPCODE, 32).store_uint(query_id, 64)
        store_address_and_forward(builder, recipient, response, forward_nano, comment)
        cell = end_cell(builder)
        logger.debug(
            "Built NFT transfer: query_id=%d forward_nano=%s bits=%d refs=%d",
            query_id, forward_nano, len(cell.bits), len(cell.refs),
        )
        return cell

    def to_boc_base64(
        self,
        clock: Optional[Callable[[], int]] = None,
        rng: Optional[RandomSource] = None,
    ) -> str:
        return to_boc_base64(self.to_cell(clock=clock, rng=rng))


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_jetton_transfer(
    recipient_address: AddressLike,
    transfer_amount_raw: AmountLike,
    response_destination: AddressLike,
    forward_ton_amount: AmountLike = "0",
    forward_message: Optional[str] = "",
) -> str:
    """
    Build a jetton ``transfer`` payload.

    The query id is always 0, so identical inputs give identical output.

    Args:
        recipient_address: New owner of the tokens (raw or friendly form)
        transfer_amount_raw: Token amount in smallest units (int or digit string)
        response_destination: Address that receives excess TON
        forward_ton_amount: TON to forward with the notification (default "0")
        forward_message: Optional UTF-8 comment

    Returns:
        Base64-encoded BOC

    Raises:
        AddressFormatError: If either address is malformed
        InvalidAmount: If an amount is negative, fractional or out of range
    """
    return JettonTransfer(
        recipient_address=recipient_address,
        transfer_amount_raw=transfer_amount_raw,
        response_destination=response_destination,
        forward_ton_amount=forward_ton_amount,
        forward_message=forward_message,
    ).to_boc_base64()


def build_nft_transfer(
    recipient_address: str,
    response_destination: str,
    forward_ton_amount: AmountLike = 0,
    forward_message: Optional[str] = "",
    *,
    clock: Optional[Callable[[], int]] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """
    Build an NFT ``transfer`` payload.

    Args:
        recipient_address: New owner of the NFT item
        response_destination: Address that receives excess TON
        forward_ton_amount: TON to forward with the notification (default 0)
        forward_message: Optional UTF-8 comment
        clock: Millisecond clock used for the query id
        rng: Random source used for the query id

    Returns:
        Base64-encoded BOC

    Raises:
        InvalidArgumentType: If an address is not a string
        AddressFormatError: If either address is malformed
        InvalidAmount: If the forward amount is invalid
    """
    return NftTransfer(
        recipient_address=recipient_address,
        response_destination=response_destination,
        forward_ton_amount=forward_ton_amount,
        forward_message=forward_message,
    ).to_boc_base64(clock=clock, rng=rng)
