"""
Cell helpers on top of pytoniq-core.

Payload cells are assembled with pytoniq's ``Builder`` and serialised as a
single-root bag of cells without the offset index and with a CRC32C
trailer, the layout wallets expect in a message ``payload``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pytoniq_core.boc import Builder, Cell, CellError, begin_cell

from .errors import CellOverflowError
from .utils import base64_encode

if TYPE_CHECKING:
    from .address import Address

MAX_BITS = 1023
MAX_REFS = 4
MAX_COINS = (1 << 120) - 1  # VarUInteger 16: at most 15 bytes


def store_address(builder: Builder, address: Optional["Address"]) -> Builder:
    """Store ``addr_std`` for an address, ``addr_none`` for None."""
    return builder.store_address(address.to_raw() if address is not None else None)


def end_cell(builder: Builder) -> Cell:
    try:
        return builder.end_cell()
    except CellError as exc:
        raise CellOverflowError(f"Cell overflow: {exc}") from exc


def to_boc(cell: Cell) -> bytes:
    return cell.to_boc(has_idx=False, hash_crc32=True)


def to_boc_base64(cell: Cell) -> str:
    return base64_encode(to_boc(cell))


__all__ = [
    "MAX_BITS",
    "MAX_COINS",
    "MAX_REFS",
    "Builder",
    "Cell",
    "begin_cell",
    "end_cell",
    "store_address",
    "to_boc",
    "to_boc_base64",
]
