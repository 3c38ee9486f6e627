__all__ = [
    # Address codec
    "Address",
    "parse_address",
    "format_address",
    "is_valid_address",
    # Cells
    "Cell",
    "begin_cell",
    "to_boc_base64",
    # Transfer payloads
    "JettonTransfer",
    "NftTransfer",
    "build_jetton_transfer",
    "build_nft_transfer",
    "to_nano",
    "to_raw_amount",
    # Errors
    "TonPayloadError",
    "AddressErrorKind",
    "AddressFormatError",
    "InvalidAmount",
    "InvalidArgumentType",
    "CellOverflowError",
    "ConfigurationError",
]

__version__ = "1.0.0"

from .errors import (
    AddressErrorKind,
    AddressFormatError,
    CellOverflowError,
    ConfigurationError,
    InvalidAmount,
    InvalidArgumentType,
    TonPayloadError,
)
from .address import Address, format_address, is_valid_address, parse_address
from .boc import Cell, begin_cell, to_boc_base64
from .transfer import (
    JettonTransfer,
    NftTransfer,
    build_jetton_transfer,
    build_nft_transfer,
    to_nano,
    to_raw_amount,
)
