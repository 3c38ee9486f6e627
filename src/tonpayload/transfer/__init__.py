"""
Transfer - Jetton and NFT transfer payloads plus amount helpers.
"""

from .coins import from_nano, normalize_raw_amount, to_nano, to_raw_amount
from .payload import (
    JETTON_TRANSFER_OPCODE,
    MAX_COMMENT_BYTES,
    NFT_TRANSFER_OPCODE,
    JettonTransfer,
    NftTransfer,
    build_comment_cell,
    build_jetton_transfer,
    build_nft_transfer,
    make_query_id,
    store_address_and_forward,
)

__all__ = [
    "JETTON_TRANSFER_OPCODE",
    "MAX_COMMENT_BYTES",
    "NFT_TRANSFER_OPCODE",
    "JettonTransfer",
    "NftTransfer",
    "build_comment_cell",
    "build_jetton_transfer",
    "build_nft_transfer",
    "from_nano",
    "make_query_id",
    "normalize_raw_amount",
    "store_address_and_forward",
    "to_nano",
    "to_raw_amount",
]
