"""
TON account addresses.

Two textual forms are understood:

- raw:      ``<workchain>:<64 hex digits>``, e.g. ``0:83df...31a8``
- friendly: 48 base64 (or base64url) characters encoding
            tag(1) + workchain(1) + hash(32) + crc16(2)

The tag byte is 0x11 for bounceable and 0x51 for non-bounceable addresses,
with 0x80 OR-ed in for test-only (testnet) addresses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from .errors import AddressErrorKind, AddressFormatError, InvalidArgumentType
from .utils import (
    base64_decode,
    base64_encode,
    crc16_bytes,
    from_url_safe,
    hex_to_bytes,
    to_url_safe,
)

BOUNCEABLE_TAG = 0x11
NON_BOUNCEABLE_TAG = 0x51
TEST_ONLY_FLAG = 0x80

WORKCHAINS = (0, -1)
_RAW_WORKCHAINS = {str(wc): wc for wc in WORKCHAINS}
HASH_LENGTH = 32
FRIENDLY_LENGTH = 48
FRIENDLY_BYTE_LENGTH = 36


@dataclass(frozen=True, eq=False)
class Address:
    """
    Decoded account address.

    Identity is ``(workchain, hash_part)``; the remaining flags only
    control how :meth:`format` renders the address by default.
    """

    workchain: int
    hash_part: bytes
    is_bounceable: bool = False
    is_test_only: bool = False
    is_user_friendly: bool = False
    is_url_safe: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.workchain, bool) or not isinstance(self.workchain, int):
            raise InvalidArgumentType(f"Workchain must be an int, got {type(self.workchain).__name__}")
        if not isinstance(self.hash_part, (bytes, bytearray, memoryview)):
            raise InvalidArgumentType(f"Hash part must be bytes, got {type(self.hash_part).__name__}")
        if self.workchain not in WORKCHAINS:
            raise AddressFormatError(
                AddressErrorKind.INVALID_WORKCHAIN,
                f"Invalid address workchain {self.workchain}",
            )
        if len(self.hash_part) != HASH_LENGTH:
            raise AddressFormatError(
                AddressErrorKind.INVALID_HASH_LENGTH,
                f"Hash part must be {HASH_LENGTH} bytes, got {len(self.hash_part)}",
            )
        object.__setattr__(self, "hash_part", bytes(self.hash_part))

    @classmethod
    def parse(cls, value: Union[str, "Address"]) -> "Address":
        return parse_address(value)

    @classmethod
    def from_parts(
        cls,
        workchain: int,
        hash_part: bytes,
        bounceable: bool = True,
        test_only: bool = False,
        url_safe: bool = True,
    ) -> "Address":
        """Build a user-friendly address from its workchain and 32-byte hash."""
        return cls(
            workchain=workchain,
            hash_part=hash_part,
            is_bounceable=bounceable,
            is_test_only=test_only,
            is_user_friendly=True,
            is_url_safe=url_safe,
        )

    @classmethod
    def is_valid(cls, value: Union[str, "Address"]) -> bool:
        return is_valid_address(value)

    def format(
        self,
        user_friendly: Optional[bool] = None,
        url_safe: Optional[bool] = None,
        bounceable: Optional[bool] = None,
        test_only: Optional[bool] = None,
    ) -> str:
        return format_address(
            self,
            user_friendly=user_friendly,
            url_safe=url_safe,
            bounceable=bounceable,
            test_only=test_only,
        )

    def to_raw(self) -> str:
        return self.format(user_friendly=False)

    def to_friendly(
        self,
        url_safe: Optional[bool] = None,
        bounceable: Optional[bool] = None,
        test_only: Optional[bool] = None,
    ) -> str:
        return self.format(user_friendly=True, url_safe=url_safe, bounceable=bounceable, test_only=test_only)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self.workchain == other.workchain and self.hash_part == other.hash_part

    def __hash__(self) -> int:
        return hash((self.workchain, self.hash_part))

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Address({self.to_raw()!r})"


def parse_address(value: Union[str, Address]) -> Address:
    """
    Parse an address in raw or friendly form.

    Args:
        value: Address string, or an existing Address to copy.

    Returns:
        A new Address carrying the presentation flags of the input.

    Raises:
        AddressFormatError: If the string is not a valid address.
        InvalidArgumentType: If value is neither a string nor an Address.
    """
    if isinstance(value, Address):
        return replace(value)
    if not isinstance(value, str):
        raise InvalidArgumentType(f"Address must be a string, got {type(value).__name__}")
    if ":" in value:
        return _parse_raw(value)
    return _parse_friendly(value)


def _parse_raw(value: str) -> Address:
    parts = value.split(":")
    if len(parts) != 2:
        raise AddressFormatError(
            AddressErrorKind.INVALID_LENGTH,
            "Raw address must have the form <workchain>:<hash>",
            value,
        )

    wc_text, hash_hex = parts
    # exactly "0" or "-1"; no sign, padding or leading zeros
    workchain = _RAW_WORKCHAINS.get(wc_text)
    if workchain is None:
        raise AddressFormatError(
            AddressErrorKind.INVALID_WORKCHAIN,
            f"Invalid address workchain {wc_text!r}",
            value,
        )

    if len(hash_hex) != HASH_LENGTH * 2:
        raise AddressFormatError(
            AddressErrorKind.INVALID_HASH_LENGTH,
            f"Raw address hash must be {HASH_LENGTH * 2} hex characters, got {len(hash_hex)}",
            value,
        )
    try:
        hash_part = hex_to_bytes(hash_hex)
    except ValueError as exc:
        raise AddressFormatError(AddressErrorKind.INVALID_HEX, "Raw address hash is not valid hex", value) from exc

    return Address(workchain=workchain, hash_part=hash_part)


def _parse_friendly(value: str) -> Address:
    if len(value) != FRIENDLY_LENGTH:
        raise AddressFormatError(
            AddressErrorKind.INVALID_LENGTH,
            f"User-friendly address should contain strictly {FRIENDLY_LENGTH} characters, got {len(value)}",
            value,
        )

    url_safe = "-" in value or "_" in value
    encoded = from_url_safe(value) if url_safe else value
    try:
        data = base64_decode(encoded)
    except ValueError as exc:
        raise AddressFormatError(AddressErrorKind.INVALID_BYTE_LENGTH, str(exc), value) from exc
    if len(data) != FRIENDLY_BYTE_LENGTH:
        raise AddressFormatError(
            AddressErrorKind.INVALID_BYTE_LENGTH,
            f"Address must decode to {FRIENDLY_BYTE_LENGTH} bytes, got {len(data)}",
            value,
        )

    body, checksum = data[:34], data[34:]
    if crc16_bytes(body) != checksum:
        raise AddressFormatError(AddressErrorKind.CHECKSUM_MISMATCH, "Wrong crc16 checksum", value)

    tag = body[0]
    test_only = bool(tag & TEST_ONLY_FLAG)
    tag &= ~TEST_ONLY_FLAG
    if tag not in (BOUNCEABLE_TAG, NON_BOUNCEABLE_TAG):
        raise AddressFormatError(AddressErrorKind.UNKNOWN_TAG, f"Unknown address tag 0x{tag:02x}", value)

    workchain = -1 if body[1] == 0xFF else body[1]
    if workchain not in WORKCHAINS:
        raise AddressFormatError(
            AddressErrorKind.INVALID_WORKCHAIN,
            f"Invalid address workchain {workchain}",
            value,
        )

    return Address(
        workchain=workchain,
        hash_part=body[2:34],
        is_bounceable=tag == BOUNCEABLE_TAG,
        is_test_only=test_only,
        is_user_friendly=True,
        is_url_safe=url_safe,
    )


def format_address(
    address: Address,
    user_friendly: Optional[bool] = None,
    url_safe: Optional[bool] = None,
    bounceable: Optional[bool] = None,
    test_only: Optional[bool] = None,
) -> str:
    """
    Render an address. Options left as None use the address's stored flags.
    """
    if user_friendly is None:
        user_friendly = address.is_user_friendly
    if url_safe is None:
        url_safe = address.is_url_safe
    if bounceable is None:
        bounceable = address.is_bounceable
    if test_only is None:
        test_only = address.is_test_only

    if not user_friendly:
        return f"{address.workchain}:{address.hash_part.hex()}"

    tag = BOUNCEABLE_TAG if bounceable else NON_BOUNCEABLE_TAG
    if test_only:
        tag |= TEST_ONLY_FLAG
    body = bytes([tag, address.workchain & 0xFF]) + address.hash_part
    encoded = base64_encode(body + crc16_bytes(body))
    return to_url_safe(encoded) if url_safe else encoded


def is_valid_address(value: Union[str, Address]) -> bool:
    """True iff ``parse_address`` accepts the value.

    Only address format errors map to False; a non-string argument
    still raises InvalidArgumentType.
    """
    try:
        parse_address(value)
    except AddressFormatError:
        return False
    return True
