"""
Error types for tonpayload.

Every failure is raised synchronously and rejects exactly one input.
``exit_code`` is what the CLI exits with when the error reaches it.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class TonPayloadError(ValueError):
    """Base exception for all tonpayload errors."""

    exit_code: int = 1

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AddressErrorKind(str, Enum):
    INVALID_LENGTH = "InvalidLength"
    INVALID_BYTE_LENGTH = "InvalidByteLength"
    CHECKSUM_MISMATCH = "ChecksumMismatch"
    UNKNOWN_TAG = "UnknownTag"
    INVALID_WORKCHAIN = "InvalidWorkchain"
    INVALID_HASH_LENGTH = "InvalidHashLength"
    INVALID_HEX = "InvalidHex"


class AddressFormatError(TonPayloadError):
    """An address string could not be decoded."""

    exit_code = 2

    def __init__(self, kind: AddressErrorKind, message: str, address: Optional[str] = None) -> None:
        super().__init__(message, {"kind": kind.value, "address": address})
        self.kind = kind
        self.address = address

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class InvalidAmount(TonPayloadError):
    """Amount is not a non-negative integer (or decimal) in range."""

    exit_code = 3


class InvalidArgumentType(TonPayloadError, TypeError):
    """Argument has the wrong shape, e.g. a non-string address."""

    exit_code = 4


class CellOverflowError(TonPayloadError):
    """A cell ran out of bits or reference slots."""

    exit_code = 5


class ConfigurationError(TonPayloadError):
    exit_code = 6
