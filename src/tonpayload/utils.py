from __future__ import annotations

import base64
import binascii
import string

_HEX_DIGITS = frozenset(string.hexdigits)
_URL_SAFE = str.maketrans("+/", "-_")
_URL_UNSAFE = str.maketrans("-_", "+/")


def is_hex(value: str) -> bool:
    return len(value) % 2 == 0 and all(ch in _HEX_DIGITS for ch in value)


def hex_to_bytes(value: str) -> bytes:
    """Decode a hex string strictly (no whitespace, even length)."""
    if not is_hex(value):
        raise ValueError(f"Invalid hex string: {value!r}")
    return bytes.fromhex(value)


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def base64_decode(value: str) -> bytes:
    """Decode standard base64, rejecting characters outside the alphabet."""
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError(f"Invalid base64: {exc}") from exc


def to_url_safe(value: str) -> str:
    return value.translate(_URL_SAFE)


def from_url_safe(value: str) -> str:
    return value.translate(_URL_UNSAFE)


# ---------------------------------------------------------------------------
# Checksums
# ---------------------------------------------------------------------------


def crc16(data: bytes) -> int:
    """CRC16/XMODEM: poly 0x1021, init 0, no reflection, no final XOR."""
    crc = 0
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ 0x1021
            else:
                crc <<= 1
            crc &= 0xFFFF
    return crc


def crc16_bytes(data: bytes) -> bytes:
    return crc16(data).to_bytes(2, "big")
