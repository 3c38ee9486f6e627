"""
Amount conversion for transfer payloads.

All amounts end up as plain ``int`` (arbitrary precision): jetton balances
routinely exceed 64 bits, and the coins field in a cell allows up to
15 bytes.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from typing import Union

from ..boc import MAX_COINS
from ..errors import InvalidAmount, InvalidArgumentType

NANO_DECIMALS = 9
NANO_PER_TON = 10**NANO_DECIMALS

_DIGITS = re.compile(r"[0-9]+")

AmountLike = Union[int, float, str, Decimal]


def _check_range(value: int, original: object) -> int:
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative: {original}", {"amount": str(original)})
    if value > MAX_COINS:
        raise InvalidAmount(f"Amount exceeds the coins field maximum: {original}", {"amount": str(original)})
    return value


def _to_decimal(amount: AmountLike) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidArgumentType("Amount must be a number or decimal string, got bool")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        if not math.isfinite(amount):
            raise InvalidAmount(f"Amount must be finite: {amount}")
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation as exc:
            raise InvalidAmount(f"Invalid decimal amount: {amount!r}", {"amount": amount}) from exc
    else:
        raise InvalidArgumentType(f"Amount must be a number or decimal string, got {type(amount).__name__}")

    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite: {amount}")
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative: {amount}", {"amount": str(amount)})
    return value


def to_nano(amount: AmountLike) -> int:
    """
    Convert a TON amount to nanoTON.

    Args:
        amount: TON as int, float, Decimal or decimal string (e.g. "0.05").

    Returns:
        Integer nanoTON.

    Raises:
        InvalidAmount: Negative, non-finite, more than 9 decimal places,
            or too large for a coins field.
        InvalidArgumentType: Unsupported type.
    """
    value = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = 100
        nano = value.scaleb(NANO_DECIMALS)
        if nano != nano.to_integral_value():
            raise InvalidAmount(
                f"Too many decimal places in TON amount {amount} (max {NANO_DECIMALS})",
                {"amount": str(amount)},
            )
        return _check_range(int(nano), amount)


def to_raw_amount(amount: AmountLike, decimals: int) -> int:
    """
    Convert a human-readable token amount to its raw integer form.

    Fractional digits beyond ``decimals`` are truncated, so
    ``to_raw_amount("1.2345", 2) == 123``.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise InvalidArgumentType(f"Decimals must be an int, got {type(decimals).__name__}")
    if decimals < 0:
        raise InvalidAmount(f"Decimals must not be negative: {decimals}")
    value = _to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = 100
        raw = value.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN)
        return _check_range(int(raw), amount)


def normalize_raw_amount(value: AmountLike) -> int:
    """Validate a raw (smallest-unit) amount and return it as an int."""
    if isinstance(value, bool):
        raise InvalidArgumentType("Raw amount must be an integer, got bool")
    if isinstance(value, int):
        return _check_range(value, value)
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidAmount(f"Raw amount must be an integer: {value}", {"amount": repr(value)})
        return _check_range(int(value), value)
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidAmount(f"Raw amount must be an integer: {value}", {"amount": str(value)})
        return _check_range(int(value), value)
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("-") and _DIGITS.fullmatch(text[1:]):
            raise InvalidAmount(f"Raw amount must not be negative: {value}", {"amount": value})
        if not _DIGITS.fullmatch(text):
            raise InvalidAmount(f"Raw amount must be a decimal integer string: {value!r}", {"amount": value})
        return _check_range(int(text), value)
    raise InvalidArgumentType(f"Raw amount must be an integer, got {type(value).__name__}")


def from_nano(amount: int) -> str:
    """Format nanoTON as a TON decimal string without trailing zeros."""
    whole, frac = divmod(amount, NANO_PER_TON)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:09d}".rstrip("0")
