from __future__ import annotations

import math
import string
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


BYTE_HEX_LENGTH = 2
_HEX_DIGITS = frozenset(string.hexdigits)


def is_hex(data: str) -> bool:
    return bool(data) and all(ch in _HEX_DIGITS for ch in data)


def hex_to_unsigned(hex_str: str) -> int:
    if len(hex_str) % 2:
        hex_str = "0" + hex_str
    return int(hex_str, 16)


def byte_at(payload: str, index: int) -> int:
    start = index * BYTE_HEX_LENGTH
    return hex_to_unsigned(payload[start: start + BYTE_HEX_LENGTH])


def bytes_at(payload: str, indexes: Iterable[int]) -> list[int]:
    return [byte_at(payload, index) for index in indexes]


def round_fixed(value: float, digits: int) -> float:
    """Round to ``digits`` decimals, halves away from zero on the exact binary value."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_ceil(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)
