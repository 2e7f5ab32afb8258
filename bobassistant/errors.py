"""
Errors raised while decoding a BoB Assistant payload.

Every error aborts the whole decode call; no partial result is returned.
"""
from __future__ import annotations

from typing import Any


class PayloadDecodeError(ValueError):
    """Base class for every fatal payload decoding failure."""
    pass


class InvalidPayload(PayloadDecodeError):
    """Raised when the payload is empty or is not a hexadecimal string."""

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__(f"Invalid payload {payload!r}: expected a non-empty hexadecimal string")


class UnknownMessageKind(PayloadDecodeError):
    """Raised when the signification byte matches no message kind."""

    def __init__(self, signification: int) -> None:
        self.signification = signification
        super().__init__(f"Invalid data signification {signification}")


class UnknownSensorVariant(PayloadDecodeError):
    """Raised when the signification byte matches a message kind but no sensor variant."""

    def __init__(self, signification: int) -> None:
        self.signification = signification
        super().__init__(f"No sensor variant for data signification {signification}")


class InvalidPayloadLength(PayloadDecodeError):
    def __init__(self, length: int, expected: int, kind: str) -> None:
        self.length = length
        self.expected = expected
        self.kind = kind
        super().__init__(f'Invalid payload length "{length}" for message type {kind} (expected {expected})')


class InvalidSensorState(PayloadDecodeError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invalid sensor state: {value}")


class InvalidByteIndexConfiguration(PayloadDecodeError):
    """Raised when a field table entry is neither a byte offset nor a list of offsets."""

    def __init__(self, indexes: Any) -> None:
        self.indexes = indexes
        super().__init__(f"Invalid byte indexes configuration: {indexes!r}")


__all__ = [
    "InvalidByteIndexConfiguration",
    "InvalidPayload",
    "InvalidPayloadLength",
    "InvalidSensorState",
    "PayloadDecodeError",
    "UnknownMessageKind",
    "UnknownSensorVariant",
]
