"""
This package decodes the hexadecimal payloads sent by BoB Assistant sensors.

- ``classify``: signification byte -> message kind and sensor variant.
- ``fields``: primary property extraction and unit transforms.
- ``derive``: properties computed from the primary ones.
- ``decode``: the decoding pipeline and its entry points.
"""
from bobassistant.parsing.classify import classify
from bobassistant.parsing.decode import PayloadDecoder, decode_payload
from bobassistant.errors import (
    InvalidByteIndexConfiguration,
    InvalidPayload,
    InvalidPayloadLength,
    InvalidSensorState,
    PayloadDecodeError,
    UnknownMessageKind,
    UnknownSensorVariant,
)
from bobassistant.parsing.model import DecodeResult
from bobassistant.parsing.observer import CollectingObserver, DecodeObserver, LoggingObserver

__all__ = [
    "classify",
    "CollectingObserver",
    "DecodeObserver",
    "DecodeResult",
    "decode_payload",
    "InvalidByteIndexConfiguration",
    "InvalidPayload",
    "InvalidPayloadLength",
    "InvalidSensorState",
    "LoggingObserver",
    "PayloadDecodeError",
    "PayloadDecoder",
    "UnknownMessageKind",
    "UnknownSensorVariant",
]
