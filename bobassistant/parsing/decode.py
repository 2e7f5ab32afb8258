"""
Entry point for decoding BoB Assistant payloads.

Decoding runs classify -> length check -> field decoding -> derivation, and
either returns a ``DecodeResult`` or raises a ``PayloadDecodeError``.
"""
from __future__ import annotations

from typing import Any, Optional

from bobassistant.core.binary import is_hex
from bobassistant.parsing.classify import classify, read_signification
from bobassistant.parsing.derive import derive
from bobassistant.errors import InvalidPayload, InvalidPayloadLength
from bobassistant.parsing.fields import decode_fields
from bobassistant.parsing.model import DecodeResult
from bobassistant.parsing.observer import DecodeObserver, LoggingObserver


def normalize_payload(payload: Any) -> str:
    if not isinstance(payload, str):
        raise InvalidPayload(payload)
    cleaned = payload.strip()
    if not is_hex(cleaned):
        raise InvalidPayload(payload)
    return cleaned


class PayloadDecoder:
    """
    Decodes single payloads, reporting non-fatal anomalies to an observer.

    A decoder holds no state besides its observer and can be shared freely.
    """

    def __init__(self, observer: Optional[DecodeObserver] = None) -> None:
        self.observer = observer or LoggingObserver()

    def decode(self, payload: str) -> DecodeResult:
        payload = normalize_payload(payload)
        definition, variant = classify(read_signification(payload))
        if len(payload) != definition.payload_length:
            raise InvalidPayloadLength(len(payload), definition.payload_length, definition.name)

        primary = decode_fields(payload, definition.property_offsets, self.observer)
        properties = derive(primary, definition.kind, self.observer)
        return DecodeResult(sensor=variant.value, type=definition.name, msg=properties)


_default_decoder = PayloadDecoder()


def decode_payload(payload: str, observer: Optional[DecodeObserver] = None) -> DecodeResult:
    decoder = _default_decoder if observer is None else PayloadDecoder(observer)
    return decoder.decode(payload)
