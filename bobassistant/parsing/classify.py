from __future__ import annotations

from typing import Mapping, Optional

from bobassistant.core.binary import byte_at
from bobassistant.domain.messages import KIND_DEFINITIONS, SIGNIFICATION_BYTE_IDX, MessageKind, MessageKindDefinition
from bobassistant.domain.sensors import SensorVariant
from bobassistant.errors import UnknownMessageKind, UnknownSensorVariant


def read_signification(payload: str) -> int:
    return byte_at(payload, SIGNIFICATION_BYTE_IDX)


def classify(
    signification: int,
    definitions: Optional[Mapping[MessageKind, MessageKindDefinition]] = None,
) -> tuple[MessageKindDefinition, SensorVariant]:
    """
    Resolve the message kind and sensor variant announced by a signification byte.

    The kind is matched first; the variant is then looked up within that
    kind's classification values, in ``SensorVariant`` declaration order.

    Raises:
        UnknownMessageKind: No kind claims the value.
        UnknownSensorVariant: A kind claims the value but no variant does.
    """
    definitions = KIND_DEFINITIONS if definitions is None else definitions
    definition = _find_definition(signification, definitions)
    return definition, _find_variant(signification, definition)


def _find_definition(
    signification: int,
    definitions: Mapping[MessageKind, MessageKindDefinition],
) -> MessageKindDefinition:
    for definition in definitions.values():
        if definition.accepts(signification):
            return definition
    raise UnknownMessageKind(signification)


def _find_variant(signification: int, definition: MessageKindDefinition) -> SensorVariant:
    for variant in SensorVariant:
        if definition.classification_values.get(variant) == signification:
            return variant
    raise UnknownSensorVariant(signification)
