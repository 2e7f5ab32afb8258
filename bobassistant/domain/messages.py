"""
Static layouts of the four BoB Assistant message kinds.

Every message starts with a signification byte identifying both the message
kind and the accelerometer variant of the sensor that sent it. The rest of
the payload is a fixed layout: each property lives at one byte offset, or at
an ordered list of offsets for multi-byte properties.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from bobassistant.core.binary import BYTE_HEX_LENGTH
from bobassistant.domain import properties as p
from bobassistant.domain.sensors import SensorVariant
from bobassistant.errors import InvalidByteIndexConfiguration

ByteIndexes = Union[int, tuple[int, ...]]

SIGNIFICATION_BYTE_IDX = 0
FFT_BYTE_IDX: tuple[int, ...] = tuple(range(8, 39 + 1))  # 32 bins


class MessageKind(str, Enum):
    LEARNING = "learning"
    REPORT = "report"
    ALARM = "alarm"
    STARTSTOP = "startstop"

    @property
    def definition(self) -> "MessageKindDefinition":
        return KIND_DEFINITIONS[self]


@dataclass(frozen=True)
class MessageKindDefinition:
    """
    Layout of a single message kind.

    Attributes:
        kind: The message kind this layout describes.
        payload_length: Exact payload length, in hex characters.
        signification: The character the signification byte stands for.
        classification_values: Signification byte value per sensor variant.
        property_offsets: Property name -> byte offset(s), in decoding order.
    """
    kind: MessageKind
    payload_length: int
    signification: str
    classification_values: Mapping[SensorVariant, int]
    property_offsets: Mapping[str, ByteIndexes]

    def __post_init__(self) -> None:
        object.__setattr__(self, "classification_values", MappingProxyType(dict(self.classification_values)))
        object.__setattr__(self, "property_offsets", MappingProxyType(dict(self.property_offsets)))
        self.validate()

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def byte_length(self) -> int:
        return self.payload_length // BYTE_HEX_LENGTH

    def validate(self) -> None:
        if self.payload_length <= 0 or self.payload_length % BYTE_HEX_LENGTH:
            raise ValueError(f"{self.name}: payload length must be a positive even number")
        if set(self.classification_values) != set(SensorVariant):
            raise ValueError(f"{self.name}: a classification value is required for every sensor variant")
        for name, indexes in self.property_offsets.items():
            offsets = (indexes,) if isinstance(indexes, int) else indexes
            if not isinstance(offsets, (list, tuple)) or not offsets:
                raise InvalidByteIndexConfiguration(indexes)
            for offset in offsets:
                if not isinstance(offset, int) or isinstance(offset, bool):
                    raise InvalidByteIndexConfiguration(indexes)
                if offset <= SIGNIFICATION_BYTE_IDX or offset >= self.byte_length:
                    raise ValueError(f"{self.name}: offset {offset} of '{name}' is outside the payload")

    def accepts(self, signification: int) -> bool:
        return signification in self.classification_values.values()


LEARNING = MessageKindDefinition(
    kind=MessageKind.LEARNING,
    payload_length=80,
    signification="L",
    classification_values={SensorVariant.MPU6500: 76, SensorVariant.KX: 108},
    property_offsets={
        p.LEARNING_PERCENTAGE: 1,
        p.VIBRATION_LEVEL: (2, 3, 4),
        p.PEAK_FREQUENCY_INDEX: 5,
        p.TEMPERATURE: 6,
        p.LEARNING_FROM_SCRATCH: 7,
        p.FFT: FFT_BYTE_IDX,
    },
)

REPORT = MessageKindDefinition(
    kind=MessageKind.REPORT,
    payload_length=54,
    signification="R",
    classification_values={SensorVariant.MPU6500: 82, SensorVariant.KX: 114},
    property_offsets={
        p.ANOMALY_LEVEL: 1,
        p.VIBRATION_PERCENTAGE: 2,
        p.GOOD_VIBRATION: 3,
        p.NB_ALARM_REPORT: 4,
        p.TEMPERATURE: 5,
        p.REPORT_LENGTH: 6,
        p.REPORT_ID: 7,
        p.VIBRATION_LEVEL: (8, 9, 10),
        p.PEAK_FREQUENCY_INDEX: 11,
        p.BAD_VIBRATION_PERCENTAGE_10_20: 12,
        p.BAD_VIBRATION_PERCENTAGE_20_40: 13,
        p.BAD_VIBRATION_PERCENTAGE_40_60: 14,
        p.BAD_VIBRATION_PERCENTAGE_60_80: 15,
        p.BAD_VIBRATION_PERCENTAGE_80_100: 16,
        p.BATTERY_PERCENTAGE: 17,
        p.ANOMALY_LEVEL_TO_20_LAST_24H: 18,
        p.ANOMALY_LEVEL_TO_50_LAST_24H: 19,
        p.ANOMALY_LEVEL_TO_80_LAST_24H: 20,
        p.ANOMALY_LEVEL_TO_20_LAST_30D: 21,
        p.ANOMALY_LEVEL_TO_50_LAST_30D: 22,
        p.ANOMALY_LEVEL_TO_80_LAST_30D: 23,
        p.ANOMALY_LEVEL_TO_20_LAST_6MO: 24,
        p.ANOMALY_LEVEL_TO_50_LAST_6MO: 25,
        p.ANOMALY_LEVEL_TO_80_LAST_6MO: 26,
    },
)

ALARM = MessageKindDefinition(
    kind=MessageKind.ALARM,
    payload_length=80,
    signification="A",
    classification_values={SensorVariant.MPU6500: 65, SensorVariant.KX: 97},
    property_offsets={
        p.ANOMALY_LEVEL: 1,
        p.TEMPERATURE: 2,
        # byte 3 unused
        p.VIBRATION_LEVEL: (4, 5, 6),
        # byte 7 unused
        p.FFT: FFT_BYTE_IDX,
    },
)

# Both variants announce start/stop with the same header byte.
STARTSTOP = MessageKindDefinition(
    kind=MessageKind.STARTSTOP,
    payload_length=6,
    signification="Header",
    classification_values={SensorVariant.MPU6500: 83, SensorVariant.KX: 83},
    property_offsets={
        p.STATE: 1,
        p.BATTERY_PERCENTAGE: 2,
    },
)

KIND_DEFINITIONS: Mapping[MessageKind, MessageKindDefinition] = MappingProxyType({
    definition.kind: definition for definition in (LEARNING, REPORT, ALARM, STARTSTOP)
})


def validate_classification(definitions: Mapping[MessageKind, MessageKindDefinition]) -> None:
    """Ensure no signification byte is shared by two message kinds."""
    owner: dict[int, MessageKind] = {}
    for kind, definition in definitions.items():
        for value in set(definition.classification_values.values()):
            if value in owner:
                raise ValueError(
                    f"Signification {value} is claimed by both {owner[value].value} and {kind.value}"
                )
            owner[value] = kind


validate_classification(KIND_DEFINITIONS)
