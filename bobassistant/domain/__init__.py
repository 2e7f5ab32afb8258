"""
This package defines the static domain of the BoB Assistant sensor: its
accelerometer variants, the states it reports and the layout of each message
kind it emits.
"""
from bobassistant.domain.messages import KIND_DEFINITIONS, MessageKind, MessageKindDefinition
from bobassistant.domain.sensors import SamplingFrequencies, SensorState, SensorVariant

__all__ = [
    "KIND_DEFINITIONS",
    "MessageKind",
    "MessageKindDefinition",
    "SamplingFrequencies",
    "SensorState",
    "SensorVariant",
]
