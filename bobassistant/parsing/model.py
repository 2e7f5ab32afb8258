from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from bobassistant.domain.sensors import SensorState

STATUS_SUCCESS = "success"


@dataclass(frozen=True)
class DecodeResult:
    """
    A successfully decoded payload.

    Attributes:
        sensor: Name of the sensor variant, e.g. ``"MPU6500"``.
        type: Name of the message kind, e.g. ``"report"``.
        msg: Decoded properties, primary ones first then derived ones. Byte
            sequences such as ``fft`` are stored as tuples.
        code: Status code, always 200 for a decoded payload.
        status: Status text, always ``"success"``.
    """
    sensor: str
    type: str
    msg: Mapping[str, Any] = field(default_factory=dict)
    code: int = 200
    status: str = STATUS_SUCCESS

    def __post_init__(self) -> None:
        frozen = {name: _frozen(value) for name, value in self.msg.items()}
        object.__setattr__(self, "msg", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash((self.sensor, self.type, tuple(self.msg.items()), self.code, self.status))

    @property
    def properties(self) -> Mapping[str, Any]:
        return self.msg

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "status": self.status,
            "sensor": self.sensor,
            "type": self.type,
            "msg": {name: _plain(value) for name, value in self.msg.items()},
        }


def _frozen(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, SensorState):
        return int(value)
    if isinstance(value, (list, tuple)):
        return list(value)
    return value
