"""
Primary property extraction: raw bytes out of the payload, then a per-property
transform into engineering units.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from bobassistant.core.binary import byte_at, bytes_at, round_fixed
from bobassistant.domain import properties as p
from bobassistant.domain.messages import ByteIndexes
from bobassistant.domain.sensors import STATE_BY_CODE, SensorState
from bobassistant.errors import InvalidByteIndexConfiguration, InvalidSensorState
from bobassistant.parsing.observer import DecodeObserver

# Full scale of the 7-bit percentages and ratios sent by the sensor.
RATIO_FULL_SCALE = 127
REPORT_LENGTH_MINUTES_MAX = 59


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def read_raw(payload: str, indexes: ByteIndexes) -> int | list[int]:
    if isinstance(indexes, int) and not isinstance(indexes, bool):
        return byte_at(payload, indexes)
    if isinstance(indexes, (list, tuple)) and all(isinstance(i, int) and not isinstance(i, bool) for i in indexes):
        return bytes_at(payload, indexes)
    raise InvalidByteIndexConfiguration(indexes)


def vibration_level(raw: list[int]) -> float:
    high, low, hundredths = raw
    return round_fixed((high * 128 + low + hundredths / 100) / 10 / 121.45, 4)


def report_length(raw: int) -> int:
    # Minutes up to 59, whole hours (in minutes) above.
    return raw if raw <= REPORT_LENGTH_MINUTES_MAX else (raw - REPORT_LENGTH_MINUTES_MAX) * 60


def percentage(digits: int) -> Callable[[int], float]:
    def transform(raw: int) -> float:
        return round_fixed(raw * 100 / RATIO_FULL_SCALE, digits)
    return transform


def sensor_state(raw: int) -> SensorState:
    try:
        return STATE_BY_CODE[raw]
    except KeyError:
        raise InvalidSensorState(raw) from None


TRANSFORMS: Mapping[str, Callable[[Any], Any]] = {
    p.VIBRATION_LEVEL: vibration_level,
    p.PEAK_FREQUENCY_INDEX: lambda raw: raw + 1,
    p.TEMPERATURE: lambda raw: raw - 30,
    p.REPORT_LENGTH: report_length,
    p.ANOMALY_LEVEL: percentage(1),
    p.VIBRATION_PERCENTAGE: percentage(1),
    p.BATTERY_PERCENTAGE: percentage(2),
    p.STATE: sensor_state,
}


def decode_property(
    payload: str,
    name: str,
    indexes: ByteIndexes,
    observer: Optional[DecodeObserver] = None,
) -> Any:
    observer = observer or DecodeObserver()
    value = read_raw(payload, indexes)
    transform = TRANSFORMS.get(name)
    if transform is not None:
        try:
            value = transform(value)
        except InvalidSensorState as exc:
            observer.error("invalid_sensor_state", {"property": name, "value": exc.value})
            raise
    # Empty byte sequences are a value, as are zeros.
    if not value and not is_number(value) and not isinstance(value, (list, tuple)):
        observer.warning("empty_property_value", {"property": name, "value": value})
    return value


def decode_fields(
    payload: str,
    property_offsets: Mapping[str, ByteIndexes],
    observer: Optional[DecodeObserver] = None,
) -> dict[str, Any]:
    """
    Decode every property of a field table from the payload.

    Args:
        payload: The hexadecimal payload, already checked against the kind's length.
        property_offsets: Property name -> byte offset(s) for the message kind.
        observer: Receives non-fatal anomalies.

    Returns:
        A new dict with one entry per property, in field table order.
    """
    return {
        name: decode_property(payload, name, indexes, observer)
        for name, indexes in property_offsets.items()
    }
