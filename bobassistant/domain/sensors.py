"""
Accelerometer hardware variants and sensor states reported by BoB Assistant.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class SamplingFrequencies:
    """
    Accelerometer sampling frequencies of a sensor variant.

    Attributes:
        low_hz: Sampling frequency of the low-frequency acquisition, in Hz.
        high_hz: Sampling frequency of the high-frequency acquisition, in Hz.
    """
    low_hz: int
    high_hz: int


class SensorVariant(str, Enum):
    """Accelerometer fitted in the sensor, told apart by the leading payload byte."""
    MPU6500 = "MPU6500"
    KX = "KX"

    @property
    def sampling(self) -> SamplingFrequencies:
        return _SAMPLING[self]


_SAMPLING: dict[SensorVariant, SamplingFrequencies] = {
    SensorVariant.MPU6500: SamplingFrequencies(low_hz=1000, high_hz=1000),
    SensorVariant.KX: SamplingFrequencies(low_hz=800, high_hz=25600),
}


class SensorState(IntEnum):
    """Sensor or machine state carried by start/stop messages."""
    SENSOR_START = 0
    SENSOR_STOP = 1
    MACHINE_START = 2
    MACHINE_STOP = 3
    SENSOR_STOP_WITH_ERASE = 4
    SENSOR_STOP_NO_VIB = 5
    SENSOR_START_NO_VIB = 6
    SENSOR_LEARN_KEEPALIVE = 7


# Raw state byte -> state.
STATE_BY_CODE: dict[int, SensorState] = {
    100: SensorState.SENSOR_START,
    101: SensorState.SENSOR_STOP,
    104: SensorState.SENSOR_START_NO_VIB,
    105: SensorState.SENSOR_STOP_NO_VIB,
    106: SensorState.SENSOR_LEARN_KEEPALIVE,
    110: SensorState.SENSOR_STOP_WITH_ERASE,
    125: SensorState.MACHINE_STOP,
    126: SensorState.MACHINE_START,
}
