"""Configuration of an on-device machine learning model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from .enums import SensorRate, SensorType, TfliteSensorTypeFlag, TfliteTask

_FLAG_SENSOR_TYPES = (
    (TfliteSensorTypeFlag.PRESSURE, SensorType.PRESSURE),
    (TfliteSensorTypeFlag.LINEAR_ACCELERATION, SensorType.LINEAR_ACCELERATION),
    (TfliteSensorTypeFlag.GYROSCOPE, SensorType.GYROSCOPE),
    (TfliteSensorTypeFlag.MAGNETOMETER, SensorType.MAGNETOMETER),
)


@dataclass
class TfliteConfiguration:
    """Name, task, sampling and thresholds of a model sent to a device."""

    MAX_CAPTURE_DELAY: ClassVar[int] = 5000

    name: str = ""
    task: TfliteTask = TfliteTask.CLASSIFICATION
    sample_rate: SensorRate = SensorRate.VALUE_0
    sensor_types_bitmask: int = 0
    capture_delay: int = 0
    threshold: float = 0.0

    def __post_init__(self) -> None:
        self.task = TfliteTask(self.task)
        self.sample_rate = SensorRate(self.sample_rate)
        if not 0 <= int(self.sensor_types_bitmask) <= 0xFF:
            raise ValueError(f"sensor_types_bitmask out of range: {self.sensor_types_bitmask}")
        if not 0 <= self.capture_delay <= self.MAX_CAPTURE_DELAY:
            raise ValueError(
                f"capture_delay must be between 0 and {self.MAX_CAPTURE_DELAY}, got {self.capture_delay}"
            )
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {self.threshold}")

    @property
    def sensor_types(self) -> List[SensorType]:
        """The sensor types selected by the bitmask, in flag order."""
        mask = int(self.sensor_types_bitmask)
        return [sensor_type for flag, sensor_type in _FLAG_SENSOR_TYPES if mask & flag]