"""Pressure readings from a single device and from a pair of devices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

Vector2 = Tuple[float, float]


@dataclass
class PressureSensorData:
    """The reading of one pressure sensor."""

    position: Vector2 = (0.0, 0.0)
    raw_value: int = 0
    scaled_value: float = 0.0
    normalized_value: float = 0.0
    weighted_value: float = 0.0

    def __str__(self) -> str:
        x, y = self.position
        return (
            f"Position: ({x:f}, {y:f}), RawValue: {int(self.raw_value)}, "
            f"ScaledValue: {self.scaled_value:f}, NormalizedValue: {self.normalized_value:f}, "
            f"WeightedValue: {self.weighted_value:f}"
        )


@dataclass
class PressureData:
    """All pressure sensor readings of one device with their aggregates."""

    sensors: List[PressureSensorData] = field(default_factory=list)
    scaled_sum: float = 0.0
    normalized_sum: float = 0.0
    center_of_pressure: Vector2 = (0.0, 0.0)
    normalized_center_of_pressure: Vector2 = (0.0, 0.0)


@dataclass
class DevicePairPressureData:
    """Pressure readings of a left and right device combined."""

    left_sensors: List[PressureSensorData] = field(default_factory=list)
    right_sensors: List[PressureSensorData] = field(default_factory=list)
    scaled_sum: float = 0.0
    normalized_sum: float = 0.0
    center_of_pressure: Vector2 = (0.0, 0.0)
    normalized_center_of_pressure: Vector2 = (0.0, 0.0)