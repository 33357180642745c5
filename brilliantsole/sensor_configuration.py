"""Per-sensor sampling rates for a device."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from .enums import SensorRate, SensorType

_MAX_RAW_SENSOR_RATE = 0xFFFF


def closest_sensor_rate(raw_sensor_rate: int) -> SensorRate:
    """Return the sensor rate nearest to an interval in milliseconds.

    Ties resolve to the shorter interval.
    """
    if not 0 <= raw_sensor_rate <= _MAX_RAW_SENSOR_RATE:
        raise ValueError(f"raw sensor rate out of range: {raw_sensor_rate}")
    return min(SensorRate, key=lambda rate: (abs(int(rate) - raw_sensor_rate), int(rate)))


class SensorConfiguration:
    """A mapping from sensor types to sampling rates."""

    def __init__(self, sensor_rates: Optional[Mapping[SensorType, SensorRate]] = None) -> None:
        self._rates: Dict[SensorType, SensorRate] = {}
        if sensor_rates:
            self.set_sensor_rates(sensor_rates)

    @property
    def sensor_rates(self) -> Dict[SensorType, SensorRate]:
        """A copy of the configured rates."""
        return dict(self._rates)

    @property
    def sensor_types(self) -> List[SensorType]:
        """The configured sensor types, in sensor type order."""
        return sorted(self._rates)

    def copy_from(self, other: "SensorConfiguration") -> None:
        """Replace this configuration's rates with those of ``other``."""
        self._rates = dict(other._rates)

    def clear(self) -> None:
        """Set the rate of every configured sensor to zero."""
        for sensor_type in self._rates:
            self._rates[sensor_type] = SensorRate.VALUE_0

    def get_sensor_rate(self, sensor_type: SensorType) -> Optional[SensorRate]:
        """Return the rate of a sensor, or None if it is not configured."""
        return self._rates.get(SensorType(sensor_type))

    def is_sensor_rate_non_zero(self, sensor_type: SensorType) -> bool:
        rate = self.get_sensor_rate(sensor_type)
        return rate is not None and rate != SensorRate.VALUE_0

    def set_sensor_rate(self, sensor_type: SensorType, sensor_rate: SensorRate) -> bool:
        """Set the rate of a sensor; return whether the configuration changed."""
        sensor_type = SensorType(sensor_type)
        sensor_rate = SensorRate(sensor_rate)
        if self._rates.get(sensor_type) is sensor_rate:
            return False
        self._rates[sensor_type] = sensor_rate
        return True

    def set_sensor_rates(self, sensor_rates: Mapping[SensorType, SensorRate]) -> None:
        for sensor_type, sensor_rate in sensor_rates.items():
            self.set_sensor_rate(sensor_type, sensor_rate)

    def clear_sensor_rate(self, sensor_type: SensorType) -> None:
        """Set the rate of a sensor to zero."""
        self.set_sensor_rate(sensor_type, SensorRate.VALUE_0)

    def toggle_sensor_rate(self, sensor_type: SensorType, sensor_rate: SensorRate) -> SensorRate:
        """Turn a sensor off if it is on, otherwise set it to ``sensor_rate``.

        Returns the rate now in effect.
        """
        new_rate = SensorRate.VALUE_0 if self.is_sensor_rate_non_zero(sensor_type) else SensorRate(sensor_rate)
        self.set_sensor_rate(sensor_type, new_rate)
        return new_rate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SensorConfiguration):
            return NotImplemented
        return self._rates == other._rates

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        parts = ", ".join(
            f"{sensor_type.display_name}: {rate.display_name}"
            for sensor_type, rate in sorted(self._rates.items())
        )
        return f"SensorConfiguration({parts})"

    def __repr__(self) -> str:
        return str(self)