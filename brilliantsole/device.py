"""A single device: its connection state, identity, sensors and events."""

from __future__ import annotations

from typing import Mapping, Optional

from .device_information import (
    DeviceInformation,
    is_glove_type,
    is_insole_type,
    side_for_device_type,
)
from .enums import ConnectionStatus, DeviceType, SensorRate, SensorType, Side
from .events import Event
from .sensor_configuration import SensorConfiguration

_MAX_BATTERY_LEVEL = 100


class Device:
    """State of one device, with events fired whenever that state changes.

    Every event passes the device itself as its first argument.
    """

    def __init__(self, name: str = "", device_type: DeviceType = DeviceType.LEFT_INSOLE) -> None:
        self._name = name
        self._type = DeviceType(device_type)
        self._connection_status = ConnectionStatus.NOT_CONNECTED
        self._battery_level = 0
        self._did_get_battery_level = False
        self._device_information = DeviceInformation()
        self._sensor_configuration = SensorConfiguration()

        self.on_remove = Event()
        self.on_battery_level = Event()
        self.on_connection_status_update = Event()
        self.on_is_connected_update = Event()
        self.on_name = Event()
        self.on_type = Event()
        self.on_sensor_configuration = Event()

        self.on_pressure = Event()
        self.on_acceleration = Event()
        self.on_gravity = Event()
        self.on_linear_acceleration = Event()
        self.on_gyroscope = Event()
        self.on_magnetometer = Event()
        self.on_game_rotation = Event()
        self.on_rotation = Event()
        self.on_orientation = Event()
        self.on_activity = Event()
        self.on_step_count = Event()
        self.on_step_detection = Event()
        self.on_device_orientation = Event()
        self.on_barometer = Event()
        self.on_tflite_inference = Event()

    # connection

    @property
    def connection_status(self) -> ConnectionStatus:
        return self._connection_status

    def set_connection_status(self, connection_status: ConnectionStatus) -> None:
        """Change the connection status and notify listeners if it changed."""
        connection_status = ConnectionStatus(connection_status)
        if connection_status is self._connection_status:
            return
        was_connected = self.is_connected
        self._connection_status = connection_status
        self.on_connection_status_update.broadcast(self, connection_status)
        if self.is_connected != was_connected:
            self.on_is_connected_update.broadcast(self, self.is_connected)

    @property
    def is_connected(self) -> bool:
        return self._connection_status is ConnectionStatus.CONNECTED

    # battery

    @property
    def battery_level(self) -> int:
        return self._battery_level

    def set_battery_level(self, battery_level: int) -> None:
        """Record a battery level in percent and notify listeners of a new value."""
        battery_level = int(battery_level)
        if not 0 <= battery_level <= _MAX_BATTERY_LEVEL:
            raise ValueError(f"battery level must be between 0 and {_MAX_BATTERY_LEVEL}, got {battery_level}")
        if self._did_get_battery_level and battery_level == self._battery_level:
            return
        self._did_get_battery_level = True
        self._battery_level = battery_level
        self.on_battery_level.broadcast(self, battery_level)

    # information

    @property
    def device_information(self) -> DeviceInformation:
        return self._device_information

    @property
    def is_ukaton(self) -> bool:
        return self._device_information.is_ukaton

    @property
    def type(self) -> DeviceType:
        return self._type

    def set_type(self, device_type: DeviceType) -> None:
        device_type = DeviceType(device_type)
        if device_type is self._type:
            return
        self._type = device_type
        self.on_type.broadcast(self, device_type)

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        if name == self._name:
            return
        self._name = name
        self.on_name.broadcast(self, name)

    @property
    def is_insole(self) -> bool:
        return is_insole_type(self._type)

    @property
    def is_glove(self) -> bool:
        return is_glove_type(self._type)

    @property
    def side(self) -> Side:
        return side_for_device_type(self._type)

    # sensor configuration

    @property
    def sensor_configuration(self) -> SensorConfiguration:
        """A copy of the current sensor configuration."""
        configuration = SensorConfiguration()
        configuration.copy_from(self._sensor_configuration)
        return configuration

    def _apply(self, configuration: SensorConfiguration) -> bool:
        if configuration == self._sensor_configuration:
            return False
        self._sensor_configuration.copy_from(configuration)
        self.on_sensor_configuration.broadcast(self, self.sensor_configuration)
        return True

    def set_sensor_configuration(self, configuration: SensorConfiguration, clear_rest: bool = False) -> None:
        """Apply the rates of ``configuration``.

        With ``clear_rest`` every sensor not named by ``configuration`` is turned off.
        """
        updated = self.sensor_configuration
        if clear_rest:
            updated.clear()
        updated.set_sensor_rates(configuration.sensor_rates)
        self._apply(updated)

    def clear_sensor_configuration(self) -> None:
        """Turn every configured sensor off."""
        updated = self.sensor_configuration
        updated.clear()
        self._apply(updated)

    def set_sensor_rate(self, sensor_type: SensorType, sensor_rate: SensorRate) -> bool:
        """Set one sensor's rate; return whether the configuration changed."""
        updated = self.sensor_configuration
        updated.set_sensor_rate(sensor_type, sensor_rate)
        return self._apply(updated)

    def set_sensor_rates(self, sensor_rates: Mapping[SensorType, SensorRate]) -> None:
        updated = self.sensor_configuration
        updated.set_sensor_rates(sensor_rates)
        self._apply(updated)

    def clear_sensor_rate(self, sensor_type: SensorType) -> None:
        updated = self.sensor_configuration
        updated.clear_sensor_rate(sensor_type)
        self._apply(updated)

    def toggle_sensor_rate(self, sensor_type: SensorType, sensor_rate: SensorRate) -> SensorRate:
        """Turn a sensor off if it is on, otherwise on at ``sensor_rate``; return the new rate."""
        updated = self.sensor_configuration
        new_rate = updated.toggle_sensor_rate(sensor_type, sensor_rate)
        self._apply(updated)
        return new_rate

    def get_sensor_rate(self, sensor_type: SensorType) -> Optional[SensorRate]:
        return self._sensor_configuration.get_sensor_rate(sensor_type)

    # lifetime

    def remove(self) -> None:
        """Notify listeners that the device is going away and forget its state."""
        self.on_remove.broadcast(self)
        self._connection_status = ConnectionStatus.NOT_CONNECTED
        self._battery_level = 0
        self._did_get_battery_level = False
        self._device_information.reset()
        self._sensor_configuration = SensorConfiguration()

    def __repr__(self) -> str:
        return f"Device(name={self._name!r}, type={self._type.name}, status={self._connection_status.name})"