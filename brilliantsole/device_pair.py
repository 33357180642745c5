"""A left and right device treated as one unit, with their events merged."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .device import Device
from .enums import DevicePairType, SensorRate, SensorType, Side
from .events import Event
from .sensor_configuration import SensorConfiguration

# Device events forwarded by the pair as (pair, side, device, *payload).
_FORWARDED_EVENTS: Tuple[Tuple[str, str], ...] = (
    ("on_connection_status_update", "on_device_connection_status_update"),
    ("on_sensor_configuration", "on_device_sensor_configuration"),
    ("on_acceleration", "on_device_acceleration"),
    ("on_gravity", "on_device_gravity"),
    ("on_linear_acceleration", "on_device_linear_acceleration"),
    ("on_gyroscope", "on_device_gyroscope"),
    ("on_magnetometer", "on_device_magnetometer"),
    ("on_game_rotation", "on_device_game_rotation"),
    ("on_rotation", "on_device_rotation"),
    ("on_orientation", "on_device_orientation"),
    ("on_activity", "on_device_activity"),
    ("on_step_count", "on_device_step_count"),
    ("on_step_detection", "on_device_step_detection"),
    ("on_device_orientation", "on_device_device_orientation"),
    ("on_barometer", "on_device_barometer"),
    ("on_pressure", "on_device_pressure"),
    ("on_tflite_inference", "on_device_tflite_inference"),
)


class DevicePair:
    """Two devices of the same kind, one per side.

    Events forwarded from a device pass the pair, the device's side and the
    device before the device's own payload.
    """

    def __init__(self, pair_type: DevicePairType = DevicePairType.INSOLES) -> None:
        self.type = DevicePairType(pair_type)
        self._is_singleton = False
        self._devices: Dict[Side, Device] = {}
        self._listeners: Dict[int, List[Tuple[Event, Callable[..., Any]]]] = {}
        self._has_all_devices = False
        self._is_fully_connected = False

        self.on_is_singleton_update = Event()
        self.on_is_fully_connected_updated = Event()
        self.on_device_is_connected_update = Event()
        for _, pair_event in _FORWARDED_EVENTS:
            setattr(self, pair_event, Event())

    # type

    def set_type(self, new_type: DevicePairType) -> None:
        """Change the kind of device this pair holds, dropping devices that no longer fit."""
        new_type = DevicePairType(new_type)
        if new_type is self.type:
            return
        self.type = new_type
        for device in list(self._devices.values()):
            if not self._fits(device):
                self.remove_device(device)

    # singleton

    @property
    def is_singleton(self) -> bool:
        return self._is_singleton

    def set_is_singleton(self, is_singleton: bool) -> None:
        is_singleton = bool(is_singleton)
        if is_singleton == self._is_singleton:
            return
        self._is_singleton = is_singleton
        self.on_is_singleton_update.broadcast(self, is_singleton)

    # devices

    @property
    def devices(self) -> Dict[Side, Device]:
        """A copy of the devices held, keyed by side."""
        return dict(self._devices)

    def device(self, side: Side) -> Optional[Device]:
        return self._devices.get(Side(side))

    def _fits(self, device: Device) -> bool:
        if self.type is DevicePairType.INSOLES:
            return device.is_insole
        return device.is_glove

    def add_device(self, device: Device) -> None:
        """Place a device on its side, replacing any device already there.

        Raises ValueError if the device's type does not suit this pair.
        """
        if not self._fits(device):
            raise ValueError(
                f"a {device.type.display_name} cannot join a {self.type.display_name} pair"
            )
        side = device.side
        current = self._devices.get(side)
        if current is device:
            return
        if current is not None:
            self._detach(current)
        self._devices[side] = device
        self._attach(device)
        self._update_has_all_devices()
        self._update_is_fully_connected()

    def remove_device_by_side(self, side: Side) -> None:
        device = self._devices.get(Side(side))
        if device is not None:
            self.remove_device(device)

    def remove_device(self, device: Device) -> None:
        """Forget a device; devices not in the pair are ignored."""
        for side, held in list(self._devices.items()):
            if held is device:
                del self._devices[side]
                self._detach(device)
                self._update_has_all_devices()
                self._update_is_fully_connected()
                return

    def remove_devices(self) -> None:
        for device in list(self._devices.values()):
            self.remove_device(device)

    @property
    def has_all_devices(self) -> bool:
        return self._has_all_devices

    def _update_has_all_devices(self) -> None:
        self._has_all_devices = all(side in self._devices for side in Side)

    # connection

    @property
    def is_fully_connected(self) -> bool:
        return self._is_fully_connected

    def _update_is_fully_connected(self) -> None:
        fully_connected = self._has_all_devices and all(
            device.is_connected for device in self._devices.values()
        )
        if fully_connected == self._is_fully_connected:
            return
        self._is_fully_connected = fully_connected
        self.on_is_fully_connected_updated.broadcast(self, fully_connected)

    def _on_device_is_connected(self, device: Device, is_connected: bool) -> None:
        self.on_device_is_connected_update.broadcast(self, device.side, device, is_connected)
        self._update_is_fully_connected()

    # listeners

    def _forwarder(self, pair_event: Event) -> Callable[..., None]:
        def forward(device: Device, *payload: Any) -> None:
            pair_event.broadcast(self, device.side, device, *payload)

        return forward

    def _attach(self, device: Device) -> None:
        listeners: List[Tuple[Event, Callable[..., Any]]] = [
            (getattr(device, device_event), self._forwarder(getattr(self, pair_event)))
            for device_event, pair_event in _FORWARDED_EVENTS
        ]
        listeners.append((device.on_is_connected_update, self._on_device_is_connected))
        listeners.append((device.on_remove, self.remove_device))
        for event, callback in listeners:
            event.add(callback)
        self._listeners[id(device)] = listeners

    def _detach(self, device: Device) -> None:
        for event, callback in self._listeners.pop(id(device), []):
            event.remove(callback)

    # sensor configuration

    def set_sensor_configuration(self, configuration: SensorConfiguration, clear_rest: bool = False) -> None:
        for device in list(self._devices.values()):
            device.set_sensor_configuration(configuration, clear_rest)

    def clear_sensor_configuration(self) -> None:
        for device in list(self._devices.values()):
            device.clear_sensor_configuration()

    def set_sensor_rate(self, sensor_type: SensorType, sensor_rate: SensorRate) -> bool:
        """Set one sensor's rate on every device; return whether any device changed."""
        updated = False
        for device in list(self._devices.values()):
            updated = device.set_sensor_rate(sensor_type, sensor_rate) or updated
        return updated

    def set_sensor_rates(self, sensor_rates: Mapping[SensorType, SensorRate]) -> None:
        for device in list(self._devices.values()):
            device.set_sensor_rates(sensor_rates)

    def clear_sensor_rate(self, sensor_type: SensorType) -> None:
        for device in list(self._devices.values()):
            device.clear_sensor_rate(sensor_type)

    def __repr__(self) -> str:
        sides = ", ".join(side.name for side in sorted(self._devices))
        return f"DevicePair(type={self.type.name}, devices=[{sides}])"