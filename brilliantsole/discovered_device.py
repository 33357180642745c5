"""Devices reported by a scan, decoded from their JSON description."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from .enums import DeviceType

_DEVICE_TYPES: Dict[str, DeviceType] = {
    "leftInsole": DeviceType.LEFT_INSOLE,
    "rightInsole": DeviceType.RIGHT_INSOLE,
    "glasses": DeviceType.GLASSES,
    "generic": DeviceType.GENERIC,
}


@dataclass
class DiscoveredDevice:
    """A device found while scanning."""

    bluetooth_id: str = ""
    name: str = ""
    device_type: DeviceType = DeviceType.LEFT_INSOLE
    rssi: int = 0


def _string_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def parse_discovered_device(message: Union[bytes, bytearray, memoryview, str]) -> DiscoveredDevice:
    """Decode a discovered device from its JSON text.

    Raises ValueError if the message is not a JSON object or names an
    unknown device type.
    """
    if isinstance(message, str):
        text = message
    else:
        try:
            text = bytes(message).decode("utf-8")
        except UnicodeDecodeError as error:
            raise ValueError("discovered device message is not valid UTF-8") from error

    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError("unable to convert discovered device message to JSON") from error
    if not isinstance(data, dict):
        raise ValueError("discovered device message must be a JSON object")

    name = _string_field(data, "name")
    bluetooth_id = _string_field(data, "bluetoothId")

    rssi = data.get("rssi", 0)
    if isinstance(rssi, bool) or not isinstance(rssi, (int, float)):
        raise ValueError("field 'rssi' must be a number")

    device_type_name = _string_field(data, "deviceType")
    try:
        device_type = _DEVICE_TYPES[device_type_name]
    except KeyError:
        raise ValueError(f"uncaught device type {device_type_name!r}") from None

    return DiscoveredDevice(
        bluetooth_id=bluetooth_id,
        name=name,
        device_type=device_type,
        rssi=int(rssi),
    )