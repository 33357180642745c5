"""Identification strings reported by a device, and device type helpers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Union

from .enums import DeviceType, Side

_INSOLE_TYPES = frozenset({DeviceType.LEFT_INSOLE, DeviceType.RIGHT_INSOLE})
_GLOVE_TYPES = frozenset({DeviceType.LEFT_GLOVE, DeviceType.RIGHT_GLOVE})
_LEFT_TYPES = frozenset({DeviceType.LEFT_INSOLE, DeviceType.LEFT_GLOVE})


@dataclass
class DeviceInformation:
    """Manufacturer, model and revision strings of a device."""

    manufacturer_name: str = ""
    model_number: str = ""
    serial_number: str = ""
    hardware_revision: str = ""
    firmware_revision: str = ""
    software_revision: str = ""

    def reset(self) -> None:
        """Forget every value."""
        for item in fields(self):
            setattr(self, item.name, "")

    def set_value(self, field: str, value: Union[bytes, bytearray, memoryview, str]) -> None:
        """Set one field from its raw UTF-8 bytes or text.

        ``field`` is the attribute name, such as ``"model_number"``.
        """
        names = {item.name for item in fields(self)}
        if field not in names:
            raise ValueError(f"unknown device information field {field!r}")
        text = value if isinstance(value, str) else bytes(value).decode("utf-8")
        setattr(self, field, text)

    @property
    def did_get_all_information(self) -> bool:
        """Whether every field has received a value."""
        return all(getattr(self, item.name) for item in fields(self))

    @property
    def is_ukaton(self) -> bool:
        """Whether the model number marks an Ukaton device."""
        return "Ukaton" in self.model_number


def is_insole_type(device_type: DeviceType) -> bool:
    return DeviceType(device_type) in _INSOLE_TYPES


def is_glove_type(device_type: DeviceType) -> bool:
    return DeviceType(device_type) in _GLOVE_TYPES


def side_for_device_type(device_type: DeviceType) -> Side:
    """Left for left insoles and gloves, right for every other type."""
    return Side.LEFT if DeviceType(device_type) in _LEFT_TYPES else Side.RIGHT