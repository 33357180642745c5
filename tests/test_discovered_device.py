import json

import pytest

from brilliantsole.discovered_device import DiscoveredDevice, parse_discovered_device
from brilliantsole.enums import DeviceType


def _message(**fields):
    return json.dumps(fields).encode("utf-8")


@pytest.mark.parametrize(
    "type_name, expected",
    [
        ("leftInsole", DeviceType.LEFT_INSOLE),
        ("rightInsole", DeviceType.RIGHT_INSOLE),
        ("glasses", DeviceType.GLASSES),
        ("generic", DeviceType.GENERIC),
    ],
)
def test_device_types(type_name, expected):
    device = parse_discovered_device(
        _message(name="Sole", bluetoothId="test-id-1", rssi=-40, deviceType=type_name)
    )
    assert device.device_type is expected


def test_fields_round_trip():
    device = parse_discovered_device(
        _message(name="My Sole", bluetoothId="test-id-2", rssi=-70, deviceType="generic")
    )
    assert device == DiscoveredDevice(
        bluetooth_id="test-id-2", name="My Sole", device_type=DeviceType.GENERIC, rssi=-70
    )


def test_accepts_text():
    text = json.dumps({"name": "A", "bluetoothId": "test-id-3", "rssi": -1, "deviceType": "glasses"})
    assert parse_discovered_device(text).name == "A"


def test_unknown_device_type_rejected():
    with pytest.raises(ValueError):
        parse_discovered_device(_message(name="G", bluetoothId="x", rssi=0, deviceType="leftGlove"))


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        parse_discovered_device(b"{not json")


def test_non_object_rejected():
    with pytest.raises(ValueError):
        parse_discovered_device(b"[1, 2, 3]")


def test_bad_rssi_rejected():
    with pytest.raises(ValueError):
        parse_discovered_device(_message(name="A", bluetoothId="x", rssi="loud", deviceType="generic"))