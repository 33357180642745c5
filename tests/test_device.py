import pytest

from brilliantsole.device import Device
from brilliantsole.enums import ConnectionStatus, DeviceType, SensorRate, SensorType, Side
from brilliantsole.sensor_configuration import SensorConfiguration


def _recorder(event):
    calls = []
    event.add(lambda *args: calls.append(args))
    return calls


def test_starts_not_connected():
    device = Device()
    assert device.connection_status is ConnectionStatus.NOT_CONNECTED
    assert device.is_connected is False


def test_connection_status_events():
    device = Device()
    statuses = _recorder(device.on_connection_status_update)
    connected = _recorder(device.on_is_connected_update)
    device.set_connection_status(ConnectionStatus.CONNECTING)
    device.set_connection_status(ConnectionStatus.CONNECTED)
    device.set_connection_status(ConnectionStatus.CONNECTED)
    assert device.is_connected is True
    assert statuses == [(device, ConnectionStatus.CONNECTING), (device, ConnectionStatus.CONNECTED)]
    assert connected == [(device, True)]
    device.set_connection_status(ConnectionStatus.DISCONNECTING)
    assert connected == [(device, True), (device, False)]


def test_battery_level_broadcasts_first_and_changed_values():
    device = Device()
    levels = _recorder(device.on_battery_level)
    device.set_battery_level(0)
    device.set_battery_level(0)
    device.set_battery_level(42)
    assert device.battery_level == 42
    assert levels == [(device, 0), (device, 42)]


def test_battery_level_out_of_range():
    with pytest.raises(ValueError):
        Device().set_battery_level(101)


@pytest.mark.parametrize(
    "device_type, insole, glove, side",
    [
        (DeviceType.LEFT_INSOLE, True, False, Side.LEFT),
        (DeviceType.RIGHT_INSOLE, True, False, Side.RIGHT),
        (DeviceType.LEFT_GLOVE, False, True, Side.LEFT),
        (DeviceType.RIGHT_GLOVE, False, True, Side.RIGHT),
        (DeviceType.GLASSES, False, False, Side.RIGHT),
    ],
)
def test_type_helpers(device_type, insole, glove, side):
    device = Device(device_type=device_type)
    assert (device.is_insole, device.is_glove, device.side) == (insole, glove, side)


def test_set_type_and_name_broadcast_changes():
    device = Device(name="left")
    types = _recorder(device.on_type)
    names = _recorder(device.on_name)
    device.set_type(DeviceType.RIGHT_GLOVE)
    device.set_type(DeviceType.RIGHT_GLOVE)
    device.set_name("right")
    device.set_name("right")
    assert device.type is DeviceType.RIGHT_GLOVE
    assert device.name == "right"
    assert types == [(device, DeviceType.RIGHT_GLOVE)]
    assert names == [(device, "right")]


def test_is_ukaton_follows_model_number():
    device = Device()
    assert device.is_ukaton is False
    device.device_information.set_value("model_number", b"Ukaton Insole")
    assert device.is_ukaton is True


def test_set_sensor_rate_reports_change():
    device = Device()
    configs = _recorder(device.on_sensor_configuration)
    assert device.set_sensor_rate(SensorType.PRESSURE, SensorRate.VALUE_20) is True
    assert device.set_sensor_rate(SensorType.PRESSURE, SensorRate.VALUE_20) is False
    assert device.get_sensor_rate(SensorType.PRESSURE) is SensorRate.VALUE_20
    assert len(configs) == 1
    assert configs[0][1].sensor_rates == {SensorType.PRESSURE: SensorRate.VALUE_20}


def test_sensor_configuration_is_a_copy():
    device = Device()
    device.set_sensor_rate(SensorType.GYROSCOPE, SensorRate.VALUE_10)
    copy = device.sensor_configuration
    copy.set_sensor_rate(SensorType.GYROSCOPE, SensorRate.VALUE_100)
    assert device.get_sensor_rate(SensorType.GYROSCOPE) is SensorRate.VALUE_10


def test_set_sensor_configuration_merges_or_clears_rest():
    device = Device()
    device.set_sensor_rates({SensorType.PRESSURE: SensorRate.VALUE_20, SensorType.GYROSCOPE: SensorRate.VALUE_40})
    new = SensorConfiguration({SensorType.ACCELERATION: SensorRate.VALUE_5})

    device.set_sensor_configuration(new)
    assert device.get_sensor_rate(SensorType.PRESSURE) is SensorRate.VALUE_20
    assert device.get_sensor_rate(SensorType.ACCELERATION) is SensorRate.VALUE_5

    device.set_sensor_configuration(new, clear_rest=True)
    assert device.sensor_configuration.sensor_rates == {
        SensorType.PRESSURE: SensorRate.VALUE_0,
        SensorType.GYROSCOPE: SensorRate.VALUE_0,
        SensorType.ACCELERATION: SensorRate.VALUE_5,
    }


def test_clear_sensor_configuration_and_rate():
    device = Device()
    device.set_sensor_rates({SensorType.PRESSURE: SensorRate.VALUE_20, SensorType.BAROMETER: SensorRate.VALUE_100})
    device.clear_sensor_rate(SensorType.PRESSURE)
    assert device.get_sensor_rate(SensorType.PRESSURE) is SensorRate.VALUE_0
    assert device.get_sensor_rate(SensorType.BAROMETER) is SensorRate.VALUE_100
    device.clear_sensor_configuration()
    assert all(rate is SensorRate.VALUE_0 for rate in device.sensor_configuration.sensor_rates.values())


def test_toggle_sensor_rate():
    device = Device()
    assert device.toggle_sensor_rate(SensorType.ROTATION, SensorRate.VALUE_40) is SensorRate.VALUE_40
    assert device.toggle_sensor_rate(SensorType.ROTATION, SensorRate.VALUE_40) is SensorRate.VALUE_0
    assert device.get_sensor_rate(SensorType.ROTATION) is SensorRate.VALUE_0


def test_remove_broadcasts_and_resets():
    device = Device()
    removed = _recorder(device.on_remove)
    device.set_connection_status(ConnectionStatus.CONNECTED)
    device.set_battery_level(50)
    device.set_sensor_rate(SensorType.PRESSURE, SensorRate.VALUE_20)
    device.remove()
    assert removed == [(device,)]
    assert device.connection_status is ConnectionStatus.NOT_CONNECTED
    assert device.battery_level == 0
    assert device.sensor_configuration.sensor_rates == {}


def test_invalid_connection_status_rejected():
    with pytest.raises(ValueError):
        Device().set_connection_status(99)