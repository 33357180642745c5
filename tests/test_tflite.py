import pytest

from brilliantsole.enums import SensorRate, SensorType, TfliteSensorTypeFlag, TfliteTask
from brilliantsole.tflite import TfliteConfiguration


def test_empty_bitmask_has_no_sensor_types():
    assert TfliteConfiguration().sensor_types == []


def test_selected_sensor_types():
    config = TfliteConfiguration(
        sensor_types_bitmask=TfliteSensorTypeFlag.PRESSURE | TfliteSensorTypeFlag.GYROSCOPE
    )
    assert config.sensor_types == [SensorType.PRESSURE, SensorType.GYROSCOPE]


def test_all_sensor_types_in_flag_order():
    mask = (
        TfliteSensorTypeFlag.MAGNETOMETER
        | TfliteSensorTypeFlag.GYROSCOPE
        | TfliteSensorTypeFlag.LINEAR_ACCELERATION
        | TfliteSensorTypeFlag.PRESSURE
    )
    assert TfliteConfiguration(sensor_types_bitmask=mask).sensor_types == [
        SensorType.PRESSURE,
        SensorType.LINEAR_ACCELERATION,
        SensorType.GYROSCOPE,
        SensorType.MAGNETOMETER,
    ]


def test_unknown_bits_ignored():
    config = TfliteConfiguration(sensor_types_bitmask=0xF0 | TfliteSensorTypeFlag.MAGNETOMETER)
    assert config.sensor_types == [SensorType.MAGNETOMETER]


def test_enum_fields_coerced():
    config = TfliteConfiguration(task=1, sample_rate=20)
    assert config.task is TfliteTask.REGRESSION
    assert config.sample_rate is SensorRate.VALUE_20


@pytest.mark.parametrize(
    "kwargs",
    [
        {"capture_delay": 5001},
        {"capture_delay": -1},
        {"threshold": 1.5},
        {"threshold": -0.1},
        {"sensor_types_bitmask": 256},
        {"sample_rate": 7},
    ],
)
def test_out_of_range_rejected(kwargs):
    with pytest.raises(ValueError):
        TfliteConfiguration(**kwargs)


def test_limits_accepted():
    config = TfliteConfiguration(capture_delay=5000, threshold=1.0)
    assert config.capture_delay == TfliteConfiguration.MAX_CAPTURE_DELAY
    assert config.threshold == 1.0