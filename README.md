# brilliantsole

A pure-Python library holding the data model for Brilliant Sole smart insoles
and gloves: enumerations, sensor configuration, vibration patterns, pressure
readings, machine-learning model settings and device information, together
with `Device` and `DevicePair` objects that keep state and tell listeners when
it changes.

It has no dependencies outside the standard library.

## Installation

```
pip install brilliantsole
```

To run the test suite:

```
pip install "brilliantsole[test]"
pytest
```

## Modules

- `brilliantsole.enums` – `ConnectionStatus`, `DeviceType`, `DevicePairType`,
  `Side`, `SensorType`, `SensorRate`, `Activity`, `DeviceOrientation`,
  `FileType`, `FileTransferCommand`, `FileTransferDirection`,
  `FileTransferStatus`, `TfliteTask`, `VibrationLocation`, `VibrationType`,
  and the bit flags `TfliteSensorTypeFlag` and `VibrationLocationFlag`.
  Most are `LabeledEnum`s, integer enums with a `display_name` property.
  `raw_sensor_rate` returns a `SensorRate` as its interval in milliseconds.
- `brilliantsole.events` – `Event`, a multicast callback list with `add`,
  `remove`, `clear` and `broadcast`. Adding the same callback twice has no
  effect; callbacks run in the order they were added.
- `brilliantsole.sensor_configuration` – `SensorConfiguration`, a map from
  sensor type to sample rate, and `closest_sensor_rate`, which snaps a raw
  millisecond value (0–65535) to the nearest supported rate, ties going to the
  shorter interval.
- `brilliantsole.waveform_effect` – `VibrationWaveformEffect`, the built-in
  haptic effects, numbered as the vibration driver numbers them.
- `brilliantsole.vibration` – `VibrationWaveformEffectSegment`,
  `VibrationWaveformSegment` and `VibrationConfiguration`. Their constructors
  check the limits (delays up to 1270 ms, durations up to 2550 ms, at most 8
  effect segments and 20 waveform segments, and so on) and raise `ValueError`
  when a value is out of range.
- `brilliantsole.pressure` – `PressureSensorData`, `PressureData` and
  `DevicePairPressureData`.
- `brilliantsole.discovered_device` – `DiscoveredDevice` and
  `parse_discovered_device`, which decodes a JSON scan result from bytes or
  text and raises `ValueError` for bad JSON or an unknown device type.
- `brilliantsole.tflite` – `TfliteConfiguration`, the settings of an
  on-device model; its `sensor_types` property decodes the sensor bitmask.
- `brilliantsole.device_information` – `DeviceInformation`, plus
  `is_insole_type`, `is_glove_type` and `side_for_device_type`.
- `brilliantsole.device` – `Device`, one insole or glove.
- `brilliantsole.device_pair` – `DevicePair`, a left and a right device
  treated as one.

## Examples

Sensor configuration:

```python
from brilliantsole.enums import SensorRate, SensorType
from brilliantsole.sensor_configuration import SensorConfiguration, closest_sensor_rate

config = SensorConfiguration()
config.set_sensor_rate(SensorType.PRESSURE, SensorRate.VALUE_20)    # returns True
config.toggle_sensor_rate(SensorType.GYROSCOPE, SensorRate.VALUE_40)  # returns VALUE_40

print([sensor_type.name for sensor_type in config.sensor_types])  # ['PRESSURE', 'GYROSCOPE']
print(closest_sensor_rate(33).name)                               # VALUE_40
```

Listening for changes on a device:

```python
from brilliantsole.device import Device
from brilliantsole.enums import ConnectionStatus

device = Device("left sole")
device.on_connection_status_update.add(
    lambda dev, status: print("status:", status.display_name)
)
device.set_connection_status(ConnectionStatus.CONNECTED)  # prints "status: Connected"
```

Every `Device` event passes the device first. Besides connection events a
device has `on_battery_level`, `on_name`, `on_type`, `on_sensor_configuration`,
`on_remove`, and sensor events such as `on_pressure`, `on_acceleration` or
`on_tflite_inference`, which your code broadcasts when readings arrive.

Pairing a left and a right insole:

```python
from brilliantsole.device import Device
from brilliantsole.device_pair import DevicePair
from brilliantsole.enums import DeviceType

left = Device("left", DeviceType.LEFT_INSOLE)
right = Device("right", DeviceType.RIGHT_INSOLE)

pair = DevicePair()
pair.add_device(left)
pair.add_device(right)
print(pair.has_all_devices)     # True
print(pair.is_fully_connected)  # False until both devices are connected
```

A pair forwards each device event as `on_device_...`, passing the pair, the
device's side and the device before the payload. Adding a glove to an insole
pair raises `ValueError`.

## What it does not do

This package does not talk to devices. It has no Bluetooth or other transport,
does not scan, does not encode or decode the devices' binary messages, and does
not carry out file transfers or send vibration patterns or model files. A
transport layer of your own feeds it the values it receives and acts on the
events it raises.