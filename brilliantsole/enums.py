"""Enumerations shared across the device, sensor and vibration APIs."""

from __future__ import annotations

import enum


class LabeledEnum(enum.IntEnum):
    """Integer enumeration whose members carry a human-readable label."""

    def __new__(cls, value: int, label: str) -> "LabeledEnum":
        member = int.__new__(cls, value)
        member._value_ = value
        member._label = label
        return member

    @property
    def display_name(self) -> str:
        """The label shown to users for this member."""
        return self._label


class Activity(LabeledEnum):
    STILL = (0, "Still")
    WALKING = (1, "Walking")
    RUNNING = (2, "Running")
    BICYCLE = (3, "Bicycle")
    VEHICLE = (4, "Vehicle")
    TILTING = (5, "Tilting")


class ConnectionStatus(LabeledEnum):
    NOT_CONNECTED = (0, "Not Connected")
    CONNECTING = (1, "Connecting")
    CONNECTED = (2, "Connected")
    DISCONNECTING = (3, "Disconnecting")


class DeviceOrientation(LabeledEnum):
    PORTRAIT_UPRIGHT = (0, "Portrait Upright")
    LANDSCAPE_LEFT = (1, "Landscape Left")
    PORTRAIT_UPSIDE_DOWN = (2, "Portrait Upside Down")
    LANDSCAPE_RIGHT = (3, "Landscape Right")
    UNKNOWN = (4, "Unknown")


class DevicePairType(LabeledEnum):
    INSOLES = (0, "Insoles")
    GLOVES = (1, "Gloves")


class DeviceType(LabeledEnum):
    LEFT_INSOLE = (0, "Left Insole")
    RIGHT_INSOLE = (1, "Right Insole")
    LEFT_GLOVE = (2, "Left Glove")
    RIGHT_GLOVE = (3, "Right Glove")
    GLASSES = (4, "Glasses")
    GENERIC = (5, "Generic")


class FileTransferCommand(LabeledEnum):
    SEND = (0, "Send")
    RECEIVE = (1, "Receive")
    CANCEL = (2, "Cancel")


class FileTransferDirection(LabeledEnum):
    SENDING = (0, "Sending")
    RECEIVING = (1, "Receiving")


class FileTransferStatus(LabeledEnum):
    IDLE = (0, "Idle")
    SENDING = (1, "Sending")
    RECEIVING = (2, "Receiving")


class FileType(LabeledEnum):
    TFLITE = (0, "Tflite")
    WIFI_SERVER_CERT = (1, "Wifi Server Certificate")
    WIFI_SERVER_KEY = (2, "Wifi Server Key")


class SensorRate(LabeledEnum):
    """Sensor sampling interval; the value is the interval in milliseconds."""

    VALUE_0 = (0, "0ms")
    VALUE_5 = (5, "5ms")
    VALUE_10 = (10, "10ms")
    VALUE_20 = (20, "20ms")
    VALUE_40 = (40, "40ms")
    VALUE_60 = (60, "60ms")
    VALUE_80 = (80, "80ms")
    VALUE_100 = (100, "100ms")


class SensorType(LabeledEnum):
    PRESSURE = (0, "Pressure")
    ACCELERATION = (1, "Acceleration")
    GRAVITY = (2, "Gravity")
    LINEAR_ACCELERATION = (3, "Linear Acceleration")
    GYROSCOPE = (4, "Gyroscope")
    MAGNETOMETER = (5, "Magnetometer")
    GAME_ROTATION = (6, "Game Rotation")
    ROTATION = (7, "Rotation")
    ORIENTATION = (8, "Orientation")
    ACTIVITY = (9, "Activity")
    STEP_COUNT = (10, "Step Count")
    STEP_DETECTION = (11, "Step Detection")
    DEVICE_ORIENTATION = (12, "Device Orientation")
    TAP_DETECTOR = (13, "Tap Detector")
    BAROMETER = (14, "Barometer")
    CAMERA = (15, "Camera")
    MICROPHONE = (16, "Microphone")


class Side(LabeledEnum):
    LEFT = (0, "Left")
    RIGHT = (1, "Right")


class TfliteSensorTypeFlag(enum.IntFlag):
    """Bit flags selecting the sensors a model consumes."""

    NONE = 0
    PRESSURE = 1 << 0
    LINEAR_ACCELERATION = 1 << 1
    GYROSCOPE = 1 << 2
    MAGNETOMETER = 1 << 3


class TfliteTask(LabeledEnum):
    CLASSIFICATION = (0, "Classification")
    REGRESSION = (1, "Regression")


class VibrationLocation(LabeledEnum):
    FRONT = (0, "Front")
    REAR = (1, "Rear")


class VibrationLocationFlag(enum.IntFlag):
    """Bit flags selecting vibration motors."""

    NONE = 0
    FRONT = 1 << 0
    REAR = 1 << 1


class VibrationType(LabeledEnum):
    WAVEFORM_EFFECT = (0, "Waveform Effect")
    WAVEFORM = (1, "Waveform")


def raw_sensor_rate(sensor_rate: SensorRate) -> int:
    """Return the sampling interval of a sensor rate in milliseconds."""
    return int(SensorRate(sensor_rate))