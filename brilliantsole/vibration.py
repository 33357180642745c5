"""Vibration waveform segments and the configurations that combine them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, List

from .enums import VibrationLocation, VibrationLocationFlag, VibrationType
from .waveform_effect import VibrationWaveformEffect


class VibrationWaveformEffectSegmentType(enum.Enum):
    EFFECT = 0
    DELAY = 1


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass
class VibrationWaveformEffectSegment:
    """One step of an effect sequence: either a built-in effect or a pause."""

    MAX_DELAY: ClassVar[int] = 1270
    MAX_LOOP_COUNT: ClassVar[int] = 3

    type: VibrationWaveformEffectSegmentType = VibrationWaveformEffectSegmentType.EFFECT
    effect: VibrationWaveformEffect = VibrationWaveformEffect.NONE
    delay: int = 0
    loop_count: int = 0

    def __post_init__(self) -> None:
        self.type = VibrationWaveformEffectSegmentType(self.type)
        self.effect = VibrationWaveformEffect(self.effect)
        _check_range("delay", self.delay, 0, self.MAX_DELAY)
        _check_range("loop_count", self.loop_count, 0, self.MAX_LOOP_COUNT)


@dataclass
class VibrationWaveformSegment:
    """One step of a custom waveform: an amplitude held for a duration."""

    MAX_DURATION: ClassVar[int] = 2550

    amplitude: float = 0.0
    duration: int = 0

    def __post_init__(self) -> None:
        _check_range("amplitude", self.amplitude, 0.0, 1.0)
        _check_range("duration", self.duration, 0, self.MAX_DURATION)


_LOCATION_FLAGS = (
    (VibrationLocationFlag.FRONT, VibrationLocation.FRONT),
    (VibrationLocationFlag.REAR, VibrationLocation.REAR),
)


@dataclass
class VibrationConfiguration:
    """What to vibrate, where, and how."""

    MAX_WAVEFORM_EFFECT_SEGMENTS: ClassVar[int] = 8
    MAX_WAVEFORM_EFFECT_SEQUENCE_LOOP_COUNT: ClassVar[int] = 6
    MAX_WAVEFORM_SEGMENTS: ClassVar[int] = 20

    vibration_type: VibrationType = VibrationType.WAVEFORM_EFFECT
    vibration_locations_bitmask: int = 0
    waveform_effect_sequence: List[VibrationWaveformEffectSegment] = field(default_factory=list)
    waveform_effect_sequence_loop_count: int = 0
    waveform_sequence: List[VibrationWaveformSegment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vibration_type = VibrationType(self.vibration_type)
        _check_range("vibration_locations_bitmask", int(self.vibration_locations_bitmask), 0, 0xFF)
        _check_range(
            "waveform_effect_sequence_loop_count",
            self.waveform_effect_sequence_loop_count,
            0,
            self.MAX_WAVEFORM_EFFECT_SEQUENCE_LOOP_COUNT,
        )
        if len(self.waveform_effect_sequence) > self.MAX_WAVEFORM_EFFECT_SEGMENTS:
            raise ValueError(
                f"at most {self.MAX_WAVEFORM_EFFECT_SEGMENTS} waveform effect segments are allowed"
            )
        if len(self.waveform_sequence) > self.MAX_WAVEFORM_SEGMENTS:
            raise ValueError(f"at most {self.MAX_WAVEFORM_SEGMENTS} waveform segments are allowed")

    @property
    def vibration_locations(self) -> List[VibrationLocation]:
        """The motor locations selected by the bitmask, front first."""
        mask = int(self.vibration_locations_bitmask)
        return [location for flag, location in _LOCATION_FLAGS if mask & flag]