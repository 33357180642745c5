"""Built-in haptic waveform effects of the vibration driver."""

from __future__ import annotations

from .enums import LabeledEnum


class VibrationWaveformEffect(LabeledEnum):
    """A predefined vibration effect; the value is the driver's effect index."""

    NONE = (0, "None")

    STRONG_CLICK_100 = (1, "Strong Click - 100%")
    STRONG_CLICK_60 = (2, "Strong Click - 60%")
    STRONG_CLICK_30 = (3, "Strong Click - 30%")

    SHARP_CLICK_100 = (4, "Sharp Click - 100%")
    SHARP_CLICK_60 = (5, "Sharp Click - 60%")
    SHARP_CLICK_30 = (6, "Sharp Click - 30%")

    SOFT_BUMP_100 = (7, "Soft Bump - 100%")
    SOFT_BUMP_60 = (8, "Soft Bump - 60%")
    SOFT_BUMP_30 = (9, "Soft Bump - 30%")

    DOUBLE_CLICK_100 = (10, "Double Click - 100%")
    DOUBLE_CLICK_60 = (11, "Double Click - 60%")

    TRIPLE_CLICK_100 = (12, "Triple Click - 100%")

    SOFT_FUZZ_60 = (13, "Soft Fuzz - 60%")

    STRONG_BUZZ_100 = (14, "Strong Buzz - 100%")

    ALERT_750MS = (15, "750 ms Alert - 100%")
    ALERT_1000MS = (16, "1000 ms Alert - 100%")

    STRONG_CLICK_1_100 = (17, "Strong Click 1 100%")
    STRONG_CLICK_2_80 = (18, "Strong Click 2 - 80%")
    STRONG_CLICK_3_60 = (19, "Strong Click 3 - 60%")
    STRONG_CLICK_4_30 = (20, "Strong Click 4 - 30%")

    MEDIUM_CLICK_100 = (21, "Medium Click 1 - 100%")
    MEDIUM_CLICK_80 = (22, "Medium Click 2 - 80%")
    MEDIUM_CLICK_60 = (23, "Medium Click 3 - 60%")

    SHARP_TICK_100 = (24, "Sharp Tick 1 - 100%")
    SHARP_TICK_80 = (25, "Sharp Tick 2 - 80%")
    SHARP_TICK_60 = (26, "Sharp Tick 3 - 60%")

    SHORT_DOUBLE_CLICK_STRONG_100 = (27, "Short Double Click Strong 1 - 100%")
    SHORT_DOUBLE_CLICK_STRONG_80 = (28, "Short Double Click Strong 2 - 80%")
    SHORT_DOUBLE_CLICK_STRONG_60 = (29, "Short Double Click Strong 3 - 60%")
    SHORT_DOUBLE_CLICK_STRONG_30 = (30, "Short Double Click Strong 4 - 30%")

    SHORT_DOUBLE_CLICK_MEDIUM_100 = (31, "Short Double Click Medium 1 - 100%")
    SHORT_DOUBLE_CLICK_MEDIUM_80 = (32, "Short Double Click Medium 2 - 80%")
    SHORT_DOUBLE_CLICK_MEDIUM_60 = (33, "Short Double Click Medium 3 - 60%")

    SHORT_DOUBLE_SHARP_TICK_100 = (34, "Short Double Sharp Tick 1 - 100%")
    SHORT_DOUBLE_SHARP_TICK_80 = (35, "Short Double Sharp Tick 2 - 80%")
    SHORT_DOUBLE_SHARP_TICK_60 = (36, "Short Double Sharp Tick 3 - 60%")

    LONG_DOUBLE_SHARP_CLICK_STRONG_100 = (37, "Long Double Sharp Click Strong 1 - 100%")
    LONG_DOUBLE_SHARP_CLICK_STRONG_80 = (38, "Long Double Sharp Click Strong 2 - 80%")
    LONG_DOUBLE_SHARP_CLICK_STRONG_60 = (39, "Long Double Sharp Click Strong 3 - 60%")
    LONG_DOUBLE_SHARP_CLICK_STRONG_30 = (40, "Long Double Sharp Click Strong 4 - 30%")

    LONG_DOUBLE_SHARP_CLICK_MEDIUM_100 = (41, "Long Double Sharp Click Medium 1 - 100%")
    LONG_DOUBLE_SHARP_CLICK_MEDIUM_80 = (42, "Long Double Sharp Click Medium 2 - 80%")
    LONG_DOUBLE_SHARP_CLICK_MEDIUM_60 = (43, "Long Double Sharp Click Medium 3 - 60%")

    LONG_DOUBLE_SHARP_TICK_100 = (44, "Long Double Sharp Tick 1 - 100%")
    LONG_DOUBLE_SHARP_TICK_80 = (45, "Long Double Sharp Tick 2 - 80%")
    LONG_DOUBLE_SHARP_TICK_60 = (46, "Long Double Sharp Tick 3 - 60%")

    BUZZ_100 = (47, "Buzz 1 - 100%")
    BUZZ_80 = (48, "Buzz 2 - 80%")
    BUZZ_60 = (49, "Buzz 3 - 60%")
    BUZZ_40 = (50, "Buzz 4 - 40%")
    BUZZ_20 = (51, "Buzz 5 - 20%")

    PULSING_STRONG_100 = (52, "Pulsing Strong 1 - 100%")
    PULSING_STRONG_60 = (53, "Pulsing Strong 2 - 60%")

    PULSING_MEDIUM_100 = (54, "Pulsing Medium 1 - 100%")
    PULSING_MEDIUM_60 = (55, "Pulsing Medium 2 - 60%")

    PULSING_SHARP_100 = (56, "Pulsing Sharp 1 - 100%")
    PULSING_SHARP_60 = (57, "Pulsing Sharp 2 - 60%")

    TRANSITION_CLICK_100 = (58, "Transition Click 1 - 100%")
    TRANSITION_CLICK_80 = (59, "Transition Click 2 - 80%")
    TRANSITION_CLICK_60 = (60, "Transition Click 3 - 60%")
    TRANSITION_CLICK_40 = (61, "Transition Click 4 - 40%")
    TRANSITION_CLICK_20 = (62, "Transition Click 5 - 20%")
    TRANSITION_CLICK_10 = (63, "Transition Click 6 - 10%")

    TRANSITION_HUM_100 = (64, "Transition Hum 1 - 100%")
    TRANSITION_HUM_80 = (65, "Transition Hum 2 - 80%")
    TRANSITION_HUM_60 = (66, "Transition Hum 3 - 60%")
    TRANSITION_HUM_40 = (67, "Transition Hum 4 - 40%")
    TRANSITION_HUM_20 = (68, "Transition Hum 5 - 20%")
    TRANSITION_HUM_10 = (69, "Transition Hum 6 - 10%")

    TRANSITION_RAMP_DOWN_LONG_SMOOTH_1_100 = (70, "Transition Ramp Down Long Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_LONG_SMOOTH_2_100 = (71, "Transition Ramp Down Long Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_MEDIUM_SMOOTH_1_100 = (72, "Transition Ramp Down Medium Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_MEDIUM_SMOOTH_2_100 = (73, "Transition Ramp Down Medium Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_SHORT_SMOOTH_1_100 = (74, "Transition Ramp Down Short Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_SHORT_SMOOTH_2_100 = (75, "Transition Ramp Down Short Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_LONG_SHARP_1_100 = (76, "Transition Ramp Down Long Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_LONG_SHARP_2_100 = (77, "Transition Ramp Down Long Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_MEDIUM_SHARP_1_100 = (78, "Transition Ramp Down Medium Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_MEDIUM_SHARP_2_100 = (79, "Transition Ramp Down Medium Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_SHORT_SHARP_1_100 = (80, "Transition Ramp Down Short Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_DOWN_SHORT_SHARP_2_100 = (81, "Transition Ramp Down Short Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_UP_LONG_SMOOTH_1_100 = (82, "Transition Ramp Up Long Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_UP_LONG_SMOOTH_2_100 = (83, "Transition Ramp Up Long Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_UP_MEDIUM_SMOOTH_1_100 = (84, "Transition Ramp Up Medium Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_UP_MEDIUM_SMOOTH_2_100 = (85, "Transition Ramp Up Medium Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_UP_SHORT_SMOOTH_1_100 = (86, "Transition Ramp Up Short Smooth 1 - 100 to 0%")
    TRANSITION_RAMP_UP_SHORT_SMOOTH_2_100 = (87, "Transition Ramp Up Short Smooth 2 - 100 to 0%")

    TRANSITION_RAMP_UP_LONG_SHARP_1_100 = (88, "Transition Ramp Up Long Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_UP_LONG_SHARP_2_100 = (89, "Transition Ramp Up Long Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_UP_MEDIUM_SHARP_1_100 = (90, "Transition Ramp Up Medium Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_UP_MEDIUM_SHARP_2_100 = (91, "Transition Ramp Up Medium Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_UP_SHORT_SHARP_1_100 = (92, "Transition Ramp Up Short Sharp 1 - 100 to 0%")
    TRANSITION_RAMP_UP_SHORT_SHARP_2_100 = (93, "Transition Ramp Up Short Sharp 2 - 100 to 0%")

    TRANSITION_RAMP_DOWN_LONG_SMOOTH_1_50 = (94, "Transition Ramp Down Long Smooth 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_LONG_SMOOTH_2_50 = (95, "Transition Ramp Down Long Smooth 2 - 50 to 0%")

    TRANSITION_RAMP_DOWN_MEDIUM_SMOOTH_1_50 = (96, "Transition Ramp Down Medium Smooth 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_MEDIUM_SMOOTH_2_50 = (97, "Transition Ramp Down Medium Smooth 2 - 50 to 0%")

    TRANSITION_RAMP_DOWN_SHORT_SMOOTH_1_50 = (98, "Transition Ramp Down Short Smooth 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_SHORT_SMOOTH_2_50 = (99, "Transition Ramp Down Short Smooth 2 - 50 to 0%")

    TRANSITION_RAMP_DOWN_LONG_SHARP_1_50 = (100, "Transition Ramp Down Long Sharp 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_LONG_SHARP_2_50 = (101, "Transition Ramp Down Long Sharp 2 - 50 to 0%")

    TRANSITION_RAMP_DOWN_MEDIUM_SHARP_1_50 = (102, "Transition Ramp Down Medium Sharp 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_MEDIUM_SHARP_2_50 = (103, "Transition Ramp Down Medium Sharp 2 - 50 to 0%")

    TRANSITION_RAMP_DOWN_SHORT_SHARP_1_50 = (104, "Transition Ramp Down Short Sharp 1 - 50 to 0%")
    TRANSITION_RAMP_DOWN_SHORT_SHARP_2_50 = (105, "Transition Ramp Down Short Sharp 2 - 50 to 0%")

    TRANSITION_RAMP_UP_LONG_SMOOTH_1_50 = (106, "Transition Ramp Up Long Smooth 1 - 0 to 50%")
    TRANSITION_RAMP_UP_LONG_SMOOTH_2_50 = (107, "Transition Ramp Up Long Smooth 2 - 0 to 50%")

    TRANSITION_RAMP_UP_MEDIUM_SMOOTH_1_50 = (108, "Transition Ramp Up Medium Smooth 1 - 0 to 50%")
    TRANSITION_RAMP_UP_MEDIUM_SMOOTH_2_50 = (109, "Transition Ramp Up Medium Smooth 2 - 0 to 50%")

    TRANSITION_RAMP_UP_SHORT_SMOOTH_1_50 = (110, "Transition Ramp Up Short Smooth 1 - 0 to 50%")
    TRANSITION_RAMP_UP_SHORT_SMOOTH_2_50 = (111, "Transition Ramp Up Short Smooth 2 - 0 to 50%")

    TRANSITION_RAMP_UP_LONG_SHARP_1_50 = (112, "Transition Ramp Up Long Sharp 1 - 0 to 50%")
    TRANSITION_RAMP_UP_LONG_SHARP_2_50 = (113, "Transition Ramp Up Long Sharp 2 - 0 to 50%")

    TRANSITION_RAMP_UP_MEDIUM_SHARP_1_50 = (114, "Transition Ramp Up Medium Sharp 1 - 0 to 50%")
    TRANSITION_RAMP_UP_MEDIUM_SHARP_2_50 = (115, "Transition Ramp Up Medium Sharp 2 - 0 to 50%")

    TRANSITION_RAMP_UP_SHORT_SHARP_1_50 = (116, "Transition Ramp Up Short Sharp 1 - 0 to 50%")
    TRANSITION_RAMP_UP_SHORT_SHARP_2_50 = (117, "Transition Ramp Up Short Sharp 2 - 0 to 50%")

    LONG_BUZZ_100 = (118, "Long buzz for programmatic stopping - 100%")

    SMOOTH_HUM_50 = (119, "Smooth Hum 1 (No kick or brake pulse) - 50%")
    SMOOTH_HUM_40 = (120, "Smooth Hum 2 (No kick or brake pulse) - 40%")
    SMOOTH_HUM_30 = (121, "Smooth Hum 3 (No kick or brake pulse) - 30%")
    SMOOTH_HUM_20 = (122, "Smooth Hum 4 (No kick or brake pulse) - 20%")
    SMOOTH_HUM_10 = (123, "Smooth Hum 5 (No kick or brake pulse) - 10%")

    @property
    def display_name(self) -> str:
        """The label shown to users for this effect."""
        return self._label