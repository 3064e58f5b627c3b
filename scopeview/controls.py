"""State of the oscilloscope control panel and the rules for changing it."""

from __future__ import annotations

from dataclasses import dataclass, field

CHANNELS = 4

VOLT_DIV_LABELS = (
    "0.1v/div", "0.2v/div", "0.3v/div", "0.4v/div", "0.5v/div",
    "1v/div", "2v/div", "3v/div", "4v/div", "5v/div",
)
VOLT_DIV_VALUES = (0.1, 0.2, 0.3, 0.4, 0.5, 1.0, 2.0, 3.0, 4.0, 5.0)
DEFAULT_VOLT_DIV = 1.0

FREQUENCY_UNIT_LABELS = ("Hz", "Khz", "Mhz")
FREQUENCY_MULTIPLIERS = (1, 1000, 1000000)
DEFAULT_MULTIPLIER = 1

OFFSET_MIN = -3.3
OFFSET_MAX = 3.0
OFFSET_STEP = 0.1

FREQUENCY_MIN = 0
FREQUENCY_MAX = 100
FREQUENCY_INITIAL = 50


def _check_channel(channel: int) -> int:
    if not 1 <= channel <= CHANNELS:
        raise ValueError(f"channel must be between 1 and {CHANNELS}, got {channel}")
    return channel - 1


@dataclass
class ScopeSettings:
    """Everything the control panel lets the user set. Channels count from 1."""

    running: bool = False
    signal_enabled: list[bool] = field(default_factory=lambda: [False] * CHANNELS)
    volt_div: float = DEFAULT_VOLT_DIV
    offsets: list[float] = field(default_factory=lambda: [0.0] * CHANNELS)
    frequency: int = 100
    multiplier: int = DEFAULT_MULTIPLIER

    def toggle_start_stop(self) -> str:
        """Flip the running state and return the label the button should show."""
        self.running = not self.running
        return "Stop" if self.running else "Start"

    def select_volt_div(self, index: int) -> float:
        """Choose a volts-per-division entry; unknown entries mean 1 V/div."""
        if 0 <= index < len(VOLT_DIV_VALUES):
            self.volt_div = VOLT_DIV_VALUES[index]
        else:
            self.volt_div = DEFAULT_VOLT_DIV
        return self.volt_div

    def set_signal_enabled(self, channel: int, enabled: bool) -> None:
        """Show or hide a channel's traces."""
        self.signal_enabled[_check_channel(channel)] = bool(enabled)

    def set_offset(self, channel: int, value: float) -> float:
        """Set a channel's offset, held to the spin button's range."""
        clamped = min(max(float(value), OFFSET_MIN), OFFSET_MAX)
        self.offsets[_check_channel(channel)] = clamped
        return clamped

    def select_frequency_unit(self, index: int) -> int:
        """Choose Hz, kHz or MHz; unknown entries mean Hz."""
        if 0 <= index < len(FREQUENCY_MULTIPLIERS):
            self.multiplier = FREQUENCY_MULTIPLIERS[index]
        else:
            self.multiplier = DEFAULT_MULTIPLIER
        return self.multiplier

    def set_frequency(self, value: float) -> int:
        """Set the frequency as the spin button reports it: rounded and in range."""
        rounded = int(round(value))
        self.frequency = min(max(rounded, FREQUENCY_MIN), FREQUENCY_MAX)
        return self.frequency