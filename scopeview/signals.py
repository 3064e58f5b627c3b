"""Traces for voltage signals and their spectra, in normalised screen coordinates."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from itertools import accumulate, repeat

from scopeview.fft import calculate_module, fft


class SignalColor(enum.Enum):
    """Trace colours, valued by their RGB components."""

    RED = (1.0, 0.0, 0.0)
    GREEN = (0.0, 1.0, 0.0)
    BLUE = (0.0, 0.0, 1.0)
    YELLOW = (1.0, 1.0, 0.0)
    ORANGE = (1.0, 0.5, 0.0)

    @property
    def rgb(self) -> tuple[float, float, float]:
        return self.value


class SignalObject:
    """A polyline of ``length`` points spread over x in [-1, 1)."""

    def __init__(self, length: int, color: SignalColor) -> None:
        if length < 1:
            raise ValueError("a signal needs at least one point")
        self.length = length
        self.color = SignalColor(color)
        step = 2.0 / length
        self.abscissas: list[float] = list(
            accumulate(repeat(step, length - 1), initial=-1.0)
        )
        self.ordinates: list[float] = [0.0] * length

    @property
    def points(self) -> list[tuple[float, float]]:
        """The (x, y) pairs of the trace."""
        return list(zip(self.abscissas, self.ordinates))

    @property
    def vertex(self) -> list[float]:
        """Interleaved x, y coordinates."""
        return [c for point in zip(self.abscissas, self.ordinates) for c in point]

    @property
    def color_vertex(self) -> list[float]:
        """Interleaved r, g, b components, one triple per point."""
        return list(self.color.rgb * self.length)

    def update_vertex(self, signal: Sequence[float], offset: float, volt_div: float) -> None:
        """Scale ``signal`` to screen ordinates: 0.25 * (value + offset) / volt_div."""
        values = list(signal)
        if len(values) < self.length:
            raise ValueError(
                f"signal has {len(values)} samples, trace needs {self.length}"
            )
        self.ordinates = [
            0.25 * (value + offset) / volt_div for value in values[: self.length]
        ]


class SpectrumSignal(SignalObject):
    """A trace showing the normalised magnitude spectrum of a signal."""

    def __init__(self, length: int, color: SignalColor) -> None:
        super().__init__(length, color)
        self.spectrum: list[complex] = [0j] * length
        self.module_spectrum: list[float] = [0.0] * length

    def calculate_spectrum(self, signal: Sequence[float]) -> None:
        """Transform ``signal`` and place its magnitude spectrum on the trace."""
        samples = list(signal)
        if len(samples) < self.length:
            raise ValueError(
                f"signal has {len(samples)} samples, spectrum needs {self.length}"
            )
        self.spectrum = fft(samples[: self.length], normalize=True)
        self.module_spectrum = calculate_module(self.spectrum)
        self.update_vertex(self.module_spectrum, -1.0, 0.25)


class VoltageSignal(SignalObject):
    """A voltage trace holding its samples and a companion spectrum trace."""

    def __init__(self, length: int, color: SignalColor) -> None:
        super().__init__(length, color)
        self.voltage: list[float] = [0.0] * length
        self.spectrum_signal = SpectrumSignal(length, color)

    def apply_offset(self, offset: float, volt_div: float) -> None:
        """Redraw the trace from the current samples with an offset and scale."""
        self.update_vertex(self.voltage, offset, volt_div)

    def calculate_spectrum(self) -> None:
        """Refresh the spectrum trace from the current samples."""
        self.spectrum_signal.calculate_spectrum(self.voltage)

    def voltage_to_zero(self) -> None:
        """Clear every sample in place."""
        self.voltage[:] = [0.0] * self.length