"""Oscilloscope window: voltage and spectrum views beside a control panel."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Button, CheckButtons, RadioButtons, Slider

from scopeview.controls import (
    CHANNELS,
    FREQUENCY_INITIAL,
    FREQUENCY_MAX,
    FREQUENCY_MIN,
    FREQUENCY_UNIT_LABELS,
    OFFSET_MAX,
    OFFSET_MIN,
    OFFSET_STEP,
    VOLT_DIV_LABELS,
    VOLT_DIV_VALUES,
    ScopeSettings,
)
from scopeview.grids import GridSpectrum, GridVoltage
from scopeview.signals import SignalColor, SpectrumSignal, VoltageSignal

TRACE_LENGTH = 8
TRACE_COLORS = (SignalColor.RED, SignalColor.ORANGE, SignalColor.BLUE, SignalColor.GREEN)
WINDOW_TITLE = "Oscilloscope"
BACKGROUND = (0.5, 0.5, 0.5)
REFRESH_MS = 50


class Screen:
    """Holds the four channel traces and the panel settings, and draws them."""

    def __init__(
        self,
        length: int = TRACE_LENGTH,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self.voltages: tuple[VoltageSignal, ...] = tuple(
            VoltageSignal(length, color) for color in TRACE_COLORS
        )
        self.settings = ScopeSettings()
        self.grid_voltage = GridVoltage()
        self.grid_spectrum = GridSpectrum()
        self.on_close = on_close
        self._animation: FuncAnimation | None = None
        self._widgets: list[object] = []

    def _enabled(self) -> list[tuple[int, VoltageSignal]]:
        return [
            (index, signal)
            for index, (signal, enabled) in enumerate(
                zip(self.voltages, self.settings.signal_enabled)
            )
            if enabled
        ]

    def voltage_traces(self) -> list[VoltageSignal]:
        """Redraw every enabled channel with its offset and the volt/div scale."""
        traces = []
        for index, signal in self._enabled():
            signal.apply_offset(self.settings.offsets[index], self.settings.volt_div)
            traces.append(signal)
        return traces

    def spectrum_traces(self) -> list[SpectrumSignal]:
        """Recompute the spectrum of every enabled channel."""
        traces = []
        for _, signal in self._enabled():
            signal.calculate_spectrum()
            traces.append(signal.spectrum_signal)
        return traces

    def show(self, argv: Sequence[str] | None = None) -> int:
        """Open the window and run until it is closed; return an exit status."""
        args = list(sys.argv if argv is None else argv)
        program = args[0] if args else WINDOW_TITLE.lower()
        if args[1:]:
            print(f"{program}: This application can not open files.", file=sys.stderr)
            return 1
        figure = self._build_figure()
        try:
            plt.show()
        finally:
            plt.close(figure)
            self._animation = None
            self._widgets = []
        return 0

    def _handle_close(self, _event: object) -> None:
        if self.on_close is not None:
            self.on_close()

    @staticmethod
    def _prepare_axes(axes) -> None:
        axes.set_xlim(-1.0, 1.0)
        axes.set_ylim(-1.0, 1.0)
        axes.set_facecolor(BACKGROUND)
        axes.set_xticks([])
        axes.set_yticks([])

    @staticmethod
    def _draw_grid(axes, grid) -> None:
        for seg in grid.segments():
            axes.plot(
                [seg.start[0], seg.end[0]],
                [seg.start[1], seg.end[1]],
                color=seg.color,
                linewidth=1,
            )

    def _build_figure(self):
        figure = plt.figure(figsize=(12, 7))
        if figure.canvas.manager is not None:
            figure.canvas.manager.set_window_title(WINDOW_TITLE)

        voltage_axes = figure.add_axes((0.02, 0.30, 0.70, 0.68))
        spectrum_axes = figure.add_axes((0.02, 0.03, 0.70, 0.22))
        for axes in (voltage_axes, spectrum_axes):
            self._prepare_axes(axes)
        self._draw_grid(voltage_axes, self.grid_voltage)
        self._draw_grid(spectrum_axes, self.grid_spectrum)
        self._draw_grid(spectrum_axes, self.grid_voltage)

        voltage_lines = [
            voltage_axes.plot(
                s.abscissas, s.ordinates, color=s.color.rgb, linewidth=2, visible=False
            )[0]
            for s in self.voltages
        ]
        spectrum_lines = [
            spectrum_axes.plot(
                s.spectrum_signal.abscissas,
                s.spectrum_signal.ordinates,
                color=s.color.rgb,
                linewidth=2,
                visible=False,
            )[0]
            for s in self.voltages
        ]
        self._build_controls(figure)

        def refresh(_frame):
            shown = {id(t) for t in self.voltage_traces()}
            shown_spectra = {id(t) for t in self.spectrum_traces()}
            for line, signal in zip(voltage_lines, self.voltages):
                line.set_visible(id(signal) in shown)
                line.set_data(signal.abscissas, signal.ordinates)
            for line, signal in zip(spectrum_lines, self.voltages):
                spectrum = signal.spectrum_signal
                line.set_visible(id(spectrum) in shown_spectra)
                line.set_data(spectrum.abscissas, spectrum.ordinates)
            return voltage_lines + spectrum_lines

        figure.canvas.mpl_connect("close_event", self._handle_close)
        self._animation = FuncAnimation(
            figure, refresh, interval=REFRESH_MS, cache_frame_data=False
        )
        return figure

    def _build_controls(self, figure) -> None:
        settings = self.settings

        start_stop = Button(figure.add_axes((0.76, 0.92, 0.20, 0.05)), "Start")

        def on_start_stop(_event):
            start_stop.label.set_text(settings.toggle_start_stop())

        start_stop.on_clicked(on_start_stop)

        volt_axes = figure.add_axes((0.76, 0.56, 0.20, 0.34))
        volt_axes.set_title("Volt/Div", fontsize=9)
        default_index = VOLT_DIV_VALUES.index(settings.volt_div)
        volt_div = RadioButtons(volt_axes, VOLT_DIV_LABELS, active=default_index)
        volt_div.on_clicked(
            lambda label: settings.select_volt_div(VOLT_DIV_LABELS.index(label))
        )

        labels = [f"signal{n}" for n in range(1, CHANNELS + 1)]
        checks = CheckButtons(
            figure.add_axes((0.76, 0.40, 0.08, 0.14)),
            labels,
            list(settings.signal_enabled),
        )

        def on_check(label):
            index = labels.index(label)
            settings.set_signal_enabled(index + 1, checks.get_status()[index])

        checks.on_clicked(on_check)

        offsets = []
        for channel in range(1, CHANNELS + 1):
            top = 0.51 - 0.035 * (channel - 1)
            slider = Slider(
                figure.add_axes((0.88, top, 0.08, 0.025)),
                f"off{channel}",
                OFFSET_MIN,
                OFFSET_MAX,
                valinit=settings.offsets[channel - 1],
                valstep=OFFSET_STEP,
            )
            slider.on_changed(
                lambda value, ch=channel: settings.set_offset(ch, value)
            )
            offsets.append(slider)

        frequency = Slider(
            figure.add_axes((0.80, 0.30, 0.16, 0.03)),
            "Freq",
            FREQUENCY_MIN,
            FREQUENCY_MAX,
            valinit=FREQUENCY_INITIAL,
            valstep=1,
        )
        frequency.on_changed(settings.set_frequency)

        unit = RadioButtons(
            figure.add_axes((0.76, 0.12, 0.20, 0.15)), FREQUENCY_UNIT_LABELS, active=0
        )
        unit.on_clicked(
            lambda label: settings.select_frequency_unit(
                FREQUENCY_UNIT_LABELS.index(label)
            )
        )

        self._widgets = [start_stop, volt_div, checks, *offsets, frequency, unit]