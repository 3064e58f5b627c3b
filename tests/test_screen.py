import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from scopeview.grids import GridSpectrum  # noqa: E402
from scopeview.screen import Screen  # noqa: E402
from scopeview.signals import SignalColor, SignalObject  # noqa: E402


def test_channel_colours_and_length():
    screen = Screen()
    assert [s.color for s in screen.voltages] == [
        SignalColor.RED,
        SignalColor.ORANGE,
        SignalColor.BLUE,
        SignalColor.GREEN,
    ]
    assert all(s.length == 8 for s in screen.voltages)


def test_no_traces_when_all_channels_disabled():
    screen = Screen()
    assert screen.voltage_traces() == []
    assert screen.spectrum_traces() == []


def test_voltage_trace_uses_offset_and_volt_div():
    screen = Screen()
    samples = [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 0.0, -1.0]
    screen.voltages[1].voltage[:] = samples
    screen.settings.set_signal_enabled(2, True)
    screen.settings.set_offset(2, 0.5)
    screen.settings.select_volt_div(6)

    traces = screen.voltage_traces()

    assert traces == [screen.voltages[1]]
    reference = SignalObject(8, SignalColor.ORANGE)
    reference.update_vertex(samples, screen.settings.offsets[1], screen.settings.volt_div)
    assert traces[0].ordinates == pytest.approx(reference.ordinates)


def test_disabled_channels_are_not_redrawn():
    screen = Screen()
    screen.voltages[0].voltage[:] = [1.0] * 8
    screen.settings.set_signal_enabled(3, True)
    traces = screen.voltage_traces()
    assert traces == [screen.voltages[2]]
    assert screen.voltages[0].ordinates == [0.0] * 8


def test_traces_follow_channel_order():
    screen = Screen()
    screen.settings.set_signal_enabled(4, True)
    screen.settings.set_signal_enabled(1, True)
    assert screen.voltage_traces() == [screen.voltages[0], screen.voltages[3]]


def test_spectrum_of_silence_sits_on_baseline():
    screen = Screen()
    screen.settings.set_signal_enabled(1, True)
    traces = screen.spectrum_traces()
    assert traces == [screen.voltages[0].spectrum_signal]
    baseline_y = GridSpectrum().segments()[-1].start[1]
    assert traces[0].ordinates == pytest.approx([baseline_y] * 8)


def test_spectrum_requires_power_of_two_length():
    screen = Screen(length=6)
    screen.settings.set_signal_enabled(1, True)
    with pytest.raises(ValueError):
        screen.spectrum_traces()


def test_empty_trace_length_rejected():
    with pytest.raises(ValueError):
        Screen(length=0)


def test_show_rejects_file_arguments(capsys):
    screen = Screen()
    assert screen.show(["scope", "extra"]) == 1
    assert "can not open files" in capsys.readouterr().err


def test_show_returns_zero_and_closes_figure():
    screen = Screen()
    assert screen.show(["scope"]) == 0
    assert plt.get_fignums() == []