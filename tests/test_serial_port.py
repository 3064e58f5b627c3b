import pytest
import serial

from scopeview.serial_port import (
    Capturer,
    ComSerial,
    parse_sample_line,
    start_with,
)
from scopeview.signals import SignalColor, VoltageSignal


class FakeSerial:
    def __init__(self, lines=()):
        self.lines = list(lines)
        self.is_open = True

    def readline(self):
        return self.lines.pop(0) if self.lines else b""

    def close(self):
        self.is_open = False


def make_voltages():
    colors = [SignalColor.RED, SignalColor.ORANGE, SignalColor.BLUE, SignalColor.GREEN]
    return [VoltageSignal(8, c) for c in colors]


def opened(lines):
    fake = FakeSerial(lines)
    com = ComSerial(make_voltages(), serial_factory=lambda port: fake)
    com.open_port("/dev/ttyFAKE0")
    return com, fake


def test_start_with_marker_anywhere():
    assert start_with("#@1@2", "#") is True
    assert start_with("ab#", "#") is True
    assert start_with("abc", "#") is False
    assert start_with("", "#") is False


def test_parse_full_line():
    assert parse_sample_line("#@ffff@0@FFFF@0") == (65535, 0, 65535, 0)


def test_parse_partial_line_pads_with_zero():
    assert parse_sample_line("#@ffff@zz") == (65535, 0, 0, 0)


def test_parse_without_hash_is_all_zero():
    assert parse_sample_line("x#@ffff@ffff@ffff@ffff") == (0, 0, 0, 0)


def test_capturer_is_abstract():
    with pytest.raises(TypeError):
        Capturer()


def test_requires_four_voltages():
    with pytest.raises(ValueError):
        ComSerial(make_voltages()[:3])


def test_open_and_close_port():
    seen = []
    fake = FakeSerial()

    def factory(port):
        seen.append(port)
        return fake

    com = ComSerial(make_voltages(), serial_factory=factory)
    assert com.is_open() is False
    assert com.open_port("/dev/ttyFAKE0") is True
    assert seen == ["/dev/ttyFAKE0"]
    assert com.is_open() is True
    assert com.open_port("/dev/ttyFAKE1") is False
    assert com.close_port() is True
    assert com.is_open() is False
    assert com.close_port() is False


def test_open_failure_reports_attempt_but_stays_closed():
    def factory(port):
        raise serial.SerialException("no such port")

    com = ComSerial(make_voltages(), serial_factory=factory)
    assert com.open_port("/dev/ttyFAKE0") is True
    assert com.is_open() is False


def test_context_manager_closes_port():
    com, fake = opened([])
    with com:
        assert com.is_open() is True
    assert fake.is_open is False


def test_closed_port_scrolls_and_zeroes_first_two_channels():
    voltages = make_voltages()
    for v in voltages:
        v.voltage[:] = [float(i) for i in range(8)]
    com = ComSerial(voltages)
    com.read_values(2)
    shifted = [2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
    assert voltages[0].voltage == shifted + [0.0, 0.0]
    assert voltages[1].voltage == shifted + [0.0, 0.0]
    assert voltages[2].voltage == shifted + [6.0, 7.0]
    assert voltages[3].voltage == shifted + [6.0, 7.0]


def test_open_port_reads_scaled_samples():
    com, _ = opened([b"#@ffff@0@ffff@0\n"])
    com.read_values(1)
    assert com.voltages[0].voltage[-1] == pytest.approx(3.3)
    assert com.voltages[1].voltage[-1] == 0.0
    assert com.voltages[2].voltage[-1] == pytest.approx(3.3)
    assert com.voltages[0].voltage[:-1] == [0.0] * 7


def test_one_line_fills_every_new_position():
    com, _ = opened([b"#@ffff@ffff@ffff@ffff\n"])
    com.read_values(3)
    for v in com.voltages:
        assert v.voltage[-3:] == [pytest.approx(3.3)] * 3
        assert v.voltage[:5] == [0.0] * 5


def test_line_without_marker_leaves_tail():
    com, _ = opened([b"garbage\n"])
    for v in com.voltages:
        v.voltage[:] = [1.0] * 8
    com.read_values(1)
    assert com.voltages[0].voltage == [1.0] * 8


def test_too_many_values_rejected():
    com = ComSerial(make_voltages())
    with pytest.raises(ValueError):
        com.read_values(9)


def test_sample_frequency_command():
    closed = ComSerial(make_voltages())
    assert closed.set_sample_frequency(100) is None
    com, _ = opened([])
    assert com.set_sample_frequency(100) == b"v\n"