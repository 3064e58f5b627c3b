"""Sample capture from the acquisition board over a serial line."""

from __future__ import annotations

import abc
import logging
import re
from collections.abc import Callable, Sequence
from typing import Any

import serial

from scopeview.signals import VoltageSignal

log = logging.getLogger(__name__)

BAUD_RATE = 115200
FULL_SCALE_VOLTS = 3.3
FULL_SCALE_COUNTS = 65535.0
CHANNELS = 4
SAMPLE_RATE_COMMAND = b"v\n"

_HEX_FIELD = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class Capturer(abc.ABC):
    """A source that fills voltage traces with fresh samples."""

    @abc.abstractmethod
    def read_values(self, n_values: int) -> None:
        """Acquire ``n_values`` new samples per channel."""

    @abc.abstractmethod
    def set_sample_frequency(self, freq: int) -> Any:
        """Ask the source to sample at ``freq``."""


def start_with(line: str, text: str) -> bool:
    """Tell whether ``line`` is a candidate sample line for the marker ``text``.

    The line must be at least as long as ``text`` and contain its first
    character somewhere.
    """
    if len(line) < len(text):
        return False
    marker = text[0] if text else "\0"
    return marker in line


def _hex_to_unsigned(sign: str, digits: str) -> int:
    value = int(digits, 16) & 0xFFFFFFFF
    if sign == "-":
        value = -value & 0xFFFFFFFF
    return value


def parse_sample_line(line: str) -> tuple[int, int, int, int]:
    """Parse a ``#@a@b@c@d`` line of hexadecimal counts.

    Fields are read from the left until one fails to match; every field
    not read is 0.
    """
    fields: list[int] = []
    if line.startswith("#"):
        pos = 1
        while len(fields) < CHANNELS and line.startswith("@", pos):
            match = _HEX_FIELD.match(line, pos + 1)
            if match is None:
                break
            fields.append(_hex_to_unsigned(match.group(1), match.group(2)))
            pos = match.end()
    fields.extend([0] * (CHANNELS - len(fields)))
    return tuple(fields)  # type: ignore[return-value]


def _counts_to_volts(count: int) -> float:
    return float(count) * FULL_SCALE_VOLTS / FULL_SCALE_COUNTS


def _open_serial(port: str) -> serial.Serial:
    return serial.Serial(
        port=port,
        baudrate=BAUD_RATE,
        bytesize=serial.EIGHTBITS,
        stopbits=serial.STOPBITS_ONE,
        parity=serial.PARITY_NONE,
        xonxoff=False,
        rtscts=False,
        dsrdtr=False,
    )


class ComSerial(Capturer):
    """Reads four-channel samples from a serial port into voltage traces."""

    def __init__(
        self,
        voltages: Sequence[VoltageSignal],
        serial_factory: Callable[[str], Any] | None = None,
    ) -> None:
        signals = list(voltages)
        if len(signals) != CHANNELS:
            raise ValueError(f"expected {CHANNELS} voltage signals, got {len(signals)}")
        self.voltages = signals
        self._serial_factory = serial_factory or _open_serial
        self._serial: Any = None

    def __enter__(self) -> ComSerial:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close_port()

    def open_port(self, port: str) -> bool:
        """Try to open ``port``; False if a port was already open."""
        if self.is_open():
            return False
        try:
            self._serial = self._serial_factory(port)
        except (serial.SerialException, OSError, ValueError) as exc:
            log.error("could not open serial port %s: %s", port, exc)
            self._serial = None
        return True

    def close_port(self) -> bool:
        """Close the port; False if it was not open."""
        if not self.is_open():
            return False
        try:
            self._serial.close()
            if not self.is_open():
                log.info("serial port closed")
        except (serial.SerialException, OSError) as exc:
            log.error("could not close serial port: %s", exc)
        return True

    def is_open(self) -> bool:
        """Whether a serial port is currently open."""
        return self._serial is not None and bool(self._serial.is_open)

    def _scroll_voltages(self, n: int) -> None:
        for signal in self.voltages:
            data = signal.voltage
            data[: len(data) - n] = data[n:]

    def _read_line(self) -> str:
        try:
            raw = self._serial.readline()
        except (serial.SerialException, OSError) as exc:
            log.error("no data captured: %s", exc)
            return ""
        return raw.decode("ascii", errors="replace").removesuffix("\n")

    def read_values(self, n_values: int) -> None:
        """Shift every trace left by ``n_values`` and fill the tail from one line."""
        length = self.voltages[0].length
        if not 0 <= n_values <= length:
            raise ValueError(f"n_values must be between 0 and {length}")
        self._scroll_voltages(n_values)
        tail = slice(length - n_values, length)
        if self.is_open():
            line = self._read_line()
            if n_values and start_with(line, "#"):
                for signal, count in zip(self.voltages, parse_sample_line(line)):
                    signal.voltage[tail] = [_counts_to_volts(count)] * n_values
        else:
            for signal in self.voltages[:2]:
                signal.voltage[tail] = [0.0] * n_values

    def set_sample_frequency(self, freq: int) -> bytes | None:
        """Build the sample-rate command for an open port; None when closed.

        The command is not transmitted to the device.
        """
        if not self.is_open():
            return None
        return SAMPLE_RATE_COMMAND