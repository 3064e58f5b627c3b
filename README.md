# scopeview

A small four-channel oscilloscope viewer. It draws up to four voltage traces
on a divided grid and, underneath, the normalised FFT magnitude spectrum of
each enabled channel. A serial reader can fill the traces from an external
acquisition board.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
scopeview
```

This opens the "Oscilloscope" window (drawn with matplotlib). Passing any
further argument makes the command print
`This application can not open files.` and exit with status 1.

The control panel on the right has:

- a Start/Stop button, which flips `ScopeSettings.running` and its own label,
- a Volt/Div selector from 0.1 V/div to 5 V/div (1 V/div by default),
- check boxes `signal1` to `signal4` that show or hide each channel,
- an offset slider per channel, from -3.3 to 3.0 in steps of 0.1,
- a frequency slider (0 to 100) and a unit choice of Hz, Khz or Mhz.

Channel colours are red, orange, blue and green; each trace has 8 points.
Closing the window stops the background capture thread.

## What it does not do

- The window has no control for choosing or opening a serial port, and the
  capture thread started by `scopeview` has no capturer attached, so on their
  own the traces stay at zero. To feed real data, use `ComSerial` from Python
  (below).
- The Start/Stop button and the frequency controls only change the panel
  settings; they do not start, stop or reconfigure acquisition.
  `ComSerial.set_sample_frequency` returns the `b"v\n"` command for an open
  port but does not send it.

## Serial protocol

`scopeview.serial_port.ComSerial` opens a port at 115200 baud, 8 data bits,
no parity, one stop bit and no flow control. Each call to
`read_values(n)` shifts every trace left by `n` samples and reads one line,
which carries four hexadecimal readings:

```
#@1a2b@0000@ffff@8000
```

Every reading is scaled to volts as `value * 3.3 / 65535` and written to the
`n` newest samples of its channel. Lines with no `#` in them are ignored;
fields that cannot be read count as 0 (`parse_sample_line`). When no port is
open, the newest samples of the first two channels are set to 0.

## Using the pieces from Python

The transform works on its own:

```python
from scopeview.fft import fft, calculate_module

spectrum = fft([1.0, 0.0, -1.0, 0.0, 1.0, 0.0, -1.0, 0.0], normalize=False)
magnitudes = calculate_module(spectrum)
```

`fft` raises `ValueError` unless the length is a power of two.

Trace objects keep the points used for drawing:

```python
from scopeview.signals import SignalColor, VoltageSignal

channel = VoltageSignal(8, SignalColor.RED)
channel.voltage[:] = [0.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0, -1.0]
channel.apply_offset(0.5, 1.0)      # ordinates = 0.25 * (v + 0.5) / 1.0
channel.calculate_spectrum()        # fills channel.spectrum_signal
print(channel.points)
```

Reading samples into four channels, polled every two seconds in a thread:

```python
from scopeview.capture import SignalCapturer
from scopeview.serial_port import ComSerial
from scopeview.signals import SignalColor, VoltageSignal

channels = [VoltageSignal(8, c) for c in
            (SignalColor.RED, SignalColor.ORANGE, SignalColor.BLUE, SignalColor.GREEN)]
with ComSerial(channels) as port:
    port.open_port("/dev/ttyUSB0")
    capturer = SignalCapturer(None, port)
    capturer.start()
    ...
    capturer.stop()
```

`scopeview.grids` gives the grid lines (`GridVoltage`, `GridSpectrum`) and
`scopeview.controls.ScopeSettings` holds the panel state and its rules.