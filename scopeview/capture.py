"""Background thread that keeps pulling samples from a capturer."""

from __future__ import annotations

import threading
from typing import Any

from scopeview.serial_port import Capturer


class SignalCapturer:
    """Polls a capturer for one new sample every ``interval`` seconds."""

    def __init__(
        self,
        screen: Any,
        capturer: Capturer | None,
        interval: float = 2.0,
    ) -> None:
        self.screen = screen
        self.capturer = capturer
        self.interval = interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the polling thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the polling thread."""
        if self.running:
            raise RuntimeError("capture thread already running")
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._loop, name="signal-capturer", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the polling thread to finish and wait for it."""
        self._stop.set()
        if self._thread is not None:
            if self._thread is not threading.current_thread():
                self._thread.join()
            self._thread = None

    def catch_voltages(self) -> bool:
        """Read one sample per channel; False when there is no capturer."""
        if self.capturer is None:
            return False
        self.capturer.read_values(1)
        return True

    def _loop(self) -> None:
        while not self._stop.is_set():
            self.catch_voltages()
            self._stop.wait(self.interval)