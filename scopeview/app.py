"""Application object tying the screen, the capture thread and the serial port together."""

from __future__ import annotations

import atexit
import sys
import threading
from collections.abc import Sequence

from scopeview.capture import SignalCapturer
from scopeview.screen import Screen
from scopeview.serial_port import ComSerial


class Oscilloscope:
    """The single running oscilloscope; obtain it with :meth:`get_instance`."""

    _instance: Oscilloscope | None = None
    _lock = threading.Lock()
    _exit_hook_registered = False

    def __init__(self) -> None:
        self.state_on_off = True
        self.screen = Screen(on_close=self._power_off)
        self.signal_capturer = SignalCapturer(self.screen, None)
        self.com_serial = ComSerial(self.screen.voltages)

    def _power_off(self) -> None:
        self.state_on_off = False
        self.signal_capturer.stop()

    def _shutdown(self) -> None:
        self._power_off()
        self.com_serial.close_port()

    @classmethod
    def get_instance(cls) -> Oscilloscope:
        """Return the shared instance, creating it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
                if not cls._exit_hook_registered:
                    atexit.register(cls.destroy_instance)
                    cls._exit_hook_registered = True
            return cls._instance

    @classmethod
    def destroy_instance(cls) -> None:
        """Shut down and forget the shared instance, if there is one."""
        with cls._lock:
            instance, cls._instance = cls._instance, None
        if instance is not None:
            instance._shutdown()

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Start capturing, show the window and return its exit status."""
        self.signal_capturer.start()
        try:
            return self.screen.show(argv)
        finally:
            self.signal_capturer.stop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the oscilloscope and return the process exit status."""
    args = list(sys.argv if argv is None else argv)
    return Oscilloscope.get_instance().run(args)


if __name__ == "__main__":
    raise SystemExit(main())