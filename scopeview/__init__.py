"""Four-channel oscilloscope viewer with voltage traces, FFT spectrum and serial capture."""

__version__ = "0.1.0"
__all__ = ["__version__"]