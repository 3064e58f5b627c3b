"""Radix-2 fast Fourier transform and helpers for spectra."""

from __future__ import annotations

import cmath
import math
from collections.abc import Iterable, Sequence


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _split(values: Sequence, start: int) -> list:
    items = list(values)
    if len(items) % 2:
        raise ValueError("sequence length must be even to be split")
    return items[start::2]


def odd_values(values: Sequence) -> list:
    """Return the elements at positions 0, 2, 4, ... of an even-length sequence."""
    return _split(values, 0)


def even_values(values: Sequence) -> list:
    """Return the elements at positions 1, 3, 5, ... of an even-length sequence."""
    return _split(values, 1)


def _radix2(samples: list[complex]) -> list[complex]:
    n = len(samples)
    if n == 1:
        return list(samples)
    first = _radix2(odd_values(samples))
    second = _radix2(even_values(samples))
    twiddled = [
        b * cmath.rect(1.0, -2.0 * math.pi * k / n)
        for k, b in enumerate(second)
    ]
    lower = [a + t for a, t in zip(first, twiddled)]
    upper = [a - t for a, t in zip(first, twiddled)]
    return lower + upper


def calculate_fft(signal: Iterable) -> list[complex]:
    """Compute the discrete Fourier transform of a power-of-two length signal."""
    samples = [complex(v) for v in signal]
    if not samples:
        return []
    if not _is_power_of_two(len(samples)):
        raise ValueError("signal length must be a power of two")
    return _radix2(samples)


def calculate_module(transform: Iterable[complex]) -> list[float]:
    """Return the magnitude of every coefficient."""
    return [abs(c) for c in transform]


def calculate_argument(transform: Iterable[complex]) -> list[float]:
    """Return the phase angle of every coefficient."""
    return [cmath.phase(c) for c in transform]


def normalize_signal(transform: Iterable[complex]) -> list[complex]:
    """Scale every non-zero coefficient to unit magnitude; zeros stay zero."""
    return [c / abs(c) if abs(c) != 0.0 else c for c in transform]


def fft(signal: Iterable, normalize: bool = False) -> list[complex]:
    """Transform a signal whose length is 2**n, optionally normalising the result."""
    samples = list(signal)
    if not _is_power_of_two(len(samples)):
        raise ValueError("signal length must be 2^n")
    transform = calculate_fft(samples)
    if normalize:
        transform = normalize_signal(transform)
    return transform


def format_transform(transform: Iterable[complex]) -> str:
    """Render coefficients as consecutive "(re,im)" pairs."""
    return "".join(f"({c.real:g},{c.imag:g})" for c in transform)