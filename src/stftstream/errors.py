"""Exception types raised by the streaming STFT engine."""

from __future__ import annotations


class STFTError(Exception):
    """Base class for all stftstream errors."""


class InvalidConfiguration(STFTError, ValueError):
    """Raised when window, step, or FFT sizes violate ``0 < step < window <= fft``."""


class InsufficientSamples(STFTError, RuntimeError):
    """Raised when a column is requested before ``window_size`` samples are buffered."""


class SizeMismatch(STFTError, ValueError):
    """Raised when an output buffer length differs from ``output_size``."""


class UnrecognizedWindowName(STFTError, ValueError):
    """Raised when a window name cannot be parsed."""
