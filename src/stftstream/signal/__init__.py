"""Signal processing building blocks: windows, FFT, sample buffer."""

from .fft import ScipyFFT
from .numeric import log10_positive
from .ring import SampleRing
from .stft import STFTPlan, batch_magnitude, build_stft
from .windows import WindowType, window_coefficients

__all__ = [
    "STFTPlan",
    "SampleRing",
    "ScipyFFT",
    "WindowType",
    "batch_magnitude",
    "build_stft",
    "log10_positive",
    "window_coefficients",
]
