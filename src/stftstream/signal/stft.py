"""Offline STFT built on :class:`scipy.signal.ShortTimeFFT`.

Used as a batch reference for the streaming engine: column ``k`` covers
samples ``[k * step_size, k * step_size + window_size)``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.signal import ShortTimeFFT

from ..errors import InvalidConfiguration
from .windows import WindowType, window_coefficients


@dataclass(frozen=True)
class STFTPlan:
    """Window, hop and transform sizes for an offline STFT."""

    window_size: int
    step_size: int
    fft_size: int | None = None
    window: str = "hann"

    @property
    def mfft(self) -> int:
        return self.window_size if self.fft_size is None else self.fft_size


def build_stft(plan: STFTPlan, sample_rate: float) -> ShortTimeFFT:
    """Build a :class:`scipy.signal.ShortTimeFFT` instance from ``plan``."""
    if plan.mfft < plan.window_size:
        raise InvalidConfiguration(
            f"fft_size must be at least window_size: got {plan.mfft} < {plan.window_size}"
        )
    win = window_coefficients(plan.window, plan.window_size)
    if win is None:
        win = np.ones(plan.window_size)
    return ShortTimeFFT(
        win=win,
        hop=plan.step_size,
        fs=sample_rate,
        fft_mode="onesided",
        mfft=plan.mfft,
    )


def batch_magnitude(
    samples: np.ndarray,
    plan: STFTPlan,
    *,
    sample_rate: float = 1.0,
) -> np.ndarray:
    """Magnitude spectrogram ``(mfft // 2, n_columns)`` of complete windows."""
    x = np.asarray(samples, dtype=np.float64).reshape(-1)
    n_columns = 0
    if x.shape[0] >= plan.window_size:
        n_columns = (x.shape[0] - plan.window_size) // plan.step_size + 1
    n_bins = plan.mfft // 2
    if n_columns == 0:
        return np.zeros((n_bins, 0))

    stft = build_stft(plan, sample_rate)
    # ShortTimeFFT slice p starts at sample p * hop - m_num_mid. Prepend zeros so
    # that slice p0 + k starts exactly at sample k * step_size of the input.
    p0 = -(-stft.m_num_mid // plan.step_size)
    lead = p0 * plan.step_size - stft.m_num_mid
    padded = np.concatenate([np.zeros(lead), x])
    spec = stft.stft(padded, p0=p0, p1=p0 + n_columns)
    return np.abs(spec[:n_bins, :])
