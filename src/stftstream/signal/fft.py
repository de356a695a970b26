"""Fixed-size forward FFT backed by :mod:`scipy.fft`."""

from __future__ import annotations

import numpy as np
import scipy.fft


class ScipyFFT:
    """Forward complex FFT of a fixed length.

    ``scipy.fft`` manages its own workspace, so no caller scratch is needed and
    :meth:`required_scratch_length` is zero. A single instance can be handed to
    several engines to share it explicitly.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("FFT size must be a positive integer")
        self._size = int(size)

    @property
    def size(self) -> int:
        return self._size

    def required_scratch_length(self) -> int:
        return 0

    def transform_in_place(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        del scratch
        if buffer.ndim != 1 or buffer.shape[0] != self._size:
            raise ValueError(
                f"buffer must be 1-D with length {self._size}, got shape {buffer.shape}"
            )
        buffer[:] = scipy.fft.fft(buffer, overwrite_x=True)
