"""Timing helpers for column computation."""

from __future__ import annotations

from dataclasses import dataclass
import time

import numpy as np

from .core.engine import StreamingSTFT
from .signal.windows import WindowType


@dataclass(frozen=True)
class BenchResult:
    """Timing of repeated ``compute_column`` calls on one window."""

    window_size: int
    precision: str
    repeats: int
    total_sec: float

    @property
    def per_column_sec(self) -> float:
        return self.total_sec / self.repeats


def time_compute_column(
    window_size: int = 1024,
    *,
    precision: str = "float64",
    repeats: int = 1000,
    window: WindowType | str = WindowType.HANNING,
) -> BenchResult:
    """Time ``compute_column`` on a constant buffered window."""
    if repeats <= 0:
        raise ValueError("repeats must be a positive integer")
    stft = StreamingSTFT(window, window_size, max(window_size // 2, 1), dtype=precision)
    stft.append_samples(np.ones(window_size))
    column = np.zeros(stft.output_size, dtype=stft.dtype)

    start = time.perf_counter()
    for _ in range(repeats):
        stft.compute_column(column)
    elapsed = time.perf_counter() - start
    return BenchResult(
        window_size=int(window_size),
        precision=str(stft.dtype),
        repeats=int(repeats),
        total_sec=elapsed,
    )
