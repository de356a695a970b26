"""Growable FIFO of samples with non-consuming reads."""

from __future__ import annotations

import numpy as np


class SampleRing:
    """Sample FIFO stored in one NumPy array with a moving read offset.

    Dropped samples are reclaimed lazily: the live region is moved to the front
    of the storage when a push would otherwise need to grow it.
    """

    def __init__(self, dtype: np.dtype | type = np.float64, capacity: int = 0) -> None:
        self.dtype = np.dtype(dtype)
        self._data = np.zeros(max(int(capacity), 0), dtype=self.dtype)
        self._start = 0
        self._stop = 0

    def __len__(self) -> int:
        return self._stop - self._start

    @property
    def capacity(self) -> int:
        return int(self._data.shape[0])

    def push_back(self, samples: np.ndarray) -> None:
        values = np.asarray(samples, dtype=self.dtype).reshape(-1)
        n_new = values.shape[0]
        if n_new == 0:
            return
        if self._stop + n_new > self.capacity:
            self._make_room(n_new)
        self._data[self._stop : self._stop + n_new] = values
        self._stop += n_new

    def peek_front(self, dest: np.ndarray) -> None:
        n_read = dest.shape[0]
        if n_read > len(self):
            raise ValueError(
                f"cannot peek {n_read} samples from a ring holding {len(self)}"
            )
        dest[:] = self._data[self._start : self._start + n_read]

    def drop_front(self, count: int) -> None:
        count = int(count)
        if count < 0:
            raise ValueError("count must be non-negative")
        self._start += min(count, len(self))
        if self._start == self._stop:
            self._start = self._stop = 0

    def to_array(self) -> np.ndarray:
        """Return a copy of the buffered samples, oldest first."""
        return self._data[self._start : self._stop].copy()

    def _make_room(self, n_new: int) -> None:
        live = len(self)
        required = live + n_new
        if required <= self.capacity and self._start > 0:
            self._data[:live] = self._data[self._start : self._stop]
        else:
            grown = np.zeros(max(required, 2 * self.capacity), dtype=self.dtype)
            grown[:live] = self._data[self._start : self._stop]
            self._data = grown
        self._start, self._stop = 0, live
