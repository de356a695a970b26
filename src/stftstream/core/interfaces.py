"""Protocol interfaces for the collaborators of the streaming engine."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class TransformEngine(Protocol):
    """Forward FFT of a fixed size, computed in place."""

    @property
    def size(self) -> int:
        """Return the configured transform length."""

    def required_scratch_length(self) -> int:
        """Return the minimum scratch length needed by :meth:`transform_in_place`."""

    def transform_in_place(self, buffer: np.ndarray, scratch: np.ndarray) -> None:
        """Replace ``buffer`` with its forward DFT."""


class SampleBuffer(Protocol):
    """FIFO of real samples with non-consuming reads."""

    def push_back(self, samples: np.ndarray) -> None:
        """Append samples at the back."""

    def peek_front(self, dest: np.ndarray) -> None:
        """Copy the first ``len(dest)`` samples into ``dest`` without removing them."""

    def drop_front(self, count: int) -> None:
        """Discard ``count`` samples from the front."""

    def __len__(self) -> int:
        """Return the number of buffered samples."""
