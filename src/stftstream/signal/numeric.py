"""Numeric helpers for log-magnitude columns."""

from __future__ import annotations

from typing import Any

import numpy as np


def log10_positive(value: Any) -> Any:
    """Return ``log10(value)``, with negative results clamped to zero.

    Values in ``[0, 1)`` map to ``0``. ``NaN`` (for example from a negative
    input) is not negative and passes through unchanged. Works on scalars
    and arrays; the dtype of floating inputs is preserved.
    """
    arr = np.asarray(value)
    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        log = np.log10(arr)
    result = np.where(log < 0, np.zeros((), dtype=log.dtype), log)
    if result.ndim == 0:
        return result[()]
    return result
