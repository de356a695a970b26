"""Apodization window types and coefficient tables."""

from __future__ import annotations

from enum import Enum

import numpy as np
from scipy.signal import get_window

from ..errors import UnrecognizedWindowName


class WindowType(Enum):
    """Closed set of tapering windows selectable by name."""

    HANNING = "Hanning"
    HAMMING = "Hamming"
    BLACKMAN = "Blackman"
    NUTTALL = "Nuttall"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> list["WindowType"]:
        return list(cls)

    @classmethod
    def parse(cls, text: "str | WindowType") -> "WindowType":
        """Parse a case-insensitive window name (``"hann"`` is accepted)."""
        if isinstance(text, WindowType):
            return text
        if not isinstance(text, str):
            raise TypeError(
                f"window name must be a str or WindowType, got {type(text).__name__}"
            )
        key = text.strip().lower()
        if key not in _ALIASES:
            known = ", ".join(sorted(_ALIASES))
            raise UnrecognizedWindowName(
                f"Unknown window name '{text}'. Known names: {known}"
            )
        return _ALIASES[key]


_ALIASES: dict[str, WindowType] = {
    "hanning": WindowType.HANNING,
    "hann": WindowType.HANNING,
    "hamming": WindowType.HAMMING,
    "blackman": WindowType.BLACKMAN,
    "nuttall": WindowType.NUTTALL,
    "none": WindowType.NONE,
}

_SCIPY_NAMES: dict[WindowType, str] = {
    WindowType.HANNING: "hann",
    WindowType.HAMMING: "hamming",
    WindowType.BLACKMAN: "blackman",
    WindowType.NUTTALL: "nuttall",
}


def window_coefficients(
    window_type: WindowType | str,
    length: int,
    dtype: np.dtype | type = np.float64,
) -> np.ndarray | None:
    """Return symmetric window coefficients, or ``None`` for a rectangular window.

    Coefficients follow :func:`scipy.signal.get_window`: ``BLACKMAN`` is the
    classic three-term Blackman (0.42, 0.5, 0.08) and ``NUTTALL`` the minimum
    four-term Nuttall. Tables that use Blackman-Harris or the
    continuous-first-derivative Nuttall variant differ slightly.
    """
    kind = WindowType.parse(window_type)
    if kind is WindowType.NONE:
        return None
    win = get_window(_SCIPY_NAMES[kind], int(length), fftbins=False)
    return np.asarray(win, dtype=dtype)
