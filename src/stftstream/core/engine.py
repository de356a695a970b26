"""Streaming short-time Fourier transform engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Literal, Sequence

import numpy as np

from ..errors import InsufficientSamples, InvalidConfiguration, SizeMismatch
from ..signal.fft import ScipyFFT
from ..signal.numeric import log10_positive
from ..signal.ring import SampleRing
from ..signal.windows import WindowType, window_coefficients
from .interfaces import SampleBuffer, TransformEngine

if TYPE_CHECKING:
    from ..configs import STFTConfig


LOGGER = logging.getLogger(__name__)

ColumnKind = Literal["complex", "magnitude", "log"]

_COMPLEX_DTYPES: dict[np.dtype, np.dtype] = {
    np.dtype(np.float32): np.dtype(np.complex64),
    np.dtype(np.float64): np.dtype(np.complex128),
}


def _validate_sizes(window_size: int, step_size: int, fft_size: int) -> None:
    if step_size <= 0:
        raise InvalidConfiguration(f"step_size must be positive, got {step_size}")
    if step_size >= window_size:
        raise InvalidConfiguration(
            f"step_size must be smaller than window_size: "
            f"got step_size={step_size}, window_size={window_size}"
        )
    if fft_size < window_size:
        raise InvalidConfiguration(
            f"fft_size must be at least window_size: "
            f"got fft_size={fft_size}, window_size={window_size}"
        )


def _resolve_dtype(dtype: np.dtype | type | str) -> np.dtype:
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise InvalidConfiguration(f"Unsupported sample dtype: {dtype!r}") from exc
    if resolved not in _COMPLEX_DTYPES:
        raise InvalidConfiguration(
            f"Unsupported sample dtype {resolved}; use float32 or float64"
        )
    return resolved


class StreamingSTFT:
    """Short-time Fourier transform over samples that arrive in chunks.

    Samples are buffered until ``window_size`` of them are available. Each
    ``compute_*`` call reads (without consuming) the first ``window_size``
    samples, applies the window, zero-pads to ``fft_size``, transforms, and
    writes the lower ``fft_size // 2`` bins into the output buffer. Calling a
    compute method again before :meth:`move_to_next_column` yields the same
    column. :meth:`move_to_next_column` drops ``step_size`` samples, so
    consecutive columns overlap by ``window_size - step_size`` samples.

    Examples
    --------
    Compute a log-magnitude spectrogram from audio read in 3000-sample chunks:

    ```python

       import numpy as np
       from stftstream import StreamingSTFT, WindowType

       stft = StreamingSTFT(WindowType.HANNING, window_size=1024, step_size=512)
       column = np.zeros(stft.output_size)
       for chunk in np.array_split(np.random.randn(44100), 15):
           stft.append_samples(chunk)
           while stft.contains_enough_to_compute():
               stft.compute_column(column)
               ...  # use column
               stft.move_to_next_column()
    ```

    Instances hold private scratch buffers and are not thread-safe; use one
    engine per stream.
    """

    def __init__(
        self,
        window_type: WindowType | str,
        window_size: int,
        step_size: int,
        *,
        fft_size: int | None = None,
        dtype: np.dtype | type | str = np.float64,
        fft_engine: TransformEngine | None = None,
    ) -> None:
        kind = WindowType.parse(window_type)
        window_size = int(window_size)
        step_size = int(step_size)
        fft_size = window_size if fft_size is None else int(fft_size)
        _validate_sizes(window_size, step_size, fft_size)
        resolved = _resolve_dtype(dtype)
        self._setup(
            window_coefficients(kind, window_size, resolved),
            window_size,
            step_size,
            fft_size,
            resolved,
            fft_engine,
        )
        LOGGER.debug(
            "StreamingSTFT window=%s window_size=%d step_size=%d fft_size=%d dtype=%s",
            kind,
            window_size,
            step_size,
            fft_size,
            resolved,
        )

    @classmethod
    def with_zero_padding(
        cls,
        window_type: WindowType | str,
        window_size: int,
        fft_size: int,
        step_size: int,
        *,
        dtype: np.dtype | type | str = np.float64,
        fft_engine: TransformEngine | None = None,
    ) -> "StreamingSTFT":
        """Build an engine whose windows are zero-padded to ``fft_size``."""
        return cls(
            window_type,
            window_size,
            step_size,
            fft_size=fft_size,
            dtype=dtype,
            fft_engine=fft_engine,
        )

    @classmethod
    def from_window(
        cls,
        window: Sequence[float] | np.ndarray | None,
        window_size: int,
        step_size: int,
        *,
        fft_size: int | None = None,
        dtype: np.dtype | type | str = np.float64,
        fft_engine: TransformEngine | None = None,
    ) -> "StreamingSTFT":
        """Build an engine from explicit window coefficients.

        ``window=None`` selects a rectangular window.
        """
        window_size = int(window_size)
        step_size = int(step_size)
        fft_size = window_size if fft_size is None else int(fft_size)
        _validate_sizes(window_size, step_size, fft_size)
        resolved = _resolve_dtype(dtype)
        coefficients = None
        if window is not None:
            coefficients = np.array(window, dtype=resolved).reshape(-1)
            if coefficients.shape[0] != window_size:
                raise InvalidConfiguration(
                    f"window has {coefficients.shape[0]} coefficients, "
                    f"expected window_size={window_size}"
                )
        obj = cls.__new__(cls)
        obj._setup(coefficients, window_size, step_size, fft_size, resolved, fft_engine)
        LOGGER.debug(
            "StreamingSTFT explicit window=%s window_size=%d step_size=%d fft_size=%d",
            "rectangular" if coefficients is None else "custom",
            window_size,
            step_size,
            fft_size,
        )
        return obj

    @classmethod
    def from_config(
        cls,
        config: "STFTConfig",
        *,
        fft_engine: TransformEngine | None = None,
    ) -> "StreamingSTFT":
        """Build an engine from a decoded :class:`STFTConfig`."""
        return cls(
            config.window,
            config.window_size,
            config.step_size,
            fft_size=config.fft_size,
            dtype=config.precision,
            fft_engine=fft_engine,
        )

    def _setup(
        self,
        window: np.ndarray | None,
        window_size: int,
        step_size: int,
        fft_size: int,
        dtype: np.dtype,
        fft_engine: TransformEngine | None,
    ) -> None:
        if fft_engine is None:
            fft_engine = ScipyFFT(fft_size)
        elif fft_engine.size != fft_size:
            raise InvalidConfiguration(
                f"fft_engine size {fft_engine.size} does not match fft_size={fft_size}"
            )
        self._window_size = window_size
        self._step_size = step_size
        self._fft_size = fft_size
        self.dtype = dtype
        self.complex_dtype = _COMPLEX_DTYPES[dtype]
        if window is not None:
            window.setflags(write=False)
        self._window = window
        self._fft = fft_engine
        self._ring: SampleBuffer = SampleRing(dtype, capacity=2 * window_size)
        self._real_input = np.zeros(window_size, dtype=dtype)
        self._complex_buffer = np.zeros(fft_size, dtype=self.complex_dtype)
        self._scratch = np.zeros(
            fft_engine.required_scratch_length(), dtype=self.complex_dtype
        )

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def step_size(self) -> int:
        return self._step_size

    @property
    def fft_size(self) -> int:
        return self._fft_size

    @property
    def window(self) -> np.ndarray | None:
        """Read-only window coefficients, or ``None`` for a rectangular window."""
        return self._window

    @property
    def output_size(self) -> int:
        """Number of bins per column, ``fft_size // 2``."""
        return self._fft_size // 2

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(window_size={self._window_size}, "
            f"step_size={self._step_size}, fft_size={self._fft_size}, "
            f"dtype={self.dtype}, buffered={len(self)})"
        )

    def append_samples(self, samples: Sequence[float] | np.ndarray) -> None:
        """Append a 1-D sequence of samples to the internal buffer."""
        values = np.asarray(samples)
        if values.ndim > 1:
            raise ValueError(
                f"samples must be a 1-D sequence, got shape {values.shape}"
            )
        self._ring.push_back(values)

    def contains_enough_to_compute(self) -> bool:
        return len(self._ring) >= self._window_size

    def move_to_next_column(self) -> None:
        """Drop ``step_size`` samples from the front of the buffer."""
        self._ring.drop_front(self._step_size)

    def _prepare_output(
        self, out: np.ndarray | None, dtype: np.dtype
    ) -> np.ndarray:
        if not self.contains_enough_to_compute():
            raise InsufficientSamples(
                f"need {self._window_size} buffered samples, have {len(self._ring)}"
            )
        if out is None:
            return np.zeros(self.output_size, dtype=dtype)
        if not isinstance(out, np.ndarray):
            raise TypeError(
                f"output buffer must be a numpy array, got {type(out).__name__}"
            )
        if out.ndim != 1 or out.shape[0] != self.output_size:
            raise SizeMismatch(
                f"output buffer must have length {self.output_size}, got shape {out.shape}"
            )
        return out

    def _transform_window(self) -> np.ndarray:
        self._ring.peek_front(self._real_input)
        if self._window is not None:
            np.multiply(self._real_input, self._window, out=self._real_input)
        self._complex_buffer[: self._window_size] = self._real_input
        self._complex_buffer[self._window_size :] = 0
        self._fft.transform_in_place(self._complex_buffer, self._scratch)
        return self._complex_buffer[: self.output_size]

    def compute_complex_column(self, out: np.ndarray | None = None) -> np.ndarray:
        """Compute the complex spectrum of the current window."""
        if isinstance(out, np.ndarray) and not np.iscomplexobj(out):
            raise TypeError("compute_complex_column requires a complex output buffer")
        out = self._prepare_output(out, self.complex_dtype)
        out[:] = self._transform_window()
        return out

    def compute_magnitude_column(self, out: np.ndarray | None = None) -> np.ndarray:
        """Compute the magnitude spectrum of the current window."""
        _require_floating(out, "compute_magnitude_column")
        out = self._prepare_output(out, self.dtype)
        out[:] = np.abs(self._transform_window())
        return out

    def compute_column(self, out: np.ndarray | None = None) -> np.ndarray:
        """Compute the log10-magnitude spectrum, clamped at zero."""
        _require_floating(out, "compute_column")
        out = self._prepare_output(out, self.dtype)
        out[:] = log10_positive(np.abs(self._transform_window()))
        return out

    def iter_columns(
        self,
        samples: Sequence[float] | np.ndarray | None = None,
        *,
        kind: ColumnKind = "log",
    ) -> Iterator[np.ndarray]:
        """Append ``samples`` and yield every column that becomes computable.

        Samples are appended immediately; each yielded column is a fresh array
        and the engine advances by ``step_size`` after every column.
        """
        if kind not in ("complex", "magnitude", "log"):
            raise ValueError(
                f"Unknown column kind '{kind}'. Expected 'complex', 'magnitude', or 'log'."
            )
        if samples is not None:
            self.append_samples(samples)
        return self._drain(kind)

    def _drain(self, kind: ColumnKind) -> Iterator[np.ndarray]:
        while self.contains_enough_to_compute():
            if kind == "complex":
                column = self.compute_complex_column()
            elif kind == "magnitude":
                column = self.compute_magnitude_column()
            else:
                column = self.compute_column()
            self.move_to_next_column()
            yield column

    def process_stream(
        self,
        samples: Sequence[float] | np.ndarray,
        *,
        kind: ColumnKind = "log",
    ) -> np.ndarray:
        """Append ``samples`` and stack all computable columns on the last axis.

        Returns an array shaped ``(output_size, n_columns)``; ``n_columns`` may
        be zero.
        """
        columns = list(self.iter_columns(samples, kind=kind))
        if not columns:
            dtype = self.complex_dtype if kind == "complex" else self.dtype
            return np.zeros((self.output_size, 0), dtype=dtype)
        return np.stack(columns, axis=-1)

    def freqs(self, sample_rate: float) -> np.ndarray:
        """Frequency of each output bin, linear from 0 to Nyquist."""
        sample_rate = _check_sample_rate(sample_rate)
        n_bins = self.output_size
        if n_bins == 1:
            return np.zeros(1)
        return np.arange(n_bins) / (n_bins - 1) * (sample_rate / 2.0)

    def first_time(self, sample_rate: float) -> float:
        """Time in seconds of the centre of the first column."""
        return self._window_size / (2.0 * _check_sample_rate(sample_rate))

    def time_interval(self, sample_rate: float) -> float:
        """Seconds between consecutive columns."""
        return self._step_size / _check_sample_rate(sample_rate)


def _check_sample_rate(sample_rate: float) -> float:
    value = float(sample_rate)
    if not value > 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    return value


def _require_floating(out: np.ndarray | None, method: str) -> None:
    if isinstance(out, np.ndarray) and not np.issubdtype(out.dtype, np.floating):
        raise TypeError(f"{method} requires a floating output buffer, got {out.dtype}")
