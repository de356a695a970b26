"""stftstream public API."""

from .configs import (
    RuntimeConfig,
    STFTConfig,
    StreamConfig,
    load_stream_config,
    load_yaml,
    save_yaml,
)
from .core import StreamingSTFT, TransformEngine
from .errors import (
    InsufficientSamples,
    InvalidConfiguration,
    SizeMismatch,
    STFTError,
    UnrecognizedWindowName,
)
from .logging_utils import JsonlLogger
from .signal import ScipyFFT, WindowType, log10_positive, window_coefficients

__all__ = [
    "StreamingSTFT",
    "TransformEngine",
    "ScipyFFT",
    "WindowType",
    "window_coefficients",
    "log10_positive",
    "STFTError",
    "InvalidConfiguration",
    "InsufficientSamples",
    "SizeMismatch",
    "UnrecognizedWindowName",
    "STFTConfig",
    "RuntimeConfig",
    "StreamConfig",
    "load_stream_config",
    "load_yaml",
    "save_yaml",
    "JsonlLogger",
]
