"""Streaming STFT engine and its collaborator protocols."""

from .engine import ColumnKind, StreamingSTFT
from .interfaces import SampleBuffer, TransformEngine

__all__ = ["ColumnKind", "SampleBuffer", "StreamingSTFT", "TransformEngine"]
