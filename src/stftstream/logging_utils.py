"""Logging helpers: console configuration and JSONL column summaries."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np


def configure_logging(level: str) -> None:
    """Configure logging format and level for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )


class JsonlLogger:
    """Append JSON-serializable records to a JSON Lines file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, record: Mapping[str, Any]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(dict(record), ensure_ascii=False) + "\n")

    def write_many(self, records: Iterable[Mapping[str, Any]]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            for record in records:
                handle.write(json.dumps(dict(record), ensure_ascii=False) + "\n")


def column_summary(
    index: int,
    column: np.ndarray,
    freqs: np.ndarray,
    *,
    time_sec: float,
) -> dict[str, Any]:
    """Summarize one spectrogram column as a flat JSON-friendly record."""
    if column.shape != freqs.shape:
        raise ValueError(
            f"column shape {column.shape} does not match freqs shape {freqs.shape}"
        )
    peak = int(np.argmax(column))
    return {
        "column": int(index),
        "time_sec": float(time_sec),
        "peak_bin": peak,
        "peak_freq_hz": float(freqs[peak]),
        "peak_value": float(column[peak]),
    }
