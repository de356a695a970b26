from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from stftstream import JsonlLogger
from stftstream.logging_utils import column_summary


def test_jsonl_logger_appends_records(tmp_path: Path) -> None:
    logger = JsonlLogger(tmp_path / "nested" / "log.jsonl")
    logger.write({"column": 0})
    logger.write_many([{"column": 1}, {"column": 2}])

    lines = logger.path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["column"] for line in lines] == [0, 1, 2]


def test_column_summary_reports_peak() -> None:
    freqs = np.array([0.0, 100.0, 200.0])
    record = column_summary(3, np.array([0.1, 2.5, 1.0]), freqs, time_sec=0.25)
    assert record == {
        "column": 3,
        "time_sec": 0.25,
        "peak_bin": 1,
        "peak_freq_hz": 100.0,
        "peak_value": 2.5,
    }


def test_column_summary_rejects_shape_mismatch() -> None:
    with pytest.raises(ValueError, match="does not match"):
        column_summary(0, np.zeros(3), np.zeros(4), time_sec=0.0)
