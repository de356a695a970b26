"""Command-line driver for streaming spectrogram computation."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import numpy as np
import soundfile as sf

from .benchmark import time_compute_column
from .configs import load_stream_config
from .core.engine import StreamingSTFT
from .logging_utils import JsonlLogger, column_summary, configure_logging
from .signal.windows import WindowType


LOGGER = logging.getLogger(__name__)


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config with 'stft' and 'runtime' sections.",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        help="Config override in dotlist form, e.g. stft.window_size=2048.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stftstream",
        description="Streaming short-time Fourier transform",
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("windows", help="Print available window names")

    info = commands.add_parser("info", help="Print derived sizes and time axis")
    _add_config_args(info)
    info.add_argument("--sample-rate", type=float, default=44100.0)

    run = commands.add_parser("run", help="Stream a WAV file through the STFT")
    run.add_argument("input_wav", type=Path, help="Path to input WAV.")
    _add_config_args(run)
    run.add_argument(
        "--jsonl",
        type=Path,
        default=None,
        help="Write one summary record per column to this JSONL file.",
    )

    bench = commands.add_parser("bench", help="Time compute_column")
    bench.add_argument("--window-size", type=int, default=1024)
    bench.add_argument("--precision", choices=("float32", "float64"), default="float64")
    bench.add_argument("--repeats", type=int, default=1000)
    return parser


def windows_command(args: argparse.Namespace) -> None:
    del args
    for window_type in WindowType.values():
        print(window_type)


def info_command(args: argparse.Namespace) -> None:
    cfg = load_stream_config(args.config, overrides=args.set)
    stft = StreamingSTFT.from_config(cfg.stft)
    print(f"window: {WindowType.parse(cfg.stft.window)}")
    print(f"window_size: {stft.window_size}")
    print(f"step_size: {stft.step_size}")
    print(f"fft_size: {stft.fft_size}")
    print(f"output_size: {stft.output_size}")
    print(f"first_time_sec: {stft.first_time(args.sample_rate):.6f}")
    print(f"time_interval_sec: {stft.time_interval(args.sample_rate):.6f}")


def run_command(args: argparse.Namespace) -> int:
    """Stream ``input_wav`` chunk by chunk and return the column count."""
    cfg = load_stream_config(args.config, overrides=args.set)
    configure_logging(cfg.runtime.log_level)
    if cfg.runtime.chunk_size <= 0:
        raise ValueError("runtime.chunk_size must be a positive integer")

    audio, sample_rate = sf.read(args.input_wav, always_2d=True)
    mono = np.asarray(audio).mean(axis=1)
    stft = StreamingSTFT.from_config(cfg.stft)
    freqs = stft.freqs(sample_rate)
    LOGGER.info(
        "Streaming %s: %d samples @ %d Hz, %r",
        args.input_wav,
        mono.shape[0],
        sample_rate,
        stft,
    )

    jsonl_path = args.jsonl or cfg.runtime.jsonl_path
    sink = JsonlLogger(jsonl_path) if jsonl_path else None
    n_columns = 0
    for start in range(0, mono.shape[0], cfg.runtime.chunk_size):
        chunk = mono[start : start + cfg.runtime.chunk_size]
        for column in stft.iter_columns(chunk, kind="log"):
            if sink is not None:
                time_sec = stft.first_time(sample_rate) + n_columns * stft.time_interval(
                    sample_rate
                )
                sink.write(column_summary(n_columns, column, freqs, time_sec=time_sec))
            n_columns += 1

    LOGGER.info(
        "Computed %d columns (%d samples left buffered)", n_columns, len(stft)
    )
    if sink is not None:
        LOGGER.info("Column summaries: %s", sink.path)
    return n_columns


def bench_command(args: argparse.Namespace) -> None:
    result = time_compute_column(
        args.window_size,
        precision=args.precision,
        repeats=args.repeats,
    )
    print(
        f"compute_column window_size={result.window_size} precision={result.precision}: "
        f"{result.per_column_sec * 1e6:.2f} us/column over {result.repeats} repeats"
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "windows":
        windows_command(args)
    elif args.command == "info":
        info_command(args)
    elif args.command == "run":
        run_command(args)
    elif args.command == "bench":
        bench_command(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
