"""Example: stream synthetic audio through the STFT in fixed-size chunks.

Usage
-----
``uv run python examples/stream_spectrogram.py --seconds 10 --chunk-size 3000``
"""

from __future__ import annotations

import argparse
from typing import Sequence

import numpy as np

from stftstream import StreamingSTFT, WindowType


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute a log-magnitude spectrogram from chunked samples.",
    )
    parser.add_argument("--sample-rate", type=int, default=44100)
    parser.add_argument("--seconds", type=float, default=10.0)
    parser.add_argument("--chunk-size", type=int, default=3000)
    parser.add_argument("--window", type=str, default="hanning")
    parser.add_argument("--window-size", type=int, default=1024)
    parser.add_argument("--step-size", type=int, default=512)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    n_samples = int(args.sample_rate * args.seconds)
    t = np.arange(n_samples) / args.sample_rate
    sweep = np.sin(2 * np.pi * (200.0 + 400.0 * t) * t)

    stft = StreamingSTFT(WindowType.parse(args.window), args.window_size, args.step_size)
    column = np.zeros(stft.output_size)
    freqs = stft.freqs(args.sample_rate)

    n_columns = 0
    for start in range(0, n_samples, args.chunk_size):
        stft.append_samples(sweep[start : start + args.chunk_size])
        while stft.contains_enough_to_compute():
            stft.compute_column(column)
            if n_columns % 100 == 0:
                time_sec = stft.first_time(args.sample_rate) + n_columns * stft.time_interval(
                    args.sample_rate
                )
                peak = freqs[int(np.argmax(column))]
                print(f"t={time_sec:7.3f}s peak={peak:8.1f} Hz")
            stft.move_to_next_column()
            n_columns += 1

    print(f"Computed {n_columns} columns; {len(stft)} samples left buffered.")


if __name__ == "__main__":
    main()
