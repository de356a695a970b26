"""Typed configuration for streaming STFT runs, decoded through OmegaConf."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import importlib
from pathlib import Path
from typing import Any, Iterable, Mapping, TypeVar, cast

import yaml

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:  # pragma: no cover
    raise RuntimeError(
        "stftstream requires 'omegaconf'. Install dependencies with `uv sync`."
    ) from exc


@dataclass
class STFTConfig:
    """Streaming STFT configuration schema.

    ``fft_size=None`` means no zero-padding (``fft_size == window_size``).
    """

    window: str = "hann"
    window_size: int = 1024
    step_size: int = 512
    fft_size: int | None = None
    precision: str = "float64"


@dataclass
class RuntimeConfig:
    """Runtime options for the command-line driver."""

    log_level: str = "INFO"
    chunk_size: int = 3000
    jsonl_path: str | None = None


@dataclass
class StreamConfig:
    """Top-level configuration schema."""

    stft: STFTConfig = field(default_factory=STFTConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


TSchema = TypeVar("TSchema")


def _as_str_key_dict(value: Any, *, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"Expected mapping in {context}, got {type(value)!r}")
    return {str(key): item for key, item in value.items()}


def _decode_schema(
    data: Mapping[str, object],
    schema: type[TSchema],
) -> TSchema:
    base = OmegaConf.structured(schema)
    loaded = OmegaConf.create(dict(data))
    merged = OmegaConf.merge(base, loaded)
    decoded = OmegaConf.to_object(merged)
    if not isinstance(decoded, schema):
        raise TypeError(f"Failed to decode config as {schema.__name__}")
    return cast(TSchema, decoded)


def parse_stream_config(data: Mapping[str, object]) -> StreamConfig:
    """Decode a mapping into :class:`StreamConfig`."""
    return _decode_schema(data, StreamConfig)


def parse_stft_config(data: Mapping[str, object]) -> STFTConfig:
    """Decode a mapping into :class:`STFTConfig`."""
    return _decode_schema(data, STFTConfig)


def stream_config_to_dict(config: StreamConfig) -> dict[str, Any]:
    return asdict(config)


def load_yaml(
    path: str | Path,
    *,
    overrides: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Load a YAML file into a dictionary, with optional dotlist overrides."""
    override_list = [item for item in (overrides or []) if item]
    cfg = OmegaConf.load(Path(path))
    if override_list:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(override_list))
    loaded = OmegaConf.to_container(cfg, resolve=True)
    return _as_str_key_dict(loaded, context=str(path))


def merge_overrides(
    data: Mapping[str, Any],
    overrides: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Merge ``key.sub=value`` dotlist overrides into a mapping."""
    override_list = [item for item in (overrides or []) if item]
    if not override_list:
        return dict(data)
    merged = OmegaConf.merge(
        OmegaConf.create(dict(data)), OmegaConf.from_dotlist(override_list)
    )
    container = OmegaConf.to_container(merged, resolve=True)
    return _as_str_key_dict(container, context="merged overrides")


def load_stream_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] | None = None,
) -> StreamConfig:
    """Load a YAML config (or the defaults when ``path`` is ``None``)."""
    raw = {} if path is None else load_yaml(path)
    return parse_stream_config(merge_overrides(raw, overrides))


def save_yaml(path: str | Path, data: Mapping[str, Any]) -> None:
    """Write dictionary data to a YAML file."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(dict(data), handle, sort_keys=False)
