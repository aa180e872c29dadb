"""Codec options (v1) for comptools.

The text encoding and compression level used by the adapters travel as one
explicit value instead of per-call keyword defaults.

Options can also be loaded from JSON, kept small and strict:
  - JSON object only (inline or ``@file.json``)
  - explicit schema id
  - unknown keys are rejected
"""

from __future__ import annotations

import codecs
import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from comptools.compression.levels import CompressionLevel, parse_level
from comptools.errors import ConfigError

SPEC_ID_V1 = "comptools.codec_options.v1"

DEFAULT_ENCODING = "utf-8"
DEFAULT_LEVEL = CompressionLevel.OPTIMAL


def _canonical_encoding(encoding: str) -> str:
    if not isinstance(encoding, str) or not encoding.strip():
        raise ConfigError(f"encoding must be a non-empty string, got {encoding!r}")
    try:
        return codecs.lookup(encoding.strip()).name
    except LookupError as e:
        raise ConfigError(f"unknown text encoding: {encoding!r}") from e


@dataclass(frozen=True)
class CodecOptions:
    """Text encoding and compression level for one adapter."""

    encoding: str = DEFAULT_ENCODING
    level: CompressionLevel = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "encoding", _canonical_encoding(self.encoding))
        if not isinstance(self.level, CompressionLevel):
            raise ConfigError(f"level must be a CompressionLevel, got {self.level!r}")

    def with_(
        self,
        *,
        encoding: str | None = None,
        level: CompressionLevel | str | None = None,
    ) -> CodecOptions:
        changes: dict[str, Any] = {}
        if encoding is not None:
            changes["encoding"] = encoding
        if level is not None:
            changes["level"] = parse_level(level)
        return dataclasses.replace(self, **changes)


DEFAULT_CODEC_OPTIONS = CodecOptions()


def _load_json_arg(options_arg: str) -> dict[str, Any]:
    s = options_arg.strip()
    if not s:
        raise ConfigError("codec options: empty argument")

    if s.startswith("@"):
        p = Path(s[1:]).expanduser()
        if not p.is_file():
            raise ConfigError(f"codec options: file not found: {p}")
        raw = p.read_text(encoding="utf-8")
        where = f"in {p}"
    else:
        raw = s
        where = "inline"

    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"codec options: invalid JSON {where}: {e}") from e
    if not isinstance(obj, dict):
        raise ConfigError(f"codec options: JSON {where} must be an object")
    return obj


def load_codec_options(options_arg: str) -> CodecOptions:
    """Load and validate codec options.

    options_arg:
      - '@file.json'
      - inline JSON object, e.g. '{"spec": "comptools.codec_options.v1", "level": "fastest"}'
    """
    obj = _load_json_arg(options_arg)

    allowed = {"spec", "encoding", "level"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise ConfigError(f"codec options: unsupported keys: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise ConfigError(
            f"codec options: unsupported spec {spec_id!r} (expected {SPEC_ID_V1!r})"
        )

    encoding = obj.get("encoding", DEFAULT_ENCODING)
    if not isinstance(encoding, str):
        raise ConfigError("codec options: 'encoding' must be a string")

    level = obj.get("level", DEFAULT_LEVEL.value)
    if not isinstance(level, str):
        raise ConfigError("codec options: 'level' must be a string")

    return CodecOptions(encoding=encoding, level=parse_level(level))
