from __future__ import annotations

import json
from pathlib import Path

import pytest

from comptools.compression.levels import CompressionLevel, parse_level
from comptools.errors import ConfigError
from comptools.options import (
    DEFAULT_CODEC_OPTIONS,
    DEFAULT_ENCODING,
    DEFAULT_LEVEL,
    SPEC_ID_V1,
    CodecOptions,
    load_codec_options,
)


def test_defaults() -> None:
    assert DEFAULT_ENCODING == "utf-8"
    assert DEFAULT_LEVEL is CompressionLevel.OPTIMAL
    assert DEFAULT_CODEC_OPTIONS == CodecOptions("utf-8", CompressionLevel.OPTIMAL)


def test_encoding_is_canonicalised() -> None:
    assert CodecOptions(encoding="UTF8").encoding == "utf-8"
    assert CodecOptions(encoding=" latin1 ").encoding == "iso8859-1"


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(ConfigError):
        CodecOptions(encoding="no-such-codec")
    with pytest.raises(ConfigError):
        CodecOptions(encoding="")


def test_level_must_be_enum() -> None:
    with pytest.raises(ConfigError):
        CodecOptions(level="fastest")  # type: ignore[arg-type]


def test_with_returns_modified_copy() -> None:
    base = CodecOptions()
    fast = base.with_(level="fastest")
    assert fast.level is CompressionLevel.FASTEST
    assert fast.encoding == base.encoding
    assert base.level is CompressionLevel.OPTIMAL
    assert base.with_(encoding="utf-16").encoding == "utf-16"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("fastest", CompressionLevel.FASTEST),
        ("SMALLEST_SIZE", CompressionLevel.SMALLEST_SIZE),
        ("no-compression", CompressionLevel.NO_COMPRESSION),
        (" Optimal ", CompressionLevel.OPTIMAL),
    ],
)
def test_parse_level(name: str, expected: CompressionLevel) -> None:
    assert parse_level(name) is expected


def test_parse_level_unknown() -> None:
    with pytest.raises(ConfigError, match="unknown compression level"):
        parse_level("turbo")


def test_load_inline_json() -> None:
    spec = {"spec": SPEC_ID_V1, "encoding": "utf-16", "level": "smallest-size"}
    opts = load_codec_options(json.dumps(spec))
    assert opts == CodecOptions("utf-16", CompressionLevel.SMALLEST_SIZE)


def test_load_defaults_when_keys_missing() -> None:
    assert load_codec_options(json.dumps({"spec": SPEC_ID_V1})) == DEFAULT_CODEC_OPTIONS


def test_load_from_file(tmp_path: Path) -> None:
    p = tmp_path / "opts.json"
    p.write_text(json.dumps({"spec": SPEC_ID_V1, "level": "fastest"}), encoding="utf-8")
    assert load_codec_options(f"@{p}").level is CompressionLevel.FASTEST


@pytest.mark.parametrize(
    "arg",
    [
        "",
        "   ",
        "@/definitely/not/here.json",
        "{not json",
        "[1, 2]",
        json.dumps({"level": "fastest"}),
        json.dumps({"spec": "comptools.codec_options.v0"}),
        json.dumps({"spec": SPEC_ID_V1, "extra": 1}),
        json.dumps({"spec": SPEC_ID_V1, "level": 9}),
        json.dumps({"spec": SPEC_ID_V1, "encoding": None}),
        json.dumps({"spec": SPEC_ID_V1, "encoding": "klingon"}),
    ],
)
def test_load_rejects_invalid(arg: str) -> None:
    with pytest.raises(ConfigError):
        load_codec_options(arg)
