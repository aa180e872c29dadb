from __future__ import annotations

import logging

import pytest

from comptools.compression import codec_zstd
from comptools.compression.codec_zstd import Zstd, have_zstd
from comptools.compression.registry import available_codecs, get_adapter
from comptools.errors import CodecUnavailable


@pytest.fixture
def no_zstandard(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(codec_zstd, "zstd", None)


@pytest.mark.parametrize("tight", [False, True])
def test_every_operation_raises_when_backend_missing(no_zstandard: None, tight: bool) -> None:
    z = Zstd(tight=tight)
    with pytest.raises(CodecUnavailable, match="zstandard"):
        z.compress(b"x")
    with pytest.raises(CodecUnavailable):
        z.decompress(b"x")
    with pytest.raises(CodecUnavailable):
        z.compress_text_to_base64("x")
    with pytest.raises(CodecUnavailable):
        z.decompress_from_base64("eA==")


def test_missing_backend_is_a_runtime_error(no_zstandard: None) -> None:
    with pytest.raises(RuntimeError):
        get_adapter("zstd").compress(b"x")


def test_missing_backend_logs_warning(
    no_zstandard: None, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="comptools.compression.codec_zstd"):
        with pytest.raises(CodecUnavailable):
            Zstd().compress(b"x")
    assert any(
        r.levelno == logging.WARNING and "zstandard" in r.getMessage() for r in caplog.records
    )


def test_available_codecs_drops_zstd(no_zstandard: None) -> None:
    assert have_zstd() is False
    got = available_codecs()
    assert got == ("gzip", "deflate", "zlib")
    assert not any(c.startswith("zstd") for c in got)


def test_empty_input_needs_no_backend(no_zstandard: None) -> None:
    z = Zstd()
    assert z.compress(b"") == b""
    assert z.decompress(None) is None
