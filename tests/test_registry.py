from __future__ import annotations

import pytest

from comptools.compression.codec_deflate import Deflate
from comptools.compression.codec_gzip import GZip
from comptools.compression.codec_zlib import ZLib
from comptools.compression.codec_zstd import Zstd, have_zstd
from comptools.compression.levels import CompressionLevel
from comptools.compression.registry import (
    CODEC_IDS,
    available_codecs,
    get_adapter,
    normalize_codec_id,
)
from comptools.errors import ConfigError
from comptools.options import CodecOptions


@pytest.mark.parametrize(
    "cid,cls",
    [("gzip", GZip), ("GZ", GZip), (" deflate ", Deflate), ("zlib", ZLib), ("zstd", Zstd)],
)
def test_get_adapter(cid: str, cls: type) -> None:
    assert type(get_adapter(cid)) is cls


def test_get_adapter_zstd_tight() -> None:
    a = get_adapter("zstd_tight")
    assert isinstance(a, Zstd)
    assert a.tight is True


def test_get_adapter_passes_options() -> None:
    opts = CodecOptions(level=CompressionLevel.FASTEST)
    assert get_adapter("deflate", opts).options is opts


def test_unknown_codec() -> None:
    with pytest.raises(ConfigError, match="unsupported codec"):
        get_adapter("lzma")
    with pytest.raises(ConfigError):
        normalize_codec_id("")


def test_available_codecs() -> None:
    got = available_codecs()
    assert {"gzip", "deflate", "zlib"} <= set(got)
    assert set(got) <= set(CODEC_IDS)
    assert ("zstd" in got) == have_zstd()


def test_every_codec_id_builds_an_adapter() -> None:
    assert CODEC_IDS == ("gzip", "deflate", "zlib", "zstd", "zstd_tight")
    opts = CodecOptions(level=CompressionLevel.SMALLEST_SIZE)
    for cid in CODEC_IDS:
        a = get_adapter(cid, opts)
        assert cid.startswith(a.codec_id)
        assert a.options is opts
