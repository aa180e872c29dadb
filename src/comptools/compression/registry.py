from __future__ import annotations

from collections.abc import Callable

from comptools.compression.adapter_base import CompressionAdapter
from comptools.compression.codec_deflate import Deflate
from comptools.compression.codec_gzip import GZip
from comptools.compression.codec_zlib import ZLib
from comptools.compression.codec_zstd import Zstd, have_zstd
from comptools.errors import ConfigError
from comptools.options import CodecOptions

_ALIASES = {"gz": "gzip"}

_FACTORIES: dict[str, Callable[[CodecOptions | None], CompressionAdapter]] = {
    "gzip": GZip,
    "deflate": Deflate,
    "zlib": ZLib,
    "zstd": Zstd,
    "zstd_tight": lambda options: Zstd(options, tight=True),
}

CODEC_IDS: tuple[str, ...] = tuple(_FACTORIES)


def normalize_codec_id(codec_id: str) -> str:
    if not isinstance(codec_id, str) or not codec_id.strip():
        raise ConfigError(f"codec id must be a non-empty string, got {codec_id!r}")
    cid = codec_id.strip().lower()
    cid = _ALIASES.get(cid, cid)
    if cid not in CODEC_IDS:
        raise ConfigError(f"unsupported codec: {codec_id!r} (known: {', '.join(CODEC_IDS)})")
    return cid


def get_adapter(codec_id: str, options: CodecOptions | None = None) -> CompressionAdapter:
    """Build the adapter for ``codec_id`` ('gzip', 'deflate', 'zlib', 'zstd', 'zstd_tight')."""
    return _FACTORIES[normalize_codec_id(codec_id)](options)


def available_codecs() -> tuple[str, ...]:
    """Codec ids whose backend can actually be used in this interpreter."""
    return tuple(c for c in CODEC_IDS if have_zstd() or not c.startswith("zstd"))
