"""Zstandard adapter over the ``zstandard`` package.

"tight" tries to minimise frame overhead:
  - no content size in the frame
  - no checksum
"""

from __future__ import annotations

import logging

from comptools.compression.adapter_base import CompressionAdapter
from comptools.compression.levels import CompressionLevel
from comptools.errors import CodecUnavailable, CorruptPayload
from comptools.options import CodecOptions

try:
    import zstandard as zstd  # type: ignore
except ImportError:  # pragma: no cover
    zstd = None

logger = logging.getLogger(__name__)

# zstd has no stored mode; the fastest negative level is the nearest match.
ZSTD_LEVELS: dict[CompressionLevel, int] = {
    CompressionLevel.NO_COMPRESSION: -7,
    CompressionLevel.FASTEST: 1,
    CompressionLevel.OPTIMAL: 3,
    CompressionLevel.SMALLEST_SIZE: 19,
}


def have_zstd() -> bool:
    return zstd is not None


class Zstd(CompressionAdapter):
    codec_id = "zstd"
    LEVELS = ZSTD_LEVELS

    def __init__(self, options: CodecOptions | None = None, *, tight: bool = False):
        super().__init__(options)
        self.tight = tight

    def __repr__(self) -> str:
        return f"Zstd(options={self.options!r}, tight={self.tight!r})"

    def _require(self) -> None:
        if zstd is None:
            logger.warning("zstd requested but the 'zstandard' module is not installed")
            raise CodecUnavailable(
                "module 'zstandard' not available. Install with: python3 -m pip install zstandard"
            )

    def _compress(self, data: bytes) -> bytes:
        self._require()
        level = self.LEVELS[self.options.level]
        if self.tight:
            c = zstd.ZstdCompressor(level=level, write_content_size=False, write_checksum=False)
        else:
            c = zstd.ZstdCompressor(level=level, write_checksum=True)
        return c.compress(data)

    def _decompress(self, data: bytes) -> bytes:
        self._require()
        # decompressobj copes with frames that carry no content size (tight mode)
        dobj = zstd.ZstdDecompressor().decompressobj()
        try:
            out = dobj.decompress(data)
        except zstd.ZstdError as e:
            raise CorruptPayload(f"zstd: corrupt stream: {e}") from e
        if not dobj.eof:
            raise CorruptPayload("zstd: truncated frame")
        if dobj.unused_data:
            raise CorruptPayload(f"zstd: {len(dobj.unused_data)} trailing bytes after frame end")
        return out
