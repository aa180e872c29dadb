"""GZip (RFC 1952) adapter over the stdlib ``gzip`` module."""

from __future__ import annotations

import gzip
import zlib

from comptools.compression.adapter_base import CompressionAdapter
from comptools.compression.levels import ZLIB_LEVELS
from comptools.errors import CorruptPayload


class GZip(CompressionAdapter):
    """gzip container. mtime is written as 0 so equal input gives equal output."""

    codec_id = "gzip"
    LEVELS = ZLIB_LEVELS

    def _compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self.LEVELS[self.options.level], mtime=0)

    def _decompress(self, data: bytes) -> bytes:
        # gzip.decompress concatenates members and rejects trailing garbage
        try:
            return gzip.decompress(data)
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            raise CorruptPayload(f"gzip: corrupt or truncated stream: {e}") from e


_DEFAULT = GZip()

compress = _DEFAULT.compress
compress_text = _DEFAULT.compress_text
compress_to_base64 = _DEFAULT.compress_to_base64
compress_text_to_base64 = _DEFAULT.compress_text_to_base64
decompress = _DEFAULT.decompress
decompress_text = _DEFAULT.decompress_text
decompress_from_base64 = _DEFAULT.decompress_from_base64
decompress_text_from_base64 = _DEFAULT.decompress_text_from_base64
