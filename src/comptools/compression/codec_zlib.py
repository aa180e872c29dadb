from __future__ import annotations

import zlib

from comptools.compression.adapter_base import CompressionAdapter
from comptools.compression.levels import ZLIB_LEVELS
from comptools.errors import CorruptPayload


class ZLib(CompressionAdapter):
    """zlib (RFC 1950) container: deflate stream + 2-byte header + adler32."""

    codec_id = "zlib"
    LEVELS = ZLIB_LEVELS

    def _compress(self, data: bytes) -> bytes:
        return zlib.compress(data, self.LEVELS[self.options.level])

    def _decompress(self, data: bytes) -> bytes:
        d = zlib.decompressobj()
        try:
            out = d.decompress(data) + d.flush()
        except zlib.error as e:
            raise CorruptPayload(f"zlib: corrupt stream: {e}") from e
        if not d.eof:
            raise CorruptPayload("zlib: truncated stream")
        if d.unused_data:
            raise CorruptPayload(f"zlib: {len(d.unused_data)} trailing bytes after stream end")
        return out


_DEFAULT = ZLib()

compress = _DEFAULT.compress
compress_text = _DEFAULT.compress_text
compress_to_base64 = _DEFAULT.compress_to_base64
compress_text_to_base64 = _DEFAULT.compress_text_to_base64
decompress = _DEFAULT.decompress
decompress_text = _DEFAULT.decompress_text
decompress_from_base64 = _DEFAULT.decompress_from_base64
decompress_text_from_base64 = _DEFAULT.decompress_text_from_base64
