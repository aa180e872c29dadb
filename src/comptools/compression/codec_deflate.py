"""Raw DEFLATE (RFC 1951) adapter: no header, no checksum."""

from __future__ import annotations

import zlib

from comptools.compression.adapter_base import CompressionAdapter
from comptools.compression.levels import ZLIB_LEVELS
from comptools.errors import CorruptPayload

# negative wbits selects a raw stream in zlib
RAW_WBITS = -zlib.MAX_WBITS


class Deflate(CompressionAdapter):
    codec_id = "deflate"
    LEVELS = ZLIB_LEVELS

    def _compress(self, data: bytes) -> bytes:
        c = zlib.compressobj(self.LEVELS[self.options.level], zlib.DEFLATED, RAW_WBITS)
        return c.compress(data) + c.flush()

    def _decompress(self, data: bytes) -> bytes:
        d = zlib.decompressobj(RAW_WBITS)
        try:
            out = d.decompress(data) + d.flush()
        except zlib.error as e:
            raise CorruptPayload(f"deflate: corrupt stream: {e}") from e
        if not d.eof:
            raise CorruptPayload("deflate: truncated stream (no final block)")
        if d.unused_data:
            raise CorruptPayload(f"deflate: {len(d.unused_data)} trailing bytes after stream end")
        return out


_DEFAULT = Deflate()

compress = _DEFAULT.compress
compress_text = _DEFAULT.compress_text
compress_to_base64 = _DEFAULT.compress_to_base64
compress_text_to_base64 = _DEFAULT.compress_text_to_base64
decompress = _DEFAULT.decompress
decompress_text = _DEFAULT.decompress_text
decompress_from_base64 = _DEFAULT.decompress_from_base64
decompress_text_from_base64 = _DEFAULT.decompress_text_from_base64
