from __future__ import annotations

import base64
import binascii
import logging
from abc import ABC, abstractmethod

from comptools.errors import InvalidBase64, TextEncodingError
from comptools.options import DEFAULT_CODEC_OPTIONS, CodecOptions

logger = logging.getLogger(__name__)


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _require_bytes(data: object, what: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, got {type(data).__name__}")
    return bytes(data)


def _b64decode(text: str | bytes) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidBase64(f"invalid Base64 input: {e}") from e


class CompressionAdapter(ABC):
    """
    Bytes / text / Base64 front-end over one external compression codec.

    Subclasses only provide ``_compress`` and ``_decompress`` for a non-empty
    payload. Everything else is marshaling:

      - None in -> None out
      - empty in -> empty out (b"" or "")
      - errors from the codec, Base64 or the text codec propagate as typed errors
    """

    codec_id: str

    def __init__(self, options: CodecOptions | None = None):
        self.options = DEFAULT_CODEC_OPTIONS if options is None else options

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={self.options!r})"

    @abstractmethod
    def _compress(self, data: bytes) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def _decompress(self, data: bytes) -> bytes:
        raise NotImplementedError

    # bytes

    def compress(self, data: bytes | bytearray | memoryview | None) -> bytes | None:
        if data is None:
            return None
        raw = _require_bytes(data, "data")
        if not raw:
            return b""
        out = self._compress(raw)
        logger.debug(
            "%s: compressed %d -> %d bytes (level=%s)",
            self.codec_id,
            len(raw),
            len(out),
            self.options.level.value,
        )
        return out

    def decompress(self, data: bytes | bytearray | memoryview | None) -> bytes | None:
        if data is None:
            return None
        comp = _require_bytes(data, "comp")
        if not comp:
            return b""
        out = self._decompress(comp)
        logger.debug("%s: decompressed %d -> %d bytes", self.codec_id, len(comp), len(out))
        return out

    # text

    def _encode(self, text: str) -> bytes:
        try:
            return text.encode(self.options.encoding)
        except UnicodeError as e:
            raise TextEncodingError(
                f"{self.codec_id}: text not representable in {self.options.encoding}: {e}"
            ) from e

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode(self.options.encoding)
        except UnicodeError as e:
            raise TextEncodingError(
                f"{self.codec_id}: payload is not valid {self.options.encoding}: {e}"
            ) from e

    def compress_text(self, text: str | None) -> bytes | None:
        if text is None:
            return None
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        if not text:
            return b""
        return self.compress(self._encode(text))

    def decompress_text(self, data: bytes | bytearray | memoryview | None) -> str | None:
        out = self.decompress(data)
        if out is None:
            return None
        return self._decode(out)

    # Base64

    def compress_to_base64(self, data: bytes | bytearray | memoryview | None) -> str | None:
        out = self.compress(data)
        return None if out is None else _b64encode(out)

    def compress_text_to_base64(self, text: str | None) -> str | None:
        out = self.compress_text(text)
        return None if out is None else _b64encode(out)

    def decompress_from_base64(self, text: str | bytes | None) -> bytes | None:
        if text is None:
            return None
        return self.decompress(_b64decode(text))

    def decompress_text_from_base64(self, text: str | bytes | None) -> str | None:
        if text is None:
            return None
        return self.decompress_text(_b64decode(text))
