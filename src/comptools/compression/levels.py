from __future__ import annotations

from enum import Enum

from comptools.errors import ConfigError


class CompressionLevel(Enum):
    """Speed/size hint forwarded to the codec.

    Each adapter maps the hint to its own native level; see ``LEVELS`` on the
    adapter classes.
    """

    FASTEST = "fastest"
    OPTIMAL = "optimal"
    NO_COMPRESSION = "no_compression"
    SMALLEST_SIZE = "smallest_size"


# zlib / gzip / raw deflate share the same 0..9 scale.
ZLIB_LEVELS: dict[CompressionLevel, int] = {
    CompressionLevel.NO_COMPRESSION: 0,
    CompressionLevel.FASTEST: 1,
    CompressionLevel.OPTIMAL: 6,
    CompressionLevel.SMALLEST_SIZE: 9,
}


def parse_level(name: str | CompressionLevel) -> CompressionLevel:
    """'smallest-size', 'SMALLEST_SIZE', 'Smallest_Size' -> SMALLEST_SIZE."""
    if isinstance(name, CompressionLevel):
        return name
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"compression level must be a non-empty string, got {name!r}")
    key = name.strip().lower().replace("-", "_")
    try:
        return CompressionLevel(key)
    except ValueError as e:
        known = ", ".join(m.value for m in CompressionLevel)
        raise ConfigError(f"unknown compression level {name!r} (expected one of: {known})") from e
