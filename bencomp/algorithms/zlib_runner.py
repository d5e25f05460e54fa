import zlib

from bencomp.algorithms.base import CompressionRunner

ZLIB_LEVEL_NAMES = {
    zlib.Z_DEFAULT_COMPRESSION: "zlib-default",
    zlib.Z_BEST_COMPRESSION: "zlib-best-compression",
    zlib.Z_BEST_SPEED: "zlib-best-speed",
}


class ZlibRunner(CompressionRunner):
    """zlib at a fixed compression level."""

    def __init__(self, level: int = zlib.Z_DEFAULT_COMPRESSION):
        if level not in ZLIB_LEVEL_NAMES and not 0 <= level <= 9:
            raise ValueError(f"Invalid zlib level: {level}")
        self.level = level
        self.name = ZLIB_LEVEL_NAMES.get(level, f"zlib-{level}")

    def compress(self, data: bytes) -> bytes:
        return zlib.compress(data, self.level)

    def decompress(self, data: bytes) -> bytes:
        return zlib.decompress(data)
