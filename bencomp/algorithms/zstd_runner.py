import zstandard as zstd

from bencomp.algorithms.base import CompressionRunner


class ZstdRunner(CompressionRunner):
    """Zstandard through the ``zstandard`` bindings."""

    name = "zstd"

    def __init__(self, level: int = 3):
        self.level = level
        self._compressor = zstd.ZstdCompressor(level=level)
        self._decompressor = zstd.ZstdDecompressor()

    def compress(self, data: bytes) -> bytes:
        return self._compressor.compress(data)

    def decompress(self, data: bytes) -> bytes:
        return self._decompressor.decompress(data)
