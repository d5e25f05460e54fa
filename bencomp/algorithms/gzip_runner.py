import gzip

from bencomp.algorithms.base import CompressionRunner


class GzipRunner(CompressionRunner):
    """gzip at a fixed compression level (6 unless given)."""

    name = "gzip"

    def __init__(self, level: int = 6):
        self.level = level

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self.level)

    def decompress(self, data: bytes) -> bytes:
        return gzip.decompress(data)
