# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Compression Functions
"""
import bz2
import zlib
from typing import Union

from .base import BaseCompressor, CompressionLevel


class GZipCompressor(BaseCompressor):
    """GZIP compression algorithm implementation."""
    native_levels = {
        CompressionLevel.DEFAULT: zlib.Z_DEFAULT_COMPRESSION,
        CompressionLevel.FASTEST: zlib.Z_BEST_SPEED,
        CompressionLevel.BEST: zlib.Z_BEST_COMPRESSION,
    }

    def __init__(self, compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT):
        super().__init__(
            compressor_name="gzip",
            compression_level=compression_level,
        )

    def _stream(self):
        # wbits 16 + 15 selects the gzip container; the header mtime is zero
        return zlib.compressobj(self._compression_level, zlib.DEFLATED, 31)


class Bz2Compressor(BaseCompressor):
    """BZ2 compression algorithm implementation."""
    native_levels = {
        CompressionLevel.DEFAULT: 6,
        CompressionLevel.FASTEST: 1,
        CompressionLevel.BEST: 9,
    }

    def __init__(self, compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT):
        super().__init__(
            compressor_name="bz2",
            compression_level=compression_level,
        )

    def _stream(self):
        return bz2.BZ2Compressor(self._compression_level)


class ZlibCompressor(BaseCompressor):
    """ZLIB compression algorithm implementation."""
    native_levels = GZipCompressor.native_levels

    def __init__(self, compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT):
        super().__init__(
            compressor_name="zlib",
            compression_level=compression_level,
        )

    def _stream(self):
        return zlib.compressobj(self._compression_level)
