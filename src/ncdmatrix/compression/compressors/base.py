# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Base Compressor
"""
from enum import Enum
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Union


class CompressionLevel(str, Enum):
    DEFAULT = 'default'
    FASTEST = 'fastest'
    BEST = 'best'

    @classmethod
    def parse(cls, level: Union[str, 'CompressionLevel']) -> 'CompressionLevel':
        if isinstance(level, cls):
            return level

        try:
            return cls(level)
        except ValueError:
            raise ValueError(
                f"Invalid compression level: {level}. "
                f"Valid options are: {', '.join(option.value for option in cls)}"
            ) from None


class BaseCompressor(ABC):
    """
        A compressor backend. Subclasses map the three generic compression
        levels onto their native presets and provide an incremental stream,
        so the compressed size of several chunks can be measured without
        joining them in memory.
    """
    native_levels: Dict[CompressionLevel, int] = {}

    def __init__(self, compressor_name: str, compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT):
        self.compressor_name = compressor_name
        self.level = CompressionLevel.parse(compression_level)
        self._compression_level = self.native_levels[self.level]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.value!r})"

    @abstractmethod
    def _stream(self):
        """Return a fresh object with ``compress(data)`` and ``flush()``."""
        raise NotImplementedError()

    def compressed_size(self, chunks: Iterable[bytes]) -> int:
        stream = self._stream()
        size = 0
        for chunk in chunks:
            size += len(stream.compress(chunk))
        size += len(stream.flush())
        return size

    def compress(self, sequence: bytes) -> bytes:
        stream = self._stream()
        return stream.compress(sequence) + stream.flush()
