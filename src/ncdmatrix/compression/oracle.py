# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Compressed Size Oracle
"""
from copy import copy
from typing import Iterator, Optional, Union

from ..errors import InvalidArgumentError
from .sources import Item, iter_chunks
from .compressors import (BaseCompressor,
                          CompressionLevel,
                          CompressorType,
                          get_compressor)


class CompressedSizeOracle:
    """
        Reports the compressed byte length of one item, or of two items
        concatenated in the given order (first, then second).

        The active compressor is replaced, never mutated, when the level
        changes, so a ``snapshot()`` taken before a reconfiguration keeps
        measuring with the old settings.
    """

    def __init__(self,
                 compressor_name: Union[str, CompressorType] = 'gzip',
                 compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT,
                 join_string: Union[str, bytes] = b''):

        if not isinstance(join_string, (str, bytes)):
            raise ValueError(
                f"Invalid join string: {join_string}. join_string must be a str or bytes object."
            )

        self.compressor: BaseCompressor = get_compressor(compressor_name, compression_level)
        self.join_bytes: bytes = join_string.encode('utf-8') if isinstance(join_string, str) else join_string

    @property
    def compressor_name(self) -> str:
        return self.compressor.compressor_name

    @property
    def compression_level(self) -> CompressionLevel:
        return self.compressor.level

    def set_compression_level(self, level: Union[str, CompressionLevel]) -> None:
        self.compressor = get_compressor(self.compressor_name, level)

    def snapshot(self) -> 'CompressedSizeOracle':
        return copy(self)

    @staticmethod
    def _counted(item: Item, is_file: bool) -> Iterator[bytes]:
        total = 0
        for chunk in iter_chunks(item, is_file=is_file):
            total += len(chunk)
            yield chunk

        if total == 0:
            raise InvalidArgumentError(f"Item content must not be empty: {item!r}")

    def _chunks(self, first: Item, second: Optional[Item], is_file: bool) -> Iterator[bytes]:
        yield from self._counted(first, is_file)

        if second is not None:
            if self.join_bytes:
                yield self.join_bytes
            yield from self._counted(second, is_file)

    def compress(self, first: Item, second: Optional[Item] = None, is_file: bool = False) -> int:
        return self.compressor.compressed_size(
            self._chunks(first, second, is_file)
        )
