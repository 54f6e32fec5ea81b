from enum import Enum
from typing import Dict, Type, Union

from .base import BaseCompressor, CompressionLevel
from .integrated import GZipCompressor, Bz2Compressor, ZlibCompressor


class CompressorType(str, Enum):
    GZIP = 'gzip'
    BZ2 = 'bz2'
    ZLIB = 'zlib'


_COMPRESSORS: Dict[str, Type[BaseCompressor]] = {
    CompressorType.GZIP.value: GZipCompressor,
    CompressorType.BZ2.value: Bz2Compressor,
    CompressorType.ZLIB.value: ZlibCompressor,
}


def available_compressors():
    return list(_COMPRESSORS)


def register_compressor(name: str, compressor_cls: Type[BaseCompressor]) -> None:
    """Make a new backend selectable by name."""
    if not isinstance(compressor_cls, type) or not issubclass(compressor_cls, BaseCompressor):
        raise TypeError(
            f"{compressor_cls!r} must be a subclass of BaseCompressor"
        )
    _COMPRESSORS[name] = compressor_cls


def get_compressor(name: Union[str, CompressorType],
                   compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT) -> BaseCompressor:
    if isinstance(name, CompressorType):
        name = name.value

    if name not in _COMPRESSORS:
        raise ValueError(
            f"Invalid compressor: {name}. "
            f"Valid options are: {', '.join(_COMPRESSORS)}"
        )

    return _COMPRESSORS[name](compression_level=compression_level)


def compute_compression(sequence: Union[str, bytes],
                        compressor: Union[str, CompressorType],
                        compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT) -> bytes:
    if isinstance(sequence, str):
        sequence = sequence.encode('utf-8')

    return get_compressor(compressor, compression_level).compress(sequence)


__all__ = [
    'BaseCompressor',
    'CompressionLevel',
    'CompressorType',
    'GZipCompressor',
    'Bz2Compressor',
    'ZlibCompressor',
    'available_compressors',
    'register_compressor',
    'get_compressor',
    'compute_compression',
]
