from .cache import SizeCache
from .oracle import CompressedSizeOracle
from .wavefront import WavefrontScheduler
from .matrix import DistanceMatrix, SymmetricMatrix, to_condensed
from .dissimilarity import compute_ncd, clamp_distance
from .compressors import (CompressionLevel,
                          CompressorType,
                          get_compressor,
                          register_compressor,
                          compute_compression)


__all__ = [
    'SizeCache',
    'CompressedSizeOracle',
    'WavefrontScheduler',
    'DistanceMatrix',
    'SymmetricMatrix',
    'to_condensed',
    'compute_ncd',
    'clamp_distance',
    'CompressionLevel',
    'CompressorType',
    'get_compressor',
    'register_compressor',
    'compute_compression',
]
