from .engine import NCDEngine
from .config import EngineConfig, load_config
from .errors import NCDError, InvalidArgumentError, SourceIOError
from .compression import (CompressionLevel,
                          CompressorType,
                          register_compressor,
                          to_condensed)

__version__ = "0.1.0"

__all__ = [
    'NCDEngine',
    'EngineConfig',
    'load_config',
    'NCDError',
    'InvalidArgumentError',
    'SourceIOError',
    'CompressionLevel',
    'CompressorType',
    'register_compressor',
    'to_condensed',
]
