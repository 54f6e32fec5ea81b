# -*- coding: utf-8 -*-
"""
    NCDMatrix
    NCD Engine
"""
import logging
import warnings
import threading
import numpy as np
import multiprocessing
import concurrent.futures
from dataclasses import dataclass, field
from concurrent.futures import as_completed
from typing import Any, Dict, Iterable, List, Tuple, Type, Union

from .config import EngineConfig
from .errors import InvalidArgumentError
from .compression import (CompressedSizeOracle,
                          CompressionLevel,
                          CompressorType,
                          DistanceMatrix,
                          SizeCache,
                          SymmetricMatrix,
                          WavefrontScheduler,
                          clamp_distance,
                          compute_ncd)
from .compression.sources import Item
from .compression.wavefront import Pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _BatchContext:
    """Everything one batch call works on. Nothing here outlives the call."""
    items: Tuple[Item, ...]
    is_file: bool
    oracle: CompressedSizeOracle
    cache: SizeCache
    matrix: DistanceMatrix
    stop: threading.Event = field(default_factory=threading.Event)

    def size_of(self, index: int) -> int:
        return self.cache.get_or_compute(
            index,
            lambda k: self.oracle.compress(self.items[k], is_file=self.is_file)
        )

    def distance(self, first: int, second: int) -> float:
        """Clamped NCD of items[first] followed by items[second]."""
        c_x1 = self.size_of(first)
        c_x2 = self.size_of(second)
        c_x1x2 = self.oracle.compress(self.items[first], self.items[second], is_file=self.is_file)

        return clamp_distance(compute_ncd(c_x1, c_x2, c_x1x2))


class NCDEngine:
    """
        Normalized Compression Distance for pairs and batches of items.

        Items are str (UTF-8 encoded) or bytes-like buffers, or file paths
        when ``is_file=True``; the mode applies to the whole call.

        The instance only holds configuration. Each batch call builds its own
        context, so one engine can serve several calls at the same time.
    """

    def to_dict(self) -> Dict[str, Any]:
        params = {
            'compressor': self.compressor_name,
            'compression_level': self.compression_level.value,
            'n_jobs': self.n_jobs,
            'join_string': self._join_string,
            'dtype': self.dtype.name,
        }

        return params

    def _validate_n_jobs(self, n_jobs):
        if not isinstance(n_jobs, int) or isinstance(n_jobs, bool) or (n_jobs < 1 and n_jobs != -1):
            raise InvalidArgumentError(
                f"Invalid n_jobs: {n_jobs}. n_jobs must be a positive integer or -1 for all CPUs."
            )

    def _validate_dtype(self, dtype):
        dtype = np.dtype(dtype)
        if dtype.kind != 'f':
            raise ValueError(
                f"Invalid dtype: {dtype}. Distance matrices need a floating point dtype."
            )
        return dtype

    def __init__(self,
                 compressor: Union[str, CompressorType] = 'gzip',
                 compression_level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT,
                 n_jobs: int = -1,
                 join_string: Union[str, bytes] = '',
                 dtype: Union[str, np.dtype, type] = np.float64,
                 ):

        self._validate_n_jobs(n_jobs)
        self.dtype = self._validate_dtype(dtype)

        self.oracle = CompressedSizeOracle(
            compressor_name=compressor,
            compression_level=compression_level,
            join_string=join_string,
        )
        self._join_string = join_string

        self.n_jobs = n_jobs
        if n_jobs == -1:
            self.workers = multiprocessing.cpu_count()
        else:
            self.workers = n_jobs

    @classmethod
    def from_config(cls, config: EngineConfig) -> 'NCDEngine':
        return cls(
            compressor=config.compressor,
            compression_level=config.compression_level,
            n_jobs=config.n_jobs,
            join_string=config.join_string,
            dtype=config.dtype,
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(compressor={self.compressor_name!r}, "
                f"compression_level={self.compression_level.value!r}, workers={self.workers})")

    @property
    def compressor_name(self) -> str:
        return self.oracle.compressor_name

    @property
    def compression_level(self) -> CompressionLevel:
        return self.oracle.compression_level

    def set_compression_level(self, level: Union[str, CompressionLevel] = CompressionLevel.DEFAULT) -> None:
        """
            Switch the compressor preset. Only calls issued afterwards see the
            change; a batch that is already running keeps its own snapshot.
        """
        self.oracle.set_compression_level(level)
        logger.debug("Compression level set to %s for %s", self.compression_level.value, self.compressor_name)

    def calculate(self, x1: Item, x2: Item, is_file: bool = False, clamp: bool = False) -> float:
        """
            NCD of a single pair, x1 concatenated before x2.

            Unlike the batch methods the score is returned as is unless
            ``clamp=True``; it may exceed 1 for short inputs and
            calculate(x1, x2) may differ from calculate(x2, x1).
        """
        oracle = self.oracle.snapshot()

        c_x1 = oracle.compress(x1, is_file=is_file)
        c_x2 = oracle.compress(x2, is_file=is_file)
        c_x1x2 = oracle.compress(x1, x2, is_file=is_file)

        score = compute_ncd(c_x1, c_x2, c_x1x2)

        if score < 0:
            warnings.warn(
                f"Expected dissimilarity score >= 0, but got {score} "
                f"with compressor {oracle.compressor_name}",
                category=UserWarning
            )

        return clamp_distance(score) if clamp else score

    def _new_context(self, items: Iterable[Item], is_file: bool,
                     matrix_cls: Type[DistanceMatrix]) -> _BatchContext:
        items = tuple(items)

        if len(items) == 0:
            raise InvalidArgumentError("Items must not be empty.")

        return _BatchContext(
            items=items,
            is_file=bool(is_file),
            oracle=self.oracle.snapshot(),
            cache=SizeCache(len(items)),
            matrix=matrix_cls(len(items), dtype=self.dtype),
        )

    def unsymmetric(self, items: Iterable[Item], is_file: bool = False) -> np.ndarray:
        """
            Full N x N matrix where (i, j) compresses items[i] before items[j]
            and (j, i) the other way round.

            Runs sequentially and needs twice the pair compressions of
            ``symmetric``, the price of capturing order effects.
        """
        context = self._new_context(items, is_file, DistanceMatrix)
        size = len(context.items)
        logger.debug("Unsymmetric NCD matrix for %d items", size)

        for i in range(size):
            context.size_of(i)
            for j in range(i + 1, size):
                context.matrix[i, j] = context.distance(i, j)
                context.matrix[j, i] = context.distance(j, i)

        return context.matrix.to_numpy()

    def symmetric(self, items: Iterable[Item], is_file: bool = False) -> np.ndarray:
        """
            N x N matrix computing one concatenation order per pair,
            items[i] before items[j] for i < j, mirrored to (j, i).

            With more than one worker the pairs are split into wavefront lanes
            and run on a thread pool; otherwise rows are filled in order. Both
            paths give identical matrices.
        """
        context = self._new_context(items, is_file, SymmetricMatrix)
        logger.debug("Symmetric NCD matrix for %d items with %d workers", len(context.items), self.workers)

        if self.workers > 1:
            self._symmetric_threads(context)
        else:
            self._symmetric_serie(context)

        return context.matrix.to_numpy()

    @staticmethod
    def _symmetric_serie(context: _BatchContext) -> None:
        size = len(context.items)

        for i in range(size):
            context.size_of(i)
            for j in range(i + 1, size):
                context.matrix[i, j] = context.distance(i, j)

    @staticmethod
    def _run_lane(context: _BatchContext, lane: List[Pair]) -> None:
        for i, j in lane:
            if context.stop.is_set():
                return
            context.matrix[i, j] = context.distance(i, j)

    def _symmetric_threads(self, context: _BatchContext) -> None:
        size = len(context.items)

        # both corners are needed by the first pair (0, n-1), get them before the lanes start
        context.size_of(0)
        context.size_of(size - 1)

        lanes = [lane for lane in WavefrontScheduler(size, self.workers) if lane]
        if not lanes:
            return

        first_error = None

        with concurrent.futures.ThreadPoolExecutor(max_workers=len(lanes)) as executor:
            futures = {
                executor.submit(self._run_lane, context, lane): index
                for index, lane in enumerate(lanes)
            }

            for future in as_completed(futures):
                error = future.exception()
                if error is not None and first_error is None:
                    logger.debug("Lane %d failed, stopping remaining lanes: %r", futures[future], error)
                    first_error = error
                    context.stop.set()

        if first_error is not None:
            raise first_error

    def __call__(self, items: Iterable[Item], is_file: bool = False) -> np.ndarray:
        return self.symmetric(items, is_file=is_file)
