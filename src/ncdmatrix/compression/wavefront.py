# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Wavefront Scheduler
"""
from typing import Iterator, List, Tuple

from ..errors import InvalidArgumentError

Pair = Tuple[int, int]


class WavefrontScheduler:
    """
        Splits the unordered pairs (i, j), i < j, of an N item batch into
        balanced lanes.

        Pairs are enumerated along anti-diagonals, starting at the corner
        (0, N-1) and moving towards the main diagonal:

            (0, n-1), (0, n-2), (1, n-1), (0, n-3), (1, n-2), (2, n-1), ...

        and dealt round-robin to the lanes. Consecutive pairs touch different
        indices, so first-touch cache misses and cache hits end up spread
        evenly instead of piling up in the first or last lanes as they would
        with a row-major split.
    """

    def __init__(self, size: int, n_lanes: int):
        if size < 0:
            raise InvalidArgumentError(f"size must be >= 0, got {size}")
        if n_lanes < 1:
            raise InvalidArgumentError(f"n_lanes must be >= 1, got {n_lanes}")

        self.size = size
        self.n_lanes = n_lanes

    @property
    def n_pairs(self) -> int:
        return self.size * (self.size - 1) // 2

    def pairs(self) -> Iterator[Pair]:
        for distance in range(self.size - 1, 0, -1):
            for start in range(self.size - distance):
                yield start, start + distance

    def partition(self) -> List[List[Pair]]:
        lanes: List[List[Pair]] = [[] for _ in range(self.n_lanes)]
        for index, pair in enumerate(self.pairs()):
            lanes[index % self.n_lanes].append(pair)
        return lanes

    def __iter__(self) -> Iterator[List[Pair]]:
        return iter(self.partition())
