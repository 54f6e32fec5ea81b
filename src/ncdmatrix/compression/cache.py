# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Size Cache
"""
import numpy as np
from typing import Callable


class SizeCache:
    """
        Per-call memo of each item's standalone compressed size.

        Every slot carries its own computed flag, a size of 0 is a valid
        value. Concurrent lanes may both fill the same slot; they write the
        same value, so no lock is taken.
    """

    def __init__(self, size: int):
        self._sizes = np.zeros(size, dtype=np.int64)
        self._computed = np.zeros(size, dtype=bool)

    def __len__(self) -> int:
        return len(self._sizes)

    def __contains__(self, index: int) -> bool:
        return bool(self._computed[index])

    def __getitem__(self, index: int) -> int:
        if not self._computed[index]:
            raise KeyError(f"Size for index {index} has not been computed")
        return int(self._sizes[index])

    def __setitem__(self, index: int, value: int) -> None:
        # value first, so a reader that sees the flag also sees the size
        self._sizes[index] = value
        self._computed[index] = True

    def get_or_compute(self, index: int, compute: Callable[[int], int]) -> int:
        if not self._computed[index]:
            self[index] = compute(index)
        return int(self._sizes[index])

    @property
    def n_computed(self) -> int:
        return int(np.count_nonzero(self._computed))
