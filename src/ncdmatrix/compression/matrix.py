# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Distance Matrix
"""
import numpy as np
from typing import Tuple, Union
from scipy.spatial.distance import squareform

from ..errors import InvalidArgumentError


class DistanceMatrix:
    """Full N x N matrix, every cell is written independently."""

    def __init__(self, size: int, dtype: Union[str, np.dtype, type] = np.float64):
        if size < 1:
            raise InvalidArgumentError(f"Matrix size must be greater than zero, got {size}")

        self.size = size
        self._values = np.zeros((size, size), dtype=dtype)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._values.shape

    def __getitem__(self, index: Tuple[int, int]) -> float:
        return self._values[index]

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        self._values[index] = value

    def to_numpy(self) -> np.ndarray:
        return self._values


class SymmetricMatrix(DistanceMatrix):
    """
        Upper triangular storage mirrored on write: setting (i, j) sets (j, i).
        Lanes writing different pairs therefore never touch the same cell.
    """

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        i, j = index
        self._values[i, j] = value
        self._values[j, i] = value


def to_condensed(matrix: Union[np.ndarray, SymmetricMatrix]) -> np.ndarray:
    """
        Condensed distance vector of a symmetric matrix, the form consumed by
        ``scipy.cluster.hierarchy.linkage``.
    """
    if isinstance(matrix, DistanceMatrix):
        matrix = matrix.to_numpy()

    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidArgumentError(
            f"Expected a square matrix, got shape {matrix.shape}"
        )

    if not np.array_equal(matrix, matrix.T):
        raise InvalidArgumentError(
            "Matrix is not symmetric; only symmetric() results can be condensed."
        )

    return squareform(matrix, checks=False)
