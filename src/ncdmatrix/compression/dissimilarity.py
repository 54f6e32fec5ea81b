# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Dissimilarity Functions
"""


def compute_ncd(c_x1: int, c_x2: int, c_x1x2: int) -> float:
    """
        Normalized Compression Distance

            NCD(x1, x2) = (C(x1x2) - min(C(x1), C(x2))) / max(C(x1), C(x2))

        The result is not bounded: compressor framing on short inputs can push
        it above 1, and reordering effects can in rare cases push it below 0.
    """
    return (c_x1x2 - min(c_x1, c_x2)) / max(c_x1, c_x2)


def clamp_distance(score: float) -> float:
    return min(max(score, 0.0), 1.0)
