# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Errors
"""


class NCDError(Exception):
    """Base error for all ncdmatrix failures."""


class InvalidArgumentError(NCDError, ValueError):
    """Empty batch, empty item content or an invalid parameter value."""


class SourceIOError(NCDError, OSError):
    """A file could not be opened for reading in file mode."""
