# -*- coding: utf-8 -*-
"""
    NCDMatrix
    Item Sources
"""
import os
from typing import Iterator, Union

from ..errors import SourceIOError

Item = Union[str, bytes, bytearray, memoryview, os.PathLike]

CHUNK_SIZE: int = 1 << 16


def as_bytes(item: Item) -> bytes:
    """Turn an in-memory item into a byte buffer, str items are UTF-8 encoded."""
    if isinstance(item, str):
        return item.encode('utf-8')

    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)

    raise TypeError(
        f"Invalid item type: {type(item).__name__}. "
        f"Buffer items must be str or bytes-like; pass is_file=True for paths."
    )


def iter_chunks(item: Item, is_file: bool = False, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    if not is_file:
        data = as_bytes(item)
        if data:
            yield data
        return

    if not isinstance(item, (str, bytes, os.PathLike)):
        raise TypeError(
            f"Invalid path type: {type(item).__name__}. File items must be str, bytes or os.PathLike."
        )

    try:
        handle = open(item, 'rb')
    except OSError as e:
        raise SourceIOError(f"File can not be opened: {item!r}") from e

    with handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            yield chunk
