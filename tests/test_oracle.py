"""Tests for the compressed size oracle and item sources."""

import pytest

from ncdmatrix import InvalidArgumentError, SourceIOError
from ncdmatrix.compression import CompressedSizeOracle, CompressionLevel, get_compressor
from ncdmatrix.compression.sources import as_bytes, iter_chunks


def test_single_item_size_matches_backend():
    oracle = CompressedSizeOracle("gzip")
    expected = len(get_compressor("gzip").compress(b"hello world"))
    assert oracle.compress("hello world") == expected


def test_str_and_bytes_items_agree():
    oracle = CompressedSizeOracle("bz2")
    assert oracle.compress("café au lait") == oracle.compress("café au lait".encode("utf-8"))


def test_pair_size_is_positive_and_at_least_single():
    oracle = CompressedSizeOracle("zlib")
    assert oracle.compress("abcdef", "uvwxyz") >= oracle.compress("abcdef")


def test_empty_first_item_rejected():
    with pytest.raises(InvalidArgumentError):
        CompressedSizeOracle().compress("")


def test_empty_second_item_rejected():
    with pytest.raises(InvalidArgumentError):
        CompressedSizeOracle().compress("abc", b"")


def test_file_mode_matches_buffer_mode(write_files):
    first, second = write_files("first file content", "second file content")
    oracle = CompressedSizeOracle()
    assert oracle.compress(first, is_file=True) == oracle.compress("first file content")
    assert oracle.compress(first, second, is_file=True) > 0


def test_file_mode_accepts_str_path(write_files):
    (path,) = write_files("some text")
    assert CompressedSizeOracle().compress(str(path), is_file=True) > 0


def test_missing_file_raises(tmp_path):
    with pytest.raises(SourceIOError) as exc_info:
        CompressedSizeOracle().compress(tmp_path / "missing.txt", is_file=True)
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_empty_file_rejected(write_files):
    (path,) = write_files(b"")
    with pytest.raises(InvalidArgumentError):
        CompressedSizeOracle().compress(path, is_file=True)


def test_set_compression_level_affects_later_calls_only():
    oracle = CompressedSizeOracle("gzip", "best")
    snapshot = oracle.snapshot()
    oracle.set_compression_level("fastest")
    assert oracle.compression_level is CompressionLevel.FASTEST
    assert snapshot.compression_level is CompressionLevel.BEST


def test_join_string_adds_separator_bytes():
    plain = CompressedSizeOracle("zlib", "best")
    joined = CompressedSizeOracle("zlib", "best", join_string="||SEP||")
    assert joined.join_bytes == b"||SEP||"
    assert joined.compress("abc") == plain.compress("abc")


def test_invalid_join_string():
    with pytest.raises(ValueError):
        CompressedSizeOracle(join_string=3)


def test_iter_chunks_reads_file_in_chunks(write_files):
    (path,) = write_files(b"x" * 10)
    assert list(iter_chunks(path, is_file=True, chunk_size=4)) == [b"xxxx", b"xxxx", b"xx"]


def test_as_bytes_rejects_other_types():
    with pytest.raises(TypeError):
        as_bytes(42)


def test_file_mode_rejects_non_path():
    with pytest.raises(TypeError):
        list(iter_chunks(3, is_file=True))
