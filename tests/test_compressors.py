"""Tests for compressor backends and the registry."""

import bz2
import gzip
import zlib

import pytest

from ncdmatrix.compression.compressors import (
    BaseCompressor,
    Bz2Compressor,
    CompressionLevel,
    CompressorType,
    GZipCompressor,
    ZlibCompressor,
    available_compressors,
    compute_compression,
    get_compressor,
    register_compressor,
)


TEXT = b"compression based distances compare what compressors can share " * 20


def test_builtin_compressors_available():
    assert set(available_compressors()) >= {c.value for c in CompressorType}


@pytest.mark.parametrize("name, decompress", [
    ("gzip", gzip.decompress),
    ("bz2", bz2.decompress),
    ("zlib", zlib.decompress),
])
def test_output_is_valid_stream(name, decompress):
    compressor = get_compressor(name)
    assert decompress(compressor.compress(TEXT)) == TEXT


def test_compressed_size_matches_compress_for_single_chunk():
    compressor = get_compressor("gzip", "best")
    assert compressor.compressed_size([TEXT]) == len(compressor.compress(TEXT))


def test_compute_compression_encodes_str():
    out = compute_compression("hello hello hello", "zlib")
    assert zlib.decompress(out) == b"hello hello hello"


@pytest.mark.parametrize("cls, expected", [
    (GZipCompressor, {"default": zlib.Z_DEFAULT_COMPRESSION, "fastest": 1, "best": 9}),
    (ZlibCompressor, {"default": zlib.Z_DEFAULT_COMPRESSION, "fastest": 1, "best": 9}),
    (Bz2Compressor, {"default": 6, "fastest": 1, "best": 9}),
])
def test_native_level_mapping(cls, expected):
    for level, native in expected.items():
        assert cls(compression_level=level)._compression_level == native


def test_level_accepts_enum_and_name():
    assert get_compressor("gzip", CompressionLevel.BEST).level is CompressionLevel.BEST
    assert get_compressor(CompressorType.BZ2, "fastest").level is CompressionLevel.FASTEST


def test_invalid_compressor_name():
    with pytest.raises(ValueError, match="Valid options are"):
        get_compressor("lzma")


def test_invalid_level_name():
    with pytest.raises(ValueError, match="Invalid compression level"):
        get_compressor("gzip", "ultra")


def test_fastest_not_smaller_than_best():
    """Switching from best to fastest must not shrink the output."""
    text = " ".join(f"record{i % 37} value={i * i % 101}" for i in range(2000)).encode()
    best = get_compressor("gzip", "best").compressed_size([text])
    fastest = get_compressor("gzip", "fastest").compressed_size([text])
    assert fastest >= best


class _IdentityCompressor(BaseCompressor):
    native_levels = {level: 0 for level in CompressionLevel}

    def __init__(self, compression_level=CompressionLevel.DEFAULT):
        super().__init__(compressor_name="identity", compression_level=compression_level)

    class _Stream:
        def compress(self, data):
            return bytes(data)

        def flush(self):
            return b""

    def _stream(self):
        return self._Stream()


def test_register_compressor(isolated_registry):
    register_compressor("identity", _IdentityCompressor)
    assert "identity" in available_compressors()
    compressor = get_compressor("identity")
    assert compressor.compressed_size([b"abc", b"de"]) == 5


def test_register_compressor_rejects_non_compressor():
    with pytest.raises(TypeError):
        register_compressor("bogus", dict)
