"""Shared fixtures for ncdmatrix tests."""

import pytest

from ncdmatrix import NCDEngine


SAMPLES = [
    "the quick brown fox jumps over the lazy dog " * 4,
    "the quick brown fox jumps over the lazy cat " * 4,
    "lorem ipsum dolor sit amet, consectetur adipiscing elit " * 3,
    "0123456789" * 12,
    "abcabcabcabcabcabcabcabc",
    "zyxwvutsrqponmlkjihgfedcba" * 2,
    "the slow green turtle walks under the busy bridge " * 3,
]


@pytest.fixture
def samples():
    return list(SAMPLES)


@pytest.fixture
def serial_engine():
    return NCDEngine(n_jobs=1)


@pytest.fixture
def parallel_engine():
    return NCDEngine(n_jobs=4)


@pytest.fixture
def write_files(tmp_path):
    """Write each text to its own file and return the paths."""

    def _write(*contents):
        paths = []
        for index, content in enumerate(contents):
            path = tmp_path / f"item_{index}.txt"
            data = content.encode("utf-8") if isinstance(content, str) else content
            path.write_bytes(data)
            paths.append(path)
        return paths

    return _write


@pytest.fixture
def isolated_registry(monkeypatch):
    """Let a test register compressors without leaking them into other tests."""
    import ncdmatrix.compression.compressors as compressors

    monkeypatch.setattr(compressors, "_COMPRESSORS", dict(compressors._COMPRESSORS))
    return compressors._COMPRESSORS
