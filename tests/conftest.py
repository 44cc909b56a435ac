"""
Shared fixtures for duplicate scanner tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def xyz_tree(temp_dir) -> Dict[str, Path]:
    """
    Minimal positive tree:
    - a, b: 1 byte, content "X" (duplicates)
    - c:    1 byte, content "Y" (same size, different content)
    """
    root = temp_dir / "pos"
    root.mkdir()
    files = {"root": root}
    for name, content in (("a", b"X"), ("b", b"X"), ("c", b"Y")):
        files[name] = root / name
        files[name].write_bytes(content)
    return files


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical files (1KB of 'A') plus a third copy in a subdirectory
    - 2 identical files (2KB of 'B')
    - 2 unique files with sizes nobody else has
    - 2 same-size files with different content
    - 1 empty file
    """
    root = temp_dir / "tree"
    root.mkdir()
    files = {"root": root}

    content_a = b"A" * 1024
    files["dup1_a"] = root / "dup1_a.txt"
    files["dup1_b"] = root / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = root / "dup2_a.txt"
    files["dup2_b"] = root / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["unique1"] = root / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = root / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["same_size_1"] = root / "same_size_1.bin"
    files["same_size_1"].write_bytes(b"E" * 3000)
    files["same_size_2"] = root / "same_size_2.bin"
    files["same_size_2"].write_bytes(b"F" * 3000)

    files["empty"] = root / "empty.txt"
    files["empty"].write_bytes(b"")

    subdir = root / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)  # Same as dup1_a/b

    return files


class CountingHasher:
    """Wraps a real hasher and records every file it reads."""

    def __init__(self, inner):
        self.inner = inner
        self.hashed = []

    def hash_stream(self, stream):
        return self.inner.hash_stream(stream)

    def hash_file(self, path):
        self.hashed.append(path)
        return self.inner.hash_file(path)


class FailingHasher:
    """Raises PermissionError for selected paths, hashes the rest."""

    def __init__(self, inner, failing_paths):
        self.inner = inner
        self.failing_paths = {str(p) for p in failing_paths}

    def hash_stream(self, stream):
        return self.inner.hash_stream(stream)

    def hash_file(self, path):
        if path in self.failing_paths:
            raise PermissionError(13, "Permission denied", path)
        return self.inner.hash_file(path)
