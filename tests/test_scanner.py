"""
Unit tests for TreeWalkerImpl.
Verifies file discovery, directory pruning, determinism and error tolerance.
"""
import os
import pytest
from pathlib import Path
from dupes.core.scanner import TreeWalkerImpl
from dupes.core.path_filter import RegexPathFilter
from dupes.core.models import FileEntry


class TestTreeWalkerImpl:
    """Test directory traversal with filters and error handling."""

    def test_walks_all_files_recursively(self, test_files):
        """Every regular file, including empty ones and those in subdirectories, is found."""
        walker = TreeWalkerImpl()
        entries = list(walker.walk([str(test_files["root"])]))

        paths = {e.path for e in entries}
        assert len(entries) == 10
        assert str(test_files["sub_dup"]) in paths
        assert str(test_files["empty"]) in paths

    def test_entries_carry_sizes(self, test_files):
        walker = TreeWalkerImpl()
        sizes = {e.path: e.size for e in walker.walk([str(test_files["root"])])}

        assert sizes[str(test_files["dup1_a"])] == 1024
        assert sizes[str(test_files["unique2"])] == 2500
        assert sizes[str(test_files["empty"])] == 0

    def test_directories_are_never_emitted(self, test_files):
        walker = TreeWalkerImpl()
        paths = [e.path for e in walker.walk([str(test_files["root"])])]
        assert not any(Path(p).is_dir() for p in paths)

    def test_excluded_directory_is_not_descended(self, test_files):
        """A pruned directory hides everything beneath it."""
        walker = TreeWalkerImpl(RegexPathFilter("subdir"))
        paths = [e.path for e in walker.walk([str(test_files["root"])])]

        assert len(paths) == 9
        assert not any("subdir" in p for p in paths)

    def test_excluded_files_are_skipped(self, test_files):
        walker = TreeWalkerImpl(RegexPathFilter(r"\.bin$"))
        paths = [e.path for e in walker.walk([str(test_files["root"])])]

        assert len(paths) == 8
        assert all(not p.endswith(".bin") for p in paths)

    def test_excluded_root_yields_nothing(self, test_files):
        walker = TreeWalkerImpl(RegexPathFilter(r"/tree$"))
        assert list(walker.walk([str(test_files["root"])])) == []

    def test_order_is_deterministic(self, test_files):
        walker = TreeWalkerImpl()
        first = list(walker.walk([str(test_files["root"])]))
        second = list(walker.walk([str(test_files["root"])]))
        assert first == second

    def test_multiple_roots(self, temp_dir):
        one = temp_dir / "one"
        two = temp_dir / "two"
        one.mkdir()
        two.mkdir()
        (one / "f1").write_bytes(b"1")
        (two / "f2").write_bytes(b"22")

        walker = TreeWalkerImpl()
        entries = list(walker.walk([str(one), str(two)]))

        assert entries == [
            FileEntry(path=str(one / "f1"), size=1),
            FileEntry(path=str(two / "f2"), size=2),
        ]

    def test_missing_root_yields_nothing(self, temp_dir):
        walker = TreeWalkerImpl()
        assert list(walker.walk([str(temp_dir / "does-not-exist")])) == []

    def test_walk_is_lazy(self, test_files):
        walker = TreeWalkerImpl()
        iterator = walker.walk([str(test_files["root"])])
        first = next(iterator)
        assert isinstance(first, FileEntry)

    def test_walker_skips_symlinks(self, temp_dir):
        """Symbolic links are neither followed nor reported."""
        real_file = temp_dir / "real.txt"
        real_file.write_bytes(b"content")
        real_dir = temp_dir / "realdir"
        real_dir.mkdir()
        (real_dir / "inner.txt").write_bytes(b"inner")

        try:
            (temp_dir / "link.txt").symlink_to(real_file)
            (temp_dir / "linkdir").symlink_to(real_dir, target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")

        walker = TreeWalkerImpl()
        paths = sorted(e.path for e in walker.walk([str(temp_dir)]))

        assert paths == [str(real_file), str(real_dir / "inner.txt")]

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0,
                        reason="Permission bits are not enforced for this user")
    def test_unreadable_directory_does_not_abort_walk(self, temp_dir):
        readable = temp_dir / "readable"
        readable.mkdir()
        (readable / "ok.txt").write_bytes(b"ok")
        locked = temp_dir / "locked"
        locked.mkdir()
        (locked / "hidden.txt").write_bytes(b"hidden")
        locked.chmod(0o000)

        try:
            walker = TreeWalkerImpl()
            paths = [e.path for e in walker.walk([str(temp_dir)])]
        finally:
            locked.chmod(0o755)

        assert paths == [str(readable / "ok.txt")]
