"""
Unit tests for SizeIndex and digest grouping.
"""
import pytest
from dupes.core.grouper import SizeIndex, group_by
from dupes.core.models import FileEntry


class TestSizeIndex:
    """Grouping by exact byte length."""

    def test_groups_by_size_ascending(self):
        entries = [
            FileEntry(path="/c.txt", size=2048),
            FileEntry(path="/a.txt", size=1024),
            FileEntry(path="/b.txt", size=1024),
            FileEntry(path="/d.txt", size=10),
        ]
        index = SizeIndex.build(entries)

        assert list(index.groups()) == [
            (10, ["/d.txt"]),
            (1024, ["/a.txt", "/b.txt"]),
            (2048, ["/c.txt"]),
        ]

    def test_singleton_groups_are_kept(self):
        """Unlike duplicate filters, the index keeps one-member groups."""
        index = SizeIndex.build([FileEntry(path="/only.txt", size=5)])
        assert len(index) == 1
        assert index[5] == ["/only.txt"]

    def test_min_size_drops_strictly_smaller(self):
        entries = [
            FileEntry(path="/small", size=99),
            FileEntry(path="/edge", size=100),
            FileEntry(path="/big", size=101),
        ]
        index = SizeIndex.build(entries, min_size=100)

        assert 99 not in index
        assert index[100] == ["/edge"]
        assert index[101] == ["/big"]

    def test_same_path_from_overlapping_roots_counted_once(self):
        entries = [FileEntry(path="/x", size=3), FileEntry(path="/x", size=3)]
        index = SizeIndex.build(entries)
        assert index[3] == ["/x"]
        assert index.file_count == 1

    def test_paths_sorted_regardless_of_insertion_order(self):
        entries = [FileEntry(path=p, size=1) for p in ("/z", "/m", "/a")]
        index = SizeIndex.build(entries)
        assert index[1] == ["/a", "/m", "/z"]

    def test_missing_size_raises_key_error(self):
        with pytest.raises(KeyError):
            SizeIndex()[42]

    def test_empty_index(self):
        index = SizeIndex.build([])
        assert len(index) == 0
        assert list(index.groups()) == []


class TestGroupBy:
    def test_groups_sorted_by_key_then_path(self):
        digests = {"/b": b"\x02", "/a": b"\x02", "/c": b"\x01"}
        assert group_by(digests, digests.__getitem__) == [
            (b"\x01", ["/c"]),
            (b"\x02", ["/a", "/b"]),
        ]
