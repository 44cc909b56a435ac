"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exclusion.py
Digest index over the negative directory set.

The negative roots are walked once, up front, into a size -> paths map.
Digests for a size are computed the first time that size is looked up and
kept for the rest of the run, so negative-side files whose size never shows
up on the positive side are never read.
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional

from dupes.core.interfaces import ContentHasher, ErrorSink, ExclusionLookup, TreeWalker
from dupes.core.error_sink import NullErrorSink
from dupes.core.grouper import SizeIndex
from dupes.core.models import ScanStats

logger = logging.getLogger(__name__)


class ExclusionIndex(ExclusionLookup):
    """
    size -> set of digests present in the negative set.
    Read-only from the outside; a file that cannot be hashed is simply absent.
    """

    def __init__(
        self,
        size_index: SizeIndex,
        hasher: Optional[ContentHasher],
        error_sink: Optional[ErrorSink] = None,
        stats: Optional[ScanStats] = None,
    ):
        self._size_index = size_index
        self._hasher = hasher
        self._error_sink = error_sink or NullErrorSink()
        self._stats = stats
        self._digests: Dict[int, FrozenSet[bytes]] = {}

    @classmethod
    def build(
        cls,
        roots: Iterable[str],
        walker: TreeWalker,
        hasher: ContentHasher,
        error_sink: Optional[ErrorSink] = None,
        stats: Optional[ScanStats] = None,
    ) -> "ExclusionIndex":
        """Walk the negative roots now; hash lazily per size."""
        roots = list(roots)
        size_index = SizeIndex.build(walker.walk(roots))
        logger.debug(f"Negative set: {size_index.file_count} files in {len(size_index)} size groups")
        if stats is not None:
            stats.add("negative_files_indexed", size_index.file_count)
        return cls(size_index, hasher, error_sink, stats)

    @classmethod
    def empty(cls) -> "ExclusionIndex":
        return cls(SizeIndex(), None)

    @property
    def size_count(self) -> int:
        """Number of distinct sizes in the negative set."""
        return len(self._size_index)

    def digests_for(self, size: int) -> FrozenSet[bytes]:
        if size not in self._size_index:
            return frozenset()
        if size not in self._digests:
            self._digests[size] = self._hash_group(size, self._size_index[size])
        return self._digests[size]

    def contains(self, size: int, digest: bytes) -> bool:
        return digest in self.digests_for(size)

    def _hash_group(self, size: int, paths: List[str]) -> FrozenSet[bytes]:
        digests = set()
        for path in paths:
            try:
                digests.add(self._hasher.hash_file(path))
            except OSError as e:
                logger.debug(f"Negative-side file not hashable, ignoring: {path}: {e}")
                if self._stats is not None:
                    self._stats.add("read_errors")
                self._error_sink.file_error(size, path, e)
                continue
            if self._stats is not None:
                self._stats.add("files_hashed")
                self._stats.add("bytes_hashed", size)
        return frozenset(digests)
