"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate scanner.
Components depend on these structural types, so tests can pass in fakes
(counting hashers, collecting sinks) without subclassing anything.

Key Components:
---------------
- PathFilter: Predicate deciding whether a path may be visited.
- TreeWalker: Enumerates regular files under a set of roots.
- HashAlgorithm / HashAccumulator: Pluggable incremental hash functions (SHA-256, xxHash).
- ContentHasher: Streams a file or byte stream into a digest.
- ErrorSink: Receives per-file read errors raised while hashing.
- ReportSink: Receives finished report entries (text or JSON rendering).
- DuplicateEngine: Turns a size index into an ordered list of report entries.
"""

from typing import Protocol, Iterable, Iterator, BinaryIO, FrozenSet, TYPE_CHECKING
from dupes.core.models import FileEntry, ReportEntry, EngineResult

if TYPE_CHECKING:
    from dupes.core.grouper import SizeIndex


# ===== Interfaces =====

class PathFilter(Protocol):
    """Decides whether a file or directory path is allowed (not excluded)."""
    def allows(self, path: str) -> bool: ...


class TreeWalker(Protocol):
    """
    Interface for walking directory trees.

    Methods:
        walk: Lazily yields every regular file under the given roots.
    """
    def walk(self, roots: Iterable[str]) -> Iterator[FileEntry]:
        ...


class HashAccumulator(Protocol):
    """Incremental hash state, as returned by hashlib/xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    without affecting the rest of the duplicate detection logic.
    """
    name: str

    def new(self) -> HashAccumulator:
        """Returns a fresh accumulator."""
        ...


class ContentHasher(Protocol):
    """Interface for computing full-content digests."""
    def hash_stream(self, stream: BinaryIO) -> bytes: ...
    def hash_file(self, path: str) -> bytes: ...


class ErrorSink(Protocol):
    """Receives per-file failures, keyed by the size group being processed."""
    def file_error(self, size: int, path: str, error: OSError) -> None: ...


class ReportSink(Protocol):
    """
    Receives report entries in final order.

    `add` is called as soon as an entry is final; `finish` once at the end.
    """
    def add(self, entry: ReportEntry) -> None: ...
    def finish(self) -> None: ...


class ExclusionLookup(Protocol):
    """Read-only view of the negative set used by the engine."""
    def digests_for(self, size: int) -> FrozenSet[bytes]: ...


class DuplicateEngine(Protocol):
    """
    Interface for the main duplicate detection engine.
    """
    def find_duplicates(
        self,
        size_index: "SizeIndex",
        exclusion: ExclusionLookup,
    ) -> EngineResult:
        """
        Process every size group in ascending order.

        Args:
            size_index: Positive-side files grouped by size.
            exclusion: Negative-side digests to drop from the result.

        Returns:
            Ordered list of report entries.
        """
        ...
