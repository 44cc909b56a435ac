"""
Core duplicate detection engine: walker, size index, hasher, exclusion index and engine.

This package contains the whole of the detection logic:
- RegexPathFilter: exclusion pattern consulted before descending or accepting a file
- TreeWalkerImpl: recursive traversal yielding regular files with their sizes
- SizeIndex: size -> paths, the cheap first-pass discriminator
- ContentHasherImpl + Sha256AlgorithmImpl / XXHashAlgorithmImpl: streaming full-content digests
- ExclusionIndex: size -> digests of the negative directory set
- DuplicateEngineImpl: per-size-group short-circuits, hashing, exclusion and binning
- Models: FileEntry, ReportEntry, ScanParams, ScanStats

No output formatting here: suitable for the CLI and for library use.
"""

from .path_filter import RegexPathFilter
from .scanner import TreeWalkerImpl
from .grouper import SizeIndex
from .hasher import ContentHasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, digest_label
from .exclusion import ExclusionIndex
from .deduplicator import DuplicateEngineImpl
from .error_sink import NullErrorSink, LoggingErrorSink, CollectingErrorSink, FileError
from .models import (
    FileEntry, ReportEntry, ReportKind, EngineResult, ScanParams, ScanStats,
    OutputMode, HashAlgorithmName)

__all__ = [
    "RegexPathFilter",
    "TreeWalkerImpl",
    "SizeIndex",
    "ContentHasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "digest_label",
    "ExclusionIndex",
    "DuplicateEngineImpl",
    "NullErrorSink",
    "LoggingErrorSink",
    "CollectingErrorSink",
    "FileError",
    "FileEntry",
    "ReportEntry",
    "ReportKind",
    "EngineResult",
    "ScanParams",
    "ScanStats",
    "OutputMode",
    "HashAlgorithmName",
]
