"""
Unified command orchestrator for a duplicate scan.
This is the single place that wires the core components together, used by the CLI
and by library callers alike.
"""
import time
import logging
from typing import Optional, Tuple

from dupes.core.models import ScanParams, ScanStats, EngineResult
from dupes.core.path_filter import RegexPathFilter
from dupes.core.scanner import TreeWalkerImpl
from dupes.core.grouper import SizeIndex
from dupes.core.hasher import ContentHasherImpl
from dupes.core.exclusion import ExclusionIndex
from dupes.core.deduplicator import DuplicateEngineImpl
from dupes.core.interfaces import ContentHasher, ErrorSink, ReportSink
from dupes.core.error_sink import LoggingErrorSink

logger = logging.getLogger(__name__)


class DuplicateScanCommand:
    """
    Orchestrates the whole scan:
    1. Build the path filter from the exclude patterns
    2. Walk the negative roots into the exclusion index
    3. Walk the positive roots into a size index
    4. Run the engine, streaming entries to the report sink

    Usage:
        params = ScanParams(roots=["/photos"], negative_roots=["/backup"])
        result, stats = DuplicateScanCommand().execute(params, report_sink=TextReportSink())
    """

    def __init__(self, hasher: Optional[ContentHasher] = None):
        self._hasher = hasher

    def execute(
            self,
            params: ScanParams,
            report_sink: Optional[ReportSink] = None,
            error_sink: Optional[ErrorSink] = None,
    ) -> Tuple[EngineResult, ScanStats]:
        """
        Execute a scan with the given parameters.

        Args:
            params: Validated scan parameters
            report_sink: Receives entries as they are final; finish() is called at the end
            error_sink: Receives per-file read errors (logged when omitted)

        Returns:
            Tuple of (ordered report entries, statistics)

        Raises:
            ValueError: If the exclude pattern is invalid
        """
        stats = ScanStats()
        start_time = time.time()
        error_sink = error_sink or LoggingErrorSink()
        hasher = self._hasher or ContentHasherImpl.for_algorithm(params.algorithm)

        path_filter = RegexPathFilter(params.exclusion_regex)
        walker = TreeWalkerImpl(path_filter)

        if params.negative_roots:
            exclusion = ExclusionIndex.build(
                params.negative_roots, walker, hasher, error_sink=error_sink, stats=stats
            )
        else:
            exclusion = ExclusionIndex.empty()

        size_index = SizeIndex.build(walker.walk(params.roots), min_size=params.min_size)
        stats.add("files_indexed", size_index.file_count)

        engine = DuplicateEngineImpl(
            hasher=hasher,
            avoid_compare_above=params.avoid_compare_above,
            force_hash=params.force_hash,
            report_uniques=params.report_uniques,
            error_sink=error_sink,
            report_sink=report_sink,
            stats=stats,
        )
        result = engine.find_duplicates(size_index, exclusion)

        if report_sink is not None:
            report_sink.finish()

        stats.total_time = time.time() - start_time
        return result, stats
