"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Per-size-group duplicate detection.

Each size group, in ascending size order, goes through:
    1. large-group short-circuit: above the ceiling, report by size only
    2. singleton short-circuit: one member, nothing to compare against
    3. hashing and exclusion: digest every member, drop negative-set matches
    4. binning: group survivors by digest
Groups never interact except through the read-only exclusion index.
"""
import time
import logging
from typing import Dict, List, Optional

from dupes.core.models import ReportEntry, ReportKind, EngineResult, ScanStats
from dupes.core.grouper import SizeIndex, group_by
from dupes.core.hasher import ContentHasherImpl, digest_label
from dupes.core.interfaces import (
    ContentHasher, DuplicateEngine, ErrorSink, ExclusionLookup, ReportSink,
)
from dupes.core.error_sink import NullErrorSink

logger = logging.getLogger(__name__)


# =============================
# Main Engine Class
# =============================
class DuplicateEngineImpl(DuplicateEngine):
    """
    Turns a size index into ordered report entries.

    Args:
        hasher: Full-content hasher, injected for testability.
        avoid_compare_above: Sizes strictly above this are reported without
            hashing. None disables the ceiling.
        force_hash: Hash singleton size groups as well.
        report_uniques: Report singleton size groups and single-member bins.
        error_sink: Receives files that could not be opened or read.
        report_sink: Optional; receives each entry as soon as it is final.
        stats: Optional counters updated during the run.
    """
    def __init__(
        self,
        hasher: Optional[ContentHasher] = None,
        avoid_compare_above: Optional[int] = None,
        force_hash: bool = False,
        report_uniques: bool = False,
        error_sink: Optional[ErrorSink] = None,
        report_sink: Optional[ReportSink] = None,
        stats: Optional[ScanStats] = None,
    ):
        self.hasher = hasher or ContentHasherImpl()
        self.avoid_compare_above = avoid_compare_above
        self.force_hash = force_hash
        self.report_uniques = report_uniques
        self.error_sink = error_sink or NullErrorSink()
        self.report_sink = report_sink
        self.stats = stats or ScanStats()

    def find_duplicates(
        self,
        size_index: SizeIndex,
        exclusion: Optional[ExclusionLookup] = None,
    ) -> EngineResult:
        """
        Args:
            size_index: Positive-side files grouped by size.
            exclusion: Negative-set digests; None means nothing is excluded.
        Returns:
            EngineResult ordered by size, then digest, then path.
        """
        start_time = time.time()
        result: EngineResult = []

        for size, paths in size_index.groups():
            self.stats.add("size_groups")
            for entry in self._process_group(size, paths, exclusion):
                result.append(entry)
                if self.report_sink is not None:
                    self.report_sink.add(entry)

        self.stats.total_time += time.time() - start_time
        logger.info(f"Processed {len(size_index)} size groups, {len(result)} entries reported")
        return result

    def _process_group(
        self,
        size: int,
        paths: List[str],
        exclusion: Optional[ExclusionLookup],
    ) -> List[ReportEntry]:
        if self.avoid_compare_above is not None and size > self.avoid_compare_above:
            self.stats.add("groups_avoided")
            logger.debug(f"Size {size}: {len(paths)} files compared by size only")
            return [ReportEntry(ReportKind.AVOIDED, size, "", tuple(paths))]

        if len(paths) == 1 and not self.force_hash:
            if not self.report_uniques:
                return []
            return [ReportEntry(ReportKind.UNIQUE, size, "", tuple(paths))]

        digests = self._hash_members(size, paths, exclusion)

        entries = []
        for digest, bin_paths in group_by(digests, digests.__getitem__):
            if len(bin_paths) == 1 and not self.report_uniques:
                continue
            entries.append(ReportEntry(ReportKind.DUPLICATE, size, digest_label(digest), tuple(bin_paths)))
        return entries

    def _hash_members(
        self,
        size: int,
        paths: List[str],
        exclusion: Optional[ExclusionLookup],
    ) -> Dict[str, bytes]:
        """
        Digest every path of one size group.
        Unreadable files and files present in the negative set are left out.
        """
        excluded = exclusion.digests_for(size) if exclusion is not None else frozenset()
        digests = {}

        for path in paths:
            try:
                digest = self.hasher.hash_file(path)
            except OSError as e:
                self.stats.add("read_errors")
                self.error_sink.file_error(size, path, e)
                continue

            self.stats.add("files_hashed")
            self.stats.add("bytes_hashed", size)

            if digest in excluded:
                self.stats.add("files_excluded")
                logger.debug(f"Dropping {path}: same content exists in negative set")
                continue
            digests[path] = digest

        return digests
