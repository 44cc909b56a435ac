"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file discovery, duplicate reporting and run configuration.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, Union
import re
from enum import Enum


# =============================
# Enums
# =============================

class ReportKind(Enum):
    """
    What a reported entry means.
    """
    AVOIDED = "avoided"      # size-only group above the disambiguation ceiling
    UNIQUE = "unique"        # singleton size group, never hashed
    DUPLICATE = "duplicate"  # hash bin

    def __repr__(self) -> str:
        return self.value


class OutputMode(Enum):
    TEXT = "text"
    JSON = "json"


class HashAlgorithmName(Enum):
    """
    Content hash used to tell same-size files apart.
    """
    SHA256 = "sha256"
    XXHASH = "xxhash"

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256 (cryptographic, default)",
            HashAlgorithmName.XXHASH: "xxHash64 (much faster, not cryptographic)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A regular file found by the walker.
    The size is a snapshot taken at discovery time and is never refreshed.
    """
    path: str
    size: int  # in bytes

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self.size}>"


AVOIDED_LABEL = "(avoiding disambiguation)"


@dataclass(frozen=True)
class ReportEntry:
    """
    One reported line group: a size, an optional digest label and its paths.
    Paths are always stored sorted.
    """
    kind: ReportKind
    size: int
    label: str
    paths: Tuple[str, ...]

    def __post_init__(self):
        if not self.paths:
            raise ValueError("A report entry needs at least one path")
        object.__setattr__(self, "paths", tuple(sorted(self.paths)))

    def as_record(self) -> list:
        """Structured form: [label, size, [paths...]]."""
        label = AVOIDED_LABEL if self.kind == ReportKind.AVOIDED else self.label
        return [label, self.size, list(self.paths)]

    def __repr__(self):
        return f"<ReportEntry {self.kind!r} size={self.size}, count={len(self.paths)}>"


EngineResult = List[ReportEntry]


class ScanStats:
    """
    Counters collected during a run.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.counters: Dict[str, Union[int, float]] = {
            "files_indexed": 0,
            "negative_files_indexed": 0,
            "size_groups": 0,
            "groups_avoided": 0,
            "files_hashed": 0,
            "bytes_hashed": 0,
            "files_excluded": 0,
            "read_errors": 0,
        }

    def add(self, name: str, amount: int = 1) -> None:
        if name not in self.counters:
            raise KeyError(f"Unknown counter: {name}")
        self.counters[name] += amount

    def __getitem__(self, name: str) -> Union[int, float]:
        return self.counters[name]

    def summary(self) -> str:
        labels = {
            "files_indexed": "Files indexed",
            "negative_files_indexed": "Negative-side files indexed",
            "size_groups": "Size groups",
            "groups_avoided": "Groups compared by size only",
            "files_hashed": "Files hashed",
            "bytes_hashed": "Bytes hashed",
            "files_excluded": "Files matched in negative set",
            "read_errors": "Read errors",
        }

        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
        ]
        for name, value in self.counters.items():
            if name == "bytes_hashed":
                value = ConvertUtils.bytes_to_human(value)
            lines.append(f"{labels.get(name, name)}: {value}")

        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic: the CLI builds it, the command consumes it.
"""
from dupes.utils.convert_utils import ConvertUtils

DEFAULT_AVOID_COMPARE_ABOVE = 32 * 1024 * 1024


@dataclass
class ScanParams:
    """Parameters for a duplicate scan, validated and resolved on creation."""
    roots: List[str] = field(default_factory=lambda: ["."])
    negative_roots: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)
    min_size: int = 0
    avoid_compare_above: Optional[int] = DEFAULT_AVOID_COMPARE_ABOVE
    force_hash: bool = False
    report_uniques: bool = False
    output_mode: OutputMode = OutputMode.TEXT
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256

    def __post_init__(self):
        """Validate parameters and apply implied options."""
        self.roots = list(dict.fromkeys(self.roots))
        self.negative_roots = list(dict.fromkeys(self.negative_roots))

        if not self.roots:
            raise ValueError("At least one directory to scan is required")

        if self.min_size < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.avoid_compare_above is not None and self.avoid_compare_above < 0:
            raise ValueError("Disambiguation ceiling cannot be negative")

        if self.exclusion_regex is not None:
            try:
                re.compile(self.exclusion_regex)
            except re.error as e:
                raise ValueError(f"Invalid exclude pattern '{self.exclusion_regex}': {e}")

        # A negative set makes single leftovers the interesting result
        if self.negative_roots:
            self.report_uniques = True
            self.force_hash = True

        if self.force_hash:
            self.avoid_compare_above = None

    @property
    def exclusion_regex(self) -> Optional[str]:
        """All exclude patterns as one alternation, or None."""
        if not self.exclude_patterns:
            return None
        return "|".join(self.exclude_patterns)

    @staticmethod
    def from_human_readable(
            roots: Optional[List[str]] = None,
            negative_roots: Optional[List[str]] = None,
            exclude_patterns: Optional[List[str]] = None,
            min_size_str: str = "0",
            avoid_compare_above_str: str = "32M",
            force_hash: bool = False,
            report_uniques: bool = False,
            output_mode: OutputMode = OutputMode.TEXT,
            algorithm: HashAlgorithmName = HashAlgorithmName.SHA256,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        A ceiling of zero means "no ceiling".
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str)
        ceiling = ConvertUtils.human_to_bytes(avoid_compare_above_str)

        return ScanParams(
            roots=list(roots) if roots else ["."],
            negative_roots=list(negative_roots or []),
            exclude_patterns=list(exclude_patterns or []),
            min_size=min_size,
            avoid_compare_above=ceiling or None,
            force_hash=force_hash,
            report_uniques=report_uniques,
            output_mode=output_mode,
            algorithm=algorithm,
        )
