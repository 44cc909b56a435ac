"""
dupes: find duplicate files by content.

Core features:
- Size grouping first; files are only hashed when their size is shared
- Full-content SHA-256 (or xxHash64) digests, streamed in bounded memory
- NEGATIVE directories: report only files with no copy in another tree
- Text or JSON reports; never deletes, moves or links anything
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dupes")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from dupes.commands import DuplicateScanCommand
from dupes.core import (
    ScanParams, ScanStats, ReportEntry, ReportKind, EngineResult, OutputMode, HashAlgorithmName)
from dupes.utils.convert_utils import ConvertUtils
from dupes.services import TextReportSink, JsonReportSink

__all__ = [
    "DuplicateScanCommand",
    "ScanParams",
    "ScanStats",
    "ReportEntry",
    "ReportKind",
    "EngineResult",
    "OutputMode",
    "HashAlgorithmName",
    "ConvertUtils",
    "TextReportSink",
    "JsonReportSink",
    "__version__",
]
