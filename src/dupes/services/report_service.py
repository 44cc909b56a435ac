"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Renders engine results as indented text (streamed) or as one JSON document.
"""
import json
import sys
from typing import List, Optional, TextIO

from dupes.core.interfaces import ReportSink, ErrorSink
from dupes.core.models import ReportEntry, ReportKind, AVOIDED_LABEL


class TextReportSink(ReportSink, ErrorSink):
    """
    Human-readable report, written as entries arrive.

    Each size gets one header line; read errors are printed under the
    header of the size group they belong to.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self._current_size: Optional[int] = None
        self.entries_written = 0

    def _header(self, size: int, avoided: bool = False) -> None:
        if self._current_size == size and not avoided:
            return
        self._current_size = size
        suffix = f" {AVOIDED_LABEL}" if avoided else ""
        self._write(f"{size}{suffix}")

    def _write(self, line: str) -> None:
        print(line, file=self.stream)

    def add(self, entry: ReportEntry) -> None:
        self.entries_written += 1
        if entry.kind == ReportKind.DUPLICATE:
            self._header(entry.size)
            self._write(f"  {entry.label}")
            for path in entry.paths:
                self._write(f"    {path}")
            return

        self._header(entry.size, avoided=entry.kind == ReportKind.AVOIDED)
        for path in entry.paths:
            self._write(f"  {path}")

    def file_error(self, size: int, path: str, error: OSError) -> None:
        self._header(size)
        self._write(f"  {type(error).__name__} error reading file {path}")

    def finish(self) -> None:
        self.stream.flush()


class JsonReportSink(ReportSink):
    """
    Collects every entry and writes a single JSON array on finish:
    [[label, size, [paths...]], ...]
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.records: List[list] = []

    def add(self, entry: ReportEntry) -> None:
        self.records.append(entry.as_record())

    def finish(self) -> None:
        self.stream.write(json.dumps(self.records, ensure_ascii=False))
        self.stream.write("\n")
        self.stream.flush()
