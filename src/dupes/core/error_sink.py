"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/error_sink.py
Destinations for per-file read errors raised while hashing.
"""

import logging
from dataclasses import dataclass
from typing import List

from dupes.core.interfaces import ErrorSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileError:
    size: int
    path: str
    error: OSError

    @property
    def kind(self) -> str:
        return type(self.error).__name__


class NullErrorSink(ErrorSink):
    """Drops every error."""

    def file_error(self, size: int, path: str, error: OSError) -> None:
        pass


class LoggingErrorSink(ErrorSink):
    """
    Sends read errors to the log at ERROR, the CLI's default level,
    so they stay visible when stdout carries a JSON report.
    """

    def file_error(self, size: int, path: str, error: OSError) -> None:
        logger.error(f"{type(error).__name__} error reading file {path} (size {size}): {error}")


class CollectingErrorSink(ErrorSink):
    """Keeps errors in memory; handy for tests and summaries."""

    def __init__(self):
        self.errors: List[FileError] = []

    def file_error(self, size: int, path: str, error: OSError) -> None:
        self.errors.append(FileError(size=size, path=path, error=error))

    @property
    def paths(self) -> List[str]:
        return [e.path for e in self.errors]

