"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/path_filter.py
Regular-expression based path exclusion shared by the positive and negative walks.
"""

import re
import logging
from typing import Iterable, Optional, Pattern

from dupes.core.interfaces import PathFilter

logger = logging.getLogger(__name__)


class RegexPathFilter(PathFilter):
    """
    Allows every path the exclusion pattern does not match.

    The pattern is searched anywhere in the full path string (unanchored).
    Paths that are not representable as text are never allowed.
    """

    def __init__(self, pattern: Optional[str] = None):
        self.pattern = pattern
        try:
            self._regex: Optional[Pattern[str]] = re.compile(pattern) if pattern else None
        except re.error as e:
            raise ValueError(f"Invalid exclude pattern '{pattern}': {e}")

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> "RegexPathFilter":
        """Join several patterns into one alternation."""
        patterns = [p for p in patterns if p]
        return cls("|".join(patterns) if patterns else None)

    def allows(self, path: str) -> bool:
        # os.walk surfaces undecodable bytes as lone surrogates
        try:
            path.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug(f"Skipping non-textual path: {path!r}")
            return False

        if self._regex is None:
            return True
        return self._regex.search(path) is None

    def __repr__(self):
        return f"<RegexPathFilter pattern={self.pattern!r}>"
