"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Recursive directory traversal yielding regular files with their sizes.
Features:
- Uses os.walk with in-place pruning of excluded directories
- Deterministic order: directory and file names are sorted per level
- Skips symbolic links, special files and entries whose metadata cannot be read
- Lazy: entries are produced one by one
"""

import os
import stat
from typing import Iterable, Iterator, Optional
import logging

logger = logging.getLogger(__name__)

# Local imports
from dupes.core.models import FileEntry
from dupes.core.interfaces import TreeWalker, PathFilter
from dupes.core.path_filter import RegexPathFilter


class TreeWalkerImpl(TreeWalker):
    """
    Walks directory trees and yields a FileEntry per regular file.

    Attributes:
        path_filter: Consulted for every root, directory and file; a rejected
            directory is never descended into.
    """

    def __init__(self, path_filter: Optional[PathFilter] = None):
        self.path_filter = path_filter or RegexPathFilter()

    def walk(self, roots: Iterable[str]) -> Iterator[FileEntry]:
        for root in roots:
            yield from self._walk_root(root)

    def _walk_root(self, root: str) -> Iterator[FileEntry]:
        if not self.path_filter.allows(root):
            logger.debug(f"Skipping excluded root: {root}")
            return

        logger.debug(f"Scanning directory: {root}")
        found = 0

        for current, dirs, files in os.walk(root, onerror=self._on_walk_error):
            # Prune subdirectories BEFORE os.walk enters them
            dirs[:] = sorted(d for d in dirs if self._allows_dir(os.path.join(current, d)))

            for filename in sorted(files):
                entry = self._process_file(os.path.join(current, filename))
                if entry is not None:
                    found += 1
                    yield entry

        logger.debug(f"Finished {root}: {found} files")

    def _allows_dir(self, path: str) -> bool:
        if self.path_filter.allows(path):
            return True
        logger.debug(f"Skipping excluded directory: {path}")
        return False

    def _process_file(self, path: str) -> Optional[FileEntry]:
        """
        Return a FileEntry for a regular, allowed file, else None.
        """
        if not self.path_filter.allows(path):
            logger.debug(f"Skipping excluded file: {path}")
            return None

        try:
            st = os.lstat(path)
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if stat.S_ISLNK(st.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None
        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping special file: {path}")
            return None

        return FileEntry(path=path, size=st.st_size)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Cannot list directory {error.filename}: {error}")
